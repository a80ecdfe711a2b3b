import sys
from pathlib import Path

from app.build.models import BuildEnvironmentDescription, BuildId
from app.config.settings import Settings
from app.logging.logger import Log
from app.report.http_defect_reporter import HttpDefectReporter
from app.upload.rule_key_log_uploader import RuleKeyLogFileUploader

USAGE = "usage: python -m app.main <rule-key-log-path>"


def build_uploader(
    settings: Settings,
    build_id: BuildId | None = None,
) -> RuleKeyLogFileUploader:
    """Build a RuleKeyLogFileUploader with all required adapters."""
    if build_id is None:
        build_id = BuildId.from_json(settings.build_id) if settings.build_id else BuildId.new()
    defect_reporter = HttpDefectReporter(
        url=settings.rage_url,
        timeout_seconds=settings.rage_timeout_seconds,
    )
    environment = BuildEnvironmentDescription.describe(
        tool_commit=settings.tool_commit,
        tool_dirty=settings.tool_dirty,
    )
    return RuleKeyLogFileUploader(
        defect_reporter,
        environment,
        settings.build_report_url,
        settings.build_report_timeout_seconds,
        build_id,
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point: configure -> build uploader -> upload one rule key log."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return 2

    settings = Settings()
    Log.configure(settings.log_level)
    uploader = build_uploader(settings)
    try:
        outcome = uploader.upload_rule_key_log_file(Path(args[0]))
        Log.info(f"Rule key log upload finished: {outcome.value}")
    finally:
        uploader.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
