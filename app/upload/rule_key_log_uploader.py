from pathlib import Path

from app.build.models import BuildEnvironmentDescription, BuildId
from app.logging.logger import Log
from app.report.base import BaseDefectReporter
from app.report.exceptions import DefectReporterNetworkError
from app.report.models import DefectReport
from app.upload.exceptions import MissingReportIdError, UploadNetworkError
from app.upload.models import UploadOutcome
from app.upload.request_uploader import RequestUploader

RAGE_REPORT_ID_FIELD = "rage_report_id"


class RuleKeyLogFileUploader:
    """Uploads a rule key log file to trigger a cache analysis, then links the
    resulting rage report id to its build.

    Failures of either network step are logged and swallowed so that the
    build which produced the log is never affected.
    """

    def __init__(
        self,
        defect_reporter: BaseDefectReporter,
        build_environment_description: BuildEnvironmentDescription,
        url: str,
        timeout_seconds: float,
        build_id: BuildId,
        *,
        request_uploader: RequestUploader | None = None,
    ) -> None:
        self._defect_reporter = defect_reporter
        self._build_environment_description = build_environment_description
        self._owns_request_uploader = request_uploader is None
        self._request_uploader = request_uploader or RequestUploader(
            url, timeout_seconds, build_id
        )

    def close(self) -> None:
        """Close the defect reporter and the request uploader built here.

        The uploader owns its defect reporter once constructed.
        """
        self._defect_reporter.close()
        if self._owns_request_uploader:
            self._request_uploader.close()

    def upload_rule_key_log_file(self, rule_key_log_path: Path) -> UploadOutcome:
        """Submit a minimal rage report holding the log, then upload its id.

        The report is incomplete on purpose: it is never read as a rage
        report, only used to generate the cache analysis.

        Raises:
            MissingReportIdError: if the reporter succeeded without an id.
        """
        report = DefectReport(
            build_environment_description=self._build_environment_description,
            included_paths=frozenset({Path(rule_key_log_path)}),
            highlighted_build_ids=(
                BuildId.from_json(self._request_uploader.get_build_id()),
            ),
        )

        outcome, rage_report_id = self._submit(report)
        if outcome is not UploadOutcome.SUBMITTED:
            return outcome
        return self._upload_report_id(rage_report_id)

    def _submit(self, report: DefectReport) -> tuple[UploadOutcome, str]:
        try:
            result = self._defect_reporter.submit_report(report)
        except (DefectReporterNetworkError, OSError) as exc:
            Log.warning(
                "Error while submitting minimal rage report with rule key logger file",
                exc,
            )
            return UploadOutcome.SUBMISSION_FAILED, ""

        if not result.report_id:
            raise MissingReportIdError("The id of the rage report must be present")
        Log.info(f"Submitted rule key log rage report {result.report_id}")
        return UploadOutcome.SUBMITTED, result.report_id

    def _upload_report_id(self, rage_report_id: str) -> UploadOutcome:
        try:
            self._request_uploader.upload_request({RAGE_REPORT_ID_FIELD: rage_report_id})
        except (UploadNetworkError, OSError) as exc:
            Log.warning(
                f"Error while uploading rage report id {rage_report_id} for build "
                f"{self._request_uploader.get_build_id()}",
                exc,
            )
            return UploadOutcome.UPLOAD_FAILED
        Log.info(f"Linked rage report {rage_report_id} to build")
        return UploadOutcome.COMPLETED
