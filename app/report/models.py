from dataclasses import dataclass
from pathlib import Path

from app.build.models import BuildEnvironmentDescription, BuildId


@dataclass(frozen=True)
class DefectReport:
    """Diagnostic bundle sent to the rage endpoint.

    Only the fields needed to trigger a server-side cache analysis are
    modelled; the server accepts incomplete reports.
    """

    build_environment_description: BuildEnvironmentDescription
    included_paths: frozenset[Path]
    highlighted_build_ids: tuple[BuildId, ...]

    def to_dict(self) -> dict[str, object]:
        return {
            "build_environment_description": self.build_environment_description.to_dict(),
            "included_paths": sorted(str(p) for p in self.included_paths),
            "highlighted_build_ids": [b.to_json() for b in self.highlighted_build_ids],
        }


@dataclass(frozen=True)
class DefectSubmitResult:
    """What the rage endpoint told us about a submitted report."""

    report_id: str | None = None
    report_submit_location: str | None = None
    report_submit_message: str | None = None

    @property
    def has_report_id(self) -> bool:
        return bool(self.report_id)
