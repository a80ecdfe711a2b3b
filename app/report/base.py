from abc import ABC, abstractmethod

from app.report.models import DefectReport, DefectSubmitResult


class BaseDefectReporter(ABC):
    """Contract for all defect report submitters."""

    @abstractmethod
    def submit_report(self, report: DefectReport) -> DefectSubmitResult:
        """Submit a defect report to the remote service.

        Args:
            report: Report to submit. Included paths are read by the reporter.

        Returns:
            DefectSubmitResult, with or without a report id.

        Raises:
            DefectReporterNetworkError: on any I/O or transport failure.
        """

    def close(self) -> None:
        """Release resources held by the reporter. No-op by default."""
