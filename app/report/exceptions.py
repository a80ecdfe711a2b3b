class DefectReporterError(Exception):
    """Raised when a defect report cannot be submitted."""


class DefectReporterNetworkError(DefectReporterError):
    """Raised when submission fails due to I/O or network issues."""
