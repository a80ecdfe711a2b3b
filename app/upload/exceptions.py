class UploadError(Exception):
    """Raised when a build report request cannot be uploaded."""


class UploadNetworkError(UploadError):
    """Raised when the upload fails due to I/O or network issues."""


class MissingReportIdError(RuntimeError):
    """Raised when a defect reporter succeeds without returning a report id."""
