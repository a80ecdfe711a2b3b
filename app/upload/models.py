from dataclasses import dataclass
from enum import Enum


class UploadOutcome(Enum):
    """Where a rule key log upload stopped."""

    SUBMITTED = "submitted"
    SUBMISSION_FAILED = "submission_failed"
    UPLOAD_FAILED = "upload_failed"
    COMPLETED = "completed"


@dataclass(frozen=True)
class UploadResponse:
    """Reply of the build report endpoint."""

    status_code: int
    uri: str | None = None
    message: str | None = None
