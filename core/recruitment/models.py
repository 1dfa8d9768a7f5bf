"""Job and application lifecycle states."""

import enum
from typing import Any

from core.exceptions import ValidationError


class JobStatus(str, enum.Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"

    @classmethod
    def parse(cls, value: Any) -> "JobStatus":
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValidationError(f"Unknown job status: {value!r}")


class ApplicationStatus(str, enum.Enum):
    PENDING = "PENDING"
    REJECTED = "REJECTED"
    APPROVED_FOR_TEST = "APPROVED_FOR_TEST"
    TEST_COMPLETED = "TEST_COMPLETED"
    INTERVIEW_SCHEDULED = "INTERVIEW_SCHEDULED"
    OFFER_SENT = "OFFER_SENT"
    HIRED = "HIRED"

    @classmethod
    def parse(cls, value: Any) -> "ApplicationStatus":
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValidationError(f"Unknown application status: {value!r}")
