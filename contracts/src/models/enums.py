"""
Status and type enumerations shared by builds, releases and logs.
"""

from enum import Enum
from typing import Any

class _LenientEnum(str, Enum):
    """Parses case-insensitively and falls back to the unknown member."""

    @classmethod
    def parse(cls, value: Any):
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls._unknown()
        normalized = value.strip().lower()
        if normalized == "cancelled":
            normalized = "canceled"
        for member in cls:
            if member.value.lower() == normalized:
                return member
        return cls._unknown()

    @classmethod
    def _missing_(cls, value):
        return cls.parse(value)

    @classmethod
    def _unknown(cls):
        return cls("")

class Status(_LenientEnum):
    """Status of a build or release."""
    PENDING = "pending"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELING = "canceling"
    CANCELED = "canceled"
    # default for unmarshalling, never a valid status to store
    UNKNOWN = ""

class LogStatus(_LenientEnum):
    """Status of a single step in a build or release log."""
    UNKNOWN = "UNKNOWN"
    PENDING = "PENDING"
    RUNNING = "RUNNING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"
    SKIPPED = "SKIPPED"
    CANCELED = "CANCELED"

    @classmethod
    def _unknown(cls):
        return cls.UNKNOWN

class LogType(str, Enum):
    STAGE = "stage"
    SERVICE = "service"

class JobType(_LenientEnum):
    UNKNOWN = ""
    BUILD = "build"
    RELEASE = "release"
    BOT = "bot"

class NotificationType(_LenientEnum):
    UNKNOWN = ""
    VULNERABILITY = "vulnerability"
    WARNING = "warning"

class NotificationLevel(_LenientEnum):
    UNKNOWN = ""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

class NotificationLinkType(_LenientEnum):
    UNKNOWN = ""
    PIPELINE = "pipeline"
    CONTAINER = "container"
