"""
Base model for all contract records.
"""

from datetime import timedelta
from typing import Annotated, Any, Dict

from pydantic import BaseModel, BeforeValidator, PlainSerializer

from contracts.src.models.enums import (
    JobType,
    LogStatus,
    NotificationLevel,
    NotificationLinkType,
    NotificationType,
    Status,
)

class ContractModel(BaseModel):
    """Records are built with snake_case names and exchanged with camelCase aliases."""

    class Config:
        populate_by_name = True

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

# unknown values degrade to the unknown member instead of failing validation
StatusValue = Annotated[Status, BeforeValidator(Status.parse)]
LogStatusValue = Annotated[LogStatus, BeforeValidator(LogStatus.parse)]
JobTypeValue = Annotated[JobType, BeforeValidator(JobType.parse)]
NotificationTypeValue = Annotated[NotificationType, BeforeValidator(NotificationType.parse)]
NotificationLevelValue = Annotated[NotificationLevel, BeforeValidator(NotificationLevel.parse)]
NotificationLinkTypeValue = Annotated[NotificationLinkType, BeforeValidator(NotificationLinkType.parse)]

def _duration_from_nanoseconds(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return timedelta(microseconds=value / 1000)
    return value

def _duration_to_nanoseconds(value: timedelta) -> int:
    return (value // timedelta(microseconds=1)) * 1000

# durations go over the wire as integer nanoseconds
DurationValue = Annotated[
    timedelta,
    BeforeValidator(_duration_from_nanoseconds),
    PlainSerializer(_duration_to_nanoseconds, return_type=int, when_used="json"),
]
