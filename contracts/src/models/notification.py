"""
Notifications attached to a pipeline or a container image.

A record links to exactly one kind of entity; the link type tag selects
which detail model describes that entity.
"""

from datetime import datetime
from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field, model_validator

from contracts.src.models.base import (
    ContractModel,
    NotificationLevelValue,
    NotificationLinkTypeValue,
    NotificationTypeValue,
    StatusValue,
)
from contracts.src.models.enums import (
    NotificationLevel,
    NotificationLinkType,
    NotificationType,
    Status,
)
from contracts.src.models.user import Group, Organization

class Notification(ContractModel):
    type: NotificationTypeValue = NotificationType.UNKNOWN
    level: NotificationLevelValue = NotificationLevel.UNKNOWN
    message: Optional[str] = None

class PipelineLinkDetail(ContractModel):
    link_type: Literal["pipeline"] = Field("pipeline", alias="linkType")
    branch: Optional[str] = None
    revision: Optional[str] = None
    version: Optional[str] = None
    status: StatusValue = Status.UNKNOWN

class ContainerLinkDetail(ContractModel):
    link_type: Literal["container"] = Field("container", alias="linkType")
    tag: Optional[str] = None
    pipelines: List[str] = Field(default_factory=list)

LinkDetail = Annotated[
    Union[PipelineLinkDetail, ContainerLinkDetail],
    Field(discriminator="link_type"),
]

class NotificationRecord(ContractModel):
    id: Optional[str] = None
    link_type: NotificationLinkTypeValue = Field(NotificationLinkType.UNKNOWN, alias="linkType")
    link_entity: Optional[str] = Field(None, alias="linkEntity")
    link_detail: Optional[LinkDetail] = Field(None, alias="linkDetail")
    source: Optional[str] = None
    notifications: List[Notification] = Field(default_factory=list)
    inserted_at: Optional[datetime] = Field(None, alias="insertedAt")
    groups: List[Group] = Field(default_factory=list)
    organizations: List[Organization] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_link_detail_matches_link_type(self):
        if self.link_detail is not None and self.link_detail.link_type != self.link_type.value:
            raise ValueError(
                f"linkDetail of type '{self.link_detail.link_type}' "
                f"does not match linkType '{self.link_type.value}'"
            )
        return self

    def get_pipeline_detail(self) -> Optional[PipelineLinkDetail]:
        if self.link_type == NotificationLinkType.PIPELINE:
            return self.link_detail
        return None

    def get_container_detail(self) -> Optional[ContainerLinkDetail]:
        if self.link_type == NotificationLinkType.CONTAINER:
            return self.link_detail
        return None
