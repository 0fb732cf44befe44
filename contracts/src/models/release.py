from pydantic import Field
from typing import List, Optional
from datetime import datetime

from contracts.src.models.base import ContractModel, DurationValue, StatusValue
from contracts.src.models.build_log import BuildLogStep
from contracts.src.models.enums import Status
from contracts.src.models.manifest import ManifestEvent
from contracts.src.models.pipeline import RepositoryRecord

class Release(RepositoryRecord):
    name: str
    action: Optional[str] = None
    id: Optional[str] = None
    # releases may omit the repository, unlike pipelines and builds
    repo_source: str = Field("", alias="repoSource")
    repo_owner: str = Field("", alias="repoOwner")
    repo_name: str = Field("", alias="repoName")
    release_version: Optional[str] = Field(None, alias="releaseVersion")
    release_status: StatusValue = Field(Status.UNKNOWN, alias="releaseStatus")
    events: Optional[List[ManifestEvent]] = Field(None, alias="triggerEvents")
    inserted_at: Optional[datetime] = Field(None, alias="insertedAt")
    started_at: Optional[datetime] = Field(None, alias="startedAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    duration: Optional[DurationValue] = None
    pending_duration: Optional[DurationValue] = Field(None, alias="pendingDuration")

class ReleaseLog(ContractModel):
    id: Optional[str] = None
    repo_source: str = Field(alias="repoSource")
    repo_owner: str = Field(alias="repoOwner")
    repo_name: str = Field(alias="repoName")
    release_id: str = Field(alias="releaseID")
    steps: List[BuildLogStep] = Field(default_factory=list)
    inserted_at: Optional[datetime] = Field(None, alias="insertedAt")

    def get_aggregated_status(self) -> Status:
        from contracts.src.services.status import get_aggregated_status

        return get_aggregated_status(self.steps)

    def has_succeeded_status(self) -> bool:
        from contracts.src.services.status import has_succeeded_status

        return has_succeeded_status(self.steps)
