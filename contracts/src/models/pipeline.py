from pydantic import Field
from typing import Optional
from datetime import datetime

from contracts.src.models.base import ContractModel, StatusValue
from contracts.src.models.enums import Status

class RepositoryRecord(ContractModel):
    repo_source: str = Field(alias="repoSource")
    repo_owner: str = Field(alias="repoOwner")
    repo_name: str = Field(alias="repoName")

    def get_full_repo_path(self) -> str:
        """Full path in source/owner/name form, as matched by allow-lists."""
        return f"{self.repo_source}/{self.repo_owner}/{self.repo_name}"

class Pipeline(RepositoryRecord):
    """A pipeline with the info of its latest build."""
    id: str
    repo_branch: str = Field("", alias="repoBranch")
    repo_revision: str = Field("", alias="repoRevision")
    build_version: str = Field("", alias="buildVersion")
    build_status: StatusValue = Field(Status.UNKNOWN, alias="buildStatus")
    labels: str = ""
    manifest: str = ""
    inserted_at: Optional[datetime] = Field(None, alias="insertedAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

class Build(RepositoryRecord):
    id: str = ""
    repo_branch: str = Field("", alias="repoBranch")
    repo_revision: str = Field("", alias="repoRevision")
    build_version: str = Field("", alias="buildVersion")
    build_status: StatusValue = Field(Status.UNKNOWN, alias="buildStatus")
    labels: str = ""
    manifest: str = ""
    inserted_at: Optional[datetime] = Field(None, alias="insertedAt")
    started_at: Optional[datetime] = Field(None, alias="startedAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
