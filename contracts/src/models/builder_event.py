"""
Event sent by a builder job when it changes state.
"""

from typing import Optional, Union

from pydantic import Field, model_validator

from contracts.src.models.base import ContractModel, JobTypeValue, StatusValue
from contracts.src.models.config import GitConfig
from contracts.src.models.enums import JobType, Status
from contracts.src.models.pipeline import Build
from contracts.src.models.release import Release

class Bot(ContractModel):
    name: str
    id: Optional[str] = None
    repo_source: str = Field("", alias="repoSource")
    repo_owner: str = Field("", alias="repoOwner")
    repo_name: str = Field("", alias="repoName")
    bot_status: StatusValue = Field(Status.UNKNOWN, alias="botStatus")

class CiBuilderEvent(ContractModel):
    """
    Exactly one of build, release or bot carries the job, selected by job_type.
    Validation fails if git info or the payload for the job type is missing.
    """
    job_type: JobTypeValue = Field(JobType.UNKNOWN, alias="jobType")
    job_name: str = Field(alias="job_name")
    pod_name: Optional[str] = Field(None, alias="pod_name")

    build: Optional[Build] = None
    release: Optional[Release] = None
    bot: Optional[Bot] = None
    git: Optional[GitConfig] = None

    # deprecated, superseded by git and the payloads
    repo_source: Optional[str] = Field(None, alias="repo_source")
    repo_owner: Optional[str] = Field(None, alias="repo_owner")
    repo_name: Optional[str] = Field(None, alias="repo_name")
    repo_branch: Optional[str] = Field(None, alias="repo_branch")
    repo_revision: Optional[str] = Field(None, alias="repo_revision")
    release_id: Optional[str] = Field(None, alias="release_id")
    build_id: Optional[str] = Field(None, alias="build_id")
    build_status: Optional[StatusValue] = Field(None, alias="build_status")

    @model_validator(mode="after")
    def check_payload_for_job_type(self):
        if self.git is None:
            raise ValueError("git needs to be set")

        required = {
            JobType.BUILD: "build",
            JobType.RELEASE: "release",
            JobType.BOT: "bot",
        }.get(self.job_type)

        if required and getattr(self, required) is None:
            raise ValueError(f"{required} needs to be set for jobType {self.job_type.value}")

        return self

    @property
    def payload(self) -> Optional[Union[Build, Release, Bot]]:
        """The build, release or bot this event is about."""
        if self.job_type == JobType.BUILD:
            return self.build
        if self.job_type == JobType.RELEASE:
            return self.release
        if self.job_type == JobType.BOT:
            return self.bot
        return None
