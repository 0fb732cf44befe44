"""
Build log models.
"""

from datetime import datetime, timedelta
from typing import List, Optional

from pydantic import Field

from contracts.src.models.base import ContractModel, DurationValue, LogStatusValue
from contracts.src.models.enums import LogStatus, LogType, Status

class BuildLogStepDockerImage(ContractModel):
    name: str
    tag: str
    is_pulled: bool = Field(False, alias="isPulled")
    image_size: int = Field(0, alias="imageSize")
    pull_duration: DurationValue = Field(timedelta(0), alias="pullDuration")
    error: Optional[str] = None
    is_trusted: Optional[bool] = Field(None, alias="isTrusted")

class BuildLogLine(ContractModel):
    line_number: Optional[int] = Field(None, alias="line")
    timestamp: datetime
    stream_type: str = Field(alias="streamType")
    text: str

class BuildLogStep(ContractModel):
    """
    Logs of one execution of a stage. A retried stage has one step per
    attempt, sharing the step name with an increasing run index.
    """
    step: str
    depth: int = 0
    image: Optional[BuildLogStepDockerImage] = None
    run_index: int = Field(0, alias="runIndex")
    duration: DurationValue = timedelta(0)
    log_lines: List[BuildLogLine] = Field(default_factory=list, alias="logLines")
    exit_code: int = Field(0, alias="exitCode")
    status: LogStatusValue = LogStatus.UNKNOWN
    auto_injected: Optional[bool] = Field(None, alias="autoInjected")
    nested_steps: Optional[List["BuildLogStep"]] = Field(None, alias="nestedSteps")
    services: Optional[List["BuildLogStep"]] = None

class TailLogLine(ContractModel):
    """Single log line streamed to the gui while a build runs."""
    step: str
    parent_stage: Optional[str] = Field(None, alias="parentStage")
    type: LogType = LogType.STAGE
    depth: int = 0
    run_index: int = Field(0, alias="runIndex")
    log_line: Optional[BuildLogLine] = Field(None, alias="logLine")
    image: Optional[BuildLogStepDockerImage] = None
    duration: Optional[DurationValue] = None
    exit_code: Optional[int] = Field(None, alias="exitCode")
    status: Optional[LogStatusValue] = None
    auto_injected: Optional[bool] = Field(None, alias="autoInjected")

class BuildLog(ContractModel):
    id: Optional[str] = None
    repo_source: str = Field(alias="repoSource")
    repo_owner: str = Field(alias="repoOwner")
    repo_name: str = Field(alias="repoName")
    repo_branch: str = Field(alias="repoBranch")
    repo_revision: str = Field(alias="repoRevision")
    build_id: str = Field("", alias="buildID")
    steps: List[BuildLogStep] = Field(default_factory=list)
    inserted_at: Optional[datetime] = Field(None, alias="insertedAt")

    def get_aggregated_status(self) -> Status:
        from contracts.src.services.status import get_aggregated_status

        return get_aggregated_status(self.steps)

    def has_succeeded_status(self) -> bool:
        from contracts.src.services.status import has_succeeded_status

        return has_succeeded_status(self.steps)
