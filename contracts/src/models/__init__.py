from contracts.src.models.enums import (
    Status,
    LogStatus,
    LogType,
    JobType,
    NotificationType,
    NotificationLevel,
    NotificationLinkType,
)
from contracts.src.models.manifest import (
    Manifest,
    ManifestStage,
    ManifestService,
    ManifestEvent,
    collect_image_references,
)
from contracts.src.models.config import (
    BuilderConfig,
    CredentialConfig,
    TrustedImageConfig,
    GitConfig,
    BuildVersionConfig,
    CIServerConfig,
    DockerNetworkConfig,
    BuildParamsConfig,
    ReleaseParamsConfig,
    ContainerRepositoryCredentialConfig,
)
from contracts.src.models.build_log import (
    BuildLog,
    BuildLogStep,
    BuildLogStepDockerImage,
    BuildLogLine,
    TailLogLine,
)
from contracts.src.models.pipeline import Pipeline, Build
from contracts.src.models.release import Release, ReleaseLog
from contracts.src.models.user import User, UserIdentity, UserGroup, Group, Organization, Label, Client
from contracts.src.models.catalog import CatalogEntity
from contracts.src.models.notification import (
    Notification,
    NotificationRecord,
    PipelineLinkDetail,
    ContainerLinkDetail,
)
from contracts.src.models.builder_event import Bot, CiBuilderEvent

__all__ = [
    "Status",
    "LogStatus",
    "LogType",
    "JobType",
    "NotificationType",
    "NotificationLevel",
    "NotificationLinkType",
    "Manifest",
    "ManifestStage",
    "ManifestService",
    "ManifestEvent",
    "collect_image_references",
    "BuilderConfig",
    "CredentialConfig",
    "TrustedImageConfig",
    "GitConfig",
    "BuildVersionConfig",
    "CIServerConfig",
    "DockerNetworkConfig",
    "BuildParamsConfig",
    "ReleaseParamsConfig",
    "ContainerRepositoryCredentialConfig",
    "BuildLog",
    "BuildLogStep",
    "BuildLogStepDockerImage",
    "BuildLogLine",
    "TailLogLine",
    "Pipeline",
    "Build",
    "Release",
    "ReleaseLog",
    "User",
    "UserIdentity",
    "UserGroup",
    "Group",
    "Organization",
    "Label",
    "Client",
    "CatalogEntity",
    "Notification",
    "NotificationRecord",
    "PipelineLinkDetail",
    "ContainerLinkDetail",
    "Bot",
    "CiBuilderEvent",
]
