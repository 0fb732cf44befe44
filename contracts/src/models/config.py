"""
Builder configuration: credentials, trusted images and job parameters.
"""

from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, Field, model_validator

from contracts.src.models.base import ContractModel
from contracts.src.models.manifest import ManifestEvent, Manifest

class ContainerRepositoryCredentialConfig(ContractModel):
    """Superseded by CredentialConfig with type container-registry."""
    repository: str
    username: str
    password: str

class CredentialConfig(ContractModel):
    """
    A named, typed set of secrets. Access is limited through trusted images
    and the two allow-list patterns; an empty pattern allows everything.
    """
    name: str
    type: str
    allowed_pipelines: str = Field(
        "",
        validation_alias=AliasChoices("allowedPipelines", "whitelistedPipelines", "allowed_pipelines"),
        serialization_alias="allowedPipelines",
    )
    allowed_trusted_images: str = Field(
        "",
        validation_alias=AliasChoices(
            "allowedTrustedImages", "whitelistedTrustedImages", "allowed_trusted_images"
        ),
        serialization_alias="allowedTrustedImages",
    )
    properties: Dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("additionalProperties", "properties"),
        serialization_alias="additionalProperties",
    )

    @model_validator(mode="before")
    @classmethod
    def collect_inline_properties(cls, data: Any) -> Any:
        # config documents list properties inline next to name and type
        if not isinstance(data, dict):
            return data

        known = {
            "name", "type",
            "allowedPipelines", "whitelistedPipelines", "allowed_pipelines",
            "allowedTrustedImages", "whitelistedTrustedImages", "allowed_trusted_images",
            "additionalProperties", "properties",
        }
        inline = {k: v for k, v in data.items() if k not in known}
        if not inline:
            return data

        values = {k: v for k, v in data.items() if k in known}
        explicit = values.pop("additionalProperties", None) or values.pop("properties", None) or {}
        values["properties"] = {**inline, **explicit}
        return values

    @property
    def key(self):
        return (self.name, self.type)

class TrustedImageConfig(ContractModel):
    """An image allowed to run privileged, use docker or receive credentials."""
    image_path: str = Field(alias="path")
    run_privileged: bool = Field(False, alias="runPrivileged")
    run_docker: bool = Field(False, alias="runDocker")
    allow_commands: bool = Field(False, alias="allowCommands")
    injected_credential_types: List[str] = Field(default_factory=list, alias="injectedCredentialTypes")
    allowed_pipelines: str = Field(
        "",
        validation_alias=AliasChoices("allowedPipelines", "whitelistedPipelines", "allowed_pipelines"),
        serialization_alias="allowedPipelines",
    )

class GitConfig(ContractModel):
    repo_source: str = Field(alias="repoSource")
    repo_owner: str = Field(alias="repoOwner")
    repo_name: str = Field(alias="repoName")
    repo_branch: str = Field("", alias="repoBranch")
    repo_revision: str = Field("", alias="repoRevision")

    def get_full_repo_path(self) -> str:
        return f"{self.repo_source}/{self.repo_owner}/{self.repo_name}"

class BuildVersionConfig(ContractModel):
    version: str
    major: Optional[int] = None
    minor: Optional[int] = None
    patch: Optional[str] = None
    label: Optional[str] = None
    auto_increment: Optional[int] = Field(None, alias="autoincrement")

class CIServerConfig(ContractModel):
    base_url: str = Field(alias="baseUrl")
    builder_events_url: str = Field("", alias="builderEventsUrl")
    post_logs_url: str = Field("", alias="postLogsUrl")
    api_key: str = Field("", alias="apiKey")

class DockerNetworkConfig(ContractModel):
    """User defined docker network so service containers resolve by name."""
    name: str
    subnet: str
    gateway: str

class BuildParamsConfig(ContractModel):
    build_id: int = Field(alias="buildID")

class ReleaseParamsConfig(ContractModel):
    release_name: str = Field(alias="releaseName")
    release_id: int = Field(alias="releaseID")
    release_action: Optional[str] = Field(None, alias="releaseAction")
    triggered_by: Optional[str] = Field(None, alias="triggeredBy")

class BuilderConfig(ContractModel):
    """Parameterizes a single build or release job."""
    action: Optional[str] = None
    track: Optional[str] = None
    registry_mirror: Optional[str] = Field(None, alias="registryMirror")
    docker_daemon_mtu: Optional[str] = Field(None, alias="dindMtu")
    docker_daemon_bip: Optional[str] = Field(None, alias="dindBip")
    docker_network: Optional[DockerNetworkConfig] = Field(None, alias="dindNetwork")

    manifest: Optional[Manifest] = None

    job_name: Optional[str] = Field(None, alias="jobName")
    release_name: Optional[str] = Field(None, alias="releaseName")
    events: Optional[List[ManifestEvent]] = Field(None, alias="triggerEvents")

    ci_server: Optional[CIServerConfig] = Field(None, alias="ciServer")
    build_params: Optional[BuildParamsConfig] = Field(None, alias="buildParams")
    release_params: Optional[ReleaseParamsConfig] = Field(None, alias="releaseParams")

    git: Optional[GitConfig] = None
    build_version: Optional[BuildVersionConfig] = Field(None, alias="buildVersion")
    credentials: List[CredentialConfig] = Field(default_factory=list)
    trusted_images: List[TrustedImageConfig] = Field(default_factory=list, alias="trustedImages")

    def get_credentials_by_type(self, filter_type: str) -> List[CredentialConfig]:
        from contracts.src.services.authorization import get_credentials_by_type

        return get_credentials_by_type(self.credentials, filter_type)

    def get_credentials_for_trusted_image(
        self, trusted_image: TrustedImageConfig
    ) -> Dict[str, List[CredentialConfig]]:
        from contracts.src.services.authorization import get_credentials_for_trusted_image

        return get_credentials_for_trusted_image(self.credentials, trusted_image)

    def get_trusted_image(self, image_path: str) -> Optional[TrustedImageConfig]:
        from contracts.src.services.authorization import get_trusted_image

        return get_trusted_image(self.trusted_images, image_path)
