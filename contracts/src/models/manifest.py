"""
Already-parsed manifest shapes.

Parsing the manifest format itself happens upstream; these models only carry
what the contracts read from it: the container images of stages, parallel
stages and service containers.
"""

from typing import List

from pydantic import Field

from contracts.src.models.base import ContractModel

class ManifestService(ContractModel):
    class Config:
        extra = "allow"

    name: str = ""
    container_image: str = Field("", alias="image")

class ManifestStage(ContractModel):
    class Config:
        extra = "allow"

    name: str = ""
    container_image: str = Field("", alias="image")
    parallel_stages: List["ManifestStage"] = Field(default_factory=list, alias="parallelStages")
    services: List[ManifestService] = Field(default_factory=list)

    def image_references(self) -> List[str]:
        """Images of this stage, its parallel stages and its services, in declaration order."""
        images = []
        if self.container_image:
            images.append(self.container_image)
        for parallel_stage in self.parallel_stages:
            images.extend(parallel_stage.image_references())
        for service in self.services:
            if service.container_image:
                images.append(service.container_image)
        return images

class ManifestEvent(ContractModel):
    """Trigger event, carried through untouched."""

    class Config:
        extra = "allow"

class Manifest(ContractModel):
    class Config:
        extra = "allow"

    stages: List[ManifestStage] = Field(default_factory=list)

    def image_references(self) -> List[str]:
        return collect_image_references(self.stages)

def collect_image_references(stages: List[ManifestStage]) -> List[str]:
    """Flatten the container images used across stages into one ordered list."""
    images = []
    for stage in stages:
        images.extend(stage.image_references())
    return images
