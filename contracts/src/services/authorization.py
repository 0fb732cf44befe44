"""
Trusted image and credential authorization.

Decides which of the images used by a pipeline are trusted, and which stored
credentials those trusted images may receive. Every entity can restrict its
use through a single regex allow-list; an empty pattern allows everything and
a broken pattern allows nothing.
"""

import logging
import re
from typing import Dict, List, Optional

from contracts.src.models.config import CredentialConfig, TrustedImageConfig
from contracts.src.models.manifest import ManifestStage, collect_image_references

logger = logging.getLogger(__name__)

def matches_allow_list(pattern: Optional[str], value: str) -> bool:
    """Return True if the pattern is empty or matches the whole value."""
    if not pattern:
        return True

    try:
        return re.fullmatch(pattern.strip(), value) is not None
    except (re.error, RecursionError, OverflowError) as e:
        logger.warning(f"Invalid allow-list pattern {pattern!r}, treating as no match: {e}")
        return False

def strip_image_tag(image: str) -> str:
    """
    Remove tag and digest from an image reference.
    extensions/gke:stable -> extensions/gke, but host:5000/image stays as is.
    """
    image = image.split("@", 1)[0]

    colon = image.rfind(":")
    if colon > image.rfind("/"):
        return image[:colon]
    return image

def get_trusted_image(
    trusted_images: List[TrustedImageConfig],
    image_path: str,
) -> Optional[TrustedImageConfig]:
    """Return the first trusted image whose path equals the image without tag."""
    image_path_without_tag = strip_image_tag(image_path)

    for trusted_image in trusted_images:
        if trusted_image.image_path == image_path_without_tag:
            return trusted_image

    return None

def get_credentials_by_type(
    credentials: List[CredentialConfig],
    filter_type: str,
) -> List[CredentialConfig]:
    return [c for c in credentials if c.type == filter_type]

def is_trusted_image_allowed_for_credential(
    credential: CredentialConfig,
    trusted_image: TrustedImageConfig,
) -> bool:
    return matches_allow_list(credential.allowed_trusted_images, trusted_image.image_path)

def is_pipeline_allowed_for_credential(
    credential: CredentialConfig,
    full_repository_path: str,
) -> bool:
    return matches_allow_list(credential.allowed_pipelines, full_repository_path)

def is_pipeline_allowed_for_trusted_image(
    trusted_image: TrustedImageConfig,
    full_repository_path: str,
) -> bool:
    return matches_allow_list(trusted_image.allowed_pipelines, full_repository_path)

def filter_credentials_by_trusted_image_allow_list(
    credentials: List[CredentialConfig],
    trusted_image: TrustedImageConfig,
) -> List[CredentialConfig]:
    return [c for c in credentials if is_trusted_image_allowed_for_credential(c, trusted_image)]

def filter_credentials_by_pipeline_allow_list(
    credentials: List[CredentialConfig],
    full_repository_path: str,
) -> List[CredentialConfig]:
    return [c for c in credentials if is_pipeline_allowed_for_credential(c, full_repository_path)]

def filter_trusted_images_by_pipeline_allow_list(
    trusted_images: List[TrustedImageConfig],
    full_repository_path: str,
) -> List[TrustedImageConfig]:
    return [
        ti for ti in trusted_images
        if is_pipeline_allowed_for_trusted_image(ti, full_repository_path)
    ]

def get_credentials_for_trusted_image(
    credentials: List[CredentialConfig],
    trusted_image: TrustedImageConfig,
) -> Dict[str, List[CredentialConfig]]:
    """
    Group the credentials a trusted image may receive by credential type.
    Types without any allowed credential are left out of the mapping.
    """
    credential_map = {}

    for filter_type in trusted_image.injected_credential_types:
        credentials_by_type = get_credentials_by_type(credentials, filter_type)
        credentials_by_type = filter_credentials_by_trusted_image_allow_list(
            credentials_by_type, trusted_image
        )
        if credentials_by_type:
            credential_map[filter_type] = credentials_by_type

    return credential_map

def filter_trusted_images(
    trusted_images: List[TrustedImageConfig],
    image_references: List[str],
    full_repository_path: str,
) -> List[TrustedImageConfig]:
    """
    Return the trusted images used by a pipeline, once each, in the order they
    are first referenced, limited to those allowed for the pipeline.
    """
    filtered_images = []
    seen_paths = set()

    for image in image_references:
        trusted_image = get_trusted_image(trusted_images, image)
        if trusted_image is None:
            logger.debug(f"Image {image} is not a trusted image")
            continue

        if trusted_image.image_path in seen_paths:
            continue

        seen_paths.add(trusted_image.image_path)
        filtered_images.append(trusted_image)

    return filter_trusted_images_by_pipeline_allow_list(filtered_images, full_repository_path)

def filter_trusted_images_for_stages(
    trusted_images: List[TrustedImageConfig],
    stages: List[ManifestStage],
    full_repository_path: str,
) -> List[TrustedImageConfig]:
    """Same as filter_trusted_images, reading the images from parsed manifest stages."""
    return filter_trusted_images(
        trusted_images,
        collect_image_references(stages),
        full_repository_path,
    )

def add_credentials_if_not_present(
    source_credentials: List[CredentialConfig],
    new_credentials: List[CredentialConfig],
) -> List[CredentialConfig]:
    """Append credentials whose (name, type) is not present yet."""
    result = list(source_credentials)
    present = {c.key for c in result}

    for credential in new_credentials:
        if credential.key not in present:
            present.add(credential.key)
            result.append(credential)

    return result

def filter_credentials(
    credentials: List[CredentialConfig],
    trusted_images: List[TrustedImageConfig],
    full_repository_path: str,
) -> List[CredentialConfig]:
    """
    Return the credentials to inject for the given trusted images, each
    (name, type) once, limited to those allowed for the pipeline.
    """
    filtered_credentials = []

    for trusted_image in trusted_images:
        credential_map = get_credentials_for_trusted_image(credentials, trusted_image)

        for credentials_of_type in credential_map.values():
            credentials_of_type = filter_credentials_by_pipeline_allow_list(
                credentials_of_type, full_repository_path
            )
            filtered_credentials = add_credentials_if_not_present(
                filtered_credentials, credentials_of_type
            )

    logger.debug(
        f"Resolved {len(filtered_credentials)} credentials for {len(trusted_images)} "
        f"trusted images in {full_repository_path}"
    )
    return filtered_credentials
