"""
Builder config loader and validator.
"""

import logging
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from contracts.src.models.config import BuilderConfig

logger = logging.getLogger(__name__)

class BuilderConfigError(Exception):
    """Raised when a builder configuration is invalid."""
    pass

def parse_builder_config(content: str) -> BuilderConfig:
    """Parse builder configuration from a YAML or JSON string."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise BuilderConfigError(f"Invalid YAML: {e}")

    return validate_config(data)

def parse_builder_config_dict(data: Dict[str, Any]) -> BuilderConfig:
    """Validate builder configuration from dict."""
    return validate_config(data)

def load_builder_config(path: str) -> BuilderConfig:
    """Read and validate the builder configuration file at path."""
    try:
        with open(path, "r") as f:
            content = f.read()
    except OSError as e:
        raise BuilderConfigError(f"Cannot read builder config {path}: {e}")

    config = parse_builder_config(content)
    logger.info(
        f"Loaded {len(config.credentials)} credentials and "
        f"{len(config.trusted_images)} trusted images from {path}"
    )
    return config

def validate_config(data: Optional[Any]) -> BuilderConfig:
    if not data:
        raise BuilderConfigError("Empty builder configuration")

    if not isinstance(data, dict):
        raise BuilderConfigError("Builder configuration must be a dictionary")

    for key in ("credentials", "trustedImages"):
        if key in data and data[key] is not None and not isinstance(data[key], list):
            raise BuilderConfigError(f"Builder configuration '{key}' must be a list")

    try:
        return BuilderConfig.model_validate(data)
    except ValidationError as e:
        raise BuilderConfigError(f"Invalid builder configuration: {e}")
