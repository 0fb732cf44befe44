from contracts.src.services.authorization import (
    matches_allow_list,
    strip_image_tag,
    get_trusted_image,
    get_credentials_by_type,
    get_credentials_for_trusted_image,
    filter_trusted_images,
    filter_trusted_images_for_stages,
    filter_credentials,
    add_credentials_if_not_present,
)
from contracts.src.services.status import (
    get_aggregated_status,
    has_succeeded_status,
)
from contracts.src.services.config_loader import (
    parse_builder_config,
    parse_builder_config_dict,
    load_builder_config,
    BuilderConfigError,
)

__all__ = [
    "matches_allow_list",
    "strip_image_tag",
    "get_trusted_image",
    "get_credentials_by_type",
    "get_credentials_for_trusted_image",
    "filter_trusted_images",
    "filter_trusted_images_for_stages",
    "filter_credentials",
    "add_credentials_if_not_present",
    "get_aggregated_status",
    "has_succeeded_status",
    "parse_builder_config",
    "parse_builder_config_dict",
    "load_builder_config",
    "BuilderConfigError",
]
