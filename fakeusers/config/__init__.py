"""Configuration module."""

from .config_schema import (
    DEFAULT_CONFIG_PATH,
    ExportConfig,
    GenerationConfig,
    load_config_dict,
)
from .regions import DIGITS, REGION_PROFILES, Region, RegionProfile, get_region_profile

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DIGITS",
    "ExportConfig",
    "GenerationConfig",
    "REGION_PROFILES",
    "Region",
    "RegionProfile",
    "get_region_profile",
    "load_config_dict",
]
