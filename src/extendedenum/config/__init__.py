"""
Configuration module for ExtendedEnum.

Parses configuration files into sources, merges them along the priority chain,
and uses pydantic-settings for the search path.
"""

from extendedenum.config.chain import ChainResolver, EffectiveConfig, merge
from extendedenum.config.settings import Settings
from extendedenum.config.sources import (
    ConfigSource,
    ProviderMode,
    discover_sources,
    load_source,
    parse_ini,
    parse_yaml,
)

__all__ = [
    "ChainResolver",
    "ConfigSource",
    "EffectiveConfig",
    "ProviderMode",
    "Settings",
    "discover_sources",
    "load_source",
    "merge",
    "parse_ini",
    "parse_yaml",
]
