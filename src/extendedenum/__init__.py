"""
ExtendedEnum - named-instance registries built from chained configuration.

A family of named singletons (day counts, business day conventions, holiday
calendars) is looked up by unique name. The catalog of instances and their
alternate names is assembled from configuration files layered by priority.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("extendedenum")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "ExtendedEnum Contributors"

from extendedenum.errors import (  # noqa: E402
    ConfigurationError,
    ExtendedEnumError,
    NotFoundError,
)
from extendedenum.named import Named, NamedLookup  # noqa: E402
from extendedenum.registry import ExtendedEnum, ExtendedEnumRegistry  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    "ConfigurationError",
    "ExtendedEnum",
    "ExtendedEnumError",
    "ExtendedEnumRegistry",
    "Named",
    "NamedLookup",
    "NotFoundError",
]
