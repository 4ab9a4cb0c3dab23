"""
Configuration units for extended enums.

Each family of named instances is configured by one or more files with the
same base name (e.g. ``DayCount.ini``) found on a search path. Every file is
parsed into a ConfigSource; the chain resolver later merges them by priority.

INI format:

    [chain]
    priority = 0
    chainNextFile = false
    chainRemoveSections = alternates        # optional

    [providers]
    extendedenum.conventions.day_counts.StandardDayCounts = constants

    [alternates]
    Actual/360 = Act/360

The same three sections are accepted as YAML mappings in ``.yaml``/``.yml``
files.

Priorities 0 to 99 inclusive are reserved for the bundled defaults.
"""

from __future__ import annotations

import configparser as _configparser
import enum as _enum
import logging as _logging
import pathlib as _pathlib
import types as _types
import typing as _typing

import pydantic as _pydantic
import yaml as _yaml

import extendedenum.errors as errors

_logger = _logging.getLogger(__name__)

SECTION_CHAIN = "chain"
SECTION_PROVIDERS = "providers"
SECTION_ALTERNATES = "alternates"

# Sections whose entries are merged along the chain
MERGEABLE_SECTIONS = frozenset({SECTION_PROVIDERS, SECTION_ALTERNATES})
KNOWN_SECTIONS = frozenset({SECTION_CHAIN}) | MERGEABLE_SECTIONS

# Keys of the [chain] section, mapped to ConfigSource fields
CHAIN_KEYS: dict[str, str] = {
    "priority": "priority",
    "chainNextFile": "chain_next_file",
    "chainRemoveSections": "chain_remove_sections",
}

# Highest priority reserved for bundled defaults
MAX_RESERVED_PRIORITY = 99

# File suffixes searched for each family, in discovery order
CONFIG_SUFFIXES: tuple[str, ...] = (".ini", ".yaml", ".yml")


class ProviderMode(str, _enum.Enum):
    """How a provider declaration yields named instances."""

    CONSTANTS = "constants"
    """Harvest the public instances declared on a module or class."""

    LOOKUP = "lookup"
    """Construct a NamedLookup helper and ask it for its instances."""


class ConfigSource(_pydantic.BaseModel):
    """
    One parsed configuration unit.

    Immutable once created. Entries of ``providers`` and ``alternates`` keep
    the order in which they were declared.
    """

    model_config = _pydantic.ConfigDict(extra="forbid", frozen=True)

    priority: int = _pydantic.Field(
        ...,
        description="Higher numbers win; 0-99 are reserved for bundled defaults",
    )

    chain_next_file: bool = _pydantic.Field(
        default=False,
        description="Whether lower priority sources are merged after this one",
    )

    chain_remove_sections: frozenset[str] = _pydantic.Field(
        default_factory=frozenset,
        description="Sections ignored in every lower priority source",
    )

    providers: _typing.Mapping[str, ProviderMode] = _pydantic.Field(
        default_factory=dict,
        validate_default=True,
        description="Provider identifier to provider mode",
    )

    alternates: _typing.Mapping[str, str] = _pydantic.Field(
        default_factory=dict,
        validate_default=True,
        description="Alternate name to canonical name",
    )

    origin: str = _pydantic.Field(
        default="<memory>",
        description="Where the source was loaded from, for messages",
    )

    @_pydantic.field_validator("chain_remove_sections", mode="before")
    @classmethod
    def _split_sections(cls, value: _typing.Any) -> _typing.Any:
        if isinstance(value, str):
            return frozenset(part.strip() for part in value.split(",") if part.strip())
        return value

    @_pydantic.field_validator("chain_remove_sections")
    @classmethod
    def _check_sections(cls, value: frozenset[str]) -> frozenset[str]:
        unknown = value - MERGEABLE_SECTIONS
        if unknown:
            raise ValueError(
                f"chainRemoveSections may only name {sorted(MERGEABLE_SECTIONS)}, "
                f"got {sorted(unknown)}"
            )
        return value

    @_pydantic.field_validator("providers")
    @classmethod
    def _check_providers(
        cls,
        value: _typing.Mapping[str, ProviderMode],
    ) -> _typing.Mapping[str, ProviderMode]:
        for identifier in value:
            if not identifier.strip():
                raise ValueError("provider identifier must not be empty")
        # Read-only copy; frozen=True alone does not stop item assignment
        return _types.MappingProxyType(dict(value))

    @_pydantic.field_validator("alternates")
    @classmethod
    def _check_alternates(cls, value: _typing.Mapping[str, str]) -> _typing.Mapping[str, str]:
        for alias, canonical in value.items():
            if not alias:
                raise ValueError("alternate name must not be empty")
            if not canonical:
                raise ValueError(f"alternate name '{alias}' has an empty canonical name")
        return _types.MappingProxyType(dict(value))

    def section(self, name: str) -> _typing.Mapping[str, _typing.Any]:
        """Get the entries of a mergeable section by section name."""
        if name == SECTION_PROVIDERS:
            return self.providers
        if name == SECTION_ALTERNATES:
            return self.alternates
        raise KeyError(name)

    @property
    def is_reserved_priority(self) -> bool:
        """Whether the priority is in the range reserved for bundled defaults."""
        return 0 <= self.priority <= MAX_RESERVED_PRIORITY


def source_from_mapping(
    data: _typing.Mapping[str, _typing.Any],
    origin: str = "<memory>",
) -> ConfigSource:
    """
    Build a ConfigSource from section mappings.

    Args:
        data: Mapping with 'chain', 'providers' and 'alternates' sections.
        origin: Where the data came from (used in error messages).

    Returns:
        Validated ConfigSource.

    Raises:
        ConfigurationError: If sections or keys are unknown or values invalid.
    """
    unknown_sections = set(data) - KNOWN_SECTIONS
    if unknown_sections:
        raise errors.ConfigurationError(
            f"unknown sections {sorted(unknown_sections)}, "
            f"expected {sorted(KNOWN_SECTIONS)}",
            source=origin,
        )

    chain = data.get(SECTION_CHAIN)
    if not chain:
        raise errors.ConfigurationError(
            "missing [chain] section with 'priority'",
            source=origin,
        )
    if not isinstance(chain, _typing.Mapping):
        raise errors.ConfigurationError("[chain] must be a mapping", source=origin)

    fields: dict[str, _typing.Any] = {"origin": origin}
    for key, value in chain.items():
        field_name = CHAIN_KEYS.get(key)
        if field_name is None:
            raise errors.ConfigurationError(
                f"unknown key '{key}' in [chain], expected {sorted(CHAIN_KEYS)}",
                source=origin,
            )
        fields[field_name] = value

    for section_name in MERGEABLE_SECTIONS:
        section = data.get(section_name)
        if section is None:
            continue
        if not isinstance(section, _typing.Mapping):
            raise errors.ConfigurationError(
                f"[{section_name}] must be a mapping",
                source=origin,
            )
        fields[section_name] = dict(section)

    try:
        return ConfigSource.model_validate(fields)
    except _pydantic.ValidationError as e:
        raise errors.ConfigurationError(f"invalid configuration: {e}", source=origin) from e


def parse_ini(content: str, origin: str = "<memory>") -> ConfigSource:
    """
    Parse INI text into a ConfigSource.

    Keys are case-sensitive and only '=' separates a key from its value, so
    alternate names may contain spaces and colons.

    Args:
        content: INI text.
        origin: Where the text came from (used in error messages).

    Returns:
        Validated ConfigSource.

    Raises:
        ConfigurationError: If the text is malformed.
    """
    parser = _configparser.ConfigParser(
        delimiters=("=",),
        comment_prefixes=("#", ";"),
        inline_comment_prefixes=None,
        interpolation=None,
        strict=True,
        empty_lines_in_values=False,
    )
    # Preserve case of keys
    parser.optionxform = str  # type: ignore[assignment,method-assign]

    try:
        parser.read_string(content, source=origin)
    except _configparser.Error as e:
        raise errors.ConfigurationError(f"invalid INI: {e}", source=origin) from e

    if parser.defaults():
        raise errors.ConfigurationError(
            f"unknown section '{parser.default_section}'",
            source=origin,
        )

    data = {name: dict(parser.items(name)) for name in parser.sections()}
    return source_from_mapping(data, origin)


def parse_yaml(content: str, origin: str = "<memory>") -> ConfigSource:
    """
    Parse YAML text into a ConfigSource.

    Args:
        content: YAML text with 'chain', 'providers' and 'alternates' mappings.
        origin: Where the text came from (used in error messages).

    Returns:
        Validated ConfigSource.

    Raises:
        ConfigurationError: If the text is malformed.
    """
    try:
        parsed = _yaml.safe_load(content)
    except _yaml.YAMLError as e:
        raise errors.ConfigurationError(f"invalid YAML: {e}", source=origin) from e

    if parsed is None:
        raise errors.ConfigurationError("configuration file is empty", source=origin)
    if not isinstance(parsed, dict):
        type_name = type(parsed).__name__
        raise errors.ConfigurationError(
            f"configuration must be a YAML mapping (dict), got {type_name}",
            source=origin,
        )
    return source_from_mapping(parsed, origin)


def load_source(path: _pathlib.Path) -> ConfigSource:
    """
    Load a configuration file, choosing the parser by suffix.

    Args:
        path: Path to a .ini, .yaml or .yml file.

    Returns:
        Validated ConfigSource whose origin is the path.

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    origin = str(path)
    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise errors.ConfigurationError(f"permission denied: {e}", source=origin) from e
    except OSError as e:
        raise errors.ConfigurationError(f"cannot read file: {e}", source=origin) from e

    if path.suffix == ".ini":
        return parse_ini(content, origin)
    if path.suffix in (".yaml", ".yml"):
        return parse_yaml(content, origin)
    raise errors.ConfigurationError(
        f"unsupported configuration file type '{path.suffix}'",
        source=origin,
    )


def find_config_files(
    family_name: str,
    search_dirs: _typing.Iterable[_pathlib.Path],
) -> list[_pathlib.Path]:
    """
    Find every configuration file for a family on the search path.

    Args:
        family_name: Base file name of the family (e.g. 'DayCount').
        search_dirs: Directories in discovery order.

    Returns:
        Existing files in discovery order. Within a directory, .ini comes
        before .yaml and .yml.
    """
    found: list[_pathlib.Path] = []
    seen: set[_pathlib.Path] = set()
    for directory in search_dirs:
        if not directory.is_dir():
            continue
        for suffix in CONFIG_SUFFIXES:
            candidate = directory / f"{family_name}{suffix}"
            if not candidate.is_file():
                continue
            resolved = candidate.resolve()
            if resolved in seen:
                continue
            seen.add(resolved)
            found.append(candidate)
    return found


def discover_sources(
    family_name: str,
    search_dirs: _typing.Iterable[_pathlib.Path],
) -> list[ConfigSource]:
    """
    Discover and parse every configuration file for a family.

    Args:
        family_name: Base file name of the family (e.g. 'DayCount').
        search_dirs: Directories in discovery order.

    Returns:
        Parsed sources in discovery order (not yet sorted by priority).

    Raises:
        ConfigurationError: If any discovered file is invalid.
    """
    sources: list[ConfigSource] = []
    for path in find_config_files(family_name, search_dirs):
        source = load_source(path)
        _logger.debug(
            "Discovered %s configuration %s (priority %d)",
            family_name,
            path,
            source.priority,
        )
        sources.append(source)
    return sources
