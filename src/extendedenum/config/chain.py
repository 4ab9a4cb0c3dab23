"""
Chain resolution: merging configuration sources by priority.

Sources are sorted by priority, highest first. The walk starts with the
highest priority source and includes all of its entries. If that source sets
``chain_next_file``, the next source is merged too, and so on until a source
stops the chain or the sources run out.

- Entries already taken from a higher priority source always win; the lower
  priority entry with the same key is dropped. Priority is an override, not a
  combination.
- ``chain_remove_sections`` vetoes whole sections of every source still to
  come, for the rest of the walk.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import logging as _logging
import types as _types
import typing as _typing

import extendedenum.config.sources as sources

_logger = _logging.getLogger(__name__)


def _empty_mapping() -> _typing.Mapping[str, _typing.Any]:
    return _types.MappingProxyType({})


@_dataclasses.dataclass(frozen=True)
class EffectiveConfig:
    """
    The merged configuration of a family.

    Both mappings are read-only and ordered highest priority first, then by
    declaration order within a source.
    """

    providers: _typing.Mapping[str, sources.ProviderMode] = _dataclasses.field(
        default_factory=_empty_mapping
    )
    """Provider identifier to provider mode."""

    alternates: _typing.Mapping[str, str] = _dataclasses.field(default_factory=_empty_mapping)
    """Alternate name to canonical name."""

    origins: tuple[str, ...] = ()
    """Origins of the sources that took part in the merge, in merge order."""

    @property
    def is_empty(self) -> bool:
        """Whether the merge produced no providers and no alternates."""
        return not self.providers and not self.alternates


def sort_sources(
    config_sources: _typing.Iterable[sources.ConfigSource],
) -> list[sources.ConfigSource]:
    """
    Sort sources by priority, highest first.

    The sort is stable: sources with equal priority keep their discovery
    order, so the first discovered source wins a tie.
    """
    return sorted(config_sources, key=lambda s: s.priority, reverse=True)


class ChainResolver:
    """
    Merges an ordered list of configuration sources into one configuration.

    The resolver is stateless; a single instance may be shared.
    """

    def merge(
        self,
        config_sources: _typing.Sequence[sources.ConfigSource],
    ) -> EffectiveConfig:
        """
        Merge sources into an EffectiveConfig.

        Args:
            config_sources: Sources in discovery order.

        Returns:
            The merged configuration. Empty if there are no sources.
        """
        merged: dict[str, dict[str, _typing.Any]] = {
            sources.SECTION_PROVIDERS: {},
            sources.SECTION_ALTERNATES: {},
        }
        origins: list[str] = []
        removed: set[str] = set()

        for current in sort_sources(config_sources):
            origins.append(current.origin)
            for section_name, accumulated in merged.items():
                if section_name in removed:
                    _logger.debug(
                        "Section [%s] of %s removed by a higher priority source",
                        section_name,
                        current.origin,
                    )
                    continue
                self._merge_section(accumulated, current.section(section_name), current)

            if not current.chain_next_file:
                break
            removed.update(current.chain_remove_sections)

        return EffectiveConfig(
            providers=_types.MappingProxyType(merged[sources.SECTION_PROVIDERS]),
            alternates=_types.MappingProxyType(merged[sources.SECTION_ALTERNATES]),
            origins=tuple(origins),
        )

    @staticmethod
    def _merge_section(
        accumulated: dict[str, _typing.Any],
        entries: _typing.Mapping[str, _typing.Any],
        current: sources.ConfigSource,
    ) -> None:
        for key, value in entries.items():
            if key in accumulated:
                # Higher priority entry already present
                if accumulated[key] != value:
                    _logger.debug(
                        "Entry '%s = %s' in %s overridden by higher priority value '%s'",
                        key,
                        value,
                        current.origin,
                        accumulated[key],
                    )
                continue
            accumulated[key] = value


def merge(config_sources: _typing.Sequence[sources.ConfigSource]) -> EffectiveConfig:
    """Merge sources with a default ChainResolver."""
    return ChainResolver().merge(config_sources)
