"""
Extended enum registries.

An ExtendedEnumRegistry is the built, read-only catalog of one family of
named instances: every canonical name and every alternate name maps to an
instance.

An ExtendedEnum is the process-wide handle of a family. It builds its registry
once, on first use, from the configuration files found for the family:

    DAY_COUNTS = ExtendedEnum(DayCount, bundled_dir=DEFAULTS_DIR)
    DAY_COUNTS.lookup("Act/360")

Once built the registry never changes. A failed build leaves the family
unbuilt; every later access re-raises the original ConfigurationError.
"""

from __future__ import annotations

import logging as _logging
import pathlib as _pathlib
import threading as _threading
import types as _types
import typing as _typing

import extendedenum.config.chain as chain
import extendedenum.config.settings as settings_module
import extendedenum.config.sources as sources
import extendedenum.errors as errors
import extendedenum.named as named
import extendedenum.providers as providers

_logger = _logging.getLogger(__name__)

T = _typing.TypeVar("T", bound=named.Named)


class ExtendedEnumRegistry(_typing.Generic[T]):
    """
    Read-only catalog of the named instances of one family.

    Create with build(); never mutated afterwards, so lookups need no locking.
    """

    def __init__(
        self,
        family_name: str,
        instances: _typing.Mapping[str, T],
        alternates: _typing.Mapping[str, str],
    ) -> None:
        """
        Initialize the registry from already validated data.

        Args:
            family_name: Name of the family, used in error messages.
            instances: Canonical name to instance, in registration order.
            alternates: Alternate name to canonical name.
        """
        self._family_name = family_name
        self._instances: _typing.Mapping[str, T] = _types.MappingProxyType(dict(instances))
        self._alternates: _typing.Mapping[str, str] = _types.MappingProxyType(dict(alternates))
        table: dict[str, T] = dict(instances)
        for alias, canonical in alternates.items():
            table[alias] = instances[canonical]
        self._table: _typing.Mapping[str, T] = _types.MappingProxyType(table)
        self._values: frozenset[T] = frozenset(instances.values())

    @classmethod
    def build(
        cls,
        family_type: type[T],
        effective_config: chain.EffectiveConfig,
        family_name: str | None = None,
    ) -> ExtendedEnumRegistry[T]:
        """
        Build a registry from a merged configuration.

        Providers are materialized in merged order. If two providers yield
        different instances with the same canonical name, the earlier (higher
        priority) one is kept.

        Args:
            family_type: Type of the instances in the family.
            effective_config: Merged configuration of the family.
            family_name: Name used in messages (default: family type name).

        Returns:
            The built registry.

        Raises:
            ConfigurationError: If a provider fails, an alternate name refers
                to an unknown canonical name, or an alternate name would hide
                the canonical name of another instance.
        """
        family_name = family_name or family_type.__name__
        adapter = providers.ProviderAdapter(family_type)

        instances: dict[str, T] = {}
        for identifier, mode in effective_config.providers.items():
            declaration = providers.ProviderDeclaration(identifier, mode)
            for instance in adapter.materialize(declaration):
                existing = instances.get(instance.name)
                if existing is not None:
                    if existing is not instance:
                        _logger.debug(
                            "%s '%s' from %s overridden by a higher priority provider",
                            family_name,
                            instance.name,
                            identifier,
                        )
                    continue
                instances[instance.name] = instance  # type: ignore[assignment]

        alternates: dict[str, str] = {}
        for alias, canonical in effective_config.alternates.items():
            if canonical not in instances:
                raise errors.ConfigurationError(
                    f"{family_name} alternate name '{alias}' refers to unknown name '{canonical}'"
                )
            if alias in instances:
                if instances[alias] is not instances[canonical]:
                    raise errors.ConfigurationError(
                        f"{family_name} alternate name '{alias}' clashes with "
                        f"the name of another instance"
                    )
                continue
            alternates[alias] = canonical

        return cls(family_name, instances, alternates)

    @property
    def family_name(self) -> str:
        """Name of the family."""
        return self._family_name

    def lookup(self, name: str) -> T:
        """
        Get an instance by canonical or alternate name.

        Matching is exact and case-sensitive.

        Args:
            name: Canonical or alternate name.

        Returns:
            The instance.

        Raises:
            NotFoundError: If the name is unknown.
        """
        instance = self._table.get(name)
        if instance is None:
            raise errors.NotFoundError(self._family_name, name)
        return instance

    def find(self, name: str) -> T | None:
        """
        Get an instance by canonical or alternate name, if known.

        Args:
            name: Canonical or alternate name.

        Returns:
            The instance, or None if the name is unknown.
        """
        return self._table.get(name)

    def values(self) -> frozenset[T]:
        """Get every distinct instance (alternate names do not add entries)."""
        return self._values

    def lookup_all(self) -> _typing.Mapping[str, T]:
        """Get the read-only mapping of canonical name to instance."""
        return self._instances

    def alternate_names(self) -> _typing.Mapping[str, str]:
        """Get the read-only mapping of alternate name to canonical name."""
        return self._alternates

    def names(self) -> _typing.Mapping[str, T]:
        """Get the read-only mapping of every known name to its instance."""
        return self._table

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._table

    def __len__(self) -> int:
        return len(self._instances)

    def __iter__(self) -> _typing.Iterator[T]:
        return iter(self._instances.values())

    def __repr__(self) -> str:
        return f"ExtendedEnumRegistry[{self._family_name}]({len(self)} instances)"


class ExtendedEnum(_typing.Generic[T]):
    """
    Lazily built, process-wide handle of a family of named instances.

    The first access builds the registry under a lock, so concurrent first
    use triggers a single build. Afterwards all reads go straight to the
    immutable registry.

    Configuration comes either from explicit sources or, by default, from
    every file named '<family name>.ini|.yaml|.yml' on the search path.
    """

    def __init__(
        self,
        family_type: type[T],
        family_name: str | None = None,
        *,
        bundled_dir: _pathlib.Path | None = None,
        config_sources: _typing.Sequence[sources.ConfigSource] | None = None,
        settings: settings_module.Settings | None = None,
    ) -> None:
        """
        Initialize the handle. Nothing is loaded until first use.

        Args:
            family_type: Type of the instances in the family.
            family_name: Family name and configuration file base name
                (default: family type name).
            bundled_dir: Directory holding the bundled default configuration.
            config_sources: Explicit sources; disables file discovery.
            settings: Search path settings (default: from environment).
        """
        self._family_type = family_type
        self._family_name = family_name or family_type.__name__
        self._bundled_dir = bundled_dir
        self._config_sources = None if config_sources is None else tuple(config_sources)
        self._settings = settings
        self._lock = _threading.Lock()
        self._registry: ExtendedEnumRegistry[T] | None = None
        self._failure: errors.ConfigurationError | None = None

    @property
    def family_type(self) -> type[T]:
        """Type of the instances in the family."""
        return self._family_type

    @property
    def family_name(self) -> str:
        """Name of the family."""
        return self._family_name

    @property
    def is_built(self) -> bool:
        """Whether the registry has been built successfully."""
        return self._registry is not None

    def load_sources(self) -> list[sources.ConfigSource]:
        """
        Get the configuration sources of the family, in discovery order.

        Raises:
            ConfigurationError: If a discovered file is invalid.
        """
        if self._config_sources is not None:
            return list(self._config_sources)
        active_settings = self._settings or settings_module.Settings()
        search_dirs = active_settings.search_dirs(self._bundled_dir)
        return sources.discover_sources(self._family_name, search_dirs)

    def build(self) -> ExtendedEnumRegistry[T]:
        """
        Get the registry, building it on first call.

        Returns:
            The built registry.

        Raises:
            ConfigurationError: If the build fails. The original error is
                raised again on every later call.
        """
        registry = self._registry
        if registry is not None:
            return registry
        with self._lock:
            if self._registry is not None:
                return self._registry
            if self._failure is not None:
                raise self._failure
            try:
                effective = chain.merge(self.load_sources())
                registry = ExtendedEnumRegistry.build(
                    self._family_type,
                    effective,
                    self._family_name,
                )
            except errors.ConfigurationError as e:
                self._failure = e
                raise
            _logger.info(
                "Built %s with %d instances and %d alternate names from %d sources",
                self._family_name,
                len(registry),
                len(registry.alternate_names()),
                len(effective.origins),
            )
            self._registry = registry
            return registry

    def lookup(self, name: str) -> T:
        """
        Get an instance by canonical or alternate name.

        Raises:
            NotFoundError: If the name is unknown.
            ConfigurationError: If the family cannot be built.
        """
        return self.build().lookup(name)

    def find(self, name: str) -> T | None:
        """Get an instance by canonical or alternate name, or None."""
        return self.build().find(name)

    def values(self) -> frozenset[T]:
        """Get every distinct instance of the family."""
        return self.build().values()

    def lookup_all(self) -> _typing.Mapping[str, T]:
        """Get the mapping of canonical name to instance."""
        return self.build().lookup_all()

    def alternate_names(self) -> _typing.Mapping[str, str]:
        """Get the mapping of alternate name to canonical name."""
        return self.build().alternate_names()

    def __contains__(self, name: object) -> bool:
        return name in self.build()

    def __len__(self) -> int:
        return len(self.build())

    def __iter__(self) -> _typing.Iterator[T]:
        return iter(self.build())

    def __repr__(self) -> str:
        state = "built" if self.is_built else "unbuilt"
        return f"ExtendedEnum[{self._family_name}]({state})"
