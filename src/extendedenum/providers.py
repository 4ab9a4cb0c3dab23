"""
Provider loading for extended enums.

A provider declaration names a module or class by dotted path plus a mode:

- constants: the public attributes of the module or class that are instances
  of the family type, in declaration order.
- lookup: a NamedLookup class, constructed with no arguments and asked for
  all of its instances.

Any failure to resolve or run a provider raises ConfigurationError naming the
provider identifier.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import importlib as _importlib
import logging as _logging
import types as _types
import typing as _typing

import extendedenum.config.sources as sources
import extendedenum.errors as errors
import extendedenum.named as named

_logger = _logging.getLogger(__name__)


@_dataclasses.dataclass(frozen=True)
class ProviderDeclaration:
    """A provider identifier together with its mode."""

    identifier: str
    """Dotted path of a module or class (e.g. 'pkg.mod.StandardDayCounts')."""

    mode: sources.ProviderMode
    """How instances are obtained from the provider."""


def resolve_identifier(identifier: str) -> _typing.Any:
    """
    Import the module or attribute named by a dotted path.

    The whole path is tried as a module first, then as an attribute of the
    module named by everything before the last dot.

    Args:
        identifier: Dotted path such as 'pkg.module' or 'pkg.module.Class'.

    Returns:
        The imported module or attribute.

    Raises:
        ConfigurationError: If the path cannot be resolved.
    """
    try:
        return _importlib.import_module(identifier)
    except ModuleNotFoundError as e:
        # Only fall through if the identifier itself (or a parent) is missing,
        # not a module imported by the provider's own code
        if e.name is None or not _is_prefix(e.name, identifier):
            raise errors.ConfigurationError(
                f"provider module failed to import: {e}",
                source=identifier,
            ) from e
    except Exception as e:
        raise errors.ConfigurationError(
            f"provider module failed to import: {e}",
            source=identifier,
        ) from e

    module_path, _, attribute = identifier.rpartition(".")
    if not module_path:
        raise errors.ConfigurationError("provider module not found", source=identifier)
    try:
        module = _importlib.import_module(module_path)
    except ModuleNotFoundError as e:
        raise errors.ConfigurationError(
            f"provider module not found: {e}",
            source=identifier,
        ) from e
    except Exception as e:
        raise errors.ConfigurationError(
            f"provider module failed to import: {e}",
            source=identifier,
        ) from e
    try:
        return getattr(module, attribute)
    except AttributeError as e:
        raise errors.ConfigurationError(
            f"module '{module_path}' has no attribute '{attribute}'",
            source=identifier,
        ) from e


def _is_prefix(module_name: str, identifier: str) -> bool:
    """Whether module_name is identifier or one of its parent packages."""
    return identifier == module_name or identifier.startswith(module_name + ".")


class ProviderAdapter:
    """
    Materializes provider declarations into named instances of one family.

    Only values that are instances of the family type are collected.
    """

    def __init__(self, family_type: type[named.Named]) -> None:
        """
        Initialize the adapter.

        Args:
            family_type: Type every collected instance must be an instance of.
        """
        self._family_type = family_type

    @property
    def family_type(self) -> type[named.Named]:
        """Type of the instances collected."""
        return self._family_type

    def materialize(self, declaration: ProviderDeclaration) -> list[named.Named]:
        """
        Get the instances of a provider.

        Args:
            declaration: Provider identifier and mode.

        Returns:
            Instances in provider order, each object at most once.

        Raises:
            ConfigurationError: If the provider cannot be resolved or run, or
                yields two distinct instances with the same name.
        """
        target = resolve_identifier(declaration.identifier)
        if declaration.mode is sources.ProviderMode.CONSTANTS:
            candidates = self._harvest_constants(declaration.identifier, target)
        else:
            candidates = self._harvest_lookup(declaration.identifier, target)

        instances = self._collect(declaration.identifier, candidates)
        _logger.debug(
            "Provider %s (%s) yielded %d %s instances",
            declaration.identifier,
            declaration.mode.value,
            len(instances),
            self._family_type.__name__,
        )
        return instances

    def _harvest_constants(
        self,
        identifier: str,
        target: _typing.Any,
    ) -> _typing.Iterable[_typing.Any]:
        if not isinstance(target, (_types.ModuleType, type)):
            raise errors.ConfigurationError(
                f"'constants' provider must be a module or class, "
                f"got {type(target).__name__}",
                source=identifier,
            )
        # Namespaces preserve declaration order
        return [
            value
            for attr_name, value in vars(target).items()
            if not attr_name.startswith("_")
        ]

    def _harvest_lookup(
        self,
        identifier: str,
        target: _typing.Any,
    ) -> _typing.Iterable[_typing.Any]:
        if not isinstance(target, type):
            raise errors.ConfigurationError(
                f"'lookup' provider must be a class, got {type(target).__name__}",
                source=identifier,
            )
        try:
            helper = target()
        except Exception as e:
            raise errors.ConfigurationError(
                f"cannot construct lookup helper with no arguments: {e}",
                source=identifier,
            ) from e
        if not isinstance(helper, named.NamedLookup):
            raise errors.ConfigurationError(
                f"'lookup' provider must implement NamedLookup, got {target.__qualname__}",
                source=identifier,
            )
        try:
            found = helper.lookup_all()
        except Exception as e:
            raise errors.ConfigurationError(
                f"lookup helper failed: {e}",
                source=identifier,
            ) from e
        if not isinstance(found, _typing.Mapping):
            raise errors.ConfigurationError(
                f"lookup_all() must return a mapping, got {type(found).__name__}",
                source=identifier,
            )
        return list(found.values())

    def _collect(
        self,
        identifier: str,
        candidates: _typing.Iterable[_typing.Any],
    ) -> list[named.Named]:
        instances: list[named.Named] = []
        by_name: dict[str, named.Named] = {}
        for value in candidates:
            if not isinstance(value, self._family_type):
                continue
            try:
                name = named.check_name(value.name)
            except Exception as e:
                raise errors.ConfigurationError(
                    f"invalid instance name: {e}",
                    source=identifier,
                ) from e
            existing = by_name.get(name)
            if existing is value:
                # Same object exposed under another attribute
                continue
            if existing is not None:
                raise errors.ConfigurationError(
                    f"two different instances are named '{name}'",
                    source=identifier,
                )
            by_name[name] = value
            instances.append(value)
        return instances
