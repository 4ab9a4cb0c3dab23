"""
Contracts for named instances and the helpers that enumerate them.

A Named value exposes a unique, stable string name. Families of Named values
(day counts, business day conventions, ...) are catalogued by an ExtendedEnum.

A NamedLookup is a provider helper that is constructed with no arguments and
enumerates the instances it knows about. It is the "lookup" provider mode.
"""

from __future__ import annotations

import abc as _abc
import typing as _typing

NamedT = _typing.TypeVar("NamedT", bound="Named")


class Named(_abc.ABC):
    """
    Abstract base class for values identified by a unique name.

    Subclasses must implement:
    - name (property): The unique name, used as the lookup key

    The name must never change for the lifetime of the instance.
    """

    @property
    @_abc.abstractmethod
    def name(self) -> str:
        """The unique name of this instance."""
        ...

    def __str__(self) -> str:
        return self.name


class NamedLookup(_abc.ABC, _typing.Generic[NamedT]):
    """
    Abstract base class for helpers that enumerate named instances.

    Implementations must be constructible with no arguments. Where the
    instances come from (computed, loaded from elsewhere, ...) is up to the
    implementation.
    """

    @_abc.abstractmethod
    def lookup_all(self) -> _typing.Mapping[str, NamedT]:
        """
        Get every instance known to this helper.

        Returns:
            Mapping of canonical name to instance.
        """
        ...

    def lookup(self, name: str) -> NamedT | None:
        """
        Get a single instance by name.

        Args:
            name: Canonical name (case-sensitive).

        Returns:
            The instance, or None if this helper does not know the name.
        """
        return self.lookup_all().get(name)


def check_name(name: object) -> str:
    """
    Validate a value used as a name.

    Args:
        name: Value to check.

    Returns:
        The name, unchanged.

    Raises:
        TypeError: If the name is not a string.
        ValueError: If the name is empty.
    """
    if not isinstance(name, str):
        raise TypeError(f"name must be str, got {type(name).__name__}")
    if not name:
        raise ValueError("name must not be empty")
    return name
