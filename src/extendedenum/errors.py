"""
Exceptions raised while building and querying extended enums.

Two failure classes exist:
- ConfigurationError: a configuration file or provider is broken. Raised while
  a family is being built; the family stays unbuilt.
- NotFoundError: a lookup asked for a name that is not in the family.
  Recoverable by the caller.
"""

from __future__ import annotations


class ExtendedEnumError(Exception):
    """Base class for all extended enum errors."""


class ConfigurationError(ExtendedEnumError):
    """Error in a configuration file, provider declaration or alias."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        self.source = source
        if source:
            message = f"{message} (in {source})"
        super().__init__(message)


class NotFoundError(ExtendedEnumError, KeyError):
    """Raised when a name is not known to a family."""

    def __init__(self, family: str, name: str) -> None:
        self.family = family
        self.name = name
        super().__init__(f"{family} name not found: {name!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])
