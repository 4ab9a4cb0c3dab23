"""Tests for provider materialization.

Tests verify that:
- 'constants' harvests public instances of the family type in declaration order
- 'lookup' constructs the helper and uses lookup_all()
- Resolution and construction failures raise ConfigurationError naming the provider
"""

import pytest as _pytest

import extendedenum.config.sources as sources
import extendedenum.errors as errors
import extendedenum.providers as providers
import mock_nameds

CONSTANTS = sources.ProviderMode.CONSTANTS
LOOKUP = sources.ProviderMode.LOOKUP


def _materialize(identifier: str, mode: sources.ProviderMode) -> list:
    adapter = providers.ProviderAdapter(mock_nameds.MockNamed)
    return adapter.materialize(providers.ProviderDeclaration(identifier, mode))


class TestResolveIdentifier:
    """Tests for dotted path resolution."""

    def test_module(self) -> None:
        """A module path resolves to the module."""
        assert providers.resolve_identifier("mock_nameds") is mock_nameds

    def test_class(self) -> None:
        """A class path resolves to the class."""
        assert providers.resolve_identifier("mock_nameds.Conventions") is mock_nameds.Conventions

    @_pytest.mark.parametrize(
        "identifier",
        [
            "no_such_module_anywhere",
            "no_such_package.module.Class",
            "mock_nameds.NoSuchClass",
            "broken_provider",
            "broken_provider.Anything",
        ],
    )
    def test_unresolvable(self, identifier: str) -> None:
        """Unresolvable paths raise ConfigurationError naming the identifier."""
        with _pytest.raises(errors.ConfigurationError) as exc_info:
            providers.resolve_identifier(identifier)
        assert exc_info.value.source == identifier


class TestConstantsMode:
    """Tests for the 'constants' provider mode."""

    def test_class_constants_in_declaration_order(self) -> None:
        """Public family instances are collected in declaration order."""
        result = _materialize("mock_nameds.Conventions", CONSTANTS)
        assert result == [
            mock_nameds.Conventions.FOLLOWING,
            mock_nameds.Conventions.MODIFIED_FOLLOWING,
        ]

    def test_same_object_collected_once(self) -> None:
        """An instance exposed under two attributes appears once."""
        result = _materialize("mock_nameds.Conventions", CONSTANTS)
        assert len([r for r in result if r.name == "ModifiedFollowing"]) == 1

    def test_skips_private_and_foreign_values(self) -> None:
        """Private attributes and other types are ignored."""
        names = [r.name for r in _materialize("mock_nameds.Conventions", CONSTANTS)]
        assert "Private" not in names
        assert "Other" not in names

    def test_module_constants(self) -> None:
        """Module level instances are harvested from a module provider."""
        result = _materialize("mock_nameds", CONSTANTS)
        assert result == [mock_nameds.ALPHA, mock_nameds.BETA]

    def test_duplicate_names_rejected(self) -> None:
        """Two distinct instances with one name make the provider invalid."""
        with _pytest.raises(errors.ConfigurationError, match="Twin"):
            _materialize("mock_nameds.DuplicateNameds", CONSTANTS)

    def test_unreadable_name_rejected(self) -> None:
        """An instance whose name raises makes the provider invalid."""
        with _pytest.raises(errors.ConfigurationError, match="name unavailable") as exc_info:
            _materialize("mock_nameds.UnnamedConventions", CONSTANTS)
        assert exc_info.value.source == "mock_nameds.UnnamedConventions"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_not_module_or_class(self) -> None:
        """A constants provider must be a module or class."""
        with _pytest.raises(errors.ConfigurationError, match="module or class"):
            _materialize("mock_nameds.ALPHA", CONSTANTS)


class TestLookupMode:
    """Tests for the 'lookup' provider mode."""

    def test_lookup_all_values(self) -> None:
        """The helper's instances are returned."""
        result = _materialize("mock_nameds.MockLookup", LOOKUP)
        assert result == list(mock_nameds.MockLookup.INSTANCES.values())

    def test_requires_no_argument_constructor(self) -> None:
        """A helper needing arguments cannot be constructed."""
        with _pytest.raises(errors.ConfigurationError, match="no arguments") as exc_info:
            _materialize("mock_nameds.ArgumentLookup", LOOKUP)
        assert exc_info.value.source == "mock_nameds.ArgumentLookup"

    def test_requires_named_lookup(self) -> None:
        """The helper must implement NamedLookup."""
        with _pytest.raises(errors.ConfigurationError, match="NamedLookup"):
            _materialize("mock_nameds.NotALookup", LOOKUP)

    def test_requires_class(self) -> None:
        """A lookup provider must be a class."""
        with _pytest.raises(errors.ConfigurationError, match="must be a class"):
            _materialize("mock_nameds", LOOKUP)

    def test_helper_failure(self) -> None:
        """Errors raised by the helper become ConfigurationError."""
        with _pytest.raises(errors.ConfigurationError, match="backing store") as exc_info:
            _materialize("mock_nameds.FailingLookup", LOOKUP)
        assert isinstance(exc_info.value.__cause__, RuntimeError)
