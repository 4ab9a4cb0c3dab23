"""Tests for the Named and NamedLookup contracts and the error types."""

import pytest as _pytest

import extendedenum.errors as errors
import extendedenum.named as named
import mock_nameds


class TestNamed:
    """Tests for the Named base class."""

    def test_cannot_instantiate_without_name(self) -> None:
        """Named is abstract."""
        with _pytest.raises(TypeError):
            named.Named()  # type: ignore[abstract]

    def test_str_is_name(self) -> None:
        """str() of a named instance is its name."""
        assert str(mock_nameds.MockNameds.STANDARD) == "Standard"


class TestNamedLookup:
    """Tests for the NamedLookup base class."""

    def test_lookup_uses_lookup_all(self) -> None:
        """The default lookup() reads from lookup_all()."""
        helper = mock_nameds.MockLookup()
        assert helper.lookup("Looked") is mock_nameds.MockLookup.INSTANCES["Looked"]
        assert helper.lookup("Missing") is None


class TestCheckName:
    """Tests for name validation."""

    def test_valid(self) -> None:
        assert named.check_name("Act/360") == "Act/360"

    def test_not_a_string(self) -> None:
        with _pytest.raises(TypeError):
            named.check_name(None)

    def test_empty(self) -> None:
        with _pytest.raises(ValueError):
            named.check_name("")


class TestErrors:
    """Tests for the error taxonomy."""

    def test_not_found_carries_context(self) -> None:
        """NotFoundError names the family and the requested name."""
        error = errors.NotFoundError("DayCount", "Act/999")
        assert error.family == "DayCount"
        assert error.name == "Act/999"
        assert str(error) == "DayCount name not found: 'Act/999'"

    def test_not_found_is_key_error(self) -> None:
        """NotFoundError can be caught as KeyError."""
        assert isinstance(errors.NotFoundError("F", "n"), KeyError)
        assert isinstance(errors.NotFoundError("F", "n"), errors.ExtendedEnumError)

    def test_configuration_error_source(self) -> None:
        """ConfigurationError mentions its source when given."""
        error = errors.ConfigurationError("bad value", source="DayCount.ini")
        assert error.source == "DayCount.ini"
        assert str(error) == "bad value (in DayCount.ini)"
        assert str(errors.ConfigurationError("bad value")) == "bad value"
