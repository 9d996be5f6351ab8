"""Tests for custom exception hierarchy."""

from realtymatch.exceptions import (
    CatalogError,
    ConfigurationError,
    InvalidInputError,
    NotFoundError,
    RealtyMatchError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_base_is_exception(self) -> None:
        assert isinstance(RealtyMatchError("test"), Exception)

    def test_subclasses(self) -> None:
        for error in (
            NotFoundError("Requirement", "r-1"),
            InvalidInputError("test"),
            CatalogError("test"),
            ConfigurationError("test"),
        ):
            assert isinstance(error, RealtyMatchError)

    def test_not_found_message(self) -> None:
        err = NotFoundError("Property", "p-42")
        assert str(err) == "Property not found: p-42"
        assert err.entity == "Property"
        assert err.identifier == "p-42"
