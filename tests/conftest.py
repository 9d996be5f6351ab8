"""Pytest configuration and fixtures."""

from datetime import datetime
from typing import Any, Callable

import pytest

from realtymatch.config import Settings
from realtymatch.matching import InMemoryCatalog
from realtymatch.models import NumericRange, Property, Requirement


@pytest.fixture
def make_property() -> Callable[..., Property]:
    """Factory for a 2 BHK flat in Baner priced at 60 L."""

    def _make(**overrides: Any) -> Property:
        data: dict[str, Any] = {
            "id": "prop-1",
            "transaction_type": "buy",
            "category": "residential",
            "subtype": "Flat/Apartment",
            "price": 6_000_000,
            "area": 1200,
            "bhk": 2,
            "location": "Baner",
            "status": "available",
            "listed_at": datetime(2024, 1, 1),
        }
        data.update(overrides)
        return Property(**data)

    return _make


@pytest.fixture
def make_requirement() -> Callable[..., Requirement]:
    """Factory for a buyer looking for a 2 BHK flat in Baner, 50-70 L."""

    def _make(**overrides: Any) -> Requirement:
        data: dict[str, Any] = {
            "id": "req-1",
            "transaction_type": "buy",
            "category": "residential",
            "subtype": "Flat/Apartment",
            "budget": {"lower": 5_000_000, "upper": 7_000_000},
            "area": NumericRange(lower=1000, upper=1500),
            "bedrooms": NumericRange(lower=2, upper=2),
            "preferred_areas": ["Baner"],
            "created_at": datetime(2024, 1, 1),
        }
        data.update(overrides)
        return Requirement(**data)

    return _make


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment."""
    return Settings(
        _env_file=None,
        min_match_score=60,
        max_match_results=10,
        match_workers=2,
    )


@pytest.fixture
def catalog(make_property, make_requirement) -> InMemoryCatalog:
    """Catalog with a mix of strong, weak and ineligible listings."""
    properties = [
        make_property(id="perfect", listed_at=datetime(2024, 1, 1)),
        make_property(
            id="pricey",
            price=7_700_000,
            location="Wakad",
            listed_at=datetime(2024, 1, 2),
        ),
        make_property(
            id="far-away",
            price=5_000_000,
            location="Kothrud",
            bhk=3,
            subtype="Row House",
            listed_at=datetime(2024, 1, 3),
        ),
        make_property(id="rental", transaction_type="rent", price=25_000),
        make_property(id="sold", status="sold_or_rented"),
        make_property(id="office", category="commercial", subtype="Office"),
        make_property(id="too-expensive", price=20_000_000),
    ]
    requirements = [
        make_requirement(id="req-1"),
        make_requirement(
            id="req-rent",
            transaction_type="rent",
            budget={"lower": 20_000, "upper": 30_000},
            area=None,
            created_at=datetime(2024, 2, 1),
        ),
        make_requirement(id="req-closed", status="closed"),
    ]
    return InMemoryCatalog(properties=properties, requirements=requirements)
