"""
Datos de ejemplo para correr el matching sin base de datos.

Uso:
    python -m realtymatch.scripts.run_matching --demo --batch
"""

from datetime import datetime, timedelta

from realtymatch.matching import InMemoryCatalog
from realtymatch.models import NumericRange, Property, Requirement

_BASE_DATE = datetime(2024, 1, 1)


def _days(n: int) -> datetime:
    return _BASE_DATE + timedelta(days=n)


DEMO_PROPERTIES = [
    Property(
        id="prop-001", transaction_type="buy", category="residential",
        subtype="Flat/Apartment", price=6_000_000, area=1200, bhk=2,
        location="Baner", owner_name="R. Kulkarni", listed_at=_days(1),
    ),
    Property(
        id="prop-002", transaction_type="buy", category="residential",
        subtype="Penthouse", price=7_500_000, area=1450, bhk=3,
        location="Baner, Pune", owner_name="S. Deshpande", listed_at=_days(3),
    ),
    Property(
        id="prop-003", transaction_type="buy", category="residential",
        subtype="Villa", price={"lower": 15_000_000, "upper": 17_500_000},
        area=2800, bhk=4, location="Aundh", listed_at=_days(4),
    ),
    Property(
        id="prop-004", transaction_type="rent", category="residential",
        subtype="Flat/Apartment", price=25_000, area=950, bhk=2,
        location="Hinjewadi", listed_at=_days(2),
    ),
    Property(
        id="prop-005", transaction_type="buy", category="plot",
        subtype="Residential Plot", price=3_200_000, area=2000,
        location="Wakad", listed_at=_days(5),
    ),
    Property(
        id="prop-006", transaction_type="rent", category="commercial",
        subtype="Office", price={"lower": 60_000, "upper": 75_000}, area=1800,
        location="Dharampeth", listed_at=_days(6),
    ),
    Property(
        id="prop-007", transaction_type="buy", category="residential",
        subtype="Flat/Apartment", price=5_400_000, area=1050, bhk=2,
        location="Kothrud", status="on_hold", listed_at=_days(7),
    ),
]

DEMO_REQUIREMENTS = [
    Requirement(
        id="req-001", transaction_type="buy", category="residential",
        subtype="Flat/Apartment", budget={"lower": 5_000_000, "upper": 7_000_000},
        area=NumericRange(lower=1000, upper=1500), bedrooms=NumericRange(lower=2, upper=3),
        preferred_areas=["Baner", "Hinjewadi"], created_at=_days(1),
    ),
    Requirement(
        id="req-002", transaction_type="rent", category="residential",
        subtype="Flat/Apartment", budget={"lower": 20_000, "upper": 30_000},
        bedrooms=NumericRange(lower=1, upper=2), preferred_areas=["Hinjewadi"],
        created_at=_days(2),
    ),
    Requirement(
        id="req-003", transaction_type="buy", category="plot",
        budget={"lower": 2_500_000, "upper": 3_500_000}, created_at=_days(3),
    ),
    Requirement(
        id="req-004", transaction_type="rent", category="commercial", subtype="Office",
        budget={"lower": 50_000, "upper": 70_000}, preferred_areas=["Sitabuldi"],
        status="closed", created_at=_days(4),
    ),
]


def build_demo_catalog() -> InMemoryCatalog:
    """Catálogo en memoria con los datos de ejemplo."""
    return InMemoryCatalog(properties=DEMO_PROPERTIES, requirements=DEMO_REQUIREMENTS)
