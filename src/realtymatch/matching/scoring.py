"""
Scoring de una propiedad contra un requerimiento.

Funciones puras: el resultado depende solo de la propiedad, el
requerimiento y la tabla de pesos. Orden de evaluación:

1. Gate de transacción (buy/rent distinto => score 0)
2. Transacción, categoría y subtipo
3. Precio (sweet spot + bandas de tolerancia)
4. Superficie (neutral si no hay restricción)
5. Ubicación (exacta, parcial, piso o neutral)
6. Dormitorios (solo categorías con BHK)

Las razones se agregan en ese mismo orden.
"""

from dataclasses import dataclass, field
from typing import Optional

from realtymatch.matching.weights import DEFAULT_WEIGHTS, MatchWeights
from realtymatch.models import NumericRange, PriceRange, Property, Requirement

CRORE = 10_000_000
LAKH = 100_000


@dataclass
class ScoreBreakdown:
    """Score final (0-100), razones legibles y puntos por criterio."""

    score: int
    reasons: list[str] = field(default_factory=list)
    criteria: dict[str, int] = field(default_factory=dict)


def format_price(value: float) -> str:
    """
    Formatea un precio en notación india.

    >= 1 crore -> "X.XX Cr", >= 1 lakh -> "X.XX L", si no el entero.
    """
    if value >= CRORE:
        return f"{value / CRORE:.2f} Cr"
    if value >= LAKH:
        return f"{value / LAKH:.2f} L"
    return str(int(value))


def _same_text(a: Optional[str], b: Optional[str]) -> bool:
    return bool(a and b) and a.strip().casefold() == b.strip().casefold()


def _distance_from_center(value: float, window: NumericRange) -> float:
    """0.0 en el punto medio del rango, 1.0 en los bordes."""
    half = window.width / 2
    if half == 0:
        return 0.0
    return abs(value - window.midpoint) / half


def _closeness_points(
    value: float, window: NumericRange, top: int, floor: int
) -> int:
    """Puntos entre floor (borde) y top (centro) según distancia al punto medio."""
    return round(top - (top - floor) * _distance_from_center(value, window))


def _above_band(value: float, bound: float, tolerance_pct: int) -> bool:
    # Aritmética entera sobre porcentajes: 10% exacto cae dentro de la banda
    return value * 100 <= bound * (100 + tolerance_pct)


def _below_band(value: float, bound: float, tolerance_pct: int) -> bool:
    return value * 100 >= bound * (100 - tolerance_pct)


def score_price(
    price: PriceRange, budget: PriceRange, weights: MatchWeights = DEFAULT_WEIGHTS
) -> tuple[int, Optional[str]]:
    """Puntaje de precio usando el punto medio del rango de la propiedad."""
    value = price.midpoint
    label = format_price(value)

    if budget.contains(value):
        points = _closeness_points(value, budget, weights.price_max, weights.price_floor)
        if _distance_from_center(value, budget) <= weights.sweet_spot_ratio:
            return points, f"Perfect price match (₹{label})"
        return points, f"Within budget (₹{label})"

    if value > budget.upper and _above_band(value, budget.upper, weights.price_tolerance_pct):
        return weights.price_over_band, f"Slightly above budget (₹{label})"

    if value < budget.lower and _below_band(value, budget.lower, weights.price_tolerance_pct):
        return weights.price_under_band, f"Below budget (₹{label})"

    return 0, None


def score_area(
    area: Optional[float],
    wanted: Optional[NumericRange],
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> tuple[int, Optional[str]]:
    """Puntaje de superficie. Sin restricción (o sin dato) => valor neutral."""
    if wanted is None or not wanted.is_constrained or area is None:
        return weights.area_neutral, None

    label = f"{area:,.0f} sq.ft."

    if wanted.contains(area):
        if wanted.is_bounded:
            points = _closeness_points(area, wanted, weights.area_max, weights.area_floor)
        else:
            points = weights.area_max
        return points, f"Area within range ({label})"

    tolerance = weights.area_tolerance_pct
    if wanted.upper is not None and area > wanted.upper:
        if _above_band(area, wanted.upper, tolerance):
            return weights.area_band, f"Area close to range ({label})"
    elif wanted.lower is not None and area < wanted.lower:
        if _below_band(area, wanted.lower, tolerance):
            return weights.area_band, f"Area close to range ({label})"

    return 0, None


def score_location(
    location: str,
    preferred_areas: list[str],
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> tuple[int, Optional[str]]:
    """Puntaje de ubicación contra las localidades preferidas."""
    preferences = [p for p in preferred_areas if p and p.strip()]
    if not preferences:
        return weights.location_neutral, None

    place = (location or "").strip().casefold()
    if not place:
        return weights.location_floor, None

    for preferred in preferences:
        if _same_text(location, preferred):
            return weights.location_exact, f"Preferred location: {location.strip()}"

    for preferred in preferences:
        wanted = preferred.strip().casefold()
        if wanted in place or place in wanted:
            return weights.location_partial, f"Near preferred location: {preferred.strip()}"

    return weights.location_floor, None


def score_bedrooms(
    listing: Property,
    wanted: Optional[NumericRange],
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> Optional[tuple[int, Optional[str]]]:
    """
    Puntaje de dormitorios.

    Devuelve None cuando el criterio no aplica (sin rango pedido o
    categoría sin dormitorios): no suma ni resta.
    """
    if wanted is None or not wanted.is_constrained or not listing.has_bedrooms:
        return None
    if listing.bhk is not None and wanted.contains(listing.bhk):
        return weights.bedrooms, f"{listing.bhk} BHK"
    return 0, None


def score_property(
    listing: Property,
    requirement: Requirement,
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> ScoreBreakdown:
    """
    Calcula el score de match de una propiedad para un requerimiento.

    Args:
        listing: Propiedad candidata
        requirement: Requerimiento del comprador
        weights: Tabla de pesos (por defecto DEFAULT_WEIGHTS)

    Returns:
        ScoreBreakdown con score entero en [0, 100] y razones ordenadas
    """
    if listing.transaction_type != requirement.transaction_type:
        return ScoreBreakdown(score=0)

    result = ScoreBreakdown(score=0)

    def add(criterion: str, points: int, reason: Optional[str]) -> None:
        result.criteria[criterion] = points
        if reason and points > 0:
            result.reasons.append(reason)

    add(
        "transaction",
        weights.transaction,
        f"Transaction type: {requirement.transaction_type.title()}",
    )

    if listing.category == requirement.category:
        add("category", weights.category, f"Property type: {listing.category.title()}")
    else:
        add("category", 0, None)

    if _same_text(listing.subtype, requirement.subtype):
        add("subtype", weights.subtype, f"Sub type: {listing.subtype.strip()}")
    else:
        add("subtype", 0, None)

    add("price", *score_price(listing.price, requirement.budget, weights))
    add("area", *score_area(listing.area, requirement.area, weights))
    add("location", *score_location(listing.location, requirement.preferred_areas, weights))

    bedrooms = score_bedrooms(listing, requirement.bedrooms, weights)
    if bedrooms is not None:
        add("bedrooms", *bedrooms)

    result.score = max(0, min(100, sum(result.criteria.values())))
    return result
