"""Tests for the property/requirement scoring functions."""

import pytest

from realtymatch.matching.scoring import (
    format_price,
    score_area,
    score_location,
    score_price,
    score_property,
)
from realtymatch.matching.weights import DEFAULT_WEIGHTS, MatchWeights
from realtymatch.models import NumericRange, PriceRange


class TestFormatPrice:
    """Indian notation for prices in reasons text."""

    def test_crore(self) -> None:
        assert format_price(15_000_000) == "1.50 Cr"

    def test_exactly_one_crore(self) -> None:
        assert format_price(10_000_000) == "1.00 Cr"

    def test_lakh(self) -> None:
        assert format_price(6_000_000) == "60.00 L"

    def test_exactly_one_lakh(self) -> None:
        assert format_price(100_000) == "1.00 L"

    def test_below_lakh_is_raw_integer(self) -> None:
        assert format_price(99_999) == "99999"
        assert format_price(25_000.5) == "25000"


class TestTransactionGate:
    """A rent listing never satisfies a buy requirement."""

    def test_mismatch_scores_zero_with_no_reasons(
        self, make_property, make_requirement
    ) -> None:
        result = score_property(make_property(), make_requirement(transaction_type="rent"))
        assert result.score == 0
        assert result.reasons == []

    def test_gate_holds_for_every_listing_shape(self, make_property, make_requirement) -> None:
        requirement = make_requirement(transaction_type="buy")
        for price in (1_000, 6_000_000, 90_000_000):
            for category in ("residential", "plot", "commercial"):
                listing = make_property(
                    transaction_type="rent", price=price, category=category
                )
                result = score_property(listing, requirement)
                assert result.score == 0
                assert result.reasons == []


class TestScenarios:
    """End-to-end scoring scenarios."""

    def test_near_perfect_match(self, make_property, make_requirement) -> None:
        result = score_property(make_property(), make_requirement())

        assert result.score >= 90
        assert any("Transaction" in r for r in result.reasons)
        assert any("Baner" in r for r in result.reasons)
        assert any("price" in r.lower() for r in result.reasons)

    def test_reasons_follow_evaluation_order(self, make_property, make_requirement) -> None:
        result = score_property(make_property(), make_requirement())

        assert result.reasons == [
            "Transaction type: Buy",
            "Property type: Residential",
            "Sub type: Flat/Apartment",
            "Perfect price match (₹60.00 L)",
            "Area within range (1,200 sq.ft.)",
            "Preferred location: Baner",
            "2 BHK",
        ]

    def test_ten_percent_over_budget_gets_partial_credit(
        self, make_property, make_requirement
    ) -> None:
        result = score_property(make_property(price=7_700_000), make_requirement())

        assert result.criteria["price"] == DEFAULT_WEIGHTS.price_over_band == 15
        assert "Slightly above budget (₹77.00 L)" in result.reasons

    def test_score_is_clamped_to_100(self, make_property, make_requirement) -> None:
        result = score_property(make_property(), make_requirement())
        assert sum(result.criteria.values()) > 100
        assert result.score == 100

    def test_bounds_invariant(self, make_property, make_requirement) -> None:
        requirement = make_requirement()
        for price in (100_000, 4_400_000, 5_000_000, 6_000_000, 7_700_000, 50_000_000):
            for area in (100, 900, 1200, 1800, 10_000):
                for location in ("Baner", "Baner, Pune", "Aundh", ""):
                    listing = make_property(price=price, area=area, location=location)
                    result = score_property(listing, requirement)
                    assert 0 <= result.score <= 100

    def test_scoring_is_deterministic(self, make_property, make_requirement) -> None:
        listing, requirement = make_property(), make_requirement()
        assert score_property(listing, requirement) == score_property(listing, requirement)

    def test_custom_weights_are_used(self, make_property, make_requirement) -> None:
        weights = MatchWeights(
            transaction=1,
            category=0,
            subtype=0,
            price_max=0,
            price_floor=0,
            area_max=0,
            area_floor=0,
            location_exact=0,
            bedrooms=0,
        )
        result = score_property(make_property(), make_requirement(), weights)
        assert result.score == 1


class TestBaseCriteria:
    """Transaction, category and subtype credit."""

    def test_category_mismatch_gets_no_category_credit(
        self, make_property, make_requirement
    ) -> None:
        result = score_property(make_property(category="commercial"), make_requirement())
        assert result.criteria["category"] == 0
        assert not any(r.startswith("Property type") for r in result.reasons)

    def test_subtype_is_case_insensitive(self, make_property, make_requirement) -> None:
        result = score_property(
            make_property(subtype=" flat/apartment "), make_requirement()
        )
        assert result.criteria["subtype"] == DEFAULT_WEIGHTS.subtype

    def test_subtype_is_optional_credit(self, make_property, make_requirement) -> None:
        result = score_property(make_property(subtype="Row House"), make_requirement())
        assert result.criteria["subtype"] == 0
        assert result.score > 0

    def test_empty_subtypes_do_not_match(self, make_property, make_requirement) -> None:
        result = score_property(make_property(subtype=""), make_requirement(subtype=""))
        assert result.criteria["subtype"] == 0


class TestPriceScore:
    """Sweet spot inside the budget and tolerance bands outside it."""

    def test_sweet_spot_beats_edges(self) -> None:
        budget = PriceRange(lower=100, upper=200)
        center, _ = score_price(PriceRange.single(150), budget)
        low_edge, _ = score_price(PriceRange.single(100), budget)
        high_edge, _ = score_price(PriceRange.single(200), budget)

        assert center == DEFAULT_WEIGHTS.price_max
        assert low_edge == high_edge == DEFAULT_WEIGHTS.price_floor
        assert center >= low_edge and center >= high_edge

    def test_points_decrease_towards_edges(self) -> None:
        budget = PriceRange(lower=100, upper=200)
        points = [score_price(PriceRange.single(p), budget)[0] for p in (150, 165, 180, 200)]
        assert points == sorted(points, reverse=True)

    def test_degenerate_budget_gives_full_credit(self) -> None:
        points, reason = score_price(PriceRange.single(500), PriceRange.single(500))
        assert points == DEFAULT_WEIGHTS.price_max
        assert reason.startswith("Perfect price match")

    def test_edge_price_is_within_budget_not_perfect(self) -> None:
        _, reason = score_price(
            PriceRange.single(5_000_000), PriceRange(lower=5_000_000, upper=7_000_000)
        )
        assert reason == "Within budget (₹50.00 L)"

    def test_price_range_uses_midpoint(self) -> None:
        points, _ = score_price(
            PriceRange(lower=5_500_000, upper=6_500_000),
            PriceRange(lower=5_000_000, upper=7_000_000),
        )
        assert points == DEFAULT_WEIGHTS.price_max

    def test_below_budget_band(self) -> None:
        budget = PriceRange(lower=5_000_000, upper=7_000_000)
        points, reason = score_price(PriceRange.single(4_500_000), budget)
        assert points == DEFAULT_WEIGHTS.price_under_band == 10
        assert reason == "Below budget (₹45.00 L)"

    @pytest.mark.parametrize("price", [4_400_000, 7_800_000, 50_000_000])
    def test_outside_bands_scores_zero(self, price: int) -> None:
        budget = PriceRange(lower=5_000_000, upper=7_000_000)
        assert score_price(PriceRange.single(price), budget) == (0, None)


class TestAreaScore:
    """Area range with tolerance band and neutral absence."""

    def test_neutral_when_requirement_has_no_area(self) -> None:
        points = {score_area(area, None)[0] for area in (None, 100, 1200, 99_999)}
        assert points == {DEFAULT_WEIGHTS.area_neutral}

    def test_neutral_when_area_range_is_open(self) -> None:
        assert score_area(1200, NumericRange())[0] == DEFAULT_WEIGHTS.area_neutral

    def test_neutral_when_listing_area_unknown(self) -> None:
        wanted = NumericRange(lower=1000, upper=1500)
        assert score_area(None, wanted) == (DEFAULT_WEIGHTS.area_neutral, None)

    def test_in_range_scaled_by_closeness(self) -> None:
        wanted = NumericRange(lower=1000, upper=1500)
        assert score_area(1250, wanted)[0] == DEFAULT_WEIGHTS.area_max
        assert score_area(1000, wanted)[0] == DEFAULT_WEIGHTS.area_floor
        assert score_area(1200, wanted)[0] == 19

    def test_single_bound_in_range_gets_full_credit(self) -> None:
        points, reason = score_area(5000, NumericRange(lower=1000))
        assert points == DEFAULT_WEIGHTS.area_max
        assert reason == "Area within range (5,000 sq.ft.)"

    def test_fifteen_percent_band_on_both_sides(self) -> None:
        wanted = NumericRange(lower=1000, upper=1500)
        assert score_area(850, wanted)[0] == DEFAULT_WEIGHTS.area_band
        assert score_area(1725, wanted)[0] == DEFAULT_WEIGHTS.area_band

    def test_outside_band_scores_zero(self) -> None:
        wanted = NumericRange(lower=1000, upper=1500)
        assert score_area(800, wanted) == (0, None)
        assert score_area(1800, wanted) == (0, None)

    def test_requirement_without_area_does_not_discriminate(
        self, make_property, make_requirement
    ) -> None:
        requirement = make_requirement(area=None)
        contributions = {
            score_property(make_property(area=area), requirement).criteria["area"]
            for area in (300, 1200, 5000)
        }
        assert len(contributions) == 1


class TestLocationScore:
    """Exact, partial, floor and neutral location credit."""

    def test_exact_match_is_case_insensitive(self) -> None:
        points, reason = score_location("BANER", ["baner", "hinjewadi"])
        assert points == DEFAULT_WEIGHTS.location_exact
        assert reason == "Preferred location: BANER"

    def test_substring_match_is_partial(self) -> None:
        points, reason = score_location("Baner, Pune", ["baner"])
        assert points == DEFAULT_WEIGHTS.location_partial
        assert reason == "Near preferred location: baner"

    def test_containment_works_in_both_directions(self) -> None:
        points, _ = score_location("Baner", ["Baner Road"])
        assert points == DEFAULT_WEIGHTS.location_partial

    def test_exact_match_wins_over_earlier_partial(self) -> None:
        points, _ = score_location("Aundh", ["Aundh Road", "aundh"])
        assert points == DEFAULT_WEIGHTS.location_exact

    def test_no_match_gets_floor(self) -> None:
        assert score_location("Kothrud", ["Baner"]) == (DEFAULT_WEIGHTS.location_floor, None)

    def test_no_preferences_is_neutral(self) -> None:
        assert score_location("Kothrud", []) == (DEFAULT_WEIGHTS.location_neutral, None)

    def test_blank_listing_location_gets_floor(self) -> None:
        assert score_location("", ["Baner"]) == (DEFAULT_WEIGHTS.location_floor, None)


class TestBedroomScore:
    """BHK credit only where the category has bedrooms."""

    def test_bhk_in_range(self, make_property, make_requirement) -> None:
        requirement = make_requirement(bedrooms=NumericRange(lower=2, upper=3))
        result = score_property(make_property(bhk=3), requirement)
        assert result.criteria["bedrooms"] == DEFAULT_WEIGHTS.bedrooms
        assert "3 BHK" in result.reasons

    def test_bhk_out_of_range(self, make_property, make_requirement) -> None:
        result = score_property(make_property(bhk=4), make_requirement())
        assert result.criteria["bedrooms"] == 0

    def test_unknown_bhk_gets_no_credit(self, make_property, make_requirement) -> None:
        result = score_property(make_property(bhk=None), make_requirement())
        assert result.criteria["bedrooms"] == 0

    def test_plots_skip_bedrooms(self, make_property, make_requirement) -> None:
        listing = make_property(category="plot", subtype="Plot", bhk=None)
        requirement = make_requirement(category="plot", subtype="Plot")
        result = score_property(listing, requirement)
        assert "bedrooms" not in result.criteria

    def test_no_bedroom_range_skips_criterion(self, make_property, make_requirement) -> None:
        result = score_property(make_property(), make_requirement(bedrooms=None))
        assert "bedrooms" not in result.criteria
