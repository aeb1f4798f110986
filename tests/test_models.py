import pytest
from pydantic import ValidationError

from farehop.domain.models import (
    CabinClass,
    FlightRoute,
    PriceBreakdown,
    SearchParams,
)

from conftest import make_segment


class TestSearchParams:
    def test_defaults_and_normalization(self):
        params = SearchParams(origin=" pvg", destination="hnd", departure_date="2026-03-10")

        assert params.origin == "PVG"
        assert params.destination == "HND"
        assert params.adults == 1
        assert params.cabin_class == CabinClass.ECONOMY
        assert params.max_layovers is None
        assert params.non_stop_only is False
        assert params.is_round_trip() is False

    def test_non_stop_only(self):
        params = SearchParams(origin="PVG", destination="HND", departure_date="2026-03-10", max_layovers=0)
        assert params.non_stop_only is True

    @pytest.mark.parametrize("overrides", [
        {"adults": 0},
        {"children": -1},
        {"infants": -1},
        {"max_layovers": -1},
        {"cabin_class": "steerage"},
        {"departure_date": "10/03/2026"},
        {"origin": "PV"},
    ])
    def test_invalid_input_raises(self, overrides):
        data = {"origin": "PVG", "destination": "HND", "departure_date": "2026-03-10", **overrides}
        with pytest.raises(ValidationError):
            SearchParams(**data)

    def test_immutable(self, params):
        with pytest.raises(ValidationError):
            params.origin = "ICN"


class TestFlightRoute:
    def test_rejects_non_contiguous_segments(self):
        with pytest.raises(ValidationError):
            FlightRoute(
                id="x",
                segments=[make_segment("PVG", "ICN"), make_segment("GMP", "HND")],
                price=100,
                currency="USD",
            )

    def test_rejects_empty_segments(self):
        with pytest.raises(ValidationError):
            FlightRoute(id="x", segments=[], price=100, currency="USD")

    def test_rejects_negative_price(self):
        with pytest.raises(ValidationError):
            FlightRoute(id="x", segments=[make_segment("PVG", "HND")], price=-1, currency="USD")

    def test_dedup_key_and_summary(self):
        route = FlightRoute(
            id="x",
            segments=[
                make_segment("PVG", "ICN", departure="2026-03-10T08:00:00"),
                make_segment("ICN", "HND", departure="2026-03-10T13:00:00"),
            ],
            price=100,
            currency="USD",
        )

        assert route.dedup_key == "PVG-ICN-2026-03-10T08:00:00|ICN-HND-2026-03-10T13:00:00"
        assert route.route_summary == "PVG → ICN → HND"


class TestPriceBreakdown:
    def test_must_sum_to_total(self):
        with pytest.raises(ValidationError):
            PriceBreakdown(segment_prices=[200, 150], total_price=400)

    def test_valid(self):
        breakdown = PriceBreakdown(segment_prices=[200.10, 149.90], total_price=350)
        assert breakdown.total_price == 350
