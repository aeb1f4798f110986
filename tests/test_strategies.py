import pytest

from farehop.domain.models import RouteType, SearchParams
from farehop.infrastructure.strategies.creative_routing import CreativeRoutingStrategy
from farehop.infrastructure.strategies.direct_search import DirectSearchStrategy

from conftest import FakeProvider, make_route


class TestDirectSearchStrategy:
    @pytest.mark.asyncio
    async def test_single_airports_issue_one_call(self, params):
        provider = FakeProvider({("PVG", "HND"): [make_route("d", ["PVG", "HND"], 500)]})
        strategy = DirectSearchStrategy([provider])

        routes = await strategy.execute(params)

        assert provider.pairs() == [("PVG", "HND")]
        assert [r.id for r in routes] == ["d"]

    @pytest.mark.asyncio
    async def test_city_code_fans_out_per_airport(self):
        provider = FakeProvider(default=lambda p: [make_route(p.origin, [p.origin, p.destination], 400)])
        strategy = DirectSearchStrategy([provider])
        params = SearchParams(origin="NYC", destination="HND", departure_date="2026-03-10")

        routes = await strategy.execute(params)

        assert provider.pairs() == [("JFK", "HND"), ("LGA", "HND"), ("EWR", "HND")]
        assert [r.id for r in routes] == ["JFK", "LGA", "EWR"]

    @pytest.mark.asyncio
    async def test_cartesian_product_on_both_sides(self):
        provider = FakeProvider()
        strategy = DirectSearchStrategy([provider])
        params = SearchParams(origin="TYO", destination="PAR", departure_date="2026-03-10")

        await strategy.execute(params)

        assert sorted(provider.pairs()) == sorted([
            ("HND", "CDG"), ("HND", "ORY"), ("NRT", "CDG"), ("NRT", "ORY"),
        ])

    @pytest.mark.asyncio
    async def test_failing_pair_does_not_abort_others(self):
        provider = FakeProvider({
            ("JFK", "HND"): RuntimeError("rate limited"),
            ("LGA", "HND"): [make_route("lga", ["LGA", "HND"], 450)],
            ("EWR", "HND"): [make_route("ewr", ["EWR", "HND"], 410)],
        })
        strategy = DirectSearchStrategy([provider])
        params = SearchParams(origin="NYC", destination="HND", departure_date="2026-03-10")

        routes = await strategy.execute(params)

        assert {r.id for r in routes} == {"lga", "ewr"}

    @pytest.mark.asyncio
    async def test_custom_expander(self, params):
        provider = FakeProvider()
        strategy = DirectSearchStrategy([provider], expander=lambda code: [code, code[::-1]])

        await strategy.execute(params)

        assert len(provider.calls) == 4

    @pytest.mark.asyncio
    async def test_fetch_pair_merges_all_providers(self, params):
        first = FakeProvider({("PVG", "HND"): [make_route("a", ["PVG", "HND"], 300)]})
        second = FakeProvider({("PVG", "HND"): ConnectionError("down")})
        third = FakeProvider({("PVG", "HND"): [make_route("c", ["PVG", "HND"], 280)]})
        strategy = DirectSearchStrategy([first, second, third])

        routes = await strategy.fetch_pair(params)

        assert [r.id for r in routes] == ["a", "c"]


class TestCreativeRoutingStrategy:
    @staticmethod
    def _strategy(provider, max_hubs=5):
        return CreativeRoutingStrategy(DirectSearchStrategy([provider]), max_hubs=max_hubs)

    @pytest.mark.asyncio
    async def test_combines_cheapest_leg_of_each_side(self, params):
        provider = FakeProvider({
            # Fora de ordem de propósito
            ("PVG", "ICN"): [
                make_route("l1-exp", ["PVG", "ICN"], 250, departures=["2026-03-10T07:00:00"]),
                make_route("l1", ["PVG", "ICN"], 200, departures=["2026-03-10T09:00:00"]),
            ],
            ("ICN", "HND"): [make_route("l2", ["ICN", "HND"], 150, departures=["2026-03-10T14:00:00"])],
        })

        options = await self._strategy(provider).execute(params)

        assert len(options) == 1
        option = options[0]
        route = option.routes[0]
        assert option.total_price == 350
        assert option.hub == "ICN"
        assert "ICN" in option.description
        assert route.id == "creative-l1-l2"
        assert route.price == 350
        assert route.route_type == RouteType.MULTI_CITY
        assert route.is_creative_routing is True
        assert route.layovers == 0 + 0 + 1
        assert route.total_duration == 240
        assert route.price_breakdown.segment_prices == [200, 150]
        assert route.price_breakdown.total_price == 350
        assert route.booking_url == "https://example.test/l1"
        assert [s.origin.code for s in route.segments] == ["PVG", "ICN"]
        assert route.segments[0].destination.code == route.segments[1].origin.code == "ICN"

    @pytest.mark.asyncio
    async def test_layovers_add_existing_stops(self, params):
        provider = FakeProvider({
            ("PVG", "ICN"): [make_route("l1", ["PVG", "PEK", "ICN"], 200)],
            ("ICN", "HND"): [make_route("l2", ["ICN", "HND"], 150)],
        })

        options = await self._strategy(provider).execute(params)

        assert options[0].routes[0].layovers == 2

    @pytest.mark.asyncio
    async def test_legs_are_one_way(self):
        provider = FakeProvider()
        params = SearchParams(
            origin="PVG", destination="HND", departure_date="2026-03-10", return_date="2026-03-20"
        )

        await self._strategy(provider).execute(params)

        assert provider.calls
        assert all(call.return_date is None for call in provider.calls)
        assert all(call.departure_date == "2026-03-10" for call in provider.calls)

    @pytest.mark.asyncio
    async def test_hub_with_empty_leg_is_discarded(self, params):
        provider = FakeProvider({
            ("PVG", "ICN"): [make_route("l1", ["PVG", "ICN"], 200)],
            ("ICN", "HND"): [],
            ("PVG", "NRT"): [],
            ("NRT", "HND"): [make_route("n2", ["NRT", "HND"], 90)],
        })

        assert await self._strategy(provider).execute(params) == []

    @pytest.mark.asyncio
    async def test_probes_only_first_five_hubs(self):
        provider = FakeProvider()
        params = SearchParams(origin="GRU", destination="EZE", departure_date="2026-03-10")

        await self._strategy(provider).execute(params)

        hubs = {call.destination for call in provider.calls if call.origin == "GRU"}
        assert hubs == {"ICN", "HND", "NRT", "HKG", "SIN"}
        assert len(provider.calls) == 10

    @pytest.mark.asyncio
    async def test_failing_hub_is_skipped(self, params):
        provider = FakeProvider({
            ("PVG", "ICN"): TimeoutError("upstream hung"),
            ("ICN", "HND"): [make_route("i2", ["ICN", "HND"], 150)],
            ("PVG", "NRT"): [make_route("n1", ["PVG", "NRT"], 220)],
            ("NRT", "HND"): [make_route("n2", ["NRT", "HND"], 40)],
        })

        options = await self._strategy(provider).execute(params)

        assert [o.hub for o in options] == ["NRT"]

    @pytest.mark.asyncio
    async def test_leg_not_ending_at_hub_is_skipped(self, params):
        provider = FakeProvider({
            ("PVG", "ICN"): [make_route("bad", ["PVG", "GMP"], 100)],
            ("ICN", "HND"): [make_route("i2", ["ICN", "HND"], 150)],
        })

        assert await self._strategy(provider).execute(params) == []

    @pytest.mark.asyncio
    async def test_options_sorted_by_total_price(self, params):
        provider = FakeProvider({
            ("PVG", "ICN"): [make_route("i1", ["PVG", "ICN"], 300)],
            ("ICN", "HND"): [make_route("i2", ["ICN", "HND"], 200)],
            ("PVG", "HKG"): [make_route("h1", ["PVG", "HKG"], 100)],
            ("HKG", "HND"): [make_route("h2", ["HKG", "HND"], 150)],
            ("PVG", "SIN"): [make_route("s1", ["PVG", "SIN"], 180)],
            ("SIN", "HND"): [make_route("s2", ["SIN", "HND"], 200)],
        })

        options = await self._strategy(provider).execute(params)

        assert [o.hub for o in options] == ["HKG", "SIN", "ICN"]
        assert [o.total_price for o in options] == [250, 380, 500]

    @pytest.mark.asyncio
    async def test_combined_route_does_not_share_segments(self, params):
        leg1 = make_route("l1", ["PVG", "ICN"], 200)
        provider = FakeProvider({
            ("PVG", "ICN"): [leg1],
            ("ICN", "HND"): [make_route("l2", ["ICN", "HND"], 150)],
        })

        options = await self._strategy(provider).execute(params)

        assert options[0].routes[0].segments[0] == leg1.segments[0]
        assert options[0].routes[0].segments[0] is not leg1.segments[0]
