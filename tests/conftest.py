from typing import Callable, Dict, List, Optional, Tuple, Union

import pytest

from farehop.domain.models import Airport, FlightRoute, FlightSegment, RouteType, SearchParams


def make_segment(origin: str, destination: str, departure: str = "2026-03-10T08:00:00",
                 arrival: str = "2026-03-10T10:00:00", duration: int = 120,
                 airline: str = "KE", number: str = "100") -> FlightSegment:
    return FlightSegment(
        id=f"{origin}-{destination}-{departure}",
        origin=Airport(code=origin),
        destination=Airport(code=destination),
        departure=departure,
        arrival=arrival,
        duration_minutes=duration,
        airline=airline,
        flight_number=f"{airline}{number}",
    )


def make_route(route_id: str, codes: List[str], price: float,
               departures: Optional[List[str]] = None, duration: int = 120) -> FlightRoute:
    """Rota simples passando pelos códigos dados, ex: ["PVG", "ICN", "HND"]"""
    departures = departures or [f"2026-03-10T0{i}:00:00" for i in range(len(codes) - 1)]
    segments = [
        make_segment(o, d, departure=dep)
        for o, d, dep in zip(codes, codes[1:], departures)
    ]
    return FlightRoute(
        id=route_id,
        segments=segments,
        total_duration=duration,
        layovers=len(segments) - 1,
        price=price,
        currency="USD",
        deep_link=f"https://example.test/{route_id}",
        booking_url=f"https://example.test/{route_id}",
        route_type=RouteType.DIRECT if len(segments) == 1 else RouteType.LAYOVER,
    )


Response = Union[List[FlightRoute], Exception]


class FakeProvider:
    """Provedor em memória que registra cada chamada"""

    name = "Fake"

    def __init__(self, responses: Optional[Dict[Tuple[str, str], Response]] = None,
                 default: Optional[Callable[[SearchParams], Response]] = None):
        self.responses = responses or {}
        self.default = default
        self.calls: List[SearchParams] = []

    async def search(self, params: SearchParams) -> List[FlightRoute]:
        self.calls.append(params)
        response = self.responses.get((params.origin, params.destination))
        if response is None and self.default is not None:
            response = self.default(params)
        if isinstance(response, Exception):
            raise response
        return list(response or [])

    def pairs(self) -> List[Tuple[str, str]]:
        return [(p.origin, p.destination) for p in self.calls]


@pytest.fixture
def params() -> SearchParams:
    return SearchParams(
        origin="PVG",
        destination="HND",
        departure_date="2026-03-10",
        include_creative_routing=True,
    )
