"""
Estratégia de bilhetes separados via hubs (roteamento criativo)
"""
import asyncio
import logging
from typing import List, Optional

from ...domain.models import (
    CreativeRoutingOption,
    FlightRoute,
    PriceBreakdown,
    RouteType,
    SearchParams,
)
from ...domain.regions import relevant_hubs
from ...application.interfaces import SearchStrategyInterface
from .direct_search import DirectSearchStrategy

logger = logging.getLogger(__name__)


class CreativeRoutingStrategy(SearchStrategyInterface):
    """Divide a viagem em dois trechos só de ida através de um hub"""

    def __init__(self, direct_search: DirectSearchStrategy, max_hubs: int = 5):
        self._direct_search = direct_search
        self._max_hubs = max_hubs

    async def execute(self, params: SearchParams) -> List[CreativeRoutingOption]:
        """Avalia os hubs mais relevantes e ordena as opções por preço total"""
        hubs = relevant_hubs(params.origin, params.destination)[:self._max_hubs]

        results = await asyncio.gather(
            *(self._search_via_hub(params, hub) for hub in hubs), return_exceptions=True
        )

        options: List[CreativeRoutingOption] = []
        for hub, result in zip(hubs, results):
            if isinstance(result, BaseException):
                logger.warning("Error searching via hub %s: %s", hub, result)
                continue
            if result is not None:
                options.append(result)

        return sorted(options, key=lambda o: o.total_price)

    async def _search_via_hub(self, params: SearchParams, hub: str) -> Optional[CreativeRoutingOption]:
        """Busca os dois trechos em paralelo e combina o mais barato de cada"""
        # Ambos os trechos são só de ida
        first_leg_params = params.model_copy(update={"destination": hub, "return_date": None})
        second_leg_params = params.model_copy(update={"origin": hub, "return_date": None})

        first_leg, second_leg = await asyncio.gather(
            self._direct_search.fetch_pair(first_leg_params),
            self._direct_search.fetch_pair(second_leg_params),
        )

        if not first_leg or not second_leg:
            logger.debug("Hub %s discarded: leg without offers", hub)
            return None

        # Não assume ordenação do provedor
        best_first = min(first_leg, key=lambda r: r.price)
        best_second = min(second_leg, key=lambda r: r.price)

        combined = self._combine_legs(best_first, best_second)
        return CreativeRoutingOption(
            routes=[combined],
            total_price=combined.price,
            description=f"Reserve bilhetes separados via {hub}",
            hub=hub,
        )

    @staticmethod
    def _combine_legs(first: FlightRoute, second: FlightRoute) -> FlightRoute:
        """Rota sintética; cada trecho continua precisando de reserva própria"""
        total_price = first.price + second.price

        return FlightRoute(
            id=f"creative-{first.id}-{second.id}",
            segments=[seg.model_copy(deep=True) for seg in first.segments + second.segments],
            total_duration=first.total_duration + second.total_duration,
            # +1 pela conexão no hub
            layovers=first.layovers + second.layovers + 1,
            price=total_price,
            currency=first.currency,
            deep_link=first.deep_link,
            booking_url=first.booking_url,
            route_type=RouteType.MULTI_CITY,
            is_creative_routing=True,
            price_breakdown=PriceBreakdown(
                segment_prices=[first.price, second.price],
                total_price=total_price,
            ),
        )
