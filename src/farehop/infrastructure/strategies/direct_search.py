"""
Estratégia de busca direta com expansão de códigos de cidade
"""
import asyncio
import itertools
import logging
from typing import List, Optional

from ...domain.models import SearchParams, FlightRoute
from ...application.interfaces import CityCodeExpander, FlightProviderInterface, SearchStrategyInterface
from ..data.airports import expand_city_code

logger = logging.getLogger(__name__)


class DirectSearchStrategy(SearchStrategyInterface):
    """Busca todas as combinações de aeroportos entre origem e destino"""

    def __init__(
        self,
        providers: List[FlightProviderInterface],
        expander: Optional[CityCodeExpander] = None,
    ):
        self._providers = providers
        self._expand = expander or expand_city_code

    async def execute(self, params: SearchParams) -> List[FlightRoute]:
        """Executa busca para cada par (aeroporto origem, aeroporto destino)"""
        origins = self._expand(params.origin)
        destinations = self._expand(params.destination)

        if len(origins) == 1 and len(destinations) == 1:
            return await self.fetch_pair(params)

        pair_params = [
            params.model_copy(update={"origin": origin, "destination": destination})
            for origin, destination in itertools.product(origins, destinations)
        ]
        results = await asyncio.gather(
            *(self.fetch_pair(p) for p in pair_params), return_exceptions=True
        )

        routes: List[FlightRoute] = []
        for pair, result in zip(pair_params, results):
            if isinstance(result, BaseException):
                logger.warning("Search %s->%s failed: %s", pair.origin, pair.destination, result)
                continue
            routes.extend(result)

        return routes

    async def fetch_pair(self, params: SearchParams) -> List[FlightRoute]:
        """
        Busca um único par origem/destino em todos os provedores.

        Falhas de provedor viram lista vazia para aquele provedor.
        """
        results = await asyncio.gather(
            *(provider.search(params) for provider in self._providers), return_exceptions=True
        )

        routes: List[FlightRoute] = []
        for provider, result in zip(self._providers, results):
            if isinstance(result, BaseException):
                logger.warning(
                    "Provider %s failed for %s->%s: %s",
                    getattr(provider, "name", provider), params.origin, params.destination, result,
                )
                continue
            routes.extend(result)

        return routes
