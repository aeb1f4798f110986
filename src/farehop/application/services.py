"""
Application Services - Casos de uso principais
"""
import asyncio
import logging
import time
import uuid
from datetime import datetime
from typing import List, Tuple

from ..domain.models import (
    CreativeRoutingOption,
    FlightRoute,
    SearchComparison,
    SearchParams,
    SearchResult,
)
from .comparison import compare
from .interfaces import SearchStrategyInterface
from .ranking import dedupe_and_rank

logger = logging.getLogger(__name__)


class FlightSearchEngine:
    """Serviço principal: busca direta, roteamento criativo e comparação"""

    def __init__(
        self,
        direct_strategy: SearchStrategyInterface,
        creative_strategy: SearchStrategyInterface,
    ):
        self._direct_strategy = direct_strategy
        self._creative_strategy = creative_strategy

    async def search_all_apis(self, params: SearchParams) -> List[FlightRoute]:
        """Busca direta (com expansão de cidades), deduplicada e ordenada"""
        routes = await self._direct_strategy.execute(params)
        return dedupe_and_rank(routes)

    async def find_creative_routes(self, params: SearchParams) -> List[CreativeRoutingOption]:
        """Opções de bilhetes separados, ordenadas por preço total"""
        return await self._creative_strategy.execute(params)

    async def search_with_creative_routing(
        self, params: SearchParams
    ) -> Tuple[List[FlightRoute], List[CreativeRoutingOption]]:
        """Executa busca direta e criativa em paralelo"""
        direct, creative = await asyncio.gather(
            self.search_all_apis(params),
            self.find_creative_routes(params),
        )
        return direct, creative

    async def compare_with_creative_routing(self, params: SearchParams) -> SearchComparison:
        """Busca completa com cálculo de economia"""
        direct, creative = await self.search_with_creative_routing(params)
        savings = compare(direct, creative)

        if savings:
            logger.info(
                "Creative routing %s->%s saves %.2f (%.0f%%)",
                params.origin, params.destination, savings.amount, savings.percentage,
            )

        return SearchComparison(direct_flights=direct, creative_routes=creative, savings=savings)

    async def search(self, params: SearchParams) -> SearchResult:
        """Executa a busca conforme os parâmetros e empacota o resultado"""
        started = time.perf_counter()

        if params.include_creative_routing:
            comparison = await self.compare_with_creative_routing(params)
        else:
            comparison = SearchComparison(direct_flights=await self.search_all_apis(params))

        duration_ms = int((time.perf_counter() - started) * 1000)
        logger.info(
            "Search %s->%s on %s: %d direct, %d creative in %d ms",
            params.origin, params.destination, params.departure_date,
            len(comparison.direct_flights), len(comparison.creative_routes), duration_ms,
        )

        return SearchResult(
            search_id=uuid.uuid4().hex,
            params=params,
            direct_flights=comparison.direct_flights,
            creative_routes=comparison.creative_routes,
            savings=comparison.savings,
            timestamp=datetime.now(),
            search_duration_ms=duration_ms,
        )
