"""
Interfaces/Contratos para Application Layer
"""
from abc import ABC, abstractmethod
from typing import Callable, List, Protocol

from ..domain.models import SearchParams, FlightRoute


class FlightProviderInterface(Protocol):
    """
    Interface para provedores de voo.

    Deve devolver lista vazia (não erro) quando não há ofertas e
    normalizar preços para uma única moeda.
    """
    name: str

    async def search(self, params: SearchParams) -> List[FlightRoute]:
        """Busca ofertas para um par origem/destino"""
        ...


# Expande código de cidade em aeroportos (identidade para aeroporto simples)
CityCodeExpander = Callable[[str], List[str]]


class SearchStrategyInterface(ABC):
    """Interface para estratégias de busca"""

    @abstractmethod
    async def execute(self, params: SearchParams) -> list:
        """Executa a estratégia de busca"""
        pass
