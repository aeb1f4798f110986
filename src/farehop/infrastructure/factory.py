"""
Factory para criar instâncias configuradas dos serviços
"""
from typing import List

from .config import Config
from .providers.amadeus_provider import AmadeusProvider
from .strategies.creative_routing import CreativeRoutingStrategy
from .strategies.direct_search import DirectSearchStrategy
from ..application.services import FlightSearchEngine
from ..application.interfaces import FlightProviderInterface


class FlightSearchEngineFactory:
    """Factory para criar o motor de busca configurado"""

    @staticmethod
    def create(config: Config = None, providers: List[FlightProviderInterface] = None) -> FlightSearchEngine:
        """Cria uma instância completa do motor de busca"""
        if config is None:
            config = Config()

        if providers is None:
            providers = FlightSearchEngineFactory._create_providers(config)

        direct = DirectSearchStrategy(providers)
        creative = CreativeRoutingStrategy(direct, max_hubs=config.MAX_HUB_CANDIDATES)

        return FlightSearchEngine(direct_strategy=direct, creative_strategy=creative)

    @staticmethod
    def _create_providers(config: Config) -> List[FlightProviderInterface]:
        """Cria lista de provedores disponíveis"""
        providers = []

        if config.is_amadeus_configured():
            providers.append(AmadeusProvider(config))

        return providers
