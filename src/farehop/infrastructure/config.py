"""
Configuração da aplicação
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Configuração centralizada"""

    # API Keys
    AMADEUS_API_KEY = os.getenv("AMADEUS_API_KEY", "")
    AMADEUS_API_SECRET = os.getenv("AMADEUS_API_SECRET", "")
    AMADEUS_ENV = os.getenv("AMADEUS_ENV", "TEST").upper()

    # Preços sempre normalizados para uma única moeda
    DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "USD")

    # Limites
    REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "30"))
    MAX_OFFERS = int(os.getenv("MAX_OFFERS", "50"))
    MAX_HUB_CANDIDATES = int(os.getenv("MAX_HUB_CANDIDATES", "5"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @classmethod
    def is_amadeus_configured(cls) -> bool:
        return bool(cls.AMADEUS_API_KEY and cls.AMADEUS_API_SECRET)

    @classmethod
    def get_amadeus_base_url(cls) -> str:
        """Retorna a base URL da Amadeus conforme ambiente."""
        return "https://api.amadeus.com" if cls.AMADEUS_ENV == "PRODUCTION" else "https://test.api.amadeus.com"
