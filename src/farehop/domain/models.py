"""
Domain Models - Entidades de negócio puras
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class CabinClass(str, Enum):
    """Classes de cabine suportadas"""
    ECONOMY = "economy"
    PREMIUM_ECONOMY = "premium_economy"
    BUSINESS = "business"
    FIRST = "first"


class RouteType(str, Enum):
    """Tipo de itinerário"""
    DIRECT = "direct"
    LAYOVER = "layover"
    MULTI_CITY = "multi-city"


class Region(str, Enum):
    """Regiões geográficas usadas apenas para filtrar hubs"""
    ASIA = "asia"
    EUROPE = "europe"
    MIDDLE_EAST = "middle-east"
    NORTH_AMERICA = "north-america"
    PACIFIC = "pacific"
    UNKNOWN = "unknown"


class Airport(BaseModel):
    """Aeroporto referenciado por um segmento"""
    code: str = Field(..., description="IATA código")
    name: str = ""
    city: str = ""
    country: str = ""


class FlightSegment(BaseModel):
    """Segmento de voo individual"""
    id: str
    origin: Airport
    destination: Airport
    departure: str = Field(..., description="ISO datetime partida")
    arrival: str = Field(..., description="ISO datetime chegada")
    duration_minutes: int = Field(0, ge=0)
    airline: str
    flight_number: str
    aircraft: Optional[str] = None
    booking_class: Optional[str] = None


class PriceBreakdown(BaseModel):
    """Preço por trecho de uma rota combinada"""
    segment_prices: List[float]
    total_price: float

    @model_validator(mode="after")
    def _check_total(self) -> "PriceBreakdown":
        if abs(sum(self.segment_prices) - self.total_price) > 0.01:
            raise ValueError("segment_prices must sum to total_price")
        return self


class FlightRoute(BaseModel):
    """Itinerário com preço, composto por segmentos contíguos"""
    id: str
    segments: List[FlightSegment] = Field(..., min_length=1)
    total_duration: int = Field(0, ge=0, description="Duração total em minutos")
    layovers: int = Field(0, ge=0)
    price: float = Field(..., ge=0)
    currency: str
    deep_link: str = ""
    booking_url: str = ""
    route_type: RouteType = RouteType.DIRECT
    is_creative_routing: bool = False
    price_breakdown: Optional[PriceBreakdown] = None

    @model_validator(mode="after")
    def _check_contiguous(self) -> "FlightRoute":
        for current, following in zip(self.segments, self.segments[1:]):
            if current.destination.code != following.origin.code:
                raise ValueError(
                    f"segments are not contiguous: {current.destination.code} -> {following.origin.code}"
                )
        return self

    @property
    def dedup_key(self) -> str:
        """Identidade física do itinerário, independente da consulta que o gerou"""
        return "|".join(
            f"{seg.origin.code}-{seg.destination.code}-{seg.departure}" for seg in self.segments
        )

    @property
    def route_summary(self) -> str:
        """Resumo da rota"""
        codes = [self.segments[0].origin.code] + [seg.destination.code for seg in self.segments]
        return " → ".join(codes)


class CreativeRoutingOption(BaseModel):
    """Plano de reserva em bilhetes separados via um hub"""
    routes: List[FlightRoute] = Field(..., min_length=1)
    total_price: float = Field(..., ge=0)
    description: str
    hub: Optional[str] = None
    savings: Optional[float] = None


class Savings(BaseModel):
    """Economia da melhor opção criativa sobre a melhor direta"""
    amount: float
    percentage: float
    description: str


class SearchParams(BaseModel):
    """Critérios de busca (imutáveis)"""
    model_config = ConfigDict(frozen=True)

    origin: str = Field(..., min_length=3, max_length=3)
    destination: str = Field(..., min_length=3, max_length=3)
    departure_date: str = Field(..., description="YYYY-MM-DD")
    return_date: Optional[str] = None
    adults: int = Field(default=1, ge=1)
    children: int = Field(default=0, ge=0)
    infants: int = Field(default=0, ge=0)
    cabin_class: CabinClass = CabinClass.ECONOMY
    max_layovers: Optional[int] = Field(None, ge=0)
    include_creative_routing: bool = False

    @field_validator("origin", "destination", mode="before")
    @classmethod
    def _upper_code(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("departure_date", "return_date")
    @classmethod
    def _iso_date(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            datetime.strptime(value, "%Y-%m-%d")
        return value

    @property
    def non_stop_only(self) -> bool:
        return self.max_layovers == 0

    def is_round_trip(self) -> bool:
        """Verifica se é ida e volta"""
        return bool(self.return_date)


class SearchComparison(BaseModel):
    """Resultado da comparação entre voos diretos e rotas criativas"""
    direct_flights: List[FlightRoute] = Field(default_factory=list)
    creative_routes: List[CreativeRoutingOption] = Field(default_factory=list)
    savings: Optional[Savings] = None


class SearchResult(BaseModel):
    """Resultado de uma busca"""
    search_id: str
    params: SearchParams
    direct_flights: List[FlightRoute]
    creative_routes: List[CreativeRoutingOption]
    savings: Optional[Savings] = None
    timestamp: datetime
    search_duration_ms: int

    @property
    def results_count(self) -> int:
        return len(self.direct_flights) + len(self.creative_routes)

    @property
    def cheapest_price(self) -> Optional[float]:
        """Preço do voo direto mais barato"""
        if not self.direct_flights:
            return None
        return self.direct_flights[0].price
