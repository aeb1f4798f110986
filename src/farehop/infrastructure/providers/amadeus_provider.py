"""
Provedor Amadeus API
"""
import asyncio
import logging
import re
import time
from typing import Any, Dict, List, Optional

import httpx

from ...domain.models import Airport, FlightRoute, FlightSegment, RouteType, SearchParams
from ..config import Config
from ..data.airlines import generate_booking_url
from ..data.airports import get_airport

logger = logging.getLogger(__name__)

_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?")


class AuthenticationError(Exception):
    """Falha ao obter token OAuth2 da Amadeus"""


class TokenCache:
    """Token OAuth2 com expiração, injetado no provedor"""

    # Margem para não usar um token prestes a expirar
    EXPIRY_MARGIN_SECONDS = 60

    def __init__(self, clock=time.time):
        self._clock = clock
        self._token: Optional[str] = None
        self._expires_at = 0.0

    def get(self) -> Optional[str]:
        if self._token and self._expires_at > self._clock():
            return self._token
        return None

    def store(self, token: str, expires_in: int) -> None:
        self._token = token
        self._expires_at = self._clock() + max(0, expires_in - self.EXPIRY_MARGIN_SECONDS)

    def clear(self) -> None:
        self._token = None
        self._expires_at = 0.0


def parse_duration(duration: Optional[str]) -> int:
    """Converte duração ISO-8601 (PT#H#M) em minutos"""
    if not duration:
        return 0
    match = _DURATION_RE.match(duration)
    if not match:
        return 0
    hours, minutes = match.groups()
    return int(hours or 0) * 60 + int(minutes or 0)


class AmadeusProvider:
    """Provedor de voos via Amadeus API"""

    name = "Amadeus"

    def __init__(
        self,
        config: Config = Config(),
        token_cache: Optional[TokenCache] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._config = config
        self._base_url = self._config.get_amadeus_base_url()
        self._token_cache = token_cache or TokenCache()
        self._transport = transport
        # Criado no primeiro uso, dentro do event loop da busca
        self._token_lock: Optional[asyncio.Lock] = None

    async def search(self, params: SearchParams) -> List[FlightRoute]:
        """Busca ofertas via Amadeus API"""
        if not self._config.is_amadeus_configured():
            return []

        async with httpx.AsyncClient(timeout=self._config.REQUEST_TIMEOUT, transport=self._transport) as client:
            try:
                token = await self._get_access_token(client)
                response = await client.get(
                    f"{self._base_url}/v2/shopping/flight-offers",
                    params=self._build_search_params(params),
                    headers={"Authorization": f"Bearer {token}"},
                )
                response.raise_for_status()
                data = response.json()
            except AuthenticationError as exc:
                logger.warning("Amadeus authentication failed: %s", exc)
                return []
            except (httpx.HTTPError, ValueError) as exc:
                logger.warning(
                    "Amadeus search %s->%s failed: %s", params.origin, params.destination, exc
                )
                return []

        return self._parse_response(data)

    async def _get_access_token(self, client: httpx.AsyncClient) -> str:
        """Obtém token de acesso OAuth2, reutilizando o cache enquanto válido

        Buscas concorrentes compartilham uma única renovação do token.
        """
        cached = self._token_cache.get()
        if cached:
            return cached

        if self._token_lock is None:
            self._token_lock = asyncio.Lock()

        async with self._token_lock:
            cached = self._token_cache.get()
            if cached:
                return cached
            return await self._request_access_token(client)

    async def _request_access_token(self, client: httpx.AsyncClient) -> str:
        try:
            response = await client.post(
                f"{self._base_url}/v1/security/oauth2/token",
                data={
                    "grant_type": "client_credentials",
                    "client_id": self._config.AMADEUS_API_KEY,
                    "client_secret": self._config.AMADEUS_API_SECRET,
                },
            )
            response.raise_for_status()
            payload = response.json()
            token = payload["access_token"]
        except (httpx.HTTPError, ValueError, KeyError) as exc:
            raise AuthenticationError("Failed to authenticate with Amadeus API") from exc

        self._token_cache.store(token, int(payload.get("expires_in", 0)))
        return token

    def _build_search_params(self, params: SearchParams) -> Dict[str, str]:
        """Constrói parâmetros da requisição"""
        query = {
            "originLocationCode": params.origin,
            "destinationLocationCode": params.destination,
            "departureDate": params.departure_date,
            "adults": str(params.adults),
            "children": str(params.children),
            "infants": str(params.infants),
            "travelClass": params.cabin_class.value.upper(),
            "nonStop": "true" if params.non_stop_only else "false",
            "currencyCode": self._config.DEFAULT_CURRENCY,
            "max": str(self._config.MAX_OFFERS),
        }
        if params.return_date:
            query["returnDate"] = params.return_date
        return query

    def _parse_response(self, data: Dict[str, Any]) -> List[FlightRoute]:
        """Converte resposta da API em rotas"""
        offers = data.get("data")
        if not isinstance(offers, list):
            return []

        routes = []
        for offer_data in offers:
            try:
                if not self._is_airline_direct(offer_data):
                    continue
                routes.append(self._parse_offer(offer_data))
            except (KeyError, IndexError, TypeError, ValueError) as exc:
                logger.debug("Skipping malformed Amadeus offer %s: %s", offer_data.get("id"), exc)
                continue

        return routes

    @staticmethod
    def _is_airline_direct(offer_data: Dict[str, Any]) -> bool:
        """Mantém apenas tarifas vendidas pela própria companhia operadora"""
        validating = offer_data.get("validatingAirlineCodes") or []
        itineraries = offer_data.get("itineraries") or [{}]
        segments = itineraries[0].get("segments") or [{}]
        return segments[0].get("carrierCode") in validating

    def _parse_offer(self, offer_data: Dict[str, Any]) -> FlightRoute:
        # Apenas o primeiro itinerário (ida) é mapeado
        itinerary = offer_data["itineraries"][0]
        offer_id = str(offer_data["id"])

        segments = []
        for idx, seg in enumerate(itinerary["segments"]):
            carrier = seg["carrierCode"]
            segments.append(FlightSegment(
                id=f"{offer_id}-{idx}",
                origin=self._airport(seg["departure"]),
                destination=self._airport(seg["arrival"]),
                departure=seg["departure"]["at"],
                arrival=seg["arrival"]["at"],
                duration_minutes=parse_duration(seg.get("duration")),
                airline=carrier,
                flight_number=f"{carrier}{seg['number']}",
                aircraft=(seg.get("aircraft") or {}).get("code"),
                booking_class=seg.get("bookingClass"),
            ))

        link = generate_booking_url(
            segments[0].airline,
            segments[0].origin.code,
            segments[-1].destination.code,
            segments[0].departure.split("T")[0],
        )

        return FlightRoute(
            id=offer_id,
            segments=segments,
            total_duration=parse_duration(itinerary.get("duration")),
            layovers=len(segments) - 1,
            price=float(offer_data["price"]["total"]),
            currency=self._config.DEFAULT_CURRENCY,
            deep_link=link,
            booking_url=link,
            route_type=RouteType.DIRECT if len(segments) == 1 else RouteType.LAYOVER,
            is_creative_routing=False,
        )

    @staticmethod
    def _airport(endpoint: Dict[str, Any]) -> Airport:
        code = endpoint["iataCode"]
        record = get_airport(code)
        if record:
            return Airport(code=code, name=record.name, city=record.city, country=record.country)
        return Airport(code=code, name=endpoint.get("terminal") or "", city=code)
