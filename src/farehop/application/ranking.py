"""
Deduplicação e ordenação de rotas por preço
"""
from typing import Dict, Iterable, List

from ..domain.models import FlightRoute


def dedupe_and_rank(routes: Iterable[FlightRoute]) -> List[FlightRoute]:
    """
    Colapsa rotas com a mesma cadeia de segmentos e ordena por preço.

    A identidade é a sequência origem-destino-partida de cada segmento, com
    o horário comparado literalmente. Em colisão fica a mais barata; em
    empate, a primeira encontrada. A ordenação é estável.
    """
    unique: Dict[str, FlightRoute] = {}

    for route in routes:
        key = route.dedup_key
        kept = unique.get(key)
        if kept is None or kept.price > route.price:
            unique[key] = route

    return sorted(unique.values(), key=lambda r: r.price)
