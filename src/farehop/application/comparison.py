"""
Comparação entre a melhor opção direta e a melhor rota criativa
"""
from typing import List, Optional

from ..domain.models import CreativeRoutingOption, FlightRoute, Savings


def compare(
    direct_flights: List[FlightRoute],
    creative_options: List[CreativeRoutingOption],
) -> Optional[Savings]:
    """Economia da rota criativa, apenas quando estritamente mais barata"""
    if not direct_flights or not creative_options:
        return None

    # Ambas as listas já chegam ordenadas por preço
    cheapest_direct = direct_flights[0]
    cheapest_creative = creative_options[0]

    if cheapest_creative.total_price >= cheapest_direct.price:
        return None

    amount = cheapest_direct.price - cheapest_creative.total_price
    percentage = amount / cheapest_direct.price * 100

    return Savings(
        amount=amount,
        percentage=percentage,
        description=f"Economize {percentage:.0f}%: {cheapest_creative.description}",
    )
