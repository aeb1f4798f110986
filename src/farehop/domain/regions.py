"""
Regiões e hubs - Heurística geográfica para roteamento criativo
"""
from typing import Dict, List, Tuple

from .models import Region


# Aeroportos conhecidos por região (ordem de verificação importa)
REGION_AIRPORTS: Tuple[Tuple[Region, frozenset], ...] = (
    (Region.ASIA, frozenset({
        "PVG", "PEK", "ICN", "HND", "NRT", "HKG", "SIN",
        "BKK", "TPE", "KUL", "MNL", "CGK", "DEL", "BOM",
    })),
    (Region.EUROPE, frozenset({
        "LHR", "CDG", "AMS", "FRA", "MAD", "BCN", "FCO",
        "MUC", "IST", "ZRH", "VIE", "CPH", "ARN",
    })),
    (Region.MIDDLE_EAST, frozenset({"DXB", "DOH", "AUH", "CAI", "TLV", "AMM"})),
    (Region.NORTH_AMERICA, frozenset({
        "JFK", "LAX", "ORD", "DFW", "ATL", "SFO",
        "MIA", "SEA", "YVR", "YYZ", "MEX",
    })),
    (Region.PACIFIC, frozenset({"SYD", "MEL", "AKL", "BNE", "PER"})),
)

# Hubs candidatos por região, em ordem de prioridade
REGION_HUBS: Dict[Region, Tuple[str, ...]] = {
    Region.ASIA: ("ICN", "HND", "NRT", "HKG", "SIN", "BKK", "TPE", "KUL"),
    Region.EUROPE: ("AMS", "CDG", "FRA", "LHR", "IST", "MAD", "BCN", "MUC", "ZRH"),
    Region.MIDDLE_EAST: ("DXB", "DOH", "AUH", "CAI"),
    Region.NORTH_AMERICA: ("JFK", "LAX", "ORD", "DFW", "ATL", "SFO", "SEA", "YVR"),
    Region.PACIFIC: ("SYD", "MEL", "AKL"),
}

HUB_PRIORITY: Tuple[Region, ...] = (
    Region.ASIA,
    Region.EUROPE,
    Region.MIDDLE_EAST,
    Region.NORTH_AMERICA,
    Region.PACIFIC,
)

# Usado quando nenhuma das pontas é classificada
FALLBACK_REGIONS: Tuple[Region, ...] = (Region.ASIA, Region.EUROPE, Region.MIDDLE_EAST)


def region_of(airport_code: str) -> Region:
    """Classifica um aeroporto numa região; desconhecidos viram UNKNOWN"""
    code = airport_code.upper()
    for region, airports in REGION_AIRPORTS:
        if code in airports:
            return region
    return Region.UNKNOWN


def relevant_hubs(origin: str, destination: str) -> List[str]:
    """
    Lista priorizada de hubs para testar bilhetes separados.

    Não é uma busca em grafo: apenas plausibilidade geográfica. Regiões
    são consultadas em HUB_PRIORITY e a lista é deduplicada mantendo a
    primeira ocorrência.
    """
    endpoint_regions = {region_of(origin), region_of(destination)}

    candidates: List[str] = []
    for region in HUB_PRIORITY:
        if region in endpoint_regions:
            candidates.extend(REGION_HUBS[region])

    if not candidates:
        for region in FALLBACK_REGIONS:
            candidates.extend(REGION_HUBS[region])

    return list(dict.fromkeys(candidates))
