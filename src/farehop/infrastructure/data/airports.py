"""
Base de aeroportos com códigos de cidade (multi-aeroporto)
"""
from typing import Dict, List, Optional

from pydantic import BaseModel


class AirportRecord(BaseModel):
    """Aeroporto ou código de cidade"""
    code: str
    name: str
    city: str
    country: str
    type: str = "airport"  # "airport" | "city"
    airports: Optional[List[str]] = None


_CITY_CODES = [
    AirportRecord(code="TYO", name="Tokyo (All Airports)", city="Tokyo", country="Japan",
                  type="city", airports=["HND", "NRT"]),
    AirportRecord(code="NYC", name="New York (All Airports)", city="New York", country="United States",
                  type="city", airports=["JFK", "LGA", "EWR"]),
    AirportRecord(code="LON", name="London (All Airports)", city="London", country="United Kingdom",
                  type="city", airports=["LHR", "LGW", "LCY", "STN", "LTN"]),
    AirportRecord(code="PAR", name="Paris (All Airports)", city="Paris", country="France",
                  type="city", airports=["CDG", "ORY"]),
    AirportRecord(code="SHA", name="Shanghai (All Airports)", city="Shanghai", country="China",
                  type="city", airports=["PVG", "SHA"]),
    AirportRecord(code="LAX", name="Los Angeles (All Airports)", city="Los Angeles", country="United States",
                  type="city", airports=["LAX", "BUR", "ONT", "SNA", "LGB"]),
    AirportRecord(code="CHI", name="Chicago (All Airports)", city="Chicago", country="United States",
                  type="city", airports=["ORD", "MDW"]),
    AirportRecord(code="WAS", name="Washington DC (All Airports)", city="Washington", country="United States",
                  type="city", airports=["IAD", "DCA", "BWI"]),
    AirportRecord(code="SFO", name="San Francisco Bay Area (All Airports)", city="San Francisco",
                  country="United States", type="city", airports=["SFO", "OAK", "SJC"]),
    AirportRecord(code="MIL", name="Milan (All Airports)", city="Milan", country="Italy",
                  type="city", airports=["MXP", "LIN", "BGY"]),
    AirportRecord(code="MOW", name="Moscow (All Airports)", city="Moscow", country="Russia",
                  type="city", airports=["SVO", "DME", "VKO"]),
    AirportRecord(code="BKK", name="Bangkok (All Airports)", city="Bangkok", country="Thailand",
                  type="city", airports=["BKK", "DMK"]),
    AirportRecord(code="SEL", name="Seoul (All Airports)", city="Seoul", country="South Korea",
                  type="city", airports=["ICN", "GMP"]),
]

# (código, nome, cidade, país)
_AIRPORTS = [
    ("JFK", "John F. Kennedy International Airport", "New York", "United States"),
    ("LGA", "LaGuardia Airport", "New York", "United States"),
    ("EWR", "Newark Liberty International Airport", "Newark", "United States"),
    ("ORD", "O'Hare International Airport", "Chicago", "United States"),
    ("MDW", "Chicago Midway International Airport", "Chicago", "United States"),
    ("ATL", "Hartsfield-Jackson Atlanta International Airport", "Atlanta", "United States"),
    ("DFW", "Dallas/Fort Worth International Airport", "Dallas", "United States"),
    ("SEA", "Seattle-Tacoma International Airport", "Seattle", "United States"),
    ("MIA", "Miami International Airport", "Miami", "United States"),
    ("YVR", "Vancouver International Airport", "Vancouver", "Canada"),
    ("YYZ", "Toronto Pearson International Airport", "Toronto", "Canada"),
    ("MEX", "Mexico City International Airport", "Mexico City", "Mexico"),
    ("LHR", "Heathrow Airport", "London", "United Kingdom"),
    ("LGW", "Gatwick Airport", "London", "United Kingdom"),
    ("CDG", "Charles de Gaulle Airport", "Paris", "France"),
    ("ORY", "Orly Airport", "Paris", "France"),
    ("AMS", "Amsterdam Airport Schiphol", "Amsterdam", "Netherlands"),
    ("FRA", "Frankfurt Airport", "Frankfurt", "Germany"),
    ("MUC", "Munich Airport", "Munich", "Germany"),
    ("MAD", "Adolfo Suárez Madrid-Barajas Airport", "Madrid", "Spain"),
    ("BCN", "Barcelona-El Prat Airport", "Barcelona", "Spain"),
    ("FCO", "Leonardo da Vinci-Fiumicino Airport", "Rome", "Italy"),
    ("ZRH", "Zurich Airport", "Zurich", "Switzerland"),
    ("IST", "Istanbul Airport", "Istanbul", "Turkey"),
    ("DXB", "Dubai International Airport", "Dubai", "United Arab Emirates"),
    ("AUH", "Abu Dhabi International Airport", "Abu Dhabi", "United Arab Emirates"),
    ("DOH", "Hamad International Airport", "Doha", "Qatar"),
    ("CAI", "Cairo International Airport", "Cairo", "Egypt"),
    ("HND", "Tokyo Haneda Airport", "Tokyo", "Japan"),
    ("NRT", "Narita International Airport", "Tokyo", "Japan"),
    ("ICN", "Incheon International Airport", "Seoul", "South Korea"),
    ("GMP", "Gimpo International Airport", "Seoul", "South Korea"),
    ("PVG", "Shanghai Pudong International Airport", "Shanghai", "China"),
    ("PEK", "Beijing Capital International Airport", "Beijing", "China"),
    ("HKG", "Hong Kong International Airport", "Hong Kong", "Hong Kong"),
    ("TPE", "Taiwan Taoyuan International Airport", "Taipei", "Taiwan"),
    ("SIN", "Singapore Changi Airport", "Singapore", "Singapore"),
    ("KUL", "Kuala Lumpur International Airport", "Kuala Lumpur", "Malaysia"),
    ("DMK", "Don Mueang International Airport", "Bangkok", "Thailand"),
    ("SYD", "Sydney Kingsford Smith Airport", "Sydney", "Australia"),
    ("MEL", "Melbourne Airport", "Melbourne", "Australia"),
    ("AKL", "Auckland Airport", "Auckland", "New Zealand"),
]

AIRPORTS: Dict[str, AirportRecord] = {record.code: record for record in _CITY_CODES}
for _code, _name, _city, _country in _AIRPORTS:
    AIRPORTS.setdefault(_code, AirportRecord(code=_code, name=_name, city=_city, country=_country))


def get_airport(code: str) -> Optional[AirportRecord]:
    """Busca aeroporto pelo código"""
    return AIRPORTS.get(code.upper())


def is_city_code(code: str) -> bool:
    """Verifica se o código representa vários aeroportos"""
    record = get_airport(code)
    return record is not None and record.type == "city"


def expand_city_code(code: str) -> List[str]:
    """
    Expande um código de cidade em todos os seus aeroportos.

    Para um aeroporto individual (ou código desconhecido) devolve apenas ele.
    """
    record = get_airport(code)
    if record and record.type == "city" and record.airports:
        return list(record.airports)
    return [code]
