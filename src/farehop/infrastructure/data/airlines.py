"""
Companhias aéreas e templates de link de reserva direta
"""
from typing import Dict, NamedTuple, Optional


class AirlineData(NamedTuple):
    code: str
    name: str
    website: str
    booking_url_template: str


AIRLINES: Dict[str, AirlineData] = {
    "AA": AirlineData("AA", "American Airlines", "https://www.aa.com",
                      "https://www.aa.com/booking/find-flights?locale=en_US&from={origin}&to={destination}&departDate={date}"),
    "UA": AirlineData("UA", "United Airlines", "https://www.united.com",
                      "https://www.united.com/en/us/fsr/choose-flights?f={origin}&t={destination}&d={date}&tt=1"),
    "DL": AirlineData("DL", "Delta Air Lines", "https://www.delta.com",
                      "https://www.delta.com/flight-search/book-a-flight?from={origin}&to={destination}&departureDate={date}"),
    "WN": AirlineData("WN", "Southwest Airlines", "https://www.southwest.com",
                      "https://www.southwest.com/air/booking/search.html?originationAirportCode={origin}&destinationAirportCode={destination}&departureDate={date}"),
    "AS": AirlineData("AS", "Alaska Airlines", "https://www.alaskaair.com",
                      "https://www.alaskaair.com/booking/flights?from={origin}&to={destination}&departureDate={date}"),
    "B6": AirlineData("B6", "JetBlue Airways", "https://www.jetblue.com",
                      "https://www.jetblue.com/booking/flights?from={origin}&to={destination}&depart={date}"),
    "NK": AirlineData("NK", "Spirit Airlines", "https://www.spirit.com",
                      "https://www.spirit.com/book/flights?departure={origin}&destination={destination}&departureDate={date}"),
    "F9": AirlineData("F9", "Frontier Airlines", "https://www.flyfrontier.com",
                      "https://www.flyfrontier.com/travel/flights/?departureStation={origin}&arrivalStation={destination}&departureDate={date}"),
    "BA": AirlineData("BA", "British Airways", "https://www.britishairways.com",
                      "https://www.britishairways.com/travel/book/public/en_us?eId=106019&from={origin}&to={destination}&depDate={date}"),
    "LH": AirlineData("LH", "Lufthansa", "https://www.lufthansa.com",
                      "https://www.lufthansa.com/us/en/flight-search?origin={origin}&destination={destination}&outbound-date={date}"),
    "AF": AirlineData("AF", "Air France", "https://www.airfrance.com",
                      "https://www.airfrance.com/search/offers?origin={origin}&destination={destination}&departureDate={date}"),
    "KL": AirlineData("KL", "KLM Royal Dutch Airlines", "https://www.klm.com",
                      "https://www.klm.com/search/offers?origin={origin}&destination={destination}&departureDate={date}"),
    "IB": AirlineData("IB", "Iberia", "https://www.iberia.com",
                      "https://www.iberia.com/us/flights/{origin}-{destination}/?dates={date}"),
    "AY": AirlineData("AY", "Finnair", "https://www.finnair.com",
                      "https://www.finnair.com/en/flight-search?origin={origin}&destination={destination}&departureDate={date}"),
    "SK": AirlineData("SK", "SAS Scandinavian Airlines", "https://www.flysas.com",
                      "https://www.flysas.com/en/book-flights/?search=OW_{origin}-{destination}-{date}"),
    "TP": AirlineData("TP", "TAP Air Portugal", "https://www.flytap.com",
                      "https://www.flytap.com/en-us/book-a-trip?origin={origin}&destination={destination}&departure={date}"),
    "LX": AirlineData("LX", "Swiss International Air Lines", "https://www.swiss.com",
                      "https://www.swiss.com/us/en/book/flight-selection?origin={origin}&destination={destination}&outboundDate={date}"),
    "OS": AirlineData("OS", "Austrian Airlines", "https://www.austrian.com",
                      "https://www.austrian.com/us/en/book/flight-selection?origin={origin}&destination={destination}&outboundDate={date}"),
    "FR": AirlineData("FR", "Ryanair", "https://www.ryanair.com",
                      "https://www.ryanair.com/us/en/trip/flights/select?adults=1&dateOut={date}&originIata={origin}&destinationIata={destination}"),
    "U2": AirlineData("U2", "easyJet", "https://www.easyjet.com",
                      "https://www.easyjet.com/en/booking?origin={origin}&destination={destination}&departureDate={date}"),
    "NH": AirlineData("NH", "All Nippon Airways (ANA)", "https://www.ana.co.jp",
                      "https://www.ana.co.jp/en/us/book-flights/?dep={origin}&arr={destination}&depDate={date}"),
    "JL": AirlineData("JL", "Japan Airlines", "https://www.jal.co.jp",
                      "https://www.jal.co.jp/en/flights/reservation/?dep={origin}&arr={destination}&depdate={date}"),
    "SQ": AirlineData("SQ", "Singapore Airlines", "https://www.singaporeair.com",
                      "https://www.singaporeair.com/en_UK/plan-and-book/book-flight/?from={origin}&to={destination}&dep={date}"),
    "CX": AirlineData("CX", "Cathay Pacific", "https://www.cathaypacific.com",
                      "https://www.cathaypacific.com/cx/en_US/book-a-trip/flights.html?s={origin}&d={destination}&dd={date}"),
    "TG": AirlineData("TG", "Thai Airways", "https://www.thaiairways.com",
                      "https://www.thaiairways.com/en_US/book_online/choose_flights.page?from={origin}&to={destination}&depart={date}"),
    "KE": AirlineData("KE", "Korean Air", "https://www.koreanair.com",
                      "https://www.koreanair.com/us/en/booking/flight-search?origin={origin}&destination={destination}&departure={date}"),
    "OZ": AirlineData("OZ", "Asiana Airlines", "https://flyasiana.com",
                      "https://flyasiana.com/I/US/en/booking/booking-main.do?dep={origin}&arr={destination}&depDate={date}"),
    "CA": AirlineData("CA", "Air China", "https://www.airchina.com",
                      "https://www.airchina.com/US/GB/book-a-flight?from={origin}&to={destination}&date={date}"),
    "MU": AirlineData("MU", "China Eastern Airlines", "https://us.ceair.com",
                      "https://us.ceair.com/booking/search?departCity={origin}&arriveCity={destination}&departDate={date}"),
    "CZ": AirlineData("CZ", "China Southern Airlines", "https://www.csair.com",
                      "https://www.csair.com/us/en/tourguide/booking_ticket/?dep={origin}&arr={destination}&date={date}"),
    "EK": AirlineData("EK", "Emirates", "https://www.emirates.com",
                      "https://www.emirates.com/us/english/book-a-flight/search?from={origin}&to={destination}&dd={date}"),
    "QR": AirlineData("QR", "Qatar Airways", "https://www.qatarairways.com",
                      "https://www.qatarairways.com/en-us/booking.html?origin={origin}&destination={destination}&departure={date}"),
    "EY": AirlineData("EY", "Etihad Airways", "https://www.etihad.com",
                      "https://www.etihad.com/en-us/flights-from-{origin}-to-{destination}?adults=1&departureDate={date}"),
    "LA": AirlineData("LA", "LATAM Airlines", "https://www.latam.com",
                      "https://www.latam.com/en_us/flights/flight-search?origin={origin}&destination={destination}&outbound={date}"),
    "CM": AirlineData("CM", "Copa Airlines", "https://www.copaair.com",
                      "https://www.copaair.com/en/web/us/booking-path?from={origin}&to={destination}&date={date}"),
    "AM": AirlineData("AM", "Aeroméxico", "https://www.aeromexico.com",
                      "https://www.aeromexico.com/en-us/book-now?dep={origin}&arr={destination}&depDate={date}"),
    "AV": AirlineData("AV", "Avianca", "https://www.avianca.com",
                      "https://www.avianca.com/us/en/booking/?origin={origin}&destination={destination}&departure={date}"),
    "AC": AirlineData("AC", "Air Canada", "https://www.aircanada.com",
                      "https://www.aircanada.com/en/flights/{origin}-{destination}?date={date}"),
    "NZ": AirlineData("NZ", "Air New Zealand", "https://www.airnewzealand.com",
                      "https://www.airnewzealand.com/book-a-flight?from={origin}&to={destination}&departure={date}"),
    "QF": AirlineData("QF", "Qantas", "https://www.qantas.com",
                      "https://www.qantas.com/au/en/booking/flights/vacations/search.html?origin={origin}&destination={destination}&departureDate={date}"),
    "VA": AirlineData("VA", "Virgin Australia", "https://www.virginaustralia.com",
                      "https://www.virginaustralia.com/au/en/book/flights/?origin={origin}&destination={destination}&departureDate={date}"),
    "VS": AirlineData("VS", "Virgin Atlantic", "https://www.virginatlantic.com",
                      "https://www.virginatlantic.com/book/flights?from={origin}&to={destination}&date={date}"),
    "TK": AirlineData("TK", "Turkish Airlines", "https://www.turkishairlines.com",
                      "https://www.turkishairlines.com/en-us/flights/booking/?originCode={origin}&destinationCode={destination}&departureDate={date}"),
    "AI": AirlineData("AI", "Air India", "https://www.airindia.com",
                      "https://www.airindia.com/us/en/booking/flight-booking.html?from={origin}&to={destination}&date={date}"),
    "SA": AirlineData("SA", "South African Airways", "https://www.flysaa.com",
                      "https://www.flysaa.com/book/flights?from={origin}&to={destination}&date={date}"),
    "ET": AirlineData("ET", "Ethiopian Airlines", "https://www.ethiopianairlines.com",
                      "https://www.ethiopianairlines.com/us/booking/flight-search?origin={origin}&destination={destination}&departure={date}"),
}


def get_airline_info(code: str) -> Optional[AirlineData]:
    return AIRLINES.get(code)


def get_airline_name(code: str) -> str:
    """Nome da companhia, ou o próprio código se desconhecida"""
    airline = get_airline_info(code)
    return airline.name if airline else code


def generate_booking_url(airline_code: str, origin: str, destination: str, date: str) -> str:
    """Link de reserva direta na companhia; Google Flights como alternativo"""
    airline = get_airline_info(airline_code)
    if airline:
        return (
            airline.booking_url_template
            .replace("{origin}", origin)
            .replace("{destination}", destination)
            .replace("{date}", date)
        )
    return f"https://www.google.com/flights?hl=en#flt={origin}.{destination}.{date}"
