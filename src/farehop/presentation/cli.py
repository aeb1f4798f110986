"""
Interface de linha de comando
"""
import asyncio
import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from ..domain.models import CabinClass, CreativeRoutingOption, FlightRoute, SearchParams, SearchResult
from ..infrastructure.config import Config
from ..infrastructure.data.airlines import get_airline_name
from ..infrastructure.factory import FlightSearchEngineFactory


def configure_logging(console: Console, level: str = Config.LOG_LEVEL) -> None:
    """Logs vão para o mesmo console do rich"""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


class FareHopCLI:
    """Interface CLI para o farehop"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.engine = FlightSearchEngineFactory.create()

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Executa a interface CLI"""
        args = self._parse_arguments(argv)

        try:
            params = self._build_search_params(args)
        except ValidationError as e:
            self.console.print(f"[red]❌ Parâmetros inválidos:[/red]\n{e}")
            return 2

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
        ) as progress:
            task = progress.add_task("Buscando voos e rotas criativas...", total=None)

            result = asyncio.run(self.engine.search(params))

            progress.update(task, description="Busca concluída!")

        self._display_results(result, args.limit)
        return 0

    def _parse_arguments(self, argv: Optional[List[str]]) -> argparse.Namespace:
        """Configura e processa argumentos da linha de comando"""
        parser = argparse.ArgumentParser(
            description="farehop - Voos mais baratos com bilhetes separados via hubs",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Exemplos de uso:
  farehop --origin PVG --destination HND --depart 2026-03-10 --creative
  farehop --origin NYC --destination LON --depart 2026-05-02 --return 2026-05-12
            """
        )

        parser.add_argument("--origin", required=True,
                          help="Código IATA origem ou cidade (ex: NYC, TYO)")
        parser.add_argument("--destination", required=True,
                          help="Código IATA destino ou cidade")
        parser.add_argument("--depart", required=True,
                          help="Data partida YYYY-MM-DD")
        parser.add_argument("--return", dest="return_date",
                          help="Data retorno YYYY-MM-DD (para ida e volta)")
        parser.add_argument("--adults", type=int, default=1,
                          help="Número de adultos (padrão: 1)")
        parser.add_argument("--children", type=int, default=0,
                          help="Número de crianças")
        parser.add_argument("--infants", type=int, default=0,
                          help="Número de bebês")
        parser.add_argument("--cabin",
                          choices=[c.value for c in CabinClass],
                          default=CabinClass.ECONOMY.value,
                          help="Classe de cabine")
        parser.add_argument("--max-layovers", type=int,
                          help="Número máximo de conexões (0 = apenas voos diretos)")
        parser.add_argument("--creative", action="store_true",
                          help="Inclui roteamento criativo via hubs")
        parser.add_argument("--limit", type=int, default=20,
                          help="Limite de voos exibidos (padrão: 20)")

        return parser.parse_args(argv)

    def _build_search_params(self, args: argparse.Namespace) -> SearchParams:
        """Constrói parâmetros de busca a partir dos argumentos"""
        return SearchParams(
            origin=args.origin,
            destination=args.destination,
            departure_date=args.depart,
            return_date=args.return_date,
            adults=args.adults,
            children=args.children,
            infants=args.infants,
            cabin_class=args.cabin,
            max_layovers=args.max_layovers,
            include_creative_routing=args.creative,
        )

    def _display_results(self, result: SearchResult, limit: int) -> None:
        """Exibe resultados da busca"""
        if not result.direct_flights and not result.creative_routes:
            self.console.print(
                Panel.fit(
                    "[yellow]Nenhum voo encontrado.[/yellow]\n"
                    "Verifique as datas ou se as chaves da Amadeus estão configuradas.",
                    title="Sem Resultados",
                    border_style="yellow"
                )
            )
            return

        if result.direct_flights:
            self.console.print(self._flights_table(result.direct_flights[:limit], len(result.direct_flights)))

        if result.creative_routes:
            self.console.print(self._creative_table(result.creative_routes))

        if result.savings:
            self.console.print(Panel.fit(
                f"💰 {result.savings.description}\n"
                f"Economia: {result.savings.amount:.2f} ({result.savings.percentage:.1f}%)",
                title="Roteamento Criativo",
                border_style="green",
            ))

        self.console.print(Panel.fit(
            f"• Resultados: {result.results_count}\n"
            f"• Duração da busca: {result.search_duration_ms} ms\n"
            f"• Busca realizada: {result.timestamp.strftime('%d/%m/%Y %H:%M')}",
            title="Resumo",
            border_style="blue",
        ))

    @staticmethod
    def _flights_table(flights: List[FlightRoute], total: int) -> Table:
        table = Table(show_lines=True, title=f"🛫 Voos ({len(flights)} de {total})")
        table.add_column("Preço", style="bold green", justify="right")
        table.add_column("Rota", style="yellow")
        table.add_column("Conexões", justify="center")
        table.add_column("Duração", justify="right")
        table.add_column("Voos")
        table.add_column("Link")

        for route in flights:
            hours, minutes = divmod(route.total_duration, 60)
            table.add_row(
                f"{route.currency} {route.price:.2f}",
                route.route_summary,
                str(route.layovers),
                f"{hours}h{minutes:02d}",
                ", ".join(f"{seg.flight_number} ({get_airline_name(seg.airline)})" for seg in route.segments),
                route.booking_url or "-",
            )
        return table

    @staticmethod
    def _creative_table(options: List[CreativeRoutingOption]) -> Table:
        table = Table(show_lines=True, title="🔀 Rotas Criativas (bilhetes separados)")
        table.add_column("Preço Total", style="bold green", justify="right")
        table.add_column("Rota", style="yellow")
        table.add_column("Trechos", justify="right")
        table.add_column("Observações")

        for option in options:
            route = option.routes[0]
            breakdown = route.price_breakdown.segment_prices if route.price_breakdown else []
            table.add_row(
                f"{route.currency} {option.total_price:.2f}",
                route.route_summary,
                " + ".join(f"{p:.2f}" for p in breakdown) or "-",
                f"⚠️ {option.description}. Verifique tempo de conexão e bagagem.",
            )
        return table


def main(argv: Optional[List[str]] = None) -> int:
    """Função principal"""
    console = Console()
    configure_logging(console)
    cli = FareHopCLI(console)
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
