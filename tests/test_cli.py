import io
from unittest.mock import patch

from rich.console import Console

from farehop.domain.models import CabinClass
from farehop.infrastructure.factory import FlightSearchEngineFactory
from farehop.presentation.cli import FareHopCLI

from conftest import FakeProvider, make_route


def _cli(provider):
    console = Console(file=io.StringIO(), width=200)
    engine = FlightSearchEngineFactory.create(providers=[provider])
    with patch("farehop.presentation.cli.FlightSearchEngineFactory.create", return_value=engine):
        cli = FareHopCLI(console)
    return cli, console


class TestFareHopCLI:
    def test_builds_search_params_from_arguments(self):
        cli, _ = _cli(FakeProvider())
        args = cli._parse_arguments([
            "--origin", "nyc", "--destination", "tyo", "--depart", "2026-05-02",
            "--return", "2026-05-12", "--adults", "2", "--cabin", "business",
            "--max-layovers", "1", "--creative",
        ])

        params = cli._build_search_params(args)

        assert params.origin == "NYC"
        assert params.destination == "TYO"
        assert params.return_date == "2026-05-12"
        assert params.adults == 2
        assert params.cabin_class == CabinClass.BUSINESS
        assert params.max_layovers == 1
        assert params.include_creative_routing is True

    def test_renders_direct_creative_and_savings(self):
        provider = FakeProvider({
            ("PVG", "HND"): [make_route("direct", ["PVG", "HND"], 500)],
            ("PVG", "ICN"): [make_route("l1", ["PVG", "ICN"], 200)],
            ("ICN", "HND"): [make_route("l2", ["ICN", "HND"], 150)],
        })
        cli, console = _cli(provider)

        code = cli.run(["--origin", "PVG", "--destination", "HND", "--depart", "2026-03-10", "--creative"])

        output = console.file.getvalue()
        assert code == 0
        assert "USD 500.00" in output
        assert "ICN" in output
        assert "Economize 30%" in output

    def test_invalid_parameters_exit_with_error(self):
        provider = FakeProvider()
        cli, console = _cli(provider)

        code = cli.run(["--origin", "PVG", "--destination", "HND", "--depart", "2026-03-10", "--adults", "0"])

        assert code == 2
        assert provider.calls == []
        assert "inválidos" in console.file.getvalue()

    def test_no_results_panel(self):
        cli, console = _cli(FakeProvider())

        code = cli.run(["--origin", "PVG", "--destination", "HND", "--depart", "2026-03-10"])

        assert code == 0
        assert "Sem Resultados" in console.file.getvalue()
