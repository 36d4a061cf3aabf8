from __future__ import annotations

import typer

from .commands import auth_cmd, community_cmd, endpoints_cmd, pest_cmd, profile_cmd, settings_cmd
from .commands.farm_cmd import crop_app, market_app, reports_app, soil_app, weather_app
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="agrismart",
        help="AgriSmart API client",
        no_args_is_help=True,
    )

    app.add_typer(auth_cmd.app, name="auth")
    app.add_typer(profile_cmd.app, name="profile")
    app.add_typer(pest_cmd.app, name="pest")
    app.add_typer(soil_app, name="soil")
    app.add_typer(weather_app, name="weather")
    app.add_typer(crop_app, name="crop")
    app.add_typer(market_app, name="market")
    app.add_typer(reports_app, name="reports")
    app.add_typer(community_cmd.app, name="community")
    app.add_typer(settings_cmd.app, name="settings")
    app.command("endpoints")(endpoints_cmd.list_endpoints)

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
