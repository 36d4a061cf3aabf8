from __future__ import annotations

import typer

from ..http import show

soil_app = typer.Typer(help="Soil health.")
weather_app = typer.Typer(help="Weather data.")
crop_app = typer.Typer(help="Crop management.")
market_app = typer.Typer(help="Market data.")
reports_app = typer.Typer(help="Reports and analytics.")

_BASE_URL_HELP = "Override base URL."


@soil_app.command("health")
def soil_health(base_url: str | None = typer.Option(None, "--base-url", help=_BASE_URL_HELP)):
    show(lambda c: c.get_soil_health(), base_url=base_url)


@soil_app.command("recommendations")
def soil_recommendations(base_url: str | None = typer.Option(None, "--base-url", help=_BASE_URL_HELP)):
    show(lambda c: c.get_soil_recommendations(), base_url=base_url)


@soil_app.command("history")
def soil_history(base_url: str | None = typer.Option(None, "--base-url", help=_BASE_URL_HELP)):
    show(lambda c: c.get_soil_history(), base_url=base_url)


@weather_app.command("current")
def weather_current(base_url: str | None = typer.Option(None, "--base-url", help=_BASE_URL_HELP)):
    show(lambda c: c.get_current_weather(), base_url=base_url)


@weather_app.command("forecast")
def weather_forecast(base_url: str | None = typer.Option(None, "--base-url", help=_BASE_URL_HELP)):
    show(lambda c: c.get_weather_forecast(), base_url=base_url)


@weather_app.command("alerts")
def weather_alerts(base_url: str | None = typer.Option(None, "--base-url", help=_BASE_URL_HELP)):
    show(lambda c: c.get_weather_alerts(), base_url=base_url)


@crop_app.command("yield")
def crop_yield(base_url: str | None = typer.Option(None, "--base-url", help=_BASE_URL_HELP)):
    show(lambda c: c.get_crop_yield(), base_url=base_url)


@crop_app.command("schedule")
def crop_schedule(base_url: str | None = typer.Option(None, "--base-url", help=_BASE_URL_HELP)):
    show(lambda c: c.get_crop_schedule(), base_url=base_url)


@crop_app.command("recommendations")
def crop_recommendations(base_url: str | None = typer.Option(None, "--base-url", help=_BASE_URL_HELP)):
    show(lambda c: c.get_crop_recommendations(), base_url=base_url)


@market_app.command("prices")
def market_prices(base_url: str | None = typer.Option(None, "--base-url", help=_BASE_URL_HELP)):
    show(lambda c: c.get_market_prices(), base_url=base_url)


@market_app.command("trends")
def market_trends(base_url: str | None = typer.Option(None, "--base-url", help=_BASE_URL_HELP)):
    show(lambda c: c.get_market_trends(), base_url=base_url)


@reports_app.command("list")
def reports_list(base_url: str | None = typer.Option(None, "--base-url", help=_BASE_URL_HELP)):
    show(lambda c: c.get_reports(), base_url=base_url)


@reports_app.command("analytics")
def reports_analytics(base_url: str | None = typer.Option(None, "--base-url", help=_BASE_URL_HELP)):
    show(lambda c: c.get_analytics(), base_url=base_url)
