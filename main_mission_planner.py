"""Mini README: Entry point CLI for the Driftpath mission simulator.

This script exposes a Typer CLI with two commands: ``run`` starts the
FastAPI service with configurable host, port and production flags, and
``simulate`` flies a coordinate file offline, prints the mission summary
and optionally exports the waypoints and a GeoJSON overlay for maps.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
import uvicorn

from driftpath.configuration import get_settings
from driftpath.export import WaypointExporter
from driftpath.ingestion import load_coordinates_file
from driftpath.logging_utils import set_log_level
from driftpath.mission import compare_wind_scenarios, format_flight_time
from driftpath.route_planning import PathGenerator, WindConfiguration

cli = typer.Typer(help="Simulate drone flights with wind drift and battery limits.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    set_log_level(settings.log_level)

    # Browsers cannot open the 0.0.0.0 sentinel, so point operators at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Driftpath on {effective_host}:{effective_port}.\n"
        f"API docs at http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "driftpath.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def simulate(
    coordinates: Path = typer.Argument(..., exists=True, dir_okay=False, help="Text or JSON coordinate file."),
    wind_speed: Optional[float] = typer.Option(
        None, min=0, max=100, help="Playground wind speed in km/h (enables custom wind)."
    ),
    wind_direction: float = typer.Option(0.0, min=0, max=360, help="Playground wind direction in degrees."),
    max_flight_minutes: Optional[float] = typer.Option(None, min=0, help="Battery flight-time budget."),
    export: Optional[Path] = typer.Option(None, help="Write the official waypoints to this JSON file."),
    overlay: Optional[Path] = typer.Option(
        None, help="Write the official ideal and realistic lines to this GeoJSON file."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Fly the vertices in COORDINATES and print the mission summary."""

    set_log_level(logging.DEBUG if verbose else get_settings().log_level)
    try:
        vertices = load_coordinates_file(coordinates)
    except ValueError as error:
        raise typer.BadParameter(str(error), param_hint="COORDINATES") from error

    wind = WindConfiguration(
        use_custom_wind=wind_speed is not None,
        wind_speed=wind_speed or 0.0,
        wind_direction=wind_direction,
    )
    try:
        comparison = compare_wind_scenarios(
            vertices, wind, max_flight_minutes, generator=PathGenerator.from_settings()
        )
    except ValueError as error:
        typer.secho(str(error), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from error

    scenarios = [("Official", comparison.official_path, comparison.official_summary)]
    if comparison.playground_path is not None and comparison.playground_summary is not None:
        scenarios.append(("Playground", comparison.playground_path, comparison.playground_summary))

    for label, path, summary in scenarios:
        typer.echo(f"{label} wind: {len(path.waypoints)} waypoints")
        typer.echo(f"  Flight time:        {format_flight_time(summary.total_flight_time_hours)}")
        typer.echo(f"  Realistic distance: {summary.total_realistic_distance:.2f} km")
        typer.echo(f"  Ideal distance:     {summary.total_ideal_distance:.2f} km")
        typer.echo(f"  Temperature:        {summary.min_temperature:.1f}C / {summary.max_temperature:.1f}C")
        typer.echo(f"  Wind speed:         {summary.min_wind_speed:.0f} km/h / {summary.max_wind_speed:.0f} km/h")
        if path.battery_depleted:
            typer.secho(
                f"  Battery depleted at waypoint {path.final_waypoint_index}.",
                fg=typer.colors.YELLOW,
            )

    exporter = WaypointExporter()
    if export is not None:
        destination = exporter.export(comparison.official_path.waypoints, export)
        typer.echo(f"Waypoints written to {destination}")
    if overlay is not None:
        destination = exporter.export_overlay(
            comparison.official_path.ideal_coords, comparison.official_path.waypoints, overlay
        )
        typer.echo(f"Overlay written to {destination}")


if __name__ == "__main__":
    cli()
