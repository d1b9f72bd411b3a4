"""CLI interface for thermowatch.

This module provides a command-line interface for running a thermometer
against a reading source from YAML configuration files without writing
code.

Usage:
    thermowatch run my-thermometer.yaml
    thermowatch convert 101 --unit Fahrenheit
    thermowatch init "Kettle" -o kettle.yaml
    thermowatch validate kettle.yaml
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.table import Table

from thermowatch.core.config import (
    SourceConfig,
    ThermometerConfig,
    WatchConfig,
    load_config,
    save_config,
)
from thermowatch.core.units import TemperatureUnit, convert, parse_unit
from thermowatch.simulation.factory import run_from_config

if TYPE_CHECKING:
    from thermowatch.simulation.factory import WatchRecorder

app = typer.Typer(
    name="thermowatch",
    help="Unit-aware thermometer with threshold watches.",
    add_completion=False,
    no_args_is_help=True,
)
console = Console()


def _parse_unit_option(unit: str) -> TemperatureUnit:
    try:
        return parse_unit(unit)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1) from None


@app.command()
def run(
    config_path: Annotated[
        Path,
        typer.Argument(help="Path to YAML configuration file"),
    ],
    unit: Annotated[
        str | None,
        typer.Option("--unit", "-u", help="Override unit: Celsius or Fahrenheit"),
    ] = None,
    format_: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: console, json"),
    ] = "console",
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write hits as JSON to this file"),
    ] = None,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress console output"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log dispatch details to stderr"),
    ] = False,
) -> None:
    """Run configured readings through the thermometer and report hits."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s",
            stream=sys.stderr,
        )

    if format_ not in ("console", "json"):
        console.print(f"[red]Error:[/] Unknown format '{format_}'")
        raise typer.Exit(1)

    # Load and validate config
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        console.print(f"[red]Error:[/] Config file not found: {config_path}")
        raise typer.Exit(1) from None
    except Exception as e:
        console.print(f"[red]Error:[/] Invalid configuration: {e}")
        raise typer.Exit(1) from None

    if unit is not None:
        config = config.model_copy(update={"unit": _parse_unit_option(unit)})

    try:
        recorder = run_from_config(config)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/] Reading source not found: {e.filename}")
        raise typer.Exit(1) from None
    except ValueError as e:
        console.print(f"[red]Error:[/] Failed to read source: {e}")
        raise typer.Exit(1) from None

    _output_results(config, recorder, format_, output, quiet)


@app.command("convert")
def convert_command(
    value: Annotated[float, typer.Argument(help="Temperature in Celsius")],
    unit: Annotated[
        str,
        typer.Option("--unit", "-u", help="Target unit: Celsius or Fahrenheit"),
    ] = "Fahrenheit",
) -> None:
    """Convert a Celsius temperature to another unit."""
    target = _parse_unit_option(unit)
    console.print(f"{convert(target, value):g} {target.value}")


@app.command()
def init(
    name: Annotated[str, typer.Argument(help="Name for the new configuration")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path"),
    ] = None,
) -> None:
    """Generate a starter YAML configuration file."""
    config = ThermometerConfig(
        name=name,
        unit=TemperatureUnit.CELSIUS,
        source=SourceConfig(type="inline", readings=[15.0, 3000.0, 45.0, -10.0, 60.0]),
        watches=[
            WatchConfig(name="boiling", kind="at_or_above", threshold=100.0),
            WatchConfig(name="freezing", kind="at_or_below", threshold=0.0),
        ],
    )

    # Generate filename from name if not specified
    if output is None:
        # Convert name to filename: "My Kettle" -> "my-kettle.yaml"
        filename = name.lower().replace(" ", "-") + ".yaml"
        output = Path(filename)

    save_config(config, output)
    console.print(f"[green]Created:[/] {output}")
    console.print("\nEdit this file to customize your watches, then run:")
    console.print(f"  thermowatch run {output}")


@app.command()
def validate(
    config_path: Annotated[Path, typer.Argument(help="Path to YAML configuration")],
) -> None:
    """Validate a configuration file without running."""
    try:
        config = load_config(config_path)
        console.print(f"[green]Valid:[/] {config.name}")
        console.print(f"  Unit: {config.unit.value}")
        console.print(f"  Source: {config.source.type}")
        console.print(f"  Watches: {len(config.watches)}")
        for watch in config.watches:
            threshold = "" if watch.threshold is None else f" {watch.threshold:g}"
            console.print(f"    {watch.name}: {watch.kind}{threshold}")
    except FileNotFoundError:
        console.print(f"[red]Error:[/] File not found: {config_path}")
        raise typer.Exit(1) from None
    except Exception as e:
        console.print(f"[red]Invalid:[/] {e}")
        raise typer.Exit(1) from None


def _format_value(value: float | None) -> str:
    return "-" if value is None else f"{value:g}"


def _output_results(
    config: ThermometerConfig,
    recorder: WatchRecorder,
    format_: str,
    output: Path | None,
    quiet: bool,
) -> None:
    """Output watch hits in requested format.

    Args:
        config: The configuration that was run.
        recorder: Recorder holding the hits.
        format_: Output format (console, json).
        output: Optional JSON file to write hits to.
        quiet: If True, suppress console output.
    """
    result = {
        "name": config.name,
        "unit": config.unit.value,
        "readings_processed": recorder.readings_processed,
        "hits": [hit.to_dict() for hit in recorder.hits],
    }

    if not quiet:
        if format_ == "json":
            console.print_json(json.dumps(result))
        else:
            table = Table(title=f"{config.name} ({config.unit.value})")
            table.add_column("Watch", style="cyan")
            table.add_column("Previous", justify="right")
            table.add_column("Current", justify="right")
            for hit in recorder.hits:
                table.add_row(
                    hit.watch,
                    _format_value(hit.event.previous),
                    _format_value(hit.event.current),
                )
            console.print(table)
            console.print(
                f"\nReadings processed: {recorder.readings_processed}, "
                f"hits: {len(recorder.hits)}"
            )

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(result, indent=2))
        if not quiet:
            console.print(f"\n[dim]Results saved to {output}[/]")


def main() -> int:
    """Application entry point.

    Returns:
        Exit code (0 for success).
    """
    try:
        app()
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1


if __name__ == "__main__":
    sys.exit(main())
