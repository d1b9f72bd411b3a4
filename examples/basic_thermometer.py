#!/usr/bin/env python3
"""Basic thermometer example.

This script demonstrates registering qualified listeners on a thermometer
and feeding it readings, both hand-written and from a synthetic source.

Run with: uv run python examples/basic_thermometer.py
"""

from thermowatch.core.events import TemperatureEvent
from thermowatch.core.qualifiers import delta_exceeds, falls_to
from thermowatch.core.thermometer import Thermometer
from thermowatch.core.units import TemperatureUnit
from thermowatch.simulation.sources import SyntheticReadingSource


def run_threshold_example() -> None:
    """Watch a short dataset for boiling and freezing readings."""
    print("=" * 60)
    print("THRESHOLDS: boiling and freezing")
    print("=" * 60)

    thermometer = Thermometer(TemperatureUnit.CELSIUS)

    def on_boiling(event: TemperatureEvent) -> None:
        print(f"  Boiling: {event.current}°C (was {event.previous}°C)")

    def on_freezing(event: TemperatureEvent) -> None:
        print(f"  Freezing: {event.current}°C (was {event.previous}°C)")

    thermometer.register(lambda e: e.current >= 100, on_boiling)
    thermometer.register(lambda e: e.current <= 0, on_freezing)
    thermometer.run([15, 3000, 45, -10, 60])
    print()


def run_synthetic_example() -> None:
    """Watch a drifting synthetic sensor in Fahrenheit."""
    print("=" * 60)
    print("SYNTHETIC: 48 readings around 2°C, reported in Fahrenheit")
    print("=" * 60)

    thermometer = Thermometer(TemperatureUnit.FAHRENHEIT)
    jumps: list[TemperatureEvent] = []
    frosts: list[TemperatureEvent] = []

    def on_jump(event: TemperatureEvent) -> None:
        jumps.append(event)

    def on_frost(event: TemperatureEvent) -> None:
        frosts.append(event)

    thermometer.register(delta_exceeds(1.5), on_jump)
    thermometer.register(falls_to(32.0), on_frost)
    thermometer.run(SyntheticReadingSource(48, start=2.0, step_std_dev=1.0, seed=42))

    print(f"Jumps over 1.5°F: {len(jumps)}")
    print(f"Frost crossings:  {len(frosts)}")
    for event in frosts:
        print(f"  {event.previous:.1f}°F -> {event.current:.1f}°F")
    print()


def main() -> None:
    """Run thermometer examples."""
    print()
    print("THERMOWATCH: Unit-aware thermometer")
    print()

    run_threshold_example()
    run_synthetic_example()

    print("=" * 60)
    print("Examples complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
