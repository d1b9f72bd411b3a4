"""Factory functions for creating thermometers from configuration.

This module provides the bridge between YAML/JSON configuration files and
a wired-up Thermometer. The main entry point is `run_from_config()`, which
builds the reading source and thermometer, runs every reading through it
and returns the recorded watch hits.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from thermowatch.core.qualifiers import build_qualifier
from thermowatch.core.thermometer import Thermometer
from thermowatch.simulation.sources import create_source

if TYPE_CHECKING:
    from thermowatch.core.config import ThermometerConfig
    from thermowatch.core.events import Listener, TemperatureEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WatchHit:
    """A watch that fired, with the event that triggered it."""

    watch: str
    event: TemperatureEvent

    def to_dict(self) -> dict[str, object]:
        """Convert hit to dictionary for serialization."""
        return {"watch": self.watch, **self.event.to_dict()}


@dataclass
class WatchRecorder:
    """Collects watch hits in the order they fired.

    Attributes:
        hits: Recorded hits, oldest first.
        readings_processed: Number of readings seen by the recorder's
            thermometer.
    """

    hits: list[WatchHit] = field(default_factory=list)
    readings_processed: int = 0

    def listener_for(self, watch: str) -> Listener:
        """Create a listener that records hits under the given watch name.

        Each call returns a new function, so every watch gets its own
        registry entry.
        """

        def listener(event: TemperatureEvent) -> None:
            self.hits.append(WatchHit(watch=watch, event=event))

        listener.__name__ = f"watch:{watch}"
        return listener

    def hits_for(self, watch: str) -> list[WatchHit]:
        """Get the hits recorded for one watch."""
        return [hit for hit in self.hits if hit.watch == watch]


def create_thermometer_from_config(
    config: ThermometerConfig,
    recorder: WatchRecorder,
) -> Thermometer:
    """Create a thermometer with one registered listener per watch.

    Args:
        config: Validated thermometer configuration.
        recorder: Recorder receiving the hits.

    Returns:
        Thermometer ready to run.
    """
    thermometer = Thermometer(config.unit, isolate_errors=config.isolate_errors)
    for watch in config.watches:
        qualifier = build_qualifier(watch.kind, watch.threshold)
        thermometer.register(qualifier, recorder.listener_for(watch.name))
    return thermometer


def run_from_config(config: ThermometerConfig) -> WatchRecorder:
    """Run the configured reading source through a configured thermometer.

    Args:
        config: Validated thermometer configuration.

    Returns:
        Recorder holding every watch hit.
    """
    recorder = WatchRecorder()
    thermometer = create_thermometer_from_config(config, recorder)
    source = create_source(config.source)

    logger.info(
        "Running '%s' (%s) with %d watches",
        config.name,
        config.unit.value,
        len(thermometer),
    )
    for raw in source:
        thermometer.process_reading(raw)
        recorder.readings_processed += 1

    logger.info(
        "Processed %d readings, %d hits",
        recorder.readings_processed,
        len(recorder.hits),
    )
    return recorder
