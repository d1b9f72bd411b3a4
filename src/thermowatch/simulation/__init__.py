"""Reading sources and configuration-driven thermometer runs."""

from thermowatch.simulation.factory import (
    WatchHit,
    WatchRecorder,
    create_thermometer_from_config,
    run_from_config,
)
from thermowatch.simulation.sources import (
    CSVReadingSource,
    InlineReadingSource,
    ReadingSource,
    SyntheticReadingSource,
    create_source,
)

__all__ = [
    # Sources
    "ReadingSource",
    "InlineReadingSource",
    "CSVReadingSource",
    "SyntheticReadingSource",
    "create_source",
    # Factory
    "WatchHit",
    "WatchRecorder",
    "create_thermometer_from_config",
    "run_from_config",
]
