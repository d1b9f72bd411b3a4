"""Reading sources that stand in for a physical temperature sensor.

Every source is a finite iterable of raw Celsius readings that can be
handed straight to Thermometer.run():
- Inline: A fixed list of readings
- CSV: One reading per row from a file column
- Synthetic: A reproducible Gaussian random walk
"""

from __future__ import annotations

import csv
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from numpy.random import Generator

    from thermowatch.core.config import SourceConfig

logger = logging.getLogger(__name__)

# Allowed file extensions for CSV reading files
_ALLOWED_CSV_EXTENSIONS: frozenset[str] = frozenset({".csv"})


class ReadingSource(ABC):
    """Abstract base class for reading sources."""

    @abstractmethod
    def readings(self) -> Iterator[float]:
        """Yield raw readings in degrees Celsius, in order."""

    def __iter__(self) -> Iterator[float]:
        return self.readings()


class InlineReadingSource(ReadingSource):
    """Readings supplied directly as a sequence."""

    def __init__(self, readings: Iterable[float]) -> None:
        self._readings = [float(r) for r in readings]

    def readings(self) -> Iterator[float]:
        yield from self._readings

    def __len__(self) -> int:
        return len(self._readings)


class CSVReadingSource(ReadingSource):
    """Load readings from one column of a CSV file.

    Rows with an empty cell in the reading column are skipped and
    counted. Anything else that is not a number is an error.
    """

    def __init__(self, file_path: Path | str, column: str = "temperature") -> None:
        """Initialize CSV reading source.

        Args:
            file_path: Path to CSV file with a header row.
            column: Name of the column holding Celsius readings.

        Raises:
            ValueError: If the file does not have a .csv extension.
        """
        path = Path(file_path)
        if path.suffix.lower() not in _ALLOWED_CSV_EXTENSIONS:
            msg = (
                f"Invalid file extension '{path.suffix}'. "
                "Only CSV files are allowed"
            )
            raise ValueError(msg)
        self.file_path = path
        self.column = column
        self._skipped_rows = 0

    def readings(self) -> Iterator[float]:
        """Yield readings row by row.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the column is missing or a cell is not numeric.
        """
        self._skipped_rows = 0
        with self.file_path.open(newline="") as f:
            reader = csv.DictReader(f)
            if reader.fieldnames is None or self.column not in reader.fieldnames:
                msg = (
                    f"Column '{self.column}' not found in CSV file. "
                    f"Available columns: {reader.fieldnames or []}"
                )
                raise ValueError(msg)

            for row_num, row in enumerate(reader, start=2):  # Header is row 1
                value = (row.get(self.column) or "").strip()
                if not value:
                    self._skipped_rows += 1
                    logger.warning(
                        "Skipping row %d of %s: empty '%s' value",
                        row_num,
                        self.file_path,
                        self.column,
                    )
                    continue
                try:
                    reading = float(value)
                except ValueError as e:
                    msg = f"Row {row_num}: column '{self.column}' has invalid value '{value}'"
                    raise ValueError(msg) from e
                yield reading

    @property
    def skipped_rows(self) -> int:
        """Number of rows skipped during the last pass over the file."""
        return self._skipped_rows


class SyntheticReadingSource(ReadingSource):
    """Gaussian random walk of readings.

    Each reading differs from the one before by a normally distributed
    step, which gives plausible sensor drift for demos and tests.
    """

    def __init__(
        self,
        count: int,
        *,
        start: float = 20.0,
        step_std_dev: float = 0.5,
        rng: Generator | None = None,
        seed: int | None = None,
    ) -> None:
        """Initialize synthetic source.

        Args:
            count: Number of readings to produce.
            start: First reading in degrees Celsius.
            step_std_dev: Standard deviation of each step.
            rng: NumPy random generator for reproducible readings.
            seed: Seed for creating a new random generator if rng is None.

        Raises:
            ValueError: If count is not positive or step_std_dev is negative.
        """
        if count <= 0:
            msg = f"Count must be positive, got {count}"
            raise ValueError(msg)
        if step_std_dev < 0:
            msg = f"Step standard deviation must be non-negative, got {step_std_dev}"
            raise ValueError(msg)
        self._count = count
        self._start = start
        self._step_std_dev = step_std_dev

        if rng is not None:
            self._rng = rng
        elif seed is not None:
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()
            logger.debug(
                "Synthetic source using non-deterministic RNG (no seed provided). "
                "Set seed parameter for reproducible results."
            )

    def readings(self) -> Iterator[float]:
        steps = self._rng.normal(0.0, self._step_std_dev, size=self._count - 1)
        walk = self._start + np.concatenate(([0.0], np.cumsum(steps)))
        for value in walk:
            yield float(value)

    def __len__(self) -> int:
        return self._count


def create_source(config: SourceConfig) -> ReadingSource:
    """Create a reading source from configuration.

    Args:
        config: Source configuration.

    Returns:
        The configured reading source.
    """
    if config.type == "csv":
        # SourceConfig guarantees file is set for csv sources
        return CSVReadingSource(config.file or "", column=config.column)
    if config.type == "synthetic":
        return SyntheticReadingSource(
            config.count,
            start=config.start,
            step_std_dev=config.step_std_dev,
            seed=config.seed,
        )
    return InlineReadingSource(config.readings)
