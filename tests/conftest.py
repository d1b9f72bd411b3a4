"""Shared pytest fixtures for thermowatch tests."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from thermowatch.core.thermometer import Thermometer
from thermowatch.core.units import TemperatureUnit

# =============================================================================
# Thermometer fixtures
# =============================================================================


@pytest.fixture
def celsius_thermometer() -> Thermometer:
    """Thermometer reporting in Celsius."""
    return Thermometer(TemperatureUnit.CELSIUS)


@pytest.fixture
def fahrenheit_thermometer() -> Thermometer:
    """Thermometer reporting in Fahrenheit."""
    return Thermometer(TemperatureUnit.FAHRENHEIT)


# =============================================================================
# Random number generator fixtures
# =============================================================================


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random generator for reproducible tests."""
    return np.random.default_rng(42)


# =============================================================================
# Configuration fixtures
# =============================================================================


@pytest.fixture
def thresholds_yaml(tmp_path: Path) -> Path:
    """Configuration file with boiling and freezing watches."""
    config = tmp_path / "thresholds.yaml"
    config.write_text("""
name: "Thresholds"
unit: Celsius
source:
  type: inline
  readings: [15, 3000, 45, -10, 60]
watches:
  - name: boiling
    kind: at_or_above
    threshold: 100
  - name: freezing
    kind: at_or_below
    threshold: 0
""")
    return config
