"""Pydantic configuration models for thermometer runs.

This module defines the configuration schema for running a thermometer
against a reading source using Pydantic v2 models. Configuration can be
loaded from YAML or JSON files.

The configuration hierarchy:
- ThermometerConfig (top-level)
  - SourceConfig
  - WatchConfig[]
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from thermowatch.core.qualifiers import QualifierKind
from thermowatch.core.units import TemperatureUnit, parse_unit


class WatchConfig(BaseModel):
    """A named qualifier to watch readings for."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Unique watch name")
    kind: QualifierKind = Field(default="always")
    threshold: float | None = Field(
        default=None, description="Threshold in the thermometer's unit"
    )

    @model_validator(mode="after")
    def validate_threshold(self) -> WatchConfig:
        """Ensure threshold-based kinds carry a threshold."""
        if self.kind != "always" and self.threshold is None:
            msg = f"Watch '{self.name}' of kind '{self.kind}' requires a threshold"
            raise ValueError(msg)
        return self


class SourceConfig(BaseModel):
    """Reading source configuration."""

    type: Literal["inline", "csv", "synthetic"] = Field(default="inline")

    # Inline readings (Celsius)
    readings: list[float] = Field(default_factory=list)

    # CSV file
    file: str | None = Field(default=None, description="Path to readings CSV file")
    column: str = Field(default="temperature", description="CSV column to read")

    # Synthetic random walk
    count: Annotated[int, Field(default=100, gt=0)] = 100
    start: float = 20.0
    step_std_dev: Annotated[float, Field(default=0.5, ge=0)] = 0.5
    seed: int | None = None

    @model_validator(mode="after")
    def validate_source(self) -> SourceConfig:
        """Ensure the fields required by the source type are present."""
        if self.type == "csv" and not self.file:
            msg = "CSV source requires 'file'"
            raise ValueError(msg)
        return self


class ThermometerConfig(BaseModel):
    """Top-level thermometer run configuration."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(default="Thermometer")
    unit: TemperatureUnit = Field(default=TemperatureUnit.CELSIUS)
    isolate_errors: bool = False
    source: SourceConfig = Field(default_factory=SourceConfig)
    watches: list[WatchConfig] = Field(default_factory=list)

    @field_validator("unit", mode="before")
    @classmethod
    def validate_unit(cls, v: Any) -> TemperatureUnit:
        """Accept unit names and short aliases."""
        return parse_unit(v)

    @field_validator("watches", mode="after")
    @classmethod
    def validate_unique_names(cls, v: list[WatchConfig]) -> list[WatchConfig]:
        """Ensure all watch names are unique."""
        names = [w.name for w in v]
        if len(names) != len(set(names)):
            duplicates = [n for n in names if names.count(n) > 1]
            msg = f"Duplicate watch names: {set(duplicates)}"
            raise ValueError(msg)
        return v


def load_config(path: str | Path) -> ThermometerConfig:
    """Load thermometer configuration from YAML or JSON file.

    Args:
        path: Path to configuration file.

    Returns:
        Validated ThermometerConfig object.

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValueError: If configuration is invalid.
    """
    path = Path(path)

    if not path.exists():
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open() as f:
        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    return ThermometerConfig.model_validate(data)


def save_config(config: ThermometerConfig, path: str | Path) -> None:
    """Save thermometer configuration to YAML or JSON file.

    Args:
        config: Configuration to save.
        path: Output file path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(mode="json", exclude_none=True)

    with path.open("w") as f:
        if path.suffix in (".yaml", ".yml"):
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
        else:
            json.dump(data, f, indent=2)


def validate_config(data: dict[str, Any]) -> ThermometerConfig:
    """Validate configuration data without loading from file.

    Args:
        data: Configuration dictionary.

    Returns:
        Validated ThermometerConfig object.

    Raises:
        ValueError: If configuration is invalid.
    """
    return ThermometerConfig.model_validate(data)
