"""Tests for configuration models."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from thermowatch.core.config import (
    SourceConfig,
    ThermometerConfig,
    WatchConfig,
    load_config,
    save_config,
    validate_config,
)
from thermowatch.core.qualifiers import QUALIFIER_KINDS
from thermowatch.core.units import TemperatureUnit


class TestWatchConfig:
    """Tests for WatchConfig."""

    def test_basic_creation(self) -> None:
        """Create watch with threshold."""
        watch = WatchConfig(name="boiling", kind="at_or_above", threshold=100.0)
        assert watch.name == "boiling"
        assert watch.kind == "at_or_above"
        assert watch.threshold == 100.0

    def test_always_default(self) -> None:
        """Kind defaults to always, which needs no threshold."""
        watch = WatchConfig(name="all")
        assert watch.kind == "always"
        assert watch.threshold is None

    def test_missing_threshold(self) -> None:
        """Threshold kinds without a threshold are rejected."""
        with pytest.raises(ValidationError, match="requires a threshold"):
            WatchConfig(name="freezing", kind="at_or_below")

    def test_unknown_kind(self) -> None:
        """Unknown kinds are rejected."""
        with pytest.raises(ValidationError):
            WatchConfig(name="odd", kind="between", threshold=1.0)  # type: ignore[arg-type]

    @pytest.mark.parametrize("kind", QUALIFIER_KINDS)
    def test_accepts_every_qualifier_kind(self, kind: str) -> None:
        """Every buildable qualifier kind is a valid watch kind."""
        watch = WatchConfig(name="w", kind=kind, threshold=1.0)  # type: ignore[arg-type]
        assert watch.kind == kind


class TestSourceConfig:
    """Tests for SourceConfig."""

    def test_defaults(self) -> None:
        """Default source is an empty inline list."""
        source = SourceConfig()
        assert source.type == "inline"
        assert source.readings == []

    def test_csv_requires_file(self) -> None:
        """CSV sources need a file."""
        with pytest.raises(ValidationError, match="requires 'file'"):
            SourceConfig(type="csv")

    def test_synthetic_count_positive(self) -> None:
        """Synthetic count must be positive."""
        with pytest.raises(ValidationError):
            SourceConfig(type="synthetic", count=0)


class TestThermometerConfig:
    """Tests for ThermometerConfig."""

    def test_defaults(self) -> None:
        """Defaults give an empty Celsius configuration."""
        config = ThermometerConfig()
        assert config.unit is TemperatureUnit.CELSIUS
        assert config.isolate_errors is False
        assert config.watches == []

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("Fahrenheit", TemperatureUnit.FAHRENHEIT),
            ("F", TemperatureUnit.FAHRENHEIT),
            ("celsius", TemperatureUnit.CELSIUS),
        ],
    )
    def test_unit_aliases(self, value: str, expected: TemperatureUnit) -> None:
        """Unit accepts names and aliases."""
        assert ThermometerConfig(unit=value).unit is expected  # type: ignore[arg-type]

    def test_invalid_unit(self) -> None:
        """Unknown units are rejected."""
        with pytest.raises(ValidationError, match="Unknown temperature unit"):
            validate_config({"unit": "Kelvin"})

    def test_duplicate_watch_names(self) -> None:
        """Watch names must be unique."""
        with pytest.raises(ValidationError, match="Duplicate watch names"):
            ThermometerConfig(
                watches=[
                    WatchConfig(name="hot", kind="at_or_above", threshold=30.0),
                    WatchConfig(name="hot", kind="at_or_above", threshold=40.0),
                ]
            )

    def test_extra_fields_forbidden(self) -> None:
        """Unknown top-level fields are rejected."""
        with pytest.raises(ValidationError):
            validate_config({"name": "x", "polling_interval": 5})


class TestLoadSave:
    """Tests for load_config and save_config."""

    def test_load_yaml(self, thresholds_yaml: Path) -> None:
        """Load configuration from YAML."""
        config = load_config(thresholds_yaml)

        assert config.name == "Thresholds"
        assert config.source.readings == [15, 3000, 45, -10, 60]
        assert [w.name for w in config.watches] == ["boiling", "freezing"]

    def test_load_json(self, tmp_path: Path) -> None:
        """Load configuration from JSON."""
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps({"name": "JSON", "unit": "Fahrenheit", "watches": []})
        )

        config = load_config(path)

        assert config.name == "JSON"
        assert config.unit is TemperatureUnit.FAHRENHEIT

    def test_load_missing(self, tmp_path: Path) -> None:
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    @pytest.mark.parametrize("suffix", [".yaml", ".json"])
    def test_save_and_reload(self, tmp_path: Path, suffix: str) -> None:
        """Saved configuration loads back equal."""
        config = ThermometerConfig(
            name="Round Trip",
            unit=TemperatureUnit.FAHRENHEIT,
            source=SourceConfig(type="synthetic", count=10, seed=7),
            watches=[WatchConfig(name="jump", kind="delta_exceeds", threshold=2.0)],
        )
        path = tmp_path / "nested" / f"config{suffix}"

        save_config(config, path)

        assert load_config(path) == config

    def test_saved_unit_is_name(self, tmp_path: Path) -> None:
        """Units are written by name."""
        path = tmp_path / "config.yaml"
        save_config(ThermometerConfig(unit=TemperatureUnit.FAHRENHEIT), path)

        assert "unit: Fahrenheit" in path.read_text()
