"""Unit tests for configuration merger and adapter.

These tests verify:
- CLI args override config values when provided
- CLI args are ignored when None
- Merged config is a new object
- Adapter correctly converts config to domain measurements
"""

import pytest

from trimplan.application.config import (
    ConfigError,
    MeasurementConfig,
    OutputConfig,
    OutputFormat,
    PlanConfiguration,
    config_to_measurements,
    config_to_packing_config,
    merge_config_with_cli,
)
from trimplan.domain import SplitPolicy


class TestMergeConfigWithCli:
    """Tests for merge_config_with_cli function."""

    @pytest.fixture
    def base_config(self) -> PlanConfiguration:
        """Create a base configuration for testing."""
        return PlanConfiguration(
            measurements=[
                MeasurementConfig(id="LR", size=200, room="Living Room"),
                MeasurementConfig(size=60),
            ],
            available_lengths=[96, 120],
            kerf=0.125,
            output=OutputConfig(format=OutputFormat.PLAN),
        )

    def test_no_overrides_returns_equivalent_config(
        self, base_config: PlanConfiguration
    ) -> None:
        """When no CLI args provided, merged config matches original."""
        merged = merge_config_with_cli(base_config)

        assert merged.model_dump() == base_config.model_dump()
        assert merged is not base_config

    def test_override_lengths(self, base_config: PlanConfiguration) -> None:
        merged = merge_config_with_cli(base_config, available_lengths=[144])

        assert merged.available_lengths == [144.0]
        assert base_config.available_lengths == [96.0, 120.0]

    def test_override_kerf(self, base_config: PlanConfiguration) -> None:
        merged = merge_config_with_cli(base_config, kerf=0.0625)

        assert merged.kerf == 0.0625
        assert merged.available_lengths == [96.0, 120.0]

    def test_override_output(self, base_config: PlanConfiguration) -> None:
        merged = merge_config_with_cli(
            base_config, output_format="json", room="Living Room"
        )

        assert merged.output.format == OutputFormat.JSON
        assert merged.output.room == "Living Room"

    def test_extra_measurements_appended(self, base_config: PlanConfiguration) -> None:
        """CLI measurements follow those from the file."""
        merged = merge_config_with_cli(
            base_config,
            measurements=[{"size": "45 1/2", "room": "Hallway"}],
        )

        assert len(merged.measurements) == 3
        assert merged.measurements[2].size == 45.5
        assert merged.measurements[2].room == "Hallway"

    def test_balanced_ids_by_id_and_position(
        self, base_config: PlanConfiguration
    ) -> None:
        """Balanced ids match explicit ids and positional M ids."""
        merged = merge_config_with_cli(base_config, balanced_ids=["LR", "M2"])

        assert merged.measurements[0].split == SplitPolicy.BALANCED
        assert merged.measurements[1].split == SplitPolicy.BALANCED

    def test_unknown_balanced_id_rejected(
        self, base_config: PlanConfiguration
    ) -> None:
        """Balanced ids must name an existing measurement."""
        with pytest.raises(ConfigError) as exc_info:
            merge_config_with_cli(base_config, balanced_ids=["LR", "M3", "DEN"])

        error = exc_info.value
        assert error.error_type == "unknown_measurement"
        assert [detail["value"] for detail in error.details] == ["DEN", "M3"]

    def test_balanced_id_for_cli_measurement(
        self, base_config: PlanConfiguration
    ) -> None:
        """Measurements added on the command line can be marked balanced."""
        merged = merge_config_with_cli(
            base_config, measurements=[{"size": "300"}], balanced_ids=["M3"]
        )

        assert merged.measurements[2].split == SplitPolicy.BALANCED

    def test_invalid_override_raises_config_error(
        self, base_config: PlanConfiguration
    ) -> None:
        with pytest.raises(ConfigError) as exc_info:
            merge_config_with_cli(base_config, available_lengths=[-96])

        assert exc_info.value.error_type == "validation"

    def test_invalid_cli_measurement(self, base_config: PlanConfiguration) -> None:
        with pytest.raises(ConfigError) as exc_info:
            merge_config_with_cli(base_config, measurements=[{"size": "ten"}])

        assert exc_info.value.details[0]["path"] == "measurements[2].size"


class TestConfigAdapter:
    """Tests for conversion to domain objects."""

    def test_positional_ids_and_labels(self) -> None:
        config = PlanConfiguration(
            measurements=[
                MeasurementConfig(size=50, room="Kitchen", wall="East"),
                MeasurementConfig(id="HALL", size=45.5, room=""),
            ]
        )

        measurements = config_to_measurements(config)

        assert [m.id for m in measurements] == ["M1", "HALL"]
        assert measurements[0].room == "Kitchen"
        assert measurements[0].wall == "East"
        assert measurements[1].room is None

    def test_blank_rows_skipped_but_keep_positions(self) -> None:
        """Zero rows are dropped; later rows keep their positional id."""
        config = PlanConfiguration(
            measurements=[MeasurementConfig(size=0), MeasurementConfig(size=60)]
        )

        measurements = config_to_measurements(config)

        assert [m.id for m in measurements] == ["M2"]

    def test_sizes_snapped(self) -> None:
        config = PlanConfiguration(measurements=[MeasurementConfig(size=83.3)])

        assert config_to_measurements(config)[0].size == 83.3125

    def test_snapping_disabled(self) -> None:
        config = PlanConfiguration(
            measurements=[MeasurementConfig(size=83.3)], snap_to_sixteenth=False
        )

        assert config_to_measurements(config)[0].size == 83.3

    def test_tiny_size_snapped_to_zero_is_skipped(self) -> None:
        config = PlanConfiguration(measurements=[MeasurementConfig(size=0.01)])

        assert config_to_measurements(config) == []

    def test_packing_config(self) -> None:
        packing = config_to_packing_config(PlanConfiguration(kerf=0.0625))

        assert packing.kerf == 0.0625
        assert packing.strict is False
