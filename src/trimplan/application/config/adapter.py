"""Conversion from configuration models to domain objects."""

from trimplan.application.config.schema import MeasurementConfig, PlanConfiguration
from trimplan.domain import Measurement, round_to_sixteenth
from trimplan.infrastructure.bin_packing import BinPackingConfig


def measurement_id(index: int, measurement: MeasurementConfig) -> str:
    """Id of a measurement, falling back to its position (M1, M2, ...)."""
    return measurement.id if measurement.id is not None else f"M{index + 1}"


def config_to_measurements(config: PlanConfiguration) -> list[Measurement]:
    """Convert configured measurements to domain Measurements.

    Blank rows (zero size) are skipped. Sizes are rounded to 1/16" when
    ``snap_to_sixteenth`` is set.

    Args:
        config: Validated plan configuration.

    Returns:
        Measurements in configuration order.
    """
    measurements: list[Measurement] = []
    for i, item in enumerate(config.measurements):
        size = round_to_sixteenth(item.size) if config.snap_to_sixteenth else item.size
        if size <= 0:
            continue
        measurements.append(
            Measurement(
                id=measurement_id(i, item),
                size=size,
                room=item.room or None,
                wall=item.wall or None,
                split=item.split,
            )
        )
    return measurements


def config_to_packing_config(config: PlanConfiguration) -> BinPackingConfig:
    return BinPackingConfig(kerf=config.kerf)
