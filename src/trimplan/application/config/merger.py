"""Configuration merging utilities for CLI override support.

Precedence is CLI args > config values > defaults. Only CLI arguments that
are not None override configuration values; extra measurements given on the
command line are appended after those from the file.
"""

from typing import Any, Sequence

from trimplan.application.config.adapter import measurement_id
from trimplan.application.config.loader import ConfigError, load_config_from_dict
from trimplan.application.config.schema import PlanConfiguration
from trimplan.domain.value_objects import SplitPolicy

UNKNOWN_MEASUREMENT = "unknown_measurement"


def merge_config_with_cli(
    config: PlanConfiguration,
    *,
    measurements: Sequence[dict[str, Any]] | None = None,
    available_lengths: Sequence[float] | None = None,
    kerf: float | None = None,
    balanced_ids: Sequence[str] | None = None,
    output_format: str | None = None,
    room: str | None = None,
) -> PlanConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base PlanConfiguration to merge with
        measurements: Extra measurement entries appended to the file's
        available_lengths: Replacement for available_lengths (if not None)
        kerf: Override for kerf (if not None)
        balanced_ids: Ids of measurements to split evenly; ids follow the
            M1, M2, ... positional scheme for entries without an id
        output_format: Override for output.format (if not None)
        room: Override for output.room (if not None)

    Returns:
        A new PlanConfiguration with merged values

    Raises:
        ConfigError: If the merged values fail validation, or a balanced id
            names no measurement.

    Example:
        >>> merged = merge_config_with_cli(config, kerf=0.0625)
        >>> merged.kerf
        0.0625
    """
    data = config.model_dump(mode="json")
    data["measurements"].extend(dict(entry) for entry in measurements or [])

    if available_lengths is not None:
        data["available_lengths"] = list(available_lengths)
    if kerf is not None:
        data["kerf"] = kerf
    if output_format is not None:
        data["output"]["format"] = output_format
    if room is not None:
        data["output"]["room"] = room

    merged = load_config_from_dict(data)
    if balanced_ids:
        merged = _mark_balanced(merged, set(balanced_ids))
    return merged


def _mark_balanced(config: PlanConfiguration, ids: set[str]) -> PlanConfiguration:
    known = {measurement_id(i, item) for i, item in enumerate(config.measurements)}
    unknown = sorted(ids - known)
    if unknown:
        raise ConfigError(
            f"No measurement with id {', '.join(unknown)} to split evenly",
            UNKNOWN_MEASUREMENT,
            details=[
                {
                    "path": "--balanced",
                    "message": f"No measurement with id '{balanced_id}'",
                    "value": balanced_id,
                }
                for balanced_id in unknown
            ],
        )

    measurements = [
        item.model_copy(update={"split": SplitPolicy.BALANCED})
        if measurement_id(i, item) in ids
        else item
        for i, item in enumerate(config.measurements)
    ]
    return config.model_copy(update={"measurements": measurements})
