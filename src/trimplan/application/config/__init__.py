"""Configuration schema and loading system for cutting plans.

This package provides JSON-based configuration loading and validation.
It includes Pydantic models for schema validation, a configuration loader
with comprehensive error handling, advisory checks, and conversion to
domain objects.

Example:
    >>> from pathlib import Path
    >>> from trimplan.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("house.json"))
    ...     print(f"{len(config.measurements)} measurements")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from trimplan.application.config.adapter import (
    config_to_measurements,
    config_to_packing_config,
)
from trimplan.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from trimplan.application.config.merger import merge_config_with_cli
from trimplan.application.config.schema import (
    SUPPORTED_VERSIONS,
    MeasurementConfig,
    OutputConfig,
    OutputFormat,
    PlanConfiguration,
)
from trimplan.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "ConfigError",
    "MeasurementConfig",
    "OutputConfig",
    "OutputFormat",
    "PlanConfiguration",
    "SUPPORTED_VERSIONS",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_measurements",
    "config_to_packing_config",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
