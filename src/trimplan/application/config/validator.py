"""Validation structures and trim-carpentry advisory checks.

Schema validation already guarantees well-formed values; the checks here
catch configurations that are legal but will not plan the way the user
probably expects.
"""

from dataclasses import dataclass, field
from typing import Any

from trimplan.application.config.schema import PlanConfiguration
from trimplan.domain.value_objects import SplitPolicy, is_on_sixteenth_grid

# Kerf of a typical miter saw blade is 3/32" to 1/8"
MAX_RECOMMENDED_KERF = 0.5


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "measurements[0].id")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 if clean, 1 on errors, 2 on warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_board_lengths(config: PlanConfiguration) -> ValidationResult:
    """Check the stock lengths on offer."""
    result = ValidationResult()

    if not config.available_lengths:
        result.add_warning(
            path="available_lengths",
            message="No board lengths selected; the cutting plan will be empty",
            suggestion="Select at least one board length (e.g. 96, 120, 144)",
        )
        return result

    seen: set[float] = set()
    for i, length in enumerate(config.available_lengths):
        if length in seen:
            result.add_warning(
                path=f"available_lengths[{i}]",
                message=f'Board length {length:g}" is listed more than once',
            )
        seen.add(length)

    return result


def check_measurements(config: PlanConfiguration) -> ValidationResult:
    """Check measurement ids, blank rows, split flags and precision."""
    result = ValidationResult()
    longest = max(config.available_lengths, default=None)
    seen_ids: dict[str, int] = {}

    for i, measurement in enumerate(config.measurements):
        path = f"measurements[{i}]"

        if measurement.id is not None:
            if measurement.id in seen_ids:
                result.add_error(
                    path=f"{path}.id",
                    message=(
                        f"Duplicate measurement id (also used by "
                        f"measurements[{seen_ids[measurement.id]}])"
                    ),
                    value=measurement.id,
                )
            else:
                seen_ids[measurement.id] = i

        if measurement.size == 0:
            result.add_warning(
                path=f"{path}.size",
                message="Measurement has zero length and will be ignored",
            )
            continue

        if (
            measurement.split == SplitPolicy.BALANCED
            and longest is not None
            and measurement.size <= longest
        ):
            result.add_warning(
                path=f"{path}.split",
                message=(
                    f'Balanced split has no effect: {measurement.size:g}" fits '
                    f'on a {longest:g}" board'
                ),
            )

        if not config.snap_to_sixteenth and not is_on_sixteenth_grid(measurement.size):
            result.add_warning(
                path=f"{path}.size",
                message=f'Size {measurement.size}" is not a multiple of 1/16"',
                suggestion="Enable snap_to_sixteenth or round the measurement",
            )

    return result


def check_kerf(config: PlanConfiguration) -> ValidationResult:
    result = ValidationResult()
    if config.kerf > MAX_RECOMMENDED_KERF:
        result.add_warning(
            path="kerf",
            message=(
                f'Kerf of {config.kerf}" is unusually wide '
                f'(typical blades are 1/8")'
            ),
            suggestion="Check that kerf is given in inches",
        )
    return result


def validate_config(config: PlanConfiguration) -> ValidationResult:
    """Perform full validation of a loaded configuration.

    Args:
        config: A schema-valid PlanConfiguration

    Returns:
        ValidationResult with errors and advisory warnings
    """
    result = ValidationResult()
    result.merge(check_board_lengths(config))
    result.merge(check_measurements(config))
    result.merge(check_kerf(config))
    return result
