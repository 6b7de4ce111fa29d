"""Reading plan configuration from JSON files and dictionaries.

Every failure surfaces as a ConfigError. Sizes that are not readable
tape-measure strings get their own ``length_parse`` error type, so a
caller can point the user at the offending measurement rather than at
the schema.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from trimplan.application.config.schema import PlanConfiguration

FILE_NOT_FOUND = "file_not_found"
UNREADABLE = "unreadable"
JSON_PARSE = "json_parse"
LENGTH_PARSE = "length_parse"
VALIDATION = "validation"


class ConfigError(Exception):
    """A configuration that could not be loaded.

    Attributes:
        message: Summary of the problem.
        error_type: One of file_not_found, unreadable, json_parse,
            length_parse or validation.
        path: File the configuration came from, if any.
        details: One entry per problem. JSON syntax problems carry
            ``line``/``column``; field problems carry ``path``/``value``.
    """

    def __init__(
        self,
        message: str,
        error_type: str = VALIDATION,
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)


def _field_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic location as ``measurements[2].size``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else part
    return path or "(root)"


def _is_length_error(err: dict[str, Any]) -> bool:
    return err["type"] == "value_error" and err["loc"][-1:] == ("size",)


def _issue(err: dict[str, Any]) -> dict[str, Any]:
    if _is_length_error(err):
        # parse_length's own message, without pydantic's "Value error, " prefix
        message = str(err["ctx"]["error"])
        error_type = LENGTH_PARSE
    else:
        message = err["msg"]
        error_type = err["type"]
    return {
        "path": _field_path(err["loc"]),
        "message": message,
        "value": err.get("input"),
        "error_type": error_type,
    }


def _build(data: Any, source: Path | None) -> PlanConfiguration:
    try:
        return PlanConfiguration.model_validate(data)
    except PydanticValidationError as e:
        issues = [_issue(err) for err in e.errors()]

    if all(issue["error_type"] == LENGTH_PARSE for issue in issues):
        error_type = LENGTH_PARSE
        heading = "Unreadable measurement size"
    else:
        error_type = VALIDATION
        heading = "Invalid configuration"
    if source is not None:
        heading = f"{heading} in {source}"

    lines = [f"{heading}:"]
    lines.extend(f"  {issue['path']}: {issue['message']}" for issue in issues)
    raise ConfigError("\n".join(lines), error_type, source, issues)


def _read_json(path: Path) -> Any:
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}", FILE_NOT_FOUND, path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}", UNREADABLE, path)

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in {path}",
            JSON_PARSE,
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def load_config(path: Path) -> PlanConfiguration:
    """Load a plan configuration from a JSON file.

    Raises:
        ConfigError: If the file is missing or unreadable, is not valid
            JSON, or does not describe a valid plan.
    """
    return _build(_read_json(path), path)


def load_config_from_dict(data: dict[str, Any]) -> PlanConfiguration:
    """Load a plan configuration from already-decoded JSON data.

    Raises:
        ConfigError: If the data does not describe a valid plan.
    """
    return _build(data, None)
