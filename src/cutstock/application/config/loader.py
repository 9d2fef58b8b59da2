"""Loading of JSON job files.

Every failure, whether the file is missing, unreadable, not JSON or not a
valid job, surfaces as a single ConfigError whose ``error_type`` says
which step failed.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from cutstock.application.config.schema import OptimizationConfiguration


class ConfigError(Exception):
    """A job file or job dictionary could not be turned into a job.

    Attributes:
        message: Human readable summary
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation, missing_options
        path: Job file involved, if any
        details: Per-problem records (line/column for JSON errors,
            path/message/value for validation errors)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = list(details) if details else []

    def __str__(self) -> str:
        return self.message


def _json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location in dotted JSON path form.

    Examples:
        >>> _json_path(("sheet", "quantity"))
        'sheet.quantity'
        >>> _json_path(("pieces", 2, "length"))
        'pieces[2].length'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def _problems(error: ValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _json_path(item["loc"]),
            "message": item["msg"],
            "value": item.get("input"),
            "error_type": item["type"],
        }
        for item in error.errors()
    ]


def _summarize(problems: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for problem in problems:
        line = f"  - {problem['path']}: {problem['message']}"
        if problem["value"] is not None:
            line += f" (got: {problem['value']!r})"
        lines.append(line)
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> OptimizationConfiguration:
    try:
        return OptimizationConfiguration.model_validate(data)
    except ValidationError as e:
        problems = _problems(e)
        raise ConfigError(_summarize(problems), "validation", path, problems)


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}", "file_not_found", path)

    try:
        text = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            f"Permission denied reading config file: {path}",
            "permission_denied",
            path,
        )
    except OSError as e:
        raise ConfigError(
            f"Could not read config file {path}: {e}", "file_read_error", path
        )

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in {path} at line {e.lineno}, column {e.colno}: {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def load_config(path: Path) -> OptimizationConfiguration:
    """Read and validate a JSON job file.

    Raises:
        ConfigError: If the file is missing, unreadable, malformed JSON or
            fails schema validation.
    """
    return _validate(_read_json(path), path)


def load_config_from_dict(data: dict[str, Any]) -> OptimizationConfiguration:
    """Validate a job given as a dictionary (e.g. assembled from CLI options).

    Raises:
        ConfigError: If the data fails schema validation.
    """
    return _validate(data)
