"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import LoggingParams

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOGGING_FLAGS = ("format_json", "include_timestamp", "include_caller", "contract_violations")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_logging_params(params: Any) -> list[ValidationError]:
        """Validate logging parameters."""
        if not isinstance(params, dict):
            return [ValidationError(
                field="logging",
                message="Must be a mapping",
                value=params
            )]

        errors = []
        known = {f.name for f in fields(LoggingParams)}

        for name in params:
            if name not in known:
                errors.append(ValidationError(
                    field=name,
                    message="Unknown logging option",
                    value=params[name]
                ))

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        for flag in LOGGING_FLAGS:
            if flag in params:
                value = params[flag]
                if not isinstance(value, bool):
                    errors.append(ValidationError(
                        field=flag,
                        message="Must be a boolean",
                        value=value
                    ))

        return errors
