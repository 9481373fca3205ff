"""Default configuration parameters."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters, passed through to configure_logging."""
    level: str = "INFO"                  # DEBUG shows contract violations
    format_json: bool = False            # JSON lines vs console renderer
    include_timestamp: bool = True
    include_caller: bool = False         # Filename and line number
    contract_violations: bool = True     # Emit List misuse events at DEBUG


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        logging=LoggingParams(),
    )
