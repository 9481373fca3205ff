"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from ..logging.config import configure_logging
from .defaults import DefaultConfig, get_default_config
from .validation import ConfigValidator

DEFAULT_CONFIG_FILE = "monadic.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_path: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_path is None:
            config_path = Path.cwd() / DEFAULT_CONFIG_FILE

        return cls(
            config_path=Path(config_path),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from the YAML file, empty if the file is absent."""
        if not self.config_path.exists():
            return {}

        try:
            with open(self.config_path) as f:
                file_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Malformed configuration file: {e}",
                source=str(self.config_path),
            ) from e

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                "Configuration file must contain a mapping",
                source=str(self.config_path),
            )
        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. YAML file values
        3. Defaults (lowest priority)

        Every section must be a mapping; ``logging:`` left empty or set to
        a scalar is rejected rather than replacing the defaults.
        """
        config = asdict(self.defaults)
        for layer in (self.load_file_config(), overrides or {}):
            for section, values in layer.items():
                if section not in config:
                    config[section] = values
                    continue
                if not isinstance(values, dict):
                    raise ConfigurationError(
                        f"Section '{section}' must be a mapping, "
                        f"got {type(values).__name__}",
                        source=str(self.config_path),
                    )
                config[section] = {**config[section], **values}

        errors = ConfigValidator.validate_logging_params(config["logging"])
        if errors:
            raise ConfigurationError(
                "; ".join(f"{e.field}: {e.message}" for e in errors),
                source=str(self.config_path),
                errors=errors,
            )

        return config


def configure_from(config: dict[str, Any]) -> None:
    """Apply the logging section of a merged configuration."""
    configure_logging(**config.get("logging", {}))
