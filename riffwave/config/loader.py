"""Configuration loader for riffwave."""

import logging
from pathlib import Path

from pydantic import ValidationError

from riffwave.config.default_source import DefaultConfigSource
from riffwave.config.models import DecoderSettings
from riffwave.config.protocols import ConfigSource
from riffwave.config.yaml_source import YAMLConfigSource
from riffwave.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

# Looked up in the working directory, first match wins
CONFIG_FILE_NAMES = ("riffwave.yaml", "riffwave.yml")


def find_config_file(directory: Path | None = None) -> Path | None:
    """Return the first riffwave config file in ``directory`` (default: cwd)."""
    directory = directory or Path.cwd()
    for name in CONFIG_FILE_NAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def default_config_path() -> Path:
    """Where ``init-config`` writes when no path is given."""
    return Path.cwd() / CONFIG_FILE_NAMES[0]


class SettingsLoader:
    """Load and validate decoder settings from a configuration source.

    Attributes:
        _source: Where raw settings data comes from
    """

    def __init__(self, source: ConfigSource | None = None) -> None:
        """Initialize the settings loader.

        Args:
            source: Configuration source (built-in defaults if None)
        """
        self._source = source or DefaultConfigSource()

    @property
    def source(self) -> ConfigSource:
        return self._source

    @classmethod
    def from_yaml(cls, config_path: Path) -> "SettingsLoader":
        """Create a loader reading the given YAML file."""
        return cls(YAMLConfigSource(config_path))

    @classmethod
    def resolve(cls, explicit_path: Path | None = None) -> "SettingsLoader":
        """Pick the settings source for a command.

        An explicit ``--config`` path wins, then a config file in the working
        directory, then the built-in defaults.

        Raises:
            ConfigValidationError: If an explicit path does not exist
        """
        if explicit_path is not None:
            if not explicit_path.exists():
                raise ConfigValidationError(f"Configuration file not found: {explicit_path}")
            return cls.from_yaml(explicit_path)

        found = find_config_file()
        if found is None:
            return cls()
        logger.debug("Using config file %s", found)
        return cls.from_yaml(found)

    def load(self) -> DecoderSettings:
        """Return validated decoder settings.

        Raises:
            ConfigValidationError: If the settings data is invalid
        """
        raw = self._source.load()
        logger.debug(
            "Loading decoder settings from %s (schema version %d)",
            raw.origin,
            raw.schema_version,
        )
        try:
            return DecoderSettings(**raw.values)
        except ValidationError as e:
            raise ConfigValidationError(
                f"Invalid decoder settings in {raw.origin}: {e}",
                errors=e,
            ) from e
