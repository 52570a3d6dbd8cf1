"""YAML configuration source for riffwave."""

from pathlib import Path
from typing import Any

import yaml

from riffwave.config.protocols import CURRENT_SCHEMA_VERSION, RawSettings
from riffwave.exceptions import YAMLConfigError


class YAMLConfigSource:
    """Load configuration from YAML files.

    Implements the ConfigSource protocol for YAML file loading.

    Attributes:
        config_path: Path to the YAML configuration file
    """

    def __init__(self, config_path: Path) -> None:
        """Initialize the YAML config source.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            YAMLConfigError: If the file does not exist
        """
        self._config_path = config_path
        if not config_path.exists():
            raise YAMLConfigError(f"Configuration file not found: {config_path}")
        if not config_path.is_file():
            raise YAMLConfigError(f"Configuration path is not a file: {config_path}")

    @property
    def config_path(self) -> Path:
        return self._config_path

    def load(self) -> RawSettings:
        """Load and parse the YAML configuration file.

        Returns:
            The decoder section, schema version and file origin

        Raises:
            YAMLConfigError: If YAML parsing fails or structure is invalid
        """
        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            error_msg = f"Failed to parse YAML configuration: {e}"
            if hasattr(e, 'problem_mark') and e.problem_mark is not None:
                mark = e.problem_mark
                error_msg += f" (line {mark.line + 1}, column {mark.column + 1})"
            raise YAMLConfigError(error_msg) from e

        if data is None:
            raise YAMLConfigError("Configuration file is empty")

        if not isinstance(data, dict):
            raise YAMLConfigError(
                f"Configuration must be a YAML mapping, got {type(data).__name__}"
            )

        return self._extract_config(data)

    def _extract_config(self, data: dict[str, Any]) -> RawSettings:
        """Extract the decoder section and schema version from parsed YAML.

        Args:
            data: Parsed YAML data as a dictionary

        Returns:
            The decoder section, schema version and file origin

        Raises:
            YAMLConfigError: If the schema version or decoder section is invalid
        """
        schema_version = data.get('schema_version', 1)
        if not isinstance(schema_version, int) or isinstance(schema_version, bool):
            raise YAMLConfigError(
                f"'schema_version' must be an integer, got {type(schema_version).__name__}"
            )
        if schema_version > CURRENT_SCHEMA_VERSION:
            raise YAMLConfigError(
                f"Configuration schema version {schema_version} is not supported. "
                f"Maximum supported version is {CURRENT_SCHEMA_VERSION}. "
                "Please update riffwave."
            )

        # Decoder section is optional; missing keys fall back to model defaults
        decoder = data.get('decoder', {})
        if decoder is None:
            decoder = {}
        if not isinstance(decoder, dict):
            raise YAMLConfigError(
                f"'decoder' must be a mapping, got {type(decoder).__name__}"
            )

        return RawSettings(decoder, schema_version, f"YAML file: {self._config_path}")
