"""Where decoder settings come from before validation."""

from typing import NamedTuple, Protocol, runtime_checkable

from riffwave.config.types import SettingsDict

# Highest config file schema this release understands
CURRENT_SCHEMA_VERSION = 1


class RawSettings(NamedTuple):
    """Unvalidated ``decoder`` settings as read from one source.

    Attributes:
        values: Setting names mapped to raw values; missing keys take model defaults
        schema_version: Schema version declared by the source
        origin: Where the values came from, for log and error messages
    """

    values: SettingsDict
    schema_version: int
    origin: str


@runtime_checkable
class ConfigSource(Protocol):
    """A source of raw decoder settings for SettingsLoader."""

    def load(self) -> RawSettings:
        """Read the source.

        Raises:
            ConfigError: If the source cannot be read or has the wrong shape
        """
        ...
