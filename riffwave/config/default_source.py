"""Default configuration source for riffwave."""

from riffwave.config.defaults import DECODER
from riffwave.config.protocols import CURRENT_SCHEMA_VERSION, RawSettings


class DefaultConfigSource:
    """Serve the built-in decoder defaults from riffwave/config/defaults.py."""

    def load(self) -> RawSettings:
        return RawSettings(dict(DECODER), CURRENT_SCHEMA_VERSION, "built-in defaults")
