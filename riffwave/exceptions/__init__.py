"""Exception hierarchy for riffwave."""
from riffwave.exceptions.base import ConfigError, WaveDecodeError
from riffwave.exceptions.config import ConfigValidationError, YAMLConfigError
from riffwave.exceptions.container import (
    InvalidHeaderError,
    SizeMismatchError,
    MissingFormatChunkError,
    MissingFactChunkError,
    UnsupportedListTypeError,
    TruncatedChunkError,
)
from riffwave.exceptions.format import (
    InvalidFormatLengthError,
    UnknownCodecError,
    InvalidExtensionError,
)
from riffwave.exceptions.samples import (
    UnsupportedBitDepthError,
    UnsupportedCodecError,
    IncompatibleDestinationError,
    MisalignedSampleDataError,
)

__all__ = [
    "WaveDecodeError",
    "InvalidHeaderError",
    "SizeMismatchError",
    "MissingFormatChunkError",
    "MissingFactChunkError",
    "UnsupportedListTypeError",
    "TruncatedChunkError",
    "InvalidFormatLengthError",
    "UnknownCodecError",
    "InvalidExtensionError",
    "UnsupportedBitDepthError",
    "UnsupportedCodecError",
    "IncompatibleDestinationError",
    "MisalignedSampleDataError",
    "ConfigError",
    "ConfigValidationError",
    "YAMLConfigError",
]
