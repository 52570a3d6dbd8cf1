"""In-memory RIFF/WAVE decoding and sample conversion."""
from riffwave.config import CodecTag, DecoderSettings, SampleType, SettingsLoader
from riffwave.constants import VERSION
from riffwave.container import AudioMetadata, WaveContainer, WaveDecoder, decode, decode_file
from riffwave.exceptions import ConfigError, WaveDecodeError
from riffwave.samples import SampleExtractor, get_decoder

__version__ = VERSION

__all__ = [
    "AudioMetadata",
    "CodecTag",
    "ConfigError",
    "DecoderSettings",
    "SampleExtractor",
    "SampleType",
    "SettingsLoader",
    "WaveContainer",
    "WaveDecodeError",
    "WaveDecoder",
    "decode",
    "decode_file",
    "get_decoder",
]
