"""RIFF/WAVE container decoding package."""

from riffwave.container.models import AudioMetadata, WaveContainer
from riffwave.container.parser import WaveDecoder, decode, decode_file

__all__ = [
    "AudioMetadata",
    "WaveContainer",
    "WaveDecoder",
    "decode",
    "decode_file",
]
