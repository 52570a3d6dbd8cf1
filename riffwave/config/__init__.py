"""Configuration package for riffwave."""

# Re-export enums
from riffwave.config.enums import CodecTag, SampleType

# Re-export models
from riffwave.config.models import DecoderSettings

# Re-export loader
from riffwave.config.loader import SettingsLoader

# Re-export defaults
from riffwave.config.defaults import DECODER

__all__ = [
    # Enums
    "CodecTag",
    "SampleType",
    # Models
    "DecoderSettings",
    # Loader
    "SettingsLoader",
    # Defaults
    "DECODER",
]
