"""Default decoder configuration for riffwave."""

from riffwave.config.types import SettingsDict

# Decoder defaults – plain dict for easy editing and config file generation
DECODER: SettingsDict = {
    "text_encoding": "utf-8",
    "strip_text_terminators": True,
    # Trailing bytes that do not form a whole sample are dropped when False
    "strict_frame_alignment": False,
    "default_sample_type": "f32",
}
