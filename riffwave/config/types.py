"""Type aliases for riffwave configuration."""
from typing import TypedDict


class SettingsDict(TypedDict, total=False):
    """TypedDict for decoder settings dictionaries."""
    text_encoding: str
    strip_text_terminators: bool
    strict_frame_alignment: bool
    default_sample_type: str
