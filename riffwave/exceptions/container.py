"""Container-level (RIFF structure) decode errors."""

from riffwave.exceptions.base import WaveDecodeError


class InvalidHeaderError(WaveDecodeError):
    """Raised when the leading RIFF/WAVE magic values are missing or wrong."""

    def __init__(self, container_magic: int | None, form_magic: int | None) -> None:
        if container_magic is None or form_magic is None:
            message = "Source is too short to hold a RIFF WAVE header."
        else:
            message = (
                f"Source has invalid RIFF WAVE header "
                f"(container 0x{container_magic:08x}, form 0x{form_magic:08x})."
            )
        super().__init__(message)
        self.container_magic = container_magic
        self.form_magic = form_magic


class SizeMismatchError(WaveDecodeError):
    """Raised when the RIFF header size does not match the buffer length."""

    def __init__(self, declared: int, actual: int) -> None:
        super().__init__(
            f"Byte stream size ({actual} B) is not equal to the size declared "
            f"in the RIFF header ({declared} B)."
        )
        self.declared = declared
        self.actual = actual


class MissingFormatChunkError(WaveDecodeError):
    """Raised when no ``fmt `` chunk was found in the container."""

    def __init__(self) -> None:
        super().__init__("Wave container does not have the mandatory fmt chunk.")


class MissingFactChunkError(WaveDecodeError):
    """Raised when a non-PCM container lacks the mandatory ``fact`` chunk."""

    def __init__(self, codec: str) -> None:
        super().__init__(f"Mandatory fact chunk is missing for non-PCM codec {codec}.")
        self.codec = codec


class UnsupportedListTypeError(WaveDecodeError):
    """Raised when a ``LIST`` chunk carries a list type other than ``INFO``."""

    def __init__(self, list_type: str) -> None:
        super().__init__(f"Unsupported list type {list_type!r} in LIST chunk.")
        self.list_type = list_type


class TruncatedChunkError(WaveDecodeError):
    """Raised when a read or skip would run past the end of the buffer."""

    def __init__(self, offset: int, requested: int, available: int) -> None:
        super().__init__(
            f"Unexpected end of data at offset {offset}: "
            f"needed {requested} B, {available} B available."
        )
        self.offset = offset
        self.requested = requested
        self.available = available
