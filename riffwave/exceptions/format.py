"""Errors raised while decoding the ``fmt `` chunk."""

from riffwave.exceptions.base import WaveDecodeError


class InvalidFormatLengthError(WaveDecodeError):
    """Raised when the fmt chunk body length is not 16, 18 or 40."""

    def __init__(self, length: int) -> None:
        super().__init__(f"Unexpected fmt section length: {length} (expected 16, 18 or 40).")
        self.length = length


class UnknownCodecError(WaveDecodeError):
    """Raised when the 16-bit format code is not a recognised codec tag."""

    def __init__(self, code: int) -> None:
        super().__init__(f"Unknown wave format code 0x{code:04x}.")
        self.code = code


class InvalidExtensionError(WaveDecodeError):
    """Raised when the fmt extension block is invalid for the codec.

    Extension sizes other than 0 and 22 are only tolerated for PCM, and an
    extension block may never overrun the declared fmt body length.
    """

    def __init__(self, extension_size: int, codec: str) -> None:
        super().__init__(
            f"Invalid fmt extension size {extension_size} for codec {codec}."
        )
        self.extension_size = extension_size
        self.codec = codec
