"""Errors raised while re-interpreting raw sample data."""

from riffwave.exceptions.base import WaveDecodeError


class UnsupportedBitDepthError(WaveDecodeError):
    """Raised when a bit depth cannot be read into the requested sample type."""

    def __init__(self, bits: int, sample_type: str) -> None:
        super().__init__(f"{bits} bits per sample cannot be decoded as {sample_type}.")
        self.bits = bits
        self.sample_type = sample_type


class UnsupportedCodecError(WaveDecodeError):
    """Raised for codecs whose payload would need decompression."""

    def __init__(self, codec: str) -> None:
        super().__init__(f"Sample payloads encoded as {codec} are not supported.")
        self.codec = codec


class IncompatibleDestinationError(WaveDecodeError):
    """Raised when floating-point samples are requested as integers."""

    def __init__(self, codec: str, sample_type: str) -> None:
        super().__init__(
            f"{sample_type} is not capable of storing {codec} samples without truncation."
        )
        self.codec = codec
        self.sample_type = sample_type


class MisalignedSampleDataError(WaveDecodeError):
    """Raised in strict mode when sample data does not end on a boundary."""

    def __init__(self, length: int, boundary: int) -> None:
        super().__init__(
            f"Sample data length {length} B is not a multiple of {boundary} B."
        )
        self.length = length
        self.boundary = boundary
