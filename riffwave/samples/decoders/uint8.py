"""Unsigned 8-bit sample decoder for riffwave."""

import numpy as np

from riffwave.config.enums import CodecTag, SampleType
from riffwave.reader import ByteCursor
from riffwave.samples.decoders.checks import check_pairing


class UInt8Decoder:
    """Decoder for unsigned 8-bit destinations (8-bit PCM only)."""

    @property
    def sample_type(self) -> SampleType:
        return SampleType.U8

    @property
    def bit_width(self) -> int:
        return 8

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.uint8

    def check(self, codec: CodecTag, bits: int) -> None:
        check_pairing(self.sample_type, self.bit_width, codec, bits)

    def read(self, cursor: ByteCursor, codec: CodecTag, bits: int) -> int:
        """Return the raw byte; 8-bit PCM is already unsigned."""
        return cursor.read_u8()

    def decode_one(self, cursor: ByteCursor, codec: CodecTag, bits: int) -> int:
        self.check(codec, bits)
        return self.read(cursor, codec, bits)
