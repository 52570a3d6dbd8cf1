"""Signed 16-bit sample decoder for riffwave."""

import numpy as np

from riffwave.config.enums import CodecTag, SampleType
from riffwave.reader import ByteCursor
from riffwave.samples import mapping
from riffwave.samples.decoders.checks import check_pairing


class Int16Decoder:
    """Decoder for signed 16-bit destinations."""

    @property
    def sample_type(self) -> SampleType:
        return SampleType.I16

    @property
    def bit_width(self) -> int:
        return 16

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.int16

    def check(self, codec: CodecTag, bits: int) -> None:
        check_pairing(self.sample_type, self.bit_width, codec, bits)

    def read(self, cursor: ByteCursor, codec: CodecTag, bits: int) -> int:
        """Widen 8-bit PCM to the 16-bit range; 16-bit PCM is read as-is."""
        if bits == 8:
            return mapping.map_u8_to_i16(cursor.read_u8())
        return cursor.read_i16()

    def decode_one(self, cursor: ByteCursor, codec: CodecTag, bits: int) -> int:
        self.check(codec, bits)
        return self.read(cursor, codec, bits)
