"""Signed 32-bit sample decoder for riffwave."""

import numpy as np

from riffwave.config.enums import CodecTag, SampleType
from riffwave.reader import ByteCursor
from riffwave.samples import mapping
from riffwave.samples.decoders.checks import check_pairing


class Int32Decoder:
    """Decoder for signed 32-bit destinations."""

    @property
    def sample_type(self) -> SampleType:
        return SampleType.I32

    @property
    def bit_width(self) -> int:
        return 32

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.int32

    def check(self, codec: CodecTag, bits: int) -> None:
        check_pairing(self.sample_type, self.bit_width, codec, bits)

    def read(self, cursor: ByteCursor, codec: CodecTag, bits: int) -> int:
        """Widen 8/16/24-bit PCM to the 32-bit range; 32-bit PCM is read as-is."""
        if bits == 8:
            return mapping.map_u8_to_i32(cursor.read_u8())
        if bits == 16:
            return mapping.map_i16_to_i32(cursor.read_i16())
        if bits == 24:
            # 24-bit extremes map to 32-bit extremes, not just sign extension
            return mapping.map_i24_to_i32(cursor.read_i24())
        return cursor.read_i32()

    def decode_one(self, cursor: ByteCursor, codec: CodecTag, bits: int) -> int:
        self.check(codec, bits)
        return self.read(cursor, codec, bits)
