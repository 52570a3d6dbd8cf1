"""Signed 64-bit sample decoder for riffwave."""

import numpy as np

from riffwave.config.enums import CodecTag, SampleType
from riffwave.reader import ByteCursor
from riffwave.samples import mapping
from riffwave.samples.decoders.checks import check_pairing


class Int64Decoder:
    """Decoder for signed 64-bit destinations."""

    @property
    def sample_type(self) -> SampleType:
        return SampleType.I64

    @property
    def bit_width(self) -> int:
        return 64

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.int64

    def check(self, codec: CodecTag, bits: int) -> None:
        check_pairing(self.sample_type, self.bit_width, codec, bits)

    def read(self, cursor: ByteCursor, codec: CodecTag, bits: int) -> int:
        if bits == 8:
            return mapping.map_u8_to_i64(cursor.read_u8())
        if bits == 16:
            return mapping.map_i16_to_i64(cursor.read_i16())
        if bits == 24:
            return mapping.map_i24_to_i64(cursor.read_i24())
        if bits == 32:
            return mapping.map_i32_to_i64(cursor.read_i32())
        return cursor.read_i64()

    def decode_one(self, cursor: ByteCursor, codec: CodecTag, bits: int) -> int:
        self.check(codec, bits)
        return self.read(cursor, codec, bits)
