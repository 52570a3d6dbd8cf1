"""32-bit float sample decoder for riffwave."""

import numpy as np

from riffwave.config.enums import CodecTag, SampleType
from riffwave.reader import ByteCursor
from riffwave.samples import mapping
from riffwave.samples.decoders.checks import check_pairing


class Float32Decoder:
    """Decoder for 32-bit float destinations.

    PCM input is normalised to [-1.0, 1.0]. IEEE float input is passed
    through, rounding 64-bit values to float32. 64-bit sources lose precision
    here; float32 cannot represent every 64-bit integer.
    """

    @property
    def sample_type(self) -> SampleType:
        return SampleType.F32

    @property
    def bit_width(self) -> int:
        return 64

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.float32

    def check(self, codec: CodecTag, bits: int) -> None:
        check_pairing(self.sample_type, self.bit_width, codec, bits)

    def read(self, cursor: ByteCursor, codec: CodecTag, bits: int) -> float:
        if codec is CodecTag.IEEE_FLOAT:
            if bits == 32:
                return cursor.read_f32()
            return float(np.float32(cursor.read_f64()))

        if bits == 8:
            return mapping.map_u8_to_f32(cursor.read_u8())
        if bits == 16:
            return mapping.map_i16_to_f32(cursor.read_i16())
        if bits == 24:
            return mapping.map_i24_to_f32(cursor.read_i24())
        if bits == 32:
            return mapping.map_i32_to_f32(cursor.read_i32())
        return mapping.map_i64_to_f32(cursor.read_i64())

    def decode_one(self, cursor: ByteCursor, codec: CodecTag, bits: int) -> float:
        self.check(codec, bits)
        return self.read(cursor, codec, bits)
