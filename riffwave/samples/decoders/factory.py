"""Factory functions for sample decoders."""

from typing import cast

from riffwave.config.enums import SampleType
from riffwave.samples.decoders.float32 import Float32Decoder
from riffwave.samples.decoders.float64 import Float64Decoder
from riffwave.samples.decoders.int16 import Int16Decoder
from riffwave.samples.decoders.int32 import Int32Decoder
from riffwave.samples.decoders.int64 import Int64Decoder
from riffwave.samples.decoders.protocols import SampleDecoder
from riffwave.samples.decoders.uint8 import UInt8Decoder


def get_decoder(sample_type: SampleType) -> SampleDecoder:
    """Factory function to get the decoder for the given destination type.

    Args:
        sample_type: The destination representation

    Returns:
        SampleDecoder: The decoder instance for that representation
    """
    decoders = {
        SampleType.U8: UInt8Decoder(),
        SampleType.I16: Int16Decoder(),
        SampleType.I32: Int32Decoder(),
        SampleType.I64: Int64Decoder(),
        SampleType.F32: Float32Decoder(),
        SampleType.F64: Float64Decoder(),
    }
    return cast(SampleDecoder, decoders[SampleType(sample_type)])
