"""Codec and bit-depth preconditions shared by every sample decoder."""

from riffwave.config.enums import CodecTag, SampleType
from riffwave.exceptions import (
    IncompatibleDestinationError,
    UnsupportedBitDepthError,
    UnsupportedCodecError,
)

PCM_BIT_DEPTHS = (8, 16, 24, 32, 64)
FLOAT_BIT_DEPTHS = (32, 64)


def check_pairing(sample_type: SampleType, bit_width: int, codec: CodecTag, bits: int) -> None:
    """Validate that ``codec``/``bits`` samples can be read as ``sample_type``.

    Raises:
        IncompatibleDestinationError: If float samples are requested as integers
        UnsupportedCodecError: If the codec is neither PCM nor IEEE float
        UnsupportedBitDepthError: If the bit depth is unsupported or too wide
    """
    if codec is CodecTag.IEEE_FLOAT:
        if not sample_type.is_float:
            raise IncompatibleDestinationError(codec.label, sample_type.value)
        if bits not in FLOAT_BIT_DEPTHS:
            raise UnsupportedBitDepthError(bits, sample_type.value)
    elif codec is CodecTag.PCM:
        if bits > bit_width or bits not in PCM_BIT_DEPTHS:
            raise UnsupportedBitDepthError(bits, sample_type.value)
    else:
        raise UnsupportedCodecError(codec.label)
