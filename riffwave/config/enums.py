"""Enumerations shared by the decoder, the sample engine and the CLI."""

from enum import Enum

from riffwave.exceptions import UnknownCodecError


class CodecTag(Enum):
    """Closed set of WAVE format codes recognised in a ``fmt `` chunk."""

    PCM = 0x0001
    MS_ADPCM = 0x0002
    IEEE_FLOAT = 0x0003
    ALAW = 0x0006
    MULAW = 0x0007
    APTX = 0x0025
    DOLBY_AC2 = 0x0030
    MPEG1_L1_L2 = 0x0050
    MPEG1_L3 = 0x0055
    XBOX_ADPCM = 0x0069
    WAVE_EXTENSIBLE = 0xFFFE
    UNKNOWN = 0xFFFF

    @classmethod
    def from_code(cls, code: int) -> "CodecTag":
        """Map a 16-bit format code to its tag.

        ``UNKNOWN`` is only a placeholder for containers whose fmt chunk has
        not been read yet; it is never produced from a code.

        Raises:
            UnknownCodecError: If the code is not part of the closed set
        """
        if code == cls.UNKNOWN.value:
            raise UnknownCodecError(code)
        try:
            return cls(code)
        except ValueError:
            raise UnknownCodecError(code) from None

    @property
    def label(self) -> str:
        """Human-readable codec name."""
        return _CODEC_LABELS[self]

    def __str__(self) -> str:
        return self.label


_CODEC_LABELS = {
    CodecTag.PCM: "PCM",
    CodecTag.MS_ADPCM: "MS ADPCM",
    CodecTag.IEEE_FLOAT: "IEEE FLOAT",
    CodecTag.ALAW: "ALAW",
    CodecTag.MULAW: "MULAW",
    CodecTag.APTX: "APTX",
    CodecTag.DOLBY_AC2: "DOLBY AC2",
    CodecTag.MPEG1_L1_L2: "MPEG-1 Layer I, II",
    CodecTag.MPEG1_L3: "MPEG-1 Layer III (MP3)",
    CodecTag.XBOX_ADPCM: "Xbox ADPCM",
    CodecTag.WAVE_EXTENSIBLE: "WAVE EXTENSIBLE",
    CodecTag.UNKNOWN: "NONE",
}


class SampleType(str, Enum):
    """Selectable destination representations for decoded samples."""

    U8 = "u8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    F32 = "f32"
    F64 = "f64"

    @property
    def is_float(self) -> bool:
        return self in (SampleType.F32, SampleType.F64)

    def __str__(self) -> str:  # pragma: no cover - convenience for Typer display
        return self.value
