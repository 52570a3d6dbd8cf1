"""Pydantic models for decoded WAVE containers."""

from collections.abc import Iterator
from datetime import timedelta
from typing import TYPE_CHECKING

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from riffwave.config.enums import CodecTag, SampleType

if TYPE_CHECKING:
    from riffwave.config.models import DecoderSettings


class AudioMetadata(BaseModel):
    """Text fields collected from a LIST/INFO chunk.

    Every field stays ``None`` until a matching sub-chunk is read; a repeated
    sub-chunk overwrites the earlier value.
    """

    model_config = ConfigDict(frozen=True)

    album: str | None = None
    artist: str | None = None
    copyright: str | None = None
    date: str | None = None
    genre: str | None = None
    keywords: str | None = None
    name: str | None = None
    title: str | None = None
    comments: str | None = None
    description: str | None = None
    encoder: str | None = None

    def present(self) -> dict[str, str]:
        """Return only the fields that were populated."""
        return {key: value for key, value in self.model_dump().items() if value is not None}


class WaveContainer(BaseModel):
    """Result of a single decode pass over a RIFF/WAVE buffer.

    Frozen: the decoder assembles it once every chunk has been read, and
    assigning to a field afterwards raises a ``ValidationError``.
    """

    model_config = ConfigDict(frozen=True)

    codec: CodecTag = CodecTag.UNKNOWN
    channels: int = Field(0, ge=0)
    sample_rate: int = Field(0, ge=0, description="Frames per second")
    data_rate: int = Field(0, ge=0, description="Bytes per second")
    frame_size: int = Field(0, ge=0, description="Block align: bytes per multi-channel frame")
    bits_per_sample: int = Field(0, ge=0)
    fact_sample_count: int | None = Field(None, description="Sample count from the fact chunk")
    valid_bits_per_sample: int | None = None
    channel_mask: int | None = None
    sub_format: bytes | None = Field(None, description="Opaque 16-byte sub-format GUID")
    file_size: int = Field(0, ge=0, description="Total container length in bytes")
    sample_data: bytes = b""
    metadata: AudioMetadata = Field(default_factory=AudioMetadata)

    @property
    def is_extensible(self) -> bool:
        return self.sub_format is not None

    @property
    def num_of_frames(self) -> int:
        """Whole frames in the sample data (0 when the frame size is unknown)."""
        if self.frame_size == 0:
            return 0
        return len(self.sample_data) // self.frame_size

    @property
    def num_of_samples(self) -> int:
        """Sample count from the fact chunk, else derived from the data length."""
        if self.fact_sample_count is not None:
            return self.fact_sample_count
        return self.num_of_frames * self.channels

    @property
    def duration(self) -> timedelta:
        """Playback length truncated to whole seconds."""
        if self.sample_rate == 0:
            return timedelta(0)
        return timedelta(seconds=self.num_of_frames // self.sample_rate)

    @property
    def duration_seconds(self) -> float:
        """Playback length in seconds without truncation."""
        if self.sample_rate == 0:
            return 0.0
        return self.num_of_frames / self.sample_rate

    def iter_samples(
        self, sample_type: SampleType, settings: "DecoderSettings | None" = None
    ) -> Iterator[int | float]:
        """Lazily decode the sample data as ``sample_type``."""
        from riffwave.samples.extractor import SampleExtractor

        return SampleExtractor(self, settings=settings).iter_samples(sample_type)

    def samples(
        self, sample_type: SampleType, settings: "DecoderSettings | None" = None
    ) -> np.ndarray:
        """Decode the full sample data as ``sample_type``.

        Raises:
            UnsupportedBitDepthError: If the bit depth does not fit the sample type
            UnsupportedCodecError: If the codec payload would need decompression
            IncompatibleDestinationError: If float samples are requested as integers
        """
        from riffwave.samples.extractor import SampleExtractor

        return SampleExtractor(self, settings=settings).extract(sample_type)
