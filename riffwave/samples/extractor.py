"""Sequential decoding of a container's sample data."""

import logging
from collections.abc import Iterator

import numpy as np

from riffwave.config.enums import SampleType
from riffwave.config.models import DecoderSettings
from riffwave.container.models import WaveContainer
from riffwave.exceptions import MisalignedSampleDataError
from riffwave.reader import ByteCursor
from riffwave.samples.decoders import get_decoder

logger = logging.getLogger(__name__)


class SampleExtractor:
    """Decode interleaved samples from a WaveContainer.

    Every call walks a fresh cursor over the container's sample data, so the
    container is never modified and repeated extraction gives equal results.
    """

    def __init__(self, container: WaveContainer, *, settings: DecoderSettings | None = None) -> None:
        self.container = container
        self.settings = settings or DecoderSettings()

    def iter_samples(self, sample_type: SampleType) -> Iterator[int | float]:
        """Yield samples one at a time as ``sample_type``.

        The codec/bit-depth pairing is validated before the first sample is
        produced, so an unsupported pairing fails even for empty data.

        Raises:
            UnsupportedBitDepthError: If the bit depth does not fit the sample type
            UnsupportedCodecError: If the codec is neither PCM nor IEEE float
            IncompatibleDestinationError: If float samples are requested as integers
            MisalignedSampleDataError: In strict mode, if trailing bytes remain
        """
        decoder = get_decoder(sample_type)
        codec = self.container.codec
        bits = self.container.bits_per_sample
        decoder.check(codec, bits)
        return self._iter(decoder, codec, bits)

    def _iter(self, decoder, codec, bits) -> Iterator[int | float]:
        cursor = ByteCursor(self.container.sample_data)
        width = (bits + 7) // 8

        while cursor.remaining >= width:
            yield decoder.read(cursor, codec, bits)

        if cursor.remaining:
            if self.settings.strict_frame_alignment:
                raise MisalignedSampleDataError(len(cursor), width)
            logger.debug("Ignoring %d trailing byte(s) of sample data", cursor.remaining)

    def extract(self, sample_type: SampleType) -> np.ndarray:
        """Decode all samples into a one-dimensional array (interleaved by channel)."""
        decoder = get_decoder(sample_type)
        return np.fromiter(self.iter_samples(sample_type), dtype=decoder.numpy_dtype)
