"""Per-destination sample decoding strategies."""
from riffwave.samples.decoders.protocols import SampleDecoder
from riffwave.samples.decoders.factory import get_decoder

__all__ = ["SampleDecoder", "get_decoder"]
