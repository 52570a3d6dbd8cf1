"""Sample conversion for decoded WAVE containers."""
from riffwave.samples.decoders import SampleDecoder, get_decoder
from riffwave.samples.extractor import SampleExtractor

__all__ = ["SampleDecoder", "SampleExtractor", "get_decoder"]
