"""Sample decoder protocols for riffwave."""

from typing import Protocol

import numpy as np

from riffwave.config.enums import CodecTag, SampleType
from riffwave.reader import ByteCursor


class SampleDecoder(Protocol):
    """Protocol for decoding one sample into a fixed destination representation."""

    @property
    def sample_type(self) -> SampleType:
        """Return the destination representation."""
        ...

    @property
    def bit_width(self) -> int:
        """Return the widest source bit depth this destination accepts."""
        ...

    @property
    def numpy_dtype(self) -> np.dtype:
        """Return the NumPy dtype for this destination."""
        ...

    def check(self, codec: CodecTag, bits: int) -> None:
        """Raise if samples of ``codec``/``bits`` cannot be decoded."""
        ...

    def read(self, cursor: ByteCursor, codec: CodecTag, bits: int) -> int | float:
        """Read one already-checked sample from the cursor."""
        ...

    def decode_one(self, cursor: ByteCursor, codec: CodecTag, bits: int) -> int | float:
        """Check the pairing, then read one sample from the cursor."""
        ...
