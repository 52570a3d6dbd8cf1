"""Unit test shared fixtures.

Fixtures here are available to all unit tests but not integration tests.
Focus on lightweight mocks and fast execution.
"""

from __future__ import annotations

from typing import Any

import pytest

from riffwave.config.enums import CodecTag
from riffwave.container.models import WaveContainer


# =============================================================================
# Automatic Markers
# =============================================================================

def pytest_collection_modifyitems(items):
    """Automatically mark all tests in unit/ directory with @pytest.mark.unit."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Sample Data Factories
# =============================================================================

@pytest.fixture
def container_factory():
    """Factory fixture for decoded containers built without parsing.

    Returns:
        Callable that creates WaveContainer instances with sensible defaults.

    Example:
        >>> container = container_factory(sample_data=b"\\x00\\x00", bits=16)
        >>> assert container.frame_size == 2
    """
    def _create(
        sample_data: bytes = b"",
        codec: CodecTag = CodecTag.PCM,
        channels: int = 1,
        bits: int = 16,
        sample_rate: int = 44100,
        **overrides: Any,
    ) -> WaveContainer:
        frame_size = channels * ((bits + 7) // 8)
        fields: dict[str, Any] = {
            "codec": codec,
            "channels": channels,
            "sample_rate": sample_rate,
            "data_rate": frame_size * sample_rate,
            "frame_size": frame_size,
            "bits_per_sample": bits,
            "sample_data": sample_data,
            "file_size": 44 + len(sample_data),
        }
        fields.update(overrides)
        return WaveContainer(**fields)

    return _create
