"""Integration test configuration and fixtures.

Files here are written by independent encoders (the standard-library
``wave`` module for PCM, libsndfile through ``soundfile`` for IEEE float)
so decoded values can be cross-checked against a second implementation.
"""

from __future__ import annotations

import wave
from collections.abc import Callable
from pathlib import Path

import numpy as np
import pytest
import soundfile as sf

SAMPLE_RATE = 8000


def _to_pcm_bytes(samples: np.ndarray, sample_width: int) -> bytes:
    """Pack integer samples into little-endian PCM bytes of the given width."""
    if sample_width == 1:
        return samples.astype(np.uint8).tobytes()
    if sample_width == 3:
        as_int32 = samples.astype("<i4")
        # Keep the three low-order bytes of each little-endian int32
        return as_int32.view(np.uint8).reshape(-1, 4)[:, :3].tobytes()
    return samples.astype(f"<i{sample_width}").tobytes()


@pytest.fixture
def pcm_wav_factory(tmp_path: Path) -> Callable[..., Path]:
    """Factory fixture writing interleaved integer samples with the wave module.

    Returns:
        Callable taking (name, samples[frames, channels], sample_width) and
        returning the written path.
    """
    def _create(name: str, samples: np.ndarray, sample_width: int, sample_rate: int = SAMPLE_RATE) -> Path:
        path = tmp_path / name
        with wave.open(str(path), "wb") as wav:
            wav.setnchannels(samples.shape[1])
            wav.setsampwidth(sample_width)
            wav.setframerate(sample_rate)
            wav.writeframes(_to_pcm_bytes(samples.reshape(-1), sample_width))
        return path

    return _create


@pytest.fixture
def float_wav_factory(tmp_path: Path) -> Callable[..., Path]:
    """Factory fixture writing IEEE float WAV files with libsndfile."""
    def _create(name: str, samples: np.ndarray, subtype: str = "FLOAT", sample_rate: int = SAMPLE_RATE) -> Path:
        path = tmp_path / name
        sf.write(str(path), samples, sample_rate, subtype=subtype, format="WAV")
        return path

    return _create


@pytest.fixture
def sine_float32() -> np.ndarray:
    """One second of a 440 Hz stereo sine at half scale, shaped (frames, channels)."""
    t = np.arange(SAMPLE_RATE) / SAMPLE_RATE
    left = 0.5 * np.sin(2 * np.pi * 440 * t)
    right = -left
    return np.stack([left, right], axis=1).astype(np.float32)


@pytest.fixture
def ramp_int16() -> np.ndarray:
    """A mono int16 ramp that includes both extremes, shaped (frames, 1)."""
    values = np.concatenate([
        np.array([-32768, -1, 0, 1, 32767], dtype=np.int16),
        np.linspace(-32768, 32767, 995).astype(np.int16),
    ])
    return values.reshape(-1, 1)
