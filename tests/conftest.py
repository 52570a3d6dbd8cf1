"""Root-level pytest configuration and shared fixtures.

This module provides fixtures that are universally applicable across
all test modules. Fixtures here should be:
- Stateless or session-scoped
- Generic enough for reuse across different test categories
- Well-documented with clear purpose

The byte-image factories build RIFF/WAVE buffers field by field so tests
can describe malformed containers as easily as well-formed ones.
"""

from __future__ import annotations

import struct
from collections.abc import Callable
from pathlib import Path

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from riffwave.output import OutputHandler


# =============================================================================
# RIFF Byte Builders
# =============================================================================

def build_chunk(tag: bytes, body: bytes, *, pad: bool = True) -> bytes:
    """Return ``tag`` + little-endian size + ``body`` (+ pad byte when odd)."""
    chunk = tag + struct.pack("<I", len(body)) + body
    if pad and len(body) % 2:
        chunk += b"\x00"
    return chunk


def build_fmt_body(
    codec: int = 1,
    channels: int = 1,
    sample_rate: int = 44100,
    bits: int = 16,
    *,
    block_align: int | None = None,
    byte_rate: int | None = None,
    extension: bytes | None = None,
) -> bytes:
    """Return a fmt chunk body; ``extension`` is appended verbatim (with its size field)."""
    if block_align is None:
        block_align = channels * ((bits + 7) // 8)
    if byte_rate is None:
        byte_rate = block_align * sample_rate
    body = struct.pack("<HHIIHH", codec, channels, sample_rate, byte_rate, block_align, bits)
    if extension is not None:
        body += extension
    return body


def build_extensible(valid_bits: int = 24, channel_mask: int = 0x3, sub_format: bytes = b"\x01" + b"\x00" * 15) -> bytes:
    """Return a 22-byte WAVE-Extensible extension block including its size field."""
    return struct.pack("<HHI", 22, valid_bits, channel_mask) + sub_format


def build_riff(*chunks: bytes, declared_size: int | None = None, form: bytes = b"WAVE") -> bytes:
    """Wrap chunks in a RIFF header whose size matches unless overridden."""
    payload = form + b"".join(chunks)
    size = len(payload) if declared_size is None else declared_size
    return b"RIFF" + struct.pack("<I", size) + payload


def build_wav(
    data: bytes = b"",
    *,
    codec: int = 1,
    channels: int = 1,
    sample_rate: int = 44100,
    bits: int = 16,
    fact: int | None = None,
    extra: tuple[bytes, ...] = (),
) -> bytes:
    """Return a complete container: fmt, optional fact, extra chunks, then data."""
    chunks = [build_chunk(b"fmt ", build_fmt_body(codec, channels, sample_rate, bits))]
    if fact is not None:
        chunks.append(build_chunk(b"fact", struct.pack("<I", fact)))
    chunks.extend(extra)
    chunks.append(build_chunk(b"data", data))
    return build_riff(*chunks)


@pytest.fixture
def chunk_factory() -> Callable[..., bytes]:
    """Factory fixture for a single RIFF chunk.

    Example:
        >>> chunk_factory(b"data", b"\\x01\\x02\\x03")  # size 3 plus a pad byte
    """
    return build_chunk


@pytest.fixture
def fmt_body_factory() -> Callable[..., bytes]:
    """Factory fixture for fmt chunk bodies with derived block align and byte rate."""
    return build_fmt_body


@pytest.fixture
def extensible_factory() -> Callable[..., bytes]:
    """Factory fixture for WAVE-Extensible extension blocks."""
    return build_extensible


@pytest.fixture
def riff_factory() -> Callable[..., bytes]:
    """Factory fixture wrapping chunks in a RIFF/WAVE header."""
    return build_riff


@pytest.fixture
def wav_factory() -> Callable[..., bytes]:
    """Factory fixture for complete, well-formed WAVE images."""
    return build_wav


@pytest.fixture
def pcm16_wav() -> bytes:
    """Mono 16-bit PCM at 8 kHz holding the samples 0, 1, -1, 32767, -32768."""
    data = struct.pack("<5h", 0, 1, -1, 32767, -32768)
    return build_wav(data, sample_rate=8000)


@pytest.fixture
def float32_wav() -> bytes:
    """Mono IEEE float at 16 kHz holding 1.0 and -1.0, with its fact chunk."""
    return build_wav(struct.pack("<2f", 1.0, -1.0), codec=3, sample_rate=16000, bits=32, fact=2)


# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def tmp_input_dir(tmp_path: Path) -> Path:
    """Create a temporary input directory for test files.

    Returns:
        Path to a clean temporary directory for input files.
    """
    input_dir = tmp_path / "input"
    input_dir.mkdir(parents=True, exist_ok=True)
    return input_dir


# =============================================================================
# Output Fixtures
# =============================================================================

@pytest.fixture
def mock_console(mocker: MockerFixture):
    """Mock Rich Console passed to ConsoleOutputHandler."""
    return mocker.MagicMock(spec=Console)


@pytest.fixture
def mock_output_handler(mocker: MockerFixture):
    """Mock OutputHandler injected into the CLI commands.

    Patches the commands' output factory, so every command run in the test
    reports through this mock instead of the terminal.
    """
    handler = mocker.MagicMock(spec=OutputHandler)
    mocker.patch("riffwave.cli.commands._get_output", return_value=handler)
    return handler


# =============================================================================
# Configuration Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "pydantic: Tests for Pydantic validation")
