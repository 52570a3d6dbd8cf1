"""RIFF/WAVE chunk walker and decode entry points."""

import logging
from pathlib import Path
from typing import Any, BinaryIO, TypeAlias

from riffwave.config.enums import CodecTag
from riffwave.config.models import DecoderSettings
from riffwave.container.fmt import FormatChunkParser
from riffwave.container.info import InfoListParser
from riffwave.container.models import AudioMetadata, WaveContainer
from riffwave.container.tags import (
    CHUNK_DATA,
    CHUNK_FACT,
    CHUNK_FMT,
    CHUNK_ID3,
    CHUNK_ID3_ALT,
    CHUNK_LIST,
    RIFF_MAGIC,
    WAVE_MAGIC,
    tag_name,
)
from riffwave.exceptions import (
    InvalidHeaderError,
    MisalignedSampleDataError,
    MissingFactChunkError,
    MissingFormatChunkError,
    SizeMismatchError,
    TruncatedChunkError,
)
from riffwave.reader import ByteCursor

logger = logging.getLogger(__name__)

# "RIFF" and the size field are not counted by the declared size
RIFF_PREAMBLE_SIZE = 8

ByteSource: TypeAlias = bytes | bytearray | memoryview | BinaryIO


class WaveDecoder:
    """Decode an in-memory RIFF/WAVE image into a WaveContainer.

    A decoder holds no per-decode state; each call to ``decode`` walks its own
    cursor and returns an independently owned, frozen container.
    """

    def __init__(self, settings: DecoderSettings | None = None) -> None:
        """Initialize the decoder.

        Args:
            settings: Decoder behaviour (built-in defaults if None)
        """
        self.settings = settings or DecoderSettings()
        self._info_parser = InfoListParser(self.settings)

    def decode(self, source: ByteSource) -> WaveContainer:
        """Decode a complete WAVE image.

        Args:
            source: The whole container as bytes, or a binary stream to read fully

        Returns:
            WaveContainer: The decoded format, metadata and raw sample data

        Raises:
            WaveDecodeError: One subclass per violated structural or format rule
        """
        data = source.read() if hasattr(source, "read") else source
        cursor = ByteCursor(data)

        container = self._read_chunks(cursor, self._read_header(cursor))
        self._validate(container)
        return container

    def _read_header(self, cursor: ByteCursor) -> int:
        try:
            container_magic = cursor.read_u32()
            declared_size = cursor.read_u32()
            form_magic = cursor.read_u32()
        except TruncatedChunkError as e:
            raise InvalidHeaderError(None, None) from e

        if container_magic != RIFF_MAGIC or form_magic != WAVE_MAGIC:
            raise InvalidHeaderError(container_magic, form_magic)

        file_size = declared_size + RIFF_PREAMBLE_SIZE
        if file_size != len(cursor):
            raise SizeMismatchError(file_size, len(cursor))
        return file_size

    def _read_chunks(self, cursor: ByteCursor, file_size: int) -> WaveContainer:
        fields: dict[str, Any] = {"file_size": file_size}
        metadata: dict[str, str] = {}
        has_fmt = False
        has_fact = False

        while cursor.position < file_size:
            try:
                tag = cursor.read_u32()
            except TruncatedChunkError:
                # Running out of bytes at a chunk boundary ends the chunk sequence
                logger.debug(
                    "End of data at offset %d while reading a chunk tag (file size %d)",
                    cursor.position,
                    file_size,
                )
                break

            if tag == CHUNK_FMT:
                fields.update(FormatChunkParser.parse(cursor))
                has_fmt = True
            elif tag == CHUNK_FACT:
                fields["fact_sample_count"] = self._read_fact_chunk(cursor)
                has_fact = True
            elif tag == CHUNK_DATA:
                fields["sample_data"] = self._read_data_chunk(cursor)
            elif tag == CHUNK_LIST:
                metadata.update(self._info_parser.parse(cursor))
            elif tag in (CHUNK_ID3, CHUNK_ID3_ALT):
                self._skip_chunk(cursor, tag)
            else:
                logger.debug(
                    "Skipping unexpected chunk %r at %d", tag_name(tag), cursor.position - 4
                )
                self._skip_chunk(cursor, tag)

        if not has_fmt:
            raise MissingFormatChunkError()
        if fields["codec"] is not CodecTag.PCM and not has_fact:
            raise MissingFactChunkError(fields["codec"].label)

        return WaveContainer(metadata=AudioMetadata(**metadata), **fields)

    def _read_fact_chunk(self, cursor: ByteCursor) -> int:
        size = cursor.read_u32()
        sample_count = cursor.read_u32()
        if size > 4:
            cursor.skip(size - 4)
        return sample_count

    def _read_data_chunk(self, cursor: ByteCursor) -> bytes:
        size = cursor.read_u32()
        logger.debug("Data section at 0x%x (%d B)", cursor.position, size)
        sample_data = cursor.read_bytes(size)

        if size % 2 and not cursor.skip_padding():
            logger.debug("Odd-sized data chunk has no pad byte at end of file")
        return sample_data

    def _skip_chunk(self, cursor: ByteCursor, tag: int) -> None:
        size = cursor.read_u32()
        logger.debug("Skipping %d B of %r chunk", size, tag_name(tag))
        cursor.skip(size)

    def _validate(self, container: WaveContainer) -> None:
        if not self.settings.strict_frame_alignment or container.frame_size == 0:
            return
        if len(container.sample_data) % container.frame_size:
            raise MisalignedSampleDataError(len(container.sample_data), container.frame_size)


def decode(source: ByteSource, settings: DecoderSettings | None = None) -> WaveContainer:
    """Decode a RIFF/WAVE image held in memory.

    Args:
        source: The whole container as bytes, or a binary stream to read fully
        settings: Decoder behaviour (built-in defaults if None)

    Returns:
        WaveContainer: The decoded container
    """
    return WaveDecoder(settings).decode(source)


def decode_file(path: Path | str, settings: DecoderSettings | None = None) -> WaveContainer:
    """Read a file completely and decode it."""
    return decode(Path(path).read_bytes(), settings)
