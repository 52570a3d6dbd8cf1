"""Decoding of the ``fmt `` chunk."""

import logging
from typing import Any

from riffwave.config.enums import CodecTag
from riffwave.exceptions import InvalidExtensionError, InvalidFormatLengthError
from riffwave.reader import ByteCursor

logger = logging.getLogger(__name__)

VALID_FORMAT_LENGTHS = (16, 18, 40)
BASE_FIELDS_SIZE = 16
EXTENSIBLE_SIZE = 22


class FormatChunkParser:
    """Read the format descriptor fields of a WaveContainer.

    Layout after the chunk tag::

        size(u32) codec(u16) channels(u16) sample_rate(u32) byte_rate(u32)
        block_align(u16) bits_per_sample(u16)
        [ext_size(u16) [valid_bits(u16) channel_mask(u32) sub_format(16)]]
    """

    @staticmethod
    def parse(cursor: ByteCursor) -> dict[str, Any]:
        """Consume the fmt chunk at the cursor, starting with its length field.

        Returns:
            WaveContainer field names mapped to the decoded values

        Raises:
            InvalidFormatLengthError: If the body length is not 16, 18 or 40
            UnknownCodecError: If the format code is not recognised
            InvalidExtensionError: If the extension block is invalid for the codec
            TruncatedChunkError: If the buffer ends inside the chunk
        """
        length = cursor.read_u32()
        if length not in VALID_FORMAT_LENGTHS:
            raise InvalidFormatLengthError(length)
        body_start = cursor.position

        fields: dict[str, Any] = {
            "codec": CodecTag.from_code(cursor.read_u16()),
            "channels": cursor.read_u16(),
            "sample_rate": cursor.read_u32(),
            "data_rate": cursor.read_u32(),
            "frame_size": cursor.read_u16(),
            "bits_per_sample": cursor.read_u16(),
        }

        if length > BASE_FIELDS_SIZE:
            fields.update(FormatChunkParser._parse_extension(cursor, fields["codec"], length))

        # Unused trailing body bytes are skipped so the chunk walk stays in sync
        consumed = cursor.position - body_start
        if consumed < length:
            cursor.skip(length - consumed)

        FormatChunkParser._check_block_align(fields)
        return fields

    @staticmethod
    def _parse_extension(cursor: ByteCursor, codec: CodecTag, length: int) -> dict[str, Any]:
        extension_size = cursor.read_u16()
        if extension_size == EXTENSIBLE_SIZE:
            if BASE_FIELDS_SIZE + 2 + EXTENSIBLE_SIZE > length:
                raise InvalidExtensionError(extension_size, codec.label)
            return {
                "valid_bits_per_sample": cursor.read_u16(),
                "channel_mask": cursor.read_u32(),
                "sub_format": cursor.read_bytes(16),
            }
        if extension_size != 0 and codec is not CodecTag.PCM:
            # Extensible fields are mandatory metadata for non-PCM codecs
            raise InvalidExtensionError(extension_size, codec.label)
        return {}

    @staticmethod
    def _check_block_align(fields: dict[str, Any]) -> None:
        if fields["codec"] is not CodecTag.PCM:
            return
        expected = fields["channels"] * ((fields["bits_per_sample"] + 7) // 8)
        if fields["frame_size"] != expected:
            logger.warning(
                "PCM block align is %d B but %d channel(s) at %d bits imply %d B",
                fields["frame_size"],
                fields["channels"],
                fields["bits_per_sample"],
                expected,
            )
