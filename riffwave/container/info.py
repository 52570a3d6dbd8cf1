"""Decoding of ``LIST``/``INFO`` metadata chunks."""

import logging

from riffwave.config.models import DecoderSettings
from riffwave.container.tags import INFO_FIELDS, LIST_TYPE_INFO, tag_name
from riffwave.exceptions import TruncatedChunkError, UnsupportedListTypeError
from riffwave.reader import ByteCursor

logger = logging.getLogger(__name__)


class InfoListParser:
    """Collect INFO sub-chunks as AudioMetadata field values.

    Text sub-chunks are word aligned: after each one, a pad byte is skipped
    when the cursor sits on an odd offset.
    """

    def __init__(self, settings: DecoderSettings | None = None) -> None:
        self._settings = settings or DecoderSettings()

    def parse(self, cursor: ByteCursor) -> dict[str, str]:
        """Consume a LIST chunk at the cursor, starting with its length field.

        Returns:
            AudioMetadata field names mapped to text; a repeated sub-tag keeps its last value

        Raises:
            UnsupportedListTypeError: If the list type is not INFO
            TruncatedChunkError: If the buffer ends inside a sub-chunk
        """
        chunk_size = cursor.read_u32()
        list_type = cursor.read_u32()
        if list_type != LIST_TYPE_INFO:
            raise UnsupportedListTypeError(tag_name(list_type))

        fields: dict[str, str] = {}
        # The list type has already been consumed
        count = 4
        while count < chunk_size:
            try:
                sub_tag = cursor.read_u32()
                sub_size = cursor.read_u32()
            except TruncatedChunkError:
                logger.debug("LIST chunk ends early at offset %d", cursor.position)
                break

            field = INFO_FIELDS.get(sub_tag)
            if field is None:
                logger.debug("Skipping INFO sub-chunk %r (%d B)", tag_name(sub_tag), sub_size)
                cursor.skip(sub_size)
            else:
                fields[field] = self._read_text(cursor, sub_size)

            padding = cursor.skip_padding() if cursor.position % 2 else 0
            count += 8 + sub_size + padding

        return fields

    def _read_text(self, cursor: ByteCursor, size: int) -> str:
        text = cursor.read_string(size, self._settings.text_encoding)
        if self._settings.strip_text_terminators:
            text = text.rstrip("\x00")
        return text
