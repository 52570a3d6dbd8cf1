"""FourCC identifiers used by the RIFF/WAVE chunk walker.

Identifiers are compared as little-endian 32-bit integers, which is how
they come off the cursor.
"""


def fourcc(tag: bytes) -> int:
    """Return the little-endian integer value of a 4-byte chunk tag."""
    if len(tag) != 4:
        raise ValueError(f"Chunk tags are exactly 4 bytes, got {tag!r}")
    return int.from_bytes(tag, "little")


def tag_name(value: int) -> str:
    """Render an integer chunk tag back to its ASCII form for messages."""
    return value.to_bytes(4, "little").decode("ascii", errors="replace")


RIFF_MAGIC = fourcc(b"RIFF")
WAVE_MAGIC = fourcc(b"WAVE")

CHUNK_FMT = fourcc(b"fmt ")
CHUNK_FACT = fourcc(b"fact")
CHUNK_DATA = fourcc(b"data")
CHUNK_LIST = fourcc(b"LIST")
# id3 chunks are not part of the WAVE format but are common in the wild
CHUNK_ID3 = fourcc(b"id3 ")
CHUNK_ID3_ALT = fourcc(b"ID3 ")

LIST_TYPE_INFO = fourcc(b"INFO")

# LIST/INFO sub-chunk tag -> AudioMetadata field
INFO_FIELDS: dict[int, str] = {
    fourcc(b"IART"): "artist",       # artist of the original subject
    fourcc(b"ICMT"): "comments",     # general comments
    fourcc(b"ICOP"): "copyright",
    fourcc(b"ICRD"): "date",         # creation date
    fourcc(b"IGNR"): "genre",
    fourcc(b"IKEY"): "keywords",
    fourcc(b"INAM"): "name",         # title of the subject
    fourcc(b"IPRD"): "title",        # title the subject was intended for (product)
    fourcc(b"ISBJ"): "description",  # subject
    fourcc(b"ISFT"): "encoder",      # software used to create the file
}
