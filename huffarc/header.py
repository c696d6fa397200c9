"""
Fixed 260-byte archive header.

    offset  size  meaning
    0       4     original length, unsigned 32-bit little-endian
    4       256   count of each symbol 0-255, low 8 bits only

Counts above 255 are truncated when written. Such an archive rebuilds a
different tree on decompression and does not decode to its input.
"""

import struct
from collections import namedtuple

from .errors import ArchiveTooLargeError, MalformedArchiveError
from .frequency import SYMBOL_COUNT, FrequencyTable

LENGTH_FORMAT = "<I"
LENGTH_SIZE = struct.calcsize(LENGTH_FORMAT)
HEADER_SIZE = LENGTH_SIZE + SYMBOL_COUNT
MAX_LENGTH = 0xFFFFFFFF

ArchiveHeader = namedtuple("ArchiveHeader", ["length", "frequencies"])


def pack_header(length: int, freqs: FrequencyTable) -> bytes:
    if not 0 <= length <= MAX_LENGTH:
        raise ArchiveTooLargeError(
            f"Input of {length} bytes exceeds the {MAX_LENGTH}-byte archive limit"
        )
    return struct.pack(LENGTH_FORMAT, length) + freqs.truncated()


def parse_header(archive: bytes) -> ArchiveHeader:
    """
    Reads the length and symbol counts from the start of an archive.

    Raises:
    MalformedArchiveError: If the archive is shorter than the header.
    """
    if len(archive) < HEADER_SIZE:
        raise MalformedArchiveError(
            f"Archive is {len(archive)} bytes, shorter than the {HEADER_SIZE}-byte header"
        )
    (length,) = struct.unpack_from(LENGTH_FORMAT, archive)
    frequencies = FrequencyTable(archive[LENGTH_SIZE:HEADER_SIZE])
    return ArchiveHeader(length, frequencies)
