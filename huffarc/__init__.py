from .errors import (
    ArchiveTooLargeError,
    ConfigError,
    FrequencyOverflowError,
    HuffmanError,
    MalformedArchiveError,
)
from .frequency import FrequencyTable
from .header import HEADER_SIZE, ArchiveHeader
from .huffman import HuffmanCompressor

__version__ = "1.0.0"

_default = HuffmanCompressor()


def compress(data: bytes) -> bytes:
    return _default.compress(data)


def decompress(archive: bytes) -> bytes:
    return _default.decompress(archive)
