from .bitstream import pack, unpack
from .codebook import derive_codes
from .errors import FrequencyOverflowError
from .frequency import FrequencyTable
from .header import ArchiveHeader, parse_header
from .tree import build_tree

BYTES_TYPES = (bytes, bytearray, memoryview)


class HuffmanCompressor:
    """
    Byte-oriented Huffman compressor.

    The archive stores the input length and the count of every byte value;
    the decompressor rebuilds the code tree from those counts, so neither the
    tree nor the codes are stored.

    Counts are stored in one byte each. Input in which a byte value occurs
    more than 255 times produces an archive that does not decode back to it.
    A strict compressor refuses such input instead.
    """

    def __init__(self, strict: bool = False):
        """
        Parameters:
        strict (bool): Raise FrequencyOverflowError rather than truncate
            counts above 255.
        """
        self.strict = strict

    def compress(self, data: bytes) -> bytes:
        """
        Compresses the given bytes.

        Parameters:
        data (bytes): The bytes to compress, possibly empty.

        Returns:
        bytes: The archive, at least 260 bytes long.
        """
        if not isinstance(data, BYTES_TYPES):
            raise TypeError("Input data must be bytes-like.")
        data = bytes(data)
        freqs = FrequencyTable.count(data)
        if self.strict:
            overflowing = freqs.overflowing()
            if overflowing:
                raise FrequencyOverflowError(overflowing)
        codes = derive_codes(build_tree(freqs))
        return pack(data, codes, freqs)

    def decompress(self, archive: bytes) -> bytes:
        """
        Decompresses an archive produced by compress.

        Parameters:
        archive (bytes): The archive.

        Returns:
        bytes: The original bytes.

        Raises:
        MalformedArchiveError: If the archive is truncated or inconsistent.
        """
        header = self.inspect(archive)
        root = build_tree(header.frequencies)
        return unpack(archive, header.length, root)

    def inspect(self, archive: bytes) -> ArchiveHeader:
        """Reads the archive header without decoding the payload."""
        if not isinstance(archive, BYTES_TYPES):
            raise TypeError("Input archive must be bytes-like.")
        return parse_header(archive)
