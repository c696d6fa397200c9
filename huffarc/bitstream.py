from typing import Dict

from bitarray import bitarray

from .errors import MalformedArchiveError
from .frequency import FrequencyTable
from .header import HEADER_SIZE, pack_header
from .tree import CodeTreeNode


def pack(data: bytes, codes: Dict[int, bitarray], freqs: FrequencyTable) -> bytes:
    """
    Builds an archive: the header followed by the code of every input byte.

    Code bits are packed from the least-significant bit of each byte upwards
    and the last byte is zero-padded.

    Parameters:
    data (bytes): The bytes to encode.
    codes (Dict[int, bitarray]): Code of each symbol.
    freqs (FrequencyTable): Counts stored in the header.

    Returns:
    bytes: The archive.
    """
    header = pack_header(len(data), freqs)
    payload = bitarray(endian="little")
    payload.encode(codes, bytes(data))
    return header + payload.tobytes()


def unpack(archive: bytes, expected_length: int, root: CodeTreeNode) -> bytes:
    """
    Decodes the payload that follows the header by walking the code tree.

    Each payload bit, least-significant first, moves to the left child on 0
    and to the right child on 1. Every leaf reached emits its symbol until
    expected_length symbols have been produced; the pad bits after that are
    walked but discarded.

    Parameters:
    archive (bytes): The whole archive, header included.
    expected_length (int): Number of bytes to decode.
    root (CodeTreeNode): Tree rebuilt from the header counts.

    Returns:
    bytes: Exactly expected_length decoded bytes.

    Raises:
    MalformedArchiveError: If the payload is too short for expected_length
        symbols, or holds a whole unused byte after the last one.
    """
    if len(archive) < HEADER_SIZE:
        raise MalformedArchiveError(
            f"Archive is {len(archive)} bytes, shorter than the {HEADER_SIZE}-byte header"
        )

    payload = bitarray(endian="little")
    payload.frombytes(bytes(archive[HEADER_SIZE:]))

    output = bytearray()
    node = root
    used_bits = 0
    for position, bit in enumerate(payload):
        node = node.right if bit else node.left
        if not node.is_leaf:
            continue
        if len(output) < expected_length:
            output.append(node.symbol)
            used_bits = position + 1
        node = root

    if len(output) < expected_length:
        raise MalformedArchiveError(
            f"Payload holds {len(output)} of {expected_length} symbols"
        )
    if len(payload) - used_bits >= 8:
        raise MalformedArchiveError(
            f"Payload has {len(payload) - used_bits} bits after the last symbol"
        )
    return bytes(output)
