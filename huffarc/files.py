from .huffman import HuffmanCompressor


def compress_file(input_path, output_path, compressor=None):
    """
    Compresses a whole file into an archive file.

    Returns:
    tuple: (input size, archive size) in bytes.
    """
    compressor = compressor or HuffmanCompressor()
    with open(input_path, "rb") as f:
        data = f.read()
    archive = compressor.compress(data)
    with open(output_path, "wb") as f:
        f.write(archive)
    return len(data), len(archive)


def decompress_file(input_path, output_path, compressor=None):
    """
    Restores a file from an archive file.

    Returns:
    tuple: (archive size, restored size) in bytes.
    """
    compressor = compressor or HuffmanCompressor()
    with open(input_path, "rb") as f:
        archive = f.read()
    data = compressor.decompress(archive)
    with open(output_path, "wb") as f:
        f.write(data)
    return len(archive), len(data)


def inspect_file(input_path, compressor=None):
    """Returns the header of an archive file and the file size."""
    compressor = compressor or HuffmanCompressor()
    with open(input_path, "rb") as f:
        archive = f.read()
    return compressor.inspect(archive), len(archive)
