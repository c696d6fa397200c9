"""
huffarc command line: compress, decompress and inspect archive files.
"""

import argparse
import sys

from dotenv import load_dotenv

from . import __version__
from .config_loader import load_config
from .errors import HuffmanError
from .files import compress_file, decompress_file, inspect_file
from .huffman import HuffmanCompressor


def default_archive_path(input_path, config):
    return input_path + config["files"]["archive_suffix"]


def default_restored_path(input_path, config):
    suffix = config["files"]["archive_suffix"]
    if suffix and input_path.endswith(suffix) and len(input_path) > len(suffix):
        return input_path[:-len(suffix)]
    return input_path + config["files"]["restored_suffix"]


def build_parser():
    parser = argparse.ArgumentParser(prog="huffarc", description="Huffman coding based compressor")
    parser.add_argument("--config", help="YAML config file (default: $HUFFARC_CONFIG or built-in)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    c = sub.add_parser("compress", help="compress a file into an archive")
    c.add_argument("input")
    c.add_argument("output", nargs="?")
    c.add_argument("--strict", action="store_true",
                   help="refuse input where a byte value occurs more than 255 times")

    d = sub.add_parser("decompress", help="restore a file from an archive")
    d.add_argument("input")
    d.add_argument("output", nargs="?")

    i = sub.add_parser("info", help="show the header of an archive")
    i.add_argument("input")
    return parser


def run(args, config):
    verbose = config["output"]["verbose"]

    if args.command == "compress":
        strict = args.strict or config["compression"]["strict_frequencies"]
        output = args.output or default_archive_path(args.input, config)
        size, archive_size = compress_file(args.input, output, HuffmanCompressor(strict=strict))
        if verbose:
            print(f"Compressed: {args.input} -> {output} ({size} -> {archive_size} bytes)")

    elif args.command == "decompress":
        output = args.output or default_restored_path(args.input, config)
        archive_size, size = decompress_file(args.input, output)
        if verbose:
            print(f"Decompressed: {args.input} -> {output} ({archive_size} -> {size} bytes)")

    else:
        header, archive_size = inspect_file(args.input)
        print(f"Archive:          {args.input}")
        print(f"Archive size:     {archive_size} bytes")
        print(f"Original length:  {header.length} bytes")
        print(f"Distinct symbols: {header.frequencies.distinct}")


def main(argv=None):
    load_dotenv()
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.config)
        run(args, config)
    except (HuffmanError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
