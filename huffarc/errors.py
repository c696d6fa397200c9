class HuffmanError(Exception):
    """Base class for every error raised by huffarc."""


class MalformedArchiveError(HuffmanError, ValueError):
    """The archive cannot be decoded: truncated header or payload that does not
    match the length stored in the header."""


class ArchiveTooLargeError(HuffmanError, ValueError):
    """The input is longer than the 32-bit length field can describe."""


class FrequencyOverflowError(HuffmanError, ValueError):
    """
    Raised by a strict compressor when a symbol occurs more than 255 times.

    The header keeps only the low 8 bits of each count, so such an archive
    would not decode back to its input.
    """

    def __init__(self, symbols):
        self.symbols = tuple(symbols)
        listed = ", ".join(f"0x{symbol:02x}" for symbol in self.symbols[:8])
        if len(self.symbols) > 8:
            listed += ", ..."
        super().__init__(
            f"{len(self.symbols)} symbol(s) occur more than 255 times: {listed}"
        )


class ConfigError(HuffmanError):
    """The configuration file is missing, unreadable or malformed."""
