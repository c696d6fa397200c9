from typing import Iterable, Iterator, List, Tuple

SYMBOL_COUNT = 256
MAX_STORED_COUNT = 0xFF


class FrequencyTable:
    """
    Occurrence count of every byte value 0-255.

    The table always holds all 256 symbols, absent ones with a count of 0.
    It is immutable once built.
    """

    __slots__ = ("_counts",)

    def __init__(self, counts: Iterable[int]):
        """
        Parameters:
        counts (Iterable[int]): 256 non-negative counts, indexed by symbol.
        """
        counts = tuple(counts)
        if len(counts) != SYMBOL_COUNT:
            raise ValueError(f"Expected {SYMBOL_COUNT} counts, got {len(counts)}")
        for count in counts:
            if not isinstance(count, int) or count < 0:
                raise ValueError(f"Invalid symbol count: {count!r}")
        self._counts = counts

    @classmethod
    def count(cls, data: bytes) -> "FrequencyTable":
        """
        Counts how often each byte value appears in data.

        Parameters:
        data (bytes): The input bytes, possibly empty.

        Returns:
        FrequencyTable: A table with an entry for every byte value.
        """
        counts = [0] * SYMBOL_COUNT
        for byte in bytes(data):
            counts[byte] += 1
        return cls(counts)

    def __getitem__(self, symbol: int) -> int:
        return self._counts[symbol]

    def __len__(self) -> int:
        return SYMBOL_COUNT

    def __iter__(self) -> Iterator[int]:
        return iter(self._counts)

    def __eq__(self, other):
        if not isinstance(other, FrequencyTable):
            return NotImplemented
        return self._counts == other._counts

    def __hash__(self):
        return hash(self._counts)

    def __repr__(self):
        return f"FrequencyTable(total={self.total}, distinct={self.distinct})"

    def items(self) -> Iterator[Tuple[int, int]]:
        return enumerate(self._counts)

    @property
    def total(self) -> int:
        return sum(self._counts)

    @property
    def distinct(self) -> int:
        return sum(1 for count in self._counts if count)

    def overflowing(self) -> List[int]:
        """Symbols whose count does not fit the 8-bit header field."""
        return [symbol for symbol, count in self.items() if count > MAX_STORED_COUNT]

    def truncated(self) -> bytes:
        """The 256 header bytes: the low 8 bits of each count, in symbol order."""
        return bytes(count & MAX_STORED_COUNT for count in self._counts)
