from heapq import heapify, heappop, heappush
from typing import Iterator, Optional, Tuple

from bitarray import bitarray

from .frequency import SYMBOL_COUNT, FrequencyTable


class CodeTreeNode:
    """
    A node of the code tree.

    Leaves carry a symbol and its weight. Internal nodes carry the combined
    weight of exactly two children and no symbol.
    """

    __slots__ = ("symbol", "weight", "left", "right")

    def __init__(self, symbol: Optional[int], weight: int,
                 left: "CodeTreeNode" = None, right: "CodeTreeNode" = None):
        self.symbol = symbol
        self.weight = weight
        self.left = left
        self.right = right

    @property
    def is_leaf(self) -> bool:
        return self.left is None

    def __repr__(self):
        if self.is_leaf:
            return f"CodeTreeNode(symbol=0x{self.symbol:02x}, weight={self.weight})"
        return f"CodeTreeNode(weight={self.weight})"


def build_tree(freqs: FrequencyTable) -> CodeTreeNode:
    """
    Builds the code tree over all 256 symbols, including unused ones.

    The two lightest nodes are merged until a single root remains. Equal
    weights are ordered leaves first by ascending symbol, then internal nodes
    by creation order, so the compressor and the decompressor always build
    the same tree from the same counts. The first node taken becomes the
    left child.

    Parameters:
    freqs (FrequencyTable): Symbol counts.

    Returns:
    CodeTreeNode: The root, always an internal node.
    """
    heap = [(weight, symbol, CodeTreeNode(symbol, weight)) for symbol, weight in freqs.items()]
    heapify(heap)

    order = SYMBOL_COUNT
    while len(heap) > 1:
        low_weight, _, low = heappop(heap)
        high_weight, _, high = heappop(heap)
        merged = CodeTreeNode(None, low_weight + high_weight, low, high)
        heappush(heap, (merged.weight, order, merged))
        order += 1

    return heap[0][2]


def walk(root: CodeTreeNode) -> Iterator[Tuple[CodeTreeNode, bitarray]]:
    """
    Visits every node in pre-order, left before right, with the path to it.

    An explicit stack is used instead of recursion. The path holds a 0 for
    every step to a left child and a 1 for every step to a right child.
    """
    to_visit = [(root, bitarray())]
    while to_visit:
        node, path = to_visit.pop()
        yield node, path
        if not node.is_leaf:
            to_visit.append((node.right, path + bitarray("1")))
            to_visit.append((node.left, path + bitarray("0")))
