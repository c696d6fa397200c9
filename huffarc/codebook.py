from typing import Dict

from bitarray import bitarray

from .tree import CodeTreeNode, walk


def derive_codes(root: CodeTreeNode) -> Dict[int, bitarray]:
    """
    Derives the prefix code of every symbol from the code tree.

    Parameters:
    root (CodeTreeNode): Root of a tree built by build_tree.

    Returns:
    Dict[int, bitarray]: Code of each of the 256 symbols.
    """
    return {node.symbol: path for node, path in walk(root) if node.is_leaf}
