from typing import Any, Hashable, Iterable, List, Mapping

from bitarray import bitarray

from huffcodec.coding.tree import END_OF_INPUT, CodingTree, EndOfInput, SymbolLeaf, require_branch
from huffcodec.errors import TruncatedStreamError


def pack_symbols(table: Mapping[Hashable, bitarray], symbols: Iterable[Hashable]) -> bitarray:
    """
    Concatenate the code of every symbol, then the end-of-input code.

    `table` must come from the tree built over these symbols.
    """
    bits = bitarray(endian="big")
    bits.encode(table, symbols)
    bits.extend(table[END_OF_INPUT])
    return bits


def unpack_symbols(tree: CodingTree, data: bytes) -> List[Any]:
    """
    Walk `tree` once per bit of `data` until the end-of-input leaf.

    Padding after the end-of-input code is never read. Raises
    TruncatedStreamError if the bits run out first.
    """
    require_branch(tree)

    bits = bitarray(endian="big")
    bits.frombytes(bytes(data))

    out: List[Any] = []
    node = tree
    for bit in bits:
        node = node.right if bit else node.left
        if isinstance(node, SymbolLeaf):
            out.append(node.symbol)
            node = tree
        elif isinstance(node, EndOfInput):
            return out

    raise TruncatedStreamError(len(out))
