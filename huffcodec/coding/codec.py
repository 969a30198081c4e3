import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Hashable, Iterable, List

from huffcodec.coding.bitstream import pack_symbols, unpack_symbols
from huffcodec.coding.code_table import make_code_table
from huffcodec.coding.frequency import symbol_frequency
from huffcodec.coding.tree import CodingTree, build_coding_tree
from huffcodec.utils.bits_bytes_utils import bytes_to_bitstring

# Debug tracing controlled by environment variable HUFFMAN_DEBUG
_DEBUG = os.environ.get("HUFFMAN_DEBUG", "").lower() in {"1", "true", "yes"}


def _dbg(msg: str) -> None:
    if _DEBUG:
        print(f"[huffman] {msg}", file=sys.stderr)


@dataclass
class HuffmanEncoded:
    """
    Container for Huffman-encoded data.

    - tree: coding tree needed to decode `data`
    - data: packed bits, last byte zero padded
    - bit_length: number of meaningful bits in `data` (end-of-input code included)
    """
    tree: CodingTree
    data: bytes
    bit_length: int

    @property
    def bits(self) -> str:
        return bytes_to_bitstring(self.data)[:self.bit_length]


def huffman_encode(symbols: Iterable[Hashable]) -> HuffmanEncoded:
    """
    Encode a sequence of symbols with a Huffman code built from its own
    frequencies.

    Raises EmptyInputError when `symbols` is empty.
    """
    if not isinstance(symbols, Sequence):
        symbols = list(symbols)
    frequencies = symbol_frequency(symbols)
    tree = build_coding_tree(frequencies)
    table = make_code_table(tree)
    _dbg(f"{len(symbols)} symbols, {len(frequencies)} distinct, {len(table)} codes")

    bits = pack_symbols(table, symbols)
    _dbg(f"packed {len(bits)} bits into {(len(bits) + 7) // 8} bytes")
    return HuffmanEncoded(tree=tree, data=bits.tobytes(), bit_length=len(bits))


def huffman_decode(tree: CodingTree, data: bytes) -> List[Any]:
    """
    Decode packed bits back to the original symbols.

    Raises TruncatedStreamError when `data` ends before the end-of-input code.
    """
    symbols = unpack_symbols(tree, data)
    _dbg(f"decoded {len(symbols)} symbols from {len(data)} bytes")
    return symbols
