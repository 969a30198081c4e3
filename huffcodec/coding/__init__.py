"""
Huffman coding engine: frequency counting, tree construction, code
derivation and bitstream packing/unpacking.
"""

from huffcodec.coding.bitstream import pack_symbols, unpack_symbols
from huffcodec.coding.code_table import make_code_table, weighted_path_length
from huffcodec.coding.codec import HuffmanEncoded, huffman_decode, huffman_encode
from huffcodec.coding.frequency import symbol_frequency
from huffcodec.coding.tree import (
    END_OF_INPUT,
    Branch,
    CodingTree,
    EndOfInput,
    SymbolLeaf,
    build_coding_tree,
    iter_leaves,
    tree_depth,
)

__all__ = [
    "END_OF_INPUT",
    "Branch",
    "CodingTree",
    "EndOfInput",
    "SymbolLeaf",
    "HuffmanEncoded",
    "build_coding_tree",
    "huffman_decode",
    "huffman_encode",
    "iter_leaves",
    "make_code_table",
    "pack_symbols",
    "symbol_frequency",
    "tree_depth",
    "unpack_symbols",
    "weighted_path_length",
]
