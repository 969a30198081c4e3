"""
Huffman coding of symbol sequences.

`huffman_encode` builds a code from the input's own frequencies and returns
the coding tree together with the packed bytes; `huffman_decode` needs that
same tree to recover the symbols.
"""

from huffcodec.coding import (
    END_OF_INPUT,
    Branch,
    CodingTree,
    EndOfInput,
    HuffmanEncoded,
    SymbolLeaf,
    huffman_decode,
    huffman_encode,
)
from huffcodec.errors import EmptyInputError, HuffmanError, KeyFormatError, TruncatedStreamError

__all__ = [
    "END_OF_INPUT",
    "Branch",
    "CodingTree",
    "EndOfInput",
    "SymbolLeaf",
    "HuffmanEncoded",
    "huffman_decode",
    "huffman_encode",
    "EmptyInputError",
    "HuffmanError",
    "KeyFormatError",
    "TruncatedStreamError",
]
