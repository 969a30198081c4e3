"""Utility helpers shared across pipeline components."""

from huffcodec.utils.file_utils import add_suffix_to_top_level, mirror_output_path
from huffcodec.utils.bits_bytes_utils import bitstring_to_bytes, bytes_to_bitstring

__all__ = [
    "add_suffix_to_top_level",
    "mirror_output_path",
    "bitstring_to_bytes",
    "bytes_to_bitstring",
]
