from typing import Dict, Hashable, Mapping

from bitarray import bitarray

from huffcodec.coding.tree import END_OF_INPUT, Branch, CodingTree, EndOfInput, require_branch


def make_code_table(tree: CodingTree) -> Dict[Hashable, bitarray]:
    """
    Map every terminal of `tree` to its root-to-leaf path.

    Left is 0, right is 1. The end-of-input code is stored under END_OF_INPUT.
    """
    require_branch(tree)

    table: Dict[Hashable, bitarray] = {}
    stack = [(bitarray(endian="big"), tree)]
    while stack:
        bits, node = stack.pop()
        if isinstance(node, Branch):
            left_bits = bits.copy()
            left_bits.append(0)
            stack.append((left_bits, node.left))

            right_bits = bits.copy()
            right_bits.append(1)
            stack.append((right_bits, node.right))
        elif isinstance(node, EndOfInput):
            table[END_OF_INPUT] = bits
        else:
            table[node.symbol] = bits
    return table


def weighted_path_length(
    frequencies: Mapping[Hashable, int],
    table: Mapping[Hashable, bitarray],
) -> int:
    """Total bits needed for the symbols counted in `frequencies`."""
    return sum(freq * len(table[symbol]) for symbol, freq in frequencies.items())
