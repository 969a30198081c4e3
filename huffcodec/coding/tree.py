"""
Coding tree shared by the encoder and the decoder.

The tree is built with the greedy Huffman merge over a min-heap. Heap
entries are `(frequency, insertion_order, node)` tuples; the insertion
counter makes ties deterministic and keeps nodes from ever being compared:

- leaves are seeded in ascending symbol order, the end-of-input leaf
  (frequency 0) last;
- among equal frequencies the entry inserted first pops first;
- the first popped entry becomes the left child, the second the right one;
- every merged branch takes the next counter value.
"""

import heapq
from dataclasses import dataclass
from itertools import count
from typing import Any, Hashable, Iterator, Mapping, Tuple, Union

from huffcodec.errors import EmptyInputError


@dataclass(frozen=True)
class EndOfInput:
    """Terminal marking the end of a packed stream."""


@dataclass(frozen=True)
class SymbolLeaf:
    symbol: Any


@dataclass(frozen=True)
class Branch:
    left: "CodingTree"
    right: "CodingTree"


CodingTree = Union[EndOfInput, SymbolLeaf, Branch]

# Doubles as the code-table key of the end-of-input code.
END_OF_INPUT = EndOfInput()


def build_coding_tree(frequencies: Mapping[Hashable, int]) -> CodingTree:
    """
    Build an optimal coding tree for the given symbol counts.

    An end-of-input leaf with frequency 0 is always added, so the result has
    at least two leaves. Raises EmptyInputError for an empty table.
    """
    if not frequencies:
        raise EmptyInputError("Cannot build a coding tree from an empty input.")
    if any(isinstance(symbol, EndOfInput) for symbol in frequencies):
        raise ValueError("The end-of-input marker cannot be used as a symbol.")

    order = count()
    heap = []
    for symbol in sorted(frequencies):
        frequency = frequencies[symbol]
        if frequency < 0:
            raise ValueError(f"Negative frequency for symbol {symbol!r}: {frequency}")
        heap.append((frequency, next(order), SymbolLeaf(symbol)))
    heap.append((0, next(order), END_OF_INPUT))
    heapq.heapify(heap)

    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        heapq.heappush(heap, (left_freq + right_freq, next(order), Branch(left, right)))

    return heap[0][2]


def iter_leaves(tree: CodingTree) -> Iterator[Tuple[str, CodingTree]]:
    """Yield `(path, leaf)` pairs depth-first, left before right."""
    stack = [("", tree)]
    while stack:
        path, node = stack.pop()
        if isinstance(node, Branch):
            stack.append((path + "1", node.right))
            stack.append((path + "0", node.left))
        else:
            yield path, node


def tree_depth(tree: CodingTree) -> int:
    return max(len(path) for path, _ in iter_leaves(tree))


def require_branch(tree: CodingTree) -> None:
    if not isinstance(tree, Branch):
        raise ValueError("A coding tree needs at least two leaves.")
