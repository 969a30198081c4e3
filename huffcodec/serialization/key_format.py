"""
JSON form of a coding tree, stored next to the packed bytes so they can be
decoded later.

    EndOfInput       -> null
    SymbolLeaf(s)    -> {"symbol": s}
    Branch(l, r)     -> [l, r]
"""

import json
from collections.abc import Hashable
from typing import Any, Dict, Tuple

from huffcodec.coding.tree import END_OF_INPUT, Branch, CodingTree, EndOfInput, SymbolLeaf
from huffcodec.errors import KeyFormatError


def tree_to_obj(tree: CodingTree) -> Any:
    if isinstance(tree, Branch):
        return [tree_to_obj(tree.left), tree_to_obj(tree.right)]
    if isinstance(tree, EndOfInput):
        return None
    return {"symbol": tree.symbol}


def tree_from_obj(obj: Any) -> CodingTree:
    """
    Rebuild and validate a coding tree.

    The root must be a branch, symbols must be unique and hashable, and
    there must be exactly one end-of-input leaf.
    """
    if not isinstance(obj, list):
        raise KeyFormatError("Coding tree root must be a branch.")

    seen = set()
    end_markers = 0

    def build(node: Any) -> CodingTree:
        nonlocal end_markers
        if node is None:
            end_markers += 1
            return END_OF_INPUT
        if isinstance(node, list):
            if len(node) != 2:
                raise KeyFormatError(f"Branch must have exactly two children, got {len(node)}.")
            return Branch(build(node[0]), build(node[1]))
        if isinstance(node, dict) and set(node) == {"symbol"}:
            symbol = node["symbol"]
            if not isinstance(symbol, Hashable):
                raise KeyFormatError(f"Unhashable symbol in coding tree: {symbol!r}")
            if symbol in seen:
                raise KeyFormatError(f"Duplicate symbol in coding tree: {symbol!r}")
            seen.add(symbol)
            return SymbolLeaf(symbol)
        raise KeyFormatError(f"Unknown coding tree node: {node!r}")

    tree = build(obj)
    if end_markers != 1:
        raise KeyFormatError(f"Expected one end-of-input leaf, found {end_markers}.")
    return tree


def dump_key(tree: CodingTree, **meta: Any) -> str:
    """Serialize `tree` plus optional metadata fields to a JSON document."""
    payload: Dict[str, Any] = {"tree": tree_to_obj(tree)}
    payload.update(meta)
    return json.dumps(payload)


def load_key(text: str) -> Tuple[CodingTree, Dict[str, Any]]:
    """Inverse of `dump_key`; returns the tree and the remaining fields."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise KeyFormatError(f"Key is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict) or "tree" not in payload:
        raise KeyFormatError("Key document has no 'tree' field.")
    tree = tree_from_obj(payload.pop("tree"))
    return tree, payload
