from collections import Counter
from typing import Hashable, Iterable


def symbol_frequency(symbols: Iterable[Hashable]) -> Counter:
    """Count how often each distinct symbol occurs in `symbols`."""
    return Counter(symbols)
