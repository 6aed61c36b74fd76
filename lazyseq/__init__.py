"""
lazyseq: lazy, pull-based sequence combinators.

Usage:
    from lazyseq import range_n, map, filter, take_n, foldl

    evens = filter(map(range_n(10), lambda x: x * 3), lambda x: x % 2 == 0)
    total = foldl(take_n(3, evens), lambda acc, x: acc + x, 0)  # 0 + 6 + 12
"""

from .lazy import (
    EmptySequenceError,
    Iterable,
    Restartable,
    avg,
    chain,
    consume,
    endless,
    enumerate,
    filter,
    foldl,
    foldl1,
    foldr,
    foldr1,
    map,
    ntimes,
    range,
    range_n,
    repeat,
    sum,
    take_n,
    take_unless,
    take_while,
)
from .models import IteratorResult

__version__ = "0.1.0"
__all__ = [
    # Generators
    "range",
    "range_n",
    "repeat",
    # Transformers
    "map",
    "filter",
    "chain",
    "endless",
    "take_while",
    "take_unless",
    "take_n",
    "enumerate",
    # Reducers
    "foldl",
    "foldl1",
    "foldr",
    "foldr1",
    "sum",
    "avg",
    "consume",
    "ntimes",
    # Adapters
    "Iterable",
    "Restartable",
    "IteratorResult",
    # Errors
    "EmptySequenceError",
]
