"""Lazy sequence combinators: generators, transformers and reducers.

Every function here works on plain Python iterables and returns either a
generator (nothing runs until the first pull) or a reduced value. Names
mirror the classic functional vocabulary, so ``range``, ``map``, ``filter``,
``sum`` and ``enumerate`` shadow the builtins of the same name inside this
module.

Pass categories:
    single-pass   generators returned by every function below, ``Iterable``
    restartable   lists, tuples, ``Restartable``
"""

import logging
from typing import Any, Callable, Generic, Iterator, Optional, Tuple, TypeVar
from typing import Iterable as IterableT

from .models import IteratorResult

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


class EmptySequenceError(ValueError):
    """Raised when a fold needs a seed value but the sequence is empty."""
    pass


# --------- generators ----------
def range(start: float = 0, stop: Optional[float] = None, step: float = 1) -> Iterator[float]:
    """Yield ``start, start + step, ...`` while ``i + step <= stop``.

    Without ``stop`` the sequence is infinite. ``step == 0`` with a finite
    ``stop`` never terminates; callers must not pass it.
    """
    i = start
    while stop is None or i + step <= stop:
        yield i
        i += step


def range_n(n: int) -> Iterator[int]:
    """Yield the integers between 0 and ``n``, lower end inclusive."""
    yield from range(min(0, n), max(0, n), 1)


def repeat(n: int, callback: Callable[[int], T]) -> Iterator[T]:
    """Yield ``callback(i)`` for each ``i`` in ``[0, n)``."""
    i = 0
    while i < n:
        yield callback(i)
        i += 1


# --------- transformers ----------
def map(iterable: IterableT[T], callback: Callable[[T], U]) -> Iterator[U]:
    for item in iterable:
        yield callback(item)


def filter(iterable: IterableT[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    for item in iterable:
        if predicate(item):
            yield item


def chain(iterables: IterableT[IterableT[T]]) -> Iterator[T]:
    """Concatenate a sequence of sequences."""
    for iterable in iterables:
        yield from iterable


def endless(items: IterableT[T]) -> Iterator[T]:
    """Replay a finite, restartable sequence forever.

    Every cycle iterates ``items`` again. A cycle that yields nothing ends
    the sequence, so an empty source (or a single-pass source that is already
    drained) gives a finite result rather than a busy loop. ``iter(items)``
    is called exactly once per cycle.
    """
    iterator = iter(items)
    if iterator is items:
        logger.warning(
            "endless() got a single-pass iterator (%s); it can only be played through once",
            type(items).__name__,
        )
    while True:
        produced = False
        for item in iterator:
            produced = True
            yield item
        if not produced:
            logger.debug("endless() source produced no values, stopping")
            return
        iterator = iter(items)


def take_while(iterable: IterableT[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    """Yield leading items while ``predicate`` holds.

    The first failing item is pulled but not yielded; nothing after it is
    pulled.
    """
    for item in iterable:
        if not predicate(item):
            break
        yield item


def take_unless(iterable: IterableT[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    yield from take_while(iterable, lambda item: not predicate(item))


def take_n(n: int, iterable: IterableT[T]) -> Iterator[T]:
    """Yield at most ``n`` items, pulling no more than ``n`` from the source.

    Ends on the source's exhaustion signal only; ``None`` items are yielded
    like any other value.
    """
    iterator = iter(iterable)
    taken = 0
    while taken < n:
        try:
            item = next(iterator)
        except StopIteration:
            return
        yield item
        taken += 1


def enumerate(iterable: IterableT[T], start: int = 0) -> Iterator[Tuple[int, T]]:
    """Pair each item with a running index beginning at ``start``."""
    i = start
    for item in iterable:
        yield (i, item)
        i += 1


# --------- reducers (force evaluation) ----------
def foldl(iterable: IterableT[T], accumulator: Callable[[U, T], U], base: U) -> U:
    """Reduce from the left: ``acc = accumulator(acc, item)`` starting at ``base``."""
    acc = base
    for item in iterable:
        acc = accumulator(acc, item)
    return acc


def foldl1(iterable: IterableT[T], accumulator: Callable[[T, T], T]) -> T:
    """``foldl`` seeded with the first item. Raises EmptySequenceError if empty."""
    first, rest = _split_first(iterable, "foldl1")
    return foldl(rest, accumulator, first)


def foldr(iterable: IterableT[T], accumulator: Callable[[T, U], U], base: U) -> U:
    """Reduce with ``acc = accumulator(item, acc)``, walking items in pull order.

    The sequence is not reversed first: for ``[a, b, c]`` the result is
    ``f(c, f(b, f(a, base)))``.
    """
    acc = base
    for item in iterable:
        acc = accumulator(item, acc)
    return acc


def foldr1(iterable: IterableT[T], accumulator: Callable[[T, T], T]) -> T:
    """``foldr`` seeded with the first item. Raises EmptySequenceError if empty."""
    first, rest = _split_first(iterable, "foldr1")
    return foldr(rest, accumulator, first)


def sum(iterable: IterableT[T]) -> T:
    """Add the items together with ``+``; numbers, strings and lists all work.

    Unlike the builtin there is no implicit ``0`` start, so an empty sequence
    raises EmptySequenceError.
    """
    return foldl1(iterable, lambda acc, item: acc + item)


def avg(iterable: IterableT[float]) -> float:
    """Arithmetic mean in a single pass; NaN for an empty sequence."""
    # count and total in one consume
    count, total = foldl(iterable, lambda tally, item: (tally[0] + 1, tally[1] + item), (0, 0))
    if count == 0:
        return float("nan")
    return total / count


def consume(iterable: IterableT[Any]) -> None:
    """Drain a sequence for its side effects."""
    for _item in iterable:
        pass


def ntimes(n: int, callback: Callable[[int], Any]) -> None:
    """Call ``callback(i)`` for ``i`` in ``[0, n)`` and discard the results."""
    consume(repeat(n, callback))


# --------- adapters ----------
class Iterable(Generic[T]):
    """
    Turn a raw pull function into a Python iterator.

    ``next`` takes no arguments and returns an IteratorResult, or a mapping
    with ``value`` and ``done`` keys. Iteration ends at the first result with
    ``done`` set; that result's value is dropped. The adapter is its own
    iterator, so every pass continues from the pull function's state and
    ``endless`` treats it as single-pass.

    Example:
        counter = iter([0, 1, 2])

        def pull():
            value = next(counter, None)
            return {"value": value, "done": value is None}

        list(Iterable(pull))  # [0, 1, 2]
    """

    def __init__(self, next: Callable[[], Any]):
        self._next = next

    def __iter__(self) -> "Iterable[T]":
        return self

    def __next__(self) -> T:
        result = IteratorResult.coerce(self._next())
        if result.done:
            raise StopIteration
        return result.value


class Restartable(Generic[T]):
    """Iterable that calls ``factory(*args, **kwargs)`` afresh on every ``iter()``.

    Wrap a generator-producing call in it to feed ``endless``:
    ``endless(Restartable(range_n, 3))``.
    """

    def __init__(self, factory: Callable[..., IterableT[T]], *args, **kwargs):
        self._factory = factory
        self._args = args
        self._kwargs = kwargs

    def __iter__(self) -> Iterator[T]:
        return iter(self._factory(*self._args, **self._kwargs))


# --------- helpers ----------
def _split_first(iterable: IterableT[T], caller: str) -> Tuple[T, Iterator[T]]:
    iterator = iter(iterable)
    try:
        first = next(iterator)
    except StopIteration:
        logger.debug("%s() called on an empty sequence", caller)
        raise EmptySequenceError(f"{caller}() of an empty sequence") from None
    return first, iterator


__all__ = [
    "EmptySequenceError",
    "range",
    "range_n",
    "repeat",
    "map",
    "filter",
    "chain",
    "endless",
    "take_while",
    "take_unless",
    "take_n",
    "enumerate",
    "foldl",
    "foldl1",
    "foldr",
    "foldr1",
    "sum",
    "avg",
    "consume",
    "ntimes",
    "Iterable",
    "Restartable",
]
