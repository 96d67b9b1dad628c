"""
consequence: immutable singly linked sequences and pure operations over them.

## Core Design Principle: Structural Values, Iterative Algorithms

A `Seq` is either `Empty` or `Cons(head=..., tail=...)`. Sequences are never
mutated; every operation returns a new sequence, sharing unchanged suffixes with
its inputs where it can. Sharing is invisible to callers because equality is
structural.

All operations are written as loops over accumulators rather than as recursion
over the tail, so sequences of any length can be processed without exhausting
the interpreter call stack.

Functions that need to compare elements never assume `==` or `<`: they take a
caller-supplied predicate or relation instead.

## Example

```python
import consequence as cq

numbers = cq.of(1, 2, 3, 4)
cq.take(2, numbers)  # Seq([1, 2])
cq.intersperse(0, numbers)  # Seq([1, 0, 2, 0, 3, 0, 4])
cq.merge(lambda x, y: x <= y, cq.of(1, 3), cq.of(2, 4))  # Seq([1, 2, 3, 4])
cq.lookup(numbers, 9)  # raises IndexOutOfRange
```
"""

from __future__ import annotations

import builtins
import logging
import operator
from abc import ABC
from dataclasses import dataclass
from functools import reduce
from typing import (
    Any,
    Callable,
    Final,
    Hashable,
    Iterable,
    Iterator,
    TypeVar,
    final,
)

from typing_extensions import override

from consequence.variants import (
    Alignment,
    Either,
    Left,
    Right,
    That,
    These,
    This,
    either,
    these,
)

_logger: Final[logging.Logger] = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
S = TypeVar("S")
T_co = TypeVar("T_co", covariant=True)

Predicate = Callable[[T], bool]
Relation = Callable[[T, T], bool]
"""
A caller-supplied decidable two-argument predicate, used in place of a default
equality or ordering.
"""


class Seq(Iterable[T_co], Hashable, ABC):
    """
    A finite, ordered, immutable sequence.

    Concrete sequences are either `Empty` or `Cons`. Equality and hashing are
    structural and element-wise.
    """

    __slots__ = ()

    @override
    def __iter__(self) -> Iterator[T_co]:
        node: Seq[T_co] = self
        while isinstance(node, Cons):
            yield node.head
            node = node.tail

    def __len__(self) -> int:
        return length(self)

    def __bool__(self) -> bool:
        return isinstance(self, Cons)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seq):
            return NotImplemented
        left: Seq[Any] = self
        right: Seq[Any] = other
        while isinstance(left, Cons) and isinstance(right, Cons):
            if left is right:
                return True
            if left.head is not right.head and left.head != right.head:
                return False
            left = left.tail
            right = right.tail
        return isinstance(left, Empty) and isinstance(right, Empty)

    @override
    def __hash__(self) -> int:
        return hash(tuple(self))

    @override
    def __repr__(self) -> str:
        return f"Seq({list(self)!r})"


@final
@dataclass(frozen=True, slots=True, weakref_slot=True, eq=False, repr=False)
class Empty(Seq[Any]):
    """The sequence with no elements."""


@final
@dataclass(
    frozen=True, kw_only=True, slots=True, weakref_slot=True, eq=False, repr=False
)
class Cons(Seq[T_co]):
    """An element followed by the rest of the sequence."""

    head: T_co
    tail: Seq[T_co]

    def __post_init__(self) -> None:
        if not isinstance(self.tail, Seq):
            raise TypeError(f"Cons tail must be a Seq, got {type(self.tail).__name__}")


EMPTY: Final[Empty] = Empty()


class IndexOutOfRange(IndexError):
    """
    An index passed to a positional operation does not address an element.

    Raised by `lookup`, `update_at`, `set_at`, `remove_at` and `insert_at`.
    """

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"index {index} out of range for sequence of length {length}")
        self.index = index
        self.length = length


def _out_of_range(s: Seq[Any], index: int) -> IndexOutOfRange:
    error = IndexOutOfRange(index=index, length=length(s))
    _logger.debug("Rejecting positional access: %s", error)
    return error


def _from_list(elements: list[T], tail: Seq[T] = EMPTY) -> Seq[T]:
    """Cons the elements of a Python list, in order, onto `tail`."""
    result = tail
    for element in reversed(elements):
        result = Cons(head=element, tail=result)
    return result


def _identity(value: T) -> T:
    return value


def _pair(left: A, right: B) -> tuple[A, B]:
    return (left, right)


# Construction


def empty() -> Seq[Any]:
    return EMPTY


def singleton(element: T) -> Seq[T]:
    return Cons(head=element, tail=EMPTY)


def cons(element: T, s: Seq[T]) -> Seq[T]:
    return Cons(head=element, tail=s)


def from_iterable(elements: Iterable[T]) -> Seq[T]:
    """Build a sequence holding the elements of any finite Python iterable, in order."""
    if isinstance(elements, Seq):
        return elements
    return _from_list(list(elements))


def of(*elements: T) -> Seq[T]:
    return _from_list(list(elements))


def from_optional(value: T | None) -> Seq[T]:
    """The empty sequence if `value` is absent, otherwise a singleton."""
    if value is None:
        return EMPTY
    return singleton(value)


def replicate(n: int, element: T) -> Seq[T]:
    result: Seq[T] = EMPTY
    for _ in range(n):
        result = Cons(head=element, tail=result)
    return result


def iterate(f: Callable[[T], T], seed: T, n: int) -> Seq[T]:
    """`[seed, f(seed), f(f(seed)), ...]`, exactly `n` elements long."""
    buffer: list[T] = []
    current = seed
    for index in range(n):
        if index > 0:
            current = f(current)
        buffer.append(current)
    return _from_list(buffer)


def inits(s: Seq[T]) -> Seq[Seq[T]]:
    """All prefixes of `s`, from the empty one up to `s` itself."""
    elements = list(s)
    return _from_list(
        [_from_list(elements[:size]) for size in range(len(elements))] + [s]
    )


def tails(s: Seq[T]) -> Seq[Seq[T]]:
    """All suffixes of `s`, from `s` itself down to the empty one. Suffixes are shared with `s`."""
    suffixes: list[Seq[T]] = []
    node = s
    while isinstance(node, Cons):
        suffixes.append(node)
        node = node.tail
    suffixes.append(node)
    return _from_list(suffixes)


def scan_right(combine: Callable[[T, U], U], seed: U, s: Seq[T]) -> Seq[U]:
    """
    Every partial result of `fold_right`, ending with `seed`.

    The first element equals `fold_right(combine, seed, s)`.
    """
    accumulator = seed
    result: Seq[U] = singleton(seed)
    for element in reversed(list(s)):
        accumulator = combine(element, accumulator)
        result = Cons(head=accumulator, tail=result)
    return result


def scan_left(combine: Callable[[U, T], U], seed: U, s: Seq[T]) -> Seq[U]:
    """
    Every partial result of `fold_left`, starting with `seed`.

    The last element equals `fold_left(combine, seed, s)`.
    """
    buffer = [seed]
    accumulator = seed
    for element in s:
        accumulator = combine(accumulator, element)
        buffer.append(accumulator)
    return _from_list(buffer)


def apply_up_to(f: Callable[[int], T], n: int) -> Seq[T]:
    return _from_list([f(index) for index in range(n)])


def apply_down_from(f: Callable[[int], T], n: int) -> Seq[T]:
    return _from_list([f(index) for index in reversed(range(n))])


def tabulate(f: Callable[[int], T], n: int) -> Seq[T]:
    """A sequence of length `n` whose element at each index `i` is `f(i)`."""
    return apply_up_to(f, n)


def up_to(n: int) -> Seq[int]:
    return apply_up_to(_identity, n)


def down_from(n: int) -> Seq[int]:
    return apply_down_from(_identity, n)


def lookup(s: Seq[T], index: int) -> T:
    """
    The element at position `index`.

    :raises IndexOutOfRange: If `index` is negative or not less than `length(s)`.
    """
    if index >= 0:
        node = s
        for _ in range(index):
            if not isinstance(node, Cons):
                break
            node = node.tail
        else:
            if isinstance(node, Cons):
                return node.head
    raise _out_of_range(s, index)


def unfold(step: Callable[[S], tuple[T, S] | None], state: S, fuel: int) -> Seq[T]:
    """
    Build a sequence by repeatedly applying `step` to a state.

    Each call returns the next element together with the next state, or `None`
    when the sequence is complete. At most `fuel` elements are produced, so
    `unfold` terminates even when `step` never returns `None`.
    """
    buffer: list[T] = []
    while len(buffer) < fuel:
        produced = step(state)
        if produced is None:
            return _from_list(buffer)
        element, state = produced
        buffer.append(element)
    _logger.debug("unfold stopped after exhausting its fuel of %d", fuel)
    return _from_list(buffer)


# Reduction


def fold_right(combine: Callable[[T, U], U], seed: U, s: Seq[T]) -> U:
    """`combine(x1, combine(x2, ..., combine(xn, seed)))`"""
    accumulator = seed
    for element in reversed(list(s)):
        accumulator = combine(element, accumulator)
    return accumulator


def fold_left(combine: Callable[[U, T], U], seed: U, s: Seq[T]) -> U:
    """`combine(combine(...combine(seed, x1), x2...), xn)`"""
    return reduce(combine, s, seed)


def is_empty(s: Seq[Any]) -> bool:
    return isinstance(s, Empty)


def length(s: Seq[Any]) -> int:
    count = 0
    node = s
    while isinstance(node, Cons):
        count += 1
        node = node.tail
    return count


def append(s1: Seq[T], s2: Seq[T]) -> Seq[T]:
    """All of `s1` followed by all of `s2`. The result shares `s2`."""
    return _from_list(list(s1), s2)


def concat(ss: Seq[Seq[T]]) -> Seq[T]:
    """Append all sequences of `ss` together. The result shares the last one."""
    segments = list(ss)
    if not segments:
        return EMPTY
    elements = [element for segment in segments[:-1] for element in segment]
    return _from_list(elements, segments[-1])


def concat_map(f: Callable[[T], Seq[U]], s: Seq[T]) -> Seq[U]:
    return concat(map(f, s))


def and_(s: Seq[bool]) -> bool:
    return builtins.all(s)


def or_(s: Seq[bool]) -> bool:
    return builtins.any(s)


def any(predicate: Predicate[T], s: Seq[T]) -> bool:
    return or_(map(predicate, s))


def all(predicate: Predicate[T], s: Seq[T]) -> bool:
    return and_(map(predicate, s))


def sum(s: Seq[Any]) -> Any:
    return fold_right(operator.add, 0, s)


def product(s: Seq[Any]) -> Any:
    return fold_right(operator.mul, 1, s)


# Transformation & combination


def map(f: Callable[[T], U], s: Seq[T]) -> Seq[U]:
    return _from_list([f(element) for element in s])


def map_optional(f: Callable[[T], U | None], s: Seq[T]) -> Seq[U]:
    """Apply `f` to every element, keeping only the results that are not `None`."""
    buffer: list[U] = []
    for element in s:
        result = f(element)
        if result is not None:
            buffer.append(result)
    return _from_list(buffer)


def cat_optionals(s: Seq[T | None]) -> Seq[T]:
    return map_optional(_identity, s)


def intersperse(separator: T, s: Seq[T]) -> Seq[T]:
    buffer: list[T] = []
    for element in s:
        if buffer:
            buffer.append(separator)
        buffer.append(element)
    return _from_list(buffer)


def intercalate(separator: Seq[T], ss: Seq[Seq[T]]) -> Seq[T]:
    return concat(intersperse(separator, ss))


def cartesian_product_with(f: Callable[[A, B], C], s1: Seq[A], s2: Seq[B]) -> Seq[C]:
    """
    `f` applied to every pair of an element of `s1` with an element of `s2`.

    Results are in row-major order: all pairs for the first element of `s1`
    come before any pair for the second.
    """
    inner = list(s2)
    return _from_list([f(left, right) for left in s1 for right in inner])


def cartesian_product(s1: Seq[A], s2: Seq[B]) -> Seq[tuple[A, B]]:
    return cartesian_product_with(_pair, s1, s2)


def ap(functions: Seq[Callable[[T], U]], s: Seq[T]) -> Seq[U]:
    """Every function of `functions` applied to every element of `s`, function-major."""
    return concat_map(lambda f: map(f, s), functions)


def align_with(f: Callable[[Alignment[A, B]], C], s1: Seq[A], s2: Seq[B]) -> Seq[C]:
    """
    Combine two sequences position by position without dropping elements.

    The result is as long as the longer input. Positions where only `s1` has an
    element are passed to `f` as `This`, where only `s2` does as `That`, and
    where both do as `These`.
    """
    buffer: list[C] = []
    left: Seq[A] = s1
    right: Seq[B] = s2
    while isinstance(left, Cons) or isinstance(right, Cons):
        if isinstance(left, Cons) and isinstance(right, Cons):
            buffer.append(f(These(this=left.head, that=right.head)))
            left, right = left.tail, right.tail
        elif isinstance(left, Cons):
            buffer.append(f(This(this=left.head)))
            left = left.tail
        else:
            assert isinstance(right, Cons)
            buffer.append(f(That(that=right.head)))
            right = right.tail
    return _from_list(buffer)


def align(s1: Seq[A], s2: Seq[B]) -> Seq[Alignment[A, B]]:
    return align_with(_identity, s1, s2)


def zip_with(f: Callable[[A, B], C], s1: Seq[A], s2: Seq[B]) -> Seq[C]:
    """Combine elements at the same position. Excess elements of the longer input are dropped."""
    return _from_list([f(left, right) for left, right in builtins.zip(s1, s2)])


def zip(s1: Seq[A], s2: Seq[B]) -> Seq[tuple[A, B]]:
    return zip_with(_pair, s1, s2)


def zip_with3(
    f: Callable[[A, B, C], V], s1: Seq[A], s2: Seq[B], s3: Seq[C]
) -> Seq[V]:
    return _from_list([f(a, b, c) for a, b, c in builtins.zip(s1, s2, s3)])


def zip3(s1: Seq[A], s2: Seq[B], s3: Seq[C]) -> Seq[tuple[A, B, C]]:
    return zip_with3(lambda a, b, c: (a, b, c), s1, s2, s3)


def unalign_with(
    f: Callable[[T], Alignment[A, B]], s: Seq[T]
) -> tuple[Seq[A], Seq[B]]:
    """
    Split a sequence into a left and a right sequence.

    Each element is mapped by `f`; a `This` contributes only to the left result,
    a `That` only to the right result, and a `These` to both.
    """
    lefts: list[A] = []
    rights: list[B] = []
    for element in s:
        match f(element):
            case This(this=this):
                lefts.append(this)
            case That(that=that):
                rights.append(that)
            case These(this=this, that=that):
                lefts.append(this)
                rights.append(that)
            case other:
                raise TypeError(f"Expected This, That or These, got {other!r}")
    return _from_list(lefts), _from_list(rights)


def unalign(s: Seq[Alignment[A, B]]) -> tuple[Seq[A], Seq[B]]:
    return unalign_with(_identity, s)


def unzip_with(f: Callable[[T], tuple[A, B]], s: Seq[T]) -> tuple[Seq[A], Seq[B]]:
    lefts: list[A] = []
    rights: list[B] = []
    for element in s:
        left, right = f(element)
        lefts.append(left)
        rights.append(right)
    return _from_list(lefts), _from_list(rights)


def unzip(s: Seq[tuple[A, B]]) -> tuple[Seq[A], Seq[B]]:
    return unzip_with(_identity, s)


def unzip_with3(
    f: Callable[[T], tuple[A, B, C]], s: Seq[T]
) -> tuple[Seq[A], Seq[B], Seq[C]]:
    firsts: list[A] = []
    seconds: list[B] = []
    thirds: list[C] = []
    for element in s:
        first, second, third = f(element)
        firsts.append(first)
        seconds.append(second)
        thirds.append(third)
    return _from_list(firsts), _from_list(seconds), _from_list(thirds)


def unzip3(s: Seq[tuple[A, B, C]]) -> tuple[Seq[A], Seq[B], Seq[C]]:
    return unzip_with3(_identity, s)


def partition_sums_with(
    f: Callable[[T], Either[A, B]], s: Seq[T]
) -> tuple[Seq[A], Seq[B]]:
    lefts: list[A] = []
    rights: list[B] = []
    for element in s:
        either(lefts.append, rights.append, f(element))
    return _from_list(lefts), _from_list(rights)


def partition_sums(s: Seq[Either[A, B]]) -> tuple[Seq[A], Seq[B]]:
    """Split `Left` values from `Right` values, preserving relative order within each."""
    return partition_sums_with(_identity, s)


def merge(relation: Relation[T], s1: Seq[T], s2: Seq[T]) -> Seq[T]:
    """
    Merge two sequences that are each sorted under `relation`.

    `relation(x, y)` means "x should not come after y". While both inputs have
    elements, the head of `s1` is emitted if it is related to the head of `s2`,
    otherwise the head of `s2` is. The remainder of whichever input is left
    over is shared as the tail of the result. Ties favor `s1`.
    """
    buffer: list[T] = []
    left = s1
    right = s2
    while isinstance(left, Cons) and isinstance(right, Cons):
        if relation(left.head, right.head):
            buffer.append(left.head)
            left = left.tail
        else:
            buffer.append(right.head)
            right = right.tail
    return _from_list(buffer, left if isinstance(left, Cons) else right)


# Deconstruction & slicing


def uncons(s: Seq[T]) -> tuple[T, Seq[T]] | None:
    match s:
        case Cons(head=first, tail=rest):
            return first, rest
        case _:
            return None


def head(s: Seq[T]) -> T | None:
    match s:
        case Cons(head=first):
            return first
        case _:
            return None


def tail(s: Seq[T]) -> Seq[T] | None:
    match s:
        case Cons(tail=rest):
            return rest
        case _:
            return None


def last(s: Seq[T]) -> T | None:
    if not isinstance(s, Cons):
        return None
    node = s
    while isinstance(node.tail, Cons):
        node = node.tail
    return node.head


def split_at(n: int, s: Seq[T]) -> tuple[Seq[T], Seq[T]]:
    """`(take(n, s), drop(n, s))`. The second half is shared with `s`."""
    prefix: list[T] = []
    node = s
    while len(prefix) < n and isinstance(node, Cons):
        prefix.append(node.head)
        node = node.tail
    return _from_list(prefix), node


def take(n: int, s: Seq[T]) -> Seq[T]:
    return split_at(n, s)[0]


def drop(n: int, s: Seq[T]) -> Seq[T]:
    node = s
    for _ in range(n):
        if not isinstance(node, Cons):
            break
        node = node.tail
    return node


def span(predicate: Predicate[T], s: Seq[T]) -> tuple[Seq[T], Seq[T]]:
    """
    Split `s` before the first element that fails `predicate`.

    Equal to `(take_while(predicate, s), drop_while(predicate, s))`.
    """
    prefix: list[T] = []
    node = s
    while isinstance(node, Cons) and predicate(node.head):
        prefix.append(node.head)
        node = node.tail
    return _from_list(prefix), node


def break_(predicate: Predicate[T], s: Seq[T]) -> tuple[Seq[T], Seq[T]]:
    """Split `s` before the first element that satisfies `predicate`."""
    return span(lambda element: not predicate(element), s)


def take_while(predicate: Predicate[T], s: Seq[T]) -> Seq[T]:
    return span(predicate, s)[0]


def drop_while(predicate: Predicate[T], s: Seq[T]) -> Seq[T]:
    node = s
    while isinstance(node, Cons) and predicate(node.head):
        node = node.tail
    return node


def filter(predicate: Predicate[T], s: Seq[T]) -> Seq[T]:
    return _from_list([element for element in s if predicate(element)])


def partition(predicate: Predicate[T], s: Seq[T]) -> tuple[Seq[T], Seq[T]]:
    """`(filter(predicate, s), filter(not predicate, s))`, evaluating `predicate` once per element."""
    accepted: list[T] = []
    rejected: list[T] = []
    for element in s:
        (accepted if predicate(element) else rejected).append(element)
    return _from_list(accepted), _from_list(rejected)


def derun(relation: Relation[T], s: Seq[T]) -> Seq[T]:
    """
    Collapse every run of adjacent related elements to the last element of the run.

    An element is dropped exactly when `relation(element, next_element)` holds.
    """
    buffer: list[T] = []
    node = s
    while isinstance(node, Cons):
        following = node.tail
        if not (isinstance(following, Cons) and relation(node.head, following.head)):
            buffer.append(node.head)
        node = following
    return _from_list(buffer)


def deduplicate(relation: Relation[T], s: Seq[T]) -> Seq[T]:
    """
    Keep the first occurrence of every element under `relation`.

    Scanning left to right, an element `y` is kept unless `relation(k, y)` holds
    for some already kept `k`. Unlike `derun`, duplicates need not be adjacent.
    Quadratic in the length of `s`.
    """
    kept: list[T] = []
    for candidate in s:
        if not builtins.any(relation(earlier, candidate) for earlier in kept):
            kept.append(candidate)
    return _from_list(kept)


# Positional update & removal


def _split_before(s: Seq[T], index: int) -> tuple[list[T], Cons[T]]:
    """The elements before `index` and the node at `index`."""
    prefix: list[T] = []
    node = s
    if index >= 0:
        while isinstance(node, Cons):
            if len(prefix) == index:
                return prefix, node
            prefix.append(node.head)
            node = node.tail
    raise _out_of_range(s, index)


def update_at(s: Seq[T], index: int, f: Callable[[T], T]) -> Seq[T]:
    """
    Replace the element at `index` by `f(element)`.

    :raises IndexOutOfRange: If `index` does not address an element of `s`.
    """
    prefix, node = _split_before(s, index)
    return _from_list(prefix, Cons(head=f(node.head), tail=node.tail))


def set_at(s: Seq[T], index: int, value: T) -> Seq[T]:
    return update_at(s, index, lambda _: value)


def remove_at(s: Seq[T], index: int) -> Seq[T]:
    prefix, node = _split_before(s, index)
    return _from_list(prefix, node.tail)


def insert_at(s: Seq[T], index: int, value: T) -> Seq[T]:
    """
    Insert `value` so that it ends up at position `index`.

    Any index from `0` to `length(s)` inclusive is valid.

    :raises IndexOutOfRange: Otherwise.
    """
    if index >= 0:
        prefix, rest = split_at(index, s)
        if length(prefix) == index:
            return append(prefix, Cons(head=value, tail=rest))
    raise _out_of_range(s, index)


# Reversal


def reverse_append(s1: Seq[T], s2: Seq[T]) -> Seq[T]:
    """`append(reverse(s1), s2)` in a single pass."""
    return fold_left(
        lambda accumulator, element: Cons(head=element, tail=accumulator), s2, s1
    )


def reverse(s: Seq[T]) -> Seq[T]:
    return reverse_append(s, EMPTY)


def snoc(s: Seq[T], element: T) -> Seq[T]:
    return append(s, singleton(element))


def opt_cons(value: T | None, s: Seq[T]) -> Seq[T]:
    """`cons(value, s)` if `value` is present, otherwise `s`."""
    if value is None:
        return s
    return Cons(head=value, tail=s)


def opt_snoc(s: Seq[T], value: T | None) -> Seq[T]:
    if value is None:
        return s
    return snoc(s, value)


def unsnoc(s: Seq[T]) -> tuple[Seq[T], T] | None:
    """The mirror of `uncons`: all but the last element, and the last element."""
    elements = list(s)
    if not elements:
        return None
    final_element = elements.pop()
    return _from_list(elements), final_element


# Splitting


def lines_by(is_break: Predicate[T], s: Seq[T]) -> Seq[Seq[T]]:
    """
    Split `s` at every element satisfying `is_break`, discarding those elements.

    Consecutive breaks yield empty segments between them, and there is always
    one more segment than there are breaks.
    """
    segments: list[Seq[T]] = []
    current: list[T] = []
    for element in s:
        if is_break(element):
            segments.append(_from_list(current))
            current = []
        else:
            current.append(element)
    segments.append(_from_list(current))
    return _from_list(segments)


def words_by(is_space: Predicate[T], s: Seq[T]) -> Seq[Seq[T]]:
    """
    Split `s` at every maximal run of elements satisfying `is_space`.

    Separators are discarded and empty segments are never produced.
    """
    segments: list[Seq[T]] = []
    current: list[T] = []
    for element in s:
        if is_space(element):
            if current:
                segments.append(_from_list(current))
                current = []
        else:
            current.append(element)
    if current:
        segments.append(_from_list(current))
    return _from_list(segments)


__all__: list[str] = [
    "EMPTY",
    "Alignment",
    "Cons",
    "Either",
    "Empty",
    "IndexOutOfRange",
    "Left",
    "Predicate",
    "Relation",
    "Right",
    "Seq",
    "That",
    "These",
    "This",
    "align",
    "align_with",
    "all",
    "and_",
    "any",
    "ap",
    "append",
    "apply_down_from",
    "apply_up_to",
    "break_",
    "cartesian_product",
    "cartesian_product_with",
    "cat_optionals",
    "concat",
    "concat_map",
    "cons",
    "deduplicate",
    "derun",
    "down_from",
    "drop",
    "drop_while",
    "either",
    "empty",
    "filter",
    "fold_left",
    "fold_right",
    "from_iterable",
    "from_optional",
    "head",
    "inits",
    "insert_at",
    "intercalate",
    "intersperse",
    "is_empty",
    "iterate",
    "last",
    "length",
    "lines_by",
    "lookup",
    "map",
    "map_optional",
    "merge",
    "of",
    "opt_cons",
    "opt_snoc",
    "or_",
    "partition",
    "partition_sums",
    "partition_sums_with",
    "product",
    "remove_at",
    "replicate",
    "reverse",
    "reverse_append",
    "scan_left",
    "scan_right",
    "set_at",
    "singleton",
    "snoc",
    "span",
    "split_at",
    "sum",
    "tabulate",
    "tail",
    "take",
    "take_while",
    "these",
    "unalign",
    "unalign_with",
    "uncons",
    "unfold",
    "unsnoc",
    "unzip",
    "unzip3",
    "unzip_with",
    "unzip_with3",
    "up_to",
    "update_at",
    "words_by",
    "zip",
    "zip3",
    "zip_with",
    "zip_with3",
]
