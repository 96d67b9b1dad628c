"""
Small tagged-union value types consumed by the sequence operations.

- `This` / `That` / `These`: the inclusive-or of two values, produced by `align`
  when two sequences have different lengths.
- `Left` / `Right`: the disjoint union of two values, consumed by `partition_sums`.
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeAlias, TypeVar, final

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
A_co = TypeVar("A_co", covariant=True)
B_co = TypeVar("B_co", covariant=True)


@final
@dataclass(frozen=True, kw_only=True, slots=True, weakref_slot=True)
class This(Generic[A_co]):
    """Only the left side is present."""

    this: A_co


@final
@dataclass(frozen=True, kw_only=True, slots=True, weakref_slot=True)
class That(Generic[B_co]):
    """Only the right side is present."""

    that: B_co


@final
@dataclass(frozen=True, kw_only=True, slots=True, weakref_slot=True)
class These(Generic[A_co, B_co]):
    """Both sides are present."""

    this: A_co
    that: B_co


Alignment: TypeAlias = This[A] | That[B] | These[A, B]
"""
The value at one position of two aligned sequences.
"""


@final
@dataclass(frozen=True, kw_only=True, slots=True, weakref_slot=True)
class Left(Generic[A_co]):
    value: A_co


@final
@dataclass(frozen=True, kw_only=True, slots=True, weakref_slot=True)
class Right(Generic[B_co]):
    value: B_co


Either: TypeAlias = Left[A] | Right[B]


def these(
    on_this: Callable[[A], C],
    on_that: Callable[[B], C],
    on_these: Callable[[A, B], C],
    value: Alignment[A, B],
) -> C:
    """
    Eliminate an `Alignment` by dispatching on which sides are present.

    :param on_this: Called with the left value when only it is present.
    :param on_that: Called with the right value when only it is present.
    :param on_these: Called with both values when both are present.
    :param value: The value to eliminate.
    """
    match value:
        case This(this=this):
            return on_this(this)
        case That(that=that):
            return on_that(that)
        case These(this=this, that=that):
            return on_these(this, that)
        case _:
            raise TypeError(f"Expected This, That or These, got {value!r}")


def either(
    on_left: Callable[[A], C],
    on_right: Callable[[B], C],
    value: Either[A, B],
) -> C:
    match value:
        case Left(value=left):
            return on_left(left)
        case Right(value=right):
            return on_right(right)
        case _:
            raise TypeError(f"Expected Left or Right, got {value!r}")
