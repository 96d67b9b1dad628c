"""Test fixtures for consequence tests."""

from typing import Final

import pytest

import consequence as cq
from consequence import Seq

SAMPLES: Final[tuple[tuple[int, ...], ...]] = (
    (),
    (7,),
    (1, 2),
    (3, 1, 2),
    (1, 1, 2, 2, 2, 1),
    (5, 4, 3, 2, 1, 0),
)
"""Element tuples used to parametrize law tests."""


@pytest.fixture(params=SAMPLES, ids=lambda elements: repr(list(elements)))
def sample(request: pytest.FixtureRequest) -> Seq[int]:
    return cq.from_iterable(request.param)


@pytest.fixture(params=SAMPLES, ids=lambda elements: repr(list(elements)))
def other_sample(request: pytest.FixtureRequest) -> Seq[int]:
    return cq.from_iterable(request.param)


@pytest.fixture
def numbers() -> Seq[int]:
    return cq.of(1, 2, 3, 4)
