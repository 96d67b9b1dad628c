"""Tests for folds and aggregates."""

import consequence as cq
from consequence import EMPTY, Seq


class TestFolds:
    """Test associativity direction of the two folds."""

    def test_fold_right_is_right_associative(self) -> None:
        result = cq.fold_right(lambda x, acc: f"({x} {acc})", "e", cq.of(1, 2, 3))
        assert result == "(1 (2 (3 e)))"

    def test_fold_left_is_left_associative(self) -> None:
        result = cq.fold_left(lambda acc, x: f"({acc} {x})", "e", cq.of(1, 2, 3))
        assert result == "(((e 1) 2) 3)"

    def test_folds_of_empty_return_seed(self) -> None:
        assert cq.fold_right(lambda x, acc: acc + x, 42, EMPTY) == 42
        assert cq.fold_left(lambda acc, x: acc + x, 42, EMPTY) == 42

    def test_fold_right_over_long_sequence(self) -> None:
        assert cq.fold_right(lambda x, acc: acc + 1, 0, cq.up_to(100_000)) == 100_000


class TestConcat:
    def test_concat(self) -> None:
        assert cq.concat(cq.of(cq.of(1, 2), EMPTY, cq.of(3))) == cq.of(1, 2, 3)

    def test_concat_of_empty(self) -> None:
        assert cq.concat(EMPTY) == EMPTY
        assert cq.concat(cq.of(EMPTY, EMPTY)) == EMPTY

    def test_concat_shares_last_segment(self) -> None:
        last_segment = cq.of(3, 4)
        result = cq.concat(cq.of(cq.of(1, 2), last_segment))
        assert cq.drop(2, result) is last_segment

    def test_concat_map(self) -> None:
        assert cq.concat_map(lambda x: cq.replicate(x, x), cq.of(1, 2, 3)) == cq.of(
            1, 2, 2, 3, 3, 3
        )


class TestBooleanAggregates:
    def test_and_or(self) -> None:
        assert cq.and_(cq.of(True, True))
        assert not cq.and_(cq.of(True, False))
        assert cq.or_(cq.of(False, True))
        assert not cq.or_(cq.of(False, False))

    def test_identities_on_empty(self) -> None:
        assert cq.and_(EMPTY) is True
        assert cq.or_(EMPTY) is False

    def test_any_all(self, numbers: Seq[int]) -> None:
        assert cq.any(lambda x: x > 3, numbers)
        assert not cq.any(lambda x: x > 4, numbers)
        assert cq.all(lambda x: x > 0, numbers)
        assert not cq.all(lambda x: x > 1, numbers)

    def test_any_all_on_empty(self) -> None:
        assert not cq.any(lambda x: True, EMPTY)
        assert cq.all(lambda x: False, EMPTY)


class TestNumericAggregates:
    def test_sum_product(self, numbers: Seq[int]) -> None:
        assert cq.sum(numbers) == 10
        assert cq.product(numbers) == 24

    def test_identities_on_empty(self) -> None:
        assert cq.sum(EMPTY) == 0
        assert cq.product(EMPTY) == 1


class TestLength:
    def test_length(self, numbers: Seq[int]) -> None:
        assert cq.length(numbers) == 4
        assert cq.length(EMPTY) == 0
        assert cq.is_empty(EMPTY)
        assert not cq.is_empty(numbers)

    def test_length_counts_cons_cells(self) -> None:
        s = cq.cons(1, cq.cons(2, cq.cons(3, EMPTY)))
        assert cq.length(s) == 3
