"""Algebraic laws relating the operations to each other."""

import consequence as cq
from consequence import EMPTY, Seq


def double(x: int) -> int:
    return x * 2


def increment(x: int) -> int:
    return x + 1


class TestAppendLaws:
    def test_identity(self, sample: Seq[int]) -> None:
        assert cq.append(EMPTY, sample) == sample == cq.append(sample, EMPTY)

    def test_associativity(self, sample: Seq[int], other_sample: Seq[int]) -> None:
        third = cq.of(8, 9)
        assert cq.append(cq.append(sample, other_sample), third) == cq.append(
            sample, cq.append(other_sample, third)
        )

    def test_length_is_additive(self, sample: Seq[int], other_sample: Seq[int]) -> None:
        assert cq.length(cq.append(sample, other_sample)) == cq.length(
            sample
        ) + cq.length(other_sample)


class TestFunctorLaws:
    def test_identity(self, sample: Seq[int]) -> None:
        assert cq.map(lambda x: x, sample) == sample

    def test_composition(self, sample: Seq[int]) -> None:
        assert cq.map(double, cq.map(increment, sample)) == cq.map(
            lambda x: double(increment(x)), sample
        )

    def test_length_preserved(self, sample: Seq[int]) -> None:
        assert cq.length(cq.map(double, sample)) == cq.length(sample)


class TestRoundTrips:
    """Test that the splitting operations invert the pairing ones."""

    def test_unzip_zip(self, sample: Seq[int]) -> None:
        other = cq.map(str, sample)
        assert cq.unzip(cq.zip(sample, other)) == (sample, other)

    def test_unalign_align(self, sample: Seq[int], other_sample: Seq[int]) -> None:
        assert cq.unalign(cq.align(sample, other_sample)) == (sample, other_sample)

    def test_unzip3_zip3(self, sample: Seq[int]) -> None:
        strings = cq.map(str, sample)
        doubled = cq.map(double, sample)
        assert cq.unzip3(cq.zip3(sample, strings, doubled)) == (sample, strings, doubled)


class TestDerunLaws:
    def test_idempotent_for_reflexive_relation(self, sample: Seq[int]) -> None:
        def same(x: int, y: int) -> bool:
            return x == y

        once = cq.derun(same, sample)
        assert cq.derun(same, once) == once

    def test_deduplicate_is_idempotent(self, sample: Seq[int]) -> None:
        def same(x: int, y: int) -> bool:
            return x == y

        once = cq.deduplicate(same, sample)
        assert cq.deduplicate(same, once) == once


class TestMiscellaneousLaws:
    def test_concat_map_singleton_is_map(self, sample: Seq[int]) -> None:
        assert cq.concat_map(lambda x: cq.singleton(double(x)), sample) == cq.map(
            double, sample
        )

    def test_inits_and_tails_reassemble(self, sample: Seq[int]) -> None:
        pairs = cq.zip(cq.inits(sample), cq.reverse(cq.tails(sample)))
        for prefix, suffix in pairs:
            assert cq.length(prefix) == cq.length(suffix)
        for prefix, suffix in cq.zip(cq.inits(sample), cq.tails(sample)):
            assert cq.append(prefix, suffix) == sample

    def test_lookup_agrees_with_iteration(self, sample: Seq[int]) -> None:
        assert [cq.lookup(sample, i) for i in range(cq.length(sample))] == list(sample)

    def test_tabulate_lookup(self, sample: Seq[int]) -> None:
        assert cq.tabulate(lambda i: cq.lookup(sample, i), cq.length(sample)) == sample
