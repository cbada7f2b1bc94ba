"""Tests for CountMap.clone and CountMap.equals."""
from __future__ import annotations

import pytest

from countmap.hashing import HashStrategy
from countmap.multiset import CountMap

from tests.multiset.conftest import TEST_ITEMS, hash_half


class TestClone:
    def test_same_counts(self, map_standard):
        clone = map_standard.clone()
        assert sorted(clone.entries()) == sorted(map_standard.entries())
        assert clone.equals(map_standard)

    def test_keeps_config(self, map_half, map_negative):
        assert map_half.clone().hash_strategy is map_half.hash_strategy
        assert map_negative.clone().allow_negative_counts is True

    def test_independent(self, map_standard):
        clone = map_standard.clone()
        clone.add(1)
        clone.delete(2)
        assert map_standard.get(1) == 3
        assert map_standard.get(2) == 2
        map_standard.add(3, 5)
        assert clone.get(3) == 3

    def test_keeps_zero_and_negative_records(self, map_negative):
        map_negative.set(8, 0)
        map_negative.set(18, -2)
        clone = map_negative.clone()
        assert clone.has(8)
        assert clone.get(18) == -2


class TestEquals:
    def test_reflexive(self, map_standard):
        assert map_standard.equals(map_standard)

    def test_same_construction(self):
        a = CountMap(TEST_ITEMS, hash_strategy=hash_half)
        b = CountMap(TEST_ITEMS, hash_strategy=hash_half)
        assert a.equals(b)
        assert b.equals(a)
        assert a == b

    def test_count_mismatch(self, map_standard):
        clone = map_standard.clone()
        clone.add(1)
        assert not clone.equals(map_standard)
        assert not map_standard.equals(clone)

    def test_missing_key_either_side(self, map_standard):
        clone = map_standard.clone()
        clone.delete(1)
        assert not clone.equals(map_standard)
        assert not map_standard.equals(clone)

    def test_extra_zero_record_is_equal(self, map_standard):
        clone = map_standard.clone()
        clone.set(555, 0)
        assert clone.equals(map_standard)
        assert map_standard.equals(clone)

    def test_negative_mode_differs(self, map_standard, map_negative):
        assert not map_standard.equals(map_negative)
        assert not map_negative.equals(map_standard)

    def test_hash_differs(self, map_standard, map_half):
        assert not map_standard.equals(map_half)

    def test_lookalike_lambdas_differ(self):
        a = CountMap(TEST_ITEMS, hash_strategy=lambda x: str(x))
        b = CountMap(TEST_ITEMS, hash_strategy=lambda x: str(x))
        assert not a.equals(b)

    def test_named_strategy_matches_across_functions(self):
        a = CountMap(TEST_ITEMS, hash_strategy=HashStrategy("plain", lambda x: str(x)))
        b = CountMap(TEST_ITEMS, hash_strategy=HashStrategy("plain", str))
        assert a.equals(b)

    def test_registered_name_matches_default(self):
        assert CountMap(TEST_ITEMS).equals(CountMap(TEST_ITEMS, hash_strategy="str"))

    def test_non_countmap(self, map_standard):
        assert map_standard.equals({1: 3}) is False
        assert map_standard != {1: 3}

    def test_unhashable(self, map_standard):
        with pytest.raises(TypeError):
            hash(map_standard)

    def test_registered_function_matches_default(self):
        a = CountMap([1, 2, 2])
        b = CountMap([1, 2, 2], hash_strategy=str)
        assert b.hash_strategy.name == "str"
        assert a.equals(b)
        assert b.equals(a)

    def test_registered_function_matches_by_name(self):
        a = CountMap(["x"], hash_strategy="repr")
        b = CountMap(["x"], hash_strategy=repr)
        assert a == b
