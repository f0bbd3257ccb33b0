#!/usr/bin/env python

"""
biglittle/tests/kind_tests.py

===============================================================================

    Copyright (C) 2019 Rudolf Cardinal (rudolf@pobox.com).

    This file is part of biglittle.

    This is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This software is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this software. If not, see <https://www.gnu.org/licenses/>.

===============================================================================

Tests the Big/Little kinds and typed indices.

"""

import unittest

from biglittle.kind import (
    BigIndex,
    BigPreference,
    Kind,
    LittleIndex,
    LittlePreference,
    PerKind,
    check_index,
    index_type,
    kind_of,
    preference_type,
)


class KindTests(unittest.TestCase):
    def test_opposite(self) -> None:
        self.assertIs(Kind.BIG.opposite, Kind.LITTLE)
        self.assertIs(Kind.LITTLE.opposite, Kind.BIG)
        self.assertIs(Kind.BIG.opposite.opposite, Kind.BIG)

    def test_case_insensitive_lookup(self) -> None:
        self.assertIs(Kind["big"], Kind.BIG)
        self.assertIs(Kind["Little"], Kind.LITTLE)

    def test_only_two_kinds(self) -> None:
        self.assertEqual(len(Kind), 2)

    def test_type_maps(self) -> None:
        self.assertIs(index_type(Kind.BIG), BigIndex)
        self.assertIs(index_type(Kind.LITTLE), LittleIndex)
        self.assertIs(preference_type(Kind.BIG), BigPreference)
        self.assertIs(preference_type(Kind.LITTLE), LittlePreference)
        self.assertIs(kind_of(BigIndex(3)), Kind.BIG)
        self.assertIs(kind_of(LittlePreference(1)), Kind.LITTLE)
        self.assertRaises(TypeError, kind_of, 3)


class IndexTests(unittest.TestCase):
    def test_same_kind_equality(self) -> None:
        self.assertEqual(BigIndex(2), BigIndex(2))
        self.assertNotEqual(BigIndex(2), BigIndex(3))
        self.assertEqual(hash(LittleIndex(4)), hash(LittleIndex(4)))
        self.assertEqual(len({BigIndex(1), BigIndex(1), BigIndex(2)}), 2)

    def test_cross_kind_never_equal(self) -> None:
        self.assertNotEqual(BigIndex(0), LittleIndex(0))
        self.assertNotEqual(BigIndex(0), 0)
        self.assertEqual(len({BigIndex(0), LittleIndex(0)}), 2)

    def test_cross_kind_ordering_rejected(self) -> None:
        self.assertTrue(BigIndex(1) < BigIndex(2))
        self.assertTrue(LittleIndex(5) >= LittleIndex(5))
        with self.assertRaises(TypeError):
            _ = BigIndex(1) < LittleIndex(2)
        with self.assertRaises(TypeError):
            _ = LittleIndex(1) >= 0

    def test_bad_values(self) -> None:
        self.assertRaises(ValueError, BigIndex, -1)
        self.assertRaises(TypeError, BigIndex, 1.0)
        self.assertRaises(TypeError, LittleIndex, "1")
        self.assertRaises(TypeError, LittleIndex, True)

    def test_index_as_list_index(self) -> None:
        items = ["a", "b", "c"]
        self.assertEqual(items[LittleIndex(2)], "c")
        self.assertEqual(int(BigIndex(7)), 7)

    def test_check_index(self) -> None:
        check_index(Kind.BIG, BigIndex(0))
        self.assertRaises(TypeError, check_index, Kind.BIG, LittleIndex(0))
        self.assertRaises(TypeError, check_index, Kind.LITTLE, 0)


class PreferenceRankTests(unittest.TestCase):
    def test_rank_must_be_positive(self) -> None:
        self.assertRaises(ValueError, BigPreference, 0)
        self.assertEqual(BigPreference(1).value, 1)

    def test_lower_is_better_within_kind(self) -> None:
        self.assertTrue(LittlePreference(1) < LittlePreference(2))
        with self.assertRaises(TypeError):
            _ = LittlePreference(1) < BigPreference(2)
        self.assertNotEqual(LittlePreference(1), BigPreference(1))


class PerKindTests(unittest.TestCase):
    def test_select(self) -> None:
        pk = PerKind(["b"], ["l"])
        self.assertIs(pk.select(Kind.BIG), pk.big)
        self.assertIs(pk.select(Kind.LITTLE), pk.little)
        pk.select(Kind.LITTLE).append("m")
        self.assertEqual(pk.little, ["l", "m"])
        self.assertRaises(TypeError, pk.select, "big")
