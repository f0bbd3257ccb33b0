#!/usr/bin/env python

"""
biglittle/tests/preference_tests.py

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

Tests the preference table.

"""

import unittest

from biglittle.kind import (
    BigIndex,
    BigPreference,
    Kind,
    LittleIndex,
    LittlePreference,
)
from biglittle.preferences import PreferenceTable

B = BigIndex
L = LittleIndex


class PreferenceTableTests(unittest.TestCase):
    def setUp(self) -> None:
        self.table = PreferenceTable()
        self.table.insert(Kind.BIG, [L(2), L(0), L(1)])
        self.table.insert(Kind.BIG, [L(1)])
        self.table.insert(Kind.LITTLE, [B(1), B(0)])

    def test_insert_returns_row_index(self) -> None:
        self.assertEqual(self.table.insert(Kind.BIG, []), B(2))
        self.assertEqual(self.table.insert(Kind.LITTLE, []), L(1))
        self.assertEqual(self.table.count(Kind.BIG), 3)
        self.assertEqual(self.table.count(Kind.LITTLE), 2)

    def test_duplicates_dropped(self) -> None:
        i = self.table.insert(Kind.LITTLE, [B(0), B(1), B(0), B(1), B(2)])
        self.assertEqual(self.table.row(Kind.LITTLE, i), (B(0), B(1), B(2)))
        self.assertEqual(
            self.table.rank(Kind.LITTLE, i, B(2)), LittlePreference(3)
        )

    def test_wrong_kind_entries_rejected(self) -> None:
        self.assertRaises(TypeError, self.table.insert, Kind.BIG, [B(0)])
        self.assertRaises(TypeError, self.table.insert, Kind.LITTLE, [0])
        # Nothing appended on failure.
        self.assertEqual(self.table.count(Kind.BIG), 2)

    def test_rank(self) -> None:
        t = self.table
        self.assertEqual(t.rank(Kind.BIG, B(0), L(2)), BigPreference(1))
        self.assertEqual(t.rank(Kind.BIG, B(0), L(1)), BigPreference(3))
        self.assertEqual(t.rank(Kind.LITTLE, L(0), B(0)), LittlePreference(2))
        self.assertIsNone(t.rank(Kind.BIG, B(1), L(0)))
        self.assertTrue(t.accepts(Kind.BIG, B(1), L(1)))
        self.assertFalse(t.accepts(Kind.BIG, B(1), L(2)))

    def test_rank_checks_kinds(self) -> None:
        self.assertRaises(TypeError, self.table.rank, Kind.BIG, B(0), B(0))
        self.assertRaises(TypeError, self.table.rank, Kind.BIG, L(0), L(0))

    def test_out_of_range(self) -> None:
        # A member without a row ranks nobody.
        self.assertEqual(self.table.row(Kind.BIG, B(9)), ())
        self.assertIsNone(self.table.rank(Kind.BIG, B(9), L(0)))
        # Entries beyond the other side are kept, and can be ranked.
        i = self.table.insert(Kind.LITTLE, [B(7)])
        self.assertEqual(
            self.table.rank(Kind.LITTLE, i, B(7)), LittlePreference(1)
        )

    def test_best_of(self) -> None:
        t = self.table
        self.assertEqual(
            t.best_of(Kind.BIG, B(0), [L(1), L(0)]),
            (L(0), BigPreference(2)),
        )
        self.assertEqual(
            t.best_of(Kind.BIG, B(0), [L(5), L(1)]),
            (L(1), BigPreference(3)),
        )
        self.assertIsNone(t.best_of(Kind.BIG, B(1), [L(0), L(2)]))
        self.assertIsNone(t.best_of(Kind.BIG, B(0), []))

    def test_best_of_tie_goes_to_first(self) -> None:
        self.assertEqual(
            self.table.best_of(Kind.BIG, B(1), [L(1), L(1)]),
            (L(1), BigPreference(1)),
        )

    def test_in_descending_order(self) -> None:
        t = self.table
        self.assertEqual(
            t.in_descending_order(Kind.BIG, B(0), [L(0), L(1), L(2)]),
            [L(2), L(0), L(1)],
        )
        # Unranked at the end, in the order given.
        self.assertEqual(
            t.in_descending_order(Kind.BIG, B(1), [L(4), L(0), L(1), L(3)]),
            [L(1), L(4), L(0), L(3)],
        )
