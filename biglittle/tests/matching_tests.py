#!/usr/bin/env python

"""
biglittle/tests/matching_tests.py

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

Tests the MatchingSet result structure.

"""

import unittest

from biglittle.kind import BigIndex, Kind, LittleIndex
from biglittle.matching import Matching, MatchingSet
from biglittle.preferences import PreferenceTable

B = BigIndex
L = LittleIndex


class MatchingSetTests(unittest.TestCase):
    def setUp(self) -> None:
        self.table = PreferenceTable()
        self.table.insert(Kind.BIG, [L(3), L(1), L(0), L(2)])
        self.table.insert(Kind.BIG, [L(0), L(1)])
        self.table.insert(Kind.BIG, [L(2)])

    def test_insert_keeps_bigs_sorted(self) -> None:
        ms = MatchingSet()
        ms.insert(B(2), L(2), self.table)
        ms.insert(B(0), L(0), self.table)
        ms.insert(B(1), L(1), self.table)
        self.assertEqual([m.big for m in ms.matches], [B(0), B(1), B(2)])
        self.assertEqual(ms.find(B(1)), Matching(B(1), [L(1)]))
        self.assertIsNone(MatchingSet().find(B(0)))

    def test_littles_sorted_by_big_preference(self) -> None:
        ms = MatchingSet()
        for little in (L(0), L(1), L(2), L(3)):
            ms.insert(B(0), little, self.table)
        self.assertEqual(ms.find(B(0)).littles, [L(3), L(1), L(0), L(2)])
        self.assertEqual(ms.matched_big(L(2)), B(0))
        self.assertIsNone(ms.matched_big(L(9)))

    def test_unranked_littles_sort_last(self) -> None:
        m = Matching(B(1))
        m.add(L(3), self.table)
        m.add(L(1), self.table)
        m.add(L(2), self.table)
        m.add(L(0), self.table)
        self.assertEqual(m.littles, [L(0), L(1), L(3), L(2)])

    def test_largest_position(self) -> None:
        ms = MatchingSet()
        self.assertIsNone(ms.largest_position())
        ms.insert(B(0), L(0), self.table)
        # A single match with one Little: nothing to even out.
        self.assertIsNone(ms.largest_position())
        ms.insert(B(0), L(1), self.table)
        self.assertEqual(ms.largest_position(), 0)
        ms.insert(B(1), L(2), self.table)
        ms.insert(B(1), L(3), self.table)
        # Equal sizes: stop.
        self.assertIsNone(ms.largest_position())
        ms.insert(B(2), L(4), self.table)
        ms.insert(B(2), L(5), self.table)
        ms.insert(B(2), L(6), self.table)
        self.assertEqual(ms.largest_position(), 2)
        ms.insert(B(1), L(7), self.table)
        # Tie between B1 and B2: the first wins.
        self.assertEqual(ms.largest_position(), 1)

    def test_evict_least_preferred(self) -> None:
        ms = MatchingSet()
        for little in (L(0), L(3), L(2)):
            ms.insert(B(0), little, self.table)
        self.assertEqual(ms.evict_least_preferred(0), L(2))
        self.assertEqual(ms.find(B(0)).littles, [L(3), L(0)])
        ms.insert(B(2), L(2), self.table)
        self.assertEqual(ms.evict_least_preferred(1), L(2))
        # Emptied matches disappear.
        self.assertEqual([m.big for m in ms.matches], [B(0)])

    def test_fill_unmatched_and_partition(self) -> None:
        ms = MatchingSet()
        ms.insert(B(1), L(0), self.table)
        ms.add_unmatched_little(L(1))
        ms.add_unmatched_little(L(1))
        ms.fill_unmatched_bigs(3)
        self.assertEqual(ms.unmatched_bigs, [B(0), B(2)])
        self.assertEqual(ms.unmatched_littles, [L(1)])
        ms.check_partition(3, 2)
        self.assertRaises(AssertionError, ms.check_partition, 4, 2)
        self.assertRaises(AssertionError, ms.check_partition, 3, 3)
        ms.add_unmatched_little(L(0))
        self.assertRaises(AssertionError, ms.check_partition, 3, 2)

    def test_empty(self) -> None:
        ms = MatchingSet()
        ms.fill_unmatched_bigs(0)
        ms.check_partition(0, 0)
        self.assertEqual(ms, MatchingSet())
        self.assertEqual(ms.n_matched_littles(), 0)
