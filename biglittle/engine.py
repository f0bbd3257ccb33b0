#!/usr/bin/env python

"""
biglittle/engine.py

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

The matching algorithms.

**Maximal matching.** Each Little, in index order, goes to the first Big in
their own list who lists them back (anywhere in that Big's list). This is not
Gale-Shapley: acceptance is tested only from the Big's side, and a Big may
end up with any number of Littles.

**Even matching.** Starting from the maximal matching, repeatedly take the
largest match (earliest on ties) and move its least-preferred Little on to
the next Big in that Little's list who will accept them. Littles only ever
move down their own list; a Little who runs out of Bigs stays unmatched.
Stops when every Big has a match, or when all matches are the same size.

"""

import logging
from collections import Counter
from typing import Dict, List, Optional, Tuple

from biglittle.kind import BigIndex, Kind, LittleIndex
from biglittle.matching import MatchingSet
from biglittle.preferences import PreferenceTable

log = logging.getLogger(__name__)


# =============================================================================
# Matcher
# =============================================================================


class Matcher(object):
    """
    Runs the matching algorithms over a :class:`PreferenceTable`.

    Attributes after a run:

    - ``evictions``: how many times each Little was moved on during evening;
    - ``history``: the moves made during evening, in order, as
      ``(little, new_big)``, with ``new_big`` being ``None`` when the Little
      was left unmatched.
    """

    def __init__(self, table: PreferenceTable) -> None:
        self.table = table
        self.n_bigs = table.count(Kind.BIG)
        self.n_littles = table.count(Kind.LITTLE)
        self.evictions = Counter()  # type: Dict[LittleIndex, int]
        self.history = []  # type: List[Tuple[LittleIndex, Optional[BigIndex]]]
        # Position in each Little's row at which to resume looking:
        self._next_position = {}  # type: Dict[LittleIndex, int]

    def _place(self, result: MatchingSet, little: LittleIndex,
               start: int = 0) -> Optional[BigIndex]:
        """
        Walks down ``little``'s list from ``start`` and matches them to the
        first Big who lists them. If there is none, the Little is recorded
        as unmatched.

        Returns the Big chosen, or ``None``.
        """
        row = self.table.row(Kind.LITTLE, little)
        for position in range(start, len(row)):
            big = row[position]
            if self.table.accepts(Kind.BIG, big, little):
                result.insert(big, little, self.table)
                self._next_position[little] = position + 1
                return big
        self._next_position[little] = len(row)
        result.add_unmatched_little(little)
        return None

    def _maximal(self) -> MatchingSet:
        result = MatchingSet()
        for i in range(self.n_littles):
            self._place(result, LittleIndex(i))
        return result

    def maximal(self) -> MatchingSet:
        """
        Greedy maximal matching; see module docstring.
        """
        self.evictions.clear()
        self.history.clear()
        result = self._maximal()
        result.fill_unmatched_bigs(self.n_bigs)
        result.check_partition(self.n_bigs, self.n_littles)
        log.debug(f"Maximal matching:\n{result}")
        return result

    def even(self) -> MatchingSet:
        """
        Even matching; see module docstring.
        """
        self.evictions.clear()
        self.history.clear()
        result = self._maximal()
        while result.n_matched_bigs() < self.n_bigs:
            position = result.largest_position()
            if position is None:
                break
            donor = result.matches[position].big
            little = result.evict_least_preferred(position)
            self.evictions[little] += 1
            new_big = self._place(
                result, little, start=self._next_position[little]
            )
            self.history.append((little, new_big))
            log.debug(
                f"Moved Little {little.value} from Big {donor.value} to "
                + (
                    f"Big {new_big.value}"
                    if new_big is not None
                    else "nobody (list exhausted)"
                )
            )
        result.fill_unmatched_bigs(self.n_bigs)
        result.check_partition(self.n_bigs, self.n_littles)
        log.debug(f"Even matching:\n{result}")
        return result


# =============================================================================
# Shortcuts
# =============================================================================


def find_maximal_matching(table: PreferenceTable) -> MatchingSet:
    """
    Greedy maximal matching of ``table``.
    """
    return Matcher(table).maximal()


def find_even_matching(table: PreferenceTable) -> MatchingSet:
    """
    Even matching of ``table``.
    """
    return Matcher(table).even()
