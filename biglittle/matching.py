#!/usr/bin/env python

"""
biglittle/matching.py

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

Matching and MatchingSet classes: the result of a matching run. (The matching
itself is done by :mod:`biglittle.engine`.)

"""

import bisect
import logging
from typing import Any, Iterable, List, Optional

from biglittle.kind import BigIndex, Kind, LittleIndex
from biglittle.preferences import PreferenceTable

log = logging.getLogger(__name__)


# =============================================================================
# Matching
# =============================================================================


class Matching(object):
    """
    One Big and the Littles matched to them, the Big's favourite first.
    """

    def __init__(
        self, big: BigIndex, littles: Iterable[LittleIndex] = ()
    ) -> None:
        self.big = big
        self.littles = list(littles)  # type: List[LittleIndex]

    def __str__(self) -> str:
        littles = ", ".join(str(x.value) for x in self.littles)
        return f"{self.big.value} -> [{littles}]"

    def __repr__(self) -> str:
        return f"Matching(big={self.big!r}, littles={self.littles!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matching):
            return NotImplemented
        return self.big == other.big and self.littles == other.littles

    def __len__(self) -> int:
        return len(self.littles)

    def __contains__(self, little: LittleIndex) -> bool:
        return little in self.littles

    def add(self, little: LittleIndex, table: PreferenceTable) -> None:
        """
        Adds a Little, keeping the Littles sorted by the Big's preference.
        """
        self.littles.append(little)
        self.littles = table.in_descending_order(
            Kind.BIG, self.big, self.littles
        )

    def pop_least_preferred(self) -> LittleIndex:
        """
        Removes and returns the Little that the Big likes least.
        """
        return self.littles.pop()


# =============================================================================
# MatchingSet
# =============================================================================


class MatchingSet(object):
    """
    The result of a matching run: the matches (sorted by Big index), plus the
    Bigs and Littles left unmatched.

    Every Big ends up either owning a :class:`Matching` or unmatched, and
    every Little is in at most one :class:`Matching` or unmatched; see
    :meth:`check_partition`.
    """

    def __init__(self) -> None:
        self.matches = []  # type: List[Matching]
        self.unmatched_bigs = []  # type: List[BigIndex]
        self.unmatched_littles = []  # type: List[LittleIndex]

    def __str__(self) -> str:
        lines = [str(m) for m in self.matches]
        bigs = ", ".join(str(b.value) for b in self.unmatched_bigs)
        littles = ", ".join(str(x.value) for x in self.unmatched_littles)
        lines.append(f"Unmatched Bigs: [{bigs}]")
        lines.append(f"Unmatched Littles: [{littles}]")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"MatchingSet(matches={self.matches!r}, "
            f"unmatched_bigs={self.unmatched_bigs!r}, "
            f"unmatched_littles={self.unmatched_littles!r})"
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, MatchingSet):
            return NotImplemented
        return (
            self.matches == other.matches
            and self.unmatched_bigs == other.unmatched_bigs
            and self.unmatched_littles == other.unmatched_littles
        )

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def _bisect(self, big: BigIndex) -> int:
        keys = [m.big.value for m in self.matches]
        return bisect.bisect_left(keys, big.value)

    def find(self, big: BigIndex) -> Optional[Matching]:
        """
        The :class:`Matching` owned by this Big, if any.
        """
        i = self._bisect(big)
        if i < len(self.matches) and self.matches[i].big == big:
            return self.matches[i]
        return None

    def matched_big(self, little: LittleIndex) -> Optional[BigIndex]:
        """
        The Big this Little is matched to, if any.
        """
        for m in self.matches:
            if little in m:
                return m.big
        return None

    def n_matched_bigs(self) -> int:
        return len(self.matches)

    def n_matched_littles(self) -> int:
        return sum(len(m) for m in self.matches)

    # -------------------------------------------------------------------------
    # Building
    # -------------------------------------------------------------------------

    def insert(
        self, big: BigIndex, little: LittleIndex, table: PreferenceTable
    ) -> None:
        """
        Records that ``little`` is matched to ``big``.
        """
        i = self._bisect(big)
        if i < len(self.matches) and self.matches[i].big == big:
            self.matches[i].add(little, table)
        else:
            self.matches.insert(i, Matching(big, [little]))

    def add_unmatched_little(self, little: LittleIndex) -> None:
        if little not in self.unmatched_littles:
            self.unmatched_littles.append(little)

    def fill_unmatched_bigs(self, n_bigs: int) -> None:
        """
        Recomputes the unmatched Bigs: every Big from 0 to ``n_bigs - 1``
        that doesn't own a :class:`Matching`.
        """
        matched = set(m.big for m in self.matches)
        self.unmatched_bigs = [
            big
            for big in (BigIndex(i) for i in range(n_bigs))
            if big not in matched
        ]

    # -------------------------------------------------------------------------
    # Evening out
    # -------------------------------------------------------------------------

    def largest_position(self) -> Optional[int]:
        """
        Position (within :attr:`matches`) of the largest :class:`Matching`;
        on ties, the first. Returns ``None`` if there's nothing to even out:
        no matches at all, several matches all the same size, or a single
        match with only one Little.
        """
        if not self.matches:
            return None
        sizes = [len(m) for m in self.matches]
        largest = max(sizes)
        if len(sizes) > 1:
            if min(sizes) == largest:
                return None
        elif largest <= 1:
            return None
        return sizes.index(largest)

    def evict_least_preferred(self, position: int) -> LittleIndex:
        """
        Removes the least-preferred Little from the :class:`Matching` at
        ``position``, dropping the :class:`Matching` if that empties it.
        """
        matching = self.matches[position]
        little = matching.pop_least_preferred()
        if not matching.littles:
            del self.matches[position]
        return little

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def check_partition(self, n_bigs: int, n_littles: int) -> None:
        """
        Checks that every Big owns a match or is unmatched (not both), and
        that every Little is in exactly one match or unmatched.

        Raises:
            :exc:`AssertionError` upon failure.
        """
        owners = [m.big for m in self.matches]
        assert len(set(owners)) == len(owners), "Big owns two matches"
        assert owners == sorted(owners), "Matches not sorted by Big"
        assert not set(owners) & set(self.unmatched_bigs), (
            "Big both matched and unmatched"
        )
        all_bigs = set(owners) | set(self.unmatched_bigs)
        assert all_bigs == set(BigIndex(i) for i in range(n_bigs)), (
            f"Bigs don't partition 0..{n_bigs - 1}"
        )
        seen = []  # type: List[LittleIndex]
        for m in self.matches:
            assert m.littles, f"Empty match for {m.big}"
            seen.extend(m.littles)
        seen.extend(self.unmatched_littles)
        assert len(seen) == len(set(seen)), "Little placed twice"
        assert set(seen) == set(LittleIndex(i) for i in range(n_littles)), (
            f"Littles don't partition 0..{n_littles - 1}"
        )
