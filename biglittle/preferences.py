#!/usr/bin/env python

"""
biglittle/preferences.py

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

Preference table.

"""

import logging
import operator
from typing import Any, Iterable, List, Optional, Tuple

from biglittle.kind import (
    Index,
    Kind,
    PerKind,
    Preference,
    check_index,
    index_type,
    preference_type,
)

log = logging.getLogger(__name__)


# =============================================================================
# PreferenceTable
# =============================================================================


class PreferenceTable(object):
    """
    For every Big, its ranked list of Littles; for every Little, its ranked
    list of Bigs. Rows are best-first. Anything absent from a row is
    unacceptable to that row's owner.

    Rows are addressed by the owner's typed index, which is simply the order
    in which the rows were inserted; the caller keeps this in step with the
    name registry.

    Entries that point beyond the other side's population are stored as
    given. Nobody on the other side can list them back, so they can never be
    matched; this is deliberate leniency rather than an error.
    """

    def __init__(self) -> None:
        self._rows = PerKind([], [])  # type: PerKind[List[Tuple]]

    def __str__(self) -> str:
        lines = ["PreferenceTable:"]
        for kind in (Kind.BIG, Kind.LITTLE):
            for i, row in enumerate(self._rows.select(kind)):
                entries = ", ".join(str(x.value) for x in row)
                lines.append(f"{kind}#{i}: [{entries}]")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"PreferenceTable(big={self._rows.big!r}, "
            f"little={self._rows.little!r})"
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PreferenceTable):
            return NotImplemented
        return self._rows == other._rows

    # -------------------------------------------------------------------------
    # Building
    # -------------------------------------------------------------------------

    def insert(self, kind: Kind, row: Iterable[Index]) -> Index:
        """
        Appends the preferences of the next member of ``kind``.

        Args:
            kind:
                Whose preferences these are.
            row:
                Indices of the opposite kind, best first. Repeats are
                ignored (the first occurrence counts).

        Returns:
            the index of the member whose row this is

        Raises:
            :exc:`TypeError` if an entry is not an index of the opposite kind
        """
        opposite = kind.opposite
        unique = {}  # dict preserves insertion order
        for other in row:
            check_index(opposite, other)
            unique.setdefault(other, None)
        rows = self._rows.select(kind)
        rows.append(tuple(unique.keys()))
        return index_type(kind)(len(rows) - 1)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def count(self, kind: Kind) -> int:
        """
        Number of rows for this kind.
        """
        return len(self._rows.select(kind))

    def row(self, kind: Kind, index: Index) -> Tuple[Index, ...]:
        """
        The preferences of a member, best first. Members without a row have
        an empty one.
        """
        check_index(kind, index)
        rows = self._rows.select(kind)
        i = index.value
        return rows[i] if i < len(rows) else ()

    def rank(
        self, kind: Kind, self_index: Index, other_index: Index
    ) -> Optional[Preference]:
        """
        How ``self_index`` ranks ``other_index``: 1 for their first choice,
        and so on. ``None`` if they didn't list them at all.
        """
        check_index(kind.opposite, other_index)
        for position, candidate in enumerate(self.row(kind, self_index)):
            if candidate == other_index:
                return preference_type(kind)(position + 1)
        return None

    def accepts(
        self, kind: Kind, self_index: Index, other_index: Index
    ) -> bool:
        """
        Did ``self_index`` list ``other_index`` anywhere?
        """
        return self.rank(kind, self_index, other_index) is not None

    def best_of(
        self, kind: Kind, self_index: Index, candidates: Iterable[Index]
    ) -> Optional[Tuple[Index, Preference]]:
        """
        Of ``candidates``, the one ``self_index`` likes best, with its rank.
        Ties go to the first one seen. ``None`` if none of them is ranked.
        """
        best = None  # type: Optional[Tuple[Index, Preference]]
        for candidate in candidates:
            rank = self.rank(kind, self_index, candidate)
            if rank is None:
                continue
            if best is None or rank < best[1]:
                best = (candidate, rank)
        return best

    def in_descending_order(
        self, kind: Kind, self_index: Index, candidates: Iterable[Index]
    ) -> List[Index]:
        """
        Returns the candidates in descending order of preference according to
        ``self_index``. Unranked candidates come after all ranked ones.
        Otherwise, the order provided is the tie-break.
        """
        row = self.row(kind, self_index)
        n = len(row)
        positions = {candidate: p for p, candidate in enumerate(row)}
        options = []  # type: List[Tuple[Index, int, int]]
        for i, candidate in enumerate(candidates):
            options.append((candidate, positions.get(candidate, n), i))
        return [
            t[0]  # the candidate
            for t in sorted(options, key=operator.itemgetter(1, 2))
        ]
