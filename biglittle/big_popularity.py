#!/usr/bin/env python

"""
biglittle/big_popularity.py

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

BigPopularity class.

"""

import logging
import operator
from typing import Any, List, Optional, Tuple, TYPE_CHECKING

from scipy.stats import rankdata

from biglittle.kind import BigIndex, Kind, LittleIndex

if TYPE_CHECKING:
    from biglittle.solution import Solution

log = logging.getLogger(__name__)


# =============================================================================
# BigPopularity
# =============================================================================


class BigPopularity:
    """
    Represents a Big and how popular they were with the Littles.
    """

    def __init__(self, big: BigIndex, solution: "Solution") -> None:
        self.big = big
        self.solution = solution

        # Unpopularity: the sum of every Little's rank of this Big, with
        # Littles who didn't list the Big counting as one worse than the
        # worst possible rank.
        problem = solution.problem
        unlisted_score = problem.n_bigs() + 1
        self.unpopularity = 0
        self.choosers = []  # type: List[Tuple[LittleIndex, int]]
        for i in range(problem.n_littles()):
            little = LittleIndex(i)
            rank = problem.table.rank(Kind.LITTLE, little, big)
            if rank is None:
                self.unpopularity += unlisted_score
            else:
                self.unpopularity += rank.value
                self.choosers.append((little, rank.value))

        self.popularity_rank = None  # type: Optional[float]

    @classmethod
    def headings(cls) -> List[str]:
        return [
            "Big",
            "Total rank score from all Littles",
            "Popularity rank",
            "Number of matched Little(s)",
            "Matched Little(s)",
            "Number of Littles listing this Big",
            "Littles listing this Big (their rank)",
        ]

    @classmethod
    def sort_and_assign_ranks(
        cls, popularities: List["BigPopularity"]
    ) -> None:
        """
        Modifies a list in place.
        """
        popularities.sort(key=lambda x: x.unpopularity)
        unpop = [x.unpopularity for x in popularities]
        ranks = rankdata(unpop, method="average")
        for i in range(len(popularities)):
            popularities[i].popularity_rank = float(ranks[i])

    def values(self) -> List[Any]:
        solution = self.solution
        matched = solution.matched_littles(self.big)
        chooser_details = [
            f"{solution.little_name(little)} ({rank})"
            for little, rank in sorted(
                self.choosers, key=operator.itemgetter(1, 0)
            )
        ]
        return [
            solution.big_name(self.big),
            self.unpopularity,
            self.popularity_rank,
            len(matched),
            ", ".join(solution.little_name(x) for x in matched),
            len(chooser_details),
            ", ".join(chooser_details),
        ]
