#!/usr/bin/env python

"""
biglittle/solution.py

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

Solution class. Represents the outcome of a matching run, with names attached,
for display and saving. (The actual matching is done by
:mod:`biglittle.engine`.)

"""

import csv
import datetime
import logging
import os
from statistics import mean, median
import sys
from typing import (
    Callable,
    Generator,
    List,
    Optional,
    Tuple,
    TYPE_CHECKING,
)

from cardinal_pythonlib.cmdline import cmdline_quote
from cardinal_pythonlib.reprfunc import auto_repr
from openpyxl.workbook.workbook import Workbook

from biglittle.big_popularity import BigPopularity
from biglittle.constants import (
    CsvHeadings,
    EXT_CSV,
    EXT_XLSX,
    SheetHeadings,
    SheetNames,
)
from biglittle.helperfunc import (
    autosize_openpyxl_column,
    autosize_openpyxl_worksheet_columns,
    bold_cell,
    bold_first_row,
)
from biglittle.kind import BigIndex, Kind, LittleIndex
from biglittle.matching import MatchingSet
from biglittle.version import VERSION, VERSION_DATE

if TYPE_CHECKING:
    from biglittle.problem import Problem

log = logging.getLogger(__name__)


def _summarize(
    func: Callable[[List[int]], float], values: List[int]
) -> Optional[float]:
    """
    Applies a summary function, giving ``None`` rather than an error if
    there are no values.
    """
    return func(values) if values else None


# =============================================================================
# Solution
# =============================================================================


class Solution:
    """
    Represents a matching outcome.
    """

    def __init__(self, problem: "Problem", matching_set: MatchingSet) -> None:
        """
        Args:
            problem:
                The :class:`Problem`, defining names and preferences.
            matching_set:
                The raw result of the matching algorithm.
        """
        self.problem = problem
        self.matching_set = matching_set

    # -------------------------------------------------------------------------
    # Names
    # -------------------------------------------------------------------------

    def big_name(self, big: BigIndex) -> str:
        return self.problem.names.get_name(Kind.BIG, big)

    def little_name(self, little: LittleIndex) -> str:
        return self.problem.names.get_name(Kind.LITTLE, little)

    # -------------------------------------------------------------------------
    # Representations
    # -------------------------------------------------------------------------

    def __repr__(self) -> str:
        return auto_repr(self)

    def __str__(self) -> str:
        """
        Human-readable listing.
        """
        ms = self.matching_set
        lines = ["Solution:", ""]
        for m in ms.matches:
            littles = ", ".join(self.little_name(x) for x in m.littles)
            lines.append(f"{self.big_name(m.big)} -> {littles}")
        lines.append("")
        lines.append(
            "Unmatched Bigs: "
            + (", ".join(self.big_name(b) for b in ms.unmatched_bigs)
               or "[none]")
        )
        lines.append(
            "Unmatched Littles: "
            + (", ".join(self.little_name(x) for x in ms.unmatched_littles)
               or "[none]")
        )
        return "\n".join(lines)

    def shortdesc(self) -> str:
        """
        Very short description, by index.
        """
        parts = [
            f"{m.big.value}: {[x.value for x in m.littles]}"
            for m in self.matching_set.matches
        ]
        return "{" + ", ".join(parts) + "}"

    # -------------------------------------------------------------------------
    # Allocations
    # -------------------------------------------------------------------------

    def matched_big(self, little: LittleIndex) -> Optional[BigIndex]:
        """
        Which Big was this Little matched to?
        """
        return self.matching_set.matched_big(little)

    def matched_littles(self, big: BigIndex) -> List[LittleIndex]:
        """
        Which Littles were matched to this Big (the Big's favourite first)?
        """
        m = self.matching_set.find(big)
        return list(m.littles) if m else []

    def _gen_little_big_pairs(
        self,
    ) -> Generator[Tuple[LittleIndex, Optional[BigIndex]], None, None]:
        """
        Generates ``little, big`` pairs in Little order; ``big`` is ``None``
        for unmatched Littles.
        """
        for i in range(self.problem.n_littles()):
            little = LittleIndex(i)
            yield little, self.matched_big(little)

    # -------------------------------------------------------------------------
    # Ranks
    # -------------------------------------------------------------------------

    def little_rank_scores(self) -> List[int]:
        """
        For each matched Little, their rank of the Big they got.
        """
        table = self.problem.table
        scores = []  # type: List[int]
        for little, big in self._gen_little_big_pairs():
            if big is None:
                continue
            rank = table.rank(Kind.LITTLE, little, big)
            assert rank is not None, f"{little} matched to unlisted {big}"
            scores.append(rank.value)
        return scores

    def big_rank_scores(self) -> List[int]:
        """
        For each matched pair, the Big's rank of the Little.
        """
        table = self.problem.table
        scores = []  # type: List[int]
        for m in self.matching_set.matches:
            for little in m.littles:
                rank = table.rank(Kind.BIG, m.big, little)
                assert (
                    rank is not None
                ), f"{m.big} matched to unlisted {little}"
                scores.append(rank.value)
        return scores

    def little_rank_mean(self) -> Optional[float]:
        return _summarize(mean, self.little_rank_scores())

    def little_rank_median(self) -> Optional[float]:
        return _summarize(median, self.little_rank_scores())

    def little_rank_max(self) -> Optional[float]:
        return _summarize(max, self.little_rank_scores())

    def big_rank_mean(self) -> Optional[float]:
        return _summarize(mean, self.big_rank_scores())

    def big_rank_median(self) -> Optional[float]:
        return _summarize(median, self.big_rank_scores())

    def big_rank_max(self) -> Optional[float]:
        return _summarize(max, self.big_rank_scores())

    def match_sizes(self) -> List[int]:
        """
        Number of Littles per Big, in Big order (zero for unmatched Bigs).
        """
        return [
            len(self.matched_littles(BigIndex(i)))
            for i in range(self.problem.n_bigs())
        ]

    # -------------------------------------------------------------------------
    # Stability test
    # -------------------------------------------------------------------------

    def gen_blocking_pairs(
        self,
    ) -> Generator[Tuple[LittleIndex, BigIndex], None, None]:
        """
        Generates ``little, big`` pairs where the Little would rather have
        that Big than their current match (or than nothing), and that Big
        listed the Little, so would take them. Bigs have no capacity limit,
        so that is enough to block.
        """
        table = self.problem.table
        for little, current in self._gen_little_big_pairs():
            row = table.row(Kind.LITTLE, little)
            for big in row:
                if big == current:
                    break  # everything after this is worse
                if table.accepts(Kind.BIG, big, little):
                    yield little, big

    def deviation_from_stability(self) -> int:
        """
        Number of blocking pairs; 0 means stable.
        """
        return sum(1 for _ in self.gen_blocking_pairs())

    def stability(
        self, describe_all_failures: bool = True
    ) -> Tuple[bool, str]:
        """
        Is the solution stable, and if not, why not?

        Evening out deliberately moves Littles away from Bigs who would have
        them, so an even matching is usually not stable. This is reported for
        information only.

        Returns:
            tuple: (stable, reason_for_instability)
        """
        reasons = []  # type: List[str]
        for little, big in self.gen_blocking_pairs():
            current = self.matched_big(little)
            currently = (
                f"their current Big, {self.big_name(current)}"
                if current is not None
                else "being unmatched"
            )
            reasons.append(
                f"Little {self.little_name(little)} would rather have Big "
                f"{self.big_name(big)} than {currently}, and "
                f"{self.big_name(big)} listed them."
            )
            if not describe_all_failures:
                break
        if not reasons:
            return True, "[Stable]"
        return False, "\n".join(reasons)

    def is_stable(self) -> bool:
        """
        Is the solution a stable match?
        """
        return self.stability(describe_all_failures=False)[0]

    # -------------------------------------------------------------------------
    # Saving
    # -------------------------------------------------------------------------

    def write_xlsx(self, filename: str) -> None:
        """
        Writes the solution to an Excel XLSX file (and the preferences, for
        data safety).

        Args:
            filename:
                Name of file to write.
        """
        log.info(f"Writing output to: {filename}")
        problem = self.problem
        names = problem.names
        table = problem.table
        ms = self.matching_set

        wb = Workbook()
        wb.remove(wb.worksheets[0])

        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Matches, by Big
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        ws = wb.create_sheet(SheetNames.MATCHES)
        ws.append(
            [
                SheetHeadings.BIG,
                SheetHeadings.N_LITTLES,
                SheetHeadings.LITTLES,
                "Big's rank(s) of matched Little(s)",
                "Littles' rank(s) of this Big",
            ]
        )
        for m in ms.matches:
            ws.append(
                [
                    self.big_name(m.big),
                    len(m),
                    ", ".join(self.little_name(x) for x in m.littles),
                    ", ".join(
                        str(table.rank(Kind.BIG, m.big, x).value)
                        for x in m.littles
                    ),
                    ", ".join(
                        str(table.rank(Kind.LITTLE, x, m.big).value)
                        for x in m.littles
                    ),
                ]
            )
        autosize_openpyxl_worksheet_columns(ws)
        bold_first_row(ws)

        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Allocations, by Little
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        ls = wb.create_sheet(SheetNames.LITTLE_ALLOCATIONS)
        ls.append(
            [
                SheetHeadings.LITTLE,
                SheetHeadings.BIG,
                SheetHeadings.LITTLE_RANK_OF_BIG,
                SheetHeadings.BIG_RANK_OF_LITTLE,
            ]
        )
        for little, big in self._gen_little_big_pairs():
            if big is None:
                ls.append([self.little_name(little), None, None, None])
            else:
                ls.append(
                    [
                        self.little_name(little),
                        self.big_name(big),
                        table.rank(Kind.LITTLE, little, big).value,
                        table.rank(Kind.BIG, big, little).value,
                    ]
                )
        autosize_openpyxl_worksheet_columns(ls)
        bold_first_row(ls)

        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Unmatched people
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        us = wb.create_sheet(SheetNames.UNMATCHED)
        us.append([SheetHeadings.KIND, SheetHeadings.NAME])
        for big in ms.unmatched_bigs:
            us.append([str(Kind.BIG), self.big_name(big)])
        for little in ms.unmatched_littles:
            us.append([str(Kind.LITTLE), self.little_name(little)])
        autosize_openpyxl_worksheet_columns(us)
        bold_first_row(us)

        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Popularity of Bigs
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        pp = wb.create_sheet(SheetNames.BIG_POPULARITY)
        pp.append(BigPopularity.headings())
        popularities = [
            BigPopularity(BigIndex(i), self) for i in range(problem.n_bigs())
        ]
        BigPopularity.sort_and_assign_ranks(popularities)
        for bigpop in popularities:
            pp.append(bigpop.values())
        autosize_openpyxl_column(pp, 0)
        autosize_openpyxl_column(pp, 4)  # the matched Littles column
        bold_first_row(pp)

        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Software, settings, and summary information
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        zs = wb.create_sheet(SheetNames.INFORMATION)
        is_stable, instability_reason = self.stability()
        zs_rows = [
            ["SOFTWARE DETAILS"],
            [],
            ["Software", "biglittle"],
            ["Version", VERSION],
            ["Version date", VERSION_DATE],
            [],
            ["RUN INFORMATION"],
            [],
            ["Date/time", datetime.datetime.now()],
            ["Command-line parameters", cmdline_quote(sys.argv)],
            ["Config", str(problem.config)],
            [],
            ["SUMMARY STATISTICS"],
            [],
            ["Number of Bigs", problem.n_bigs()],
            ["Number of Littles", problem.n_littles()],
            ["Number of Bigs matched", ms.n_matched_bigs()],
            ["Number of Littles matched", ms.n_matched_littles()],
            ["Littles per Big, maximum", max(self.match_sizes(), default=0)],
            ["Littles per Big, minimum", min(self.match_sizes(), default=0)],
            ["Little's rank of their Big, mean", self.little_rank_mean()],
            ["Little's rank of their Big, median", self.little_rank_median()],
            ["Little's rank of their Big, maximum", self.little_rank_max()],
            ["Big's rank of their Little, mean", self.big_rank_mean()],
            ["Big's rank of their Little, median", self.big_rank_median()],
            ["Big's rank of their Little, maximum", self.big_rank_max()],
            [],
            ["Stable?", str(is_stable)],
            ["Number of blocking pairs", self.deviation_from_stability()],
            ["If unstable, reason:", instability_reason],
        ]
        for row in zs_rows:
            zs.append(row)
        autosize_openpyxl_column(zs, 0)
        zs.column_dimensions["B"].width = 20
        bold_first_row(zs)
        bold_cell(zs["A7"])
        bold_cell(zs["A13"])

        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Problem definition
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        for kind, sheetname in (
            (Kind.BIG, SheetNames.BIG_PREFERENCES),
            (Kind.LITTLE, SheetNames.LITTLE_PREFERENCES),
        ):
            ps = wb.create_sheet(sheetname)
            ps.append([SheetHeadings.NAME, SheetHeadings.PREFERENCES])
            for name in names.names(kind):
                index = names.get_index(kind, name)
                ps.append(
                    [name]
                    + [
                        names.name(kind.opposite, other) or f"?{other.value}"
                        for other in table.row(kind, index)
                    ]
                )
            autosize_openpyxl_column(ps, 0)
            bold_first_row(ps)

        wb.save(filename)
        wb.close()

    def write_csv(self, filename: str) -> None:
        """
        Writes just the "per Little" mapping to a CSV file, for comparisons
        (e.g. via ``meld``).
        """
        log.info(f"Writing Little allocation data to: {filename}")
        table = self.problem.table
        with open(filename, "w", newline="") as file:
            writer = csv.writer(file)
            writer.writerow(
                [
                    CsvHeadings.LITTLE_NUMBER,
                    CsvHeadings.LITTLE_NAME,
                    CsvHeadings.BIG_NUMBER,
                    CsvHeadings.BIG_NAME,
                    CsvHeadings.LITTLE_RANK_OF_BIG,
                ]
            )
            for little, big in self._gen_little_big_pairs():
                if big is None:
                    writer.writerow(
                        [little.value + 1, self.little_name(little)]
                        + ["", "", ""]
                    )
                    continue
                writer.writerow(
                    [
                        little.value + 1,
                        self.little_name(little),
                        big.value + 1,
                        self.big_name(big),
                        table.rank(Kind.LITTLE, little, big).value,
                    ]
                )

    def write_data(self, filename: str) -> None:
        """
        Autodetects the file type from the extension and writes data to that
        file.
        """
        _, ext = os.path.splitext(filename)
        if ext == EXT_XLSX:
            self.write_xlsx(filename)
        elif ext == EXT_CSV:
            self.write_csv(filename)
        else:
            raise ValueError(
                f"Don't know how to write file type {ext!r} for {filename!r}"
            )
