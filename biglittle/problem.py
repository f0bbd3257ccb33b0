#!/usr/bin/env python

"""
biglittle/problem.py

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

Problem class: the names and preferences of the Bigs and Littles, read from
file, plus the entry point to solve it.

"""

from collections import OrderedDict
import logging
import os
from typing import Any, Dict, List, Sequence

from cardinal_pythonlib.reprfunc import auto_repr
from openpyxl.reader.excel import load_workbook

from biglittle.config import Config
from biglittle.constants import (
    EXT_CSV,
    EXT_XLSX,
    MatchingMethod,
    NAME_HEADING,
)
from biglittle.engine import Matcher
from biglittle.helperfunc import (
    cell_text,
    read_csv_rows,
    read_until_empty_row,
)
from biglittle.kind import Kind
from biglittle.matching import MatchingSet
from biglittle.names import Names, NameNotFoundError
from biglittle.preferences import PreferenceTable
from biglittle.solution import Solution

log = logging.getLogger(__name__)


# =============================================================================
# Reading preference files
# =============================================================================


def rows_to_preferences(
    rows: Sequence[Sequence[Any]], source: str = "?"
) -> Dict[str, List[str]]:
    """
    Converts raw rows (the first being the title row) to a mapping from
    each person's name to their preferences, best first.

    The title row must contain a ``Name`` column. Columns to its left are
    ignored (e.g. timestamps from a survey export); the cells to its right are
    the preferences, with blanks skipped.

    Args:
        rows:
            The rows, as cell values.
        source:
            Where they came from (for error messages).

    Raises:
        :exc:`ValueError` if the data are bad.
    """
    if not rows:
        raise ValueError(f"No data in {source!r}")
    headings = [cell_text(x) for x in rows[0]]
    try:
        name_col = headings.index(NAME_HEADING)
    except ValueError:
        raise ValueError(
            f"Missing {NAME_HEADING!r} heading in {source!r}; "
            f"headings were {headings!r}"
        )
    preferences = OrderedDict()  # type: Dict[str, List[str]]
    for row_number, row in enumerate(rows[1:], start=2):
        cells = [cell_text(x) for x in row[name_col:]]
        if not cells or not cells[0]:
            raise ValueError(
                f"Missing name in {source!r} row {row_number}"
            )
        name = cells[0]
        if name in preferences:
            raise ValueError(
                f"Duplicate name in {source!r} row {row_number}: {name!r}"
            )
        preferences[name] = [x for x in cells[1:] if x]
    return preferences


def read_preferences(filename: str) -> Dict[str, List[str]]:
    """
    Reads a preference file, autodetecting its format; see
    :func:`rows_to_preferences`. For spreadsheets, the first sheet is used.
    """
    _, ext = os.path.splitext(filename)
    if ext == EXT_CSV:
        log.info(f"Reading CSV file: {filename}")
        rows = read_csv_rows(filename)
    elif ext == EXT_XLSX:
        log.info(f"Reading XLSX file: {filename}")
        wb = load_workbook(
            filename,
            read_only=True,
            keep_vba=False,
            data_only=True,
            keep_links=False,
        )
        try:
            rows = read_until_empty_row(wb.worksheets[0])
        finally:
            wb.close()
    else:
        raise ValueError(
            f"Don't know how to read file type {ext!r} for {filename!r}"
        )
    return rows_to_preferences(rows, source=filename)


# =============================================================================
# Problem
# =============================================================================


class Problem(object):
    """
    Represents the problem (and solves it): who the Bigs and Littles are, and
    what each thinks of the other side.
    """

    def __init__(
        self,
        names: Names,
        table: PreferenceTable,
        config: Config = None,
    ) -> None:
        """
        Args:
            names:
                Registry of names.
            table:
                Preferences, with one row per registered name of each kind.
            config:
                Master config object.
        """
        for kind in (Kind.BIG, Kind.LITTLE):
            assert names.count(kind) == table.count(kind), (
                f"{names.count(kind)} {kind} names but "
                f"{table.count(kind)} preference rows"
            )
        self.names = names
        self.table = table
        self.config = config

    # -------------------------------------------------------------------------
    # Representations
    # -------------------------------------------------------------------------

    def __repr__(self) -> str:
        return auto_repr(self)

    def __str__(self) -> str:
        parts = ["Problem:"]
        for kind in (Kind.BIG, Kind.LITTLE):
            parts.append("")
            parts.append(f"- {kind}s:")
            parts.append("")
            for name in self.names.names(kind):
                parts.append(self.description(kind, name))
        return "\n".join(parts) + "\n"

    def description(self, kind: Kind, name: str) -> str:
        """
        One person and their preferences.
        """
        index = self.names.get_index(kind, name)
        prefs = ", ".join(
            self.names.name(kind.opposite, other) or f"?{other.value}"
            for other in self.table.row(kind, index)
        )
        return f"{name} ({kind}#{index.value + 1}): {prefs}"

    # -------------------------------------------------------------------------
    # Information
    # -------------------------------------------------------------------------

    def n_bigs(self) -> int:
        return self.names.count(Kind.BIG)

    def n_littles(self) -> int:
        return self.names.count(Kind.LITTLE)

    # -------------------------------------------------------------------------
    # Build/read data
    # -------------------------------------------------------------------------

    @classmethod
    def from_preferences(
        cls,
        big_preferences: Dict[str, List[str]],
        little_preferences: Dict[str, List[str]],
        config: Config = None,
    ) -> "Problem":
        """
        Builds a :class:`Problem` from name-based preferences.

        Args:
            big_preferences:
                Map from each Big's name to the names of Littles they want,
                best first.
            little_preferences:
                Map from each Little's name to the names of Bigs they want,
                best first.
            config:
                Master config object.

        Raises:
            :exc:`ValueError` if a name is both a Big and a Little, or if
            someone asks for a person who doesn't exist.
        """
        names = Names()
        for name in big_preferences.keys():
            names.insert(Kind.BIG, name)
        for name in little_preferences.keys():
            names.insert(Kind.LITTLE, name)  # may raise CrossKindNameError
        table = PreferenceTable()
        for kind, prefs in (
            (Kind.BIG, big_preferences),
            (Kind.LITTLE, little_preferences),
        ):
            for owner, wanted in prefs.items():
                try:
                    row = [names.get_index(kind.opposite, w) for w in wanted]
                except NameNotFoundError as e:
                    raise ValueError(
                        f"Preferences of {kind} {owner!r}: {e}"
                    )
                table.insert(kind, row)
        log.info(
            f"Number of Bigs: {names.count(Kind.BIG)}; "
            f"number of Littles: {names.count(Kind.LITTLE)}"
        )
        return cls(names=names, table=table, config=config)

    @classmethod
    def read_data(cls, config: Config) -> "Problem":
        """
        Reads the Big and Little files named in ``config``, autodetecting
        their format, and returns the :class:`Problem`.
        """
        log.info("... reading Bigs...")
        bigs = read_preferences(config.big_filename)
        log.info("... reading Littles...")
        littles = read_preferences(config.little_filename)
        return cls.from_preferences(bigs, littles, config=config)

    # -------------------------------------------------------------------------
    # Solver entry point
    # -------------------------------------------------------------------------

    def matching(self, method: MatchingMethod = None) -> MatchingSet:
        """
        Runs the matching algorithm and returns the raw result.
        """
        if method is None:
            method = (
                self.config.method if self.config else MatchingMethod.EVEN
            )
        matcher = Matcher(self.table)
        if method == MatchingMethod.MAXIMAL:
            return matcher.maximal()
        elif method == MatchingMethod.EVEN:
            return matcher.even()
        else:
            raise AssertionError(f"Unknown matching method: {method!r}")

    def best_solution(self, method: MatchingMethod = None) -> Solution:
        """
        Return the solution. (Every input has one, although possibly with
        everybody unmatched.)
        """
        return Solution(problem=self, matching_set=self.matching(method))
