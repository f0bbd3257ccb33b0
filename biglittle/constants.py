#!/usr/bin/env python

"""
biglittle/constants.py

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

Constants and enums.

"""

from enum import Enum

from cardinal_pythonlib.enumlike import CaseInsensitiveEnumMeta


# =============================================================================
# Constants
# =============================================================================

EXT_CSV = ".csv"
EXT_XLSX = ".xlsx"
EXIT_FAILURE = 1
EXIT_SUCCESS = 0

INPUT_TYPES_SUPPORTED = [EXT_CSV, EXT_XLSX]
OUTPUT_TYPES_SUPPORTED = INPUT_TYPES_SUPPORTED

NAME_HEADING = "Name"  # input column holding each person's name
MISSING_VALUES = ["", None]


class SheetNames:
    """
    Sheet names within the output spreadsheet file.
    """

    BIG_POPULARITY = "Big_popularity"
    BIG_PREFERENCES = "Big_preferences"
    INFORMATION = "Information"
    LITTLE_ALLOCATIONS = "Little_allocations"
    LITTLE_PREFERENCES = "Little_preferences"
    MATCHES = "Matches"
    UNMATCHED = "Unmatched"


class SheetHeadings:
    """
    Column headings within the output spreadsheet.
    """

    BIG = "Big"
    BIG_RANK_OF_LITTLE = "Big_rank_of_little"
    KIND = "Kind"
    LITTLE = "Little"
    LITTLE_RANK_OF_BIG = "Little_rank_of_big"
    LITTLES = "Little(s)"
    N_LITTLES = "N_littles"
    NAME = NAME_HEADING
    PREFERENCES = "Preferences (best first)"


class CsvHeadings:
    """
    Equivalently for simple CSV output.
    """

    BIG_NAME = "Big_name"
    BIG_NUMBER = "Big_number"
    LITTLE_NAME = "Little_name"
    LITTLE_NUMBER = "Little_number"
    LITTLE_RANK_OF_BIG = "Little_rank_of_big"


# =============================================================================
# Enum classes
# =============================================================================


class MatchingMethod(Enum, metaclass=CaseInsensitiveEnumMeta):
    """
    Ways to match Littles to Bigs.
    """

    MAXIMAL = (
        "Greedy: each Little gets the first Big on their list who listed "
        "them back; Bigs may get any number of Littles"
    )
    EVEN = (
        "Greedy, then even out by moving the least-preferred Little from the "
        "largest match down their own list, until every Big has a Little or "
        "all matches are the same size"
    )


DEFAULT_METHOD = MatchingMethod.EVEN
