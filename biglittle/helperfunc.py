#!/usr/bin/env python

"""
biglittle/helperfunc.py

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

Helper functions.

"""

import csv
import logging
from typing import Any, List, Sequence

from openpyxl.cell import Cell
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from biglittle.constants import MISSING_VALUES

log = logging.getLogger(__name__)


# =============================================================================
# Reading
# =============================================================================


def cell_text(value: Any) -> str:
    """
    A spreadsheet/CSV cell value as stripped text; blank for missing values.
    """
    if value in MISSING_VALUES:
        return ""
    return str(value).strip()


def is_empty_row(row: Sequence[Any]) -> bool:
    """
    Is this an empty row (of cell values)?
    """
    return all(not cell_text(value) for value in row)


def read_until_empty_row(ws: Worksheet) -> List[List[Any]]:
    """
    Reads a spreadsheet until the first empty line.
    (Helpful because Excel spreadsheets are sometimes seen as having 1048576
    rows when they don't really).
    """
    rows = []  # type: List[List[Any]]
    for row in ws.iter_rows(values_only=True):
        if is_empty_row(row):
            break
        rows.append(list(row))
    return rows


def read_csv_rows(filename: str) -> List[List[str]]:
    """
    Reads all non-empty rows of a CSV file. Copes with a UTF-8 byte-order
    mark, as written by Excel.
    """
    rows = []  # type: List[List[str]]
    with open(filename, newline="", encoding="utf-8-sig") as f:
        for row in csv.reader(f):
            if is_empty_row(row):
                continue
            rows.append(row)
    return rows


# =============================================================================
# Writing
# =============================================================================


def bold_cell(cell: Cell) -> None:
    cell.font = Font(bold=True)


def bold_first_row(ws: Worksheet) -> None:
    """
    Makes the title row of a worksheet bold.
    """
    for cell in ws[1]:
        bold_cell(cell)


def autosize_openpyxl_column(ws: Worksheet, col_number: int) -> None:
    """
    Automatically resize a single column to its contents. See below.
    """
    col_width = 0
    for row in ws.rows:
        if col_number >= len(row):
            continue
        cell = row[col_number]
        if cell.value:
            text = str(cell.value)
            text_width = len(text)
            col_width = max(col_width, text_width)
    ws.column_dimensions[get_column_letter(col_number + 1)].width = col_width


def autosize_openpyxl_worksheet_columns(ws: Worksheet) -> None:
    """
    Automatically resize column sizes to their contents. See

    - https://stackoverflow.com/questions/13197574/openpyxl-adjust-column-width-size
    """  # noqa

    # Overestimates size. Better would be to ask for actual size with current
    # font.
    dims = {}
    for row in ws.rows:
        for cell in row:
            if cell.value:
                text = str(cell.value)
                text_width = len(text)  # the poor approximation
                dims[cell.column_letter] = max(
                    dims.get(cell.column_letter, 0), text_width
                )
    for col, value in dims.items():
        ws.column_dimensions[col].width = value
