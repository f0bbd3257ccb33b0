#!/usr/bin/env python

"""
biglittle/config.py

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

Master config class.

"""

from typing import Any, Dict

from cardinal_pythonlib.reprfunc import auto_repr

from biglittle.constants import DEFAULT_METHOD, MatchingMethod


# =============================================================================
# Master config
# =============================================================================


class Config(object):
    """
    Master config object.
    """

    def __init__(
        self,
        big_filename: str,
        little_filename: str,
        cmd_args: Dict[str, Any] = None,
        method: MatchingMethod = DEFAULT_METHOD,
    ) -> None:
        """
        Args:
            big_filename:
                File of Bigs and their preferences for Littles.
            little_filename:
                File of Littles and their preferences for Bigs.
            cmd_args:
                Copy of command-line arguments
            method:
                How to match.
        """
        self.big_filename = big_filename
        self.little_filename = little_filename
        self.method = method

        self.cmd_args = cmd_args

    def __repr__(self) -> str:
        return auto_repr(self)

    def __str__(self) -> str:
        if self.cmd_args is not None:
            return str(self.cmd_args)
        return str(
            dict(
                big_filename=self.big_filename,
                little_filename=self.little_filename,
                method=self.method.name,
            )
        )
