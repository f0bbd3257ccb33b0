#!/usr/bin/env python

"""
biglittle/run_tests.py

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

Run the command-line tool over the bundled test data.
"""

import logging
import os
import sys
import subprocess
from typing import List

from cardinal_pythonlib.cmdline import cmdline_quote
from cardinal_pythonlib.logs import main_only_quicksetup_rootlogger

log = logging.getLogger(__name__)

EXEC = sys.executable
THISDIR = os.path.dirname(os.path.realpath(__file__))
INPUTDIR = os.path.join(THISDIR, "testdata")
OUTPUTDIR = os.path.join(os.getcwd(), "testoutput")


# =============================================================================
# Tests
# =============================================================================


def process(
    big_infile: str,
    little_infile: str,
    outfile: str,
    other_options: List[str] = None,
) -> None:
    cmdargs = [
        EXEC,
        "-m",
        "biglittle.main",
        os.path.join(INPUTDIR, big_infile),
        os.path.join(INPUTDIR, little_infile),
        "--output",
        os.path.join(OUTPUTDIR, outfile),
        "--verbose",
    ]
    if other_options:
        cmdargs += other_options
    log.warning(cmdline_quote(cmdargs))
    subprocess.check_call(cmdargs)


# =============================================================================
# Command-line entry point
# =============================================================================


def main() -> None:
    main_only_quicksetup_rootlogger()
    os.makedirs(OUTPUTDIR, exist_ok=True)
    process("test1_bigs.csv", "test1_littles.csv", "test_out1_even.xlsx")
    process(
        "test1_bigs.csv",
        "test1_littles.csv",
        "test_out1_maximal.xlsx",
        ["--method", "maximal"],
    )
    process(
        "test2_unreciprocated_bigs.csv",
        "test2_unreciprocated_littles.csv",
        "test_out2.csv",
    )


if __name__ == "__main__":
    main()
