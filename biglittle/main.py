#!/usr/bin/env python

"""
biglittle/main.py

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

Command-line entry point.

"""

import argparse
import logging
import sys
import traceback
from typing import List

from cardinal_pythonlib.argparse_func import (
    RawDescriptionArgumentDefaultsHelpFormatter,
)
from cardinal_pythonlib.enumlike import keys_descriptions_from_enum
from cardinal_pythonlib.logs import main_only_quicksetup_rootlogger
from cardinal_pythonlib.cmdline import cmdline_quote

from biglittle.config import Config
from biglittle.constants import (
    DEFAULT_METHOD,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    INPUT_TYPES_SUPPORTED,
    MatchingMethod,
    NAME_HEADING,
    OUTPUT_TYPES_SUPPORTED,
)
from biglittle.problem import Problem

log = logging.getLogger(__name__)


# =============================================================================
# main
# =============================================================================


def main(argv: List[str] = None) -> None:
    """
    Command-line entry point.
    """
    # noinspection PyTypeChecker
    parser = argparse.ArgumentParser(
        formatter_class=RawDescriptionArgumentDefaultsHelpFormatter,
        description=f"""
Match Littles to Bigs, using each side's ranked preferences.

There are two input files, one for Bigs and one for Littles, in the same
format. The first row is the title row, and must contain a {NAME_HEADING!r}
column. Columns to the left of it are ignored. Each subsequent row gives one
person's name, then the people on the other side that they would accept, best
first. Blank cells are skipped.

    Format:
        <ignored>   {NAME_HEADING}        <ignored>   <ignored>   ...
        ...         Alice       Xavier      Yolanda     ...
        ...         Bob         Yolanda                 ...
        ...         ...         ...         ...         ...

A Big accepts a Little if the Little appears anywhere in the Big's list.
Each Little goes to the first Big in their own list who accepts them. With
the "even" method, Littles are then moved from the largest groups to Bigs
further down their lists, to spread Littles across Bigs.

""",  # noqa
    )
    parser.add_argument("--verbose", action="store_true", help="Be verbose")

    file_group = parser.add_argument_group("Files")
    file_group.add_argument(
        "big_input",
        type=str,
        help="Filename of Bigs and their preferences. "
        "Input file types supported: " + str(INPUT_TYPES_SUPPORTED),
    )
    file_group.add_argument(
        "little_input",
        type=str,
        help="Filename of Littles and their preferences. "
        "Input file types supported: " + str(INPUT_TYPES_SUPPORTED),
    )
    file_group.add_argument(
        "--output",
        type=str,
        help="Optional filename to write output to. "
        "Output types supported: " + str(OUTPUT_TYPES_SUPPORTED),
    )
    file_group.add_argument(
        "--output_little_csv",
        type=str,
        help="Optional filename to write per-Little CSV output to.",
    )

    method_group = parser.add_argument_group("Method")
    method_k, method_desc = keys_descriptions_from_enum(
        MatchingMethod, keys_to_lower=True
    )
    method_group.add_argument(
        "--method",
        type=str,
        choices=method_k,
        default=DEFAULT_METHOD.name.lower(),
        help=f"Method of matching. -- {method_desc} --",
    )

    args = parser.parse_args(argv)
    main_only_quicksetup_rootlogger(
        level=logging.DEBUG if args.verbose else logging.INFO
    )

    # Go
    config = Config(
        big_filename=args.big_input,
        little_filename=args.little_input,
        cmd_args=vars(args),
        method=MatchingMethod[args.method],
    )
    log.info(f"Command: {cmdline_quote(sys.argv)}")
    log.info(f"Config: {config}")
    problem = Problem.read_data(config)
    log.debug(problem)
    solution = problem.best_solution()
    log.info(solution)
    if args.output:
        solution.write_data(args.output)
    else:
        log.warning("Output not saved. Specify the --output option for that.")
    if args.output_little_csv:
        solution.write_csv(args.output_little_csv)
    sys.exit(EXIT_SUCCESS)


if __name__ == "__main__":
    try:
        main()
    except Exception as _top_level_exception:
        log.critical(str(_top_level_exception))
        log.critical(traceback.format_exc())
        sys.exit(EXIT_FAILURE)
