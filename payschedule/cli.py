"""
Command line entry point.

Usage::

    payschedule [-year=<year>] [-file=<path>] [-v]
    payschedule -h
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_OUTPUT, YEAR_WINDOW, ScheduleConfig
from .exceptions import PayrollScheduleError
from .schedule import ScheduleGenerator

logger = logging.getLogger(__name__)

RED = "\033[31m"
RESET = "\033[0m"

DESCRIPTION = """\
Generates payroll data and stores it in a CSV file.

Salaries are paid on the last day of the month, or the Friday before when
that day is a weekend. Bonuses are paid on the 15th, or the first Wednesday
after the 15th when that day is a weekend."""

EPILOG = f"""\
Examples:

1. Default behaviour:
   payschedule

2. Specify a year, different from the default (current) one:
   payschedule -year=2012

3. Specify file name (or path and name), different from the default one:
   payschedule -file=payroll-2012.csv
   payschedule -file=/docs/accounting/payroll-2012.csv

4. Specify both year and file name:
   payschedule -year=2012 -file=/docs/accounting/payroll-2012.csv

The year must be within {YEAR_WINDOW} years of the current one. An existing
output file is overwritten."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="payschedule",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h", "-help", "--help", action="help", help="print this screen"
    )
    parser.add_argument(
        "-year",
        "--year",
        type=int,
        default=None,
        help="year for which the payroll is generated. Defaults to the current year.",
    )
    parser.add_argument(
        "-file",
        "--file",
        dest="file",
        default=None,
        help=(
            "file name (payroll.csv) or path and file name "
            "(/data/files/payroll.csv) to store the results to. The destination "
            f"folder must be writable. Defaults to {DEFAULT_OUTPUT}"
        ),
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log every computed payment date"
    )
    return parser


def print_error(message: str) -> None:
    sys.stderr.write(f"{RED}{message}{RESET}\n")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ScheduleConfig.from_values(year=args.year, output_path=args.file)
        ScheduleGenerator(config.year).generate().save(config.output_path)
    except (PayrollScheduleError, ValueError, OSError) as exc:
        logger.debug("Payroll run failed", exc_info=True)
        print_error(str(exc))
        return 1

    logger.info("Payroll schedule for %s saved to %s", config.year, config.output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
