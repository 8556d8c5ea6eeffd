"""
Interactive console menu for the inspection analyser.
Reads a data file name, loads it once, then answers queries until the user exits.
"""

import argparse
import sys
from typing import Optional, TextIO

from .logger import setup_logger
from .report import (
    render_neighborhood_summary,
    render_overall_summary,
    render_risk_distribution,
    render_search_results,
)
from .services import InspectionService

logger = setup_logger(__name__)

MENU = """
Select a menu option:
   1. Display overall inspection information
   2. Display risk percentages
   3. Display passing numbers by neighborhood
   4. Search for restaurant by name
   5. Exit
Your choice: """

EXIT_CHOICE = 5
INVALID_CHOICE = "Invalid choice. Please select a valid option."


def _write_lines(stdout: TextIO, lines) -> None:
    for line in lines:
        stdout.write(f"{line}\n")


def _read_line(stdin: TextIO) -> Optional[str]:
    """Read one line without its terminator; None at end of input."""
    line = stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def _parse_choice(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


def prompt_for_filename(stdin: TextIO, stdout: TextIO) -> Optional[str]:
    """Ask for the data file; returns the first token typed, or None at end of input."""
    stdout.write("Enter the data file to use: ")
    stdout.flush()
    line = _read_line(stdin)
    if line is None:
        return None
    tokens = line.split()
    return tokens[0] if tokens else ""


def run_menu(service: InspectionService, stdin: TextIO, stdout: TextIO) -> None:
    """
    Menu loop. Dispatches each choice to the service and prints the report.

    Returns when the user picks Exit or the input runs out.
    """
    while True:
        stdout.write(MENU)
        stdout.flush()
        line = _read_line(stdin)
        if line is None:
            logger.info("End of input, leaving menu")
            return
        stdout.write("\n")

        choice = _parse_choice(line)
        if choice == 1:
            _write_lines(stdout, render_overall_summary(service.overall_summary()))
        elif choice == 2:
            _write_lines(stdout, render_risk_distribution(service.risk_distribution()))
        elif choice == 3:
            _write_lines(stdout, render_neighborhood_summary(service.neighborhood_summary()))
        elif choice == 4:
            stdout.write("Enter restaurant to search for: ")
            stdout.flush()
            term = _read_line(stdin)
            if term is None:
                return
            _write_lines(stdout, render_search_results(service.search(term)))
        elif choice == EXIT_CHOICE:
            stdout.write("Exiting the program\n")
            return
        else:
            stdout.write(f"{INVALID_CHOICE}\n")


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Explore restaurant inspection results")
    parser.add_argument("datafile", nargs="?", help="Path to the inspection data file (prompted for if omitted)")
    return parser.parse_args(argv)


def main(
    argv: Optional[list[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    datafile = args.datafile
    if datafile is None:
        datafile = prompt_for_filename(stdin, stdout)
        if datafile is None:
            return 0

    service = InspectionService.from_file(datafile)
    run_menu(service, stdin, stdout)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
