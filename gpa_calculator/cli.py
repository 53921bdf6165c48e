"""
Command-Line Interface for the GPA Calculator.

Grades a student response file against a branch's curriculum and prints
the semester tables, or the raw result as JSON.

Run from the project root:
    python3 -m gpa_calculator data/example_transcript.json --branch General
"""

import argparse
import json
import logging
import sys

from . import __version__
from .calculator import GPACalculator
from .config import DEFAULT_TRANSCRIPT_PATH, LOG_FORMAT, resolve_log_level
from .data import DataLoader
from .exceptions import GPACalculatorError
from .models import Branch
from .ui import TerminalDisplay


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gpa-calculator",
        description="Calculate cumulative GPA and completed credit hours from a transcript.",
    )
    parser.add_argument("transcript", nargs="?", default=str(DEFAULT_TRANSCRIPT_PATH),
                        help="Student response JSON file (default: %(default)s)")
    parser.add_argument("-b", "--branch", choices=[b.value for b in Branch],
                        help="Academic branch; prompted for when omitted")
    parser.add_argument("-s", "--semester", default="all",
                        help="Show only this semester id (default: all)")
    parser.add_argument("-c", "--curriculum", dest="curriculum",
                        help="Curriculums file path or http(s) URL")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON.")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="More logging (-v info, -vv debug).")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _prompt_branch() -> Branch:
    """Ask for a branch interactively; anything unreadable means General."""
    print(f"\n{TerminalDisplay.BOLD}Select branch:{TerminalDisplay.RESET}")
    branches = list(Branch)
    for i, branch in enumerate(branches, 1):
        print(f"  {i}. {branch.value}")
    try:
        choice = input(f"\n  Enter number (1-{len(branches)}): ").strip()
        return branches[int(choice) - 1]
    except (ValueError, IndexError, EOFError):
        print(f"  → Using default: {Branch.GENERAL.value}")
        return Branch.GENERAL


def main(argv=None) -> int:
    """
    Entry point for `gpa-calculator` and `python -m gpa_calculator`.

    Returns the process exit status: 0 on success, 1 when the transcript or
    curriculum could not be used. On failure only the error is printed.
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=resolve_log_level(args.verbose), format=LOG_FORMAT)

    branch = Branch.parse(args.branch) if args.branch else _prompt_branch()
    calculator = GPACalculator(loader=DataLoader(args.curriculum))

    try:
        if args.json:
            entries = calculator.loader.load_transcript(args.transcript)
            result = calculator.calculate(entries, branch)
            print(json.dumps(result.to_dict(), indent=2))
        else:
            result = calculator.run_report(args.transcript, branch, args.semester)
            if args.semester == "all" and len(result.semesters) > 1:
                TerminalDisplay.print_semester_options(calculator.semester_options(result)[1:])
    except GPACalculatorError as e:
        TerminalDisplay.print_error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
