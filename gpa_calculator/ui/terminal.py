"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the gpa_calculator package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..models import AggregateResult, SemesterSummary


class TerminalDisplay:
    """
    Pretty terminal output for GPA results.

    Everything rendered here comes from an AggregateResult; the display
    never recomputes grades or totals, except the per-semester GPA which
    is a direct ratio of the semester's own totals.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def letter_color(cls, letter: str) -> str:
        if letter in ("F", "N/A"):
            return cls.RED
        if letter.startswith(("D", "C")):
            return cls.YELLOW
        return cls.GREEN

    @classmethod
    def print_results(cls, result: AggregateResult, semester: str = "all"):
        """
        Print the cumulative summary and the semester tables.

        Args:
            result: Output of the aggregator
            semester: "all" for every semester, or one semester id. An id
                that is not in the result prints the summary only.
        """
        cls.print_header("RESULTS")
        print(f"\n  {cls.BOLD}Cumulative GPA:{cls.RESET} {result.gpa:.2f}")
        print(f"  {cls.BOLD}Completed Credit Hours:{cls.RESET} "
              f"{cls._hours(result.completed_hours)} / {cls._hours(result.total_hours)}")

        if semester == "all":
            for _, summary in result.semesters:
                cls.print_semester(summary)
        else:
            summary = result.semester(semester)
            if summary is not None:
                cls.print_semester(summary)

    @classmethod
    def print_semester(cls, summary: SemesterSummary):
        """Print one semester's course table and, when it has any, its GPA."""
        cls.print_subheader(summary.name)
        print(f"\n  {cls.BOLD}{'COURSE NAME':<36} {'CODE':<10} {'HOURS':>5}  {'DEGREE':<8} {'LETTER'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 68}{cls.RESET}")
        for row in summary.courses:
            degree = "" if row.raw_score is None else str(row.raw_score)
            color = cls.letter_color(row.letter)
            print(f"  {row.name[:36]:<36} {row.code:<10} {cls._hours(row.hours):>5}  "
                  f"{degree:<8} {color}{row.letter}{cls.RESET}")
        if summary.total_hours > 0:
            print(f"\n  {cls.BOLD}Semester GPA:{cls.RESET} {summary.gpa:.2f}")

    @classmethod
    def print_semester_options(cls, options: list):
        """Print the semester choices offered for filtering."""
        print(f"\n{cls.BOLD}Semesters:{cls.RESET}")
        for semester_id, name in options:
            print(f"  {cls.CYAN}{semester_id:<10}{cls.RESET} {name}")

    @classmethod
    def print_error(cls, message: str):
        """The single user-facing error state; no partial results follow."""
        print(f"{cls.RED}{cls.BOLD}Error:{cls.RESET} {cls.RED}{message}{cls.RESET}")

    @staticmethod
    def _hours(value) -> str:
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return str(value)
