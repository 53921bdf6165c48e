"""
Transcript and result data models.

Contains the TranscriptEntry input record and the SemesterSummary /
AggregateResult structures returned by the aggregator. These are the
"contract" between the grading engines and any presentation layer.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, List, Optional, Tuple, Union


@dataclass(frozen=True)
class TranscriptEntry:
    """
    One course attempt as reported by the student information system.

    Attributes:
        crscode: Composite code, "CODE|suffix" (e.g., "CSE221|2023A")
        degree: Raw score, usually a string; may be blank or non-numeric
        yearsem: Semester key used for bucketing and ordering (e.g., "20231")
        semester_course: Composite semester label, "key|Display Name"
        grade_n: Pass/fail indicator, only meaningful for UNI- courses
    """
    crscode: Optional[str] = None
    degree: Any = None
    yearsem: Optional[str] = None
    semester_course: Optional[str] = None
    grade_n: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "TranscriptEntry":
        """Build an entry from the raw student-response keys."""
        return cls(
            crscode=data.get("crscode"),
            degree=data.get("Degree"),
            yearsem=data.get("yearsem"),
            semester_course=data.get("semesterCourse"),
            grade_n=data.get("gradeN"),
        )


@dataclass
class CourseRow:
    """A single row of a semester table."""
    name: str
    code: str
    hours: Union[int, float]
    raw_score: Any
    letter: str
    points: float


@dataclass
class SemesterSummary:
    """
    Everything graded within one semester.

    total_points is the credit-weighted sum of grade points and total_hours
    the credit hours behind it; only GPA-eligible rows contribute to either.
    """
    id: str
    name: str
    courses: List[CourseRow] = field(default_factory=list)
    total_points: float = 0.0
    total_hours: Union[int, float] = 0

    @property
    def gpa(self) -> float:
        if self.total_hours > 0:
            return self.total_points / self.total_hours
        return 0.0


@dataclass
class AggregateResult:
    """
    Final grade-point summary for one transcript.

    Attributes:
        semesters: (semester id, SemesterSummary) pairs in ascending id order
        gpa: Cumulative GPA over GPA-eligible entries, 0 when there are none
        completed_hours: Curriculum credit hours of every distinct passed code
        total_hours: Credit hours of the whole curriculum (each course once)
    """
    semesters: List[Tuple[str, SemesterSummary]] = field(default_factory=list)
    gpa: float = 0.0
    completed_hours: Union[int, float] = 0
    total_hours: Union[int, float] = 0

    def semester(self, semester_id: str) -> Optional[SemesterSummary]:
        for key, summary in self.semesters:
            if key == semester_id:
                return summary
        return None

    def to_dict(self) -> dict:
        """JSON-serialisable form, semesters kept as an ordered list."""
        return {
            "semesters": [
                {**asdict(summary), "gpa": summary.gpa}
                for _, summary in self.semesters
            ],
            "gpa": self.gpa,
            "completed_hours": self.completed_hours,
            "total_hours": self.total_hours,
        }
