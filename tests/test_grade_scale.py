import unittest

from gpa_calculator.config import BANDED_GPA_MAP
from gpa_calculator.engines.grade_scale import (
    banded_grade,
    grade_for,
    parse_score,
    standard_grade,
)
from gpa_calculator.models import GradeResult, GradeScale


class TestParseScore(unittest.TestCase):
    def test_numbers_pass_through(self):
        self.assertEqual(parse_score(90), 90.0)
        self.assertEqual(parse_score(72.5), 72.5)

    def test_strings_use_leading_number(self):
        self.assertEqual(parse_score("88"), 88.0)
        self.assertEqual(parse_score("  91.5"), 91.5)
        self.assertEqual(parse_score("88.5abc"), 88.5)
        self.assertEqual(parse_score(".5"), 0.5)
        self.assertEqual(parse_score("1e2"), 100.0)
        self.assertEqual(parse_score("-3"), -3.0)

    def test_unreadable_values(self):
        for raw in ("", "   ", "abc", "Abs", None, True, float("nan"), [], {}):
            with self.subTest(raw=raw):
                self.assertIsNone(parse_score(raw))


class TestStandardGrade(unittest.TestCase):
    def test_breakpoints_are_lower_inclusive(self):
        cases = [
            (100, "A+", 4.0), (96, "A+", 4.0), (95.99, "A", 3.7),
            (92, "A", 3.7), (91.9, "A-", 3.4), (88, "A-", 3.4),
            (84, "B+", 3.2), (80, "B", 3.0), (76, "B-", 2.8),
            (72, "C+", 2.6), (68, "C", 2.4), (64, "C-", 2.2),
            (60, "D+", 2.0), (55, "D", 1.5), (50, "D-", 1.0),
            (49.999, "F", 0.0), (0, "F", 0.0), (-5, "F", 0.0),
        ]
        for score, letter, points in cases:
            with self.subTest(score=score):
                self.assertEqual(standard_grade(score), GradeResult(letter, points))

    def test_string_scores(self):
        self.assertEqual(standard_grade("90"), GradeResult("A-", 3.4))
        self.assertEqual(standard_grade(" 55 "), GradeResult("D", 1.5))

    def test_unparsable_is_not_available(self):
        for raw in ("", "abc", None):
            with self.subTest(raw=raw):
                self.assertEqual(standard_grade(raw), GradeResult("N/A", 0.0))


class TestBandedGrade(unittest.TestCase):
    def test_exact_hundred_is_top_band(self):
        self.assertEqual(banded_grade(100), GradeResult("A+", 4.0))
        self.assertEqual(banded_grade("100"), GradeResult("A+", 4.0))

    def test_band_lower_bounds(self):
        self.assertEqual(banded_grade(95), GradeResult("A+", 3.7))
        self.assertEqual(banded_grade(90), GradeResult("A", 3.4))
        self.assertEqual(banded_grade(60), GradeResult("D+", 1.6))
        self.assertEqual(banded_grade(50), GradeResult("D", 1.0))

    def test_below_fifty_is_constant_fail(self):
        self.assertEqual(banded_grade(49.999), GradeResult("F", 0.0))
        self.assertEqual(banded_grade(0), GradeResult("F", 0.0))
        self.assertEqual(banded_grade(25), GradeResult("F", 0.0))

    def test_midpoint_is_mean_of_band(self):
        for lower, upper, gpa_min, gpa_max, letter in BANDED_GPA_MAP:
            if gpa_min == gpa_max:
                continue
            with self.subTest(letter=letter):
                result = banded_grade((lower + upper) / 2)
                self.assertEqual(result.letter, letter)
                self.assertAlmostEqual(result.points, round((gpa_min + gpa_max) / 2, 2))

    def test_points_rounded_to_two_decimals(self):
        self.assertAlmostEqual(banded_grade(97).points, 3.82)
        self.assertAlmostEqual(banded_grade(78.5).points, 2.71)
        self.assertAlmostEqual(banded_grade(64).points, 1.84)

    def test_out_of_range_falls_back_to_fail(self):
        self.assertEqual(banded_grade(101), GradeResult("F", 0.0))
        self.assertEqual(banded_grade(-1), GradeResult("F", 0.0))

    def test_unparsable_is_not_available(self):
        self.assertEqual(banded_grade("Abs"), GradeResult("N/A", 0.0))
        self.assertEqual(banded_grade(None), GradeResult("N/A", 0.0))


class TestGradeFor(unittest.TestCase):
    def test_dispatches_on_scale(self):
        self.assertEqual(grade_for(GradeScale.STANDARD, "95"), GradeResult("A", 3.7))
        self.assertEqual(grade_for(GradeScale.BANDED, "95"), GradeResult("A+", 3.7))
        self.assertEqual(grade_for(GradeScale.BANDED, "55").letter, "D")
        self.assertEqual(grade_for(GradeScale.STANDARD, "55").letter, "D")


if __name__ == "__main__":
    unittest.main()
