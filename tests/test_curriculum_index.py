import unittest

from gpa_calculator.engines.curriculum_index import CurriculumIndex, code_variants
from gpa_calculator.models import CourseRecord, CurriculumShape


NESTED = {
    "Level 1": {
        "Semester 1": [
            {"code": "SWE101", "name": "Intro", "credit_hours": 3, "prerequisites": [],
             "level": "Level 1", "semester": "Semester 1", "type": "Core"},
            {"code": "MTH-111", "name": "Calculus", "level": "Level 1", "semester": "Semester 1"},
            "not a course",
            {"name": "No code"},
        ],
        "Semester 2": [
            {"code": "SWE102", "name": "Programming", "credit_hours": 4,
             "prerequisites": ["SWE101"]},
            {"code": "ART", "name": "Short code", "credit_hours": 2},
        ],
        "notes": "not a semester",
    },
    "description": "not a level",
}


class TestCodeVariants(unittest.TestCase):
    def test_dash_inserted_after_third_character(self):
        self.assertEqual(code_variants("CSE221"), ["CSE221", "CSE-221"])

    def test_dashed_code_gets_stripped_variant(self):
        self.assertEqual(code_variants("CSE-221"), ["CSE-221", "CSE221"])
        self.assertEqual(code_variants("UNI-1-01"), ["UNI-1-01", "UNI101"])

    def test_short_code_has_single_spelling(self):
        self.assertEqual(code_variants("ART"), ["ART"])
        self.assertEqual(code_variants("AB"), ["AB"])


class TestNestedIndex(unittest.TestCase):
    def setUp(self):
        self.index = CurriculumIndex.build(NESTED, CurriculumShape.NESTED)

    def test_both_spellings_share_one_record(self):
        self.assertIs(self.index["SWE101"], self.index["SWE-101"])
        self.assertIs(self.index["MTH-111"], self.index["MTH111"])
        self.assertEqual(self.index["MTH111"].code, "MTH-111")

    def test_defaults_applied(self):
        record = self.index["MTH111"]
        self.assertEqual(record.credit_hours, 3)
        self.assertEqual(record.prerequisites, ())
        self.assertEqual(record.track, "General")
        self.assertEqual(record.type, "General")
        self.assertEqual(record.level, "Level 1")
        self.assertEqual(record.semester_label, "Semester 1")

    def test_fields_carried_over(self):
        record = self.index["SWE-102"]
        self.assertEqual(record.name, "Programming")
        self.assertEqual(record.credit_hours, 4)
        self.assertEqual(record.prerequisites, ("SWE101",))
        self.assertEqual(self.index["SWE101"].track, "Core")

    def test_malformed_entries_skipped(self):
        self.assertEqual(
            sorted(self.index),
            ["ART", "MTH-111", "MTH111", "SWE-101", "SWE-102", "SWE101", "SWE102"],
        )

    def test_records_are_unique(self):
        records = self.index.records()
        self.assertEqual([r.code for r in records], ["SWE101", "MTH-111", "SWE102", "ART"])

    def test_total_credit_hours_counts_each_course_once(self):
        self.assertEqual(self.index.total_credit_hours(), 3 + 3 + 4 + 2)

    def test_credit_hours_lookup(self):
        self.assertEqual(self.index.credit_hours("SWE-102"), 4)
        self.assertEqual(self.index.credit_hours("NOPE"), 0)

    def test_later_duplicate_replaces_earlier(self):
        definition = {"L1": {"S1": [
            {"code": "SWE101", "name": "Old", "credit_hours": 3},
            {"code": "SWE-101", "name": "New", "credit_hours": 4},
        ]}}
        index = CurriculumIndex.build(definition, CurriculumShape.NESTED)
        self.assertIs(index["SWE101"], index["SWE-101"])
        self.assertEqual(index["SWE101"].name, "New")
        self.assertEqual(index.total_credit_hours(), 4)

    def test_index_is_read_only(self):
        with self.assertRaises(TypeError):
            self.index["NEW101"] = self.index["SWE101"]


class TestFlatIndex(unittest.TestCase):
    def test_codes_used_as_is(self):
        index = CurriculumIndex.build(
            {
                "CS101": {"name": "Intro", "credit_hours": 3},
                "CS-102": {"name": "Data Structures", "credit_hours": 4},
                "BAD": "not an object",
            },
            CurriculumShape.FLAT,
        )
        self.assertEqual(sorted(index), ["CS-102", "CS101"])
        self.assertIsInstance(index["CS101"], CourseRecord)
        self.assertEqual(index["CS101"].code, "CS101")
        self.assertEqual(index.total_credit_hours(), 7)

    def test_credit_hours_coercion(self):
        index = CurriculumIndex.build(
            {
                "A1": {"credit_hours": "4"},
                "A2": {"credit_hours": 0},
                "A3": {"credit_hours": -2},
                "A4": {"credit_hours": "abc"},
                "A5": {"credit_hours": 2.5},
                "A6": {},
            },
            CurriculumShape.FLAT,
        )
        self.assertEqual([index[c].credit_hours for c in sorted(index)], [4, 3, 3, 3, 2.5, 3])

    def test_non_mapping_definition_gives_empty_index(self):
        for definition in (None, [], "text"):
            with self.subTest(definition=definition):
                index = CurriculumIndex.build(definition, CurriculumShape.FLAT)
                self.assertEqual(len(index), 0)
                self.assertEqual(index.total_credit_hours(), 0)


if __name__ == "__main__":
    unittest.main()
