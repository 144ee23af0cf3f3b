import unittest

from cgpacalc.core.grades import (
    GRADE_POINTS,
    grade_entries,
    grade_option_label,
    lookup,
    performance_label,
    performance_tier,
)


class GradeTableTests(unittest.TestCase):
    def test_lookup(self):
        self.assertEqual(lookup("A+"), 4.0)
        self.assertEqual(lookup("A-"), 3.7)
        self.assertEqual(lookup("D"), 1.0)
        self.assertEqual(lookup("F"), 0.0)

    def test_lookup_missing(self):
        self.assertIsNone(lookup(""))
        self.assertIsNone(lookup("E"))
        self.assertIsNone(lookup("a"))
        self.assertIsNone(lookup(None))

    def test_entries_keep_order(self):
        grades = [grade for grade, _ in grade_entries()]
        self.assertEqual(grades, ["A+", "A", "A-", "B+", "B", "B-", "C+", "C", "C-", "D+", "D", "F"])
        self.assertEqual(grade_entries()[4], ("B", 3.0))

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            GRADE_POINTS["E"] = 0.5  # type: ignore[index]

    def test_option_label(self):
        self.assertEqual(grade_option_label("A"), "A (4.0)")
        self.assertEqual(grade_option_label("C-"), "C- (1.7)")

    def test_performance_label_bands(self):
        self.assertEqual(performance_label(4.0), "Excellent")
        self.assertEqual(performance_label(3.7), "Excellent")
        self.assertEqual(performance_label(3.5), "Very Good")
        self.assertEqual(performance_label(3.0), "Good")
        self.assertEqual(performance_label(2.7), "Satisfactory")
        self.assertEqual(performance_label(2.69), "Needs Improvement")
        self.assertEqual(performance_label(2.0), "Needs Improvement")
        self.assertEqual(performance_label(1.99), "Poor")
        self.assertEqual(performance_label(0), "Poor")

    def test_performance_tier(self):
        self.assertEqual(performance_tier(3.5), "accent")
        self.assertEqual(performance_tier(3.2), "primary")
        self.assertEqual(performance_tier(2.5), "warning")
        self.assertEqual(performance_tier(0), "danger")


if __name__ == "__main__":
    unittest.main()
