"""
Unit tests for the per-candidate ranking factors.
"""

import unittest

from core.ranking.factors import (
    availability_factor,
    experience_factor,
    parse_salary,
    salary_factor,
    skill_factor,
)


class TestSkillFactor(unittest.TestCase):

    def test_scales_match_score_to_unit_interval(self):
        self.assertAlmostEqual(skill_factor(80), 0.8)
        self.assertAlmostEqual(skill_factor(0), 0.0)
        self.assertAlmostEqual(skill_factor(100), 1.0)

    def test_garbage_is_zero(self):
        self.assertEqual(skill_factor(None), 0.0)
        self.assertEqual(skill_factor("n/a"), 0.0)


class TestExperienceFactor(unittest.TestCase):

    def test_ratio_against_minimum(self):
        self.assertAlmostEqual(experience_factor(1, 2), 0.5)
        self.assertAlmostEqual(experience_factor(2, 2), 1.0)

    def test_overqualification_is_capped(self):
        self.assertAlmostEqual(experience_factor(4, 2), 1.2)
        self.assertAlmostEqual(experience_factor(30, 1), 1.2)

    def test_zero_minimum_counts_as_one_year(self):
        self.assertAlmostEqual(experience_factor(1, 0), 1.0)
        self.assertAlmostEqual(experience_factor(0.5, 0), 0.5)

    def test_custom_cap(self):
        self.assertAlmostEqual(experience_factor(10, 2, cap=1.5), 1.5)


class TestParseSalary(unittest.TestCase):

    def test_strips_currency_and_separators(self):
        self.assertEqual(parse_salary("3,000 USD"), 3000.0)
        self.assertEqual(parse_salary("$2500"), 2500.0)
        self.assertEqual(parse_salary("2,750.50"), 2750.5)

    def test_reads_leading_number_only(self):
        self.assertEqual(parse_salary("1.5.0"), 1.5)

    def test_text_without_digits_is_zero(self):
        self.assertEqual(parse_salary("negotiable"), 0.0)
        self.assertEqual(parse_salary(""), 0.0)
        self.assertEqual(parse_salary(None), 0.0)
        self.assertEqual(parse_salary("."), 0.0)

    def test_range_collapses_digits(self):
        # Dashes are stripped before parsing, so ranges glue together
        self.assertEqual(parse_salary("2000-3000"), 20003000.0)


class TestSalaryFactor(unittest.TestCase):

    def test_within_budget_is_one(self):
        self.assertEqual(salary_factor(1500, 2000), 1.0)
        self.assertEqual(salary_factor(2000, 2000), 1.0)
        self.assertEqual(salary_factor(0, 2000), 1.0)

    def test_linear_decay_over_budget(self):
        self.assertAlmostEqual(salary_factor(3000, 2000), 0.5)
        self.assertAlmostEqual(salary_factor(2500, 2000), 0.75)

    def test_floor_at_zero(self):
        self.assertEqual(salary_factor(4000, 2000), 0.0)
        self.assertEqual(salary_factor(10000, 2000), 0.0)

    def test_non_increasing_above_budget(self):
        values = [salary_factor(expected, 2000) for expected in range(0, 5001, 250)]
        self.assertTrue(all(a >= b for a, b in zip(values, values[1:])))

    def test_zero_budget(self):
        self.assertEqual(salary_factor(0, 0), 1.0)
        self.assertEqual(salary_factor(100, 0), 0.0)


class TestAvailabilityFactor(unittest.TestCase):

    def test_immediate_bucket(self):
        for text in ("Immediate", "0 days", "Can start now", "IMMEDIATELY"):
            self.assertEqual(availability_factor(text), 1.0, text)

    def test_two_week_bucket(self):
        self.assertEqual(availability_factor("15 days"), 0.8)
        self.assertEqual(availability_factor("2 Weeks"), 0.8)

    def test_one_month_bucket(self):
        self.assertEqual(availability_factor("30 days"), 0.6)
        self.assertEqual(availability_factor("1 month"), 0.6)

    def test_everything_else(self):
        self.assertEqual(availability_factor("3 months"), 0.5)
        self.assertEqual(availability_factor(""), 0.5)
        self.assertEqual(availability_factor(None), 0.5)

    def test_needles_match_at_word_start(self):
        self.assertEqual(availability_factor("30 days"), 0.6)
        self.assertEqual(availability_factor("60 days"), 0.5)
        self.assertEqual(availability_factor("Unknown"), 0.5)
        self.assertEqual(availability_factor("12 weeks"), 0.5)

    def test_first_matching_bucket_wins(self):
        # "now" hits the immediate bucket before "1 month"
        self.assertEqual(availability_factor("now, or 1 month"), 1.0)


if __name__ == '__main__':
    unittest.main()
