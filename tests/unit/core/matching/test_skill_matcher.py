#!/usr/bin/env python3
"""
Test suite for skill overlap scoring.
"""

import unittest

from core.matching.skill_matcher import SkillMatcher, is_partial_match, normalize_skills
from tests.mocks.marketplace_mocks import make_provider


class TestNormalizeSkills(unittest.TestCase):

    def test_trims_and_lowercases(self):
        self.assertEqual(normalize_skills(["  Project Management ", "BIM"]), ["project management", "bim"])

    def test_drops_blank_and_non_string_items(self):
        self.assertEqual(normalize_skills(["", "   ", None, 42, "Legal"]), ["legal"])

    def test_non_collection_degrades_to_empty(self):
        self.assertEqual(normalize_skills(None), [])
        self.assertEqual(normalize_skills("Project Management"), [])
        self.assertEqual(normalize_skills({"skill": "x"}), [])

    def test_partial_match_is_bidirectional(self):
        self.assertTrue(is_partial_match("civil engineering", "engineering"))
        self.assertTrue(is_partial_match("engineering", "civil engineering"))
        self.assertFalse(is_partial_match("legal", "engineering"))


class TestCalculateSkillMatch(unittest.TestCase):

    def setUp(self):
        self.matcher = SkillMatcher()

    def test_exact_match_ignores_case_and_whitespace(self):
        score = self.matcher.calculate_skill_match(["Project Management"], [" project management "])
        self.assertEqual(score, 1.0)

    def test_partial_match_scores_half(self):
        score = self.matcher.calculate_skill_match(["Civil Engineering"], ["Engineering"])
        self.assertEqual(score, 0.5)

    def test_partial_match_when_required_contains_candidate(self):
        score = self.matcher.calculate_skill_match(["Engineering"], ["Civil Engineering"])
        self.assertEqual(score, 0.5)

    def test_exact_match_wins_over_partial(self):
        score = self.matcher.calculate_skill_match(["Engineering", "Civil Engineering"], ["Engineering"])
        self.assertEqual(score, 1.0)

    def test_mixed_requirements_average(self):
        score = self.matcher.calculate_skill_match(
            ["Project Management", "Civil Engineering"],
            ["Project Management", "Engineering", "Quality Control", "Legal"]
        )
        self.assertAlmostEqual(score, (1.0 + 0.5) / 4)

    def test_no_overlap_scores_zero(self):
        self.assertEqual(self.matcher.calculate_skill_match(["Legal"], ["Surveying"]), 0.0)

    def test_empty_inputs_score_zero(self):
        self.assertEqual(self.matcher.calculate_skill_match([], ["Legal"]), 0.0)
        self.assertEqual(self.matcher.calculate_skill_match(["Legal"], []), 0.0)
        self.assertEqual(self.matcher.calculate_skill_match(None, None), 0.0)
        self.assertEqual(self.matcher.calculate_skill_match(["  "], ["Legal"]), 0.0)

    def test_score_always_in_unit_interval(self):
        cases = [
            (["a"], ["a", "a", "a"]),
            (["a", "ab", "abc"], ["abc"]),
            (["x"], ["xy", "yx", "z"]),
            (["Design", "design", "DESIGN"], ["design"]),
        ]
        for candidate, required in cases:
            score = self.matcher.calculate_skill_match(candidate, required)
            self.assertGreaterEqual(score, 0.0)
            self.assertLessEqual(score, 1.0)

    def test_repeated_calls_are_identical(self):
        args = (["Project Management", "Civil Engineering"], ["Engineering", "Legal"])
        first = self.matcher.calculate_skill_match(*args)
        for _ in range(3):
            self.assertEqual(self.matcher.calculate_skill_match(*args), first)


class TestFindMatchingProviders(unittest.TestCase):

    def setUp(self):
        self.matcher = SkillMatcher()

    def test_annotates_every_provider(self):
        providers = [
            make_provider("sp-1", ["Project Management", "Civil Engineering"]),
            make_provider("sp-2", ["Legal"]),
        ]
        results = self.matcher.find_matching_providers(providers, ["Project Management", "Engineering"])

        self.assertEqual([r.provider.id for r in results], ["sp-1", "sp-2"])
        self.assertAlmostEqual(results[0].skill_match_score, 0.75)
        self.assertEqual(results[0].matched_skills, ["Project Management", "Civil Engineering"])
        self.assertEqual(results[1].skill_match_score, 0.0)
        self.assertEqual(results[1].matched_skills, [])

    def test_empty_provider_list(self):
        self.assertEqual(self.matcher.find_matching_providers([], ["Legal"]), [])
        self.assertEqual(self.matcher.find_matching_providers(None, ["Legal"]), [])

    def test_empty_requirements_score_zero(self):
        providers = [make_provider("sp-1", ["Legal"])]
        results = self.matcher.find_matching_providers(providers, [])

        self.assertEqual(len(results), 1)
        self.assertEqual(results[0].skill_match_score, 0.0)
        self.assertEqual(results[0].matched_skills, [])

    def test_provider_without_skills(self):
        provider = make_provider("sp-1")
        provider.skills = None
        results = self.matcher.find_matching_providers([provider], ["Legal"])
        self.assertEqual(results[0].skill_match_score, 0.0)


if __name__ == '__main__':
    unittest.main()
