import dataclasses
import itertools
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from skillpath.features.career_classifier import (  # noqa: E402
    backend_tag,
    determine_career,
    missing_skills,
    select_rule_tag,
)
from skillpath.features.career_rules import CareerRule, load_rule_table  # noqa: E402
from skillpath.features.skills import SUGGESTED_SKILLS  # noqa: E402


class CascadeTests(unittest.TestCase):
    def test_video_rule_wins_over_frontend(self):
        plan = determine_career(["React", "Premiere Pro"])
        self.assertEqual(plan.career, "Video Editor")
        self.assertEqual(plan.skill_gap.missing, ["Video Editing", "After Effects", "Storytelling"])
        self.assertEqual(plan.placement_probability, 30)

    def test_python_and_sql_fall_through_to_data(self):
        plan = determine_career(["Python", "SQL"])
        self.assertEqual(plan.career, "Junior Data Analyst")
        self.assertEqual(plan.skill_gap.missing, ["Excel", "Data Analysis", "Statistics"])
        self.assertEqual(plan.placement_probability, 35)

    def test_backend_tie_break_prefers_python_then_java(self):
        self.assertEqual(backend_tag(["python", "sql"]), "python")
        self.assertEqual(backend_tag(["java", "python"]), "python")
        self.assertEqual(backend_tag(["java", "node.js"]), "java")
        self.assertEqual(backend_tag(["node.js", "sql"]), "backend")
        self.assertEqual(backend_tag(["javascript", "python"]), "fullstack")

    def test_java_only_is_java_developer(self):
        plan = determine_career(["Java"])
        self.assertEqual(plan.career, "Java Developer")
        self.assertEqual(plan.placement_probability, 24)

    def test_node_only_is_generic_backend(self):
        plan = determine_career(["Node.js"])
        self.assertEqual(plan.career, "Backend Developer")
        self.assertEqual(plan.placement_probability, 23)

    def test_frontend_plus_backend_is_fullstack(self):
        self.assertEqual(select_rule_tag(["JavaScript", "Node.js"]), "fullstack")
        self.assertEqual(select_rule_tag(["HTML", "CSS", "Python"]), "fullstack")

    def test_frontend_only(self):
        plan = determine_career(["HTML", "CSS"])
        self.assertEqual(plan.career, "Frontend Developer")
        self.assertEqual(plan.roadmap[0].description, "Master HTML and CSS fundamentals")

    def test_content_blocked_by_programming_skill(self):
        self.assertEqual(select_rule_tag(["Communication"]), "content")
        self.assertEqual(select_rule_tag(["Communication", "Python"]), "data")
        self.assertEqual(select_rule_tag(["Communication", "JavaScript"]), "frontend")

    def test_content_writing_overrides_marketing(self):
        self.assertEqual(select_rule_tag(["Content Writing"]), "content")
        self.assertEqual(select_rule_tag(["SEO"]), "marketing")

    def test_design_and_default(self):
        self.assertEqual(determine_career(["Figma"]).career, "UI/UX Designer")
        plan = determine_career(["Photography"])
        self.assertEqual(plan.career, "Software Developer")
        self.assertEqual(plan.salary_range, "₹3 LPA – ₹5 LPA")
        self.assertEqual(plan.placement_probability, 18)

    def test_matching_is_case_insensitive(self):
        self.assertEqual(select_rule_tag(["dIgItAl MaRkEtInG"]), "marketing")
        self.assertEqual(select_rule_tag(["AFTER EFFECTS"]), "video")


class SkillGapTests(unittest.TestCase):
    def setUp(self):
        self.table = load_rule_table()

    def test_substring_match_in_both_directions(self):
        plan = determine_career(["React", "Java", "node"])
        self.assertEqual(plan.career, "Full Stack Developer")
        # "node" is inside "Node.js"; "java" is inside "JavaScript".
        self.assertEqual(plan.skill_gap.missing, ["SQL", "Git", "REST APIs"])
        self.assertEqual(plan.placement_probability, 26)

        frontend = self.table.get("frontend")
        self.assertNotIn("React", missing_skills(frontend, ["HTML", "React Native"]))

    def test_punctuation_is_not_normalized(self):
        backend = self.table.get("backend")
        self.assertNotIn("Node.js", missing_skills(backend, ["node"]))
        self.assertIn("Node.js", missing_skills(backend, ["nodejs"]))

        plan = determine_career(["React", "Java", "nodejs"])
        self.assertIn("Node.js", plan.skill_gap.missing)
        self.assertEqual(plan.placement_probability, 23)

    def test_current_skills_are_echoed_unchanged(self):
        skills = ["Excel", "excel", "SQL"]
        plan = determine_career(skills)
        self.assertEqual(plan.skill_gap.current, skills)
        self.assertEqual(plan.skill_gap.required, list(self.table.get("data").required_skills))


class ProbabilityTests(unittest.TestCase):
    def setUp(self):
        self.table = load_rule_table()

    def test_probability_is_capped(self):
        generous = CareerRule(
            tag="default",
            career="Generalist",
            salary_range="₹1 LPA",
            base_probability=100,
            required_skills=("Programming", "Problem Solving"),
        )
        table = dataclasses.replace(self.table, default=generous)
        plan = determine_career(["Programming", "Problem Solving"], table=table)
        self.assertEqual(plan.placement_probability, 75)

    def test_halves_round_up(self):
        rule = CareerRule(
            tag="default",
            career="Generalist",
            salary_range="₹1 LPA",
            base_probability=45,
            required_skills=("Programming", "Problem Solving"),
        )
        table = dataclasses.replace(self.table, default=rule)
        plan = determine_career(["Gardening"], table=table)
        self.assertEqual(plan.placement_probability, 23)


class InvariantTests(unittest.TestCase):
    def _inputs(self):
        singles = [[skill] for skill in SUGGESTED_SKILLS]
        pairs = [list(pair) for pair in itertools.combinations(SUGGESTED_SKILLS, 2)]
        return singles + pairs + [list(SUGGESTED_SKILLS), ["something unusual"]]

    def test_invariants_hold_for_suggested_skill_combinations(self):
        for skills in self._inputs():
            with self.subTest(skills=skills):
                plan = determine_career(skills)
                self.assertIsInstance(plan.placement_probability, int)
                self.assertGreaterEqual(plan.placement_probability, 0)
                self.assertLessEqual(plan.placement_probability, 75)
                self.assertTrue(set(plan.skill_gap.missing) <= set(plan.skill_gap.required))
                self.assertEqual([step.step for step in plan.roadmap], [1, 2, 3, 4])

    def test_determine_career_is_pure(self):
        skills = ["React", "SQL", "Figma"]
        self.assertEqual(determine_career(skills).to_wire(), determine_career(skills).to_wire())
        self.assertEqual(skills, ["React", "SQL", "Figma"])


if __name__ == "__main__":
    unittest.main()
