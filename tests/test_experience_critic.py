import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.features.experience_critic import (  # noqa: E402
    MISSING_SECTION_FEEDBACK,
    QUANTIFICATION_FEEDBACK,
    critique_work_experience,
)
from app.features.sections import segment_sections  # noqa: E402
from app.taxonomy import get_default_taxonomy  # noqa: E402


class WorkExperienceCriticTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.verbs = get_default_taxonomy().action_verbs

    def test_strong_quantified_bullet_has_no_issues(self):
        critique = critique_work_experience(
            ["Managed a team of 5 engineers using Python and AWS."], self.verbs
        )
        self.assertIsNone(critique.feedback)
        self.assertEqual(critique.action_verb_issues, [])
        self.assertEqual(critique.quantification_issues, [])

    def test_experience_section_without_digits(self):
        text = (
            "Experience\n"
            "Responsible for backend services\n"
            "Managed deployments across regions\n"
            "Worked on the billing API\n"
        )
        sections = segment_sections(text)

        critique = critique_work_experience(sections["experience"], self.verbs)

        self.assertEqual(len(critique.quantification_issues), 3)
        self.assertEqual(
            [issue.bullet_text for issue in critique.action_verb_issues],
            ["Responsible for backend services", "Worked on the billing API"],
        )
        self.assertEqual(
            critique.action_verb_issues[0].feedback,
            "Consider starting with a strong action verb instead of 'responsible'.",
        )
        self.assertEqual(critique.quantification_issues[0].feedback, QUANTIFICATION_FEEDBACK)

    def test_checks_run_independently(self):
        critique = critique_work_experience(["Helped ship 3 releases", "Led the redesign"], self.verbs)
        self.assertEqual([i.bullet_text for i in critique.action_verb_issues], ["Helped ship 3 releases"])
        self.assertEqual([i.bullet_text for i in critique.quantification_issues], ["Led the redesign"])

    def test_bullet_markers_and_punctuation_are_ignored_for_the_first_word(self):
        critique = critique_work_experience(["• Led a team of 4", "- Reduced costs by 20%", "Improved, 10x"], self.verbs)
        self.assertEqual(critique.action_verb_issues, [])

    def test_numbered_list_marker_does_not_count_as_a_metric(self):
        critique = critique_work_experience(["1. Led the redesign", "2) Reduced latency by 30%"], self.verbs)
        self.assertEqual(critique.action_verb_issues, [])
        self.assertEqual([i.bullet_text for i in critique.quantification_issues], ["1. Led the redesign"])

    def test_blank_lines_are_skipped(self):
        critique = critique_work_experience(["", "   ", "Built a CLI used by 40 teams"], self.verbs)
        self.assertEqual(critique.action_verb_issues, [])
        self.assertEqual(critique.quantification_issues, [])

    def test_missing_or_empty_section_reports_a_note(self):
        for lines in (None, [], ["", "  "]):
            critique = critique_work_experience(lines, self.verbs)
            self.assertEqual(critique.feedback, MISSING_SECTION_FEEDBACK)
            self.assertEqual(critique.action_verb_issues, [])
            self.assertEqual(critique.quantification_issues, [])


if __name__ == "__main__":
    unittest.main()
