import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.taxonomy import build_catalog, get_default_taxonomy  # noqa: E402


class TaxonomyTests(unittest.TestCase):
    def test_default_catalog_is_loaded_once(self):
        catalog = get_default_taxonomy()
        self.assertIs(catalog, get_default_taxonomy())
        self.assertIn("Python", catalog.technical_skills)
        self.assertIn("Leadership", catalog.soft_skills)
        self.assertIn("managed", catalog.action_verbs)
        self.assertEqual([role.title for role in catalog.role_profiles], ["Software Development", "Data Science", "DevOps"])

    def test_vocabularies_are_disjoint(self):
        catalog = get_default_taxonomy()
        technical = {skill.lower() for skill in catalog.technical_skills}
        soft = {skill.lower() for skill in catalog.soft_skills}
        self.assertEqual(technical & soft, set())

    def test_catalog_is_immutable(self):
        catalog = get_default_taxonomy()
        with self.assertRaises(AttributeError):
            catalog.technical_skills = ()
        self.assertIsInstance(catalog.technical_skills, tuple)
        self.assertIsInstance(catalog.action_verbs, frozenset)

    def test_overlapping_vocabularies_are_rejected(self):
        with self.assertRaises(ValueError):
            build_catalog({"technical_skills": ["Python", "Agile"], "soft_skills": ["agile"], "action_verbs": []})

    def test_role_profiles_need_required_and_optional_skills(self):
        with self.assertRaises(ValueError):
            build_catalog(
                {
                    "technical_skills": ["Python"],
                    "soft_skills": [],
                    "action_verbs": [],
                    "role_profiles": [{"title": "Backend", "required": ["Python"], "optional": []}],
                }
            )

    def test_duplicate_entries_are_collapsed(self):
        catalog = build_catalog(
            {
                "technical_skills": ["Python", "python ", "Go"],
                "soft_skills": ["Teamwork"],
                "action_verbs": ["Led", "led"],
            }
        )
        self.assertEqual(catalog.technical_skills, ("Python", "Go"))
        self.assertEqual(catalog.action_verbs, frozenset({"led"}))
        self.assertEqual(catalog.role_profiles, ())


if __name__ == "__main__":
    unittest.main()
