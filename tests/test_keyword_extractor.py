import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.features.keyword_extractor import extract_important_keywords  # noqa: E402


class KeywordExtractorTests(unittest.TestCase):
    def test_empty_and_stop_word_only_text_yield_nothing(self):
        self.assertEqual(extract_important_keywords(""), set())
        self.assertEqual(extract_important_keywords("the and of to"), set())

    def test_short_text_keeps_every_content_term(self):
        keywords = extract_important_keywords("Python developer building Kubernetes platforms")
        self.assertEqual(keywords, {"python", "developer", "building", "kubernetes", "platforms"})

    def test_terms_seen_once_in_a_long_resume_are_excluded(self):
        filler = " ".join(f"filler{i}" for i in range(150))
        text = f"{filler} " + " ".join(["kubernetes"] * 10)

        keywords = extract_important_keywords(text)

        self.assertEqual(keywords, {"kubernetes"})

    def test_threshold_is_configurable(self):
        text = "python python python java"
        self.assertEqual(extract_important_keywords(text), {"python", "java"})
        self.assertEqual(extract_important_keywords(text, threshold=0.5), {"python"})


if __name__ == "__main__":
    unittest.main()
