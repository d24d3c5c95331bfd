import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.features.text_metrics import (  # noqa: E402
    build_text_metrics,
    calculate_readability,
    check_action_verbs,
    check_quantifiable_achievements,
    count_syllables,
    extract_action_verbs,
    extract_section_content,
)

SAMPLE = "Increased revenue by 25% and managed 12 people over 3 years."


class TextMetricsTests(unittest.TestCase):
    def test_action_verbs(self):
        self.assertEqual(extract_action_verbs(SAMPLE), ["managed", "increased"])
        signal = check_action_verbs(SAMPLE)
        self.assertEqual(signal.found, ["managed", "increased"])
        self.assertEqual(signal.count, 2)
        self.assertAlmostEqual(signal.score, 20.0)

    def test_quantifiable_achievements(self):
        signal = check_quantifiable_achievements(SAMPLE)
        self.assertEqual(signal.found, ["25%", "12 people", "3 years"])
        self.assertAlmostEqual(signal.score, 60.0)

    def test_syllables_and_readability(self):
        self.assertEqual(count_syllables("the cat"), 2)
        self.assertEqual(count_syllables("developer"), 4)
        self.assertEqual(calculate_readability(""), 0.0)
        score = calculate_readability("The cat sat. The dog ran.")
        self.assertGreater(score, 90.0)
        self.assertLessEqual(score, 100.0)

    def test_section_content(self):
        text = "Email: jane@example.com\nSkills: Python, SQL"
        self.assertEqual(extract_section_content(text, "contact"), ["jane@example.com"])
        self.assertEqual(extract_section_content(text, "skills"), ["Python, SQL"])
        self.assertIsNone(extract_section_content(text, "education"))
        self.assertIsNone(extract_section_content(text, "hobbies"))

    def test_build_text_metrics(self):
        metrics = build_text_metrics(SAMPLE)
        self.assertEqual(metrics.word_count, 11)
        self.assertEqual(metrics.quantifiable_achievements.count, 3)
        self.assertEqual(metrics.section_content, {})


if __name__ == "__main__":
    unittest.main()
