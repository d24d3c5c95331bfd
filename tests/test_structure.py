import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.features.structure import (  # noqa: E402
    ATS_HYGIENE_RECOMMENDATIONS,
    GENERAL_RECOMMENDATIONS,
    ISSUE_FONTS,
    ISSUE_FORMATTING,
    ISSUE_IMAGES,
    ISSUE_LINE_BREAKS,
    ISSUE_PAGE_NUMBERS,
    ISSUE_SPECIAL_CHARS,
    ISSUE_TABLES,
    MISSING_SECTION_RECOMMENDATIONS,
    calculate_structure_score,
    check_ats_compatibility,
    validate_resume_structure,
)


class StructureAnalyzerTests(unittest.TestCase):
    CLEAN_RESUME = (
        "Jane Doe\n"
        "Contact: jane@example.com\n"
        "Summary\n"
        "Backend engineer focused on reliable services.\n"
        "Experience\n"
        "Acme Corp, built billing services.\n"
        "Education\n"
        "BS Computer Science, State University\n"
        "Skills\n"
        "Python, Go, Docker\n"
    )

    def test_complete_clean_resume_scores_full_marks(self):
        result = validate_resume_structure(self.CLEAN_RESUME)
        self.assertEqual(result.section_score, 100.0)
        self.assertEqual(result.issues, ())
        self.assertEqual(result.score, 100)
        self.assertTrue(all(result.sections.model_dump().values()))
        self.assertEqual(result.recommendations, GENERAL_RECOMMENDATIONS)

    def test_section_map_always_has_all_five_keys(self):
        result = validate_resume_structure("nothing relevant here at all")
        self.assertEqual(
            set(result.sections.model_dump()),
            {"contact", "summary", "experience", "education", "skills"},
        )
        self.assertEqual(result.section_score, 0.0)
        self.assertEqual(result.score, 0)

    def test_section_score_is_twenty_points_per_section(self):
        result = validate_resume_structure("Experience and Education and Skills")
        self.assertEqual(result.section_score, 60.0)
        self.assertEqual(result.score, 60)

    def test_marker_in_running_prose_counts_as_section(self):
        result = validate_resume_structure("I have five years of experience.")
        self.assertTrue(result.sections.experience)

    def test_clean_bonus_needs_eighty_percent_and_no_issues(self):
        self.assertEqual(calculate_structure_score(80.0, 0), 90)
        self.assertEqual(calculate_structure_score(100.0, 0), 100)
        self.assertEqual(calculate_structure_score(60.0, 0), 60)
        self.assertEqual(calculate_structure_score(80.0, 1), 70)
        self.assertEqual(calculate_structure_score(20.0, 5), 0)

    def test_each_issue_category_reported_once(self):
        text = (
            "Led the **platform** migration, wrote *clear* docs, left _tidy_ notes, "
            "reviewed `main` branch code daily with the wider engineering group and made **bold** claims."
        )
        self.assertEqual(check_ats_compatibility(text), [ISSUE_FORMATTING])

    def test_issue_battery_order(self):
        text = (
            "photo of a table\n"
            "**Name**\n"
            "Page 2\n\n\n"
            "font size 11pt"
        )
        self.assertEqual(
            check_ats_compatibility(text),
            [ISSUE_IMAGES, ISSUE_TABLES, ISSUE_FORMATTING, ISSUE_PAGE_NUMBERS, ISSUE_LINE_BREAKS, ISSUE_FONTS],
        )

    def test_photography_trips_image_check(self):
        # Known heuristic limitation: substring match, not word match.
        self.assertIn(ISSUE_IMAGES, check_ats_compatibility("Hobbies: photography"))

    def test_pt_substring_trips_font_check(self):
        self.assertIn(ISSUE_FONTS, check_ats_compatibility("Optimized deployment scripts"))

    def test_literal_checks_are_case_sensitive(self):
        self.assertEqual(check_ats_compatibility("HEADER FOOTER IMAGE"), [])

    def test_special_character_density(self):
        self.assertIn(ISSUE_SPECIAL_CHARS, check_ats_compatibility("★★★ ♦♦♦ ✓✓ résumé"))
        self.assertNotIn(ISSUE_SPECIAL_CHARS, check_ats_compatibility("Plain ascii text, with (symbols) & 100% @home."))

    def test_no_break_space_is_whitespace_but_accents_are_special(self):
        self.assertNotIn(ISSUE_SPECIAL_CHARS, check_ats_compatibility("Python\u00a0SQL\u00a0Docker\u00a0AWS"))
        self.assertIn(ISSUE_SPECIAL_CHARS, check_ats_compatibility("café résumé naïve"))

    def test_recommendations_priority_and_cap(self):
        result = validate_resume_structure("a photo collage")
        expected = list(MISSING_SECTION_RECOMMENDATIONS.values()) + list(ATS_HYGIENE_RECOMMENDATIONS)
        self.assertEqual(list(result.recommendations), expected[:8])
        self.assertEqual(len(result.recommendations), 8)

    def test_missing_summary_recommended_first(self):
        text = self.CLEAN_RESUME.replace("Summary\n", "")
        result = validate_resume_structure(text)
        self.assertFalse(result.sections.summary)
        self.assertEqual(result.recommendations[0], MISSING_SECTION_RECOMMENDATIONS["summary"])
        self.assertEqual(result.section_score, 80.0)
        self.assertEqual(result.score, 90)


if __name__ == "__main__":
    unittest.main()
