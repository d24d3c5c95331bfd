import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Keep API tests deterministic and offline by default.
os.environ.setdefault("AI_PROVIDER", "fallback")
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")

from fastapi.testclient import TestClient  # noqa: E402

from app.main import app  # noqa: E402

RESUME = (
    "Experience: Developed and managed software projects. Skills: Python, SQL. "
    "Education: BS Computer Science. Contact: jane@example.com."
)
JOB = "Looking for a developer skilled in Python and SQL with project management experience."


class AnalysisApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def setUp(self):
        patcher = patch.dict(os.environ, {"AI_PROVIDER": "fallback"})
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "healthy")
        self.assertEqual(body["aiProvider"], "fallback")
        self.assertFalse(body["liveAI"])

    def test_analyze_returns_camel_case_report(self):
        response = self.client.post(
            "/v1/analyze",
            json={"resumeText": RESUME, "jobDescription": JOB, "fileName": "jane.txt"},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["overallScore"], 76)
        self.assertEqual(body["keywordAnalysis"]["missing"], ["looking"])
        self.assertEqual(body["metadata"]["fileName"], "jane.txt")
        self.assertEqual(body["metadata"]["provenance"]["suggestions"], "fallback")
        self.assertEqual(
            set(body),
            {
                "overallScore",
                "breakdown",
                "keywordAnalysis",
                "structureAnalysis",
                "aiSuggestions",
                "feedback",
                "metadata",
            },
        )

    def test_analyze_rejects_short_inputs(self):
        response = self.client.post("/v1/analyze", json={"resumeText": "tiny", "jobDescription": JOB})
        self.assertEqual(response.status_code, 400)
        self.assertIn("at least 50 characters", response.json()["detail"])

        response = self.client.post("/v1/analyze", json={"resumeText": RESUME})
        self.assertEqual(response.status_code, 400)

    def test_text_metrics(self):
        response = self.client.post(
            "/v1/text-metrics",
            json={"text": "Managed 12 people. Increased revenue by 25%."},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertIn("managed", body["action_verbs"])
        self.assertEqual(body["word_count"], 7)


class UploadApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_supported_formats(self):
        response = self.client.get("/v1/upload/supported-formats")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual([item["extension"] for item in body["supportedFormats"]], [".pdf", ".docx", ".txt"])
        self.assertIn("mimeType", body["supportedFormats"][0])
        self.assertTrue(body["maxFileSize"].endswith("MB"))

    def test_upload_plain_text(self):
        response = self.client.post(
            "/v1/upload",
            files={"resume": ("resume.txt", b"Jane Doe\n\nSkills:  Python , SQL", "text/plain")},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["data"]["fileName"], "resume.txt")
        self.assertEqual(body["data"]["fileType"], "text/plain")
        self.assertEqual(body["data"]["text"], "Jane Doe Skills: Python, SQL")
        self.assertEqual(body["data"]["wordCount"], 5)

    def test_upload_rejects_unsupported_type(self):
        response = self.client.post(
            "/v1/upload",
            files={"resume": ("photo.png", b"\x89PNG\r\n", "image/png")},
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("Invalid file type", response.json()["detail"])

    def test_upload_rejects_empty_text(self):
        response = self.client.post(
            "/v1/upload",
            files={"resume": ("blank.txt", b"   \n  ", "text/plain")},
        )
        self.assertEqual(response.status_code, 400)


if __name__ == "__main__":
    unittest.main()
