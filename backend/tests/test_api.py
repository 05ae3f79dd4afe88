"""API tests: /estimate analysis, request validation, options, health endpoints.

The analysis delay is disabled by conftest (ANALYSIS_DELAY_SECONDS=0).
"""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from hackathon_sage.main import app

client = TestClient(app)


def _idea_payload(**overrides):
    data = {
        "title": "AI Study Buddy",
        "description": "A chat assistant that quizzes students on their lecture notes.",
        "complexity": "beginner",
        "teamSize": 4,
        "durationHours": 24,
        "category": "web",
        "targetPlatform": ["web"],
    }
    data.update(overrides)
    return data


# ===================================================================== #
#  POST /estimate                                                         #
# ===================================================================== #

class TestEstimateEndpoint:
    def test_returns_camel_case_report(self):
        res = client.post("/estimate", json=_idea_payload())
        assert res.status_code == 200, res.text
        data = res.json()

        assert data["totalTimeHours"] == 17
        assert data["feasibilityScore"] == 100
        assert data["feasibilityLevel"] == "high"
        assert len(data["timelineStages"]) == 3
        assert data["timelineStages"][1]["startPercentage"] == 15
        assert data["recommendedTechnologies"][0]["name"] == "React"
        assert data["recommendedTechnologies"][2]["setupTimeHours"] == 0.5
        assert data["features"][0]["estimatedHours"] == 3
        assert data["mvpScope"].startswith("<p>For a successful hackathon project")

    def test_accepts_snake_case_fields(self):
        payload = {
            "title": "Plant Watering Bot",
            "description": "Waters plants when soil moisture drops.",
            "complexity": "intermediate",
            "team_size": 2,
            "duration_hours": 36,
            "category": "hardware",
            "target_platform": ["iot"],
        }
        res = client.post("/estimate", json=payload)
        assert res.status_code == 200, res.text
        names = [t["name"] for t in res.json()["recommendedTechnologies"]]
        assert names == ["Arduino", "Raspberry Pi", "Johnny-Five", "Git", "GitHub"]

    def test_form_defaults_apply(self):
        res = client.post("/estimate", json={"title": "Idea", "description": "Something useful"})
        assert res.status_code == 200, res.text
        names = [t["name"] for t in res.json()["recommendedTechnologies"]]
        assert names[:4] == ["React", "Node.js", "Express", "MongoDB"]

    def test_unknown_category_is_not_an_error(self):
        res = client.post(
            "/estimate",
            json=_idea_payload(category="unknown-category", targetPlatform=["iot"]),
        )
        assert res.status_code == 200, res.text
        names = [t["name"] for t in res.json()["recommendedTechnologies"]]
        assert names == ["Git", "GitHub"]

    def test_empty_platform_list_is_not_an_error(self):
        res = client.post("/estimate", json=_idea_payload(targetPlatform=[]))
        assert res.status_code == 200, res.text

    def test_identical_requests_identical_reports(self):
        first = client.post("/estimate", json=_idea_payload(category="game"))
        second = client.post("/estimate", json=_idea_payload(category="game"))
        assert first.json() == second.json()

    def test_analysis_failure_returns_500(self):
        async def _boom(idea):
            raise RuntimeError("boom")

        with patch("hackathon_sage.routers.estimation.analyze_feasibility", new=_boom):
            res = client.post("/estimate", json=_idea_payload())

        assert res.status_code == 500
        assert res.json()["detail"] == "Analysis failed: boom"


class TestEstimateValidation:
    @pytest.mark.parametrize(
        "overrides",
        [
            {"teamSize": 0},
            {"teamSize": 9},
            {"durationHours": 0},
            {"durationHours": 78},
            {"durationHours": 10},
            {"complexity": "expert"},
            {"title": "   "},
            {"description": ""},
            {"category": "  "},
        ],
    )
    def test_rejects_out_of_domain_fields(self, overrides):
        res = client.post("/estimate", json=_idea_payload(**overrides))
        assert res.status_code == 422

    def test_title_required(self):
        payload = _idea_payload()
        del payload["title"]
        res = client.post("/estimate", json=payload)
        assert res.status_code == 422

    def test_duplicate_platforms_collapse(self):
        from hackathon_sage.schemas.idea_schema import HackathonIdea

        idea = HackathonIdea(**_idea_payload(targetPlatform=["web", "Web", "mobile", "web"]))
        assert idea.target_platform == ("web", "mobile")

    def test_idea_is_immutable(self):
        from pydantic import ValidationError

        from hackathon_sage.schemas.idea_schema import HackathonIdea

        idea = HackathonIdea(**_idea_payload(targetPlatform=["web", "mobile"]))
        with pytest.raises(ValidationError):
            idea.team_size = 5
        with pytest.raises(AttributeError):
            idea.target_platform.append("iot")
        assert idea.target_platform == ("web", "mobile")

    def test_idea_is_hashable(self):
        from hackathon_sage.schemas.idea_schema import HackathonIdea

        first = HackathonIdea(**_idea_payload())
        second = HackathonIdea(**_idea_payload())
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    @pytest.mark.parametrize("field", ["teamSize", "durationHours"])
    def test_rejects_boolean_numbers(self, field):
        res = client.post("/estimate", json=_idea_payload(**{field: True}))
        assert res.status_code == 422

    def test_rejects_numeric_strings(self):
        res = client.post("/estimate", json=_idea_payload(teamSize="4"))
        assert res.status_code == 422


# ===================================================================== #
#  GET /estimate/options and health                                      #
# ===================================================================== #

class TestOptionsEndpoint:
    def test_form_options(self):
        res = client.get("/estimate/options")
        assert res.status_code == 200
        data = res.json()

        assert len(data["categories"]) == 9
        assert data["categories"][0] == {"id": "web", "label": "Web Application"}
        assert data["categories"][-1] == {"id": "other", "label": "Other"}
        assert [p["id"] for p in data["platforms"]] == ["web", "mobile", "desktop", "iot", "ar-vr"]
        assert data["complexityLevels"] == ["beginner", "intermediate", "advanced"]
        assert data["teamSize"] == {"min": 1, "max": 8, "step": 1}
        assert data["durationHours"] == {"min": 6, "max": 72, "step": 6}
        assert data["defaults"] == {
            "complexity": "intermediate",
            "teamSize": 3,
            "durationHours": 24,
            "category": "web",
            "targetPlatform": ["web"],
        }


class TestHealth:
    def test_root(self):
        res = client.get("/")
        assert res.status_code == 200
        assert res.json()["name"] == "Hackathon Sage"
        assert res.json()["endpoints"] == [
            "POST /estimate",
            "GET /estimate/options",
            "GET /estimate/health",
        ]

    def test_global_health(self):
        res = client.get("/health")
        assert res.json()["status"] == "healthy"

    def test_estimator_health(self):
        res = client.get("/estimate/health")
        assert res.json() == {"status": "healthy", "service": "feasibility-estimator"}


class TestTimingOutput:
    def test_endpoint_prints_timing_lines(self, capsys):
        res = client.post("/estimate", json=_idea_payload())
        assert res.status_code == 200
        out = capsys.readouterr().out
        assert "[TIMING] estimate_endpoint: START" in out
        assert "[TIMING] estimate_endpoint: END - duration=" in out

    def test_failure_prints_timing_error(self, capsys):
        async def _boom(idea):
            raise RuntimeError("boom")

        with patch("hackathon_sage.routers.estimation.analyze_feasibility", new=_boom):
            client.post("/estimate", json=_idea_payload())

        assert "[TIMING] estimate_endpoint: ERROR after" in capsys.readouterr().out
