"""Pytest configuration and fixtures."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Must be set before hackathon_sage.config is imported by any test module
os.environ["ANALYSIS_DELAY_SECONDS"] = "0"
os.environ.setdefault("DEBUG", "false")

import pytest


def make_idea(**overrides):
    """Build a HackathonIdea with form defaults, overriding any field."""
    from hackathon_sage.schemas.idea_schema import HackathonIdea

    data = {
        "title": "AI Study Buddy",
        "description": "A chat assistant that quizzes students on their lecture notes.",
        "complexity": "intermediate",
        "team_size": 3,
        "duration_hours": 24,
        "category": "web",
        "target_platform": ["web"],
    }
    data.update(overrides)
    return HackathonIdea(**data)


@pytest.fixture
def idea_factory():
    return make_idea
