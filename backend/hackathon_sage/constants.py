"""Centralized constants shared by the estimator, the schemas and the routes.

This module is the single source of truth for the idea taxonomy
(categories, platforms, complexity levels), the input bounds and every
numeric factor the estimator applies. Reused by:
  - Feasibility agent rules and scoring engine
  - Request schema validation
  - GET /estimate/options (drives the input form)
"""

from __future__ import annotations

# ── Project categories ──────────────────────────────────────────────────
# Keys are the wire values; labels are what the input form displays.

CATEGORY_LABELS: dict[str, str] = {
    "web": "Web Application",
    "mobile": "Mobile App",
    "ai-ml": "AI/ML",
    "game": "Game",
    "hardware": "Hardware/IoT",
    "blockchain": "Blockchain",
    "data": "Data Visualization",
    "ar-vr": "AR/VR",
    "other": "Other",
}

CATEGORIES: list[str] = list(CATEGORY_LABELS)

# ── Target platforms ────────────────────────────────────────────────────

PLATFORM_LABELS: dict[str, str] = {
    "web": "Web",
    "mobile": "Mobile",
    "desktop": "Desktop",
    "iot": "IoT/Hardware",
    "ar-vr": "AR/VR",
}

PLATFORMS: list[str] = list(PLATFORM_LABELS)

# ── Complexity ──────────────────────────────────────────────────────────

COMPLEXITY_LEVELS: list[str] = ["beginner", "intermediate", "advanced"]

# Applied to the summed raw hours (features + setup)
COMPLEXITY_TIME_MODIFIERS: dict[str, float] = {
    "beginner": 0.7,
    "intermediate": 1.0,
    "advanced": 1.4,
}

# Applied to each feature's base hours before they are summed
FEATURE_HOUR_MULTIPLIERS: dict[str, float] = {
    "beginner": 0.8,
    "intermediate": 1.0,
    "advanced": 1.3,
}

# Team members needed per "unit" of complexity
TEAM_COMPLEXITY_DIVISORS: dict[str, int] = {
    "beginner": 1,
    "intermediate": 2,
    "advanced": 3,
}

# ── Input bounds ────────────────────────────────────────────────────────

TEAM_SIZE_MIN: int = 1
TEAM_SIZE_MAX: int = 8

DURATION_MIN_HOURS: int = 6
DURATION_MAX_HOURS: int = 72
DURATION_STEP_HOURS: int = 6

# Initial state of the input form
DEFAULT_COMPLEXITY: str = "intermediate"
DEFAULT_TEAM_SIZE: int = 3
DEFAULT_DURATION_HOURS: int = 24
DEFAULT_CATEGORY: str = "web"
DEFAULT_TARGET_PLATFORMS: list[str] = ["web"]

# ── Estimator shape ─────────────────────────────────────────────────────

MAX_TECHNOLOGIES: int = 6

# Timeline phase proportions (percent of total hours); sum to 100
SETUP_PERCENTAGE: int = 15
DEVELOPMENT_PERCENTAGE: int = 60
FINALIZATION_PERCENTAGE: int = 25

# ── Scoring ─────────────────────────────────────────────────────────────

MAX_OVERAGE_PENALTY: int = 50
MAX_TEAM_PENALTY: int = 30
MAX_SCOPE_PENALTY: int = 20

# Must-have features allowed before the scope penalty kicks in
MUST_HAVE_ALLOWANCE: int = 5
SCOPE_PENALTY_PER_FEATURE: int = 5

# Advice tiers (score >= threshold)
ADVICE_FEASIBLE_THRESHOLD: int = 80
ADVICE_AMBITIOUS_THRESHOLD: int = 60
ADVICE_CHALLENGING_THRESHOLD: int = 40

# Feasibility level bands (score >= threshold)
LEVEL_HIGH_THRESHOLD: int = 80
LEVEL_MODERATE_THRESHOLD: int = 50
