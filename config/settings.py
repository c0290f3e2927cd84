"""Application-wide configuration loaded from environment variables."""

import os

from dotenv import load_dotenv

load_dotenv()

# ── Gemini (advisory collaborator) ───────────────────────────────────────

GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "models/gemini-2.5-flash")
GEMINI_TEMPERATURE: float = float(os.getenv("GEMINI_TEMPERATURE", "0.2"))
GEMINI_TOP_P: float = float(os.getenv("GEMINI_TOP_P", "0.9"))
GEMINI_MAX_OUTPUT_TOKENS: int = int(os.getenv("GEMINI_MAX_OUTPUT_TOKENS", "2048"))

# A hung advisory call is cut off here and counts as a failed analysis
ADVISORY_TIMEOUT_SECONDS: float = float(os.getenv("ADVISORY_TIMEOUT_SECONDS", "60"))

# Worker threads shared by all sessions; each session still runs one call at a time
ADVISORY_WORKERS: int = int(os.getenv("ADVISORY_WORKERS", "4"))

# ── Projection ───────────────────────────────────────────────────────────

HORIZON_YEARS: int = 5  # current year through +5, six points

# ── Server ───────────────────────────────────────────────────────────────

FLASK_SECRET_KEY: str = os.getenv("FLASK_SECRET_KEY", "dev-secret")
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
