"""
Configuration
--------------
Loads the Gemini API key and app settings from a .env file or environment
variables. A missing key is reported when generation is attempted, not here,
so the dashboard and library still work without one.
"""

import os
from pathlib import Path

# Load .env manually (no python-dotenv required)
_env_path = Path(__file__).parent / ".env"
if _env_path.exists():
    with open(_env_path) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                k, v = line.split("=", 1)
                os.environ.setdefault(k.strip(), v.strip())

GEMINI_API_KEY: str = os.environ.get("GEMINI_API_KEY", "")
GEMINI_MODEL:   str = os.environ.get("GEMINI_MODEL", "gemini-2.0-flash")
GENERATION_TIMEOUT_S: float = float(os.environ.get("GENERATION_TIMEOUT_S", "60"))

TRACEABILITY_PREFIX: str = os.environ.get("TRACEABILITY_PREFIX", "REQ-GEN")
MAX_PENDING_BATCHES: int = int(os.environ.get("MAX_PENDING_BATCHES", "20"))

# Jira export is simulated while JIRA_BASE_URL is empty
JIRA_BASE_URL:    str = os.environ.get("JIRA_BASE_URL", "")
JIRA_PROJECT_KEY: str = os.environ.get("JIRA_PROJECT_KEY", "MED")
JIRA_TOKEN:       str = os.environ.get("JIRA_TOKEN", "")
JIRA_TIMEOUT_S: float = float(os.environ.get("JIRA_TIMEOUT_S", "30"))

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
PORT:      int = int(os.environ.get("PORT", "10000"))

MISSING_KEY_HELP = (
    "GEMINI_API_KEY is not set. "
    "Get a key at https://aistudio.google.com/app/apikey and add "
    "GEMINI_API_KEY=your_key_here to a .env file in the project root."
)
