"""
Service configuration read from the environment (and a local .env file).
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Storage
DATA_FILE = os.getenv("DATA_FILE", "stay_data.json")
MAX_ENTRY_LENGTH = int(os.getenv("MAX_ENTRY_LENGTH", "50000"))  # Characters
MAX_TAGS = int(os.getenv("MAX_TAGS", "10"))
MAX_TAG_LENGTH = 30
MAX_COMMENT_LENGTH = 500

# AI Configuration
GROQ_API_KEY = os.getenv("GROQ_API_KEY")
AI_MODEL = os.getenv("AI_MODEL", "llama-3.1-8b-instant")
AI_TIMEOUT = float(os.getenv("AI_TIMEOUT", "30"))
AI_MAX_TOKENS = int(os.getenv("AI_MAX_TOKENS", "1024"))
INSIGHTS_USE_AI = _flag("INSIGHTS_USE_AI")

# Server
PORT = int(os.getenv("PORT", "5000"))
DEBUG = _flag("FLASK_DEBUG")


class Config:
    DEBUG = DEBUG
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # Photos arrive as data URLs
