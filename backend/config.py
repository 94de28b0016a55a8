import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# Claude model settings for task analysis
# Low temperature favors consistent categorization over creative variation
MODEL = "claude-haiku-4-5-20251001"
MAX_TOKENS = 1024
TEMPERATURE = 0.2
REQUEST_TIMEOUT_SECONDS = 30.0

TASK_MIN_LENGTH = 3
TASK_MAX_LENGTH = 500

CORS_ORIGINS = ["http://localhost:3000"]

API_KEY_PLACEHOLDER = "your-api-key-here"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_api_key() -> Optional[str]:
    """Return the Anthropic API key, or None if it is unset or still the placeholder."""
    api_key = os.getenv("ANTHROPIC_API_KEY")
    if not api_key or api_key == API_KEY_PLACEHOLDER:
        return None
    return api_key


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
