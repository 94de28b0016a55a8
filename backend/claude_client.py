import logging
from datetime import date
from typing import Optional

import anthropic

from config import MAX_TOKENS, MODEL, REQUEST_TIMEOUT_SECONDS, TEMPERATURE
from errors import AIServiceError, AIServiceTimeoutError, ConfigurationError, ResponseParseError
from models import TaskResponse
from prompts import build_system_prompt
from response_parser import parse_ai_response

logger = logging.getLogger(__name__)


class ClaudeClient:
    """Sends a task to Claude and returns its structured categorization."""

    def __init__(
        self,
        api_key: Optional[str],
        client: Optional[anthropic.AsyncAnthropic] = None,
        model: str = MODEL,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ):
        if not api_key:
            raise ConfigurationError("ANTHROPIC_API_KEY environment variable is required")
        self.model = model
        # One outbound call per submission: SDK retries are disabled
        self.client = client or anthropic.AsyncAnthropic(
            api_key=api_key, timeout=timeout, max_retries=0
        )

    async def send(self, system_prompt: str, task: str) -> str:
        """Make the single model call and return the concatenated reply text."""
        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=MAX_TOKENS,
                temperature=TEMPERATURE,
                system=system_prompt,
                messages=[{"role": "user", "content": task}],
            )
        except anthropic.APITimeoutError as e:
            raise AIServiceTimeoutError("Claude API request timed out") from e
        except anthropic.APIError as e:
            raise AIServiceError(f"Claude API error: {e}") from e

        text = "".join(block.text for block in response.content if block.type == "text")
        if not text:
            raise ResponseParseError("No text response from AI")
        logger.debug("Claude response: %s", text)
        return text

    async def analyze_task(self, task: str, today: Optional[date] = None) -> TaskResponse:
        system_prompt = build_system_prompt(today)
        response_text = await self.send(system_prompt, task)
        result = parse_ai_response(response_text)
        logger.info(
            "Analyzed task: category=%s priority=%s due_date=%s",
            result.category.value,
            result.priority.value,
            result.due_date,
        )
        return result
