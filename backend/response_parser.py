"""
Extracts and validates the JSON object in Claude's reply.

Claude may prepend commentary or wrap the object in a markdown code block,
so extraction is a lenient brace scan; validation of the extracted object
is strict.
"""
import json
import logging
import re

from pydantic import ValidationError

from errors import MalformedJSONError, NoJSONFoundError, ResponseSchemaError
from models import TaskResponse

logger = logging.getLogger(__name__)

# Greedy: first "{" through last "}"
JSON_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


def extract_json_text(response_text: str) -> str:
    match = JSON_OBJECT_RE.search(response_text)
    if not match:
        raise NoJSONFoundError("No JSON found in AI response")
    return match.group(0)


def parse_ai_response(response_text: str) -> TaskResponse:
    """Parse Claude's raw reply into a TaskResponse. Field values are not coerced or trimmed."""
    json_text = extract_json_text(response_text)

    try:
        parsed = json.loads(json_text)
    except json.JSONDecodeError as e:
        logger.warning("AI response is not valid JSON: %s", e)
        raise MalformedJSONError(f"AI response contains invalid JSON: {e.msg}") from e

    try:
        return TaskResponse.model_validate(parsed)
    except ValidationError as e:
        first = e.errors()[0]
        field = str(first["loc"][0]) if first["loc"] else None
        logger.warning("AI response failed schema validation on %s: %s", field, first["msg"])
        raise ResponseSchemaError(
            f"AI response has invalid '{field}': {first['msg']}", field=field
        ) from e
