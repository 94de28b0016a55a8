import logging
from typing import Any

from pydantic import ValidationError

from models import TaskRequest, ValidationResult

logger = logging.getLogger(__name__)

_TYPE_MESSAGES = {
    "missing": "Task is required",
    "string_type": "Task must be a string",
    "model_type": "Request body must be an object with a 'task' field",
    "dict_type": "Request body must be an object with a 'task' field",
}


def _error_message(exc: ValidationError) -> str:
    """Pick a human-readable message from the first pydantic error."""
    errors = exc.errors()
    if not errors:
        return "Invalid input"
    first = errors[0]
    ctx_error = first.get("ctx", {}).get("error")
    if ctx_error is not None:
        return str(ctx_error)
    return _TYPE_MESSAGES.get(first["type"], first.get("msg") or "Invalid input")


def validate_task_request(value: Any) -> ValidationResult[TaskRequest]:
    """
    Validate an incoming request body.
    Never raises: every malformed shape becomes a failed ValidationResult.
    """
    try:
        request = TaskRequest.model_validate(value)
    except ValidationError as exc:
        message = _error_message(exc)
        logger.warning("Rejected task input: %s", message)
        return ValidationResult[TaskRequest].fail(message)
    return ValidationResult[TaskRequest].ok(request)
