"""
Error taxonomy for task analysis.

Every error carries a short label and the HTTP status the API answers with.
Input validation failures are not exceptions: see validation.validate_task_request.
"""
from typing import Optional


class TaskAnalysisError(Exception):
    """Base class for failures after the input has been accepted."""

    label = "Analysis failed"
    status_code = 500
    public_message = "Unable to analyze the task. Please try again."


class ConfigurationError(TaskAnalysisError):
    """The service credentials needed for the model call are missing."""

    label = "Server configuration error"
    status_code = 500
    public_message = "AI service is not properly configured"


class ResponseParseError(TaskAnalysisError):
    """The model replied, but the reply could not be turned into a TaskResponse."""


class NoJSONFoundError(ResponseParseError):
    pass


class MalformedJSONError(ResponseParseError):
    pass


class ResponseSchemaError(ResponseParseError):
    """A JSON object was found but a field has the wrong value or format."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class AIServiceError(TaskAnalysisError):
    """The outbound call to the model provider failed."""

    label = "AI service error"
    status_code = 503
    public_message = "The AI service encountered an error. Please try again."


class AIServiceTimeoutError(AIServiceError):
    public_message = "The AI service took too long to respond. Please try again."
