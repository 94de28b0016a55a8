import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from claude_client import ClaudeClient
from config import CORS_ORIGINS, configure_logging, get_api_key
from errors import ConfigurationError, TaskAnalysisError
from models import TaskCategory
from samples import get_sample_tasks
from validation import validate_task_request

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # Startup
    configure_logging()
    yield
    # Shutdown (nothing to do)

app = FastAPI(title="Smart Task Analyzer", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ENDPOINT_DESCRIPTION = {
    "status": "ok",
    "endpoint": "/api/analyze-task",
    "method": "POST",
    "description": "Analyze a task and return category, priority, and due date",
    "example": {
        "request": {"task": "Fix bug in auth module - urgent"},
        "response": {
            "category": "Work",
            "priority": "High",
            "reasoning": "Technical work task with explicit urgency indicator",
            "due_date": None,
        },
    },
}


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    """Return a standardized JSON error response."""
    return JSONResponse(status_code=status_code, content={"error": error, "message": message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Invalid request at %s: %s", request.url.path, exc.errors())
    return error_response(400, "Invalid request", "Request parameters are invalid")


def get_claude_client() -> ClaudeClient:
    return ClaudeClient(get_api_key())


@app.get("/api/analyze-task")
def describe_endpoint() -> dict:
    """Static contract description, also used as a health probe."""
    return ENDPOINT_DESCRIPTION


@app.get("/api/sample-tasks")
def sample_tasks(category: Optional[TaskCategory] = None) -> list[dict]:
    return get_sample_tasks(category)


@app.post("/api/analyze-task")
async def analyze_task(request: Request):
    """Validate the task, send it to Claude and return the structured categorization."""
    try:
        body = await request.json()
    except ValueError:
        return error_response(400, "Invalid request", "Request body must be valid JSON")

    validation = validate_task_request(body)
    if not validation.success:
        return error_response(400, "Invalid input", validation.error)

    try:
        client = get_claude_client()
        result = await client.analyze_task(validation.data.task)
    except ConfigurationError as e:
        logger.error("Server configuration error: %s", e)
        return error_response(e.status_code, e.label, e.public_message)
    except TaskAnalysisError as e:
        logger.warning("Task analysis failed (%s): %s", type(e).__name__, e)
        return error_response(e.status_code, e.label, e.public_message)
    except Exception:
        logger.exception("Unexpected error while analyzing task")
        return error_response(500, "Analysis failed", "Unable to analyze the task. Please try again.")

    return result.model_dump(mode="json")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
