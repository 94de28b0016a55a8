from enum import Enum
from typing import Annotated, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictStr, StringConstraints, field_validator

from config import TASK_MAX_LENGTH, TASK_MIN_LENGTH

DUE_DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"  # ASCII digits only

T = TypeVar("T")


class TaskCategory(str, Enum):
    WORK = "Work"
    PERSONAL = "Personal"
    HEALTH = "Health"
    FINANCE = "Finance"
    OTHER = "Other"


class TaskPriority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class TaskRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    task: StrictStr  # Trimmed on validation

    @field_validator("task")
    @classmethod
    def trim_and_check_length(cls, value: str) -> str:
        value = value.strip()
        if len(value) < TASK_MIN_LENGTH:
            raise ValueError(f"Task must be at least {TASK_MIN_LENGTH} characters")
        if len(value) > TASK_MAX_LENGTH:
            raise ValueError(f"Task cannot exceed {TASK_MAX_LENGTH} characters")
        return value


class TaskResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: TaskCategory
    priority: TaskPriority
    reasoning: str = Field(min_length=1)
    due_date: Optional[Annotated[str, StringConstraints(pattern=DUE_DATE_PATTERN)]]  # YYYY-MM-DD or null


class ValidationResult(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: T) -> "ValidationResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "ValidationResult[T]":
        return cls(success=False, error=error)
