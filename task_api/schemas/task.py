"""
Pydantic schemas for Task API.
"""
from typing import Any, List
from pydantic import BaseModel, ConfigDict, Field, field_validator

TRUTHY_STRINGS = {"true", "1", "yes", "on"}


class TaskInput(BaseModel):
    """Schema for creating or replacing a task"""
    model_config = ConfigDict(extra="ignore")

    title: str = Field("", description="Task title")
    completed: bool = Field(False, description="Whether the task is done")

    @field_validator("title", mode="before")
    @classmethod
    def coerce_title(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("completed", mode="before")
    @classmethod
    def coerce_completed(cls, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return value != 0
        if isinstance(value, str):
            return value.strip().lower() in TRUTHY_STRINGS
        return False


class TaskResponse(BaseModel):
    """Schema for task response"""
    id: int = Field(..., description="Task ID")
    title: str = Field(..., description="Task title")
    completed: bool = Field(..., description="Whether the task is done")

    model_config = ConfigDict(from_attributes=True)


class TaskList(BaseModel):
    """Schema for paginated task list"""
    tasks: List[TaskResponse] = Field(..., description="Tasks on the requested page")
    page: int = Field(..., description="Page number")
    limit: int = Field(..., description="Page size")
    total: int = Field(..., description="Number of tasks matching the filter")


class ErrorResponse(BaseModel):
    """Schema for error responses"""
    error: str = Field(..., description="Error message")
