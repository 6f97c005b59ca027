"""Pydantic schemas for Task API."""
from .task import ErrorResponse, TaskInput, TaskList, TaskResponse

__all__ = ["ErrorResponse", "TaskInput", "TaskList", "TaskResponse"]
