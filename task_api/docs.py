"""
Swagger document generator for Task API.

The document is assembled from static data, not derived from the routes, and
is written to disk once so the Swagger UI page can serve it.
"""
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .core.config import Settings, get_settings

logger = logging.getLogger(__name__)

TAGS = ["Tasks"]

TASK_ID_PARAMETER = {
    "name": "id",
    "in": "path",
    "description": "Task ID",
    "required": True,
    "type": "integer",
}

TASK_BODY_PARAMETER = {
    "name": "task",
    "in": "body",
    "description": "Task object",
    "required": True,
    "schema": {"$ref": "#/definitions/TaskInput"},
}

TASK_RESPONSE = {"$ref": "#/definitions/Task"}

NOT_FOUND_RESPONSE = {
    "description": "Task not found",
    "schema": {"$ref": "#/definitions/Error"},
}


def _list_operation(default_page_size: int) -> Dict[str, Any]:
    return {
        "tags": TAGS,
        "summary": "List tasks",
        "description": "Returns tasks with optional filtering, sorting and pagination",
        "parameters": [
            {
                "name": "completed",
                "in": "query",
                "description": "Filter by completion status",
                "required": False,
                "type": "boolean",
            },
            {
                "name": "sortBy",
                "in": "query",
                "description": "Sort by task title",
                "required": False,
                "type": "string",
                "enum": ["title"],
            },
            {
                "name": "page",
                "in": "query",
                "description": "Page number",
                "required": False,
                "type": "integer",
                "default": 1,
            },
            {
                "name": "limit",
                "in": "query",
                "description": "Number of tasks per page",
                "required": False,
                "type": "integer",
                "default": default_page_size,
            },
        ],
        "responses": {
            "200": {
                "description": "Successful request",
                "schema": {"$ref": "#/definitions/TaskList"},
            },
        },
    }


def build_swagger_document(settings: Optional[Settings] = None) -> Dict[str, Any]:
    """
    Build the Swagger 2.0 description of the task routes.

    Args:
        settings: Settings providing version, prefix and page size

    Returns:
        dict: Swagger document ready to be serialized as JSON
    """
    settings = settings or get_settings()
    prefix = settings.api_prefix.rstrip("/")

    return {
        "swagger": "2.0",
        "info": {
            "version": settings.service_version,
            "title": "Task API",
            "description": "API for managing tasks",
        },
        "basePath": prefix or "/",
        "consumes": ["application/json"],
        "produces": ["application/json"],
        "paths": {
            "/tasks": {
                "get": _list_operation(settings.default_page_size),
                "post": {
                    "tags": TAGS,
                    "summary": "Create a task",
                    "description": "Adds a new task to the list",
                    "parameters": [TASK_BODY_PARAMETER],
                    "responses": {
                        "201": {"description": "Task created", "schema": TASK_RESPONSE},
                    },
                },
            },
            "/tasks/{id}": {
                "get": {
                    "tags": TAGS,
                    "summary": "Get a task",
                    "description": "Returns a task by its ID",
                    "parameters": [TASK_ID_PARAMETER],
                    "responses": {
                        "200": {"description": "Successful request", "schema": TASK_RESPONSE},
                        "404": NOT_FOUND_RESPONSE,
                    },
                },
                "put": {
                    "tags": TAGS,
                    "summary": "Replace a task",
                    "description": "Overwrites the title and status of a task by its ID",
                    "parameters": [TASK_ID_PARAMETER, TASK_BODY_PARAMETER],
                    "responses": {
                        "200": {"description": "Task updated", "schema": TASK_RESPONSE},
                        "404": NOT_FOUND_RESPONSE,
                    },
                },
                "delete": {
                    "tags": TAGS,
                    "summary": "Delete a task",
                    "description": "Removes a task by its ID and returns it",
                    "parameters": [TASK_ID_PARAMETER],
                    "responses": {
                        "200": {"description": "Task deleted", "schema": TASK_RESPONSE},
                        "404": NOT_FOUND_RESPONSE,
                    },
                },
            },
        },
        "definitions": {
            "Task": {
                "type": "object",
                "properties": {
                    "id": {"type": "integer"},
                    "title": {"type": "string"},
                    "completed": {"type": "boolean"},
                },
            },
            "TaskInput": {
                "type": "object",
                "properties": {
                    "title": {"type": "string"},
                    "completed": {"type": "boolean"},
                },
            },
            "TaskList": {
                "type": "object",
                "properties": {
                    "tasks": {"type": "array", "items": TASK_RESPONSE},
                    "page": {"type": "integer"},
                    "limit": {"type": "integer"},
                    "total": {"type": "integer"},
                },
            },
            "Error": {
                "type": "object",
                "properties": {
                    "error": {"type": "string"},
                },
            },
        },
    }


def write_swagger_document(path, settings: Optional[Settings] = None) -> Path:
    """Serialize the Swagger document to path and return it."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(build_swagger_document(settings), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    logger.info(f"Swagger document written to {path}")
    return path


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    target = sys.argv[1] if len(sys.argv) > 1 else get_settings().swagger_file
    write_swagger_document(target)
