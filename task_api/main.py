"""
Task API - Main application module.
"""
import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional
from fastapi import FastAPI, Request, HTTPException, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import Settings, get_settings
from .core.store import TaskStore
from .docs import write_swagger_document
from .routers import tasks

# Configure logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its own task store."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Task API",
        description="In-memory task management service",
        version=settings.service_version,
        docs_url=None,
        redoc_url=None
    )
    app.state.settings = settings
    app.state.store = TaskStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        """Log all requests with timing"""
        start_time = time.time()

        response = await call_next(request)
        process_time = time.time() - start_time

        response.headers["X-Process-Time"] = str(process_time)

        # Skip logging for health checks to reduce noise
        if request.url.path != "/health":
            logger.info(f"{request.method} {request.url.path} - {response.status_code} ({process_time:.3f}s)")

        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Render HTTP errors as {"error": detail}"""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle malformed requests"""
        logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=422,
            content={"error": "Invalid request"}
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions"""
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error" if not settings.debug else str(exc)}
        )

    app.include_router(
        tasks.router,
        prefix=settings.api_prefix + "/tasks",
        tags=["tasks"]
    )

    @app.on_event("startup")
    async def startup_event():
        """Write the Swagger document on startup"""
        logger.info("Starting Task API...")
        write_swagger_document(settings.swagger_file, settings)
        logger.info(f"Task store seeded with {len(app.state.store)} tasks")
        logger.info(f"API documentation available at {settings.docs_path}")

    @app.get(settings.docs_path, include_in_schema=False)
    async def swagger_ui():
        """Swagger UI over the generated document"""
        return get_swagger_ui_html(
            openapi_url=settings.docs_path + "/swagger.json",
            title="Task API - Swagger UI"
        )

    @app.get(settings.docs_path + "/swagger.json", include_in_schema=False)
    async def swagger_document():
        """Serve the generated Swagger document"""
        path = Path(settings.swagger_file)
        if not path.is_file():
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="API documentation has not been generated"
            )
        return FileResponse(path, media_type="application/json")

    @app.get("/")
    async def root() -> Dict[str, Any]:
        """Root endpoint"""
        return {
            "service": settings.service_name,
            "version": settings.service_version,
            "status": "running",
            "docs": settings.docs_path
        }

    @app.get("/health")
    async def health_check() -> Dict[str, Any]:
        """Health check endpoint"""
        return {
            "service": settings.service_name,
            "version": settings.service_version,
            "status": "healthy",
            "tasks": len(app.state.store),
            "timestamp": time.time()
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "task_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
