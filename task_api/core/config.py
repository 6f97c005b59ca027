"""
Configuration settings for Task API.
"""
import os
from typing import List
from dotenv import load_dotenv
from fastapi import Request

# Load environment variables
load_dotenv()


class Settings:
    """Application settings"""

    # Service information
    service_name: str = os.getenv("SERVICE_NAME", "task_api")
    service_version: str = os.getenv("SERVICE_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Server configuration
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # API configuration
    api_prefix: str = os.getenv("API_PREFIX", "")
    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))

    # Documentation
    docs_path: str = os.getenv("DOCS_PATH", "/api-docs")
    swagger_file: str = os.getenv("SWAGGER_FILE", "swagger.json")

    # CORS configuration
    allowed_origins: List[str] = os.getenv("ALLOWED_ORIGINS", "*").split(",")


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get settings instance."""
    return settings


def get_app_settings(request: Request) -> Settings:
    """
    Settings dependency for FastAPI

    Returns:
        Settings: Settings the running application was built with
    """
    return request.app.state.settings
