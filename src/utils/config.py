import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

from utils.logging_utils import setup_logging

logger = setup_logging(__name__)

REQUIRED_ENV_VARS = ("PUBLIC_BLOG_DOCUMENTS_PATH",)


def load_env_file() -> None:
    """Load the project's .env file when required variables are missing."""
    if not all(var in os.environ for var in REQUIRED_ENV_VARS):
        env_path = Path(__file__).resolve().parents[2] / ".env"
        logger.debug(f"Loading environment variables from {env_path}")
        if env_path.exists():
            load_dotenv(env_path)

        missing = [var for var in REQUIRED_ENV_VARS if var not in os.environ]
        if missing:
            logger.warning(
                "The following environment variables are still missing: "
                + ", ".join(missing)
            )
    else:
        logger.debug("All required environment variables are already present.")


class PublicBlogSettings(BaseSettings):
    """Settings for the public blog search service."""

    documents_path: str = Field(
        "data/blogs.json", description="JSON file holding the blog documents"
    )
    owner_user_id: str | None = Field(
        default=None,
        description="When set, only this user's published blogs are public",
    )
    default_page_size: int = Field(10, ge=1, description="Page size when omitted")
    max_page_size: int = Field(
        100, ge=1, description="Larger requested page sizes are clamped to this"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "PUBLIC_BLOG_",
        "extra": "ignore",
    }


class ClientsSettings(BaseSettings):
    """Settings for the public blog HTTP client."""

    base_url: str = Field(
        "http://localhost:8000", description="Root URL of the public blog API"
    )
    http_timeout: int = 10

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "PUBLIC_BLOG_CLIENT_",
        "case_sensitive": False,
        "extra": "ignore",
    }
