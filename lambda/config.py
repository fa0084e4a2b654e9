import os
from dataclasses import dataclass
from typing import Any, Optional

from notion_client import AsyncClient as NotionClient
from openai import AsyncOpenAI
from pydantic import BaseModel

from line_service import LineReplier
from utils import logging


class Settings(BaseModel):
    line_channel_secret: Optional[str] = None
    line_access_token: Optional[str] = None
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    notion_token: Optional[str] = None
    notion_database_id: Optional[str] = None
    port: int = 3000
    retry_max_attempts: int = 3
    retry_initial_delay: float = 1.0

    @classmethod
    def from_env(cls) -> "Settings":
        # Empty strings count as unset
        values = {
            "line_channel_secret": os.getenv("LINE_CHANNEL_SECRET"),
            "line_access_token": os.getenv("LINE_ACCESS_TOKEN"),
            "openai_api_key": os.getenv("OPENAI_API_KEY"),
            "openai_model": os.getenv("OPENAI_MODEL"),
            "notion_token": os.getenv("NOTION_TOKEN"),
            "notion_database_id": os.getenv("NOTION_DATABASE_ID"),
            "port": os.getenv("PORT"),
            "retry_max_attempts": os.getenv("RETRY_MAX_ATTEMPTS"),
            "retry_initial_delay": os.getenv("RETRY_INITIAL_DELAY"),
        }
        return cls(**{k: v for k, v in values.items() if v})


@dataclass
class AppContext:
    """Everything an event handler needs, built once per process."""
    settings: Settings
    openai: Optional[Any] = None
    notion: Optional[Any] = None
    line: Optional[Any] = None


def create_context(settings: Settings) -> AppContext:
    context = AppContext(settings=settings)

    if settings.openai_api_key:
        context.openai = AsyncOpenAI(api_key=settings.openai_api_key)
    else:
        logging.warning("OPENAI_API_KEY is not set, entries cannot be built")

    if settings.notion_token and settings.notion_database_id:
        context.notion = NotionClient(auth=settings.notion_token)
    else:
        logging.warning("NOTION_TOKEN or NOTION_DATABASE_ID is not set, entries cannot be saved")

    if settings.line_access_token:
        context.line = LineReplier(settings.line_access_token)
    else:
        logging.info("LINE_ACCESS_TOKEN is not set, replies are disabled")

    return context
