from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

from .constants import (
  DEFAULT_FIELDS,
  DEFAULT_KEY_FIELD,
  DEFAULT_PAGE_CEILING,
  DEFAULT_PAGE_SIZE,
  DEFAULT_REQUEST_TIMEOUT,
  DEFAULT_SOURCE_URL,
)

# Ensure environment variables from the repository root .env are available
# regardless of the working directory used to start the process.
ROOT_DIR = Path(__file__).resolve().parents[1]
load_dotenv(ROOT_DIR / ".env")


class Settings(BaseSettings):
  collection_source_url: str = Field(default=DEFAULT_SOURCE_URL, alias="COLLECTION_SOURCE_URL")
  collection_fields: str = Field(default=",".join(DEFAULT_FIELDS), alias="COLLECTION_FIELDS")
  collection_key_field: str = Field(default=DEFAULT_KEY_FIELD, alias="COLLECTION_KEY_FIELD")
  page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0, alias="COLLECTION_PAGE_SIZE")
  page_ceiling: int = Field(default=DEFAULT_PAGE_CEILING, gt=0, alias="COLLECTION_PAGE_CEILING")
  request_timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0, alias="COLLECTION_REQUEST_TIMEOUT")

  def ensure_source_url(self) -> str:
    return (self.collection_source_url or "").strip().rstrip("/")

  def field_list(self) -> Tuple[str, ...]:
    fields = [name.strip() for name in (self.collection_fields or "").split(",") if name.strip()]
    if self.collection_key_field not in fields:
      fields.insert(0, self.collection_key_field)
    return tuple(fields)

  class Config:
    case_sensitive = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  return Settings()  # type: ignore[arg-type]
