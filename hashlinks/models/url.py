"""Pydantic models for Hash Links."""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ShortenRequest(BaseModel):
    """Body of a shorten request.

    Keys are matched case-insensitively, a ``null`` body or ``url`` value
    leaves the field at its default, and unknown keys are ignored.
    """

    url: Optional[str] = Field("", description="The original URL to shorten")

    @model_validator(mode="before")
    @classmethod
    def fold_keys(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        folded = {}
        for key, value in data.items():
            # Later keys win, null values are skipped
            if isinstance(key, str) and key.lower() == "url" and value is not None:
                folded["url"] = value
        return folded

    @field_validator("url")
    @classmethod
    def null_to_empty(cls, value: Optional[str]) -> str:
        return value or ""


class URLRecord(BaseModel):
    """Stored mapping from a short code to its original URL."""

    model_config = ConfigDict(frozen=True)

    id: str
    original_url: str
    short_code: str
    creation_time: datetime
