"""
Pydantic schemas for the quote API.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class RandomQuoteResponse(BaseModel):
    quote: str
    # None in the static variant, which drops the key from the response.
    author: Optional[str] = None


class QuotePayload(BaseModel):
    """A quote as listed by GET /quotes and accepted by POST /quotes."""

    model_config = ConfigDict(strict=True)

    id: int = 0
    text: str = ""
    author: str = ""

    @field_validator("id", "text", "author", mode="before")
    @classmethod
    def _null_as_zero_value(cls, value, info: ValidationInfo):
        # JSON null decodes to the field's zero value; wrong types still fail.
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class HealthResponse(BaseModel):
    status: Literal["ok"]
    variant: Literal["persistent", "static"]
    remote_store: bool
