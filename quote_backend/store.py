"""
Quote storage abstraction for the Supabase REST table and an in-memory test
implementation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol

import requests

logger = logging.getLogger(__name__)

QUOTES_TABLE_PATH = "/rest/v1/quotes"


class RemoteStoreError(Exception):
    """Raised when the quote store cannot be reached or returns garbage."""


@dataclass(frozen=True)
class QuoteRecord:
    id: int
    text: str
    author: str = ""

    @classmethod
    def from_dict(cls, row: dict) -> "QuoteRecord":
        """
        Decode one row of the quote table.

        Missing keys take zero values; keys of the wrong type raise
        ValueError so the caller can treat the payload as malformed.
        """
        if not isinstance(row, dict):
            raise ValueError(f"Quote row must be an object, got {type(row).__name__}")
        quote_id = row.get("id")
        text = row.get("text")
        author = row.get("author")
        if quote_id is not None and (
            isinstance(quote_id, bool) or not isinstance(quote_id, int)
        ):
            raise ValueError(f"Quote id must be an integer, got {quote_id!r}")
        if text is not None and not isinstance(text, str):
            raise ValueError(f"Quote text must be a string, got {text!r}")
        if author is not None and not isinstance(author, str):
            raise ValueError(f"Quote author must be a string, got {author!r}")
        return cls(id=quote_id or 0, text=text or "", author=author or "")

    def as_dict(self) -> dict:
        return {"id": self.id, "text": self.text, "author": self.author}


class QuoteStore(Protocol):
    """Operations the API needs from the quote table."""

    def list_quotes(self) -> Optional[list[QuoteRecord]]:
        """Return every stored quote, or None when the store has no data to offer."""
        ...

    def create_quote(self, text: str, author: str) -> None:
        ...


@dataclass
class InMemoryQuoteStore:
    """Test double for the quote table. Ids are assigned on insert."""

    quotes: list[QuoteRecord] = field(default_factory=list)
    available: bool = True

    def list_quotes(self) -> Optional[list[QuoteRecord]]:
        if not self.available:
            return None
        return list(self.quotes)

    def create_quote(self, text: str, author: str) -> None:
        next_id = max((quote.id for quote in self.quotes), default=0) + 1
        self.quotes.append(QuoteRecord(id=next_id, text=text, author=author))

    def reset(self) -> None:
        self.quotes.clear()
        self.available = True


@dataclass
class SupabaseQuoteStore:
    """
    Client for the `quotes` table exposed through Supabase's PostgREST API.
    """

    base_url: str
    api_key: str
    timeout: Optional[float] = None

    @property
    def table_url(self) -> str:
        return self.base_url.rstrip("/") + QUOTES_TABLE_PATH

    def _headers(self) -> dict:
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
        }

    def list_quotes(self) -> Optional[list[QuoteRecord]]:
        """
        Fetch all rows of the quote table.

        Returns None on any non-200 status (the table may not exist yet).
        Raises RemoteStoreError on transport failures and malformed bodies.
        """
        try:
            response = requests.get(
                self.table_url,
                params={"select": "*"},
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise RemoteStoreError(f"Failed to fetch quotes: {exc}") from exc

        if response.status_code != 200:
            logger.info(
                "Quote table returned HTTP %s; treating as no data",
                response.status_code,
            )
            return None

        try:
            rows = response.json()
        except ValueError as exc:
            raise RemoteStoreError(f"Quote table returned invalid JSON: {exc}") from exc
        if not isinstance(rows, list):
            raise RemoteStoreError(
                f"Quote table returned {type(rows).__name__}, expected a list"
            )
        try:
            return [QuoteRecord.from_dict(row) for row in rows]
        except ValueError as exc:
            raise RemoteStoreError(f"Malformed quote row: {exc}") from exc

    def create_quote(self, text: str, author: str) -> None:
        """
        Insert one quote; the table assigns its id.

        Only transport failures raise. The response status is not used to
        decide the outcome, so a row rejected by the table still counts as
        written.
        """
        headers = self._headers()
        headers["Content-Type"] = "application/json"
        try:
            response = requests.post(
                self.table_url,
                json={"text": text, "author": author},
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise RemoteStoreError(f"Failed to create quote: {exc}") from exc

        if not response.ok:
            logger.warning(
                "Quote table answered HTTP %s to insert; ignoring",
                response.status_code,
            )
