"""MT799 message models: parsed fields, stored rows, API payloads.

Field aliases are the wire names used in JSON bodies and as store column
names (``Reference``, ``RelatedReference``, ``Narrative``).
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ParsedMessage(BaseModel):
    """The three MT799 fields extracted from one uploaded message.

    Always complete: the parser never builds one with a field missing.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    reference: str = Field(alias="Reference")  # :20:
    related_reference: str = Field(alias="RelatedReference")  # :21:
    narrative: str = Field(alias="Narrative")  # :79:

    def as_fields(self) -> dict[str, str]:
        """Return the ``{wire name: value}`` mapping."""
        return self.model_dump(by_alias=True)


class SwiftMessageRow(ParsedMessage):
    """A persisted message with its store-assigned identity."""

    id: int


class PersistResult(BaseModel):
    """Outcome of a single store write."""

    saved: bool
    row_id: Optional[int] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, row_id: int) -> PersistResult:
        return cls(saved=True, row_id=row_id)

    @classmethod
    def failed(cls, reason: str) -> PersistResult:
        return cls(saved=False, error=reason)


class UploadResponse(BaseModel):
    """Body returned by ``POST /api/SwiftMessage``."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    parsed_fields: ParsedMessage = Field(alias="parsedFields")
    saved_to_database: bool = Field(alias="savedToDatabase")
