"""
Pydantic schemas for translated error responses.

These schemas define the JSON contract clients see for every error.
No classification logic belongs here.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from errorbridge.domain.entities import Outcome


class ErrorPayload(BaseModel):
    """JSON body of an error response.

    Attributes:
        message: Human-readable error description. Never empty.
        data: Structured details. Only present for kinds that carry data.
    """

    message: str = Field(..., min_length=1)
    data: Any = None

    @classmethod
    def from_outcome(cls, outcome: Outcome) -> "ErrorPayload":
        """Build the payload, leaving ``data`` unset when not carried."""
        return cls(**outcome.payload())

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ErrorOutput(BaseModel):
    """Full HTTP description carried by a boxed error."""

    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(..., alias="statusCode", ge=400, le=599)
    headers: dict[str, str] = Field(default_factory=dict)
    payload: ErrorPayload

    def to_dict(self) -> dict[str, Any]:
        """Dump with camelCase keys, omitting unset payload data."""
        return self.model_dump(by_alias=True, exclude_unset=True)
