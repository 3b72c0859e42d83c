"""
Domain value objects for error translation.

They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from errorbridge.domain.errors import ErrorKind


@dataclass(frozen=True)
class KindRule:
    """How one error kind maps onto an HTTP outcome.

    Attributes:
        kind: The kind this rule applies to, or None for the fallback rule.
        status_code: HTTP status code of the outcome.
        default_message: Message used when the error has none.
        carries_data: Whether the error's data is part of the payload.
        auth_header: Whether the error's data becomes the
            ``www-authenticate`` header.
    """

    kind: Optional[ErrorKind]
    status_code: int
    default_message: str
    carries_data: bool = False
    auth_header: bool = False


@dataclass(frozen=True)
class Outcome:
    """Normalized HTTP description of a translated error."""

    status_code: int
    message: str
    kind: Optional[ErrorKind] = None
    data: Any = None
    has_data: bool = False
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def content_type(self) -> str:
        return self.headers["content-type"]

    @property
    def extra_headers(self) -> dict[str, str]:
        """Headers other than the content type."""
        return {k: v for k, v in self.headers.items() if k != "content-type"}

    def payload(self) -> dict[str, Any]:
        """JSON body: ``{"message": ...}`` plus ``"data"`` when carried."""
        body: dict[str, Any] = {"message": self.message}
        if self.has_data:
            body["data"] = self.data
        return body
