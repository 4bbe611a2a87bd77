"""
Pydantic schemas for exported request records.

RequestRecord is the in-memory form of a stored request log row. Its
field names are the field names of the exported JSON document, which
downstream tooling re-ingests, so they must stay stable.
"""

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict

API_VERSION_PREFIX = "/v1/"
CHAT_COMPLETIONS_SUFFIX = "/chat/completions"

SelectorKind = Literal["id", "chatcmpl", "requestid"]


class Category(str, Enum):
    """Classification a reviewer can attach to a chat record."""
    GOODCASE = "goodcase"
    BADCASE = "badcase"


class RequestRecord(BaseModel):
    """
    Schema for a recorded request with all stored fields.

    Nullable columns stay None when absent, so an empty body or header
    block ("") remains distinguishable from a missing one. ``category``
    and ``tags`` are annotations made at export time and are never
    written back to the store.
    """
    id: int
    chatcmpl_id: str | None = None
    request_id: str | None = None
    moonshot_uid: str | None = None
    request_method: str
    request_path: str
    request_query: str | None = None
    request_header: str | None = None
    request_body: str | None = None
    response_status_code: int | None = None
    response_header: str | None = None
    response_body: str | None = None
    created_at: datetime
    category: Category | None = None
    tags: list[str] | None = None

    model_config = ConfigDict(from_attributes=True)

    def is_chat(self) -> bool:
        """Whether the record is a chat completion call."""
        return (
            self.request_method.upper() == "POST"
            and self.request_path.endswith(CHAT_COMPLETIONS_SUFFIX)
        )

    def ident(self) -> str:
        """
        Return the primary identifier of the record as ``kind=value``.

        Symbolic identifiers win over the row id:
            chatcmpl=<chatcmpl_id>, then requestid=<request_id>, then id=<id>
        """
        if self.chatcmpl_id:
            return f"chatcmpl={self.chatcmpl_id}"
        if self.request_id:
            return f"requestid={self.request_id}"
        return f"id={self.id}"

    def url(self, base_url: str) -> str:
        """Rebuild the full URL the request was sent to."""
        url = base_url.rstrip("/") + self.request_path
        if self.request_query:
            url = f"{url}?{self.request_query}"
        return url


class RequestSelector(BaseModel):
    """A single resolved lookup key for the request store."""
    kind: SelectorKind
    value: int | str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def resolve(
        cls,
        id: int | None = None,
        chatcmpl: str | None = None,
        requestid: str | None = None
    ) -> "RequestSelector":
        """
        Pick one selector from the supplied identifiers.

        Precedence is row id, then completion id, then request id.

        Raises:
            ValueError: if no identifier is supplied
        """
        if id is not None:
            return cls(kind="id", value=id)
        if chatcmpl:
            return cls(kind="chatcmpl", value=chatcmpl)
        if requestid:
            return cls(kind="requestid", value=requestid)
        raise ValueError("one of id, chatcmpl or requestid is required")

    def __str__(self) -> str:
        return f"{self.kind}={self.value}"
