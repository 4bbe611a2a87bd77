"""
Request log model for recorded Moonshot AI API calls.

Each row holds one request as it was received by the recording proxy,
together with the upstream response.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base


class RequestLog(Base):
    """
    SQLAlchemy model for a recorded API request.

    Attributes:
        id: Row identifier assigned at ingestion
        chatcmpl_id: Completion id returned for chat requests (chatcmpl-...)
        request_id: Request id returned by Moonshot AI for other requests
        moonshot_uid: Caller UID the request was made on behalf of
        request_method: HTTP method of the request
        request_path: URL path, always below /v1/
        request_query: Raw query string without the leading "?"
        request_header: Raw MIME-style header block
        request_body: Raw request body
        response_status_code: HTTP status code returned upstream
        response_header: Raw MIME-style response header block
        response_body: Raw response body
        created_at: Timestamp when the request was recorded
    """
    __tablename__ = "request_logs"

    id: Mapped[int] = mapped_column(primary_key=True)
    chatcmpl_id: Mapped[Optional[str]] = mapped_column(
        String(128), nullable=True, index=True
    )
    request_id: Mapped[Optional[str]] = mapped_column(
        String(128), nullable=True, index=True
    )
    moonshot_uid: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    request_method: Mapped[str] = mapped_column(String(10))
    request_path: Mapped[str] = mapped_column(Text)
    request_query: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    request_header: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    request_body: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    response_status_code: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    response_header: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    response_body: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
