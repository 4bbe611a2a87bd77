"""
Tests for loading stored requests from the database.

Covers selector resolution, lookups by each identifier kind, and the
separation of "not found" from other storage failures.
"""

from contextlib import contextmanager
from datetime import datetime

import pytest
from hypothesis import given, strategies as st, settings
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from moonshot_export.database import Base, init_db, session_scope
from moonshot_export.exceptions import RecordNotFoundError, StorageError
from moonshot_export.models.request_log import RequestLog
from moonshot_export.schemas.request_record import RequestSelector
from moonshot_export.services.record_locator import get_request


# Test database setup
TEST_DATABASE_URL = "sqlite:///./test_record_locator.db"
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False}
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@contextmanager
def get_test_db():
    """Context manager yielding a session on a freshly created schema."""
    init_db(test_engine)
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=test_engine)


def create_request_log_directly(db, **overrides) -> RequestLog:
    """Create a request log row directly in the database."""
    data = {
        "request_method": "POST",
        "request_path": "/v1/chat/completions",
        "request_header": "Content-Type: application/json",
        "request_body": '{"model": "moonshot-v1-8k"}',
        "response_status_code": 200,
        "created_at": datetime(2024, 1, 2, 3, 4, 5),
    }
    data.update(overrides)
    row = RequestLog(**data)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


class TestRequestSelectorResolution:
    """Tests for picking a selector from the supplied identifiers."""

    def test_id_takes_precedence(self):
        selector = RequestSelector.resolve(5, "chatcmpl-x", "req-x")
        assert (selector.kind, selector.value) == ("id", 5)

    def test_chatcmpl_before_requestid(self):
        selector = RequestSelector.resolve(None, "chatcmpl-x", "req-x")
        assert (selector.kind, selector.value) == ("chatcmpl", "chatcmpl-x")

    def test_requestid_alone(self):
        selector = RequestSelector.resolve(requestid="req-x")
        assert str(selector) == "requestid=req-x"

    def test_nothing_supplied(self):
        with pytest.raises(ValueError):
            RequestSelector.resolve(None, "", None)


class TestGetRequest:
    """Tests for get_request lookups."""

    def test_lookup_by_each_identifier(self):
        with get_test_db() as db:
            row = create_request_log_directly(
                db, chatcmpl_id="chatcmpl-abc", moonshot_uid="u-1"
            )
            other = create_request_log_directly(
                db, request_method="GET", request_path="/v1/models", request_id="req-123"
            )

            by_id = get_request(db, RequestSelector(kind="id", value=row.id))
            by_chatcmpl = get_request(db, RequestSelector(kind="chatcmpl", value="chatcmpl-abc"))
            by_request_id = get_request(db, RequestSelector(kind="requestid", value="req-123"))

            assert by_id == by_chatcmpl
            assert by_id.moonshot_uid == "u-1"
            assert by_id.request_header == "Content-Type: application/json"
            assert by_id.category is None and by_id.tags is None
            assert by_request_id.id == other.id
            assert by_request_id.ident() == "requestid=req-123"

    def test_nullable_columns_stay_absent(self):
        with get_test_db() as db:
            row = create_request_log_directly(db, request_header=None, request_body="")

            record = get_request(db, RequestSelector(kind="id", value=row.id))

            assert record.request_header is None
            assert record.request_body == ""

    @given(missing_id=st.integers(min_value=1000, max_value=99999))
    @settings(max_examples=20, deadline=None)
    def test_missing_row_raises_not_found(self, missing_id: int):
        """
        Property: A lookup for an id that does not exist is reported as not found.
        """
        with get_test_db() as db:
            create_request_log_directly(db)

            with pytest.raises(RecordNotFoundError) as exc_info:
                get_request(db, RequestSelector(kind="id", value=missing_id))

            assert exc_info.value.error_code == "RECORD_NOT_FOUND"
            assert f"id={missing_id}" in exc_info.value.detail

    def test_ambiguous_match_is_storage_error(self):
        with get_test_db() as db:
            create_request_log_directly(db, request_id="req-dup")
            create_request_log_directly(db, request_id="req-dup")

            with pytest.raises(StorageError):
                get_request(db, RequestSelector(kind="requestid", value="req-dup"))


class TestStorageFailures:
    """A broken store is reported differently from a missing record."""

    def test_missing_table_is_storage_error(self, tmp_path):
        with session_scope(f"sqlite:///{tmp_path / 'empty.db'}") as db:
            with pytest.raises(StorageError) as exc_info:
                get_request(db, RequestSelector(kind="id", value=1))

        assert not isinstance(exc_info.value, RecordNotFoundError)
        assert exc_info.value.exit_code == 4

    @pytest.mark.parametrize("url", ["not a url", "nosuchdialect:///store.db"])
    def test_unparseable_url_is_storage_error(self, url: str):
        with pytest.raises(StorageError) as exc_info:
            with session_scope(url):
                pass

        assert exc_info.value.exit_code == 4

    def test_unreachable_database_is_storage_error(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'missing-dir' / 'store.db'}"
        with session_scope(url) as db:
            with pytest.raises(StorageError):
                get_request(db, RequestSelector(kind="chatcmpl", value="chatcmpl-x"))
