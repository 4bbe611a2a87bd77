"""
Record locator service for loading one stored request.

Keeps "no such record" apart from every other storage failure so that
the caller can report the two differently.
"""

import logging

from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import RecordNotFoundError, StorageError
from ..models.request_log import RequestLog
from ..schemas.request_record import RequestRecord, RequestSelector

logger = logging.getLogger(__name__)

# Selector kind -> column holding that identifier
SELECTOR_COLUMNS = {
    "id": RequestLog.id,
    "chatcmpl": RequestLog.chatcmpl_id,
    "requestid": RequestLog.request_id,
}


def get_request(db: Session, selector: RequestSelector) -> RequestRecord:
    """
    Load the request matching a single resolved selector.

    Args:
        db: Database session
        selector: Which identifier to look up

    Returns:
        The matching request as a RequestRecord

    Raises:
        RecordNotFoundError: if no row matches the selector
        StorageError: for any other retrieval fault, including ambiguous matches
    """
    column = SELECTOR_COLUMNS[selector.kind]
    logger.debug("Looking up request by %s", selector)
    try:
        row = db.query(RequestLog).filter(column == selector.value).one()
    except NoResultFound:
        raise RecordNotFoundError(selector.kind, selector.value) from None
    except SQLAlchemyError as e:
        raise StorageError(f"failed to load request with {selector}: {e}") from e
    return RequestRecord.model_validate(row)
