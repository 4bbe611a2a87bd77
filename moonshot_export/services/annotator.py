"""
Annotation of chat records with a review category and tags.

Annotations only change the in-memory record before it is exported.
"""

import logging
from typing import Sequence

from ..schemas.request_record import Category, RequestRecord

logger = logging.getLogger(__name__)


def annotate(
    record: RequestRecord,
    category: Category | None = None,
    tags: Sequence[str] = ()
) -> RequestRecord:
    """
    Apply a category and tags to a chat record in place.

    Non-chat records are returned untouched: category and tags have no
    meaning for them. For chat records a category replaces the previous
    one and a non-empty tag list replaces the previous tags.

    Args:
        record: The record to annotate
        category: GOODCASE, BADCASE, or None to keep the current value
        tags: Tags describing the case, in order

    Returns:
        The same record object
    """
    if not record.is_chat():
        if category is not None or tags:
            logger.debug("Ignoring annotations for non-chat request %s", record.ident())
        return record

    if category is not None:
        record.category = category
    if tags:
        record.tags = list(tags)
    return record
