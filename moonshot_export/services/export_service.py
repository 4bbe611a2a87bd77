"""
Export service tying lookup, annotation, rendering and output together.
"""

import logging
from pathlib import Path
from typing import Sequence

from ..config import DEFAULT_BASE_URL
from ..database import session_scope
from ..schemas.request_record import Category, RequestRecord, RequestSelector
from .annotator import annotate
from .curl_renderer import write_curl_command
from .filename import generate_filename
from .json_renderer import write_json
from .record_locator import get_request
from .sink import open_sink

logger = logging.getLogger(__name__)


def export_request(
    database_url: str,
    selector: RequestSelector,
    output: str | None = None,
    directory: Path | None = None,
    escape_html: bool = True,
    category: Category | None = None,
    tags: Sequence[str] = (),
    curl: bool = False,
    base_url: str = DEFAULT_BASE_URL
) -> RequestRecord:
    """
    Export one stored request.

    Args:
        database_url: SQLAlchemy URL of the request store
        selector: Identifier of the request to export
        output: "stdout", "stderr" or a file path; None means stdout
        directory: Directory to write a generated file name into
        escape_html: Escape <, > and & in the JSON document
        category: Review category for chat requests
        tags: Tags for chat requests, replacing existing ones
        curl: Write a curl command instead of a JSON document
        base_url: Base URL used to rebuild the request URL for curl

    Returns:
        The exported record

    Raises:
        ExportError: subclasses for lookup, render and output failures
    """
    with session_scope(database_url) as db:
        record = get_request(db, selector)
    logger.info("Loaded request %s", record.ident())

    # Annotations are not part of a curl command
    if curl:
        with open_sink(output, directory, lambda: generate_filename(record, suffix=".sh")) as stream:
            write_curl_command(stream, record, base_url)
        return record

    annotate(record, category, tags)
    with open_sink(output, directory, lambda: generate_filename(record)) as stream:
        write_json(stream, record, escape_html=escape_html)
    return record
