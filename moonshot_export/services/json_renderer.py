"""
JSON rendering of request records.

Produces the archival export format: the record's fields as an indented
JSON document terminated by a newline.
"""

import json
from typing import TextIO

from ..exceptions import OutputError, RenderError
from ..schemas.request_record import RequestRecord

JSON_INDENT = 4

# Characters that are unsafe when the document is embedded in HTML
HTML_ESCAPES = {ch: "\\u%04x" % ord(ch) for ch in "<>&"}
HTML_ESCAPE_TABLE = str.maketrans(HTML_ESCAPES)

# JavaScript line terminators, escaped whether or not HTML escaping is on
LINE_TERMINATOR_TABLE = str.maketrans({
    ch: "\\u%04x" % ord(ch) for ch in (chr(0x2028), chr(0x2029))
})


def render_json(record: RequestRecord, escape_html: bool = True) -> str:
    """
    Render a record as a JSON document.

    Args:
        record: The record to render
        escape_html: Replace <, > and & with \\u escapes

    Returns:
        The JSON document, ending with a newline

    Raises:
        RenderError: if the record cannot be serialized
    """
    try:
        document = json.dumps(
            record.model_dump(mode="json"),
            indent=JSON_INDENT,
            ensure_ascii=False
        )
    except (TypeError, ValueError) as e:
        raise RenderError(f"cannot render request {record.ident()} as JSON: {e}") from e

    # Outside of strings valid JSON never contains these characters
    document = document.translate(LINE_TERMINATOR_TABLE)
    if escape_html:
        document = document.translate(HTML_ESCAPE_TABLE)
    return document + "\n"


def write_json(stream: TextIO, record: RequestRecord, escape_html: bool = True) -> None:
    """Render a record and write it to an open text stream."""
    document = render_json(record, escape_html=escape_html)
    try:
        stream.write(document)
        stream.flush()
    except (OSError, UnicodeEncodeError) as e:
        raise OutputError(f"failed to write request {record.ident()}: {e}") from e
