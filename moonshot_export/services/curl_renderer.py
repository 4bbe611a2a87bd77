"""
curl command rendering for request records.

Rebuilds a POSIX shell command that replays a recorded request. The API
key is never reproduced; the command reads it from $MOONSHOT_API_KEY.
"""

import logging
import re
from email import policy
from email.parser import HeaderParser
from typing import TextIO

from ..config import DEFAULT_BASE_URL
from ..exceptions import OutputError, RenderError
from ..schemas.request_record import RequestRecord

logger = logging.getLogger(__name__)

AUTHORIZATION_LINE = '-H "Authorization: Bearer $MOONSHOT_API_KEY"'

# Derived from the body or added at ingestion; meaningless when replaying.
# Authorization is always replaced by AUTHORIZATION_LINE.
STRIPPED_HEADERS = frozenset({"Content-Length", "X-Unix-Micro", "Authorization"})

LINE_CONTINUATION = " \\\n\t"

# Folded header continuation lines
FOLDING_PATTERN = re.compile(r"\r?\n[ \t]+")


def shell_escape(value: str) -> str:
    """
    Escape a string for use inside a single-quoted shell literal.

    Example:
        >>> shell_escape("it's")
        'it\\'"\\'"\\'s'
    """
    return value.replace("'", "'\"'\"'")


def canonical_header_key(name: str) -> str:
    """Canonical MIME form of a header name, e.g. content-type -> Content-Type."""
    return "-".join(part[:1].upper() + part[1:].lower() for part in name.split("-"))


def parse_header_block(block: str) -> list[tuple[str, str]]:
    """
    Parse a raw MIME-style header block into (name, value) pairs.

    Names are canonicalized and folded values are joined with a single
    space. Parsing stops at the first blank line.

    Raises:
        RenderError: if the block is not valid header text
    """
    message = HeaderParser(policy=policy.compat32).parsestr(block + "\r\n\r\n")
    if message.defects:
        defects = ", ".join(type(defect).__name__ for defect in message.defects)
        raise RenderError(f"malformed header block: {defects}")
    return [
        (canonical_header_key(name), FOLDING_PATTERN.sub(" ", value).strip())
        for name, value in message.items()
    ]


def build_curl_lines(record: RequestRecord, base_url: str = DEFAULT_BASE_URL) -> list[str]:
    """
    Build the lines of a curl command replaying the record.

    Header lines keep the order of the stored block; several values for
    one name give several lines. An unparseable header block is left out.
    """
    lines = [
        f"curl -X '{shell_escape(record.request_method)}' "
        f"'{shell_escape(record.url(base_url))}'",
        AUTHORIZATION_LINE,
    ]

    if record.request_header is not None:
        try:
            headers = parse_header_block(record.request_header)
        except RenderError as e:
            logger.warning("Skipping headers of request %s: %s", record.ident(), e.detail)
            headers = []
        for name, value in headers:
            if name in STRIPPED_HEADERS:
                continue
            lines.append(f"-H '{shell_escape(name)}: {shell_escape(value)}'")

    if record.request_body is not None:
        lines.append(f"-d '{shell_escape(record.request_body)}'")

    return lines


def render_curl(record: RequestRecord, base_url: str = DEFAULT_BASE_URL) -> str:
    """Render the record as a complete curl command ending with a newline."""
    return LINE_CONTINUATION.join(build_curl_lines(record, base_url)) + "\n"


def write_curl_command(
    stream: TextIO,
    record: RequestRecord,
    base_url: str = DEFAULT_BASE_URL
) -> None:
    """
    Write the curl command for a record to an open text stream.

    Lines are written as they are produced; output already written is
    left in place when a later write fails.

    Raises:
        OutputError: if writing to the stream fails
    """
    lines = build_curl_lines(record, base_url)
    last = len(lines) - 1
    try:
        for index, line in enumerate(lines):
            stream.write(line)
            stream.write(LINE_CONTINUATION if index < last else "\n")
        stream.flush()
    except (OSError, UnicodeEncodeError) as e:
        raise OutputError(f"failed to write curl command for request {record.ident()}: {e}") from e
