"""
Output sink selection.

An export is written to exactly one of stdout, stderr, an explicit file
or a file inside a directory.
"""

import io
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, TextIO

from ..exceptions import OutputError

logger = logging.getLogger(__name__)

STDOUT = "stdout"
STDERR = "stderr"


def resolve_sink_path(
    output: str | None,
    directory: Path | None,
    filename: Callable[[], str]
) -> Path | None:
    """
    Return the file path an export is written to, or None for stdout/stderr.

    ``filename`` is only called when writing into a directory.
    """
    if directory is not None:
        return Path(directory) / filename()
    if output is None or output in (STDOUT, STDERR):
        return None
    return Path(output)


@contextmanager
def standard_stream(stream: TextIO) -> Iterator[TextIO]:
    """Write through a UTF-8 view of a standard stream, detached again on exit."""
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        yield stream
        return

    stream.flush()
    wrapper = io.TextIOWrapper(buffer, encoding="utf-8", newline="")
    try:
        yield wrapper
    finally:
        wrapper.detach()


@contextmanager
def open_sink(
    output: str | None,
    directory: Path | None,
    filename: Callable[[], str]
) -> Iterator[TextIO]:
    """
    Open the selected output stream.

    Files are created (or truncated) and always closed on exit. The
    standard streams are written as UTF-8 whatever their configured
    encoding, and are left open.

    Raises:
        OutputError: if the file cannot be created
    """
    path = resolve_sink_path(output, directory, filename)
    if path is None:
        with standard_stream(sys.stderr if output == STDERR else sys.stdout) as stream:
            yield stream
        return

    logger.info("Writing export to %s", path)
    try:
        stream = open(path, "w", encoding="utf-8")
    except OSError as e:
        raise OutputError(f"cannot open {path}: {e}") from e
    with stream:
        yield stream
