# Services package

from .record_locator import get_request
from .annotator import annotate
from .filename import generate_filename
from .json_renderer import render_json, write_json
from .curl_renderer import build_curl_lines, render_curl, shell_escape, write_curl_command
from .sink import open_sink
from .export_service import export_request

__all__ = [
    "get_request",
    "annotate",
    "generate_filename",
    "render_json",
    "write_json",
    "build_curl_lines",
    "render_curl",
    "shell_escape",
    "write_curl_command",
    "open_sink",
    "export_request",
]
