"""
File name generation for records archived to a directory.
"""

import os

from ..schemas.request_record import API_VERSION_PREFIX, RequestRecord

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"

# Path separators are replaced so a name never leaves the target directory
PATH_SEPARATORS = {"/", os.sep, os.altsep} - {None}


def safe_name(name: str) -> str:
    for separator in PATH_SEPARATORS:
        name = name.replace(separator, "-")
    return name


def generate_filename(record: RequestRecord, suffix: str = ".json") -> str:
    """
    Build a deterministic file name for a record.

    Symbolic identifiers are preferred; records without one get a name
    synthesized from method, path, caller UID and creation time. Path
    separators in stored values are replaced with "-".

    Example:
        >>> generate_filename(record_with_chatcmpl)
        'chatcmpl-abc123.json'
        >>> generate_filename(record_without_ids)
        'post-chat-completions-u1-20240102030405.json'
    """
    kind, _, value = record.ident().partition("=")
    if kind == "chatcmpl":
        return safe_name(value) + suffix
    if kind == "requestid":
        return "requestid-" + safe_name(value) + suffix

    path = record.request_path
    if path.startswith(API_VERSION_PREFIX):
        path = path[len(API_VERSION_PREFIX):]
    parts = [record.request_method.lower(), path]
    if record.moonshot_uid is not None:
        parts.append(record.moonshot_uid)
    parts.append(record.created_at.strftime(TIMESTAMP_FORMAT))
    return safe_name("-".join(parts)) + suffix
