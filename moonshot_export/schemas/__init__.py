"""
Pydantic schemas package.

Exports the record and selector schemas used by the export pipeline.
"""

from .request_record import (
    API_VERSION_PREFIX,
    Category,
    RequestRecord,
    RequestSelector,
    SelectorKind,
)

__all__ = [
    "API_VERSION_PREFIX",
    "Category",
    "RequestRecord",
    "RequestSelector",
    "SelectorKind",
]
