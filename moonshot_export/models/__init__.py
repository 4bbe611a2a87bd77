"""
Models package for Moonshot Export.

Exports all SQLAlchemy models for database operations.
"""

from .request_log import RequestLog

__all__ = [
    "RequestLog",
]
