"""Moonshot Export - export recorded Moonshot AI requests as JSON or curl commands."""

__version__ = "1.0.0"
