from __future__ import annotations


class MatchingError(Exception):
    """Base class for failures raised by the matching engine."""


class InvalidItem(MatchingError):
    """An item handed to the engine is missing required fields or has bad values."""


class StorageUnavailable(MatchingError):
    """The match store could not persist a record."""
