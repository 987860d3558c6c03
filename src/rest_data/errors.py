"""
rest_data.errors

Error types raised by generated resources.

Responsibilities:
- Name the failures the CRUD contract can surface besides not-found.
- Carry enough context for the API layer to map them to HTTP statuses.
"""

from __future__ import annotations


class RestDataError(Exception):
    """Base class for errors raised by the REST Data layer."""


class MethodNotExposedError(RestDataError):
    """
    Raised by an operation that was suppressed with `MethodProperties(exposed=False)`.
    Mapped to HTTP 405 by the app factory.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"'{operation}' method is not exposed")


class InvalidSortError(RestDataError):
    # Mapped to HTTP 400.
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Unknown sort field '{field}'")


class SeedScriptError(RestDataError):
    pass


# --- Module Notes -----------------------------------------------------------
# Not-found is not an exception here: repositories return None / False and the
# router turns that into a 404, the same way every other lookup in the API does.
