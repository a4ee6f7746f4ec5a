"""
Errors raised at the boundary of the operational-data layer.

Only QueryValidationError is ever visible to HTTP callers.
UpstreamFailure is absorbed by RatingsProvider.
"""


class QueryValidationError(Exception):
    """A required parameter is missing, repeated, or malformed."""

    def __init__(self, error: str, message: str):
        super().__init__(message)
        self.error = error
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.error, "message": self.message}


class UpstreamFailure(Exception):
    """The ratings provider could not produce a usable response."""
