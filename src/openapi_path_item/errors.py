"""Errors raised while decoding OpenAPI path items."""

from pydantic import ValidationError


class PathItemError(Exception):
    """Base class for all openapi-path-item errors."""


class DecodingError(PathItemError):
    """Raised when a serialized value does not match the expected shape."""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"{location}: {reason}" if location else reason)

    @classmethod
    def from_validation_error(cls, error: ValidationError, prefix: str = "") -> "DecodingError":
        """Build a DecodingError from the most specific failure pydantic reported.

        Union members each report their own failure; the deepest one wins,
        with a wrong value preferred over a missing field.
        """
        worst = max(error.errors(), key=lambda e: (len(e["loc"]), e["type"] != "missing"))
        parts = [prefix] if prefix else []
        parts.extend(str(p) for p in worst["loc"])
        return cls(".".join(parts), worst["msg"])
