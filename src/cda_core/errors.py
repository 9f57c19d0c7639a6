"""Error types for CDA Core."""

from __future__ import annotations


class CDACoreError(Exception):
    """Base class for all CDA Core errors."""


class ResourceParseError(CDACoreError):
    """A resource envelope could not be turned into a typed object."""

    def __init__(self, message: str, path: str | None = None) -> None:
        if path:
            message = f"{message} (at {path})"
        super().__init__(message)
        self.path = path


class StructuralMismatch(ResourceParseError):
    """A JSON region has the wrong shape, e.g. an array where an object belongs."""

    def __init__(self, path: str | None, expected: str, actual: str) -> None:
        super().__init__(f"expected {expected}, got {actual}", path)
        self.expected = expected
        self.actual = actual


class MissingRequiredAttribute(ResourceParseError):
    def __init__(self, path: str) -> None:
        super().__init__("missing required attribute", path)


class UnknownResourceKind(ResourceParseError):
    """Raised in strict mode for a ``sys.type`` outside the known kinds."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"unknown resource kind {kind!r}", "sys.type")
        self.kind = kind


class CustomTypeInstantiationError(ResourceParseError):
    """A registered custom Entry factory failed or returned a non-Entry."""

    def __init__(self, content_type_id: str, reason: str) -> None:
        super().__init__(
            f"cannot instantiate custom type for content type "
            f"{content_type_id!r}: {reason}",
            "sys.contentType.sys.id",
        )
        self.content_type_id = content_type_id


class InvalidJSON(ResourceParseError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"invalid JSON: {reason}")
