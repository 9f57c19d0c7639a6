"""CDA Core — typed deserialization of content delivery API resources."""

from .context import DeserializationContext, EntryFactory
from .deserializer import deserialize, deserialize_all, loads
from .model import (
    DEFAULT_LOCALE,
    Asset,
    ContentType,
    Entry,
    FieldShape,
    Locale,
    Resource,
    ResourceType,
    ResourceWithList,
    ResourceWithMap,
    Space,
)
from .errors import (
    CDACoreError,
    CustomTypeInstantiationError,
    InvalidJSON,
    MissingRequiredAttribute,
    ResourceParseError,
    StructuralMismatch,
    UnknownResourceKind,
)

__all__ = [
    "deserialize",
    "deserialize_all",
    "loads",
    "DeserializationContext",
    "EntryFactory",
    "DEFAULT_LOCALE",
    "Asset",
    "ContentType",
    "Entry",
    "FieldShape",
    "Locale",
    "Resource",
    "ResourceType",
    "ResourceWithList",
    "ResourceWithMap",
    "Space",
    "CDACoreError",
    "CustomTypeInstantiationError",
    "InvalidJSON",
    "MissingRequiredAttribute",
    "ResourceParseError",
    "StructuralMismatch",
    "UnknownResourceKind",
]
