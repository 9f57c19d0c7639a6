"""Data model for CDA Core resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, ClassVar


DEFAULT_LOCALE = "en-US"


# ---------------------------------------------------------------------------
# Discriminators
# ---------------------------------------------------------------------------

class ResourceType(Enum):
    """Values of ``sys.type`` emitted by the delivery API."""

    Asset = "Asset"
    ContentType = "ContentType"
    Entry = "Entry"
    Space = "Space"
    Array = "Array"
    Link = "Link"

    @classmethod
    def lookup(cls, name: str) -> ResourceType | None:
        try:
            return cls(name)
        except ValueError:
            return None


class FieldShape(Enum):
    """How a resource kind stores its ``fields`` region."""

    Plain = auto()
    Mapped = auto()  # field id -> value, localized by locale code
    Listed = auto()  # ordered sequence, e.g. field definitions


# ---------------------------------------------------------------------------
# Locale
# ---------------------------------------------------------------------------

@dataclass
class Locale:
    code: str
    name: str | None = None
    default: bool = False


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------

@dataclass
class Resource:
    """Base shape shared by every resource kind.

    ``sys`` holds the system metadata copied from the envelope plus a
    ``"space"`` entry referencing the active Space.
    """

    field_shape: ClassVar[FieldShape] = FieldShape.Plain

    sys: dict[str, Any] = field(default_factory=dict)
    locale: str | None = None

    @property
    def id(self) -> str | None:
        return self.sys.get("id")

    @property
    def resource_type(self) -> str | None:
        return self.sys.get("type")

    @property
    def revision(self) -> int | None:
        return self.sys.get("revision")

    @property
    def space(self) -> Space | None:
        return self.sys.get("space")


@dataclass
class ResourceWithMap(Resource):
    """Resource whose fields are a flat mapping, localized by locale code."""

    field_shape: ClassVar[FieldShape] = FieldShape.Mapped

    raw_fields: dict[str, Any] = field(default_factory=dict)
    localized_fields: dict[str, dict[str, Any]] = field(default_factory=dict)

    @property
    def fields(self) -> dict[str, Any]:
        """Fields for the current locale, falling back to ``raw_fields``."""
        if self.locale is not None and self.locale in self.localized_fields:
            return self.localized_fields[self.locale]
        return self.raw_fields

    def get_field(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)

    def localized(self, code: str) -> dict[str, Any] | None:
        return self.localized_fields.get(code)

    def set_locale(self, code: str) -> None:
        self.locale = code


@dataclass
class ResourceWithList(Resource):
    """Resource whose fields are an ordered sequence."""

    field_shape: ClassVar[FieldShape] = FieldShape.Listed

    fields: list[Any] = field(default_factory=list)


@dataclass
class Entry(ResourceWithMap):
    """Generic Entry. Custom representations subclass this."""


@dataclass
class Asset(ResourceWithMap):
    url: str | None = None
    mime_type: str | None = None


@dataclass
class ContentType(ResourceWithList):
    display_field: str | None = None
    name: str | None = None
    description: str | None = None


@dataclass
class Space(Resource):
    name: str | None = None
    default_locale: str = DEFAULT_LOCALE
    locales: list[Locale] = field(default_factory=list)

    def get_locale(self, code: str) -> Locale | None:
        for loc in self.locales:
            if loc.code == code:
                return loc
        return None
