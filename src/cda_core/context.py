"""Deserialization context: the read-only inputs of a deserialization pass."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .model import DEFAULT_LOCALE, Entry, Space


EntryFactory = Callable[[], Entry]


@dataclass(frozen=True)
class DeserializationContext:
    """Holds the active Space, transport scheme and custom Entry types.

    The context is never mutated during a pass; callers sharing one across
    threads must not mutate ``space`` or the ``custom_types`` mapping
    while a pass is running.
    """

    space: Space | None = None
    http_scheme: str = "https"
    custom_types: Mapping[str, EntryFactory] = field(
        default_factory=lambda: MappingProxyType({})
    )
    strict: bool = False

    @property
    def default_locale(self) -> str:
        if self.space is None:
            return DEFAULT_LOCALE
        return self.space.default_locale

    # -- Custom types ---------------------------------------------------

    def resolve_custom_type(self, content_type_id: str) -> EntryFactory | None:
        return self.custom_types.get(content_type_id)
