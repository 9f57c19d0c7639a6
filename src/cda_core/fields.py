"""Base-field installer shared by every builder."""

from __future__ import annotations

from typing import Any

from .context import DeserializationContext
from .model import FieldShape, Resource
from .reader import read_mapping, read_sequence
from .errors import MissingRequiredAttribute


def install_base_fields(
    target: Resource,
    envelope: dict[str, Any],
    sys: dict[str, Any],
    context: DeserializationContext,
) -> None:
    """Install system metadata and content fields on *target*.

    ``sys`` is copied and gets a ``"space"`` entry pointing at the active
    Space. The ``fields`` region is then installed according to the
    target's field shape:

    - Mapped: ``locale`` is set to the default locale, ``fields`` is read
      as an object into ``raw_fields`` and the same mapping is stored
      under the default locale in ``localized_fields``.
    - Listed: ``fields`` is read as an array into ``fields``.
    - Plain: nothing beyond ``sys``.
    """
    sys_map = read_mapping(sys, "sys")
    sys_map["space"] = context.space
    target.sys = sys_map

    shape = type(target).field_shape
    if shape is FieldShape.Plain:
        return

    fields = envelope.get("fields")
    if fields is None:
        raise MissingRequiredAttribute("fields")

    if shape is FieldShape.Mapped:
        locale = context.default_locale
        target.locale = locale
        target.raw_fields = read_mapping(fields, "fields")
        target.localized_fields[locale] = target.raw_fields
    elif shape is FieldShape.Listed:
        target.fields = read_sequence(fields, "fields")
