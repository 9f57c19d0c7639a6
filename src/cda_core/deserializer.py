"""Dispatcher: envelope -> typed resource."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable
from typing import Any

from .builders import (
    build_asset,
    build_content_type,
    build_entry,
    build_resource,
    build_space,
)
from .context import DeserializationContext
from .errors import (
    InvalidJSON,
    MissingRequiredAttribute,
    StructuralMismatch,
    UnknownResourceKind,
)
from .model import Resource, ResourceType
from .reader import as_object, shape_of


logger = logging.getLogger(__name__)

Builder = Callable[[dict, DeserializationContext, dict], Resource]

_BUILDERS: dict[ResourceType, Builder] = {
    ResourceType.Asset: build_asset,
    ResourceType.Entry: build_entry,
    ResourceType.ContentType: build_content_type,
    ResourceType.Space: build_space,
}


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def deserialize(envelope: Any, context: DeserializationContext) -> Resource | None:
    """Build one typed resource from a JSON envelope.

    Returns None when the envelope has no ``sys`` region (not a resource).
    Unrecognized ``sys.type`` values produce a generic Resource unless
    ``context.strict`` is set, in which case UnknownResourceKind is raised.
    """
    obj = as_object(envelope)
    sys = obj.get("sys")
    if sys is None:
        logger.debug("Envelope has no sys region; skipping")
        return None
    sys = as_object(sys, "sys")

    kind = _classify(sys, context)
    builder = _BUILDERS.get(kind, build_resource)
    logger.debug("Dispatching %s to %s", sys.get("type"), builder.__name__)
    return builder(obj, context, sys)


def deserialize_all(
    envelopes: Iterable[Any], context: DeserializationContext
) -> list[Resource]:
    """Deserialize each envelope, dropping those that are not resources."""
    results: list[Resource] = []
    for envelope in envelopes:
        res = deserialize(envelope, context)
        if res is not None:
            results.append(res)
    return results


def loads(text: str | bytes, context: DeserializationContext) -> Resource | None:
    """Parse a JSON document and deserialize it."""
    try:
        envelope = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJSON(str(exc)) from exc
    return deserialize(envelope, context)


# ---------------------------------------------------------------------------
# Discriminator
# ---------------------------------------------------------------------------

def _classify(sys: dict[str, Any], context: DeserializationContext) -> ResourceType | None:
    """Map ``sys.type`` to a ResourceType; None means generic fallback."""
    raw = sys.get("type")
    if raw is None:
        raise MissingRequiredAttribute("sys.type")
    if not isinstance(raw, str):
        raise StructuralMismatch("sys.type", "string", shape_of(raw))

    kind = ResourceType.lookup(raw)
    if kind is None:
        if context.strict:
            raise UnknownResourceKind(raw)
        logger.warning("Unknown resource type %r; building a generic Resource", raw)
    return kind
