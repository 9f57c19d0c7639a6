"""Per-kind builders: one typed resource from one envelope."""

from __future__ import annotations

import logging
from typing import Any

from .context import DeserializationContext
from .errors import (
    CustomTypeInstantiationError,
    MissingRequiredAttribute,
)
from .fields import install_base_fields
from .model import DEFAULT_LOCALE, Asset, ContentType, Entry, Resource, Space
from .reader import (
    as_object,
    optional_string,
    read_array,
    read_locales,
    read_object,
    read_string,
)


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Generic resource
# ---------------------------------------------------------------------------

def build_resource(
    envelope: dict[str, Any], context: DeserializationContext, sys: dict[str, Any]
) -> Resource:
    result = Resource()
    install_base_fields(result, envelope, sys, context)
    return result


# ---------------------------------------------------------------------------
# Asset
# ---------------------------------------------------------------------------

def build_asset(
    envelope: dict[str, Any], context: DeserializationContext, sys: dict[str, Any]
) -> Asset:
    """Build an Asset; ``url`` is ``<scheme>:<fields.file.url>``."""
    result = Asset()
    install_base_fields(result, envelope, sys, context)

    file_ = result.raw_fields.get("file")
    if file_ is None:
        raise MissingRequiredAttribute("fields.file")
    file_ = as_object(file_, "fields.file")

    url = read_string(file_, "url", "fields.file")
    result.url = f"{context.http_scheme}:{url}"
    result.mime_type = read_string(file_, "contentType", "fields.file")
    return result


# ---------------------------------------------------------------------------
# ContentType
# ---------------------------------------------------------------------------

def build_content_type(
    envelope: dict[str, Any], context: DeserializationContext, sys: dict[str, Any]
) -> ContentType:
    result = ContentType(
        display_field=optional_string(envelope, "displayField"),
        name=optional_string(envelope, "name"),
        description=optional_string(envelope, "description"),
    )
    install_base_fields(result, envelope, sys, context)
    return result


# ---------------------------------------------------------------------------
# Entry
# ---------------------------------------------------------------------------

def content_type_id(sys: dict[str, Any]) -> str:
    """Return ``sys.contentType.sys.id``."""
    link = read_object(sys, "contentType", "sys")
    link_sys = read_object(link, "sys", "sys.contentType")
    return read_string(link_sys, "id", "sys.contentType.sys")


def instantiate_entry(content_type: str, context: DeserializationContext) -> Entry:
    """Create the Entry for *content_type*.

    Uses the registered factory when there is one, otherwise a generic
    Entry. A factory that raises or returns a non-Entry is an error.
    """
    factory = context.resolve_custom_type(content_type)
    if factory is None:
        return Entry()

    try:
        result = factory()
    except Exception as exc:
        raise CustomTypeInstantiationError(content_type, repr(exc)) from exc

    if not isinstance(result, Entry):
        raise CustomTypeInstantiationError(
            content_type, f"factory returned {type(result).__name__}, not Entry"
        )
    logger.debug("Using custom type %s for content type %s",
                 type(result).__name__, content_type)
    return result


def build_entry(
    envelope: dict[str, Any], context: DeserializationContext, sys: dict[str, Any]
) -> Entry:
    result = instantiate_entry(content_type_id(sys), context)
    install_base_fields(result, envelope, sys, context)
    return result


# ---------------------------------------------------------------------------
# Space
# ---------------------------------------------------------------------------

def build_space(
    envelope: dict[str, Any], context: DeserializationContext, sys: dict[str, Any]
) -> Space:
    name = read_string(envelope, "name")
    locales = read_locales(read_array(envelope, "locales"), "locales")

    default_locale = DEFAULT_LOCALE
    for loc in locales:
        if loc.default:
            default_locale = loc.code
            break

    result = Space(name=name, default_locale=default_locale, locales=locales)
    install_base_fields(result, envelope, sys, context)
    return result
