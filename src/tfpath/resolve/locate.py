"""Locate the resource, data source or provider schema a path refers to."""

from __future__ import annotations

from dataclasses import dataclass

from ..schema import ProviderSchema, ProviderSchemaEntry, Schema
from .paths import ParsedPath
from .providers import ProviderResolver, resolve_full_provider_name

PROVIDER_SUFFIX = "Provider"


@dataclass(frozen=True)
class Located:
    """The schema a path starts from and the segments still to walk."""

    root: Schema
    remaining: tuple[str, ...]
    is_provider: bool = False


def locate(
    schema: ProviderSchema,
    parsed: ParsedPath,
    provider_resolver: ProviderResolver | None = None,
) -> Located | None:
    """Find the schema addressed by the leading segments of ``parsed``.

    The first two segments are read as ``<provider>.<local name>`` and joined
    into the resource type ``<provider>_<local name>``. A local name ending in
    ``Provider`` addresses the provider configuration block itself. If that
    reading finds nothing and the first segment is already a resource type
    (``aws_instance.tags``), the provider is taken from its prefix.

    Returns ``None`` if nothing matches, or if a resource matches but no
    segment remains after it.
    """
    resolver = provider_resolver or resolve_full_provider_name
    located = _locate_qualified(schema, parsed, resolver)
    if located is None and "_" in parsed.segments[0]:
        located = _locate_resource_type(schema, parsed, resolver)
    return located


def _provider_entry(
    schema: ProviderSchema, short_name: str, resolver: ProviderResolver
) -> ProviderSchemaEntry | None:
    full_name = resolver(schema, short_name)
    if not full_name:
        return None
    return schema.provider_schemas.get(full_name)


def _resources(entry: ProviderSchemaEntry, parsed: ParsedPath) -> dict[str, Schema]:
    if parsed.is_data_source:
        return entry.data_source_schemas
    return entry.resource_schemas


def _locate_qualified(
    schema: ProviderSchema, parsed: ParsedPath, resolver: ProviderResolver
) -> Located | None:
    if len(parsed.segments) < 2:
        return None
    provider_name, local_name = parsed.segments[0], parsed.segments[1]
    remaining = parsed.segments[2:]

    entry = _provider_entry(schema, provider_name, resolver)
    if entry is None:
        return None

    if local_name.endswith(PROVIDER_SUFFIX):
        if entry.provider is None:
            return None
        return Located(root=entry.provider, remaining=remaining, is_provider=True)

    resource = _resources(entry, parsed).get(f"{provider_name}_{local_name}")
    if resource is None or not remaining:
        return None
    return Located(root=resource, remaining=remaining)


def _locate_resource_type(
    schema: ProviderSchema, parsed: ParsedPath, resolver: ProviderResolver
) -> Located | None:
    resource_type = parsed.segments[0]
    remaining = parsed.segments[1:]
    if not remaining:
        return None

    provider_name = resource_type.split("_", 1)[0]
    entry = _provider_entry(schema, provider_name, resolver)
    if entry is None:
        return None

    resource = _resources(entry, parsed).get(resource_type)
    if resource is None:
        return None
    return Located(root=resource, remaining=remaining)


__all__ = ["Located", "PROVIDER_SUFFIX", "locate"]
