"""Walk located schemas down to the block, attribute or type at a path.

All entry points return ``None`` for paths that cannot be resolved; none of
them raise for malformed or unknown input.
"""

from __future__ import annotations

from typing import TypeAlias

from ..schema import (
    Attribute,
    AttributeType,
    CollectionType,
    NestedBlock,
    ProviderSchema,
    Schema,
    is_object_collection,
)
from .locate import Located, locate
from .paths import ParsedPath, parse_path
from .providers import ProviderResolver

ResolvedType: TypeAlias = Schema | NestedBlock | AttributeType


def _locate_path(
    schema: ProviderSchema,
    path: str,
    provider_resolver: ProviderResolver | None,
) -> tuple[ParsedPath, Located] | None:
    parsed = parse_path(path)
    if parsed is None:
        return None
    located = locate(schema, parsed, provider_resolver)
    if located is None:
        return None
    return parsed, located


def resolve_block_at_path(
    schema: ProviderSchema,
    path: str,
    *,
    provider_resolver: ProviderResolver | None = None,
) -> NestedBlock | None:
    """Follow every remaining segment through nested ``block_types`` only."""

    found = _locate_path(schema, path, provider_resolver)
    if found is None:
        return None
    _, located = found
    if not located.remaining:
        return None

    current: Schema | NestedBlock = located.root
    for segment in located.remaining:
        nested = current.block.block_types.get(segment)
        if nested is None:
            return None
        current = nested
    return current if isinstance(current, NestedBlock) else None


def resolve_attribute_at_path(
    schema: ProviderSchema,
    path: str,
    *,
    provider_resolver: ProviderResolver | None = None,
) -> Attribute | None:
    """Resolve a top-level attribute of a resource.

    Exactly one segment must follow the resource. With a trailing ``[]`` on a
    list, set or map attribute, the returned copy carries the element type.
    On object, tuple or primitive attributes the marker is ignored and the
    attribute is returned as declared; an object is not unwrapped into its
    members mapping.
    """

    found = _locate_path(schema, path, provider_resolver)
    if found is None:
        return None
    parsed, located = found
    if len(located.remaining) != 1:
        return None

    attribute = located.root.block.attributes.get(located.remaining[0])
    if attribute is None:
        return None
    if parsed.wants_element and isinstance(attribute.type, CollectionType):
        return attribute.model_copy(update={"type": attribute.type.element})
    return attribute


def resolve_type_at_path(
    schema: ProviderSchema,
    path: str,
    *,
    provider_resolver: ProviderResolver | None = None,
) -> ResolvedType | None:
    """Resolve whatever ``path`` points at.

    Nested blocks win over attributes of the same name. Once an attribute is
    reached, any further segments index into the members of a list or set of
    objects. Returns the located ``Schema`` when no segment follows it, a
    ``NestedBlock`` when the path ends on a block, or the ``AttributeType``.
    """

    found = _locate_path(schema, path, provider_resolver)
    if found is None:
        return None
    parsed, located = found
    if not located.remaining:
        return located.root

    current: Schema | NestedBlock = located.root
    for index, segment in enumerate(located.remaining):
        nested = current.block.block_types.get(segment)
        if nested is not None:
            current = nested
            continue

        attribute = current.block.attributes.get(segment)
        if attribute is None:
            return None
        resolved = _resolve_attribute_type(attribute, located.remaining[index + 1 :])
        if parsed.wants_element and isinstance(resolved, CollectionType):
            return resolved.element
        return resolved

    return current


def _resolve_attribute_type(
    attribute: Attribute, leftover: tuple[str, ...]
) -> AttributeType | None:
    # e.g. "ingress": ["set", ["object", {"cidr_blocks": ["list", "string"], ...}]]
    current = attribute.type
    for segment in leftover:
        if current is None or not is_object_collection(current):
            return None
        current = current.element.members.get(segment)  # type: ignore[union-attr]
    return current


__all__ = [
    "ResolvedType",
    "resolve_attribute_at_path",
    "resolve_block_at_path",
    "resolve_type_at_path",
]
