"""Tagged attribute type variants for provider schema documents."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, model_serializer

RawAttributeType: TypeAlias = str | list[object] | tuple[object, ...]

CollectionKind: TypeAlias = Literal["list", "set", "map"]
COLLECTION_KINDS: frozenset[str] = frozenset({"list", "set", "map"})


class _TypeNode(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    def to_json(self) -> object:
        raise NotImplementedError

    @model_serializer(mode="plain")
    def _serialize(self) -> object:
        return self.to_json()


class PrimitiveType(_TypeNode):
    name: str

    def to_json(self) -> str:
        return self.name


class CollectionType(_TypeNode):
    kind: CollectionKind
    element: AttributeType

    def to_json(self) -> list[object]:
        return [self.kind, self.element.to_json()]


class ObjectType(_TypeNode):
    members: dict[str, AttributeType]

    def to_json(self) -> list[object]:
        return ["object", {name: t.to_json() for name, t in self.members.items()}]


class TupleType(_TypeNode):
    elements: tuple[AttributeType, ...]

    def to_json(self) -> list[object]:
        return ["tuple", [t.to_json() for t in self.elements]]


AttributeType: TypeAlias = PrimitiveType | CollectionType | ObjectType | TupleType

for _model in (CollectionType, ObjectType, TupleType):
    _model.model_rebuild()

DYNAMIC = PrimitiveType(name="dynamic")


def parse_attribute_type(raw: object) -> AttributeType:
    """Convert a raw JSON attribute type into its tagged variant.

    Accepts ``"string"``, ``["list", "string"]``, ``["object", {...}]`` and
    ``["tuple", [...]]`` shapes, nested arbitrarily. Already-parsed variants
    are returned unchanged. Raises ``ValueError`` for anything else.
    """

    if isinstance(raw, (PrimitiveType, CollectionType, ObjectType, TupleType)):
        return raw
    if isinstance(raw, str):
        return PrimitiveType(name=raw)
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ValueError(f"unsupported attribute type {raw!r}")

    kind, payload = raw
    if kind in COLLECTION_KINDS:
        return CollectionType(kind=kind, element=parse_attribute_type(payload))
    if kind == "object":
        if not isinstance(payload, Mapping):
            raise ValueError(f"object type members must be a mapping, got {payload!r}")
        return ObjectType(
            members={
                str(name): parse_attribute_type(member)
                for name, member in payload.items()
            }
        )
    if kind == "tuple":
        if not isinstance(payload, (list, tuple)):
            raise ValueError(f"tuple type elements must be a list, got {payload!r}")
        return TupleType(elements=tuple(parse_attribute_type(e) for e in payload))
    raise ValueError(f"unsupported attribute type kind {kind!r}")


def is_object_collection(attribute_type: AttributeType) -> bool:
    """Whether ``attribute_type`` is a list or set whose element is an object."""

    return (
        isinstance(attribute_type, CollectionType)
        and attribute_type.kind in ("list", "set")
        and isinstance(attribute_type.element, ObjectType)
    )


__all__ = [
    "COLLECTION_KINDS",
    "DYNAMIC",
    "AttributeType",
    "CollectionKind",
    "CollectionType",
    "ObjectType",
    "PrimitiveType",
    "RawAttributeType",
    "TupleType",
    "is_object_collection",
    "parse_attribute_type",
]
