from .load import load_provider_schema
from .models import (
    Attribute,
    Block,
    NestedAttributes,
    NestedBlock,
    NestingMode,
    ProviderSchema,
    ProviderSchemaEntry,
    Schema,
)
from .types import (
    DYNAMIC,
    AttributeType,
    CollectionType,
    ObjectType,
    PrimitiveType,
    TupleType,
    is_object_collection,
    parse_attribute_type,
)

__all__ = [
    "DYNAMIC",
    "Attribute",
    "AttributeType",
    "Block",
    "CollectionType",
    "NestedAttributes",
    "NestedBlock",
    "NestingMode",
    "ObjectType",
    "PrimitiveType",
    "ProviderSchema",
    "ProviderSchemaEntry",
    "Schema",
    "TupleType",
    "is_object_collection",
    "load_provider_schema",
    "parse_attribute_type",
]
