"""Pydantic models for ``terraform providers schema -json`` documents."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .types import AttributeType, CollectionType, ObjectType, parse_attribute_type

NestingMode = Literal["single", "group", "list", "set", "map"]


class _SchemaNode(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class NestedAttributes(_SchemaNode):
    attributes: dict[str, Attribute] = Field(default_factory=dict)
    nesting_mode: NestingMode = "single"

    def as_attribute_type(self) -> AttributeType:
        members = {
            name: attribute.type
            for name, attribute in self.attributes.items()
            if attribute.type is not None
        }
        obj = ObjectType(members=members)
        if self.nesting_mode in ("single", "group"):
            return obj
        return CollectionType(kind=self.nesting_mode, element=obj)


class Attribute(_SchemaNode):
    type: AttributeType | None = None
    nested_type: NestedAttributes | None = None
    description: str | None = None
    description_kind: str | None = None
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    deprecated: bool = False

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value: object) -> object:
        if value is None:
            return None
        return parse_attribute_type(value)

    @model_validator(mode="before")
    @classmethod
    def _derive_nested_type(cls, data: object) -> object:
        if not isinstance(data, dict) or data.get("type") is not None:
            return data
        nested = data.get("nested_type")
        if nested is None:
            return data
        if not isinstance(nested, NestedAttributes):
            nested = NestedAttributes.model_validate(nested)
        return {**data, "nested_type": nested, "type": nested.as_attribute_type()}


class Block(_SchemaNode):
    attributes: dict[str, Attribute] = Field(default_factory=dict)
    block_types: dict[str, NestedBlock] = Field(default_factory=dict)
    description: str | None = None
    description_kind: str | None = None
    deprecated: bool = False


class NestedBlock(_SchemaNode):
    """A named block inside another block, with its cardinality hints."""

    nesting_mode: NestingMode = "single"
    block: Block = Field(default_factory=Block)
    min_items: int | None = None
    max_items: int | None = None

    @property
    def is_single(self) -> bool:
        return self.max_items == 1


class Schema(_SchemaNode):
    """Top-level shape of a resource, data source or provider configuration."""

    version: int = 0
    block: Block = Field(default_factory=Block)


class ProviderSchemaEntry(_SchemaNode):
    provider: Schema | None = None
    resource_schemas: dict[str, Schema] = Field(default_factory=dict)
    data_source_schemas: dict[str, Schema] = Field(default_factory=dict)


class ProviderSchema(_SchemaNode):
    format_version: str | None = None
    provider_schemas: dict[str, ProviderSchemaEntry] = Field(default_factory=dict)


for _model in (
    NestedAttributes,
    Attribute,
    Block,
    NestedBlock,
    Schema,
    ProviderSchemaEntry,
    ProviderSchema,
):
    _model.model_rebuild()


__all__ = [
    "Attribute",
    "Block",
    "NestedAttributes",
    "NestedBlock",
    "NestingMode",
    "ProviderSchema",
    "ProviderSchemaEntry",
    "Schema",
]
