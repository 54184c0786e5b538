"""
tfpath: resolve attribute paths against Terraform provider schemas.

This package uses a src-layout. Import the package as `tfpath`.
"""

from importlib.metadata import version

import chz

__version__ = version("tfpath")

from .config import TFPATH_CONFIG, TfPathConfig
from .errors import SchemaLoadError, TfPathError
from .resolve import (
    Scope,
    UndeterminedType,
    classify_desired_type,
    parse_path,
    resolve_attribute_at_path,
    resolve_block_at_path,
    resolve_full_provider_name,
    resolve_type_at_path,
)
from .runtime import configure_logging, get_logger
from .schema import (
    DYNAMIC,
    Attribute,
    AttributeType,
    Block,
    CollectionType,
    NestedBlock,
    ObjectType,
    PrimitiveType,
    ProviderSchema,
    ProviderSchemaEntry,
    Schema,
    TupleType,
    load_provider_schema,
    parse_attribute_type,
)

__all__ = [
    "__version__",
    "DYNAMIC",
    "TFPATH_CONFIG",
    "Attribute",
    "AttributeType",
    "Block",
    "CollectionType",
    "NestedBlock",
    "ObjectType",
    "PrimitiveType",
    "ProviderSchema",
    "ProviderSchemaEntry",
    "Schema",
    "SchemaLoadError",
    "Scope",
    "TfPathConfig",
    "TfPathError",
    "TupleType",
    "UndeterminedType",
    "chz",
    "classify_desired_type",
    "configure_logging",
    "get_logger",
    "load_provider_schema",
    "parse_attribute_type",
    "parse_path",
    "resolve_attribute_at_path",
    "resolve_block_at_path",
    "resolve_full_provider_name",
    "resolve_type_at_path",
]
