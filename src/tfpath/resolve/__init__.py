from .classify import Scope, UndeterminedType, classify_desired_type
from .locate import Located, locate
from .paths import ParsedPath, parse_path
from .providers import ProviderResolver, resolve_full_provider_name
from .walk import (
    ResolvedType,
    resolve_attribute_at_path,
    resolve_block_at_path,
    resolve_type_at_path,
)

__all__ = [
    "Located",
    "ParsedPath",
    "ProviderResolver",
    "ResolvedType",
    "Scope",
    "UndeterminedType",
    "classify_desired_type",
    "locate",
    "parse_path",
    "resolve_attribute_at_path",
    "resolve_block_at_path",
    "resolve_full_provider_name",
    "resolve_type_at_path",
]
