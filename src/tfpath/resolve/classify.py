"""Turn whatever a path resolves to into the type a caller should emit."""

from dataclasses import dataclass

import chz

from ..config import TFPATH_CONFIG
from ..runtime.logging import get_logger
from ..schema import (
    DYNAMIC,
    AttributeType,
    CollectionType,
    NestedBlock,
    ObjectType,
    PrimitiveType,
    ProviderSchema,
    Schema,
    TupleType,
)
from .providers import ProviderResolver
from .walk import resolve_type_at_path


@dataclass(frozen=True)
class UndeterminedType:
    """A path that resolved to a block, so no attribute type could be reported."""

    path: str
    block: NestedBlock


@chz.chz
class Scope:
    provider_schema: ProviderSchema
    provider_resolver: ProviderResolver | None = None
    diagnostics: list[UndeterminedType] = chz.field(default_factory=list)


def classify_desired_type(scope: Scope, path: str) -> AttributeType:
    """Return the attribute type at ``path``, or ``DYNAMIC`` if there is none."""

    resolved = resolve_type_at_path(
        scope.provider_schema, path, provider_resolver=scope.provider_resolver
    )
    match resolved:
        case None:
            return DYNAMIC
        case PrimitiveType() | CollectionType() | ObjectType() | TupleType():
            return resolved
        case Schema():
            return DYNAMIC
        case NestedBlock():
            get_logger().log(
                TFPATH_CONFIG.undetermined_log_level,
                "undetermined type for %s, found block: %s",
                path,
                resolved.model_dump_json(indent=2, exclude_defaults=True),
                extra={"tfpath_action_color": "yellow"},
            )
            scope.diagnostics.append(UndeterminedType(path=path, block=resolved))
            return DYNAMIC
    return DYNAMIC
