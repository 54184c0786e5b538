from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from ..schema import ProviderSchema

ProviderResolver: TypeAlias = Callable[[ProviderSchema, str], str | None]


def resolve_full_provider_name(schema: ProviderSchema, short_name: str) -> str | None:
    """Map a provider short name such as ``aws`` to its schema key.

    An exact key match wins; otherwise the first key whose last ``/``
    component equals ``short_name`` (``registry.terraform.io/hashicorp/aws``).
    """
    if not short_name:
        return None
    if short_name in schema.provider_schemas:
        return short_name
    for key in schema.provider_schemas:
        if key.rsplit("/", 1)[-1] == short_name:
            return key
    return None
