from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from ..errors import SchemaLoadError
from ..runtime.logging import get_logger
from .models import ProviderSchema


def load_provider_schema(
    source: ProviderSchema | Mapping[str, object] | str | Path,
) -> ProviderSchema:
    """
    Build a validated ``ProviderSchema`` from the output of
    ``terraform providers schema -json``.

    Parameters:
        source: An existing ``ProviderSchema`` (returned unchanged), a decoded
            JSON mapping, a ``Path`` to a JSON file, or a string holding either
            JSON text or a file path.

    Returns:
        ProviderSchema: The validated, immutable schema document.

    Raises:
        SchemaLoadError: If the file cannot be read, the text is not valid JSON,
            or the document does not have the provider schema shape.
    """
    if isinstance(source, ProviderSchema):
        return source

    label: str | None = None
    if isinstance(source, Path) or (
        isinstance(source, str) and not source.lstrip().startswith("{")
    ):
        path = Path(source)
        label = str(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SchemaLoadError(f"cannot read provider schema: {exc}") from exc
        data = _decode(text, label)
    elif isinstance(source, str):
        data = _decode(source, label)
    elif isinstance(source, Mapping):
        data = source
    else:
        raise SchemaLoadError(
            f"unsupported provider schema source {type(source).__name__}"
        )

    try:
        schema = ProviderSchema.model_validate(data)
    except ValidationError as exc:
        raise SchemaLoadError(
            f"invalid provider schema: {exc.error_count()} validation error(s)\n{exc}",
            source=label,
        ) from exc

    get_logger().debug(
        "loaded provider schema with %d provider(s): %s",
        len(schema.provider_schemas),
        ", ".join(sorted(schema.provider_schemas)),
    )
    return schema


def _decode(text: str, label: str | None) -> object:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaLoadError(
            f"provider schema is not valid JSON: {exc}", source=label
        ) from exc
