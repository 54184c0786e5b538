class TfPathError(Exception):
    """Base exception for tfpath."""


class SchemaLoadError(TfPathError):
    """Raised when a provider schema document cannot be read or validated."""

    def __init__(self, message: str, *, source: str | None = None):
        self.source = source
        if source is not None:
            message = f"{message} (source: {source})"
        super().__init__(message)
