from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

from .config import TFPATH_CONFIG


@dataclass(frozen=True)
class _TfPathConfigSnapshot:
    log_level: int
    undetermined_log_level: int
    rich_console: bool

    @classmethod
    def capture(cls) -> "_TfPathConfigSnapshot":
        return cls(
            log_level=TFPATH_CONFIG.log_level,
            undetermined_log_level=TFPATH_CONFIG.undetermined_log_level,
            rich_console=TFPATH_CONFIG.rich_console,
        )

    def restore(self) -> None:
        TFPATH_CONFIG.log_level = self.log_level
        TFPATH_CONFIG.undetermined_log_level = self.undetermined_log_level
        TFPATH_CONFIG.rich_console = self.rich_console


@contextmanager
def tfpath_config_env() -> Generator[None, None, None]:
    """Let a test change ``TFPATH_CONFIG`` and restore it afterwards."""
    snapshot = _TfPathConfigSnapshot.capture()
    try:
        yield
    finally:
        snapshot.restore()
