from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.text import Text

from ..config import TFPATH_CONFIG

LOGGER_NAME = "tfpath"


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


class _TfPathRichConsoleHandler(logging.Handler):
    """Console handler that renders ``[file:line] message`` lines through rich.

    A record may carry ``tfpath_action_color``; only the first word of the
    message is styled with it.
    """

    def __init__(self, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._console = Console(stderr=True)

    @staticmethod
    def _format_location(record: logging.LogRecord) -> str:
        return f"[{Path(record.pathname).name}:{record.lineno}]"

    @staticmethod
    def _format_message_text(record: logging.LogRecord) -> Text:
        message = record.getMessage()
        color = getattr(record, "tfpath_action_color", None)
        text = Text(message)
        if color:
            head = message.split(" ", 1)[0]
            text.stylize(color, 0, len(head))
        return text

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = Text()
            line.append(f"{record.levelname:<8} ", style="dim")
            line.append(self._format_location(record), style="dim")
            line.append(" ")
            line.append_text(self._format_message_text(record))
            self._console.print(line, highlight=False, soft_wrap=True)
        except Exception:
            self.handleError(record)


def configure_logging() -> None:
    """Attach the rich console handler to the root logger once.

    Calling this repeatedly does not add duplicate handlers. The ``tfpath``
    logger level follows ``TFPATH_CONFIG.log_level``.
    """
    get_logger().setLevel(TFPATH_CONFIG.log_level)
    if not TFPATH_CONFIG.rich_console:
        return

    root = logging.getLogger()
    if any(isinstance(h, _TfPathRichConsoleHandler) for h in root.handlers):
        return
    root.addHandler(_TfPathRichConsoleHandler())
