# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Rich console logging for PatternForge."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

RICH_THEME = Theme(
    {
        "error": "bold red",
        "warning": "yellow",
        "info": "green",
        "debug": "blue",
    }
)

LEVEL_MARKUP = (
    (logging.ERROR, "error"),
    (logging.WARNING, "warning"),
    (logging.INFO, "info"),
)


class LevelAwareFormatter(logging.Formatter):
    """Wraps each message in the theme style of its level."""

    def format(self, record: logging.LogRecord) -> str:
        original_message = record.getMessage()
        style = "debug"
        for level, name in LEVEL_MARKUP:
            if record.levelno >= level:
                style = name
                break

        # Formatter.format recomputes record.message, so format a copy
        styled = logging.makeLogRecord(record.__dict__)
        styled.msg = f"[{style}]{original_message}[/{style}]"
        styled.args = None
        return super().format(styled)


def setup_logging(
    level: int = logging.WARNING,
    console: Optional[Console] = None,
) -> None:
    """Route all log records through a single themed Rich handler.

    Args:
        level: Root logging level (defaults to WARNING)
        console: Optional Rich console; a themed stderr console by default
    """
    if console is None:
        console = Console(theme=RICH_THEME, stderr=True)

    root = logging.getLogger()
    if root.handlers:
        root.handlers.clear()
    root.setLevel(level)

    rich_handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        omit_repeated_times=False,
        show_path=False,
        enable_link_path=True,
        markup=True,
        log_time_format="[%X]",
    )
    rich_handler.setFormatter(
        LevelAwareFormatter("%(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    root.addHandler(rich_handler)
