"""Console logging helpers for the mini calendar command line."""

import logging

from rich.console import Console
from rich.logging import RichHandler

PROJECT_LOGGERS = ("calendar_logic", "date_picker", "settings", "main")


class ThirdPartyPrefixFilter(logging.Filter):
    """Prefix records from foreign loggers with a short ``[name]`` tag."""

    def filter(self, record: logging.LogRecord) -> bool:
        top = record.name.split(".")[0]
        record.prefix = "" if top in PROJECT_LOGGERS else f"[{top}]"
        return True


def verbosity_to_level(verbose: int = 0, quiet: int = 0) -> int:
    """Shift the WARNING baseline one level per ``-v``/``-q``, clamped to DEBUG..CRITICAL."""
    level = logging.WARNING - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Return a stderr RichHandler; debug mode forces DEBUG and shows source paths."""
    console = Console(color_system="auto" if color else None, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
    )
    fmt = "%(prefix)s %(message)s" if not debug_mode else "%(asctime)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))
    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def configure_logging(level: int, debug_mode: bool = False, color: bool = True) -> RichHandler:
    """Attach a fresh console handler to the root logger and return it."""
    root = logging.getLogger()
    for h in list(root.handlers):
        if isinstance(h, RichHandler):
            root.removeHandler(h)
    handler = config_console_handler(level=level, debug_mode=debug_mode, color=color)
    root.addHandler(handler)
    root.setLevel(handler.level)
    return handler
