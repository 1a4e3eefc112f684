import logging
import os
import sys
import time
from typing import Optional

# Use tqdm's write to avoid breaking progress bars
from tqdm.auto import tqdm

from .config import F64OpsConfig
from .log_counter import RejectionCounter, attach_counter


class _TqdmCompatibleHandler(logging.StreamHandler):
    """A logging handler that plays nicely with tqdm progress bars.

    Log lines are routed through ``tqdm.write`` so that a progress bar drawn
    by the calling application is not overwritten.
    """

    def emit(self, record: logging.LogRecord) -> None:  # noqa: D401
        try:
            tqdm.write(self.format(record), file=self.stream)
        except Exception:  # pragma: no cover
            self.handleError(record)


class _ColorFormatter(logging.Formatter):
    """ANSI colour formatter: dim prefix, message coloured by level."""

    RESET = "\033[0m"
    DIM = "\033[2m"
    FG = {
        logging.CRITICAL: "\033[35m",
        logging.ERROR: "\033[31m",
        logging.WARNING: "\033[33m",
        logging.INFO: "\033[36m",
        logging.DEBUG: "\033[90m",
    }

    def __init__(self, fmt: str, datefmt: str | None, use_color: bool) -> None:
        super().__init__(fmt, datefmt)
        self._use_color = use_color

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        text = super().format(record)
        if not self._use_color:
            return text

        # Expect blocks separated by the unicode box-drawing divider
        try:
            ts, level, logger_name, message = text.split(" │ ", 3)
        except ValueError:
            return text

        level_colour = self.FG.get(record.levelno, self.FG[logging.DEBUG])
        ts_coloured = f"{self.DIM}{ts}{self.RESET}"
        lvl_coloured = f"{level_colour}{level}{self.RESET}"
        logger_coloured = f"{self.DIM}{logger_name}{self.RESET}"
        message_coloured = f"{level_colour}{message}{self.RESET}"

        return " │ ".join((ts_coloured, lvl_coloured, logger_coloured, message_coloured))


def _detect_color() -> bool:
    # TTY and not NO_COLOR, or FORCE_COLOR set
    force_color = os.environ.get("FORCE_COLOR")
    no_color = os.environ.get("NO_COLOR") is not None
    is_tty = sys.stdout.isatty() if hasattr(sys.stdout, "isatty") else False
    return bool(force_color or (is_tty and not no_color))


def _make_console_handler(level: int, use_color: Optional[bool]) -> logging.Handler:
    """Build a tqdm-friendly, colorized console handler."""
    handler = _TqdmCompatibleHandler(stream=sys.stdout)
    handler.setLevel(level)
    if use_color is None:
        use_color = _detect_color()

    fmt = "%(asctime)s │ %(levelname)-5s │ %(name)s │ %(message)s"
    handler.setFormatter(_ColorFormatter(fmt, datefmt="%H:%M:%S", use_color=use_color))
    return handler


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    use_color: Optional[bool] = None,
) -> None:
    """Configure root logger with tqdm-friendly, colored console output.

    - Console: colorized, compatible with tqdm progress bars
    - File (optional): plain text without ANSI codes
    """
    handlers: list[logging.Handler] = [_make_console_handler(level, use_color)]
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    # Print the date once at the start to avoid per-line date clutter
    logging.getLogger(__name__).info("Date %s", time.strftime("%Y-%m-%d"))


def setup_logging_from_config(cfg: F64OpsConfig) -> Optional[RejectionCounter]:
    """Apply ``cfg``; returns the attached counter when ``count_records`` is set."""
    setup_logging(cfg.level, log_file=cfg.log_file, use_color=cfg.use_color)
    if cfg.count_records:
        return attach_counter()
    return None
