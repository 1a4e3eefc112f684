"""Tally the records f64ops emits, with rejected vectors and operands counted by kind.

``ensure_vector`` and ``ensure_operand_length`` tag their DEBUG records with a
``rejection`` attribute (``"vector_type"`` or ``"operand_length"``); the
:class:`RejectionCounter` groups on it so an application can see how often it
fed the library bad arguments without re-parsing messages.
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Dict, Optional

PACKAGE_LOGGER = "f64ops"


class RejectionCounter(logging.Handler):
    """Count records per level and rejected arguments per kind."""

    def __init__(self, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.level_counts: Counter[str] = Counter()
        self.rejection_counts: Counter[str] = Counter()
        self.last_rejection: Optional[str] = None

    def emit(self, record: logging.LogRecord) -> None:  # type: ignore[override]
        self.level_counts[record.levelname] += 1
        kind = getattr(record, "rejection", None)
        if kind is not None:
            self.rejection_counts[kind] += 1
            self.last_rejection = record.getMessage()

    @property
    def total_rejections(self) -> int:
        return sum(self.rejection_counts.values())

    def summary(self) -> Dict[str, object]:
        return {
            "levels": dict(self.level_counts),
            "rejections": dict(self.rejection_counts),
            "last_rejection": self.last_rejection,
        }

    def dump_summary(self, path: str | Path) -> None:
        """Write the level and rejection tallies to ``path``."""
        p = Path(path)
        with p.open("w", encoding="utf8") as fh:
            fh.write("[Levels]\n")
            for lvl, c in sorted(self.level_counts.items()):
                fh.write(f"{lvl}: {c}\n")
            fh.write(f"\n[Rejections] total={self.total_rejections}\n")
            for kind, c in sorted(self.rejection_counts.items()):
                fh.write(f"{kind}: {c}\n")
            if self.last_rejection is not None:
                fh.write(f"last: {self.last_rejection}\n")


_counter: RejectionCounter | None = None


def attach_counter() -> RejectionCounter:
    """Attach the process counter to the package logger, creating it once.

    The package logger is lowered to DEBUG so rejection records reach the
    counter; console and file handlers keep their own thresholds.
    """
    global _counter
    logger = logging.getLogger(PACKAGE_LOGGER)
    if _counter is None:
        _counter = RejectionCounter()
    if _counter not in logger.handlers:
        logger.addHandler(_counter)
    logger.setLevel(logging.DEBUG)
    return _counter


def detach_counter() -> None:
    global _counter
    if _counter is not None:
        logging.getLogger(PACKAGE_LOGGER).removeHandler(_counter)
        _counter = None


def get_counter() -> RejectionCounter | None:
    return _counter
