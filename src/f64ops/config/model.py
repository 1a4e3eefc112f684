"""
Dataclass-based configuration for the ambient parts of f64ops.

The operations themselves take no configuration; these knobs only govern
how the package reports what it does.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Any, Optional, Tuple

from ..errors import ConfigError
from .layering import flatten_sectioned_config, layer_dataclass_config, load_config_file

logger = logging.getLogger(__name__)

DEFAULT_ENV_PREFIX = "F64OPS_"
CONFIG_SECTION = "f64ops"

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclass
class F64OpsConfig:
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    # None: colour when stdout is a TTY and NO_COLOR is unset
    use_color: Optional[bool] = None
    # Attach a RejectionCounter to the package logger
    count_records: bool = False

    def __post_init__(self) -> None:
        level = str(self.log_level).strip().upper()
        if level not in _LEVEL_NAMES:
            raise ConfigError(
                f"log_level must be one of {', '.join(_LEVEL_NAMES)}, got {self.log_level!r}"
            )
        self.log_level = level

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


def load_config(
    path: Optional[str] = None,
    *,
    env_prefixes: Tuple[str, ...] = (DEFAULT_ENV_PREFIX,),
    **overrides: Any,
) -> F64OpsConfig:
    """Resolve an :class:`F64OpsConfig` with precedence file < env < ``overrides``."""
    file_cfg = None
    if path:
        raw = load_config_file(path)
        file_cfg = flatten_sectioned_config(raw, CONFIG_SECTION)
    merged = layer_dataclass_config(
        F64OpsConfig,
        file_cfg=file_cfg,
        env_prefixes=env_prefixes,
        cli_overrides=overrides,
    )
    logger.debug("resolved config %s (file=%s)", merged, path)
    return F64OpsConfig(**merged)
