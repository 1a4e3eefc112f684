"""
Configuration model and loaders for f64ops.
"""

from .model import DEFAULT_ENV_PREFIX, F64OpsConfig, load_config
from .layering import load_config_file, layer_dataclass_config

__all__ = [
    "DEFAULT_ENV_PREFIX",
    "F64OpsConfig",
    "load_config",
    "load_config_file",
    "layer_dataclass_config",
]
