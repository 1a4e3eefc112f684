"""Layer configuration values from files, environment variables, and explicit overrides, letting later sources override earlier ones."""

from __future__ import annotations
from dataclasses import fields as dc_fields
from typing import Any, Dict, Tuple, Type, Union, get_args, get_origin, get_type_hints
import os

from ..errors import ConfigError


def _try_parse_bool(s: str) -> bool:
    t = s.strip().lower()
    if t in {"1", "true", "yes", "on", "y"}:
        return True
    if t in {"0", "false", "no", "off", "n"}:
        return False
    # Fallback: non-empty truthy
    return bool(t)


def _unwrap_optional(tp: Any) -> Any:
    if get_origin(tp) is Union:
        args = [a for a in get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def _coerce_value(val: Any, to_type: Any) -> Any:
    to_type = _unwrap_optional(to_type)
    if val is None or not isinstance(to_type, type) or isinstance(val, to_type):
        return val
    try:
        if to_type is bool:
            if isinstance(val, str):
                return _try_parse_bool(val)
            return bool(val)
        if to_type in (int, float, str):
            return to_type(val)
    except (TypeError, ValueError):
        pass
    return val


def _field_types(dc_type: Type) -> Dict[str, Any]:
    # Resolve string annotations left by ``from __future__ import annotations``
    hints = get_type_hints(dc_type)
    return {f.name: hints.get(f.name, f.type) for f in dc_fields(dc_type)}


def _load_toml(path: str) -> Dict[str, Any]:
    import tomllib
    with open(path, "rb") as f:
        return tomllib.load(f)


def _load_yaml(path: str) -> Dict[str, Any]:
    import yaml
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def load_config_file(path: str) -> Dict[str, Any]:
    """Load a config file (TOML or YAML).

    Returns a nested dict. Accepts a top-level ``f64ops`` section or flat keys
    matching dataclass field names.
    """
    ext = os.path.splitext(path)[1].lower()
    if ext in (".toml", ".tml"):
        return _load_toml(path)
    if ext in (".yaml", ".yml"):
        return _load_yaml(path)
    raise ConfigError(f"Unsupported config extension: {ext}")


def flatten_sectioned_config(raw: Dict[str, Any], section: str | None) -> Dict[str, Any]:
    if section and section in raw and isinstance(raw[section], dict):
        return dict(raw.get(section, {}))
    # If not sectioned, return a shallow copy of top-level
    return dict(raw)


def _collect_env_overrides(dc_type: Type, prefixes: Tuple[str, ...]) -> Dict[str, Any]:
    """Collect env var overrides for a dataclass.

    Env keys use uppercase with underscores, e.g. F64OPS_LOG_LEVEL.
    Later prefixes in the tuple have higher precedence.
    """
    out: Dict[str, Any] = {}
    field_types = _field_types(dc_type)
    name_map = {name.lower(): name for name in field_types}
    for prefix in prefixes:
        plen = len(prefix)
        for k, v in os.environ.items():
            if not k.startswith(prefix):
                continue
            key = k[plen:].lower()
            if key in name_map:
                name = name_map[key]
                out[name] = _coerce_value(v, field_types[name])
    return out


def layer_dataclass_config(
    dc_type: Type,
    *,
    file_cfg: Dict[str, Any] | None,
    env_prefixes: Tuple[str, ...],
    cli_overrides: Dict[str, Any],
) -> Dict[str, Any]:
    """Return a merged mapping for dc_type following precedence: file < env < overrides.

    Only fields present on the dataclass are included; types are coerced best-effort.
    """
    result: Dict[str, Any] = {}
    field_types = _field_types(dc_type)
    # 1) file
    if file_cfg:
        for k, v in file_cfg.items():
            if k in field_types:
                result[k] = _coerce_value(v, field_types[k])
    # 2) env
    result.update(_collect_env_overrides(dc_type, env_prefixes))
    # 3) explicit overrides
    for k, v in cli_overrides.items():
        if k in field_types:
            result[k] = _coerce_value(v, field_types[k])
    return result
