import pytest

from f64ops import ConfigError
from f64ops.config import F64OpsConfig, layer_dataclass_config, load_config, load_config_file


def test_defaults_without_sources(monkeypatch):
    """With no file, env or overrides the dataclass defaults apply."""
    for key in ("F64OPS_LOG_LEVEL", "F64OPS_LOG_FILE", "F64OPS_USE_COLOR", "F64OPS_COUNT_RECORDS"):
        monkeypatch.delenv(key, raising=False)
    cfg = load_config()
    assert cfg == F64OpsConfig()
    assert cfg.log_level == "WARNING"


def test_config_layering_precedence(monkeypatch, tmp_path):
    """Validate precedence order file < env < overrides."""
    cfg_path = tmp_path / "ops.toml"
    cfg_path.write_text(
        """
        [f64ops]
        log_level = "info"
        log_file = "from_file.log"
        use_color = true
        count_records = true
        """
    )
    monkeypatch.delenv("F64OPS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("F64OPS_COUNT_RECORDS", raising=False)
    monkeypatch.setenv("F64OPS_LOG_FILE", "from_env.log")
    monkeypatch.setenv("F64OPS_USE_COLOR", "no")

    cfg = load_config(str(cfg_path), log_level="debug")

    assert cfg.log_level == "DEBUG"  # override beats file
    assert cfg.log_file == "from_env.log"  # env beats file
    assert cfg.use_color is False  # env string coerced to bool
    assert cfg.level == 10
    assert cfg.count_records is True  # file value kept


def test_flat_yaml_config(monkeypatch, tmp_path):
    """YAML files may use flat keys; unknown keys are ignored."""
    monkeypatch.delenv("F64OPS_LOG_LEVEL", raising=False)
    cfg_path = tmp_path / "ops.yaml"
    cfg_path.write_text("log_level: error\nunrelated: 3\n")
    cfg = load_config(str(cfg_path))
    assert cfg.log_level == "ERROR"


def test_unsupported_extension(tmp_path):
    """Only TOML and YAML files are understood."""
    path = tmp_path / "ops.ini"
    path.write_text("[f64ops]\n")
    with pytest.raises(ConfigError):
        load_config_file(str(path))


def test_invalid_log_level_rejected():
    """Unknown level names are a configuration error."""
    with pytest.raises(ConfigError):
        F64OpsConfig(log_level="chatty")


def test_layer_dataclass_config_coerces_types(monkeypatch):
    """Env strings are coerced using the resolved field annotations."""
    monkeypatch.setenv("X_USE_COLOR", "1")
    merged = layer_dataclass_config(
        F64OpsConfig,
        file_cfg={"log_level": "info", "bogus": 1},
        env_prefixes=("X_",),
        cli_overrides={"log_file": "out.log"},
    )
    assert merged == {"log_level": "info", "use_color": True, "log_file": "out.log"}
