import json

import pytest

from banana_grid.src.utils import config_loader
from banana_grid.src.utils.config_loader import load_config, load_grid_config


def test_load_yaml_and_json(tmp_path):
    yaml_path = tmp_path / "grid.yaml"
    yaml_path.write_text("default_backend: dense\ndebug_checks: false\n", encoding="utf-8")
    assert load_config(str(yaml_path)) == {"default_backend": "dense", "debug_checks": False}

    json_path = tmp_path / "grid.json"
    json_path.write_text(json.dumps({"log_level": "DEBUG"}), encoding="utf-8")
    assert load_config(str(json_path)) == {"log_level": "DEBUG"}


def test_unsupported_format(tmp_path):
    path = tmp_path / "grid.ini"
    path.write_text("[grid]\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_missing_file_gives_defaults(tmp_path):
    config = load_grid_config(tmp_path / "absent.yaml")
    assert config == {"default_backend": "flat", "debug_checks": True, "log_level": "INFO"}


def test_file_overrides_defaults(tmp_path):
    path = tmp_path / "grid.yml"
    path.write_text("default_backend: dense\n", encoding="utf-8")
    config = load_grid_config(path)
    assert config["default_backend"] == "dense"
    assert config["debug_checks"] is True


def test_shipped_config():
    assert config_loader.GRID_CONFIG["default_backend"] in {"flat", "dense"}
    assert isinstance(config_loader.DEBUG_CHECKS, bool)


def test_runtime_setters(monkeypatch):
    monkeypatch.setattr(config_loader, "GRID_CONFIG", dict(config_loader.GRID_CONFIG))
    monkeypatch.setattr(config_loader, "DEBUG_CHECKS", config_loader.DEBUG_CHECKS)
    monkeypatch.setattr(config_loader, "DEFAULT_BACKEND", config_loader.DEFAULT_BACKEND)

    config_loader.set_debug_checks(False)
    config_loader.set_default_backend("dense")
    assert config_loader.DEBUG_CHECKS is False
    assert config_loader.DEFAULT_BACKEND == "dense"
    assert config_loader.GRID_CONFIG["default_backend"] == "dense"


def test_print_runtime_config(capsys):
    config_loader.print_runtime_config()
    out = capsys.readouterr().out
    assert "Runtime configuration:" in out
    assert "default_backend" in out
