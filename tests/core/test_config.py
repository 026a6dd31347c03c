#!/usr/bin/env python3
import json
import logging
from pathlib import Path
import pytest

import docschema.core.config as cfg


# --- Helpers --- #

def _write_json(path: Path, payload: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")


@pytest.fixture
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setattr(cfg, "GLOBAL_CONFIG_PATH", tmp_path / "no/such/config.json", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DOCSCHEMA_STRICT", raising=False)
    monkeypatch.delenv("DOCSCHEMA_LOG_LEVEL", raising=False)
    return tmp_path


# --- load_config: defaults only --- #

def test_load_config_defaults_only(isolated: Path):
    assert cfg.load_config() == cfg.DEFAULT_CONFIG


# --- Precedence: global < project < env --- #

def test_load_config_global_and_project_precedence(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, isolated: Path):
    global_cfg = tmp_path / ".config/docschema/config.json"
    project_dir = tmp_path / "proj"
    project_cfg = project_dir / "docschema.json"

    _write_json(global_cfg, {
        "logging": {"level": "DEBUG"},
        "strict": True,
        "extra": 1,
    })
    _write_json(project_cfg, {
        "logging": {"level": "WARNING"},
        "definitions_prefix": "#/$defs/",
    })

    monkeypatch.setattr(cfg, "GLOBAL_CONFIG_PATH", global_cfg, raising=False)
    monkeypatch.chdir(project_dir)

    result = cfg.load_config()

    # Project overrides global
    assert result["logging"]["level"] == "WARNING"
    assert result["definitions_prefix"] == "#/$defs/"
    # Values only in global propagate through
    assert result["strict"] is True
    assert result["extra"] == 1


def test_load_config_invalid_json_raises(isolated: Path):
    (isolated / "docschema.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid JSON"):
        cfg.load_config()


# --- Env overrides --- #

@pytest.mark.parametrize("value,expected", [
    ("1", True),
    ("TRUE", True),
    (" yes ", True),
    ("on", True),
    ("0", False),
    ("no", False),
    ("", False),
])
def test_load_config_env_strict(isolated: Path, monkeypatch: pytest.MonkeyPatch, value, expected):
    _write_json(isolated / "docschema.json", {"strict": not expected})
    monkeypatch.setenv("DOCSCHEMA_STRICT", value)
    assert cfg.load_config()["strict"] is expected


def test_load_config_env_log_level(isolated: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DOCSCHEMA_LOG_LEVEL", "ERROR")
    assert cfg.load_config()["logging"]["level"] == "ERROR"


# --- configure_logging --- #

@pytest.mark.parametrize("config,level", [
    ({"logging": {"level": "debug"}}, logging.DEBUG),
    ({"logging": {"level": "WARNING"}}, logging.WARNING),
    ({}, logging.INFO),
])
def test_configure_logging(config, level):
    cfg.configure_logging(config)
    assert logging.getLogger("docschema").level == level
