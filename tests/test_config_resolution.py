from __future__ import annotations

import os
from pathlib import Path

import pytest

from loto.config import resolve_parameters


def test_defaults_without_sources():
    resolved, params_hash, cfg = resolve_parameters(config_path_str=None, cli_overrides={}, env={})
    assert resolved["count"] == 1
    assert resolved["seed"] is None
    assert resolved["strict"] is True
    assert params_hash.startswith("sha256:")
    assert cfg is None


def test_env_precedence_over_config(tmp_path: Path, monkeypatch):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("count: 4\nseed: 10\n", encoding="utf-8")
    monkeypatch.setenv("LOTO_SEED", "75")

    resolved, params_hash, _ = resolve_parameters(
        config_path_str=str(cfg), cli_overrides={}, env=os.environ
    )
    assert resolved["seed"] == 75
    assert resolved["count"] == 4
    assert params_hash.startswith("sha256:")


def test_cli_precedence_over_env(tmp_path: Path, monkeypatch):
    cfg = tmp_path / "config.json"
    cfg.write_text('{"count": 2}', encoding="utf-8")
    monkeypatch.setenv("LOTO_COUNT", "3")

    resolved, _hash, _ = resolve_parameters(
        config_path_str=str(cfg), cli_overrides={"count": 6, "seed": None}, env=os.environ
    )
    assert resolved["count"] == 6


def test_env_bool_parsing():
    resolved, _hash, _ = resolve_parameters(
        config_path_str=None, cli_overrides={}, env={"LOTO_STRICT": "no"}
    )
    assert resolved["strict"] is False


def test_path_normalization_cli_vs_config(tmp_path: Path, monkeypatch):
    cfg_dir = tmp_path / "cfg"
    cfg_dir.mkdir()
    cfg = cfg_dir / "conf.yaml"
    cfg.write_text("out_cards: cards.json\n", encoding="utf-8")

    monkeypatch.chdir(tmp_path)
    resolved, _hash, _ = resolve_parameters(
        config_path_str=str(cfg),
        cli_overrides={"out_report": "rep.json"},
        env={},
    )
    assert Path(resolved["out_cards"]).parent == cfg_dir.resolve()
    assert Path(resolved["out_report"]).parent == tmp_path.resolve()


def test_params_hash_ignores_output_settings():
    base = {"count": 3, "seed": 42, "log_level": "INFO"}
    _, h1, _ = resolve_parameters(config_path_str=None, cli_overrides=base, env={})
    _, h2, _ = resolve_parameters(
        config_path_str=None, cli_overrides={**base, "log_level": "DEBUG"}, env={}
    )
    _, h3, _ = resolve_parameters(
        config_path_str=None, cli_overrides={**base, "seed": 43}, env={}
    )
    assert h1 == h2
    assert h1 != h3


def test_bad_config_files(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        resolve_parameters(config_path_str=str(tmp_path / "missing.yaml"), cli_overrides={}, env={})
    listing = tmp_path / "list.yaml"
    listing.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        resolve_parameters(config_path_str=str(listing), cli_overrides={}, env={})
    toml = tmp_path / "conf.toml"
    toml.write_text("count = 1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        resolve_parameters(config_path_str=str(toml), cli_overrides={}, env={})
