# tests/test_config.py

from __future__ import annotations

import pytest

from genealogy_tree.config import (
    CONFIG_ENV_VAR,
    DEFAULTS,
    get_config,
    load_config,
    reset_config,
    resolve_config_path,
)


def test_yaml_values_merge_over_defaults(tmp_path):
    path = tmp_path / "cfg.yml"
    path.write_text("display:\n  language: vi\nchart:\n  transition_time: 0\n", encoding="utf-8")

    cfg = load_config(path)
    assert cfg.display["language"] == "vi"
    assert cfg.chart["transition_time"] == 0
    assert cfg.chart["card_x_spacing"] == DEFAULTS["chart"]["card_x_spacing"]
    assert cfg.store["writer_role"] == "admin"
    assert cfg.debug is False


def test_empty_yaml_is_all_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.store["default_tree_id"] == "main"


def test_missing_explicit_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yml")


def test_env_var_overrides_path(tmp_path, monkeypatch):
    path = tmp_path / "env.yml"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert resolve_config_path() == path


@pytest.fixture
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_get_config_reads_env_path_after_reset(tmp_path, monkeypatch, fresh_config):
    path = tmp_path / "env.yml"
    path.write_text("display:\n  language: fr\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    cfg = get_config()
    assert cfg.display["language"] == "fr"
    assert get_config() is cfg

    reset_config()
    monkeypatch.delenv(CONFIG_ENV_VAR)
    assert get_config() is not cfg
