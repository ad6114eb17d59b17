"""Tests for Settings loading from YAML and environment."""

import logging

import pytest

from hashstack.core import config as config_module
from hashstack.core.config import DEFAULT_ENDPOINT, ConfigLoader, Settings, get_config
from hashstack.core.logging import setup_logging

pytestmark = [pytest.mark.fast]


def test_defaults_without_file_or_env():
    cfg = ConfigLoader(env={}).load_default()
    assert cfg.endpoint == DEFAULT_ENDPOINT
    assert cfg.model == "gpt-4.1"
    assert cfg.max_upload_bytes == 20 * 1024 * 1024
    assert cfg.max_tag_length == 24
    assert cfg.label_mode == "heuristic"


def test_env_overrides_default_config():
    env = {"HASHSTACK_ENDPOINT": "http://proxy.local/v1/chat/completions", "HASHSTACK_MODEL": "gpt-4o"}
    cfg = ConfigLoader(env=env).load_default()
    assert cfg.endpoint == "http://proxy.local/v1/chat/completions"
    assert cfg.model == "gpt-4o"


def test_yaml_file_from_env_var(tmp_path):
    path = tmp_path / "custom.yml"
    path.write_text("model: gpt-4o-mini\nlabel_mode: model\nlog_level: debug\nunknown_key: 1\n")
    cfg = ConfigLoader(env={"HASHSTACK_CONFIG": str(path), "HASHSTACK_MODEL": "gpt-4o"}).load_default()
    assert cfg.model == "gpt-4o"
    assert cfg.label_mode == "model"
    assert cfg.log_level == "DEBUG"


def test_explicit_path_ignores_env_override(tmp_path, monkeypatch):
    path = tmp_path / "hashstack.yml"
    path.write_text("model: gpt-4o-mini\n")
    monkeypatch.setenv("HASHSTACK_MODEL", "gpt-4o")
    assert get_config(path).model == "gpt-4o-mini"
    assert get_config() is get_config()


def test_empty_yaml_yields_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    assert ConfigLoader(env={}).load_from_yaml(path, apply_env_override=False) == Settings()


def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_config(tmp_path / "nope.yml")


def test_non_mapping_yaml_raises(tmp_path):
    path = tmp_path / "list.yml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        ConfigLoader(env={}).load_from_yaml(path, apply_env_override=False)


def test_hashstack_yml_in_cwd_is_picked_up(tmp_path):
    (tmp_path / "hashstack.yml").write_text("max_tag_length: 30\n")
    config_module.reset_config()
    assert get_config().max_tag_length == 30


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    saved = root.handlers[:]
    try:
        setup_logging("debug")
        setup_logging("warning")
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = saved
