from pathlib import Path

import config
from interface.tasks_dir_resolver import get_tasks_dir


def test_explicit_root_wins(monkeypatch, tmp_path):
    monkeypatch.setenv("STASK_ROOT", str(tmp_path / "env"))
    assert get_tasks_dir(tmp_path / "cli") == (tmp_path / "cli").resolve()


def test_env_beats_config(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "USER_CONFIG_PATH", tmp_path / "cfg.yaml")
    config.set_user_root(str(tmp_path / "cfg"))
    monkeypatch.setenv("STASK_ROOT", str(tmp_path / "env"))
    assert get_tasks_dir() == (tmp_path / "env").resolve()


def test_config_root_used_without_env(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "USER_CONFIG_PATH", tmp_path / "cfg.yaml")
    config.set_user_root(str(tmp_path / "cfg"))
    monkeypatch.delenv("STASK_ROOT", raising=False)
    assert get_tasks_dir() == (tmp_path / "cfg").resolve()


def test_falls_back_to_cwd(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "USER_CONFIG_PATH", tmp_path / "cfg.yaml")
    monkeypatch.delenv("STASK_ROOT", raising=False)
    monkeypatch.chdir(tmp_path)
    assert get_tasks_dir() == Path(tmp_path).resolve()


def test_expands_user(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_tasks_dir("~/tasks") == (tmp_path / "tasks").resolve()
