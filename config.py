from __future__ import annotations

import yaml
from pathlib import Path
from typing import Dict, Any

USER_CONFIG_PATH = Path.home() / ".stask_config.yaml"


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _save_config(data: Dict[str, Any]) -> None:
    if not data:
        if USER_CONFIG_PATH.exists():
            USER_CONFIG_PATH.unlink()
        return
    USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    USER_CONFIG_PATH.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def _get_str(key: str) -> str:
    value = _load_config().get(key, "")
    return str(value).strip() if value else ""


def _set_str(key: str, value: str) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data[key] = value
    else:
        data.pop(key, None)
    _save_config(data)


def get_user_editor() -> str:
    return _get_str("editor")


def set_user_editor(value: str) -> None:
    _set_str("editor", value)


def get_user_theme() -> str:
    return _get_str("theme")


def set_user_theme(value: str) -> None:
    _set_str("theme", value)


def get_user_root() -> str:
    return _get_str("root")


def set_user_root(value: str) -> None:
    _set_str("root", value)
