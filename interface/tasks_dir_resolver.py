from pathlib import Path
import os

from config import get_user_root


def get_tasks_dir(tasks_dir: Path | str | None = None) -> Path:
    """Unified resolver for the task root.

    Priority:
    1. Explicit tasks_dir (``--root``).
    2. STASK_ROOT env variable.
    3. ``root`` from the user config.
    4. Current working directory.
    """
    if tasks_dir:
        return Path(tasks_dir).expanduser().resolve()

    env_root = os.environ.get("STASK_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()

    config_root = get_user_root()
    if config_root:
        return Path(config_root).expanduser().resolve()

    return Path.cwd().resolve()


__all__ = ["get_tasks_dir"]
