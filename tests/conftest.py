import logging
import shutil
from pathlib import Path
import tempfile
import pytest


@pytest.fixture(scope="session", autouse=True)
def isolate_home_config():
    """Temporarily move any existing user-level convcommit config out of the way.

    Tests expect the built-in defaults unless they provide a config file
    themselves. The file is restored after the test session.
    """
    config_path = Path.home() / ".convcommit" / "config.json"
    backup_dir = None
    moved = False
    if config_path.exists():
        backup_dir = Path(tempfile.mkdtemp(prefix="convcommit_backup_"))
        shutil.move(str(config_path), str(backup_dir / "config.json"))
        moved = True

    try:
        yield
    finally:
        if moved and backup_dir is not None:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.move(str(backup_dir / "config.json"), str(config_path))
            shutil.rmtree(str(backup_dir), ignore_errors=True)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo ``logging.basicConfig(force=True)`` calls made by CLI tests.

    Handlers installed while a ``CliRunner`` is active point at streams
    that are closed once the invocation returns.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        for handler in list(root.handlers):
            if handler not in handlers:
                root.removeHandler(handler)
        for handler in handlers:
            if handler not in root.handlers:
                root.addHandler(handler)
        root.setLevel(level)
