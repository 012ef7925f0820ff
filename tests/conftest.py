import logging
import sys
from pathlib import Path

import pytest


def _ensure_repo_root_on_path():
    """Allow tests to import project modules without installation."""
    repo_root = Path(__file__).resolve().parent.parent
    repo_str = str(repo_root)
    if repo_str not in sys.path:
        sys.path.insert(0, repo_str)


_ensure_repo_root_on_path()


@pytest.fixture(autouse=True)
def clear_build_env(monkeypatch):
    """Ensure each test starts without build-specific environment variables."""
    for name in ("GOOGLE_CLIENT_ID", "BACKEND_URL", "AUTHORIZED_DOMAINS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_root_logger():
    """Undo the level and handlers setup_logging leaves on the root logger."""
    from sitebuild.logging_setup import JsonFormatter

    root = logging.getLogger()
    original_handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in original_handlers and isinstance(handler.formatter, JsonFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
