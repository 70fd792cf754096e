# backend/tests/conftest.py
"""
Pytest configuration for birthday notifier tests.

- Ensures that the project root (backend/) is added to sys.path
  so that `import notifier.*` works correctly in tests.
- Clears NOTIFIER_* environment variables so host settings do not leak
  into tests, and resets the shared NotificationService between tests.
"""

import os
import sys
from pathlib import Path

import pytest


def _ensure_project_root_in_sys_path() -> None:
    # This file is located at: backend/tests/conftest.py
    # parents[1] -> backend/
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)

    if project_root_str not in sys.path:
        sys.path.insert(0, project_root_str)


_ensure_project_root_in_sys_path()


@pytest.fixture(autouse=True)
def _isolate_notifier_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith("NOTIFIER_"):
            monkeypatch.delenv(name, raising=False)

    from notifier.notifications.factory import reset_notification_service

    reset_notification_service()
    yield
    reset_notification_service()
