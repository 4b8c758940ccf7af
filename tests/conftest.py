import sys

import pytest
from fastapi.testclient import TestClient

from app.log import log, setup_logging
from app.main import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no PORT/HOST/LOG_LEVEL in the environment and no .env in cwd."""
    for name in ("PORT", "HOST", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_log_level():
    yield
    setup_logging("INFO")


class _CurrentStdout:
    """Forward to whatever sys.stdout is at write time; capsys swaps it per test phase."""

    def write(self, text):
        return sys.stdout.write(text)

    def flush(self):
        sys.stdout.flush()


@pytest.fixture
def stdout_log(capsys):
    """Point the service log handler at the stdout capsys is capturing."""
    handler = log().handlers[0]
    previous = handler.stream
    handler.stream = _CurrentStdout()
    yield capsys
    handler.stream = previous
