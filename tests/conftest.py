import os
import tempfile

import pytest

# main.py reads the configuration at import time; keep it out of the home dir.
os.environ.setdefault("VISUALSQL_CONFIG_DIR", tempfile.mkdtemp(prefix="visualsql-test-"))

from services.config_manager import ConfigManager  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Give every test its own config directory"""
    monkeypatch.setenv("VISUALSQL_CONFIG_DIR", str(tmp_path / "config"))
    ConfigManager.reset_instance()
    yield tmp_path / "config"
    ConfigManager.reset_instance()
