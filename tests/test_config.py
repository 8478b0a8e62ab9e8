"""
Tests for configuration, the startup entry point and logging setup.
"""

import json
import logging

import pytest

from typedprefs.config import get_config_dir, open_shared_store, resolve_backend
from typedprefs.main import main
from typedprefs.preferences import PreferenceKeys, TypedPreferenceStore
from typedprefs.storage import InMemoryPreferenceStore, JsonFilePreferenceStore
from typedprefs.utils import get_log_dir, setup_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep the real user directories and environment out of the tests."""
    monkeypatch.delenv("TYPEDPREFS_BACKEND", raising=False)
    monkeypatch.delenv("TYPEDPREFS_CONFIG_DIR", raising=False)
    monkeypatch.delenv("TYPEDPREFS_LOG_DIR", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "config"))
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "cache"))


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_config_dir_default(tmp_path):
    config_dir = get_config_dir()
    assert config_dir == tmp_path / "config" / "typedprefs"
    assert config_dir.is_dir()


def test_config_dir_override(monkeypatch, tmp_path):
    monkeypatch.setenv("TYPEDPREFS_CONFIG_DIR", str(tmp_path / "custom"))
    assert get_config_dir() == tmp_path / "custom"
    assert (tmp_path / "custom").is_dir()


def test_resolve_backend_default():
    assert resolve_backend() == "json"


def test_resolve_backend_explicit_and_env(monkeypatch):
    assert resolve_backend("Memory") == "memory"
    monkeypatch.setenv("TYPEDPREFS_BACKEND", "qsettings")
    assert resolve_backend() == "qsettings"
    assert resolve_backend("json") == "json"


def test_resolve_backend_unknown(caplog):
    assert resolve_backend("sqlite") == "json"
    assert "Unknown preference backend" in caplog.text


def test_open_memory_store():
    prefs = open_shared_store("memory")
    assert isinstance(prefs, TypedPreferenceStore)
    assert isinstance(prefs.store, InMemoryPreferenceStore)


def test_open_json_store(tmp_path):
    prefs = open_shared_store()
    assert isinstance(prefs.store, JsonFilePreferenceStore)
    assert prefs.store.path == tmp_path / "config" / "typedprefs" / "preferences.json"


def test_main_seeds_json_store(tmp_path, restore_root_logger):
    assert main() == 0

    path = tmp_path / "config" / "typedprefs" / "preferences.json"
    stored = json.loads(path.read_text())
    assert stored["RealtimeSuggestionDebounce"] == 0.3
    assert json.loads(stored["NewSuggestionFeatureProvider"]) == {"builtIn": 0}


def test_main_keeps_existing_values(tmp_path, restore_root_logger):
    path = tmp_path / "config" / "typedprefs" / "preferences.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps({"RealtimeSuggestionDebounce": 1.2}))

    main()

    prefs = TypedPreferenceStore(JsonFilePreferenceStore(path))
    assert prefs.get(PreferenceKeys.REALTIME_SUGGESTION_DEBOUNCE) == 1.2


def test_main_survives_unreadable_file(tmp_path, restore_root_logger):
    path = tmp_path / "config" / "typedprefs" / "preferences.json"
    path.parent.mkdir(parents=True)
    path.write_bytes(b'{"RealtimeSuggestionDebounce": "\xff\xfe"}')

    assert main() == 0
    assert json.loads(path.read_text())["RealtimeSuggestionDebounce"] == 0.3


def test_setup_logging_console_only(restore_root_logger):
    logger = setup_logging(log_level="DEBUG", log_file=False)
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_setup_logging_with_file(tmp_path, restore_root_logger):
    logger = setup_logging(log_level="warning", log_file=True)
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 2

    log_dir = get_log_dir()
    assert log_dir == tmp_path / "cache" / "typedprefs" / "logs"
    assert any(log_dir.glob("typedprefs_*.log"))


def test_log_dir_override(monkeypatch, tmp_path, restore_root_logger):
    monkeypatch.setenv("TYPEDPREFS_LOG_DIR", str(tmp_path / "logs"))
    assert get_log_dir() == tmp_path / "logs"

    setup_logging(log_file=True)
    assert any((tmp_path / "logs").glob("typedprefs_*.log"))
