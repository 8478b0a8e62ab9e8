"""Tests for the preference store backends.

The QSettings tests write INI files under tmp_path and are skipped
when PySide6 is not importable.
"""

import json

import pytest

from typedprefs.preferences import (
    CustomCommand,
    PreferenceKeys,
    PresentationMode,
    TypedPreferenceStore,
)
from typedprefs.storage import (
    InMemoryPreferenceStore,
    JsonFilePreferenceStore,
    PreferenceStore,
)

# Guard: skip Qt-dependent tests if PySide6 is not importable
try:
    from PySide6.QtCore import QSettings
    _HAS_QT = True
except ImportError:
    _HAS_QT = False

needs_qt = pytest.mark.skipif(not _HAS_QT, reason="PySide6 not available")


# ---------------------------------------------------------------------------
# InMemoryPreferenceStore
# ---------------------------------------------------------------------------

class TestInMemoryStore:

    def test_implements_protocol(self):
        assert isinstance(InMemoryPreferenceStore(), PreferenceStore)

    def test_set_and_remove(self):
        store = InMemoryPreferenceStore()
        store.set("a", 1)
        assert store.value("a") == 1

        store.set("a", None)
        assert store.value("a") is None
        assert "a" not in store

    def test_remove_missing_key(self):
        store = InMemoryPreferenceStore()
        store.set("missing", None)
        assert len(store) == 0

    def test_initial_values_are_copied(self):
        initial = {"a": 1}
        store = InMemoryPreferenceStore(initial)
        store.set("b", 2)
        assert initial == {"a": 1}
        assert sorted(store.keys()) == ["a", "b"]


# ---------------------------------------------------------------------------
# JsonFilePreferenceStore
# ---------------------------------------------------------------------------

class TestJsonFileStore:

    def test_implements_protocol(self, tmp_path):
        assert isinstance(JsonFilePreferenceStore(tmp_path / "prefs.json"), PreferenceStore)

    def test_missing_file_starts_empty(self, tmp_path):
        store = JsonFilePreferenceStore(tmp_path / "prefs.json")
        assert store.value("anything") is None
        assert not (tmp_path / "prefs.json").exists()

    def test_autosave_persists_each_write(self, tmp_path):
        path = tmp_path / "nested" / "prefs.json"
        store = JsonFilePreferenceStore(path)
        store.set("RealtimeSuggestionDebounce", 0.7)

        assert json.loads(path.read_text()) == {"RealtimeSuggestionDebounce": 0.7}

    def test_values_survive_reopen(self, tmp_path):
        path = tmp_path / "prefs.json"
        prefs = TypedPreferenceStore(JsonFilePreferenceStore(path))
        commands = [CustomCommand(command_id="x", name="X")]
        prefs.set(PreferenceKeys.SUGGESTION_PRESENTATION_MODE, PresentationMode.NEARBY_TEXT_CURSOR)
        prefs.set(PreferenceKeys.CUSTOM_COMMANDS, commands)
        prefs.set(PreferenceKeys.ACCEPT_SUGGESTION_WITH_TAB, False)

        reopened = TypedPreferenceStore(JsonFilePreferenceStore(path))
        assert reopened.get(PreferenceKeys.SUGGESTION_PRESENTATION_MODE) == PresentationMode.NEARBY_TEXT_CURSOR
        assert reopened.get(PreferenceKeys.CUSTOM_COMMANDS) == commands
        assert reopened.get(PreferenceKeys.ACCEPT_SUGGESTION_WITH_TAB) is False

    def test_remove_persists(self, tmp_path):
        path = tmp_path / "prefs.json"
        store = JsonFilePreferenceStore(path)
        store.set("a", 1)
        store.set("a", None)

        assert json.loads(path.read_text()) == {}

    def test_without_autosave_needs_save(self, tmp_path):
        path = tmp_path / "prefs.json"
        store = JsonFilePreferenceStore(path, autosave=False)
        store.set("a", 1)
        assert not path.exists()

        store.save()
        assert json.loads(path.read_text()) == {"a": 1}

    def test_corrupt_file_starts_empty(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("{not valid json")

        prefs = TypedPreferenceStore(JsonFilePreferenceStore(path))
        assert prefs.get(PreferenceKeys.REALTIME_SUGGESTION_DEBOUNCE) == 0.3

    def test_non_object_file_starts_empty(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("[1, 2, 3]")

        store = JsonFilePreferenceStore(path)
        assert store.value("0") is None

    def test_invalid_utf8_file_starts_empty(self, tmp_path, caplog):
        path = tmp_path / "prefs.json"
        path.write_bytes(b'{"RealtimeSuggestionDebounce": "\xff\xfe"}')

        prefs = TypedPreferenceStore(JsonFilePreferenceStore(path))
        assert prefs.get(PreferenceKeys.REALTIME_SUGGESTION_DEBOUNCE) == 0.3
        assert "Failed to load preferences" in caplog.text

    def test_deeply_nested_file_starts_empty(self, tmp_path, caplog):
        path = tmp_path / "prefs.json"
        path.write_text("[" * 100000)

        prefs = TypedPreferenceStore(JsonFilePreferenceStore(path))
        assert prefs.get(PreferenceKeys.SUGGESTION_FEATURE_ENABLED_PROJECT_LIST) == []
        assert "Failed to load preferences" in caplog.text

    def test_save_failure_is_logged(self, tmp_path, caplog):
        path = tmp_path / "prefs.json"
        path.mkdir()  # a directory where the file should be

        store = JsonFilePreferenceStore(path)
        store.set("a", 1)

        assert store.value("a") == 1
        assert "Failed to save preferences" in caplog.text


# ---------------------------------------------------------------------------
# QSettingsPreferenceStore
# ---------------------------------------------------------------------------

@needs_qt
class TestQSettingsStore:

    def _make_store(self, tmp_path):
        from typedprefs.storage.qt import QSettingsPreferenceStore
        return QSettingsPreferenceStore(path=tmp_path / "prefs.ini")

    def test_implements_protocol(self, tmp_path):
        assert isinstance(self._make_store(tmp_path), PreferenceStore)

    def test_scalar_types_survive_reopen(self, tmp_path):
        store = self._make_store(tmp_path)
        store.set("flag", True)
        store.set("count", 3)
        store.set("ratio", 1.25)
        store.set("name", "Menlo")
        store.sync()

        reopened = self._make_store(tmp_path)
        assert reopened.value("flag") is True
        assert reopened.value("count") == 3
        assert isinstance(reopened.value("count"), int)
        assert reopened.value("ratio") == 1.25
        assert reopened.value("name") == "Menlo"

    def test_typed_round_trip(self, tmp_path):
        prefs = TypedPreferenceStore(self._make_store(tmp_path))
        prefs.set(PreferenceKeys.SUGGESTION_FEATURE_ENABLED_PROJECT_LIST, ["/a", "/b"])
        prefs.set(PreferenceKeys.REALTIME_SUGGESTION_DEBOUNCE, 1.2)
        prefs.store.sync()

        reopened = TypedPreferenceStore(self._make_store(tmp_path))
        assert reopened.get(PreferenceKeys.SUGGESTION_FEATURE_ENABLED_PROJECT_LIST) == ["/a", "/b"]
        assert reopened.get(PreferenceKeys.REALTIME_SUGGESTION_DEBOUNCE) == 1.2

    def test_remove(self, tmp_path):
        store = self._make_store(tmp_path)
        store.set("a", 1)
        store.set("a", None)
        assert store.value("a") is None

    def test_foreign_values_are_returned_as_is(self, tmp_path):
        from typedprefs.storage.qt import QSettingsPreferenceStore

        settings = QSettings(str(tmp_path / "prefs.ini"), QSettings.Format.IniFormat)
        settings.setValue("plain", "not json")
        store = QSettingsPreferenceStore(settings=settings)

        assert store.value("plain") == "not json"
        assert store.settings is settings

    def test_deeply_nested_value_is_returned_as_is(self, tmp_path):
        from typedprefs.storage.qt import QSettingsPreferenceStore

        settings = QSettings(str(tmp_path / "prefs.ini"), QSettings.Format.IniFormat)
        settings.setValue("SuggestionFeatureEnabledProjectList", "[" * 100000)
        prefs = TypedPreferenceStore(QSettingsPreferenceStore(settings=settings))

        assert prefs.store.value("SuggestionFeatureEnabledProjectList") == "[" * 100000
        assert prefs.get(PreferenceKeys.SUGGESTION_FEATURE_ENABLED_PROJECT_LIST) == []
