import importlib

import pytest

from src import settings


@pytest.fixture
def reload_settings(monkeypatch):
    yield lambda: importlib.reload(settings)
    monkeypatch.undo()
    importlib.reload(settings)


def test_extensions_are_lowercased_and_dot_prefixed(monkeypatch, reload_settings) -> None:
    monkeypatch.setenv("MANUSCRIPT_ALLOWED_EXTENSIONS", "TEX, .ltx ,,")
    reload_settings()

    assert settings.ALLOWED_EXTENSIONS == (".tex", ".ltx")


def test_blank_extensions_fall_back_to_default(monkeypatch, reload_settings) -> None:
    monkeypatch.setenv("MANUSCRIPT_ALLOWED_EXTENSIONS", " , ")
    reload_settings()

    assert settings.ALLOWED_EXTENSIONS == (".tex",)


def test_integer_settings_read_from_environment(monkeypatch, reload_settings) -> None:
    monkeypatch.setenv("MANUSCRIPT_PREVIEW_MAX_CHARS", "500")
    monkeypatch.setenv("MANUSCRIPT_MAX_UPLOAD_BYTES", "")
    monkeypatch.setenv("MANUSCRIPT_LOG_LEVEL", "debug")
    reload_settings()

    assert settings.PREVIEW_MAX_CHARS == 500
    assert settings.MAX_UPLOAD_BYTES == 20 * 1024 * 1024
    assert settings.LOG_LEVEL == "DEBUG"


def test_bad_integer_setting_raises(monkeypatch, reload_settings) -> None:
    monkeypatch.setenv("MANUSCRIPT_MAX_UPLOAD_BYTES", "lots")

    with pytest.raises(ValueError, match="MANUSCRIPT_MAX_UPLOAD_BYTES must be an integer"):
        reload_settings()
