"""
Tests für repo_config.py
"""

import json

import pytest

from repo_config import ROOT_ENV_VAR, ConfigError, read_config, save_config


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Entfernt die Umgebungsvariable für alle Tests."""
    monkeypatch.delenv(ROOT_ENV_VAR, raising=False)


def test_read_config_from_file(tmp_path):
    """Das Root-Verzeichnis wird aus der JSON-Datei gelesen."""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"root": str(tmp_path / "repos")}), encoding="utf-8")

    assert read_config(config_file) == tmp_path / "repos"


def test_read_config_env_overrides_file(tmp_path, monkeypatch):
    """Die Umgebungsvariable hat Vorrang vor der Datei."""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"root": "/somewhere/else"}), encoding="utf-8")
    monkeypatch.setenv(ROOT_ENV_VAR, str(tmp_path))

    assert read_config(config_file) == tmp_path


def test_read_config_expands_user(tmp_path, monkeypatch):
    """Eine Tilde wird zum Home-Verzeichnis aufgelöst."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv(ROOT_ENV_VAR, "~/Documents/GitHub")

    result = read_config()

    assert result == tmp_path / "Documents" / "GitHub"
    assert result.is_absolute()


def test_read_config_missing_file(tmp_path):
    """Ohne Konfiguration wird ein ConfigError ausgelöst."""
    with pytest.raises(ConfigError):
        read_config(tmp_path / "missing.json")


def test_read_config_invalid_json(tmp_path):
    """Ungültiges JSON wird als ConfigError gemeldet."""
    config_file = tmp_path / "config.json"
    config_file.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError, match="decode"):
        read_config(config_file)


@pytest.mark.parametrize("content", [{}, {"root": ""}, {"root": 42}, ["root"]])
def test_read_config_missing_root(tmp_path, content):
    """Ein fehlender oder leerer Eintrag wird als ConfigError gemeldet."""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps(content), encoding="utf-8")

    with pytest.raises(ConfigError, match="root"):
        read_config(config_file)


def test_save_config_creates_file(tmp_path):
    """save_config legt die Datei samt Ordnern an."""
    config_file = tmp_path / "nested" / "config.json"

    written = save_config(tmp_path / "repos", config_file)

    assert written == config_file
    assert json.loads(config_file.read_text(encoding="utf-8")) == {"root": str(tmp_path / "repos")}
    assert read_config(config_file) == tmp_path / "repos"


def test_save_config_unwritable(tmp_path):
    """Ein Schreibfehler wird als ConfigError gemeldet."""
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(ConfigError):
        save_config(tmp_path, blocker / "config.json")
