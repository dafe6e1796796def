import logging

import pytest

from links_folder.config import Config


def test_defaults(monkeypatch):
    monkeypatch.delenv("LINKS_FOLDER_PATH", raising=False)
    monkeypatch.delenv("LINKS_FOLDER_SUPPORT_DIR", raising=False)
    monkeypatch.delenv("LINKS_FOLDER_LOG_LEVEL", raising=False)
    
    config = Config()
    
    assert config.links_path is None
    assert config.support_dir.endswith(".links_folder")
    assert config.assets_dir.endswith("assets")
    assert config.log_level_value == logging.WARNING


def test_blank_path_is_unset(monkeypatch):
    monkeypatch.setenv("LINKS_FOLDER_PATH", "   ")
    assert Config().links_path is None


def test_absolute_path_override(monkeypatch, tmp_path):
    monkeypatch.setenv("LINKS_FOLDER_PATH", str(tmp_path / "links.json"))
    assert Config().links_path == str(tmp_path / "links.json")


def test_relative_path_is_rejected(monkeypatch):
    monkeypatch.setenv("LINKS_FOLDER_PATH", "relative/links.json")
    with pytest.raises(ValueError, match="absolute"):
        Config()


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("LINKS_FOLDER_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="log level"):
        Config()
