"""
Tests for runtime settings.
"""

import pytest

from dmmclust.algorithms import DMMConfig
from dmmclust.config import Settings, settings


def test_settings_defaults(monkeypatch):
    for name in ("DMMCLUST_LOG_LEVEL", "DMMCLUST_SCORE_WORKERS", "DMMCLUST_SEED"):
        monkeypatch.delenv(name, raising=False)
    s = Settings.from_env()
    assert s.log_level == "WARNING"
    assert s.score_workers == 1
    assert s.default_seed is None


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("DMMCLUST_LOG_LEVEL", "debug")
    monkeypatch.setenv("DMMCLUST_SCORE_WORKERS", "4")
    monkeypatch.setenv("DMMCLUST_SEED", "1337")
    s = Settings.from_env()
    assert s.log_level == "DEBUG"
    assert s.score_workers == 4
    assert s.default_seed == 1337


def test_settings_invalid_integer(monkeypatch):
    monkeypatch.setenv("DMMCLUST_SCORE_WORKERS", "many")
    with pytest.raises(ValueError, match="DMMCLUST_SCORE_WORKERS must be an integer"):
        Settings.from_env()


def test_settings_rejects_zero_workers():
    with pytest.raises(ValueError, match="score_workers must be >= 1"):
        Settings(score_workers=0)


def test_dmm_config_workers_default_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "score_workers", 3)
    assert DMMConfig().n_workers == 3
