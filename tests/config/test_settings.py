"""Tests for ResolverSettings."""

import pytest

from sceneref.config import ResolverSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("EMIT_WARNINGS", "REPORT_EMPTY_SCALARS", "SUBTREE_MISS_IS_FATAL"):
        monkeypatch.delenv(f"SCENEREF_{name}", raising=False)


def test_defaults():
    settings = ResolverSettings()

    assert settings.emit_warnings is False
    assert settings.report_empty_scalars is True
    assert settings.subtree_miss_is_fatal is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SCENEREF_EMIT_WARNINGS", "true")
    monkeypatch.setenv("SCENEREF_SUBTREE_MISS_IS_FATAL", "0")

    settings = ResolverSettings()

    assert settings.emit_warnings is True
    assert settings.subtree_miss_is_fatal is False


def test_explicit_values_beat_environment(monkeypatch):
    monkeypatch.setenv("SCENEREF_REPORT_EMPTY_SCALARS", "false")

    assert ResolverSettings(report_empty_scalars=True).report_empty_scalars is True


def test_unrelated_variables_ignored(monkeypatch):
    monkeypatch.setenv("SCENEREF_UNKNOWN_OPTION", "1")

    assert ResolverSettings().emit_warnings is False
