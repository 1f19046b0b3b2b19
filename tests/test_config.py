"""Tests for settings loading."""

import pytest

from nutrient_gap.config import Settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SEVERITY_CUTOFF", raising=False)

    settings = Settings(_env_file=None)

    assert settings.severity_cutoff == 80
    assert settings.default_target_calories == 2000
    assert settings.supplement_catalog_path is None


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEVERITY_CUTOFF", "100")
    monkeypatch.setenv("DEFAULT_TARGET_CALORIES", "2400")

    settings = Settings(_env_file=None)

    assert settings.severity_cutoff == 100
    assert settings.default_target_calories == 2400
