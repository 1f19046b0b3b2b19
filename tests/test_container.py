"""Tests for container wiring."""

import json
from pathlib import Path

import pytest

from nutrient_gap.config import Settings
from nutrient_gap.containers import build_container
from nutrient_gap.domain.analysis import Severity
from nutrient_gap.domain.errors import ConfigError
from nutrient_gap.domain.nutrients import NutrientKey


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.recommendation_service.policy.eligibility_cutoff == 80
    matcher = container.recommendation_service.matcher
    assert matcher.match(NutrientKey.IRON, Severity.SEVERE) is not None


def test_build_container_applies_severity_cutoff() -> None:
    container = build_container(Settings(severity_cutoff=100))

    assert container.recommendation_service.policy.eligibility_cutoff == 100


def test_build_container_rejects_invalid_cutoff() -> None:
    with pytest.raises(ConfigError):
        build_container(Settings(severity_cutoff=120))


def test_build_container_loads_catalog_file(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({}))

    container = build_container(Settings(supplement_catalog_path=path))

    matcher = container.recommendation_service.matcher
    assert matcher.match(NutrientKey.IRON, Severity.SEVERE) is None


def test_asgi_module_builds_app(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SUPPLEMENT_CATALOG_PATH", raising=False)
    monkeypatch.delenv("SEVERITY_CUTOFF", raising=False)

    from nutrient_gap.api.asgi import app  # noqa: PLC0415

    assert app.state.container.recommendation_service is not None
