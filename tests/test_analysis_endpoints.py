"""Tests for the analysis endpoints."""

import pytest
from fastapi.testclient import TestClient

from nutrient_gap.api.app import create_app
from nutrient_gap.domain.nutrients import NutrientKey


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_nutrients_endpoint_lists_labels_and_units(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/nutrients")

    assert response.status_code == 200
    nutrients = response.json()["nutrients"]
    assert len(nutrients) == len(NutrientKey)
    b12 = next(item for item in nutrients if item["key"] == "vitaminB12")
    assert b12 == {
        "key": "vitaminB12",
        "label": "Vitamin B12",
        "unit": "mcg",
        "category": "vitamin",
    }


def test_analysis_uses_camel_case_contract(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/analysis/nutrients",
        json={
            "consumedNutrients": {"protein": 40, "calories": 1800},
            "recommendedValues": {"protein": 50, "calories": 2000},
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["totalCalories"] == 1800
    assert data["targetCalories"] == 2000
    assert data["nutrientAnalysis"]["protein"] == {
        "consumed": 40,
        "recommended": 50,
        "percentage": 80,
        "status": "good",
    }


def test_analysis_defaults_to_personalized_profile(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/analysis/nutrients",
        json={"consumedNutrients": {"iron": 9}, "targetCalories": 2500},
    )

    assert response.status_code == 200
    data = response.json()
    assert set(data["nutrientAnalysis"]) == {key.value for key in NutrientKey}
    assert data["targetCalories"] == 2500
    assert data["nutrientAnalysis"]["calories"]["recommended"] == 2500
    assert data["nutrientAnalysis"]["iron"]["percentage"] == 50


def test_recommendations_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/analysis/recommendations",
        json={
            "consumedNutrients": {"iron": 4, "vitaminD": 0, "protein": 40},
            "recommendedValues": {"iron": 18, "vitaminD": 20, "protein": 50},
        },
    )

    assert response.status_code == 200
    recommendations = response.json()["recommendations"]
    assert [item["nutrient"] for item in recommendations] == ["vitaminD", "iron"]
    assert "supplement" not in recommendations[0]
    assert recommendations[1]["severity"] == "severe"
    assert recommendations[1]["percentage"] == 22
    assert recommendations[1]["supplement"] == {
        "name": "Test Iron",
        "description": "Iron for tests.",
        "dosage": "18 mg per day",
        "url": "https://example.com/iron",
        "importance": "Carries oxygen.",
    }


def test_recommendations_empty_when_targets_met(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/analysis/recommendations",
        json={
            "consumedNutrients": {"iron": 20},
            "recommendedValues": {"iron": 18},
        },
    )

    assert response.status_code == 200
    assert response.json() == {"recommendations": []}


def test_malformed_intake_is_treated_as_zero(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/analysis/nutrients",
        json={
            "consumedNutrients": {"iron": "n/a", "caffeine": 90},
            "recommendedValues": {"iron": 18},
        },
    )

    assert response.status_code == 200
    assert response.json()["nutrientAnalysis"]["iron"]["status"] == "deficient"


def test_config_error_returns_generic_failure(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/analysis/recommendations",
        json={"consumedNutrients": {"zinc": 3}, "recommendedValues": {"zinc": 0}},
    )

    assert response.status_code == 500
    assert response.json() == {"detail": "Nutrient analysis failed"}


def test_unprefixed_analysis_route_is_not_served(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/analysis/nutrients", json={"consumedNutrients": {}})

    assert response.status_code == 404


def test_huge_intake_is_reported_as_met(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/analysis/recommendations",
        json={
            "consumedNutrients": {"thiamin": 1e307},
            "recommendedValues": {"thiamin": 1.2},
        },
    )

    assert response.status_code == 200
    assert response.json() == {"recommendations": []}


@pytest.mark.parametrize("target", ["-500", "0", "Infinity", "NaN"])
def test_invalid_target_calories_rejected(container, target: str) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/analysis/nutrients",
        content=f'{{"consumedNutrients": {{"iron": 9}}, "targetCalories": {target}}}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 422
