import pytest
from fastapi.testclient import TestClient

from kisan_sahayak.config import settings
from kisan_sahayak.main import app

PREFIX = settings.api_prefix

PROFILE = {
    "land_size_acres": 1.5,
    "location": {"state": "Maharashtra", "district": "Latur"},
    "crop_type": "Soybean",
    "irrigation_type": "Rainfed",
    "annual_income": 80000,
    "farmer_category": "Small and Marginal",
}


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_analyze_returns_ranked_schemes(client):
    response = client.post(f"{PREFIX}/eligibility/analyze", json=PROFILE)

    assert response.status_code == 200
    body = response.json()
    assert 1 <= len(body["eligible_schemes"]) <= 7
    assert body["near_misses"] == []
    assert all(s["adjusted_subsidy_amount"].startswith("₹") for s in body["eligible_schemes"])


@pytest.mark.parametrize(
    "field, value",
    [
        ("land_size_acres", 0),
        ("annual_income", -1),
        ("irrigation_type", "Drip"),
        ("farmer_category", "Tiny"),
    ],
)
def test_analyze_rejects_malformed_profile(client, field, value):
    response = client.post(f"{PREFIX}/eligibility/analyze", json={**PROFILE, field: value})

    assert response.status_code == 422


def test_analyze_rejects_blank_location(client):
    profile = {**PROFILE, "location": {"state": "Maharashtra", "district": "  "}}

    response = client.post(f"{PREFIX}/eligibility/analyze", json=profile)

    assert response.status_code == 400
    assert "District is required" in response.json()["detail"]


def test_list_regions(client):
    body = client.get(f"{PREFIX}/schemes/regions").json()

    assert body["total"] == 28
    assert {"state": "Bihar", "multiplier": 0.85} in body["regions"]


def test_list_crops(client):
    crops = client.get(f"{PREFIX}/schemes/crops").json()

    assert "Soybean" in crops
    assert len(crops) == 26


def test_generate_catalog(client):
    catalog = client.get(f"{PREFIX}/schemes/catalog/Kerala").json()

    assert 14 <= len(catalog) <= 18
    assert catalog[-1]["category"] == "Fallback"


def test_document_readiness(client):
    response = client.post(f"{PREFIX}/documents/readiness", json={"user_documents": []})

    assert response.status_code == 200
    assert response.json()["readiness_status"] == "Missing Key Documents"


def test_common_documents(client):
    documents = client.get(f"{PREFIX}/documents/common").json()

    assert "Soil Health Card" in documents
