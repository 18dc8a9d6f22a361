import random

import pytest

from kisan_sahayak.models.farmer import FarmerProfile, Location
from kisan_sahayak.models.scheme import GeneratedScheme
from kisan_sahayak.services.catalog_service import CatalogService
from kisan_sahayak.services.eligibility_service import EligibilityService


def make_profile(**overrides):
    data = {
        "land_size_acres": 1.5,
        "location": Location(state="Maharashtra", district="Latur"),
        "crop_type": "Soybean",
        "irrigation_type": "Rainfed",
        "annual_income": 80000,
        "farmer_category": "Small and Marginal",
    }
    data.update(overrides)
    return FarmerProfile(**data)


def make_scheme(category, base, crops=None, name=None):
    criteria = "All farmers residing in India are eligible to apply."
    if crops:
        criteria = (
            f"This scheme is applicable for farmers growing crops like "
            f"{', '.join(crops)}, and other related crops."
        )
    return GeneratedScheme(
        name=name or f"Test {category}",
        benefits=f"{category} benefits.",
        eligibility_criteria=criteria,
        category=category,
        base_subsidy_amount=base,
    )


@pytest.fixture
def small_farmer():
    return make_profile()


@pytest.fixture
def large_rich_farmer():
    return make_profile(
        land_size_acres=25,
        location=Location(state="Punjab", district="Ludhiana"),
        crop_type="Wheat",
        irrigation_type="Canal",
        annual_income=1000000,
        farmer_category="Large",
    )


@pytest.fixture
def seeded_catalog_service():
    return CatalogService(random.Random(42))


@pytest.fixture
def seeded_eligibility_service(seeded_catalog_service):
    return EligibilityService(seeded_catalog_service)


@pytest.fixture
def eligibility_service():
    # Pure filter/rank tests never touch the catalog
    return EligibilityService(CatalogService(random.Random(0)))


@pytest.fixture
def profile_factory():
    return make_profile


@pytest.fixture
def scheme_factory():
    return make_scheme
