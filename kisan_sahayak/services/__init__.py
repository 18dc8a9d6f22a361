"""
Services package for the KisanSahayak offline scheme engine
"""
from typing import List

from ..models.documents import DocumentReadinessResult
from ..models.farmer import FarmerProfile
from ..models.scheme import GeneratedScheme, SchemeAnalysisResult
from . import catalog_service, eligibility_service, document_service
from .catalog_service import CatalogService
from .eligibility_service import EligibilityService
from .document_service import DocumentService


def generate_schemes_for_region(region: str) -> List[GeneratedScheme]:
    """Generate a fresh candidate catalog for a region"""
    return catalog_service.catalog_service.generate_schemes_for_region(region)


def analyze_eligibility(profile: FarmerProfile) -> SchemeAnalysisResult:
    """Generate the farmer's regional catalog, then filter and rank it"""
    return eligibility_service.eligibility_service.analyze_eligibility(profile)


def check_document_readiness(user_documents: List[str]) -> DocumentReadinessResult:
    """Report missing commonly required documents"""
    return document_service.document_service.check_document_readiness(user_documents)


__all__ = [
    "CatalogService",
    "EligibilityService",
    "DocumentService",
    "generate_schemes_for_region",
    "analyze_eligibility",
    "check_document_readiness"
]
