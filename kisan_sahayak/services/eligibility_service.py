"""
Eligibility service for filtering and ranking a scheme catalog against a farmer profile
"""
import logging
from typing import List, Optional

from ..data.scheme_data import FALLBACK_SCHEME, FALLBACK_AMOUNT, FALLBACK_CATEGORY
from ..models.farmer import FarmerProfile, FarmerCategory
from ..models.scheme import GeneratedScheme, EligibleSchemeResult, SchemeAnalysisResult
from ..utils.currency import format_inr, parse_inr, round_half_up
from .catalog_service import CatalogService, catalog_service as default_catalog_service

logger = logging.getLogger(__name__)

HIGH_INCOME_THRESHOLD = 500000
HIGH_INCOME_CATEGORIES = frozenset({
    'Export Promotion Support',
    'Machinery Purchase Subsidy',
    'Storage Infrastructure Aid',
})
CROP_SCOPED_MARKER = 'crops like'
MAX_RESULTS = 7

CATEGORY_ADJUSTMENTS = {
    FarmerCategory.SMALL_AND_MARGINAL: 1.20,
    FarmerCategory.MEDIUM: 1.00,
    FarmerCategory.LARGE: 0.85,
}

FALLBACK_EXPLANATION = (
    "Because no specific schemes matched your profile, this universal scheme "
    "is available as a general support option."
)


class EligibilityService:
    """Service for checking farmer eligibility against generated schemes"""

    def __init__(self, catalog: Optional[CatalogService] = None):
        self.catalog = catalog if catalog is not None else default_catalog_service

    def analyze_eligibility(self, profile: FarmerProfile) -> SchemeAnalysisResult:
        """
        Generate the catalog for the farmer's state and rank what they qualify for

        Args:
            profile: Validated farmer profile

        Returns:
            SchemeAnalysisResult with 1 to 7 eligible schemes
        """
        schemes = self.catalog.generate_schemes_for_region(profile.location.state)
        return self.filter_and_rank(profile, schemes)

    def filter_and_rank(
        self,
        profile: FarmerProfile,
        schemes: List[GeneratedScheme]
    ) -> SchemeAnalysisResult:
        """
        Filter a catalog by the offline rules, adjust amounts and rank

        Pure given its inputs: the same profile and catalog always yield the
        same result.

        Args:
            profile: Validated farmer profile
            schemes: Candidate catalog

        Returns:
            SchemeAnalysisResult sorted by adjusted subsidy, highest first
        """
        eligible = [
            self._build_result(profile, scheme)
            for scheme in schemes
            if self._is_eligible(profile, scheme)
        ]

        # sorted() is stable, so equal amounts keep catalog order
        ranked = sorted(
            eligible,
            key=lambda result: parse_inr(result.adjusted_subsidy_amount),
            reverse=True
        )[:MAX_RESULTS]

        if not ranked:
            logger.info(f"No scheme matched profile in {profile.location.state}, using fallback scheme")
            ranked = [self._fallback_result()]

        logger.info(f"Eligibility analysis completed: {len(eligible)}/{len(schemes)} schemes eligible")
        return SchemeAnalysisResult(eligible_schemes=ranked, near_misses=[])

    def _is_eligible(self, profile: FarmerProfile, scheme: GeneratedScheme) -> bool:
        """
        Apply the income rule then the crop rule

        Crop matching is a literal case-insensitive substring test, so
        "Soybeans" does not match a scheme listing "Soybean".
        """
        if profile.annual_income > HIGH_INCOME_THRESHOLD:
            if scheme.category not in HIGH_INCOME_CATEGORIES:
                return False

        crop = profile.crop_type.lower()
        criteria = scheme.eligibility_criteria.lower()
        if crop and CROP_SCOPED_MARKER in criteria and crop not in criteria:
            return False

        return True

    def _build_result(self, profile: FarmerProfile, scheme: GeneratedScheme) -> EligibleSchemeResult:
        adjusted = round_half_up(
            scheme.base_subsidy_amount * CATEGORY_ADJUSTMENTS[profile.farmer_category]
        )

        return EligibleSchemeResult(
            scheme_name=scheme.name,
            adjusted_subsidy_amount=format_inr(adjusted),
            category=scheme.category,
            benefits=scheme.benefits,
            eligibility_criteria=scheme.eligibility_criteria,
            application_link=scheme.application_link,
            explanation=self._explain(profile)
        )

    def _explain(self, profile: FarmerProfile) -> str:
        state = profile.location.state
        if profile.farmer_category == FarmerCategory.SMALL_AND_MARGINAL:
            return f"As a small farmer in {state}, you get a 20% higher benefit for this scheme."
        if profile.farmer_category == FarmerCategory.LARGE:
            return (
                f"This scheme is a potential match in {state}; the subsidy is reduced by 15% "
                f"for your larger land holding."
            )
        return (
            f"This scheme is a potential match based on your profile in {state}; "
            f"no land-holding adjustment applies to medium farmers."
        )

    def _fallback_result(self) -> EligibleSchemeResult:
        return EligibleSchemeResult(
            scheme_name=FALLBACK_SCHEME.name,
            adjusted_subsidy_amount=format_inr(FALLBACK_AMOUNT),
            category=FALLBACK_CATEGORY,
            benefits=FALLBACK_SCHEME.benefits,
            eligibility_criteria=FALLBACK_SCHEME.eligibility_criteria,
            application_link=None,
            explanation=FALLBACK_EXPLANATION
        )


# Global eligibility service instance
eligibility_service = EligibilityService()
