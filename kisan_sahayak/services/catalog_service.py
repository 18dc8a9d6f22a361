"""
Catalog service that generates candidate schemes for a region
"""
import logging
import random
from typing import List, Optional

from ..config import settings
from ..data.scheme_data import (
    CROPS,
    SCHEME_TEMPLATES,
    NATIONAL_SCHEMES,
    FALLBACK_SCHEME,
    INCOME_SUPPORT_SCHEME_NAME,
    INCOME_SUPPORT_AMOUNT,
    NATIONAL_SCHEME_AMOUNT,
    FALLBACK_AMOUNT,
    NATIONAL_CATEGORY,
    FALLBACK_CATEGORY,
    LAND_SIZE_CRITERIA,
    INCOME_CRITERIA,
    get_regional_multiplier
)
from ..models.scheme import SchemeTemplate, GeneratedScheme
from ..utils.currency import round_half_up
from ..utils.validators import is_supported_region

logger = logging.getLogger(__name__)

MIN_STATE_SCHEMES = 10
MAX_STATE_SCHEMES = 14
MIN_CROPS_PER_SCHEME = 5
MAX_CROPS_PER_SCHEME = 9
CROPS_NAMED_IN_CRITERIA = 3


class CatalogService:
    """Service for generating a randomized scheme catalog for a region"""

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Random source for shuffling and counts. Pass a seeded
                instance for a reproducible catalog.
        """
        self.rng = rng if rng is not None else random.Random()

    def generate_schemes_for_region(self, region: str) -> List[GeneratedScheme]:
        """
        Generate the candidate catalog for a region

        Args:
            region: State name; unknown names are priced with the neutral multiplier

        Returns:
            State schemes followed by the national schemes and the fallback scheme
        """
        multiplier = get_regional_multiplier(region)
        if not is_supported_region(region):
            logger.warning(f"Unrecognized region '{region}', using multiplier {multiplier}")

        templates = self._shuffled(SCHEME_TEMPLATES)
        count = min(self.rng.randint(MIN_STATE_SCHEMES, MAX_STATE_SCHEMES), len(templates))

        schemes = [
            self._build_state_scheme(region, template, multiplier)
            for template in templates[:count]
        ]
        schemes.extend(self._national_schemes())
        schemes.append(self._fallback_scheme())

        logger.debug(f"Generated {len(schemes)} schemes for {region} ({count} state schemes)")
        return schemes

    def _build_state_scheme(
        self,
        region: str,
        template: SchemeTemplate,
        multiplier: float
    ) -> GeneratedScheme:
        crops = self._shuffled(CROPS)
        crop_count = min(self.rng.randint(MIN_CROPS_PER_SCHEME, MAX_CROPS_PER_SCHEME), len(crops))
        relevant_crops = crops[:crop_count]

        crop_criteria = (
            f"This scheme is applicable for farmers growing crops like "
            f"{', '.join(relevant_crops[:CROPS_NAMED_IN_CRITERIA])}, and other related crops."
        )

        return GeneratedScheme(
            name=f"{region} {template.category}",
            benefits=template.benefits,
            eligibility_criteria=f"{crop_criteria} {LAND_SIZE_CRITERIA} {INCOME_CRITERIA}",
            category=template.category,
            base_subsidy_amount=round_half_up(template.base_subsidy_amount * multiplier)
        )

    def _national_schemes(self) -> List[GeneratedScheme]:
        return [
            GeneratedScheme(
                name=scheme.name,
                benefits=scheme.benefits,
                eligibility_criteria=scheme.eligibility_criteria,
                category=NATIONAL_CATEGORY,
                base_subsidy_amount=(
                    INCOME_SUPPORT_AMOUNT if scheme.name == INCOME_SUPPORT_SCHEME_NAME
                    else NATIONAL_SCHEME_AMOUNT
                ),
                application_link=scheme.application_link
            )
            for scheme in NATIONAL_SCHEMES
        ]

    def _fallback_scheme(self) -> GeneratedScheme:
        return GeneratedScheme(
            name=FALLBACK_SCHEME.name,
            benefits=FALLBACK_SCHEME.benefits,
            eligibility_criteria=FALLBACK_SCHEME.eligibility_criteria,
            category=FALLBACK_CATEGORY,
            base_subsidy_amount=FALLBACK_AMOUNT,
            application_link=FALLBACK_SCHEME.application_link
        )

    def _shuffled(self, items) -> list:
        """Shuffled copy; the static tables stay untouched"""
        shuffled = list(items)
        self.rng.shuffle(shuffled)
        return shuffled


# Global catalog service instance
catalog_service = CatalogService(
    random.Random(settings.catalog_seed) if settings.catalog_seed is not None else None
)
