"""
Models package for the KisanSahayak offline scheme engine
"""

from .farmer import (
    FarmerProfile,
    Location,
    IrrigationType,
    FarmerCategory
)

from .scheme import (
    SchemeTemplate,
    NationalScheme,
    GeneratedScheme,
    EligibleSchemeResult,
    NearMiss,
    SchemeAnalysisResult
)

from .documents import (
    DocumentReadinessRequest,
    DocumentReadinessResult
)

__all__ = [
    # Farmer models
    "FarmerProfile",
    "Location",
    "IrrigationType",
    "FarmerCategory",

    # Scheme models
    "SchemeTemplate",
    "NationalScheme",
    "GeneratedScheme",
    "EligibleSchemeResult",
    "NearMiss",
    "SchemeAnalysisResult",

    # Document models
    "DocumentReadinessRequest",
    "DocumentReadinessResult"
]
