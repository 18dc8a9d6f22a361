"""
API routes for offline eligibility analysis
"""
import logging
from fastapi import APIRouter, HTTPException

from ..models.farmer import FarmerProfile
from ..models.scheme import SchemeAnalysisResult
from ..services import eligibility_service
from ..utils.validators import validate_farmer_profile_data

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/eligibility", tags=["eligibility"])


@router.post("/analyze", response_model=SchemeAnalysisResult)
async def analyze_eligibility(profile: FarmerProfile):
    """
    Find the schemes a farmer qualifies for, ranked by adjusted subsidy
    """
    try:
        validation_errors = validate_farmer_profile_data(profile.model_dump())
        if validation_errors:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid farmer profile data: {'; '.join(validation_errors)}"
            )

        return eligibility_service.eligibility_service.analyze_eligibility(profile)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error analyzing eligibility: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to analyze eligibility: {str(e)}"
        )
