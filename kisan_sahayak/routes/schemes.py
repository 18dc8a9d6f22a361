"""
API routes for the scheme reference catalog
"""
import logging
from typing import List
from fastapi import APIRouter, HTTPException

from ..data.scheme_data import STATES, CROPS, get_regional_multiplier
from ..models.scheme import GeneratedScheme
from ..services import catalog_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schemes", tags=["schemes"])


@router.get("/regions")
async def list_regions():
    """
    List supported regions with their cost-of-living multipliers
    """
    return {
        "total": len(STATES),
        "regions": [
            {"state": state, "multiplier": get_regional_multiplier(state)}
            for state in STATES
        ]
    }


@router.get("/crops", response_model=List[str])
async def list_crops():
    """
    List crops that generated schemes can cover
    """
    return list(CROPS)


@router.get("/catalog/{region}", response_model=List[GeneratedScheme])
async def generate_catalog(region: str):
    """
    Generate a fresh candidate catalog for a region
    """
    try:
        return catalog_service.catalog_service.generate_schemes_for_region(region)
    except Exception as e:
        logger.error(f"Error generating catalog for {region}: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to generate scheme catalog: {str(e)}"
        )
