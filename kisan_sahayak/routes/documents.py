"""
API routes for document readiness checks
"""
import logging
from typing import List
from fastapi import APIRouter, HTTPException

from ..models.documents import DocumentReadinessRequest, DocumentReadinessResult
from ..services import document_service
from ..services.document_service import COMMON_DOCUMENTS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


@router.get("/common", response_model=List[str])
async def list_common_documents():
    """
    Checklist of documents farmers can select from
    """
    return list(COMMON_DOCUMENTS)


@router.post("/readiness", response_model=DocumentReadinessResult)
async def check_document_readiness(request: DocumentReadinessRequest):
    """
    Check which commonly required documents the farmer is missing
    """
    try:
        return document_service.document_service.check_document_readiness(request.user_documents)
    except Exception as e:
        logger.error(f"Error checking document readiness: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to check document readiness: {str(e)}"
        )
