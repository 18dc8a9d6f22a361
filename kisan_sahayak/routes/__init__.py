"""
API routes for the KisanSahayak offline scheme engine
"""

from .eligibility import router as eligibility_router
from .schemes import router as schemes_router
from .documents import router as documents_router

__all__ = [
    "eligibility_router",
    "schemes_router",
    "documents_router"
]
