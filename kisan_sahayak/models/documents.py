"""
Pydantic models for document readiness checks
"""
from typing import List
from pydantic import BaseModel, Field, ConfigDict


class DocumentReadinessRequest(BaseModel):
    """Documents the farmer says they have"""
    user_documents: List[str] = Field(default_factory=list, description="Names of documents the farmer holds")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user_documents": ["Aadhaar Card", "Income Certificate"]
            }
        }
    )


class DocumentReadinessResult(BaseModel):
    """Outcome of a document readiness check"""
    missing_documents: List[str] = Field(default_factory=list, description="Required documents not held")
    optional_alternatives: List[str] = Field(default_factory=list, description="Guidance on obtaining missing documents")
    readiness_status: str = Field(..., description="Ready to Apply, Almost Ready or Missing Key Documents")
