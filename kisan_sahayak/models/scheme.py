"""
Pydantic models for schemes and eligibility analysis results
"""
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict


class SchemeTemplate(BaseModel):
    """Category template used to generate state schemes"""
    category: str = Field(..., description="Scheme category")
    base_subsidy_amount: int = Field(..., ge=0, description="Subsidy before regional adjustment")
    benefits: str = Field(..., description="Summary of benefits")

    model_config = ConfigDict(frozen=True)


class NationalScheme(BaseModel):
    """Country-wide program that is always part of a catalog"""
    name: str = Field(..., description="Official scheme name")
    benefits: str = Field(..., description="Summary of benefits")
    eligibility_criteria: str = Field(..., description="Eligibility criteria")
    application_link: Optional[str] = Field(None, description="Official portal")

    model_config = ConfigDict(frozen=True)


class GeneratedScheme(BaseModel):
    """Candidate scheme produced for a single catalog generation"""
    name: str = Field(..., description="Name of the government scheme")
    benefits: str = Field(..., description="Summary of benefits")
    eligibility_criteria: str = Field(..., description="Detailed eligibility criteria")
    category: str = Field(..., description="Scheme category")
    base_subsidy_amount: int = Field(..., ge=0, description="Base subsidy after regional adjustment")
    application_link: Optional[str] = Field(None, description="Official application guide or portal")

    model_config = ConfigDict(frozen=True)


class EligibleSchemeResult(BaseModel):
    """A scheme the farmer qualifies for, with the size-adjusted subsidy"""
    scheme_name: str = Field(..., description="Name of the eligible scheme")
    adjusted_subsidy_amount: str = Field(..., description="Adjusted subsidy formatted in rupees, e.g. ₹26,000")
    category: str = Field(..., description="Scheme category")
    benefits: str = Field(..., description="Summary of benefits")
    eligibility_criteria: str = Field(..., description="Original eligibility criteria")
    application_link: Optional[str] = Field(None, description="Official application guide or portal")
    explanation: str = Field(..., description="Why the farmer qualifies and how the amount was adjusted")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "scheme_name": "Maharashtra Crop Support Subsidy",
                "adjusted_subsidy_amount": "₹23,400",
                "category": "Crop Support Subsidy",
                "benefits": "Provides direct financial support to farmers for crop cultivation.",
                "eligibility_criteria": "This scheme is applicable for farmers growing crops like Soybean, Cotton, Tur, and other related crops.",
                "application_link": None,
                "explanation": "As a small farmer in Maharashtra, you get a 20% higher benefit for this scheme."
            }
        }
    )


class NearMiss(BaseModel):
    """A scheme the farmer almost qualifies for"""
    name: str
    reason_not_eligible: str
    improvement_suggestions: List[str] = Field(default_factory=list)
    alternate_scheme_suggestions: List[str] = Field(default_factory=list)


class SchemeAnalysisResult(BaseModel):
    """Ranked outcome of an offline eligibility analysis"""
    eligible_schemes: List[EligibleSchemeResult] = Field(
        ..., min_length=1, max_length=7, description="Eligible schemes sorted by adjusted subsidy, highest first"
    )
    # The offline engine has no near-miss analysis
    near_misses: List[NearMiss] = Field(default_factory=list)
