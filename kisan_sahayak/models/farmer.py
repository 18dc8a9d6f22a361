"""
Pydantic models for farmer profiles
"""
from enum import Enum
from pydantic import BaseModel, Field, field_validator, ConfigDict


class IrrigationType(str, Enum):
    """Primary irrigation method used on the farm"""
    RAINFED = "Rainfed"
    WELL = "Well"
    CANAL = "Canal"
    OTHER = "Other"


class FarmerCategory(str, Enum):
    """Land-holding based farmer classification"""
    SMALL_AND_MARGINAL = "Small and Marginal"
    MEDIUM = "Medium"
    LARGE = "Large"


class Location(BaseModel):
    """Geographical location of the farm"""
    state: str = Field(..., description="State where the farm is located")
    district: str = Field(..., description="District within the state")

    @field_validator('state', 'district')
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip()

    model_config = ConfigDict(frozen=True)


class FarmerProfile(BaseModel):
    """Farmer profile used for offline scheme matching"""
    land_size_acres: float = Field(..., gt=0, description="Size of the farmer's land in acres")
    location: Location = Field(..., description="Location of the farm")
    crop_type: str = Field(..., description="Primary crop cultivated (e.g. Wheat, Rice, Cotton)")
    irrigation_type: IrrigationType = Field(..., description="Primary irrigation method")
    annual_income: float = Field(..., ge=0, description="Annual income in rupees")
    farmer_category: FarmerCategory = Field(..., description="Category based on land holding")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "land_size_acres": 1.5,
                "location": {"state": "Maharashtra", "district": "Latur"},
                "crop_type": "Soybean",
                "irrigation_type": "Rainfed",
                "annual_income": 80000,
                "farmer_category": "Small and Marginal"
            }
        }
    )
