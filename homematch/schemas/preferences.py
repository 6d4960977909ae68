from pydantic import BaseModel, Field, validator
from typing import Any, Dict, List, Optional
from datetime import datetime


class BudgetRange(BaseModel):
    """Monthly rent range"""
    min: int = Field(500, ge=0)
    max: int = Field(5000, ge=0)

    @validator('max')
    def max_not_below_min(cls, v, values):
        if 'min' in values and v < values['min']:
            raise ValueError('Maximum budget cannot be lower than minimum budget')
        return v


class UserPreferences(BaseModel):
    """What the user is looking for; saved explicitly from the preferences page"""
    location: str = ""
    budget: BudgetRange = Field(default_factory=BudgetRange)
    property_type: str = Field("", alias="propertyType")
    bedrooms: int = Field(1, ge=0, description="Minimum bedrooms")
    bathrooms: float = Field(1, ge=0, description="Minimum bathrooms")
    features: List[str] = []
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        populate_by_name = True
        extra = "ignore"

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)
