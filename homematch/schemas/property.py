from pydantic import BaseModel, Field, validator
from typing import Any, Dict, List, Optional


class Property(BaseModel):
    """Listing view model; the backend owns every write"""
    id: str
    title: str
    description: str = ""
    type: str = ""
    location: str = ""
    price: float = 0
    bedrooms: float = 0
    bathrooms: float = 0
    features: List[str] = []
    image_url: Optional[str] = Field(None, alias="imageUrl")
    compatibility_score: Optional[float] = Field(None, alias="compatibilityScore")

    @validator("id", pre=True)
    def coerce_id(cls, v):
        return str(v) if v is not None else v

    class Config:
        populate_by_name = True
        extra = "allow"


class PropertyFilters(BaseModel):
    """Listing filters as the properties page holds them"""
    min_price: Optional[int] = Field(None, alias="minPrice")
    max_price: Optional[int] = Field(None, alias="maxPrice")
    property_type: Optional[str] = Field(None, alias="propertyType")
    bedrooms: Optional[int] = None
    bathrooms: Optional[float] = None
    sort_by: Optional[str] = Field(None, alias="sortBy")

    class Config:
        populate_by_name = True

    def to_query(self) -> Dict[str, Any]:
        """Wire-named filter mapping with unset values dropped"""
        return self.model_dump(by_alias=True, exclude_none=True)


class PricePrediction(BaseModel):
    label: str
    price: float


class PricePredictionRequest(BaseModel):
    """Feature payload sent to /ai/price-prediction"""
    id: str
    type: str
    location: str
    bedrooms: float
    bathrooms: float
    square_feet: Optional[float] = Field(None, alias="squareFeet")
    features: List[str] = []

    class Config:
        populate_by_name = True

    @classmethod
    def from_property(cls, prop: Property) -> "PricePredictionRequest":
        extra = prop.model_extra or {}
        return cls(
            id=prop.id,
            type=prop.type,
            location=prop.location,
            bedrooms=prop.bedrooms,
            bathrooms=prop.bathrooms,
            square_feet=extra.get("squareFeet"),
            features=prop.features
        )

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
