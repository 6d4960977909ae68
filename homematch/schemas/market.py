from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class PriceChange(BaseModel):
    monthly: float = 0
    yearly: float = 0


class TrendingNeighborhood(BaseModel):
    name: str
    average_rent: float = Field(..., alias="averageRent")
    change_rate: float = Field(..., alias="changeRate")

    class Config:
        populate_by_name = True


class PricePoint(BaseModel):
    month: str
    price: float


class DistributionSlice(BaseModel):
    name: str
    value: float


class MarketTrends(BaseModel):
    """AI market analysis for one location"""
    location_name: str = Field("", alias="locationName")
    overview: str = ""
    price_change: PriceChange = Field(default_factory=PriceChange, alias="priceChange")
    average_rent: Dict[str, float] = Field(default_factory=dict, alias="averageRent")
    demand_index: Optional[float] = Field(None, alias="demandIndex")
    supply_index: Optional[float] = Field(None, alias="supplyIndex")
    trending_neighborhoods: List[TrendingNeighborhood] = Field([], alias="trendingNeighborhoods")
    price_history: List[PricePoint] = Field([], alias="priceHistory")
    property_type_distribution: List[DistributionSlice] = Field([], alias="propertyTypeDistribution")
    insights: Optional[str] = None

    class Config:
        populate_by_name = True
        extra = "allow"
