from homematch.schemas.user import (
    SessionUser,
    AuthResponse,
    Credentials
)
from homematch.schemas.property import (
    Property,
    PropertyFilters,
    PricePrediction,
    PricePredictionRequest
)
from homematch.schemas.preferences import (
    BudgetRange,
    UserPreferences
)
from homematch.schemas.market import MarketTrends

__all__ = [
    "SessionUser",
    "AuthResponse",
    "Credentials",
    "Property",
    "PropertyFilters",
    "PricePrediction",
    "PricePredictionRequest",
    "BudgetRange",
    "UserPreferences",
    "MarketTrends"
]
