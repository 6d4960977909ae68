from typing import Any, Mapping
from urllib.parse import quote

from homematch.client.gateway import ApiGateway


class AiApi:
    """AI analytics endpoints"""

    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def get_market_trends(self, location: str) -> Any:
        return await self.gateway.request(f"/ai/market-trends/{quote(location, safe='')}")

    async def get_price_prediction(self, property_data: Mapping[str, Any]) -> Any:
        """Price prediction for the full property feature payload"""
        return await self.gateway.request(
            "/ai/price-prediction",
            method="POST",
            json=dict(property_data)
        )

    async def generate_description(self, property_id: str) -> Any:
        return await self.gateway.request(
            f"/ai/generate-description/{quote(str(property_id), safe='')}"
        )

    async def get_personalized_insights(self, user_id: str) -> Any:
        return await self.gateway.request(f"/ai/insights/{quote(str(user_id), safe='')}")
