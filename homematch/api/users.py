from typing import Any
from urllib.parse import quote

from homematch.client.gateway import ApiGateway


class UserApi:
    """User data endpoints"""

    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def update_preferences(self, user_id: str, data: Any) -> Any:
        """Create or update user preferences; data is sent as-is, e.g. {"preferences": {...}}"""
        return await self.gateway.request(
            f"/users/{quote(str(user_id), safe='')}/preferences",
            method="PUT",
            json=data
        )

    async def get_user_data(self, user_id: str) -> Any:
        return await self.gateway.request(f"/users/{quote(str(user_id), safe='')}")

    async def get_favorites(self, user_id: str) -> Any:
        """List of favorited property ids"""
        return await self.gateway.request(f"/users/{quote(str(user_id), safe='')}/favorites")

    async def add_to_favorites(self, user_id: str, property_id: str) -> Any:
        return await self.gateway.request(
            f"/users/{quote(str(user_id), safe='')}/favorites/{quote(str(property_id), safe='')}",
            method="POST"
        )

    async def remove_from_favorites(self, user_id: str, property_id: str) -> Any:
        return await self.gateway.request(
            f"/users/{quote(str(user_id), safe='')}/favorites/{quote(str(property_id), safe='')}",
            method="DELETE"
        )
