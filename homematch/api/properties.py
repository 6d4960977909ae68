from typing import Any, Mapping, Union
from urllib.parse import quote, urlencode

from homematch.client.gateway import ApiGateway
from homematch.schemas.property import PropertyFilters


def _stringify(value: Any) -> str:
    # Booleans go out lowercase: true / false
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query_string(filters: Union[PropertyFilters, Mapping[str, Any], None]) -> str:
    """
    Build the listing query string, skipping keys whose value is None

    Args:
        filters: PropertyFilters or a plain mapping of wire-named keys

    Returns:
        Encoded query string without the leading "?", insertion order kept
    """
    if filters is None:
        return ""
    if isinstance(filters, PropertyFilters):
        filters = filters.to_query()
    pairs = [(key, _stringify(value)) for key, value in filters.items() if value is not None]
    return urlencode(pairs)


class PropertyApi:
    """Property listing endpoints"""

    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def get_properties(
        self,
        filters: Union[PropertyFilters, Mapping[str, Any], None] = None
    ) -> Any:
        """Get property listings with filters"""
        query_string = build_query_string(filters)
        endpoint = f"/properties?{query_string}" if query_string else "/properties"
        return await self.gateway.request(endpoint)

    async def get_property(self, property_id: str) -> Any:
        return await self.gateway.request(f"/properties/{quote(str(property_id), safe='')}")

    async def get_recommendations(self, user_id: str) -> Any:
        """Recommended properties based on the user's saved preferences"""
        return await self.gateway.request(
            f"/properties/recommendations/{quote(str(user_id), safe='')}"
        )

    async def get_compatibility_score(self, property_id: str, user_id: str) -> Any:
        """AI compatibility between a property and the user's preferences"""
        return await self.gateway.request(
            f"/properties/{quote(str(property_id), safe='')}/compatibility/{quote(str(user_id), safe='')}"
        )

    async def search_with_nlp(self, query: str) -> Any:
        """Search properties with a natural language query"""
        return await self.gateway.request(
            "/properties/search/nlp",
            method="POST",
            json={"query": query}
        )
