import logging
from typing import Any, Optional

from homematch.client.gateway import ApiGateway
from homematch.core.exceptions import HomeMatchError
from homematch.schemas.user import Credentials

logger = logging.getLogger(__name__)


class AuthApi:
    """Authentication endpoints"""

    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def signup(self, email: str, password: str) -> Any:
        """Register a new user"""
        return await self.gateway.request(
            "/auth/signup",
            method="POST",
            json=Credentials(email=email, password=password).model_dump()
        )

    async def login(self, email: str, password: str) -> Any:
        """Login existing user"""
        return await self.gateway.request(
            "/auth/login",
            method="POST",
            json=Credentials(email=email, password=password).model_dump()
        )

    async def logout(self) -> Any:
        return await self.gateway.request("/auth/logout", method="POST")

    async def get_current_user(self) -> Optional[Any]:
        """
        Get current user profile

        Returns:
            The user payload, or None when the token is missing, invalid or
            the backend cannot be reached
        """
        try:
            return await self.gateway.request("/auth/me")
        except HomeMatchError as e:
            logger.info(f"Current user lookup failed: {e.message}")
            return None
