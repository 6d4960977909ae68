"""
Application context

Everything a page needs (session, endpoint groups, favorites, navigator,
notifications) travels in one object that is passed explicitly instead of
living in module globals.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from homematch.api import AiApi, AuthApi, PropertyApi, UserApi
from homematch.client.gateway import ApiGateway
from homematch.client.navigation import Navigator
from homematch.core.config import Settings, settings as default_settings
from homematch.core.monitoring import setup_logging
from homematch.core.storage import RedisTokenStore, TokenStore, build_token_store
from homematch.services.notification_service import NotificationCenter
from homematch.services.favorite_service import FavoritesTracker
from homematch.services.session_service import SessionManager

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    settings: Settings
    token_store: TokenStore
    navigator: Navigator
    gateway: ApiGateway
    auth: AuthApi
    users: UserApi
    properties: PropertyApi
    ai: AiApi
    session: SessionManager
    favorites: FavoritesTracker
    notifications: NotificationCenter

    async def aclose(self) -> None:
        await self.gateway.aclose()
        if isinstance(self.token_store, RedisTokenStore):
            await self.token_store.close()

    async def __aenter__(self) -> "AppContext":
        await self.session.initialize()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def create_app_context(
    settings: Optional[Settings] = None,
    token_store: Optional[TokenStore] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    navigator: Optional[Navigator] = None
) -> AppContext:
    """
    Wire the client together

    Args:
        settings: Defaults to the environment-loaded settings
        token_store: Defaults to the backend named by settings.TOKEN_STORE
        transport: httpx transport override (tests use ASGI / mock transports)
        navigator: Defaults to a fresh Navigator at "/"

    Returns:
        AppContext; use "async with" to initialize the session and close the client
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL, settings.LOG_JSON)
    token_store = token_store or build_token_store(settings)
    navigator = navigator or Navigator()

    gateway = ApiGateway(
        settings.API_BASE_URL,
        token_store,
        navigator=navigator,
        login_path=settings.LOGIN_PATH,
        timeout=settings.HTTP_TIMEOUT,
        transport=transport
    )
    auth = AuthApi(gateway)
    users = UserApi(gateway)
    session = SessionManager(auth, token_store)
    favorites = FavoritesTracker(users)

    def _drop_favorites(user) -> None:
        if user is None:
            favorites.clear()

    session.add_listener(_drop_favorites)

    logger.debug(f"Client configured for {settings.API_BASE_URL} ({settings.TOKEN_STORE} token store)")

    return AppContext(
        settings=settings,
        token_store=token_store,
        navigator=navigator,
        gateway=gateway,
        auth=auth,
        users=users,
        properties=PropertyApi(gateway),
        ai=AiApi(gateway),
        session=session,
        favorites=favorites,
        notifications=NotificationCenter()
    )
