import logging
from typing import List, Optional, Set

from pydantic import ValidationError

from homematch.context import AppContext
from homematch.core.exceptions import ApiRequestError
from homematch.pages.sample_data import SAMPLE_PROPERTIES
from homematch.schemas.preferences import UserPreferences
from homematch.schemas.property import Property

logger = logging.getLogger(__name__)


class DashboardPage:
    """Recommendations, saved preferences and favorites for the logged-in user"""

    def __init__(self, ctx: AppContext):
        self.ctx = ctx
        self.properties: List[Property] = []
        self.preferences: Optional[UserPreferences] = None
        self.loading = True
        self.used_fallback = False

    @property
    def favorites(self) -> Set[str]:
        user = self.ctx.session.current_user
        if user is None:
            return set()
        return self.ctx.favorites.favorites_for(user.id)

    def _use_samples(self) -> None:
        self.properties = [Property.model_validate(p) for p in SAMPLE_PROPERTIES]
        self.used_fallback = True

    async def load(self) -> None:
        """
        Load user data, favorites and recommendations

        Falls back to the full listing when recommendations fail, and to
        sample properties when nothing comes back or anything else fails.
        """
        user = self.ctx.session.current_user
        if user is None:
            return

        try:
            user_data = await self.ctx.users.get_user_data(user.id)
            if user_data:
                saved = user_data.get("preferences")
                self.preferences = UserPreferences.model_validate(saved) if saved else None

                await self.ctx.favorites.load(user.id)

                try:
                    recommended = await self.ctx.properties.get_recommendations(user.id)
                except ApiRequestError as e:
                    logger.warning(f"Recommendations unavailable, using full listing: {e.message}")
                    recommended = await self.ctx.properties.get_properties()

                if recommended:
                    self.properties = [Property.model_validate(p) for p in recommended]
                else:
                    self._use_samples()
        except (ApiRequestError, ValidationError) as e:
            logger.error(f"Error fetching user data: {e}")
            self.ctx.notifications.error("Error loading dashboard data")
            self._use_samples()
        finally:
            self.loading = False

    async def toggle_favorite(self, property_id: str) -> None:
        user = self.ctx.session.current_user
        if user is None:
            return

        try:
            added = await self.ctx.favorites.toggle(user.id, property_id)
        except ApiRequestError as e:
            logger.error(f"Error updating favorites: {e.message}")
            self.ctx.notifications.error("Error updating favorites")
            return

        self.ctx.notifications.success("Added to favorites" if added else "Removed from favorites")
