import logging
from datetime import datetime

from pydantic import ValidationError

from homematch.context import AppContext
from homematch.core.exceptions import ApiRequestError
from homematch.schemas.preferences import UserPreferences

logger = logging.getLogger(__name__)

FEATURE_OPTIONS = [
    "Parking",
    "Gym",
    "Pool",
    "Pet Friendly",
    "Furnished",
    "Garden",
    "Balcony",
    "In-unit Laundry"
]


class PreferencesPage:
    """Form state for the user's search preferences"""

    def __init__(self, ctx: AppContext):
        self.ctx = ctx
        self.preferences = UserPreferences()
        self.saving = False

    async def load(self) -> UserPreferences:
        """Read saved preferences once; keep the defaults if none or on failure"""
        user = self.ctx.session.current_user
        if user is None:
            return self.preferences

        try:
            user_data = await self.ctx.users.get_user_data(user.id)
            saved = (user_data or {}).get("preferences")
            if saved:
                self.preferences = UserPreferences.model_validate(saved)
        except (ApiRequestError, ValidationError) as e:
            logger.warning(f"Could not load saved preferences: {e}")
        return self.preferences

    def toggle_feature(self, feature: str) -> None:
        if feature not in FEATURE_OPTIONS:
            logger.warning(f"Ignoring unknown feature {feature!r}")
            return
        features = self.preferences.features
        if feature in features:
            self.preferences.features = [f for f in features if f != feature]
        else:
            self.preferences.features = [*features, feature]

    async def save(self, preferences: UserPreferences = None) -> bool:
        """
        Save preferences and go to the dashboard

        Returns:
            True when the backend accepted the update
        """
        user = self.ctx.session.current_user
        if user is None:
            self.ctx.notifications.error("You must be logged in to save preferences")
            return False

        if preferences is not None:
            self.preferences = preferences

        self.saving = True
        try:
            self.preferences.updated_at = datetime.utcnow()
            await self.ctx.users.update_preferences(
                user.id,
                {"preferences": self.preferences.to_payload()}
            )
        except ApiRequestError as e:
            logger.error(f"Error saving preferences: {e.message}")
            self.ctx.notifications.error("Failed to save preferences")
            return False
        finally:
            self.saving = False

        self.ctx.notifications.success("Preferences saved successfully!")
        self.ctx.navigator.navigate("/dashboard")
        return True
