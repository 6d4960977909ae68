import logging
from typing import Dict, List, Optional, Set

from homematch.api.users import UserApi
from homematch.core.exceptions import HomeMatchError

logger = logging.getLogger(__name__)


class FavoritesTracker:
    """
    Per-user favorites set, updated optimistically.

    The set is a local mirror of /users/:id/favorites; it is never persisted
    and is re-fetched with load() for each session.
    """

    def __init__(self, user_api: UserApi):
        self.user_api = user_api
        self._favorites: Dict[str, Set[str]] = {}

    async def load(self, user_id: str) -> List[str]:
        """Fetch the user's favorites and replace the local set"""
        ids = await self.user_api.get_favorites(user_id) or []
        ids = [str(property_id) for property_id in ids]
        self._favorites[user_id] = set(ids)
        return ids

    def favorites_for(self, user_id: str) -> Set[str]:
        return set(self._favorites.get(user_id, set()))

    def is_favorite(self, user_id: str, property_id: str) -> bool:
        return str(property_id) in self._favorites.get(user_id, set())

    async def add(self, user_id: str, property_id: str) -> None:
        """Add locally, then confirm with the backend; rolled back on failure"""
        property_id = str(property_id)
        favorites = self._favorites.setdefault(user_id, set())
        already = property_id in favorites
        favorites.add(property_id)
        try:
            await self.user_api.add_to_favorites(user_id, property_id)
        except HomeMatchError:
            if not already:
                favorites.discard(property_id)
            raise

    async def remove(self, user_id: str, property_id: str) -> None:
        """Remove locally, then confirm with the backend; rolled back on failure"""
        property_id = str(property_id)
        favorites = self._favorites.setdefault(user_id, set())
        present = property_id in favorites
        favorites.discard(property_id)
        try:
            await self.user_api.remove_from_favorites(user_id, property_id)
        except HomeMatchError:
            if present:
                favorites.add(property_id)
            raise

    async def toggle(self, user_id: str, property_id: str) -> bool:
        """
        Flip membership of property_id

        Returns:
            True if the property is now a favorite
        """
        if self.is_favorite(user_id, property_id):
            await self.remove(user_id, property_id)
            return False
        await self.add(user_id, property_id)
        return True

    def clear(self, user_id: Optional[str] = None) -> None:
        if user_id is None:
            self._favorites.clear()
        else:
            self._favorites.pop(user_id, None)
