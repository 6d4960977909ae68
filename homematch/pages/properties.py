import logging
from typing import List

from pydantic import ValidationError

from homematch.context import AppContext
from homematch.core.exceptions import ApiRequestError
from homematch.pages.sample_data import SAMPLE_LISTINGS
from homematch.schemas.property import Property, PropertyFilters
from homematch.services.search_service import (
    SORT_OPTIONS,
    LatestRequestGuard,
    filter_by_text,
    sort_properties,
)

logger = logging.getLogger(__name__)


class PropertiesPage:
    """Listing browser with filters, sorting, text filtering and AI search"""

    def __init__(self, ctx: AppContext):
        self.ctx = ctx
        self.properties: List[Property] = []
        self.loading = True
        self.search_query = ""
        self.nlp_search_active = False
        self.filters = self.default_filters()
        self._guard = LatestRequestGuard()

    def default_filters(self) -> PropertyFilters:
        return PropertyFilters(
            min_price=self.ctx.settings.DEFAULT_MIN_PRICE,
            max_price=self.ctx.settings.DEFAULT_MAX_PRICE,
            sort_by="newest"
        )

    async def load(self) -> None:
        """Fetch listings for the current filters; skipped while AI search results are shown"""
        if self.nlp_search_active:
            return

        ticket = self._guard.issue()
        self.loading = True
        try:
            data = await self.ctx.properties.get_properties(self.filters)
            listings = [Property.model_validate(p) for p in data or []]
        except (ApiRequestError, ValidationError) as e:
            if not self._guard.is_current(ticket):
                return
            logger.error(f"Error fetching properties: {e}")
            self.ctx.notifications.error("Failed to load properties")
            listings = [Property.model_validate(p) for p in SAMPLE_LISTINGS]
        else:
            if not self._guard.is_current(ticket):
                logger.debug("Dropping superseded listing response")
                return
        self.properties = listings
        self.loading = False

    async def update_filters(self, **changes) -> None:
        """Apply filter changes and reload, e.g. update_filters(min_price=800)"""
        self.filters = self.filters.model_copy(update=changes)
        await self.load()

    async def search_nlp(self, query: str) -> None:
        """Natural-language search; a blank query returns to regular filtering"""
        self.search_query = query
        if not query.strip():
            if self.nlp_search_active:
                self.nlp_search_active = False
                await self.load()
            return

        ticket = self._guard.issue()
        self.loading = True
        self.nlp_search_active = True
        try:
            results = await self.ctx.properties.search_with_nlp(query)
        except ApiRequestError as e:
            if not self._guard.is_current(ticket):
                return
            logger.error(f"NLP search error: {e.message}")
            self.ctx.notifications.error("AI search failed. Falling back to regular search.")
            self.nlp_search_active = False
            self.loading = False
            await self.load()
            return

        if not self._guard.is_current(ticket):
            logger.debug("Dropping superseded search response")
            return
        self.properties = [Property.model_validate(p) for p in results or []]
        self.ctx.notifications.success(
            f"Found {len(self.properties)} properties matching your search criteria"
        )
        self.loading = False

    def visible_properties(self) -> List[Property]:
        """Sorted listings, narrowed by the text box unless AI search is active"""
        sort_by = self.filters.sort_by if self.filters.sort_by in SORT_OPTIONS else "newest"
        ordered = sort_properties(self.properties, sort_by)
        if self.nlp_search_active:
            return ordered
        return filter_by_text(ordered, self.search_query)

    async def reset_filters(self) -> None:
        self.filters = self.default_filters()
        self.search_query = ""
        self.nlp_search_active = False
        await self.load()
