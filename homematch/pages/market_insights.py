import logging
from typing import Optional

from pydantic import ValidationError

from homematch.context import AppContext
from homematch.core.exceptions import ApiRequestError
from homematch.pages.sample_data import SAMPLE_MARKET_DATA
from homematch.schemas.market import MarketTrends

logger = logging.getLogger(__name__)


class MarketInsightsPage:
    """AI rental market analysis for a searched location"""

    def __init__(self, ctx: AppContext):
        self.ctx = ctx
        self.location = ctx.settings.DEFAULT_MARKET_LOCATION
        self.market_data: Optional[MarketTrends] = None
        self.loading = True
        self.used_fallback = False

    async def fetch(self, location: Optional[str] = None) -> None:
        query = location or self.location
        self.loading = True
        try:
            data = await self.ctx.ai.get_market_trends(query)
            self.market_data = MarketTrends.model_validate(data or {})
            self.used_fallback = False
        except (ApiRequestError, ValidationError) as e:
            logger.error(f"Error fetching market data: {e}")
            self.ctx.notifications.error(f"Failed to load market data for {query}")
            self.market_data = MarketTrends.model_validate(SAMPLE_MARKET_DATA)
            self.used_fallback = True
        finally:
            self.loading = False

    async def search(self, text: str) -> None:
        """Search box submit; blank input is ignored"""
        if not text.strip():
            return
        self.location = text
        await self.fetch(text)
