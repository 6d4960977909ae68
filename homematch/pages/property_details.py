import logging
from typing import List, Optional

from pydantic import ValidationError

from homematch.context import AppContext
from homematch.core.exceptions import ApiRequestError
from homematch.pages.sample_data import (
    PRICE_OUTLOOK,
    SAMPLE_COMPATIBILITY_SCORE,
    SAMPLE_NEIGHBORHOOD_INSIGHTS,
    SAMPLE_PROPERTY_DETAIL,
)
from homematch.schemas.property import PricePrediction, PricePredictionRequest, Property

logger = logging.getLogger(__name__)


def fallback_price_outlook(price: float) -> List[PricePrediction]:
    """Twelve-month outlook used when the prediction endpoint is unavailable"""
    return [
        PricePrediction(label=label, price=round(price * factor))
        for label, factor in PRICE_OUTLOOK
    ]


class PropertyDetailsPage:
    """Single listing with favorite state, compatibility score and AI extras"""

    def __init__(self, ctx: AppContext):
        self.ctx = ctx
        self.property: Optional[Property] = None
        self.is_favorite = False
        self.compatibility_score: Optional[float] = None
        self.price_predictions: List[PricePrediction] = []
        self.market_insights: Optional[str] = None
        self.ai_description: Optional[str] = None
        self.loading = True
        self.loading_ai = False

    async def load(self, property_id: str) -> None:
        self.loading = True
        user = self.ctx.session.current_user

        try:
            data = await self.ctx.properties.get_property(property_id)
            self.property = Property.model_validate(data)

            if user is not None:
                favorite_ids = await self.ctx.favorites.load(user.id)
                self.is_favorite = str(property_id) in favorite_ids

                try:
                    score = await self.ctx.properties.get_compatibility_score(property_id, user.id)
                    self.compatibility_score = (score or {}).get("compatibilityScore")
                except ApiRequestError as e:
                    logger.error(f"Error fetching compatibility score: {e.message}")
        except (ApiRequestError, ValidationError) as e:
            logger.error(f"Error fetching property details: {e}")
            self.ctx.notifications.error("Failed to load property details")
            self.property = Property.model_validate({"id": property_id or "prop1", **SAMPLE_PROPERTY_DETAIL})
            self.is_favorite = False
            self.compatibility_score = SAMPLE_COMPATIBILITY_SCORE
        finally:
            self.loading = False

    async def load_ai_features(self) -> None:
        """Price outlook, neighborhood insights and generated description; each degrades on its own"""
        prop = self.property
        if prop is None:
            return

        self.loading_ai = True
        try:
            try:
                payload = PricePredictionRequest.from_property(prop).to_payload()
                prediction = await self.ctx.ai.get_price_prediction(payload)
                self.price_predictions = [
                    PricePrediction.model_validate(p) for p in prediction["predictions"]
                ]
            except (ApiRequestError, ValidationError, KeyError, TypeError) as e:
                logger.info(f"Price prediction unavailable, using outlook: {e}")
                self.price_predictions = fallback_price_outlook(prop.price)

            area = prop.location.split(",")[0]
            try:
                trends = await self.ctx.ai.get_market_trends(area)
                self.market_insights = (trends or {}).get("insights") or SAMPLE_NEIGHBORHOOD_INSIGHTS
            except ApiRequestError as e:
                logger.info(f"Market insights unavailable for {area}: {e.message}")
                self.market_insights = SAMPLE_NEIGHBORHOOD_INSIGHTS

            try:
                generated = await self.ctx.ai.generate_description(prop.id)
                self.ai_description = (generated or {}).get("description")
            except ApiRequestError as e:
                logger.info(f"Description generation unavailable: {e.message}")
        finally:
            self.loading_ai = False

    async def toggle_favorite(self) -> None:
        user = self.ctx.session.current_user
        if user is None or self.property is None:
            self.ctx.notifications.error("Please log in to save favorites")
            return

        try:
            self.is_favorite = await self.ctx.favorites.toggle(user.id, self.property.id)
        except ApiRequestError as e:
            logger.error(f"Error updating favorites: {e.message}")
            self.ctx.notifications.error("Failed to update favorites")
            return

        self.ctx.notifications.success("Added to favorites" if self.is_favorite else "Removed from favorites")
