import copy
import logging
import uuid
from typing import Any, Dict, List

from pydantic import BaseModel, Field

from homematch.context import AppContext
from homematch.core.exceptions import AdminAccessDenied
from homematch.pages.sample_data import ADMIN_SAMPLE_PROPERTIES, ADMIN_SAMPLE_USERS

logger = logging.getLogger(__name__)


class PropertyForm(BaseModel):
    """Add-listing dialog"""
    title: str = Field(..., min_length=1)
    type: str = "Apartment"
    location: str = Field(..., min_length=1)
    price: int = Field(..., gt=0)
    status: str = "Available"


class AdminPage:
    """
    Listing and account tables for admins.

    The tables are held locally, seeded with sample rows; changes are not
    sent to the backend.
    """

    def __init__(self, ctx: AppContext):
        if not ctx.session.is_admin:
            ctx.notifications.error("You don't have permission to access this page")
            ctx.navigator.navigate("/")
            raise AdminAccessDenied()

        self.ctx = ctx
        self.properties: List[Dict[str, Any]] = copy.deepcopy(ADMIN_SAMPLE_PROPERTIES)
        self.users: List[Dict[str, Any]] = copy.deepcopy(ADMIN_SAMPLE_USERS)
        self.search_term = ""

    def filtered_properties(self) -> List[Dict[str, Any]]:
        term = self.search_term.lower()
        return [
            p for p in self.properties
            if term in p["title"].lower() or term in p["location"].lower()
        ]

    def filtered_users(self) -> List[Dict[str, Any]]:
        term = self.search_term.lower()
        return [
            u for u in self.users
            if term in u["name"].lower() or term in u["email"].lower()
        ]

    def add_property(self, form: PropertyForm) -> Dict[str, Any]:
        row = {"id": f"prop-{uuid.uuid4().hex[:8]}", **form.model_dump()}
        self.properties.append(row)
        logger.info(f"Admin added property {row['id']}")
        self.ctx.notifications.success("Property added successfully")
        return row

    def delete_property(self, property_id: str) -> None:
        self.properties = [p for p in self.properties if p["id"] != property_id]
        logger.info(f"Admin deleted property {property_id}")
        self.ctx.notifications.success("Property deleted successfully")
