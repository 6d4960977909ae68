from homematch.pages.admin import AdminPage, PropertyForm
from homematch.pages.dashboard import DashboardPage
from homematch.pages.market_insights import MarketInsightsPage
from homematch.pages.preferences import PreferencesPage
from homematch.pages.properties import PropertiesPage
from homematch.pages.property_details import PropertyDetailsPage
from homematch.pages.shell import NavLink, navigation_links

__all__ = [
    "AdminPage",
    "PropertyForm",
    "DashboardPage",
    "MarketInsightsPage",
    "PreferencesPage",
    "PropertiesPage",
    "PropertyDetailsPage",
    "NavLink",
    "navigation_links"
]
