import logging
from dataclasses import dataclass
from typing import List

from homematch.context import AppContext
from homematch.services.session_service import SessionManager

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavLink:
    label: str
    path: str


def navigation_links(session: SessionManager) -> List[NavLink]:
    """Links the navigation bar shows for the current session"""
    links = [NavLink("Home", "/"), NavLink("Properties", "/properties")]

    if session.current_user is not None:
        links.append(NavLink("Dashboard", "/dashboard"))
        links.append(NavLink("Market Insights", "/market-insights"))
        links.append(NavLink("Preferences", "/preferences"))
        if session.is_admin:
            links.append(NavLink("Admin", "/admin"))
    else:
        links.append(NavLink("Login", "/login"))
        links.append(NavLink("Sign Up", "/signup"))

    return links


def is_active(ctx: AppContext, path: str) -> bool:
    return ctx.navigator.current_path == path


def user_initial(session: SessionManager) -> str:
    """Avatar letter for the account menu"""
    user = session.current_user
    if user is None or not user.email:
        return "U"
    return user.email[0].upper()


async def logout(ctx: AppContext) -> None:
    """Account menu logout: clear the session and go home"""
    await ctx.session.logout()
    ctx.navigator.navigate("/")
