import secrets
from collections import defaultdict
from typing import Any, AsyncGenerator, Dict, List, Optional, Tuple

import httpx
import pytest
from fastapi import Body, FastAPI, Request
from fastapi.responses import JSONResponse, Response

from homematch.context import AppContext, create_app_context
from homematch.core.config import Settings
from homematch.core.storage import MemoryTokenStore

BASE_URL = "http://test/api"


class BackendError(Exception):
    """Error response from the fake backend: {"message": ...} with the given status"""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message


class FakeBackend:
    """In-memory stand-in for the rental REST API"""

    def __init__(self):
        self.users: Dict[str, Dict[str, Any]] = {
            "u1": {"id": "u1", "email": "a@b.com", "role": "user", "createdAt": "2025-04-01T10:00:00Z"},
            "admin1": {"id": "admin1", "email": "admin@b.com", "role": "admin", "createdAt": "2025-01-01T10:00:00Z"},
        }
        self.passwords: Dict[str, Tuple[str, str]] = {
            "a@b.com": ("pw", "u1"),
            "admin@b.com": ("secret", "admin1"),
        }
        self.tokens: Dict[str, str] = {}
        self.next_token: Optional[str] = None
        self.preferences: Dict[str, Dict[str, Any]] = {}
        self.favorites: Dict[str, List[str]] = defaultdict(list)
        self.properties: Dict[str, Dict[str, Any]] = {
            "p1": {
                "id": "p1", "title": "Sunny Loft", "description": "Open plan loft near the park.",
                "type": "Apartment", "location": "Brooklyn, New York", "price": 2100,
                "bedrooms": 1, "bathrooms": 1, "features": ["Gym"], "imageUrl": "https://img/p1.jpg",
                "squareFeet": 800,
            },
            "p2": {
                "id": "p2", "title": "Garden House", "description": "Quiet house with a garden.",
                "type": "House", "location": "Evanston, Chicago", "price": 3400,
                "bedrooms": 3, "bathrooms": 2, "features": ["Garden", "Parking"], "imageUrl": "https://img/p2.jpg",
            },
            "p3": {
                "id": "p3", "title": "Harbor Studio", "description": "Compact studio by the harbor.",
                "type": "Studio", "location": "Waterfront, Miami", "price": 1500,
                "bedrooms": 0, "bathrooms": 1, "features": ["Pool"], "imageUrl": "https://img/p3.jpg",
            },
        }
        self.requests: List[Dict[str, Any]] = []
        self.failures: Dict[Tuple[str, str], Tuple[int, Any]] = {}

    def fail(self, method: str, path: str, status_code: int, body: Any = None) -> None:
        """Force the next and every following call to method+path to fail"""
        self.failures[(method.upper(), path)] = (status_code, body)

    def issue_token(self, user_id: str) -> str:
        token = self.next_token or secrets.token_hex(8)
        self.next_token = None
        self.tokens[token] = user_id
        return token

    def calls(self, method: str, path: str) -> List[Dict[str, Any]]:
        return [r for r in self.requests if r["method"] == method and r["path"] == path]


def create_backend(state: FakeBackend) -> FastAPI:
    app = FastAPI()

    @app.exception_handler(BackendError)
    async def backend_error_handler(request: Request, exc: BackendError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.middleware("http")
    async def record_and_fail(request: Request, call_next):
        state.requests.append({
            "method": request.method,
            "path": request.url.path,
            "raw_path": request.scope.get("raw_path", b"").decode(),
            "query": request.url.query,
            "authorization": request.headers.get("authorization"),
            "content_type": request.headers.get("content-type"),
        })
        forced = state.failures.get((request.method, request.url.path))
        if forced:
            status_code, body = forced
            if body is None:
                return Response(status_code=status_code)
            if isinstance(body, str):
                return Response(content=body, status_code=status_code, media_type="text/plain")
            return JSONResponse(status_code=status_code, content=body)
        return await call_next(request)

    def current_user(request: Request) -> Dict[str, Any]:
        header = request.headers.get("authorization") or ""
        token = header[len("Bearer "):] if header.startswith("Bearer ") else None
        if not token or token not in state.tokens:
            raise BackendError(401, "Could not validate credentials")
        return state.users[state.tokens[token]]

    # -- auth ---------------------------------------------------------------

    @app.post("/api/auth/login")
    async def login(payload: dict = Body(...)):
        record = state.passwords.get(payload.get("email"))
        if not record or record[0] != payload.get("password"):
            raise BackendError(400, "Invalid email or password")
        user = state.users[record[1]]
        return {"token": state.issue_token(user["id"]), "user": user}

    @app.post("/api/auth/signup")
    async def signup(payload: dict = Body(...)):
        email = payload.get("email")
        if email in state.passwords:
            raise BackendError(409, "Email already registered")
        user_id = f"u{len(state.users) + 1}"
        state.users[user_id] = {"id": user_id, "email": email, "role": "user", "createdAt": "2025-05-01T00:00:00Z"}
        state.passwords[email] = (payload.get("password"), user_id)
        return {"token": state.issue_token(user_id), "user": state.users[user_id]}

    @app.post("/api/auth/logout")
    async def logout(request: Request):
        header = request.headers.get("authorization") or ""
        state.tokens.pop(header[len("Bearer "):], None)
        return {"message": "Logged out"}

    @app.get("/api/auth/me")
    async def me(request: Request):
        return current_user(request)

    # -- users --------------------------------------------------------------

    @app.get("/api/users/{user_id}")
    async def get_user(user_id: str, request: Request):
        current_user(request)
        return {**state.users[user_id], "preferences": state.preferences.get(user_id)}

    @app.put("/api/users/{user_id}/preferences")
    async def update_preferences(user_id: str, request: Request, payload: dict = Body(...)):
        current_user(request)
        state.preferences[user_id] = payload["preferences"]
        return {"message": "Preferences updated"}

    @app.get("/api/users/{user_id}/favorites")
    async def list_favorites(user_id: str, request: Request):
        current_user(request)
        return state.favorites[user_id]

    @app.post("/api/users/{user_id}/favorites/{property_id}")
    async def add_favorite(user_id: str, property_id: str, request: Request):
        current_user(request)
        if property_id not in state.favorites[user_id]:
            state.favorites[user_id].append(property_id)
        return {"favorites": state.favorites[user_id]}

    @app.delete("/api/users/{user_id}/favorites/{property_id}")
    async def remove_favorite(user_id: str, property_id: str, request: Request):
        current_user(request)
        if property_id in state.favorites[user_id]:
            state.favorites[user_id].remove(property_id)
        return {"favorites": state.favorites[user_id]}

    # -- properties ---------------------------------------------------------

    @app.get("/api/properties")
    async def list_properties(request: Request):
        params = request.query_params
        results = list(state.properties.values())
        if "minPrice" in params:
            results = [p for p in results if p["price"] >= float(params["minPrice"])]
        if "maxPrice" in params:
            results = [p for p in results if p["price"] <= float(params["maxPrice"])]
        if "propertyType" in params:
            results = [p for p in results if p["type"] == params["propertyType"]]
        return results

    @app.get("/api/properties/recommendations/{user_id}")
    async def recommendations(user_id: str, request: Request):
        current_user(request)
        return [{**state.properties["p2"], "compatibilityScore": 93}]

    @app.post("/api/properties/search/nlp")
    async def nlp_search(payload: dict = Body(...)):
        words = payload["query"].lower().split()
        return [
            p for p in state.properties.values()
            if any(w in p["description"].lower() or w in p["title"].lower() for w in words)
        ]

    @app.get("/api/properties/{property_id}")
    async def get_property(property_id: str):
        if property_id not in state.properties:
            raise BackendError(404, "Property not found")
        return state.properties[property_id]

    @app.get("/api/properties/{property_id}/compatibility/{user_id}")
    async def compatibility(property_id: str, user_id: str, request: Request):
        current_user(request)
        return {"compatibilityScore": 91}

    # -- ai -----------------------------------------------------------------

    @app.get("/api/ai/market-trends/{location}")
    async def market_trends(location: str):
        return {
            "locationName": location,
            "overview": f"Rents in {location} are rising.",
            "priceChange": {"monthly": 0.8, "yearly": 4.1},
            "averageRent": {"overall": 2900},
            "demandIndex": 70,
            "supplyIndex": 40,
            "insights": f"{location} is popular with young professionals.",
        }

    @app.post("/api/ai/price-prediction")
    async def price_prediction(payload: dict = Body(...)):
        base = state.properties.get(payload.get("id"), {}).get("price", 1000)
        return {"predictions": [{"label": "Current", "price": base}, {"label": "+12 Months", "price": base + 100}]}

    @app.get("/api/ai/generate-description/{property_id}")
    async def generate_description(property_id: str):
        return {"description": f"A lovely home ({property_id})."}

    @app.get("/api/ai/insights/{user_id}")
    async def personalized_insights(user_id: str, request: Request):
        current_user(request)
        return {"insights": ["Prices in your area dropped 2% this month."]}

    return app


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(API_BASE_URL=BASE_URL, TOKEN_STORE="memory", LOG_JSON=False)


@pytest.fixture
def token_store() -> MemoryTokenStore:
    return MemoryTokenStore()


@pytest.fixture
def transport(backend: FakeBackend) -> httpx.ASGITransport:
    """httpx transport that serves requests from the fake backend in-process"""
    return httpx.ASGITransport(app=create_backend(backend))


@pytest.fixture
async def ctx(
    transport: httpx.ASGITransport,
    test_settings: Settings,
    token_store: MemoryTokenStore
) -> AsyncGenerator[AppContext, None]:
    """Application context wired to the fake backend, session not yet initialized"""
    context = create_app_context(test_settings, token_store=token_store, transport=transport)
    yield context
    await context.aclose()


@pytest.fixture
async def user_ctx(ctx: AppContext) -> AppContext:
    """Context logged in as a regular user (u1)"""
    await ctx.session.login("a@b.com", "pw")
    return ctx


@pytest.fixture
async def admin_ctx(ctx: AppContext) -> AppContext:
    """Context logged in as an admin"""
    await ctx.session.login("admin@b.com", "secret")
    return ctx
