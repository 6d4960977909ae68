"""
API Gateway Client
Single request primitive for every backend call: bearer injection,
error normalization and centralized 401 handling.
"""

import json as jsonlib
import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Union

import httpx

from homematch.client.navigation import Navigator
from homematch.core.exceptions import (
    ApiRequestError,
    AuthExpiredError,
    ErrorKind,
    HomeMatchError,
)
from homematch.core.monitoring import MetricsTracker
from homematch.core.storage import TokenStore

logger = logging.getLogger(__name__)

ExpiryListener = Callable[[], Union[None, Awaitable[None]]]


@dataclass
class ApiResult:
    """Outcome of one backend call, tagged with the error kind on failure"""
    data: Any = None
    error: Optional[HomeMatchError] = None
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error else None

    def unwrap(self) -> Any:
        """Return the payload or raise the stored error"""
        if self.error is not None:
            raise self.error
        return self.data


class ApiGateway:
    """Issues requests against the backend relative to base_url"""

    def __init__(
        self,
        base_url: str,
        token_store: TokenStore,
        navigator: Optional[Navigator] = None,
        login_path: str = "/login",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.token_store = token_store
        self.navigator = navigator or Navigator()
        self.login_path = login_path
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout, transport=transport)
        self._expiry_listeners: List[ExpiryListener] = []

    def add_auth_expired_listener(self, listener: ExpiryListener) -> None:
        """Register a callback run after a 401 has cleared the token"""
        self._expiry_listeners.append(listener)

    async def _build_headers(self, headers: Optional[Mapping[str, str]]) -> Dict[str, str]:
        merged = {"Content-Type": "application/json"}
        token = await self.token_store.get()
        if token:
            merged["Authorization"] = f"Bearer {token}"
        if headers:
            merged.update(headers)
        return merged

    async def send(
        self,
        endpoint: str,
        method: str = "GET",
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> ApiResult:
        """
        Execute a request and return a tagged result instead of raising

        Args:
            endpoint: Path relative to base_url, e.g. "/properties/123"
            method: HTTP method
            json: Body to serialize as JSON; omitted when None
            params: Query parameters
            headers: Extra headers, override the defaults

        Returns:
            ApiResult with the decoded JSON body or the normalized error
        """
        url = f"{self.base_url}{endpoint}"
        content = jsonlib.dumps(json) if json is not None else None
        started = time.perf_counter()

        try:
            response = await self.client.request(
                method,
                url,
                content=content,
                params=params,
                headers=await self._build_headers(headers)
            )
        except httpx.HTTPError as e:
            error = ApiRequestError(str(e) or "Network request failed", endpoint=endpoint)
            return self._finish(method, endpoint, started, ApiResult(error=error))

        if response.status_code == 401:
            await self._handle_unauthorized()
            error = AuthExpiredError(status_code=401, endpoint=endpoint)
            return self._finish(method, endpoint, started, ApiResult(error=error, status_code=401))

        if not response.is_success:
            error = ApiRequestError(
                self._error_message(response),
                status_code=response.status_code,
                endpoint=endpoint
            )
            return self._finish(
                method, endpoint, started, ApiResult(error=error, status_code=response.status_code)
            )

        if not response.content:
            return self._finish(method, endpoint, started, ApiResult(status_code=response.status_code))

        try:
            data = response.json()
        except ValueError:
            error = ApiRequestError(
                "Invalid JSON response",
                status_code=response.status_code,
                endpoint=endpoint
            )
            return self._finish(
                method, endpoint, started, ApiResult(error=error, status_code=response.status_code)
            )

        return self._finish(
            method, endpoint, started, ApiResult(data=data, status_code=response.status_code)
        )

    async def request(self, endpoint: str, method: str = "GET", **kwargs) -> Any:
        """Raising form of send(): returns the JSON body or raises HomeMatchError"""
        result = await self.send(endpoint, method=method, **kwargs)
        return result.unwrap()

    async def _handle_unauthorized(self) -> None:
        await self.token_store.remove()
        for listener in list(self._expiry_listeners):
            outcome = listener()
            if outcome is not None:
                await outcome
        self.navigator.navigate(self.login_path)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return "Unknown error"
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return "API request failed"

    @staticmethod
    def _finish(method: str, endpoint: str, started: float, result: ApiResult) -> ApiResult:
        duration = time.perf_counter() - started
        outcome = result.kind.value if result.kind else "ok"
        MetricsTracker.track_request(method, endpoint, outcome, duration)

        if result.error is not None:
            logger.error(
                f"API request error: {method} {endpoint} - {result.error.message}",
                extra={
                    "error_code": result.error.error_code,
                    "status_code": result.status_code,
                    "endpoint": endpoint,
                    "method": method
                }
            )
        else:
            logger.debug(f"{method} {endpoint} -> {result.status_code} ({duration:.3f}s)")
        return result

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "ApiGateway":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
