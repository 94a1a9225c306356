from __future__ import annotations

from typing import Any

import httpx

TOKEN_HEADER = "x-auth-token"


class ApiClient:
    """Async HTTP access to the backend; the only place that does I/O."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    @property
    def token(self) -> str | None:
        return self._client.headers.get(TOKEN_HEADER)

    def set_token(self, token: str | None) -> None:
        if token:
            self._client.headers[TOKEN_HEADER] = token
        elif TOKEN_HEADER in self._client.headers:
            del self._client.headers[TOKEN_HEADER]

    async def request(self, method: str, path: str, json: Any = None) -> Any:
        response = await self._client.request(method, path, json=json)
        response.raise_for_status()
        return response.json()

    async def get(self, path: str) -> Any:
        return await self.request("GET", path)

    async def post(self, path: str, json: Any = None) -> Any:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def error_payload(exc: httpx.HTTPError) -> dict[str, Any]:
    """``{"msg", "status"}`` for the error slices."""
    if isinstance(exc, httpx.HTTPStatusError):
        return {"msg": exc.response.reason_phrase, "status": exc.response.status_code}
    return {"msg": str(exc) or type(exc).__name__, "status": None}


def error_messages(exc: httpx.HTTPError) -> list[str]:
    """Messages from the response's ``errors`` list, one per violated rule."""
    if not isinstance(exc, httpx.HTTPStatusError):
        return []
    try:
        body = exc.response.json()
    except ValueError:
        return []
    errors = body.get("errors") if isinstance(body, dict) else None
    return [item["msg"] for item in errors or [] if isinstance(item, dict) and item.get("msg")]
