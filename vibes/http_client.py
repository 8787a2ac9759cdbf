"""Process-wide HTTP client shared by the feed, location and weather services."""

from __future__ import annotations

import asyncio

import httpx

from .config import Settings, get_settings

_shared: httpx.AsyncClient | None = None
_shared_lock = asyncio.Lock()


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout),
        limits=httpx.Limits(
            max_connections=settings.http_max_connections,
            max_keepalive_connections=settings.http_max_keepalive,
        ),
        headers={"User-Agent": settings.http_user_agent},
        follow_redirects=True,
    )


async def get_http_client() -> httpx.AsyncClient:
    global _shared

    if _shared is not None and not _shared.is_closed:
        return _shared
    async with _shared_lock:
        if _shared is None or _shared.is_closed:
            _shared = build_http_client(get_settings())
    return _shared


async def shutdown_http_client() -> None:
    global _shared
    client, _shared = _shared, None
    if client is not None and not client.is_closed:
        await client.aclose()
