from __future__ import annotations

from dataclasses import dataclass, field

import httpx

from ..config import Settings, get_settings
from ..http_client import get_http_client
from ..logging import get_logger
from ..models.weather import Location

logger = get_logger(__name__)


@dataclass(slots=True)
class GeolocationService:
    settings: Settings | None = None
    client: httpx.AsyncClient | None = None
    _cache: dict[str, Location] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.settings is None:
            self.settings = get_settings()

    async def locate(self, ip: str) -> Location:
        cached = self._cache.get(ip)
        if cached is not None:
            logger.debug("ip_location_cache_hit", ip=ip)
            return cached

        try:
            location = await self._lookup(ip)
        except (httpx.HTTPError, AttributeError, KeyError, ValueError, TypeError) as exc:
            logger.warning("ip_location_failed", ip=ip, error=str(exc))
            return self.fallback()

        self._cache[ip] = location
        return location

    async def _lookup(self, ip: str) -> Location:
        client = self.client or await get_http_client()
        base_url = str(self.settings.ipapi_base_url).rstrip("/")
        response = await client.get(f"{base_url}/{ip}/json/")
        response.raise_for_status()
        payload = response.json()
        if payload.get("error"):
            raise ValueError(payload.get("reason") or "ipapi lookup rejected")
        return Location(
            lat=payload["latitude"],
            lon=payload["longitude"],
            city=payload.get("city"),
            country=payload.get("country_name"),
        )

    def fallback(self) -> Location:
        return Location(
            lat=self.settings.fallback_latitude,
            lon=self.settings.fallback_longitude,
            city=self.settings.fallback_city,
            country=self.settings.fallback_country,
        )

    def clear(self) -> None:
        self._cache.clear()
        logger.info("ip_location_cache_cleared")
