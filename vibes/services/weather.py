from __future__ import annotations

import math
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import NamedTuple

import httpx

from ..config import Settings, get_settings
from ..http_client import get_http_client
from ..logging import get_logger
from ..models.weather import Coordinates, WeatherMood

logger = get_logger(__name__)

DEFAULT_CONDITION = 500
SUNRISE_WINDOW = 3600


class Mood(NamedTuple):
    mood: str
    description: str
    icon: str


FALLBACK_MOOD = Mood("weather", "It's... weather! Probably a great day", "🌤️")


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def describe_weather(
    code: int,
    temperature: float,
    is_daytime: bool,
    cloud_cover: float,
    now: float,
    sunrise: float,
) -> Mood:
    """Map an OpenWeatherMap condition code plus context to a mood line."""
    if 200 <= code < 300:
        return Mood("dramatic", "Lightning and thunder nearby, nature's light show", "⛈️")

    if 300 <= code < 400:
        return Mood(
            "gentle", "Light drizzle, perfect for a peaceful walk with an umbrella", "🌦️"
        )

    if 500 <= code < 600:
        if temperature < 0:
            return Mood("cozy", "Rain turning to snow, winter wonder outside your window", "🌨️")
        if temperature < 10:
            return Mood("cozy", "Cool rain, great day for tea and a good book", "🌧️")
        return Mood("cozy", "Warm rain, perfect for listening to the patter on the roof", "🌧️")

    if 600 <= code < 700:
        return Mood("magical", "Snowfall, everything is hushed and beautiful", "❄️")

    if 700 <= code < 800:
        if is_daytime:
            return Mood("mysterious", "Misty air, like walking through clouds", "🌫️")
        return Mood("mysterious", "Fog rolling in, mysteriously atmospheric", "🌫️")

    if code == 800:
        degrees = round_half_up(temperature)
        if is_daytime:
            if temperature > 20:
                return Mood("perfect", f"Clear skies and {degrees}°, ideal for being outside", "☀️")
            return Mood("crisp", f"Bright and clear, {degrees}° for an energizing day", "☀️")
        if sunrise - now < SUNRISE_WINDOW:
            return Mood("dawn", "Clear skies just before sunrise, you could catch the dawn", "🌅")
        if temperature < 5:
            return Mood("starry", "Crystal clear night, perfect for stargazing (bundle up!)", "✨")
        return Mood("starry", "Clear night skies, perfect for stargazing", "✨")

    if 800 < code < 810:
        if not is_daytime:
            return Mood("cloudy", "Cloudy night, cozy indoor weather", "☁️")
        if cloud_cover > 70:
            return Mood("overcast", "Overcast but pleasant, comfortable weather for wandering", "☁️")
        return Mood("partly-cloudy", "Partly cloudy, nice balance of sun and shade", "⛅")

    return FALLBACK_MOOD


@dataclass(slots=True)
class WeatherService:
    settings: Settings | None = None
    client: httpx.AsyncClient | None = None
    clock: Callable[[], float] = time.time

    def __post_init__(self) -> None:
        if self.settings is None:
            self.settings = get_settings()

    async def get_mood(self, lat: float, lon: float) -> WeatherMood:
        logger.info("weather_fetch", lat=lat, lon=lon)
        try:
            result = await self._fetch_mood(lat, lon)
        except (httpx.HTTPError, KeyError, IndexError, ValueError, TypeError) as exc:
            logger.warning("weather_fetch_failed", lat=lat, lon=lon, error=str(exc))
            return WeatherMood(
                location="Your location",
                temperature=0,
                mood="weather",
                description="Check the weather outside",
                icon="🌤️",
                coordinates=Coordinates(lat=lat, lon=lon),
            )
        logger.info("weather_mood", location=result.location, mood=result.mood)
        return result

    async def _fetch_mood(self, lat: float, lon: float) -> WeatherMood:
        client = self.client or await get_http_client()
        base_url = str(self.settings.openweather_base_url).rstrip("/")
        response = await client.get(
            f"{base_url}/weather",
            params={
                "lat": lat,
                "lon": lon,
                "appid": self.settings.openweather_api_key or "",
                "units": "metric",
            },
        )
        response.raise_for_status()
        payload = response.json()

        now = int(self.clock())
        sys_info = payload["sys"]
        main = payload["main"]
        conditions = payload.get("weather") or []
        code = (conditions[0].get("id") if conditions else None) or DEFAULT_CONDITION
        temperature = float(main["temp"])
        is_daytime = sys_info["sunrise"] < now < sys_info["sunset"]

        mood = describe_weather(
            code=code,
            temperature=temperature,
            is_daytime=is_daytime,
            cloud_cover=(payload.get("clouds") or {}).get("all") or 0,
            now=now,
            sunrise=sys_info["sunrise"],
        )
        return WeatherMood(
            location=f"{payload['name']}, {sys_info['country']}",
            temperature=round_half_up(temperature),
            mood=mood.mood,
            description=mood.description,
            icon=mood.icon,
            coordinates=Coordinates(
                lat=payload["coord"]["lat"], lon=payload["coord"]["lon"]
            ),
        )
