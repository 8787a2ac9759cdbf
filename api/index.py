from __future__ import annotations

import math
from datetime import datetime, timezone
from functools import lru_cache

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import ORJSONResponse
from mangum import Mangum

from vibes import __version__
from vibes.config import Settings, get_settings
from vibes.data.feeds import FEED_SOURCES
from vibes.http_client import shutdown_http_client
from vibes.logging import configure_logging, get_logger
from vibes.models.news import CacheInfo, NewsErrorResponse, NewsResponse, PageData
from vibes.models.quote import Quote
from vibes.models.weather import Coordinates, ErrorResponse, LocationResponse, WeatherResponse
from vibes.services import GeolocationService, NewsAggregator, QuoteService, WeatherService

settings = get_settings()
configure_logging(settings.log_level, json=settings.log_json)
logger = get_logger(__name__)

app = FastAPI(
    title="Vibes",
    version=__version__,
    description="Good news from a handful of RSS feeds, a quote and a weather mood.",
    default_response_class=ORJSONResponse,
)


@lru_cache
def get_news_aggregator() -> NewsAggregator:
    return NewsAggregator()


@lru_cache
def get_quote_service() -> QuoteService:
    return QuoteService()


@lru_cache
def get_geolocation_service() -> GeolocationService:
    return GeolocationService()


def get_weather_service() -> WeatherService:
    return WeatherService()


@app.get("/health", tags=["system"])
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@app.get(
    "/api/news",
    tags=["news"],
    response_model=NewsResponse,
    responses={500: {"model": NewsErrorResponse}},
)
async def news(
    refresh: str | None = Query(None, description="Present to drop both news caches first"),
    aggregator: NewsAggregator = Depends(get_news_aggregator),
):
    should_refresh = refresh is not None
    try:
        if should_refresh:
            aggregator.clear_caches()
        items = await aggregator.get_selection()
    except Exception:
        logger.exception("news_request_failed")
        body = NewsErrorResponse(error="Failed to fetch news")
        return ORJSONResponse(body.model_dump(by_alias=True), status_code=500)

    return NewsResponse(
        news=items,
        refreshed=should_refresh,
        timestamp=datetime.now(timezone.utc),
    )


@app.get("/api/news/cache", tags=["news"], response_model=CacheInfo)
async def news_cache(aggregator: NewsAggregator = Depends(get_news_aggregator)):
    return aggregator.cache_info()


@app.get("/api/page", tags=["page"], response_model=PageData, response_model_exclude_none=True)
async def page(
    aggregator: NewsAggregator = Depends(get_news_aggregator),
    quotes: QuoteService = Depends(get_quote_service),
    app_settings: Settings = Depends(get_settings),
):
    common = {
        "quote": quotes.get_quote(),
        "feeds": list(FEED_SOURCES),
        "content_snippet_length": app_settings.content_snippet_length,
    }
    try:
        items = await aggregator.get_selection()
    except Exception:
        logger.exception("page_news_failed")
        return PageData(news=[], error="Failed to load news", **common)
    return PageData(news=items, **common)


@app.get("/api/quote", tags=["page"], response_model=Quote, response_model_exclude_none=True)
async def quote(quotes: QuoteService = Depends(get_quote_service)):
    return quotes.get_quote()


@app.get(
    "/api/weather/location",
    tags=["weather"],
    response_model=LocationResponse,
    responses={500: {"model": ErrorResponse}},
)
async def weather_location(
    request: Request,
    service: GeolocationService = Depends(get_geolocation_service),
):
    try:
        client_ip = _client_ip(request)
        location = await service.locate(client_ip)
    except Exception:
        logger.exception("location_request_failed")
        body = ErrorResponse(error="Failed to determine location")
        return ORJSONResponse(body.model_dump(), status_code=500)
    return LocationResponse(
        coordinates=Coordinates(lat=location.lat, lon=location.lon),
        city=location.city,
        country=location.country,
    )


@app.get(
    "/api/weather/sunshine",
    tags=["weather"],
    response_model=WeatherResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def weather_sunshine(
    lat: str | None = Query(None),
    lon: str | None = Query(None),
    service: WeatherService = Depends(get_weather_service),
):
    if not lat or not lon:
        return ORJSONResponse(
            ErrorResponse(error="Missing coordinates").model_dump(), status_code=400
        )
    try:
        latitude = float(lat)
        longitude = float(lon)
    except ValueError:
        latitude = longitude = math.nan
    if math.isnan(latitude) or math.isnan(longitude):
        return ORJSONResponse(
            ErrorResponse(error="Invalid coordinates").model_dump(), status_code=400
        )

    try:
        mood = await service.get_mood(latitude, longitude)
    except Exception:
        logger.exception("weather_request_failed")
        return ORJSONResponse(
            ErrorResponse(error="Failed to fetch weather data").model_dump(), status_code=500
        )
    return WeatherResponse(**mood.model_dump())


def _client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client is None:
        raise ValueError("request has no client address")
    return request.client.host


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await shutdown_http_client()


handler = Mangum(app)
