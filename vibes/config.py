from datetime import timedelta
from functools import lru_cache

from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="", extra="ignore", populate_by_name=True)

    http_timeout: float = Field(10.0, gt=0, alias="HTTP_TIMEOUT")
    http_max_connections: int = Field(20, ge=1, alias="HTTP_MAX_CONNECTIONS")
    http_max_keepalive: int = Field(10, ge=1, alias="HTTP_MAX_KEEPALIVE")
    http_user_agent: str = Field(
        "Vibes/0.1 (+https://vibes.hglnd.se)",
        alias="HTTP_USER_AGENT",
    )

    # News pipeline
    similarity_threshold: float = Field(0.85, ge=0, le=1, alias="SIMILARITY_THRESHOLD")
    top_articles_to_consider: int = Field(30, ge=1, alias="TOP_ARTICLES_TO_CONSIDER")
    final_news_count: int = Field(3, ge=0, alias="FINAL_NEWS_COUNT")
    items_per_feed: int = Field(10, ge=1, alias="ITEMS_PER_FEED")
    content_snippet_length: int = Field(150, ge=1, alias="CONTENT_SNIPPET_LENGTH")

    feed_ttl: timedelta = Field(timedelta(hours=24), alias="FEED_TTL")
    selection_ttl: timedelta = Field(timedelta(minutes=5), alias="SELECTION_TTL")
    quote_ttl: timedelta = Field(timedelta(minutes=5), alias="QUOTE_TTL")

    # Location and weather providers
    openweather_api_key: str | None = Field(default=None, alias="OPENWEATHER_API_KEY")
    openweather_base_url: HttpUrl = Field(
        "https://api.openweathermap.org/data/2.5", alias="OPENWEATHER_BASE_URL"
    )
    ipapi_base_url: HttpUrl = Field("https://ipapi.co", alias="IPAPI_BASE_URL")
    fallback_latitude: float = Field(59.3293, alias="FALLBACK_LATITUDE")
    fallback_longitude: float = Field(18.0686, alias="FALLBACK_LONGITUDE")
    fallback_city: str = Field("Stockholm", alias="FALLBACK_CITY")
    fallback_country: str = Field("Sweden", alias="FALLBACK_COUNTRY")

    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(True, alias="LOG_JSON")


@lru_cache
def get_settings() -> Settings:
    return Settings()
