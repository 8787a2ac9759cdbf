from .feeds import FeedFetcher, FeedOutcome
from .geolocation import GeolocationService
from .news import NewsAggregator
from .quotes import QuoteService
from .weather import WeatherService

__all__ = [
    "FeedFetcher",
    "FeedOutcome",
    "GeolocationService",
    "NewsAggregator",
    "QuoteService",
    "WeatherService",
]
