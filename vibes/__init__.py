"""Good news, a quote and a weather mood, served from in-memory caches."""

__version__ = "0.1.0"
