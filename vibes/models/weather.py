from __future__ import annotations

from pydantic import BaseModel, Field


class Coordinates(BaseModel):
    lat: float
    lon: float


class Location(BaseModel):
    lat: float
    lon: float
    city: str | None = None
    country: str | None = None


class WeatherMood(BaseModel):
    location: str = Field(description="'City, CC' as reported by the provider")
    temperature: int = Field(description="Rounded temperature in Celsius")
    mood: str
    description: str
    icon: str
    coordinates: Coordinates


class LocationResponse(BaseModel):
    success: bool = True
    coordinates: Coordinates
    city: str | None = None
    country: str | None = None


class WeatherResponse(WeatherMood):
    success: bool = True


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
