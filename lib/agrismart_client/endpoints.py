from __future__ import annotations

from types import MappingProxyType

API_ENDPOINTS = MappingProxyType(
    {
        # Authentication
        "LOGIN": "/api/auth/login",
        "REGISTER": "/api/auth/register",
        "LOGOUT": "/api/auth/logout",
        "REFRESH_TOKEN": "/api/auth/refresh",
        # User profile
        "USER_PROFILE": "/api/user/profile",
        "UPDATE_PROFILE": "/api/user/profile",
        # Pest detection
        "PEST_DETECTION": "/api/pest/detect",
        "PEST_HISTORY": "/api/pest/history",
        "PEST_GALLERY": "/api/pest/gallery",
        # Soil health
        "SOIL_HEALTH": "/api/soil/health",
        "SOIL_RECOMMENDATIONS": "/api/soil/recommendations",
        "SOIL_HISTORY": "/api/soil/history",
        # Weather
        "WEATHER_CURRENT": "/api/weather/current",
        "WEATHER_FORECAST": "/api/weather/forecast",
        "WEATHER_ALERTS": "/api/weather/alerts",
        # Crop management
        "CROP_YIELD": "/api/crop/yield",
        "CROP_SCHEDULE": "/api/crop/schedule",
        "CROP_RECOMMENDATIONS": "/api/crop/recommendations",
        # Market data
        "MARKET_PRICES": "/api/market/prices",
        "MARKET_TRENDS": "/api/market/trends",
        # Reports & analytics
        "REPORTS": "/api/reports",
        "ANALYTICS": "/api/analytics",
        # Community
        "COMMUNITY_REPORTS": "/api/community/reports",
        "COMMUNITY_POSTS": "/api/community/posts",
    }
)

ENDPOINT_GROUPS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("auth", ("LOGIN", "REGISTER", "LOGOUT", "REFRESH_TOKEN")),
    ("user", ("USER_PROFILE", "UPDATE_PROFILE")),
    ("pest", ("PEST_DETECTION", "PEST_HISTORY", "PEST_GALLERY")),
    ("soil", ("SOIL_HEALTH", "SOIL_RECOMMENDATIONS", "SOIL_HISTORY")),
    ("weather", ("WEATHER_CURRENT", "WEATHER_FORECAST", "WEATHER_ALERTS")),
    ("crop", ("CROP_YIELD", "CROP_SCHEDULE", "CROP_RECOMMENDATIONS")),
    ("market", ("MARKET_PRICES", "MARKET_TRENDS")),
    ("reports", ("REPORTS", "ANALYTICS")),
    ("community", ("COMMUNITY_REPORTS", "COMMUNITY_POSTS")),
)


def endpoint_path(name: str) -> str:
    try:
        return API_ENDPOINTS[name]
    except KeyError:
        raise KeyError(f"unknown endpoint: {name}") from None
