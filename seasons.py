"""
Seasonal knowledge used for weather, crop advice and default parameters.

Seasons follow the Indian agricultural calendar used by the app:
Mar-May summer, Jun-Aug monsoon, Sep-Nov autumn, Dec-Feb winter.
"""

from datetime import date, datetime
from typing import Optional, List, Union

SEASONS = ("summer", "monsoon", "autumn", "winter")

# Words users type that map onto one of SEASONS
SEASON_ALIASES = {
    "rainy": "monsoon",
    "dry": "summer",
    "kharif": "monsoon",
    "rabi": "winter",
}

WEATHER_FORECASTS = {
    "summer": "Hot and dry with occasional thunderstorms",
    "monsoon": "Heavy rainfall expected, high humidity",
    "autumn": "Moderate temperature, occasional showers",
    "winter": "Cool and dry, possible fog in mornings",
}

TEMPERATURE_RANGES = {
    "summer": "30-40°C",
    "monsoon": "25-35°C",
    "autumn": "20-30°C",
    "winter": "15-25°C",
}

RAINFALL = {
    "summer": "Low to moderate",
    "monsoon": "Heavy rainfall expected",
    "autumn": "Moderate rainfall",
    "winter": "Minimal rainfall",
}

FARMING_TIPS = {
    "summer": "• Ensure adequate irrigation\n• Use mulch to retain moisture\n• Plant heat-tolerant varieties",
    "monsoon": "• Monitor for waterlogging\n• Protect from pests\n• Ensure proper drainage",
    "autumn": "• Prepare soil with organic matter\n• Plant winter crops\n• Monitor temperature changes",
    "winter": "• Protect crops from frost\n• Use greenhouses if needed\n• Plant cold-tolerant varieties",
}

SEASON_ADVICE = {
    "summer": "Focus on heat-tolerant crops like okra, brinjal, and gourds. Ensure adequate irrigation.",
    "monsoon": "Perfect for rice, maize, and pulses. Monitor for waterlogging and pests.",
    "autumn": "Ideal for wheat, mustard, and vegetables. Prepare soil with organic matter.",
    "winter": "Best for wheat, barley, and winter vegetables. Protect from frost.",
}

CROPS_BY_SEASON = {
    "summer": ["Rice", "Maize", "Cotton", "Sugarcane", "Vegetables"],
    "monsoon": ["Rice", "Pulses", "Oilseeds", "Cotton"],
    "autumn": ["Wheat", "Mustard", "Potato", "Onion", "Vegetables"],
    "winter": ["Wheat", "Barley", "Peas", "Carrots", "Cauliflower"],
}


def current_season(today: Union[date, datetime, None] = None) -> str:
    month = (today or date.today()).month
    if 3 <= month <= 5:
        return "summer"
    if 6 <= month <= 8:
        return "monsoon"
    if 9 <= month <= 11:
        return "autumn"
    return "winter"


def normalize_season(word: Optional[str]) -> Optional[str]:
    """Map a user-typed season word onto SEASONS, or None if it is not one."""
    if not word:
        return None
    word = word.strip().lower()
    if word in SEASONS:
        return word
    return SEASON_ALIASES.get(word)


def weather_forecast(season: str) -> str:
    return WEATHER_FORECASTS.get(season, "Moderate weather conditions")


def temperature_range(season: str) -> str:
    return TEMPERATURE_RANGES.get(season, "20-30°C")


def rainfall_info(season: str) -> str:
    return RAINFALL.get(season, "Moderate")


def farming_tips(season: str) -> str:
    return FARMING_TIPS.get(
        season,
        "• Follow best farming practices\n• Monitor weather regularly\n• Maintain soil health",
    )


def recommended_crops(season: str) -> List[str]:
    return list(CROPS_BY_SEASON.get(season, ["Rice", "Wheat", "Vegetables"]))
