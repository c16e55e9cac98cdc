"""Default provider endpoints and search settings."""

WEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
GEOCODING_BASE_URL = "https://api.openweathermap.org/geo/1.0"

API_KEY_ENV = "OPENWEATHER_API_KEY"

DEFAULT_CITY = "Rajkot"
