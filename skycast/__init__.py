"""City weather lookup client for the OpenWeather APIs."""

__version__ = "0.1.0"
