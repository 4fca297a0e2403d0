import os
from dotenv import load_dotenv

load_dotenv()

# Initialize Sentry early, before anything else imports
_sentry_dsn = os.getenv("SENTRY_DSN")
if _sentry_dsn:
    try:
        import sentry_sdk
        sentry_sdk.init(
            dsn=_sentry_dsn,
            traces_sample_rate=0.1,
            environment=os.getenv("FLASK_ENV", "production"),
        )
    except ImportError:
        pass


class Config:
    # Flask
    FLASK_SECRET_KEY = os.getenv("FLASK_SECRET_KEY", "irrigation-planner-change-in-production")
    DEBUG = os.getenv("FLASK_DEBUG", "False").lower() == "true"
    PORT = int(os.getenv("FLASK_PORT", "5001"))

    # Storage
    DATA_DIR = os.getenv("DATA_DIR", "data" if os.path.exists("data") else ".")
    PLANNER_DB = os.getenv("PLANNER_DB", os.path.join(DATA_DIR, "irrigation_planner.db"))

    # Weather (Open-Meteo, no API key required)
    OPEN_METEO_URL = os.getenv("OPEN_METEO_URL", "https://api.open-meteo.com/v1/forecast")
    WEATHER_TIMEOUT = float(os.getenv("WEATHER_TIMEOUT", "5"))
    WEATHER_FORECAST_DAYS = int(os.getenv("WEATHER_FORECAST_DAYS", "14"))
    WEATHER_TIMEZONE = os.getenv("WEATHER_TIMEZONE", "America/Los_Angeles")

    # Used when the browser cannot supply a location
    DEFAULT_LATITUDE = float(os.getenv("DEFAULT_LATITUDE", "34.0522"))
    DEFAULT_LONGITUDE = float(os.getenv("DEFAULT_LONGITUDE", "-118.2437"))

    # Reference ET used while live weather data is unavailable (mm/day)
    DEFAULT_ET0_MM = float(os.getenv("DEFAULT_ET0_MM", "5.0"))

    # Observability
    SENTRY_DSN = os.getenv("SENTRY_DSN")
    LOG_FORMAT = os.getenv("LOG_FORMAT", "text")  # "text" or "json"
    LOG_DIR = os.getenv("LOG_DIR", "logs")
