"""
Live reference evapotranspiration from the Open-Meteo forecast API.
No API key required. ET0 comes back as FAO-56 Penman-Monteith, mm/day.
"""
import logging
import math
from typing import Any, Dict, Optional

import requests

from config import Config

logger = logging.getLogger(__name__)

DAILY_FIELDS = [
    'et0_fao_evapotranspiration',
    'temperature_2m_max',
    'temperature_2m_min',
    'precipitation_sum',
]


def get_et0_forecast(
    latitude: float = None,
    longitude: float = None,
    days: int = None
) -> Optional[Dict[str, Any]]:
    """
    Get the daily ET0 forecast for a location.

    Args:
        latitude, longitude: Coordinates. Default to Config.DEFAULT_LATITUDE/LONGITUDE.
        days: Forecast length. Defaults to Config.WEATHER_FORECAST_DAYS.

    Returns:
        Dict of parallel daily lists (dates, et0_mm, temp_max_f, temp_min_f,
        precipitation_mm), or None if the forecast is unavailable.
    """
    params = {
        'latitude': Config.DEFAULT_LATITUDE if latitude is None else latitude,
        'longitude': Config.DEFAULT_LONGITUDE if longitude is None else longitude,
        'daily': ','.join(DAILY_FIELDS),
        'temperature_unit': 'fahrenheit',
        'precipitation_unit': 'mm',
        'timezone': Config.WEATHER_TIMEZONE,
        'forecast_days': days or Config.WEATHER_FORECAST_DAYS,
    }

    try:
        response = requests.get(Config.OPEN_METEO_URL, params=params, timeout=Config.WEATHER_TIMEOUT)
        response.raise_for_status()
        return _parse_daily(response.json())

    except requests.RequestException as e:
        logger.error(f"Open-Meteo request failed: {e}")
        return None
    except (KeyError, TypeError, ValueError) as e:
        logger.error(f"Open-Meteo response parsing failed: {e}")
        return None


def _parse_daily(data: Dict) -> Dict[str, Any]:
    daily = data['daily']
    return {
        'dates': list(daily['time']),
        'et0_mm': list(daily['et0_fao_evapotranspiration']),
        'temp_max_f': list(daily.get('temperature_2m_max', [])),
        'temp_min_f': list(daily.get('temperature_2m_min', [])),
        'precipitation_mm': list(daily.get('precipitation_sum', [])),
    }


def get_live_et0_mm(latitude: float = None, longitude: float = None) -> Optional[float]:
    """Today's ET0 in mm/day, or None."""
    forecast = get_et0_forecast(latitude, longitude)
    if not forecast or not forecast['et0_mm']:
        return None
    value = forecast['et0_mm'][0]
    if value is None or not math.isfinite(value):
        logger.warning("Open-Meteo returned no ET0 for today")
        return None
    return float(value)
