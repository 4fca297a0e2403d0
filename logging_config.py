"""
Logging setup for the irrigation planner.

Imported once by app.py. Module loggers (logging.getLogger(__name__)) feed
the root handlers below:

    console          INFO and up
    planner.log      DEBUG and up, rotated at 5MB x 5
    errors.log       ERROR only (weather outages, bad reference rows, 500s)

Completed calculations are additionally written by log_calculation() to
calculations.log, one record per runtime, so a controller setting can be
traced back to the ET0, Kc and efficiency that produced it.
"""

import json
import logging
import os
from logging.handlers import RotatingFileHandler

from config import Config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

CALCULATION_LOGGER = 'irrigation_planner.calculations'


def _log_dir():
    path = Config.LOG_DIR
    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        return '.'
    return path


class JsonFormatter(logging.Formatter):
    """Single-line JSON records. A ``calculation`` extra is embedded as-is."""

    def format(self, record):
        log_entry = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        calculation = getattr(record, 'calculation', None)
        if calculation is not None:
            log_entry["calculation"] = calculation
        else:
            log_entry["location"] = f"{record.filename}:{record.lineno}"
        if record.exc_info and record.exc_info[0] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def _rotating(filename, level, max_mb, backups):
    try:
        handler = RotatingFileHandler(
            os.path.join(LOG_DIR, filename),
            maxBytes=max_mb * 1024 * 1024,
            backupCount=backups,
        )
    except OSError:
        return None
    handler.setLevel(level)
    return handler


LOG_DIR = _log_dir()
use_json = Config.LOG_FORMAT.lower() == 'json'
formatter = JsonFormatter() if use_json else logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

console_handler = logging.StreamHandler()
console_handler.setLevel(logging.INFO)

root_handlers = [
    console_handler,
    _rotating('planner.log', logging.DEBUG, 5, 5),
    _rotating('errors.log', logging.ERROR, 2, 3),
]

root_logger = logging.getLogger()
root_logger.setLevel(logging.DEBUG)
for handler in root_handlers:
    if handler:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

# The calculation trail is always JSON and stays out of the console.
calc_logger = logging.getLogger(CALCULATION_LOGGER)
calc_logger.setLevel(logging.INFO)
calc_logger.propagate = False
calc_handler = _rotating('calculations.log', logging.INFO, 5, 10)
if calc_handler:
    calc_handler.setFormatter(JsonFormatter())
    calc_logger.addHandler(calc_handler)

logger = logging.getLogger('irrigation_planner')

logging.getLogger('urllib3').setLevel(logging.WARNING)
logging.getLogger('werkzeug').setLevel(logging.WARNING)


def calculation_record(inputs, result, user_id=None):
    """Flatten one calculator run into the fields kept in calculations.log."""
    return {
        'user_id': user_id,
        'crop': inputs.crop,
        'system_type': inputs.system_type,
        'et_source': inputs.et_source,
        'area': inputs.area,
        'area_unit': inputs.area_unit,
        'zone_flow_gpm': inputs.zone_flow_gpm,
        'et0_mm': result.et0,
        'kc': result.kc,
        'efficiency_pct': result.efficiency,
        'gross_gallons': result.daily_water_need,
        'runtime_hours_exact': result.runtime_hours_exact,
        'defaults_applied': list(result.defaults_applied),
    }


def log_calculation(inputs, result, user_id=None):
    record = calculation_record(inputs, result, user_id)
    calc_logger.info(
        f"{record['crop']} on {record['system_type']}: {result.runtime_hours}h {result.runtime_minutes}m/day",
        extra={'calculation': record},
    )
    if record['defaults_applied']:
        logger.info(f"Calculation for {record['crop']} used defaults: {'; '.join(record['defaults_applied'])}")
    return record
