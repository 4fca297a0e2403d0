"""
Soil-based irrigation adjustments.

Two independent heuristics live here and are deliberately not merged:

  * calculate_irrigation_adjustment() -- agronomic recommendation
    (frequency text, safe application rate, runoff risk), thresholds
    at 25 / 10 / 5 mm/h.
  * weekly_schedule() -- the dashboard's 7-day watering plan, which picks an
    interval of 1 / 2 / 3 / 5 days from thresholds at 20 / 10 / 5 mm/h.

Both work in millimetres; weekly_schedule converts ETc to inches for display.
"""

import logging
from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from units import Millimeters

logger = logging.getLogger(__name__)

# Maximum safe application rate regardless of soil (mm/hour)
MAX_APPLICATION_RATE = 25.0
# Fraction of infiltration rate that can be applied without ponding
APPLICATION_RATE_FRACTION = 0.8

WEEKDAYS = ('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun')


class SoilAdjustment(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    soil_id: str
    adjusted_etc: float
    irrigation_frequency: str
    application_rate: float
    runoff_risk: str

    def to_dict(self):
        return self.model_dump(by_alias=True)


def irrigation_frequency(infiltration_rate: float) -> str:
    if infiltration_rate > 25:
        return "Daily or every 2 days"
    if infiltration_rate > 10:
        return "Every 2-3 days"
    if infiltration_rate > 5:
        return "Every 3-5 days"
    return "Weekly or longer intervals"


def runoff_risk(infiltration_rate: float) -> str:
    if infiltration_rate > 10:
        return "low"
    if infiltration_rate > 5:
        return "medium"
    return "high"


def application_rate(infiltration_rate: float) -> float:
    return min(infiltration_rate * APPLICATION_RATE_FRACTION, MAX_APPLICATION_RATE)


def calculate_irrigation_adjustment(soil, base_etc_mm: float) -> SoilAdjustment:
    """
    Adjust a base ETc (mm/day) for soil type.

    Args:
        soil: SoilType record.
        base_etc_mm: crop ETc before soil adjustment, mm/day.
    """
    chars = soil.characteristics
    rate = chars.infiltration_rate
    adjusted = Millimeters(base_etc_mm).scaled(chars.irrigation_factor)
    return SoilAdjustment(
        soil_id=soil.id,
        adjusted_etc=adjusted.value,
        irrigation_frequency=irrigation_frequency(rate),
        application_rate=application_rate(rate),
        runoff_risk=runoff_risk(rate),
    )


# ---------------------------------------------------------------------------
# Dashboard weekly schedule
# ---------------------------------------------------------------------------

def schedule_interval_days(infiltration_rate: float) -> int:
    """Days between irrigations for the weekly plan view."""
    if infiltration_rate > 20:
        return 1
    if infiltration_rate > 10:
        return 2
    if infiltration_rate > 5:
        return 3
    return 5


def weekly_schedule(soil, etc_mm: float, runtime_minutes: float) -> List[dict]:
    """Seven entries Mon..Sun; irrigation days carry runtime and ETc in inches."""
    interval = schedule_interval_days(soil.characteristics.infiltration_rate)
    etc_inches = Millimeters(etc_mm).to_inches().value
    schedule = []
    for i, day in enumerate(WEEKDAYS):
        irrigate = i % interval == 0
        schedule.append({
            'day': day,
            'irrigate': irrigate,
            'runtime_minutes': runtime_minutes if irrigate else 0,
            'water_inches': etc_inches if irrigate else 0,
        })
    return schedule
