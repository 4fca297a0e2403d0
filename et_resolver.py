"""
Reference evapotranspiration (ET0) resolution.

Live sources (weather station, CIMIS) already arrive in mm/day. Manual entry
is in inches/day and is converted once here.
"""

import logging
from typing import Optional

from config import Config
from resolution import Defaulted, Missing, Resolution, Resolved
from units import Inches, Millimeters, is_finite_number

logger = logging.getLogger(__name__)

ET_SOURCES = ('weather-station', 'cimis', 'manual')
LIVE_SOURCES = ('weather-station', 'cimis')


def default_et0() -> Millimeters:
    return Millimeters(Config.DEFAULT_ET0_MM)


def resolve_et0(et_source: str, manual_et: Optional[float] = None,
                live_et0_mm: Optional[float] = None) -> Resolution:
    """
    Resolve ET0 in millimetres/day.

    Args:
        et_source: 'weather-station', 'cimis' or 'manual'.
        manual_et: user-entered ET0 in inches/day (manual source only).
        live_et0_mm: ET0 from the weather collaborator, mm/day.

    Returns:
        Resolved or Defaulted wrapping Millimeters, or Missing when manual
        entry was chosen without a usable value.

    Raises:
        ValueError: unknown et_source.
    """
    if et_source == 'manual':
        if not is_finite_number(manual_et) or manual_et < 0:
            return Missing("manual ET source selected without a valid ET value")
        return Resolved(Inches(manual_et).to_millimeters(), 'manual entry')

    if et_source in LIVE_SOURCES:
        if is_finite_number(live_et0_mm) and live_et0_mm >= 0:
            return Resolved(Millimeters(live_et0_mm), et_source)
        et0 = default_et0()
        logger.info(f"No live ET0 from {et_source}, using {et0.value} mm/day")
        return Defaulted(et0, f"live ET0 unavailable, using {et0.value:g} mm/day")

    raise ValueError(f"Unknown ET source '{et_source}'. Valid: {', '.join(ET_SOURCES)}")
