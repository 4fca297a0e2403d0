"""
Crop coefficient (Kc) resolution.

Order: explicit Kc value, named growth stage, the crop's monthly Kc for the
selected month, then 1.0.
"""

import logging
from typing import Optional

from crop_database import find_crop
from resolution import Defaulted, Resolution, Resolved
from units import is_finite_number

logger = logging.getLogger(__name__)

DEFAULT_KC = 1.0


def resolve_kc(crop, crop_table, kc_value: Optional[float] = None,
               growth_stage: Optional[str] = None, month: Optional[int] = None) -> Resolution:
    """Resolve a scalar Kc for *crop* (id or name) from *crop_table*."""
    if is_finite_number(kc_value):
        return Resolved(float(kc_value), 'explicit Kc value')

    record = find_crop(crop, crop_table) if crop else None
    if record is None:
        logger.info(f"Crop '{crop}' not in reference table, Kc defaults to {DEFAULT_KC}")
        return Defaulted(DEFAULT_KC, f"crop '{crop}' not found")

    stage = record.stage_named(growth_stage)
    if stage is not None:
        return Resolved(stage.kc, f"{record.name} {stage.name} stage")

    monthly = record.monthly_kc_for(month)
    if monthly is not None:
        return Resolved(monthly, f"{record.name} month {month}")

    if growth_stage:
        reason = f"stage '{growth_stage}' not defined for {record.name}"
    else:
        reason = f"no Kc value or growth stage given for {record.name}"
    logger.info(f"{reason}, Kc defaults to {DEFAULT_KC}")
    return Defaulted(DEFAULT_KC, reason)
