"""
Crop reference table.

Crop coefficient (Kc) data per crop and growth stage, following the FAO-56
single crop coefficient approach. Perennial crops may also carry a monthly
Kc table and seasonal watering cycles.

Rows from reference_data.py are validated once per process; a malformed row
stops the load instead of leaking missing values into the runtime arithmetic.
"""

import logging
from datetime import date
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from reference_data import CROP_ROWS

logger = logging.getLogger(__name__)


class ReferenceDataError(ValueError):
    """Raised when a reference dataset row fails validation."""
    pass


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

class GrowthStage(BaseModel):
    """One phase of a crop's growth cycle."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    name: str = Field(..., min_length=1)
    kc: float = Field(..., ge=0)
    duration: int = Field(..., gt=0, description="Stage length in days")
    description: str = ""


class MonthlyCoefficient(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')

    month: int = Field(..., ge=1, le=12)
    kc: float = Field(..., ge=0)


class WateringCycle(BaseModel):
    """Seasonal Kc variant of a perennial crop. Month ranges may wrap the year end."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    name: str
    kc: float = Field(..., ge=0)
    start_month: int = Field(..., ge=1, le=12)
    end_month: int = Field(..., ge=1, le=12)

    def covers(self, month: int) -> bool:
        if self.start_month <= self.end_month:
            return self.start_month <= month <= self.end_month
        return month >= self.start_month or month <= self.end_month


class KcScheduleEntry(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')

    start_date: date
    end_date: date
    kc: float = Field(..., ge=0)

    @model_validator(mode='after')
    def _check_range(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date precedes start_date")
        return self


class Crop(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    category: str
    scientific_name: Optional[str] = None
    stages: Tuple[GrowthStage, ...] = Field(..., min_length=1)
    monthly_kc: Optional[Tuple[MonthlyCoefficient, ...]] = None
    watering_cycles: Optional[Tuple[WateringCycle, ...]] = None
    kc_schedule: Optional[Tuple[KcScheduleEntry, ...]] = None
    is_perennial: bool = False

    @field_validator('stages')
    @classmethod
    def _unique_stage_names(cls, stages):
        seen = set()
        for stage in stages:
            key = stage.name.lower()
            if key in seen:
                raise ValueError(f"duplicate stage '{stage.name}'")
            seen.add(key)
        return stages

    @field_validator('monthly_kc')
    @classmethod
    def _unique_months(cls, monthly):
        if monthly:
            months = [m.month for m in monthly]
            if len(months) != len(set(months)):
                raise ValueError("duplicate month in monthly_kc")
        return monthly

    def stage_named(self, name: Optional[str]) -> Optional[GrowthStage]:
        """Case-insensitive stage lookup."""
        if not name:
            return None
        wanted = name.strip().lower()
        for stage in self.stages:
            if stage.name.lower() == wanted:
                return stage
        return None

    def monthly_kc_for(self, month: Optional[int]) -> Optional[float]:
        if not self.monthly_kc or month is None:
            return None
        for entry in self.monthly_kc:
            if entry.month == month:
                return entry.kc
        return None

    def watering_cycle_for(self, month: int) -> Optional[WateringCycle]:
        for cycle in self.watering_cycles or ():
            if cycle.covers(month):
                return cycle
        return None

    def scheduled_kc_for(self, day: date) -> Optional[float]:
        for entry in self.kc_schedule or ():
            if entry.start_date <= day <= entry.end_date:
                return entry.kc
        return None

    @property
    def total_cycle_days(self) -> int:
        return sum(stage.duration for stage in self.stages)

    def stage_for_day(self, day: int) -> Optional[GrowthStage]:
        """Stage covering *day* (0-based) of the growth cycle, or None past the end."""
        if day < 0:
            return None
        elapsed = 0
        for stage in self.stages:
            elapsed += stage.duration
            if day < elapsed:
                return stage
        return None

    def kc_range(self) -> Tuple[float, float]:
        """(min, max) Kc over the monthly table when present, else over the stages."""
        values = [m.kc for m in self.monthly_kc] if self.monthly_kc else [s.kc for s in self.stages]
        return min(values), max(values)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def load_crop_table(rows) -> List[Crop]:
    """Validate raw crop rows. Raises ReferenceDataError on the first bad row."""
    crops = []
    seen_ids = set()
    for index, row in enumerate(rows):
        row_id = row.get('id', f'#{index}') if isinstance(row, dict) else f'#{index}'
        try:
            crop = Crop.model_validate(row)
        except ValidationError as e:
            logger.error(f"Rejected crop row {row_id}: {e}")
            raise ReferenceDataError(f"Invalid crop row '{row_id}': {e}") from e
        if crop.id in seen_ids:
            logger.error(f"Rejected crop row {row_id}: duplicate id")
            raise ReferenceDataError(f"Duplicate crop id '{crop.id}'")
        seen_ids.add(crop.id)
        crops.append(crop)
    return crops


@lru_cache(maxsize=1)
def _builtin_table() -> Tuple[Crop, ...]:
    crops = tuple(load_crop_table(CROP_ROWS))
    logger.info(f"Loaded {len(crops)} crops")
    return crops


def get_crop_table() -> List[Crop]:
    """The built-in crop table, validated on first use."""
    return list(_builtin_table())


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def get_crop_by_id(crop_id, table=None) -> Optional[Crop]:
    for crop in table if table is not None else _builtin_table():
        if crop.id == crop_id:
            return crop
    return None


def find_crop(name_or_id, table=None) -> Optional[Crop]:
    """Match on exact id first, then case-insensitively on name."""
    if not name_or_id:
        return None
    crops = table if table is not None else _builtin_table()
    crop = get_crop_by_id(name_or_id, crops)
    if crop:
        return crop
    wanted = name_or_id.strip().lower()
    for crop in crops:
        if crop.name.lower() == wanted:
            return crop
    return None


def search_crops(query, table=None) -> List[Crop]:
    crops = table if table is not None else _builtin_table()
    needle = (query or '').strip().lower()
    if not needle:
        return list(crops)
    return [c for c in crops if needle in c.name.lower() or needle in c.category.lower()]


def get_crops_by_category(table=None) -> Dict[str, List[Crop]]:
    grouped = {}
    for crop in table if table is not None else _builtin_table():
        grouped.setdefault(crop.category, []).append(crop)
    return grouped
