"""
Soil reference table: hydraulic characteristics used for irrigation
frequency, safe application rate and runoff risk.

Units: capacities in mm/m, field capacity and wilting point in % volume,
infiltration in mm/h, bulk density in g/cm3, organic matter in %.
"""

import logging
from functools import lru_cache
from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from crop_database import ReferenceDataError
from reference_data import SOIL_ROWS

logger = logging.getLogger(__name__)

SOIL_CATEGORIES = ('clay', 'loam', 'sand', 'silt', 'organic')


class SoilCharacteristics(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')

    water_holding_capacity: float = Field(..., ge=0)
    field_capacity: float = Field(..., ge=0)
    wilting_point: float = Field(..., ge=0)
    available_water_capacity: float = Field(..., ge=0)
    infiltration_rate: float = Field(..., ge=0, description="mm/hour")
    drainage_rate: Literal['poor', 'moderate', 'good', 'excessive']
    bulk_density: float = Field(..., gt=0)
    organic_matter: float = Field(..., ge=0)
    description: str = ""
    irrigation_factor: float = Field(..., gt=0, description="Multiplier on base ETc")

    @model_validator(mode='after')
    def _check_water_limits(self):
        if self.wilting_point >= self.field_capacity:
            raise ValueError("wilting_point must be below field_capacity")
        return self


class SoilType(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    category: Literal['clay', 'loam', 'sand', 'silt', 'organic']
    characteristics: SoilCharacteristics
    color: str = ""
    texture: str = ""
    common_crops: Tuple[str, ...] = ()


def load_soil_table(rows) -> List[SoilType]:
    """Validate raw soil rows. Raises ReferenceDataError on the first bad row."""
    soils = []
    seen_ids = set()
    for index, row in enumerate(rows):
        row_id = row.get('id', f'#{index}') if isinstance(row, dict) else f'#{index}'
        try:
            soil = SoilType.model_validate(row)
        except ValidationError as e:
            logger.error(f"Rejected soil row {row_id}: {e}")
            raise ReferenceDataError(f"Invalid soil row '{row_id}': {e}") from e
        if soil.id in seen_ids:
            logger.error(f"Rejected soil row {row_id}: duplicate id")
            raise ReferenceDataError(f"Duplicate soil id '{soil.id}'")
        seen_ids.add(soil.id)
        soils.append(soil)
    return soils


@lru_cache(maxsize=1)
def _builtin_table() -> Tuple[SoilType, ...]:
    soils = tuple(load_soil_table(SOIL_ROWS))
    logger.info(f"Loaded {len(soils)} soil types")
    return soils


def get_soil_table() -> List[SoilType]:
    return list(_builtin_table())


def get_soil_by_id(soil_id, table=None) -> Optional[SoilType]:
    for soil in table if table is not None else _builtin_table():
        if soil.id == soil_id:
            return soil
    return None


def get_soils_by_category(table=None) -> Dict[str, List[SoilType]]:
    grouped = {}
    for soil in table if table is not None else _builtin_table():
        grouped.setdefault(soil.category, []).append(soil)
    return grouped
