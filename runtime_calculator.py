"""
Irrigation runtime calculator.

Turns reference ET, a crop coefficient, the irrigated area, zone flow rate
and system efficiency into a daily and weekly runtime:

    ETc (mm/day)      = ET0 x Kc
    Net gallons/day   = area (sqft) x ETc (in/day) x 0.623
    Gross gallons/day = net / efficiency
    Runtime (h/day)   = gross / (GPM x 60)

calculate_runtime() never raises. Missing data degrades to documented
defaults (ET0 5 mm/day, Kc 1.0, efficiency 0.75) which are listed in
RuntimeResult.defaults_applied. Use validate_inputs() or try_calculate()
to gate a calculation on complete inputs.

No database tables required -- pure calculation logic.
"""

import math
import logging
from dataclasses import dataclass
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from et_resolver import resolve_et0
from kc_resolver import resolve_kc
from resolution import Defaulted, Missing, Resolved, Resolution, describe
from units import (
    DAYS_PER_WEEK, GALLONS_PER_SQFT_INCH, MINUTES_PER_HOUR, Millimeters,
    area_to_sqft, depth_to_gallons, is_finite_number,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# System Efficiency Table
# ---------------------------------------------------------------------------

IRRIGATION_SYSTEMS = {
    'drip': {'name': 'Drip Irrigation', 'efficiency': 0.90,
             'description': 'High efficiency, precise water application'},
    'micro': {'name': 'Micro Sprinklers', 'efficiency': 0.85,
              'description': 'Medium efficiency, good coverage'},
    'pivot': {'name': 'Center Pivot', 'efficiency': 0.80,
              'description': 'Large area coverage, moderate efficiency'},
    'sprinkler': {'name': 'Overhead Sprinklers', 'efficiency': 0.75,
                  'description': 'Traditional system, lower efficiency'},
    'flood': {'name': 'Flood/Furrow', 'efficiency': 0.60,
              'description': 'Low efficiency, simple system'},
}

DEFAULT_EFFICIENCY = 0.75

RUNTIME_FORMULA = "Area × ETc × 0.623 ÷ (Efficiency × Flow × 60)"


def resolve_efficiency(system_type: Optional[str]) -> Resolution:
    system = IRRIGATION_SYSTEMS.get(system_type or '')
    if system:
        return Resolved(system['efficiency'], system_type)
    return Defaulted(DEFAULT_EFFICIENCY, f"unknown system type '{system_type or ''}'")


# ---------------------------------------------------------------------------
# Inputs / Result
# ---------------------------------------------------------------------------

class CalculatorInputs(BaseModel):
    """
    Calculator form state. Accepts the dashboard's camelCase keys or the
    snake_case field names. Completeness is checked by validate_inputs().
    """
    model_config = ConfigDict(populate_by_name=True)

    crop: str = ""
    kc_value: Optional[float] = Field(None, alias='kcValue')
    growth_stage: Optional[str] = Field(None, alias='growthStage')
    selected_month: Optional[int] = Field(None, alias='selectedMonth')
    et_source: Literal['weather-station', 'cimis', 'manual'] = Field('weather-station', alias='etSource')
    manual_et: Optional[float] = Field(None, alias='manualET', description="inches/day")
    zone_flow_gpm: float = Field(0.0, alias='zoneFlowGPM')
    area: float = 0.0
    area_unit: Literal['acres', 'sqft'] = Field('acres', alias='areaUnit')
    system_type: str = Field("", alias='systemType')

    def to_dict(self):
        return self.model_dump(by_alias=True)


class RuntimeResult(BaseModel):
    """
    Output of one calculation.

    daily_water_need is the GROSS volume (after dividing by efficiency);
    net_water_need is the crop's requirement before losses. efficiency is a
    percentage. runtime_hours/runtime_minutes are the display pair and
    runtime_hours_exact the unrounded value weekly_hours is derived from.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    etc: float
    daily_water_need: float
    runtime_hours: Union[int, float]
    runtime_minutes: Union[int, float]
    weekly_hours: float
    efficiency: float
    formula: str

    et0: float
    kc: float
    area_sqft: float
    etc_inches: float
    net_water_need: float
    gallons_per_hour: float
    runtime_hours_exact: float
    defaults_applied: List[str] = []

    def to_dict(self):
        return self.model_dump(by_alias=True)


# ---------------------------------------------------------------------------
# Calculation
# ---------------------------------------------------------------------------

def _divide(numerator, denominator):
    """IEEE-style division: x/0 gives +/-inf, 0/0 and NaN operands give NaN."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1, denominator)
    return numerator / denominator


def _split_hours(hours_exact):
    """Whole hours plus minutes rounded half-up, carrying 60 minutes into the hour."""
    if not math.isfinite(hours_exact):
        return math.nan, math.nan
    hours = math.floor(hours_exact)
    minutes = math.floor((hours_exact - hours) * MINUTES_PER_HOUR + 0.5)
    if minutes >= MINUTES_PER_HOUR:
        hours += 1
        minutes = 0
    return int(hours), int(minutes)


def _fmt_number(value, grouping=False):
    """Shortest exact rendering of *value*; whole numbers drop the trailing .0."""
    if math.isfinite(value) and value == int(value):
        value = int(value)
    return f"{value:,}" if grouping else f"{value}"


def build_formula(area_sqft, etc_inches, efficiency, zone_flow_gpm, gross_gallons,
                  gallons_per_hour, hours_exact):
    return (
        "Runtime = (Area × ETc × 0.623) ÷ (System Efficiency × Flow Rate × 60)\n"
        f"= ({_fmt_number(area_sqft, grouping=True)} sq ft × {etc_inches:.3f} in/day × {GALLONS_PER_SQFT_INCH}) "
        f"÷ ({_fmt_number(efficiency)} × {_fmt_number(zone_flow_gpm)} GPM × {MINUTES_PER_HOUR})\n"
        f"= {gross_gallons:.0f} gallons/day ÷ {gallons_per_hour:.0f} gallons/hour\n"
        f"= {hours_exact:.2f} hours/day"
    )


def calculate_runtime(inputs: CalculatorInputs, live_et0_mm: Optional[float],
                      crop_table) -> RuntimeResult:
    """
    Compute irrigation runtime for one zone.

    Args:
        inputs: calculator inputs.
        live_et0_mm: current ET0 from the weather service in mm/day, or None.
        crop_table: list of Crop records used for Kc lookup.

    Returns:
        RuntimeResult. A manual ET source without a value, or a zero flow
        rate, yields NaN/inf in the affected fields rather than an exception.
    """
    defaults = []

    et0_res = resolve_et0(inputs.et_source, inputs.manual_et, live_et0_mm)
    if isinstance(et0_res, Missing):
        et0 = Millimeters(math.nan)
    else:
        et0 = et0_res.value
        if isinstance(et0_res, Defaulted):
            defaults.append(et0_res.reason)

    kc_res = resolve_kc(inputs.crop, crop_table, inputs.kc_value,
                        inputs.growth_stage, inputs.selected_month)
    if isinstance(kc_res, Defaulted):
        defaults.append(kc_res.reason)
    kc = kc_res.value

    eff_res = resolve_efficiency(inputs.system_type)
    if isinstance(eff_res, Defaulted):
        defaults.append(eff_res.reason)
    efficiency = eff_res.value

    etc_mm = et0.scaled(kc)
    area_sqft = area_to_sqft(inputs.area, inputs.area_unit)
    etc_inches = etc_mm.to_inches()
    net_gallons = depth_to_gallons(etc_inches, area_sqft)
    gross_gallons = net_gallons / efficiency
    gallons_per_hour = inputs.zone_flow_gpm * MINUTES_PER_HOUR
    hours_exact = _divide(gross_gallons, gallons_per_hour)
    runtime_hours, runtime_minutes = _split_hours(hours_exact)

    formula = build_formula(area_sqft, etc_inches.value, efficiency, inputs.zone_flow_gpm,
                            gross_gallons, gallons_per_hour, hours_exact)

    logger.debug(f"Runtime for {inputs.crop or 'unspecified crop'}: ET0 {describe(et0_res)}, "
                 f"Kc {describe(kc_res)}, efficiency {describe(eff_res)} -> {hours_exact} h/day")

    return RuntimeResult(
        etc=etc_mm.value,
        daily_water_need=gross_gallons,
        runtime_hours=runtime_hours,
        runtime_minutes=runtime_minutes,
        weekly_hours=hours_exact * DAYS_PER_WEEK,
        efficiency=round(efficiency * 100, 2),
        formula=formula,
        et0=et0.value,
        kc=kc,
        area_sqft=area_sqft,
        etc_inches=etc_inches.value,
        net_water_need=net_gallons,
        gallons_per_hour=gallons_per_hour,
        runtime_hours_exact=hours_exact,
        defaults_applied=defaults,
    )


def controller_template(inputs: CalculatorInputs, result: RuntimeResult, block_id='block_001'):
    """Settings block for pasting into an irrigation controller."""
    return {
        'block_id': block_id,
        'crop': inputs.crop,
        'area': inputs.area,
        'area_unit': inputs.area_unit,
        'system_type': inputs.system_type,
        'flow_rate_gpm': inputs.zone_flow_gpm,
        'efficiency': result.efficiency / 100,
        'runtime_formula': RUNTIME_FORMULA,
        'daily_runtime_hours': result.runtime_hours + result.runtime_minutes / MINUTES_PER_HOUR,
        'update_frequency': 'daily',
    }


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class InputValidationError(ValueError):
    """Calculator inputs are incomplete or out of range."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__('; '.join(self.errors))


@dataclass(frozen=True)
class Ok:
    value: Any

    @property
    def is_ok(self):
        return True


@dataclass(frozen=True)
class Err:
    error: InputValidationError

    @property
    def is_ok(self):
        return False


def validate_inputs(inputs: CalculatorInputs, strict_system=False) -> List[str]:
    """Return a list of problems that make *inputs* unfit for calculation."""
    errors = []
    if not (inputs.crop or '').strip():
        errors.append("Crop is required")
    if inputs.kc_value is not None and is_finite_number(inputs.kc_value) and inputs.kc_value < 0:
        errors.append("Crop coefficient (Kc) cannot be negative")
    if not is_finite_number(inputs.zone_flow_gpm) or inputs.zone_flow_gpm <= 0:
        errors.append("Zone flow rate must be greater than 0 GPM")
    if not is_finite_number(inputs.area) or inputs.area <= 0:
        errors.append("Area must be greater than 0")
    if not inputs.system_type:
        errors.append("System type is required")
    elif strict_system and inputs.system_type not in IRRIGATION_SYSTEMS:
        errors.append(f"Unknown system type '{inputs.system_type}'. "
                      f"Valid: {', '.join(IRRIGATION_SYSTEMS)}")
    if inputs.et_source == 'manual':
        if isinstance(resolve_et0('manual', inputs.manual_et), Missing):
            errors.append("Manual ET value (inches/day) is required when ET source is manual")
    return errors


def can_calculate(inputs: CalculatorInputs) -> bool:
    return not validate_inputs(inputs)


def try_calculate(inputs: CalculatorInputs, live_et0_mm: Optional[float], crop_table,
                  strict_system=False) -> Union[Ok, Err]:
    errors = validate_inputs(inputs, strict_system=strict_system)
    if errors:
        logger.info(f"Calculation rejected: {'; '.join(errors)}")
        return Err(InputValidationError(errors))
    return Ok(calculate_runtime(inputs, live_et0_mm, crop_table))
