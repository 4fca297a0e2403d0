"""
Tests for the irrigation runtime calculator: arithmetic, defaults,
minute carry, formula trace and input validation.
"""

import math
import pytest

from runtime_calculator import (
    CalculatorInputs, RuntimeResult, InputValidationError, Ok, Err,
    calculate_runtime, controller_template, resolve_efficiency,
    validate_inputs, can_calculate, try_calculate, IRRIGATION_SYSTEMS,
)
from resolution import Resolved, Defaulted


def _with(inputs, **changes):
    return inputs.model_copy(update=changes)


# ---------------------------------------------------------------------------
# Efficiency table
# ---------------------------------------------------------------------------

class TestEfficiency:
    @pytest.mark.parametrize("system,expected", [
        ('drip', 0.90), ('micro', 0.85), ('pivot', 0.80), ('sprinkler', 0.75), ('flood', 0.60),
    ])
    def test_known_systems(self, system, expected):
        result = resolve_efficiency(system)
        assert isinstance(result, Resolved)
        assert result.value == expected

    @pytest.mark.parametrize("system", ['unknown', '', None])
    def test_fallback(self, system):
        result = resolve_efficiency(system)
        assert isinstance(result, Defaulted)
        assert result.value == 0.75

    def test_table_has_display_names(self):
        assert IRRIGATION_SYSTEMS['pivot']['name'] == 'Center Pivot'


# ---------------------------------------------------------------------------
# End-to-end scenarios
# ---------------------------------------------------------------------------

class TestScenarioA:
    def test_values(self, scenario_a, crop_table):
        r = calculate_runtime(scenario_a, None, crop_table)
        assert r.etc == pytest.approx(5.08, abs=1e-3)
        assert r.etc_inches == pytest.approx(0.2, abs=1e-9)
        assert r.area_sqft == 43560
        assert r.net_water_need == pytest.approx(5427.58, abs=0.01)
        assert r.daily_water_need == pytest.approx(6030.64, abs=0.01)
        assert r.runtime_hours_exact == pytest.approx(10.051, abs=1e-3)
        assert r.runtime_hours == 10
        assert r.runtime_minutes == 3
        assert r.weekly_hours == pytest.approx(70.36, abs=0.01)
        assert r.efficiency == 90
        assert r.gallons_per_hour == 600
        assert r.defaults_applied == []

    def test_result_is_immutable(self, scenario_a, crop_table):
        r = calculate_runtime(scenario_a, None, crop_table)
        with pytest.raises(Exception):
            r.runtime_hours = 99

    def test_live_et0_ignored_for_manual_source(self, scenario_a, crop_table):
        r1 = calculate_runtime(scenario_a, None, crop_table)
        r2 = calculate_runtime(scenario_a, 9.9, crop_table)
        assert r1 == r2


class TestScenarioB:
    def test_unknown_system_uses_fallback(self, scenario_a, crop_table):
        a = calculate_runtime(scenario_a, None, crop_table)
        b = calculate_runtime(_with(scenario_a, system_type='unknown'), None, crop_table)
        assert b.efficiency == 75
        assert b.daily_water_need > a.daily_water_need
        assert any('unknown system type' in d for d in b.defaults_applied)


class TestScenarioC:
    def test_explicit_kc_wins(self, scenario_a, crop_table):
        inputs = _with(scenario_a, crop='Walnuts', kc_value=0.5, growth_stage='Mid-season')
        r = calculate_runtime(inputs, None, crop_table)
        assert r.kc == 0.5

    def test_stage_kc_used_without_override(self, scenario_a, crop_table):
        inputs = _with(scenario_a, crop='Walnuts', kc_value=None, growth_stage='Mid-season')
        r = calculate_runtime(inputs, None, crop_table)
        assert r.kc == 1.15
        assert r.etc == pytest.approx(5.08 * 1.15, abs=1e-3)


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

class TestProperties:
    def test_area_normalization(self, scenario_a, crop_table):
        acres = calculate_runtime(scenario_a, None, crop_table)
        sqft = calculate_runtime(_with(scenario_a, area=43560, area_unit='sqft'), None, crop_table)
        assert acres.model_dump() == sqft.model_dump()

    def test_efficiency_monotonic(self, scenario_a, crop_table):
        results = [
            calculate_runtime(_with(scenario_a, system_type=s), None, crop_table)
            for s in ('drip', 'micro', 'pivot', 'sprinkler', 'flood')
        ]
        for better, worse in zip(results, results[1:]):
            assert better.daily_water_need < worse.daily_water_need
            assert better.runtime_hours_exact < worse.runtime_hours_exact
        assert results[0].net_water_need == pytest.approx(results[-1].net_water_need)

    def test_formula_matches_fields(self, scenario_a, crop_table):
        r = calculate_runtime(scenario_a, None, crop_table)
        assert '43,560 sq ft' in r.formula
        assert f"{r.etc_inches:.3f} in/day" in r.formula
        assert '× 0.623)' in r.formula
        assert '(0.9 × 10 GPM × 60)' in r.formula
        assert f"= {r.daily_water_need:.0f} gallons/day" in r.formula
        assert f"÷ {r.gallons_per_hour:.0f} gallons/hour" in r.formula
        assert f"= {r.runtime_hours_exact:.2f} hours/day" in r.formula
        assert r.formula.splitlines()[0].startswith('Runtime = ')

    @pytest.mark.parametrize("changes,area_text,divisor_text", [
        ({'zone_flow_gpm': 12.3456789}, '43,560 sq ft', '(0.9 × 12.3456789 GPM × 60)'),
        ({'area': 1234.567, 'area_unit': 'sqft'}, '1,234.567 sq ft', '(0.9 × 10 GPM × 60)'),
        ({'area': 0.25, 'system_type': 'micro', 'zone_flow_gpm': 7.5},
         '10,890 sq ft', '(0.85 × 7.5 GPM × 60)'),
    ])
    def test_formula_keeps_full_precision(self, scenario_a, crop_table, changes, area_text, divisor_text):
        r = calculate_runtime(_with(scenario_a, **changes), None, crop_table)
        assert f"({area_text} × " in r.formula
        assert f"÷ {divisor_text}" in r.formula
        assert f"÷ {r.gallons_per_hour:.0f} gallons/hour" in r.formula

    def test_minutes_carry_into_hour(self, scenario_a, crop_table):
        # 12,980 sqft -> 2.995 h; the remainder rounds to 60 minutes
        r = calculate_runtime(_with(scenario_a, area=12980, area_unit='sqft'), None, crop_table)
        assert r.runtime_hours_exact == pytest.approx(2.995, abs=1e-3)
        assert r.runtime_hours == 3
        assert r.runtime_minutes == 0

    @pytest.mark.parametrize("area", [0.01, 0.5, 1, 2.3, 7.77, 40])
    def test_minutes_in_range(self, scenario_a, crop_table, area):
        r = calculate_runtime(_with(scenario_a, area=area), None, crop_table)
        assert 0 <= r.runtime_minutes <= 59

    def test_weekly_uses_unrounded_hours(self, scenario_a, crop_table):
        r = calculate_runtime(scenario_a, None, crop_table)
        assert r.weekly_hours == r.runtime_hours_exact * 7
        displayed = r.runtime_hours + r.runtime_minutes / 60
        assert abs(r.weekly_hours - displayed * 7) <= 7 * 0.5 / 60


# ---------------------------------------------------------------------------
# Defaults and degenerate inputs
# ---------------------------------------------------------------------------

class TestDegradation:
    def test_et0_defaults_without_live_value(self, scenario_a, crop_table):
        inputs = _with(scenario_a, et_source='weather-station', manual_et=None)
        r = calculate_runtime(inputs, None, crop_table)
        assert r.et0 == 5.0
        assert any('live ET0 unavailable' in d for d in r.defaults_applied)

    def test_live_value_used(self, scenario_a, crop_table):
        inputs = _with(scenario_a, et_source='cimis', manual_et=None)
        r = calculate_runtime(inputs, 6.0, crop_table)
        assert r.et0 == 6.0
        assert r.defaults_applied == []

    def test_kc_defaults_for_unknown_crop(self, scenario_a, crop_table):
        inputs = _with(scenario_a, crop='Dragonfruit', kc_value=None)
        r = calculate_runtime(inputs, None, crop_table)
        assert r.kc == 1.0
        assert r.defaults_applied

    def test_zero_flow_does_not_raise(self, scenario_a, crop_table):
        r = calculate_runtime(_with(scenario_a, zone_flow_gpm=0), None, crop_table)
        assert math.isinf(r.runtime_hours_exact)
        assert math.isnan(r.runtime_hours)

    def test_missing_manual_et_propagates_nan(self, scenario_a, crop_table):
        r = calculate_runtime(_with(scenario_a, manual_et=None), None, crop_table)
        assert math.isnan(r.etc)
        assert math.isnan(r.daily_water_need)
        assert math.isnan(r.runtime_minutes)


# ---------------------------------------------------------------------------
# Inputs / serialisation
# ---------------------------------------------------------------------------

class TestInputsAndSerialisation:
    def test_camel_case_inputs(self):
        inputs = CalculatorInputs.model_validate({
            'crop': 'Almonds', 'kcValue': 1.0, 'etSource': 'manual', 'manualET': 0.2,
            'zoneFlowGPM': 10, 'area': 1, 'areaUnit': 'acres', 'systemType': 'drip',
        })
        assert inputs.zone_flow_gpm == 10
        assert inputs.manual_et == 0.2
        assert inputs.to_dict()['zoneFlowGPM'] == 10

    def test_invalid_area_unit_rejected(self):
        with pytest.raises(ValueError):
            CalculatorInputs.model_validate({'areaUnit': 'hectares'})

    def test_result_to_dict_camel_case(self, scenario_a, crop_table):
        data = calculate_runtime(scenario_a, None, crop_table).to_dict()
        for key in ('etc', 'dailyWaterNeed', 'runtimeHours', 'runtimeMinutes',
                    'weeklyHours', 'efficiency', 'formula', 'runtimeHoursExact'):
            assert key in data

    def test_result_round_trips(self, scenario_a, crop_table):
        r = calculate_runtime(scenario_a, None, crop_table)
        assert RuntimeResult.model_validate(r.to_dict()) == r

    def test_controller_template(self, scenario_a, crop_table):
        r = calculate_runtime(scenario_a, None, crop_table)
        template = controller_template(scenario_a, r)
        assert template['block_id'] == 'block_001'
        assert template['efficiency'] == pytest.approx(0.9)
        assert template['daily_runtime_hours'] == pytest.approx(10 + 3 / 60)
        assert template['update_frequency'] == 'daily'
        assert template['flow_rate_gpm'] == 10


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class TestValidation:
    def test_valid(self, scenario_a):
        assert validate_inputs(scenario_a) == []
        assert can_calculate(scenario_a)

    @pytest.mark.parametrize("changes,fragment", [
        ({'crop': ''}, 'Crop'),
        ({'zone_flow_gpm': 0}, 'flow'),
        ({'zone_flow_gpm': -5}, 'flow'),
        ({'area': 0}, 'Area'),
        ({'system_type': ''}, 'System type'),
        ({'manual_et': None}, 'Manual ET'),
        ({'manual_et': math.nan}, 'Manual ET'),
        ({'kc_value': -0.2}, 'Kc'),
    ])
    def test_precondition_failures(self, scenario_a, changes, fragment):
        errors = validate_inputs(_with(scenario_a, **changes))
        assert any(fragment in e for e in errors)
        assert not can_calculate(_with(scenario_a, **changes))

    def test_unknown_system_only_fails_when_strict(self, scenario_a):
        inputs = _with(scenario_a, system_type='subsurface')
        assert validate_inputs(inputs) == []
        assert validate_inputs(inputs, strict_system=True)

    def test_try_calculate_ok(self, scenario_a, crop_table):
        outcome = try_calculate(scenario_a, None, crop_table)
        assert isinstance(outcome, Ok)
        assert outcome.is_ok
        assert outcome.value.runtime_hours == 10

    def test_try_calculate_err(self, scenario_a, crop_table):
        outcome = try_calculate(_with(scenario_a, zone_flow_gpm=0, area=0), None, crop_table)
        assert isinstance(outcome, Err)
        assert not outcome.is_ok
        assert isinstance(outcome.error, InputValidationError)
        assert len(outcome.error.errors) == 2

    def test_zero_kc_allowed(self, scenario_a):
        assert validate_inputs(_with(scenario_a, kc_value=0.0)) == []

    def test_negative_kc_rejected_before_arithmetic(self, scenario_a, crop_table):
        outcome = try_calculate(_with(scenario_a, kc_value=-1.0), None, crop_table)
        assert not outcome.is_ok
        assert outcome.error.errors == ["Crop coefficient (Kc) cannot be negative"]
