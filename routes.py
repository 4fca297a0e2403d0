"""
Irrigation Planner API Blueprint.

- Crop and soil reference data
- Irrigation systems
- Runtime calculator
- Live ET0 forecast
- Saved calculator profiles
"""

from flask import Blueprint, current_app, jsonify, request, session
import logging

logger = logging.getLogger(__name__)

planner_bp = Blueprint('planner_bp', __name__)


# ====================================================================
# Helpers
# ====================================================================

def _user_id():
    """Return the current user id, defaulting to 1 for demo mode."""
    return session.get('user_id', 1)


def _profile_store():
    return current_app.config['PROFILE_STORE']


def _crop_outbound(crop):
    record = crop.model_dump(mode='json')
    record['total_cycle_days'] = crop.total_cycle_days
    record['kc_range'] = list(crop.kc_range())
    return record


# ====================================================================
# Crops
# ====================================================================

@planner_bp.route('/api/crops', methods=['GET'])
def list_crops():
    category = request.args.get('category')
    query = request.args.get('q')
    try:
        from crop_database import search_crops
        crops = search_crops(query)
        if category:
            crops = [c for c in crops if c.category.lower() == category.lower()]
        return jsonify([_crop_outbound(c) for c in crops])
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Error listing crops: {e}")
        return jsonify({'error': str(e)}), 500


@planner_bp.route('/api/crops/<crop_id>', methods=['GET'])
def get_crop(crop_id):
    try:
        from crop_database import find_crop
        crop = find_crop(crop_id)
        if crop is None:
            return jsonify({'error': f"Crop '{crop_id}' not found"}), 404
        return jsonify(_crop_outbound(crop))
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Error getting crop {crop_id}: {e}")
        return jsonify({'error': str(e)}), 500


# ====================================================================
# Soils
# ====================================================================

@planner_bp.route('/api/soils', methods=['GET'])
def list_soils():
    category = request.args.get('category')
    try:
        from soil_database import get_soil_table, SOIL_CATEGORIES
        if category and category not in SOIL_CATEGORIES:
            raise ValueError(f"Invalid category '{category}'. Must be one of {list(SOIL_CATEGORIES)}")
        soils = [s for s in get_soil_table() if not category or s.category == category]
        return jsonify([s.model_dump(mode='json') for s in soils])
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Error listing soils: {e}")
        return jsonify({'error': str(e)}), 500


@planner_bp.route('/api/soils/<soil_id>', methods=['GET'])
def get_soil(soil_id):
    try:
        from soil_database import get_soil_by_id
        soil = get_soil_by_id(soil_id)
        if soil is None:
            return jsonify({'error': f"Soil '{soil_id}' not found"}), 404
        return jsonify(soil.model_dump(mode='json'))
    except Exception as e:
        logger.error(f"Error getting soil {soil_id}: {e}")
        return jsonify({'error': str(e)}), 500


@planner_bp.route('/api/soils/<soil_id>/adjustment', methods=['POST'])
def soil_adjustment(soil_id):
    data = request.get_json(force=True) or {}
    try:
        from soil_database import get_soil_by_id
        from soil_adjustment import calculate_irrigation_adjustment, weekly_schedule
        soil = get_soil_by_id(soil_id)
        if soil is None:
            return jsonify({'error': f"Soil '{soil_id}' not found"}), 404
        base_etc = data.get('base_etc')
        if base_etc is None:
            raise ValueError("base_etc (mm/day) is required")
        base_etc = float(base_etc)
        adjustment = calculate_irrigation_adjustment(soil, base_etc)
        response = {'adjustment': adjustment.to_dict()}
        if data.get('runtime_minutes') is not None:
            response['weekly_schedule'] = weekly_schedule(soil, base_etc, float(data['runtime_minutes']))
        return jsonify(response)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Error adjusting for soil {soil_id}: {e}")
        return jsonify({'error': str(e)}), 500


# ====================================================================
# Calculator
# ====================================================================

@planner_bp.route('/api/irrigation-systems', methods=['GET'])
def list_irrigation_systems():
    from runtime_calculator import IRRIGATION_SYSTEMS
    return jsonify([{'id': system_id, **system} for system_id, system in IRRIGATION_SYSTEMS.items()])


@planner_bp.route('/api/calculator/runtime', methods=['POST'])
def calculate_runtime_route():
    data = request.get_json(force=True) or {}
    try:
        from crop_database import get_crop_table
        from runtime_calculator import CalculatorInputs, controller_template, try_calculate
        inputs = CalculatorInputs.model_validate(data.get('inputs') or {})

        live_et0 = data.get('live_et0_mm')
        if live_et0 is None and inputs.et_source != 'manual' and data.get('latitude') is not None \
                and data.get('longitude') is not None:
            from weather_service import get_live_et0_mm
            live_et0 = get_live_et0_mm(float(data['latitude']), float(data['longitude']))

        outcome = try_calculate(inputs, live_et0, get_crop_table(),
                                strict_system=bool(data.get('strict_system')))
        if not outcome.is_ok:
            return jsonify({'error': str(outcome.error), 'errors': outcome.error.errors}), 400

        result = outcome.value
        from logging_config import log_calculation
        log_calculation(inputs, result, user_id=_user_id())
        response = {'result': result.to_dict(), 'template': controller_template(inputs, result)}

        soil_id = data.get('soil_id')
        if soil_id:
            from soil_database import get_soil_by_id
            from soil_adjustment import calculate_irrigation_adjustment
            soil = get_soil_by_id(soil_id)
            if soil is None:
                raise ValueError(f"Soil '{soil_id}' not found")
            response['soil_adjustment'] = calculate_irrigation_adjustment(soil, result.etc).to_dict()

        return jsonify(response)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Error calculating runtime: {e}")
        return jsonify({'error': str(e)}), 500


# ====================================================================
# Weather
# ====================================================================

@planner_bp.route('/api/weather/et0', methods=['GET'])
def get_et0():
    latitude = request.args.get('latitude', type=float)
    longitude = request.args.get('longitude', type=float)
    try:
        from weather_service import get_et0_forecast
        forecast = get_et0_forecast(latitude, longitude)
        if forecast is None:
            return jsonify({'error': 'Weather data unavailable'}), 503
        return jsonify(forecast)
    except Exception as e:
        logger.error(f"Error getting ET0 forecast: {e}")
        return jsonify({'error': str(e)}), 500


# ====================================================================
# Profiles
# ====================================================================

@planner_bp.route('/api/profiles', methods=['GET'])
def list_profiles():
    user_id = _user_id()
    try:
        return jsonify(_profile_store().list(user_id))
    except Exception as e:
        logger.error(f"Error listing profiles: {e}")
        return jsonify({'error': str(e)}), 500


@planner_bp.route('/api/profiles', methods=['POST'])
def create_profile():
    user_id = _user_id()
    data = request.get_json(force=True) or {}
    try:
        if 'inputs' in data:
            from crop_database import get_crop_table
            from profile_store import profile_from_inputs
            from runtime_calculator import CalculatorInputs
            inputs = CalculatorInputs.model_validate(data['inputs'])
            profile_data = profile_from_inputs(data.get('name'), inputs, get_crop_table(),
                                               notes=data.get('notes'))
            if profile_data is None:
                raise ValueError("Select a crop from the crop table before saving a profile")
        else:
            profile_data = data
        profile = _profile_store().save(user_id, profile_data)
        return jsonify(profile), 201
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Error creating profile: {e}")
        return jsonify({'error': str(e)}), 500


@planner_bp.route('/api/profiles/<int:profile_id>', methods=['GET'])
def get_profile(profile_id):
    user_id = _user_id()
    try:
        profile = _profile_store().get(user_id, profile_id)
        if profile is None:
            return jsonify({'error': 'Profile not found'}), 404
        return jsonify(profile)
    except Exception as e:
        logger.error(f"Error getting profile {profile_id}: {e}")
        return jsonify({'error': str(e)}), 500


@planner_bp.route('/api/profiles/<int:profile_id>', methods=['PUT'])
def update_profile(profile_id):
    user_id = _user_id()
    data = request.get_json(force=True) or {}
    try:
        profile = _profile_store().update(user_id, profile_id, data)
        if profile is None:
            return jsonify({'error': 'Profile not found'}), 404
        return jsonify(profile)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Error updating profile {profile_id}: {e}")
        return jsonify({'error': str(e)}), 500


@planner_bp.route('/api/profiles/<int:profile_id>', methods=['DELETE'])
def delete_profile(profile_id):
    user_id = _user_id()
    try:
        if not _profile_store().delete(user_id, profile_id):
            return jsonify({'error': 'Profile not found'}), 404
        return jsonify({'success': True})
    except Exception as e:
        logger.error(f"Error deleting profile {profile_id}: {e}")
        return jsonify({'error': str(e)}), 500


@planner_bp.route('/api/profiles/<int:profile_id>/load', methods=['POST'])
def load_profile(profile_id):
    user_id = _user_id()
    try:
        from profile_store import profile_to_inputs
        store = _profile_store()
        profile = store.touch(user_id, profile_id)
        if profile is None:
            return jsonify({'error': 'Profile not found'}), 404
        return jsonify({'inputs': profile_to_inputs(profile).to_dict()})
    except Exception as e:
        logger.error(f"Error loading profile {profile_id}: {e}")
        return jsonify({'error': str(e)}), 500
