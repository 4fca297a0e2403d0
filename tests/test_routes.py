"""
Integration tests for the planner API blueprint.
Weather calls are mocked; profiles use a temporary SQLite database.
"""

import json
from unittest.mock import patch


SCENARIO_A = {
    'crop': 'Almonds', 'kcValue': 1.0, 'etSource': 'manual', 'manualET': 0.2,
    'zoneFlowGPM': 10, 'area': 1, 'areaUnit': 'acres', 'systemType': 'drip',
}


def _post(client, url, body):
    return client.post(url, data=json.dumps(body), content_type='application/json')


class TestReferenceRoutes:
    def test_health(self, app_client):
        data = app_client.get('/health').get_json()
        assert data['status'] == 'ok'
        assert data['soils'] == 9

    def test_list_crops(self, app_client):
        resp = app_client.get('/api/crops')
        assert resp.status_code == 200
        ids = [c['id'] for c in resp.get_json()]
        assert 'almonds' in ids

    def test_filter_crops(self, app_client):
        crops = app_client.get('/api/crops?category=Berries').get_json()
        assert {c['id'] for c in crops} == {'strawberries', 'blueberries'}
        crops = app_client.get('/api/crops?q=walnut').get_json()
        assert [c['id'] for c in crops] == ['walnuts']

    def test_get_crop(self, app_client):
        crop = app_client.get('/api/crops/corn').get_json()
        assert crop['total_cycle_days'] == 130
        assert crop['kc_range'] == [0.3, 1.2]
        assert crop['stages'][0]['name'] == 'Initial'

    def test_crop_not_found(self, app_client):
        assert app_client.get('/api/crops/dragonfruit').status_code == 404

    def test_soils(self, app_client):
        soils = app_client.get('/api/soils?category=clay').get_json()
        assert {s['id'] for s in soils} == {'clay_heavy', 'clay_medium', 'adobe_clay'}
        assert app_client.get('/api/soils?category=gravel').status_code == 400
        assert app_client.get('/api/soils/loam_standard').get_json()['name'] == 'Loam'
        assert app_client.get('/api/soils/nope').status_code == 404

    def test_soil_adjustment(self, app_client):
        resp = _post(app_client, '/api/soils/loam_standard/adjustment',
                     {'base_etc': 5.0, 'runtime_minutes': 45})
        data = resp.get_json()
        assert resp.status_code == 200
        assert data['adjustment']['irrigationFrequency'] == 'Every 2-3 days'
        assert len(data['weekly_schedule']) == 7

    def test_soil_adjustment_requires_etc(self, app_client):
        resp = _post(app_client, '/api/soils/loam_standard/adjustment', {})
        assert resp.status_code == 400

    def test_irrigation_systems(self, app_client):
        systems = app_client.get('/api/irrigation-systems').get_json()
        assert {s['id']: s['efficiency'] for s in systems}['flood'] == 0.6


class TestCalculatorRoute:
    def test_scenario_a(self, app_client):
        resp = _post(app_client, '/api/calculator/runtime', {'inputs': SCENARIO_A})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data['result']['runtimeHours'] == 10
        assert data['result']['runtimeMinutes'] == 3
        assert data['result']['efficiency'] == 90
        assert data['template']['block_id'] == 'block_001'

    @patch('logging_config.log_calculation')
    def test_calculation_logged(self, mock_log, app_client):
        _post(app_client, '/api/calculator/runtime', {'inputs': SCENARIO_A})
        mock_log.assert_called_once()
        inputs, result = mock_log.call_args.args
        assert inputs.crop == 'Almonds'
        assert result.runtime_hours == 10
        assert mock_log.call_args.kwargs['user_id'] == 1

    def test_negative_kc_rejected(self, app_client):
        resp = _post(app_client, '/api/calculator/runtime', {'inputs': dict(SCENARIO_A, kcValue=-0.5)})
        assert resp.status_code == 400
        assert 'Kc' in resp.get_json()['error']

    def test_with_soil(self, app_client):
        resp = _post(app_client, '/api/calculator/runtime',
                     {'inputs': SCENARIO_A, 'soil_id': 'sand_fine'})
        adj = resp.get_json()['soil_adjustment']
        assert adj['runoffRisk'] == 'low'

    def test_validation_errors(self, app_client):
        inputs = dict(SCENARIO_A, zoneFlowGPM=0, crop='')
        resp = _post(app_client, '/api/calculator/runtime', {'inputs': inputs})
        assert resp.status_code == 400
        assert len(resp.get_json()['errors']) == 2

    def test_bad_input_type(self, app_client):
        inputs = dict(SCENARIO_A, etSource='satellite')
        resp = _post(app_client, '/api/calculator/runtime', {'inputs': inputs})
        assert resp.status_code == 400

    @patch('weather_service.get_live_et0_mm', return_value=6.0)
    def test_fetches_live_et0(self, mock_live, app_client):
        inputs = dict(SCENARIO_A, etSource='weather-station', manualET=None)
        resp = _post(app_client, '/api/calculator/runtime',
                     {'inputs': inputs, 'latitude': 36.7, 'longitude': -119.7})
        assert resp.status_code == 200
        assert resp.get_json()['result']['et0'] == 6.0
        mock_live.assert_called_once_with(36.7, -119.7)

    def test_live_et0_default(self, app_client):
        inputs = dict(SCENARIO_A, etSource='weather-station', manualET=None)
        resp = _post(app_client, '/api/calculator/runtime', {'inputs': inputs})
        result = resp.get_json()['result']
        assert result['et0'] == 5.0
        assert result['defaultsApplied']


class TestWeatherRoute:
    @patch('weather_service.get_et0_forecast')
    def test_forecast(self, mock_forecast, app_client):
        mock_forecast.return_value = {'dates': ['2026-10-18'], 'et0_mm': [4.1],
                                      'temp_max_f': [80], 'temp_min_f': [50], 'precipitation_mm': [0]}
        resp = app_client.get('/api/weather/et0?latitude=36.7&longitude=-119.7')
        assert resp.status_code == 200
        assert resp.get_json()['et0_mm'] == [4.1]
        mock_forecast.assert_called_once_with(36.7, -119.7)

    @patch('weather_service.get_et0_forecast', return_value=None)
    def test_unavailable(self, mock_forecast, app_client):
        assert app_client.get('/api/weather/et0').status_code == 503


class TestProfileRoutes:
    def test_crud(self, app_client):
        body = {'name': 'Block 3', 'crop_id': 'grapes', 'crop_name': 'Grapes',
                'irrigation_method': 'drip', 'zone_flow_gpm': 8, 'area_size': 5, 'area_unit': 'acres'}
        resp = _post(app_client, '/api/profiles', body)
        assert resp.status_code == 201
        profile_id = resp.get_json()['id']

        assert len(app_client.get('/api/profiles').get_json()) == 1
        assert app_client.get(f'/api/profiles/{profile_id}').get_json()['name'] == 'Block 3'

        resp = app_client.put(f'/api/profiles/{profile_id}', data=json.dumps({'notes': 'new drip line'}),
                              content_type='application/json')
        assert resp.get_json()['notes'] == 'new drip line'

        assert app_client.delete(f'/api/profiles/{profile_id}').status_code == 200
        assert app_client.get(f'/api/profiles/{profile_id}').status_code == 404

    def test_invalid_profile(self, app_client):
        resp = _post(app_client, '/api/profiles', {'name': 'x', 'irrigation_method': 'bucket'})
        assert resp.status_code == 400

    def test_save_from_calculator_and_load(self, app_client):
        resp = _post(app_client, '/api/profiles', {'name': 'Almond block', 'inputs': SCENARIO_A})
        assert resp.status_code == 201
        profile = resp.get_json()
        assert profile['crop_id'] == 'almonds'
        assert profile['soil_type'] == 'Loam'

        resp = app_client.post(f"/api/profiles/{profile['id']}/load")
        inputs = resp.get_json()['inputs']
        assert inputs['crop'] == 'Almonds'
        assert inputs['etSource'] == 'weather-station'
        assert inputs['zoneFlowGPM'] == 10

    def test_save_from_calculator_unknown_crop(self, app_client):
        resp = _post(app_client, '/api/profiles',
                     {'name': 'Mystery', 'inputs': dict(SCENARIO_A, crop='Dragonfruit')})
        assert resp.status_code == 400

    def test_load_missing(self, app_client):
        assert app_client.post('/api/profiles/4242/load').status_code == 404
