"""
Saved calculator profiles.

A profile snapshots the crop, system and zone settings of a calculation so
it can be reloaded later. ProfileStore is the interface the application
layer depends on; SqliteProfileStore keeps profiles in the planner database.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime

from crop_database import find_crop
from db import get_db
from runtime_calculator import IRRIGATION_SYSTEMS, CalculatorInputs
from units import AREA_UNITS, is_finite_number

logger = logging.getLogger(__name__)

DEFAULT_SOIL_TYPE = 'Loam'
DEFAULT_SYSTEM_EFFICIENCY = 85
DEFAULT_IRRIGATION_METHOD = 'drip'

PROFILE_FIELDS = [
    'name', 'crop_id', 'crop_name', 'soil_type', 'irrigation_method',
    'system_efficiency', 'zone_flow_gpm', 'area_size', 'area_unit',
    'emitter_spacing', 'precipitation_rate', 'notes', 'is_favorite',
]

UPDATABLE_FIELDS = PROFILE_FIELDS + ['last_used']


def validate_profile(data, partial=False):
    """Raise ValueError if *data* has an invalid profile field."""
    if not partial or 'name' in data:
        if not (data.get('name') or '').strip():
            raise ValueError("Profile name is required")

    method = data.get('irrigation_method')
    if (not partial or 'irrigation_method' in data) and method not in IRRIGATION_SYSTEMS:
        raise ValueError(f"Invalid irrigation_method '{method}'. "
                         f"Must be one of {list(IRRIGATION_SYSTEMS)}")

    unit = data.get('area_unit', 'acres')
    if unit not in AREA_UNITS:
        raise ValueError(f"Invalid area_unit '{unit}'. Must be one of {list(AREA_UNITS)}")

    efficiency = data.get('system_efficiency')
    if efficiency is not None and not (is_finite_number(efficiency) and 0 < efficiency <= 100):
        raise ValueError("system_efficiency must be a percentage between 0 and 100")


class ProfileStore(ABC):
    """Repository of saved calculator profiles, scoped per user."""

    @abstractmethod
    def save(self, user_id, data):
        """Create a profile. Returns the stored profile dict."""

    @abstractmethod
    def list(self, user_id):
        """Profiles for a user, favorites first, most recently used next."""

    @abstractmethod
    def get(self, user_id, profile_id):
        """Profile dict or None."""

    @abstractmethod
    def update(self, user_id, profile_id, updates):
        """Returns the updated profile dict, or None if not found."""

    @abstractmethod
    def delete(self, user_id, profile_id):
        """Returns True if a profile was deleted."""

    def touch(self, user_id, profile_id):
        """Mark a profile as just used."""
        return self.update(user_id, profile_id, {'last_used': datetime.now().isoformat()})


class SqliteProfileStore(ProfileStore):

    def __init__(self, db_path=None):
        self.db_path = db_path

    def init_tables(self):
        with get_db(self.db_path) as conn:
            conn.execute('''
                CREATE TABLE IF NOT EXISTS crop_profiles (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id INTEGER NOT NULL,
                    name TEXT NOT NULL,
                    crop_id TEXT,
                    crop_name TEXT,
                    soil_type TEXT,
                    irrigation_method TEXT NOT NULL,
                    system_efficiency REAL,
                    zone_flow_gpm REAL,
                    area_size REAL,
                    area_unit TEXT DEFAULT 'acres',
                    emitter_spacing REAL,
                    precipitation_rate REAL,
                    notes TEXT,
                    is_favorite INTEGER DEFAULT 0,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    last_used TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            ''')
            conn.execute('CREATE INDEX IF NOT EXISTS idx_crop_profiles_user ON crop_profiles(user_id)')
        logger.info("Crop profile tables initialized")

    def save(self, user_id, data):
        validate_profile(data)
        now = datetime.now().isoformat()
        with get_db(self.db_path) as conn:
            cursor = conn.execute('''
                INSERT INTO crop_profiles (
                    user_id, name, crop_id, crop_name, soil_type, irrigation_method,
                    system_efficiency, zone_flow_gpm, area_size, area_unit,
                    emitter_spacing, precipitation_rate, notes, is_favorite,
                    created_at, last_used
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            ''', (
                user_id,
                data['name'].strip(),
                data.get('crop_id'),
                data.get('crop_name'),
                data.get('soil_type') or DEFAULT_SOIL_TYPE,
                data['irrigation_method'],
                data.get('system_efficiency', DEFAULT_SYSTEM_EFFICIENCY),
                data.get('zone_flow_gpm'),
                data.get('area_size'),
                data.get('area_unit', 'acres'),
                data.get('emitter_spacing'),
                data.get('precipitation_rate'),
                data.get('notes'),
                1 if data.get('is_favorite') else 0,
                now,
                now,
            ))
            profile_id = cursor.lastrowid

        logger.info(f"Crop profile created: {profile_id} ('{data['name']}') for user {user_id}")
        return self.get(user_id, profile_id)

    def list(self, user_id):
        with get_db(self.db_path) as conn:
            rows = conn.execute(
                'SELECT * FROM crop_profiles WHERE user_id = ? '
                'ORDER BY is_favorite DESC, last_used DESC, id DESC',
                (user_id,)
            ).fetchall()
        return [_unpack_profile(row) for row in rows]

    def get(self, user_id, profile_id):
        with get_db(self.db_path) as conn:
            row = conn.execute(
                'SELECT * FROM crop_profiles WHERE id = ? AND user_id = ?',
                (profile_id, user_id)
            ).fetchone()
        return _unpack_profile(row) if row else None

    def update(self, user_id, profile_id, updates):
        validate_profile(updates, partial=True)
        fields = {k: v for k, v in updates.items() if k in UPDATABLE_FIELDS}
        if 'is_favorite' in fields:
            fields['is_favorite'] = 1 if fields['is_favorite'] else 0
        if not fields:
            return self.get(user_id, profile_id)

        set_clause = ', '.join(f'{k} = ?' for k in fields)
        params = list(fields.values()) + [profile_id, user_id]
        with get_db(self.db_path) as conn:
            cursor = conn.execute(
                f'UPDATE crop_profiles SET {set_clause} WHERE id = ? AND user_id = ?',
                params
            )
            updated = cursor.rowcount > 0

        if not updated:
            return None
        logger.info(f"Crop profile {profile_id} updated for user {user_id}")
        return self.get(user_id, profile_id)

    def delete(self, user_id, profile_id):
        with get_db(self.db_path) as conn:
            cursor = conn.execute(
                'DELETE FROM crop_profiles WHERE id = ? AND user_id = ?',
                (profile_id, user_id)
            )
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info(f"Crop profile {profile_id} deleted for user {user_id}")
        return deleted


def _unpack_profile(row):
    profile = dict(row)
    profile['is_favorite'] = bool(profile.get('is_favorite'))
    return profile


# ---------------------------------------------------------------------------
# Calculator bridge
# ---------------------------------------------------------------------------

def profile_to_inputs(profile) -> CalculatorInputs:
    """Calculator inputs for a saved profile, using the live weather ET source."""
    return CalculatorInputs(
        crop=profile.get('crop_name') or '',
        et_source='weather-station',
        zone_flow_gpm=profile.get('zone_flow_gpm') or 0.0,
        area=profile.get('area_size') or 0.0,
        area_unit=profile.get('area_unit') or 'acres',
        system_type=profile.get('irrigation_method') or '',
    )


def profile_from_inputs(name, inputs: CalculatorInputs, crop_table, notes=None):
    """
    Profile data for the current calculator inputs, ready for ProfileStore.save().

    Returns None when the inputs name no crop, or a crop not in *crop_table*.
    """
    if not inputs.crop:
        return None
    crop = find_crop(inputs.crop, crop_table)
    if crop is None:
        return None
    return {
        'name': name,
        'crop_id': crop.id,
        'crop_name': inputs.crop,
        'soil_type': DEFAULT_SOIL_TYPE,
        'irrigation_method': inputs.system_type or DEFAULT_IRRIGATION_METHOD,
        'system_efficiency': DEFAULT_SYSTEM_EFFICIENCY,
        'zone_flow_gpm': inputs.zone_flow_gpm,
        'area_size': inputs.area,
        'area_unit': inputs.area_unit,
        'notes': notes,
        'is_favorite': False,
    }
