from flask import Flask, jsonify

from config import Config
from logging_config import logger
from profile_store import SqliteProfileStore
from routes import planner_bp


app = Flask(__name__)
app.secret_key = Config.FLASK_SECRET_KEY
app.config['PROFILE_STORE'] = SqliteProfileStore(Config.PLANNER_DB)

app.register_blueprint(planner_bp)

try:
    app.config['PROFILE_STORE'].init_tables()
except Exception as e:
    logger.warning(f"Could not initialize profile tables: {e}")


@app.route('/health')
def health():
    from crop_database import get_crop_table
    from soil_database import get_soil_table
    return jsonify({
        'status': 'ok',
        'crops': len(get_crop_table()),
        'soils': len(get_soil_table()),
    })


if __name__ == '__main__':
    app.run(debug=Config.DEBUG, port=Config.PORT)
