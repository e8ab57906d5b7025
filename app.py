import logging

from flask import Flask, jsonify
from config import Config
from utils.db import init_db_connection
from utils.errors import register_error_handlers
from utils.serializers import MongoJSONProvider

# Import controllers
from controllers.user_controller import user_bp
from controllers.group_controller import group_bp
from controllers.activity_controller import activity_bp
from controllers.preferences_controller import preferences_bp


def create_app(config_object=Config):
    app = Flask(__name__)               # Initialize Flask app
    app.config.from_object(config_object)

    logging.basicConfig(
        level=getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    init_db_connection(app)             # Initialize MongoDB connection
    app.json = MongoJSONProvider(app)   # ObjectId / datetime aware jsonify

    # Register Blueprint
    app.register_blueprint(user_bp)
    app.register_blueprint(group_bp)
    app.register_blueprint(activity_bp)
    app.register_blueprint(preferences_bp)

    register_error_handlers(app)

    @app.route("/health")
    def health():
        return jsonify({"status": "healthy"})

    return app


# Run the app
if __name__ == "__main__":
    create_app().run(debug=Config.DEBUG)
