from flask import Flask
from flask_cors import CORS

from session_notes.catalog import SessionCatalog, setup_logging


def create_app(config_class=None, catalog=None):
    app = Flask(__name__)

    if config_class:
        app.config.from_object(config_class)
    else:
        from config import Config
        app.config.from_object(Config)

    app.json.sort_keys = False
    setup_logging()
    CORS(app)

    if catalog is None:
        catalog = SessionCatalog(
            notes_path=app.config.get("SESSION_NOTES_PATH"),
            strict=app.config.get("SESSION_NOTES_STRICT_LINKS", False),
        )
    app.extensions["session_catalog"] = catalog

    from app.routes import api_bp
    app.register_blueprint(api_bp, url_prefix="/api")

    return app
