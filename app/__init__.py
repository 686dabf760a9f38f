"""
Fixture table application.

A sign-in page plus three filterable table views (assets, loggers,
shipments). Filters are saved per user behind a bearer-protected
``/filter`` endpoint and the browser redraws the table after a delay,
which is the asynchronous behaviour the harness has to wait out.
"""

import logging
import os

from flask import Flask
from flask_sqlalchemy import SQLAlchemy

from config import get_config

db = SQLAlchemy()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None) -> Flask:
    """
    Build the fixture application.

    Args:
        config_name: Key into ``config.config``; FLASK_ENV when omitted.

    Returns:
        Application with its tables created and, unless disabled,
        sample rows in every view.
    """
    app = Flask(__name__, instance_relative_config=True)
    settings = get_config(config_name)
    app.config.from_object(settings)
    logger.info("Fixture app using %s", settings.__name__)

    os.makedirs(app.instance_path, exist_ok=True)
    db.init_app(app)

    from app.routes.api import api_bp
    from app.routes.views import views_bp

    for blueprint in (api_bp, views_bp):
        app.register_blueprint(blueprint)

    with app.app_context():
        db.create_all()
        if app.config.get("SEED_SAMPLE_DATA"):
            from app.seed import seed_sample_data

            seed_sample_data()

    return app
