"""Application factory for account administration."""

from flask import Flask

from . import config, util
from .app_logging import setup_logger


def create_app() -> Flask:
    """Initialize and configure the account administration app."""
    app = Flask('davaccounts')
    app.config.from_object(config)
    setup_logger(app.config['LOGLEVEL'], json=app.config['LOG_JSON'])
    util.init_app(app)

    if app.config['CREATE_DB']:
        with app.app_context():
            util.create_all()

    return app
