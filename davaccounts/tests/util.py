"""Testing helpers."""

from contextlib import contextmanager

from flask import Flask

from .. import util


def create_test_app(database_url: str = 'sqlite:///:memory:',
                    realm: str = 'TestRealm') -> Flask:
    """Build an app bound to a throwaway database."""
    app = Flask('foo')
    app.config['SQLALCHEMY_DATABASE_URI'] = database_url
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['AUTH_REALM'] = realm
    util.init_app(app)
    return app


@contextmanager
def temporary_db(database_url: str = 'sqlite:///:memory:',
                 realm: str = 'TestRealm', create: bool = True,
                 drop: bool = True):
    """Provide an in-memory sqlite database for testing purposes."""
    app = create_test_app(database_url, realm)
    with app.app_context():
        if create:
            util.create_all()
        try:
            yield util.current_session()
        finally:
            util.current_session().remove()
            if drop:
                util.drop_all()
