"""Helpers and Flask application integration."""

from typing import Any, Generator, Mapping, Optional
from contextlib import contextmanager
import hashlib
import logging
import os

from flask import Flask, current_app, has_app_context
from sqlalchemy.orm.session import Session

from .models import db

logger = logging.getLogger(__name__)

_IN_TRANSACTION = 'davaccounts.in_transaction'


@contextmanager
def transaction() -> Generator:
    """
    Context manager for database transaction.

    Transactions nest: an inner ``transaction()`` joins the outermost one,
    which alone commits, or rolls back if anything inside raised.
    """
    session = db.session()
    if session.info.get(_IN_TRANSACTION):
        yield session
        return

    session.info[_IN_TRANSACTION] = True
    try:
        yield session
        session.commit()
    except Exception as e:
        logger.error('Commit failed, rolling back: %s', str(e))
        session.rollback()
        raise
    finally:
        session.info.pop(_IN_TRANSACTION, None)


def init_app(app: Flask) -> None:
    """Set configuration defaults and attach session to the application."""
    app.config.setdefault('SQLALCHEMY_TRACK_MODIFICATIONS', False)
    app.config.setdefault('AUTH_REALM', 'BaikalDAV')
    db.init_app(app)


def current_session() -> Session:
    """Get/create database session for this context."""
    return db.session


def create_all() -> None:
    """Create all tables in the database."""
    db.create_all()


def drop_all() -> None:
    """Drop all tables in the database."""
    db.drop_all()


def get_application_config() -> Mapping[str, Any]:
    """Get the config of the current application, or the environment."""
    if has_app_context():
        return current_app.config
    return os.environ


def get_auth_realm(config: Optional[Mapping[str, Any]] = None) -> str:
    """
    Get the HTTP authentication realm.

    A missing realm is logged and treated as empty, which yields hashes that
    will not authenticate but does not block the caller.
    """
    if config is None:
        config = get_application_config()
    try:
        realm: str = config['AUTH_REALM']
    except KeyError as e:
        logger.error('Error reading authentication realm: %s', e)
        return ''
    if realm is None:
        logger.error('Authentication realm is not set')
        return ''
    return realm


def digest_a1(username: str, realm: str, password: str) -> str:
    """
    Compute the HTTP Digest ``A1`` hash for a set of credentials.

    This is the value DAV servers store and compare against during Digest
    authentication, so the ``username:realm:password`` order and MD5 must
    not change.

    Parameters
    ----------
    username : str
    realm : str
    password : str

    Returns
    -------
    str
        32 character hexadecimal digest.

    """
    a1 = f'{username}:{realm}:{password}'
    return hashlib.md5(a1.encode('utf-8')).hexdigest()
