"""Flask configuration."""
import os

#################### Database ####################
SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI',
                                         'sqlite:///davaccounts.db')
"""Database shared with the DAV server."""

SQLALCHEMY_TRACK_MODIFICATIONS = False

CREATE_DB = bool(int(os.environ.get('CREATE_DB', '0')))
"""Create missing tables when the app starts."""

#################### Authentication ####################
AUTH_REALM = os.environ.get('AUTH_REALM', 'BaikalDAV')
"""HTTP Digest realm.

Part of every stored password hash: changing it invalidates all existing
passwords, which then have to be set again.
"""

#################### Logging ####################
LOGLEVEL = os.environ.get('LOGLEVEL', 'INFO')
LOG_JSON = bool(int(os.environ.get('LOG_JSON', '0')))
"""Emit JSON log records instead of plain text."""
