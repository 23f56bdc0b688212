"""
Database models for CalDAV/CardDAV accounts.

The table layout follows the SabreDAV/Baikal schema, so that a DAV server
reading the same database sees the principals, calendars and address books
created here.
"""

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import Column, Integer, SmallInteger, String, Text, text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class DBUser(Base):  # type: ignore
    """
    Account credentials.

    +-----------+------------------+------+-----+---------+----------------+
    | Field     | Type             | Null | Key | Default | Extra          |
    +-----------+------------------+------+-----+---------+----------------+
    | id        | int(11) unsigned | NO   | PRI | NULL    | auto_increment |
    | username  | varbinary(255)   | YES  | UNI | NULL    |                |
    | digesta1  | varbinary(32)    | YES  |     | NULL    |                |
    +-----------+------------------+------+-----+---------+----------------+
    """

    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), unique=True, default='')
    digesta1 = Column(String(32), default='')
    """HTTP Digest ``A1`` hash, ``md5(username:realm:password)``."""


class DBPrincipal(Base):  # type: ignore
    """
    DAV principals.

    The ``uri`` (``principals/<username>``) is what calendars and address
    books refer to as their owner.
    """

    __tablename__ = 'principals'

    id = Column(Integer, primary_key=True, autoincrement=True)
    uri = Column(String(200), nullable=False, unique=True, default='')
    email = Column(String(80), default='')
    displayname = Column(String(80), default='')


class DBCalendar(Base):  # type: ignore
    """
    Calendar collections.

    +---------------+------------------+------+-----+---------+
    | Field         | Type             | Null | Key | Default |
    +---------------+------------------+------+-----+---------+
    | id            | int(10) unsigned | NO   | PRI | NULL    |
    | principaluri  | varchar(100)     | YES  | MUL | NULL    |
    | displayname   | varchar(100)     | YES  |     | NULL    |
    | uri           | varchar(200)     | YES  |     | NULL    |
    | synctoken     | int(10) unsigned | NO   |     | 1       |
    | description   | text             | YES  |     | NULL    |
    | calendarorder | int(10) unsigned | NO   |     | 0       |
    | calendarcolor | varchar(10)      | YES  |     | NULL    |
    | timezone      | text             | YES  |     | NULL    |
    | components    | varchar(20)      | YES  |     | NULL    |
    | transparent   | tinyint(1)       | NO   |     | 0       |
    +---------------+------------------+------+-----+---------+
    """

    __tablename__ = 'calendars'

    id = Column(Integer, primary_key=True, autoincrement=True)
    principaluri = Column(String(100), index=True, default='')
    displayname = Column(String(100), default='')
    uri = Column(String(200), default='')
    synctoken = Column(Integer, nullable=False, default=1,
                       server_default=text("'1'"))
    description = Column(Text, default='')
    calendarorder = Column(Integer, nullable=False, default=0,
                           server_default=text("'0'"))
    calendarcolor = Column(String(10), default='')
    timezone = Column(Text, default='')
    components = Column(String(20), default='')
    """Comma-separated component types, e.g. ``VEVENT,VTODO``."""
    transparent = Column(SmallInteger, nullable=False, default=0,
                         server_default=text("'0'"))


class DBAddressBook(Base):  # type: ignore
    """Address book collections."""

    __tablename__ = 'addressbooks'

    id = Column(Integer, primary_key=True, autoincrement=True)
    principaluri = Column(String(255), index=True, default='')
    displayname = Column(String(255), default='')
    uri = Column(String(200), default='')
    description = Column(Text, default='')
    synctoken = Column(Integer, nullable=False, default=1,
                       server_default=text("'1'"))


db = SQLAlchemy(metadata=Base.metadata)
