"""
Active-record style access to DAV account data.

A :class:`Record` wraps one row of a model from :mod:`.models` and exposes
field access by name, so that callers can work with principals, calendars
and address books without knowing the table layout. Lookups go through a
:class:`Requester`, which collects equality clauses and returns a
:class:`ResultSet` of records.

.. code-block:: python

   calendars = Calendar.get_base_requester() \\
       .add_clause_equals('principaluri', 'principals/jane') \\
       .execute()
   for calendar in calendars:
       print(calendar.get('displayname'))

"""

from typing import Any, Iterator, List, Optional, Type, TypeVar

from sqlalchemy import inspect

from . import exceptions, util
from .models import Base, DBAddressBook, DBCalendar, DBPrincipal

R = TypeVar('R', bound='Record')


class Record:
    """A single row of ``model``, floating until it is first persisted."""

    model: Type[Base] = Base
    row: Any = None

    def __init__(self, primary: Optional[Any] = None) -> None:
        if primary is None:
            self.init_floating()
        else:
            self.init_by_primary(primary)

    @classmethod
    def from_row(cls: Type[R], row: Any) -> R:
        """Wrap a row that was already loaded from the database."""
        record = cls.__new__(cls)
        record.init_from_row(row)
        return record

    @classmethod
    def fields(cls) -> List[str]:
        """Names of the fields stored for this record type."""
        return [column.key for column in cls.model.__table__.columns]

    @classmethod
    def has_field(cls, name: str) -> bool:
        """Determine whether ``name`` is a field of this record type."""
        return name in cls.fields()

    @classmethod
    def primary_key(cls) -> str:
        """Name of the primary key field."""
        return str(inspect(cls.model).primary_key[0].key)

    @classmethod
    def get_base_requester(cls) -> 'Requester':
        """Get a requester over all records of this type."""
        return Requester(cls)

    def init_from_row(self, row: Any) -> None:
        self.row = row

    def init_by_primary(self, primary: Any) -> None:
        """
        Load the record with primary key ``primary``.

        Raises
        ------
        :class:`.exceptions.RecordNotFound`
            If there is no such row.

        """
        row = util.current_session().get(self.model, primary)
        if row is None:
            raise exceptions.RecordNotFound(
                f'No {self.model.__tablename__} record with key {primary!r}'
            )
        self.init_from_row(row)

    def init_floating(self) -> None:
        """Start a new, unsaved record with column defaults applied."""
        row = self.model()
        for column in self.model.__table__.columns:
            if column.primary_key or column.default is None:
                continue
            if column.default.is_scalar:
                setattr(row, column.key, column.default.arg)
        self.row = row

    def floating(self) -> bool:
        """A record floats until the store has assigned its primary key."""
        return self.get_primary() is None

    def get_primary(self) -> Any:
        return getattr(self.row, self.primary_key())

    def unset_primary(self) -> None:
        """Make the record float again, e.g. after its insert was undone."""
        setattr(self.row, self.primary_key(), None)

    def get(self, name: str) -> Any:
        if not self.has_field(name):
            raise exceptions.UnknownProperty(
                f'{self.model.__tablename__} has no field {name!r}'
            )
        return getattr(self.row, name)

    def set(self: R, name: str, value: Any) -> R:
        if not self.has_field(name):
            raise exceptions.UnknownProperty(
                f'{self.model.__tablename__} has no field {name!r}'
            )
        setattr(self.row, name, value)
        return self

    def persist(self) -> None:
        """Insert or update the row, assigning its primary key."""
        with util.transaction() as session:
            session.add(self.row)
            session.flush()

    def destroy(self) -> None:
        """Delete the row. Floating records have nothing to delete."""
        if self.floating():
            return
        with util.transaction() as session:
            session.delete(self.row)
            session.flush()

    def __repr__(self) -> str:
        return f'<{type(self).__name__} {self.get_primary()!r}>'


class ResultSet:
    """Records returned by :meth:`Requester.execute`, in key order."""

    def __init__(self, records: List[Any]) -> None:
        self._records = records

    def first(self) -> Optional[Any]:
        """The first record, or ``None`` if nothing matched."""
        if self._records:
            return self._records[0]
        return None

    def __iter__(self) -> Iterator[Any]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)


class Requester:
    """Builds a query against one record type."""

    def __init__(self, record_class: Type[Record]) -> None:
        self.record_class = record_class
        self._clauses: List[Any] = []

    def add_clause_equals(self, name: str, value: Any) -> 'Requester':
        """Only match records whose field ``name`` equals ``value``."""
        if not self.record_class.has_field(name):
            raise exceptions.UnknownProperty(
                f'{self.record_class.model.__tablename__} has no field'
                f' {name!r}'
            )
        column = getattr(self.record_class.model, name)
        self._clauses.append(column == value)
        return self

    def execute(self) -> ResultSet:
        model = self.record_class.model
        pk = getattr(model, self.record_class.primary_key())
        rows = (
            util.current_session().query(model)
            .filter(*self._clauses)
            .order_by(pk)
            .all()
        )
        return ResultSet([self.record_class.from_row(row) for row in rows])


class Principal(Record):
    """DAV principal, addressed as ``principals/<username>``."""

    model = DBPrincipal


class Calendar(Record):
    model = DBCalendar


class AddressBook(Record):
    model = DBAddressBook
