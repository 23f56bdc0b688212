"""Tests for :mod:`davaccounts.records`."""

from unittest import TestCase

from .. import exceptions, models
from ..records import AddressBook, Calendar, Principal
from .util import temporary_db


class TestRecord(TestCase):
    """Field access and persistence of a single record."""

    def test_floating_defaults(self):
        """A new record floats and carries the column defaults."""
        with temporary_db():
            calendar = Calendar()
            self.assertTrue(calendar.floating())
            self.assertEqual(calendar.get('displayname'), '')
            self.assertEqual(calendar.get('synctoken'), 1)
            self.assertEqual(calendar.get('transparent'), 0)

    def test_persist_assigns_key(self):
        """Persisting inserts the row and assigns its primary key."""
        with temporary_db() as session:
            principal = Principal()
            principal.set('uri', 'principals/jane').set('email', 'j@x.org')
            principal.persist()
            self.assertFalse(principal.floating())
            row = session.get(models.DBPrincipal, principal.get_primary())
            self.assertEqual(row.email, 'j@x.org')

    def test_init_by_primary(self):
        """A record can be loaded by primary key."""
        with temporary_db():
            principal = Principal().set('uri', 'principals/jane')
            principal.persist()
            loaded = Principal(principal.get_primary())
            self.assertEqual(loaded.get('uri'), 'principals/jane')

    def test_init_by_unknown_primary(self):
        """Loading a key that does not exist raises RecordNotFound."""
        with temporary_db():
            with self.assertRaises(exceptions.RecordNotFound):
                Principal(4242)

    def test_unknown_field(self):
        """Fields that the table lacks are refused."""
        with temporary_db():
            principal = Principal()
            self.assertFalse(principal.has_field('components'))
            with self.assertRaises(exceptions.UnknownProperty):
                principal.get('components')
            with self.assertRaises(exceptions.UnknownProperty):
                principal.set('components', 'VEVENT')

    def test_destroy(self):
        """Destroying removes the row; a floating record is left alone."""
        with temporary_db() as session:
            book = AddressBook().set('uri', 'work')
            book.persist()
            book.destroy()
            self.assertEqual(session.query(models.DBAddressBook).count(), 0)
            AddressBook().destroy()


class TestRequester(TestCase):
    """Queries built with :class:`.Requester`."""

    def setUp(self):
        self._db = temporary_db()
        self.session = self._db.__enter__()
        for principaluri, uri in [('principals/a', 'default'),
                                  ('principals/a', 'work'),
                                  ('principals/b', 'default')]:
            Calendar().set('principaluri', principaluri) \
                .set('uri', uri) \
                .persist()

    def tearDown(self):
        self._db.__exit__(None, None, None)

    def test_equality_clauses(self):
        """Clauses narrow the result set."""
        result = Calendar.get_base_requester() \
            .add_clause_equals('principaluri', 'principals/a') \
            .execute()
        self.assertEqual(len(result), 2)
        self.assertEqual([c.get('uri') for c in result], ['default', 'work'])

        result = Calendar.get_base_requester() \
            .add_clause_equals('principaluri', 'principals/a') \
            .add_clause_equals('uri', 'work') \
            .execute()
        self.assertEqual(len(result), 1)
        self.assertIsInstance(result.first(), Calendar)

    def test_no_match(self):
        """An empty result set has no first record."""
        result = Calendar.get_base_requester() \
            .add_clause_equals('principaluri', 'principals/z') \
            .execute()
        self.assertEqual(len(result), 0)
        self.assertIsNone(result.first())

    def test_unknown_field(self):
        """Clauses on unknown fields are refused."""
        with self.assertRaises(exceptions.UnknownProperty):
            Calendar.get_base_requester().add_clause_equals('nope', 1)
