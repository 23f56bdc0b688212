"""
The DAV account record.

An :class:`Account` keeps the credentials (``username``, ``digesta1``) in the
``users`` table, and is bound to the principal ``principals/<username>``
which holds the profile (``displayname``, ``email``). Field access falls
through from the account to its principal, so callers see a single set of
properties.

Persisting an account persists its principal first, then the account, and
on creation provisions a default calendar and a default address book.
Destroying an account removes the principal and every calendar and address
book owned by it.

.. note::

   Calendar objects and cards inside the owned calendars and address books
   are not deleted along with the account.

"""

from typing import Any, Optional
from urllib.parse import quote
import logging

from . import exceptions, util
from .models import DBUser
from .records import AddressBook, Calendar, Principal, Record, Requester

logger = logging.getLogger(__name__)

PRINCIPAL_PREFIX = 'principals/'
DEFAULT_URI = 'default'
DEFAULT_COMPONENTS = 'VEVENT,VTODO'
TRANSIENT_FIELDS = ('password', 'passwordconfirm')
"""Form fields that are accepted by :meth:`Account.set` but never stored."""


def principal_uri_for(username: str) -> str:
    """Get the URI of the principal for ``username``."""
    return PRINCIPAL_PREFIX + username


class Account(Record):
    """A user account and its bound principal."""

    model = DBUser

    realm: Optional[str] = None
    """Authentication realm; read from the app config when not given."""

    principal: Optional[Principal] = None
    """Bound principal. May be missing for an account loaded from the DB."""

    def __init__(self, primary: Optional[Any] = None,
                 realm: Optional[str] = None) -> None:
        self.realm = realm
        super().__init__(primary)

    @property
    def principal_uri(self) -> str:
        return principal_uri_for(self.get('username'))

    def init_from_row(self, row: Any) -> None:
        super().init_from_row(row)
        self.principal = (
            Principal.get_base_requester()
            .add_clause_equals('uri', self.principal_uri)
            .execute()
            .first()
        )

    def init_floating(self) -> None:
        super().init_floating()
        self.principal = Principal()

    def get_address_books_base_requester(self) -> Requester:
        """Get a requester over the address books owned by this account."""
        return AddressBook.get_base_requester() \
            .add_clause_equals('principaluri', self.principal_uri)

    def get_calendars_base_requester(self) -> Requester:
        """Get a requester over the calendars owned by this account."""
        return Calendar.get_base_requester() \
            .add_clause_equals('principaluri', self.principal_uri)

    def get(self, name: str) -> Any:
        """
        Get a field of the account, or else of its principal.

        Password fields always read as empty. A field that the account does
        not have reads as empty while no principal is bound.
        """
        if name in TRANSIENT_FIELDS:
            return ''
        if self.has_field(name):
            return super().get(name)
        if self.principal is not None:
            return self.principal.get(name)
        return ''

    def set(self, name: str, value: Any) -> 'Account':
        """
        Set a field of the account, or else of its principal.

        Setting a non-empty ``password`` stores its digest in ``digesta1``;
        ``passwordconfirm`` is accepted and ignored. Writes to fields the
        account does not have are dropped while no principal is bound.
        """
        if name in TRANSIENT_FIELDS:
            if name == 'password' and value:
                super().set('digesta1',
                            self.get_password_hash_for_password(value))
            return self

        if self.has_field(name):
            super().set(name, value)
        elif self.principal is not None:
            self.principal.set(name, value)
        else:
            logger.debug('No principal bound to %r, dropping %s',
                         self.get('username'), name)
        return self

    def persist(self) -> None:
        """
        Save the account, its principal, and on creation its collections.

        Everything is written in one transaction. If it fails, an account
        that was floating is left floating, so it can be persisted again.

        Raises
        ------
        :class:`.exceptions.PrincipalNotBound`
            If the account was loaded without a matching principal.
        ValueError
            If the username is empty.

        """
        if self.principal is None:
            raise exceptions.PrincipalNotBound(
                f'No principal bound to account {self.get_primary()!r}'
            )
        if not self.get('username'):
            raise ValueError('Username must be set')

        floating = self.floating()
        principal_floating = self.principal.floating()
        try:
            with util.transaction():
                # The principal goes first; collections are looked up by its
                # URI.
                self.principal.set('uri', self.principal_uri)
                self.principal.persist()

                super().persist()

                if floating:
                    self._create_default_calendar()
                    self._create_default_address_book()
        except Exception:
            # The rollback undid the inserts but not the assigned keys.
            if floating:
                self.unset_primary()
            if principal_floating:
                self.principal.unset_primary()
            raise
        if floating:
            logger.info('Created account %s', self.get('username'))

    def _create_default_calendar(self) -> None:
        calendar = Calendar()
        calendar.set('principaluri', self.principal_uri) \
            .set('displayname', 'Default calendar') \
            .set('uri', DEFAULT_URI) \
            .set('description', 'Default calendar') \
            .set('components', DEFAULT_COMPONENTS)
        calendar.persist()

    def _create_default_address_book(self) -> None:
        address_book = AddressBook()
        address_book.set('principaluri', self.principal_uri) \
            .set('displayname', 'Default Address Book') \
            .set('uri', DEFAULT_URI) \
            .set('description',
                 f"Default Address Book for {self.get('displayname')}")
        address_book.persist()

    def destroy(self) -> None:
        """
        Delete the account with its principal, calendars and address books.

        Everything is deleted in one transaction. Calendar objects and cards
        are left in place.
        """
        username = self.get('username')
        with util.transaction():
            if self.principal is not None:
                self.principal.destroy()

            for calendar in self.get_calendars_base_requester().execute():
                calendar.destroy()

            for address_book in \
                    self.get_address_books_base_requester().execute():
                address_book.destroy()

            super().destroy()
        logger.info('Deleted account %s', username)

    def get_mailto_uri(self) -> str:
        """Get a ``mailto:`` URI naming this account's display name."""
        mailbox = f"{self.get('displayname')} <{self.get('email')}>"
        return 'mailto:' + quote(mailbox, safe='')

    def get_password_hash_for_password(self, password: str) -> str:
        """Get the Digest ``A1`` hash of ``password`` for this account."""
        realm = self.realm
        if realm is None:
            realm = util.get_auth_realm()
        return util.digest_a1(self.get('username'), realm, password)
