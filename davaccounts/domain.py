"""Defines account concepts for use outside of the database layer."""

from typing import NamedTuple


class AccountSummary(NamedTuple):
    """An account as listed to administrators."""

    account_id: str
    """Primary key of the account."""

    username: str
    """Login name; the principal is ``principals/<username>``."""

    displayname: str
    """Name shown in CalDAV/CardDAV clients."""

    email: str

    mailto: str
    """``mailto:`` URI combining display name and address."""

    calendars: int = 0
    """Number of calendars owned by the account's principal."""

    addressbooks: int = 0
    """Number of address books owned by the account's principal."""
