"""Provide methods for working with DAV accounts."""

from typing import Any, List, Optional
import hmac
import logging

from sqlalchemy.exc import SQLAlchemyError

from . import domain, exceptions
from .account import Account
from .records import Principal

logger = logging.getLogger(__name__)


def username_exists(username: str) -> bool:
    """
    Determine whether an account with a particular username already exists.

    Parameters
    ----------
    username : str

    Returns
    -------
    bool

    """
    found = Account.get_base_requester() \
        .add_clause_equals('username', username) \
        .execute() \
        .first()
    return found is not None


def email_exists(email: str) -> bool:
    """
    Determine whether a principal with a particular address already exists.

    Parameters
    ----------
    email : str

    Returns
    -------
    bool

    """
    found = Principal.get_base_requester() \
        .add_clause_equals('email', email) \
        .execute() \
        .first()
    return found is not None


def get_account(account_id: Any, realm: Optional[str] = None) -> Account:
    """Load an account by primary key."""
    try:
        return Account(account_id, realm=realm)
    except exceptions.RecordNotFound as e:
        raise exceptions.NoSuchAccount('Account does not exist') from e


def get_account_by_username(username: str,
                            realm: Optional[str] = None) -> Account:
    """Load an account by username."""
    account = Account.get_base_requester() \
        .add_clause_equals('username', username) \
        .execute() \
        .first()
    if account is None:
        raise exceptions.NoSuchAccount(f'No account named {username!r}')
    account.realm = realm
    return account


def create_account(username: str, displayname: str, email: str,
                   password: str, realm: Optional[str] = None) -> Account:
    """
    Create a new account with its principal and default collections.

    Parameters
    ----------
    username : str
        Login for the account. Must be unique.
    displayname : str
        Name shown in CalDAV/CardDAV clients.
    email : str
    password : str
        Plain password; only its Digest hash is stored.
    realm : str
        Authentication realm. Defaults to the ``AUTH_REALM`` config.

    Returns
    -------
    :class:`.Account`

    Raises
    ------
    :class:`.exceptions.AccountExists`
    :class:`.exceptions.RegistrationFailed`

    """
    if not username:
        raise ValueError('Username is required')
    if not password:
        raise ValueError('Password is required')
    if username_exists(username):
        raise exceptions.AccountExists(f'Account {username!r} exists')

    # Username first: the password hash is computed over it.
    account = Account(realm=realm)
    account.set('username', username) \
        .set('displayname', displayname) \
        .set('email', email) \
        .set('password', password)
    try:
        account.persist()
    except SQLAlchemyError as e:
        logger.debug(e)
        raise exceptions.RegistrationFailed('Could not create account') from e
    return account


def update_account(account_id: Any, realm: Optional[str] = None,
                   **fields: Any) -> Account:
    """
    Update the fields of an existing account.

    The username cannot change once the account exists. An empty
    ``password`` keeps the current one.
    """
    account = get_account(account_id, realm=realm)
    username = fields.pop('username', account.get('username'))
    if username != account.get('username'):
        raise ValueError('Username cannot be changed')
    for name, value in fields.items():
        account.set(name, value)
    account.persist()
    return account


def delete_account(account_id: Any) -> None:
    """Delete an account with its principal and collections."""
    get_account(account_id).destroy()


def list_accounts() -> List[domain.AccountSummary]:
    """Summarize all accounts, in creation order."""
    return [_to_summary(account)
            for account in Account.get_base_requester().execute()]


def check_password(account: Account, password: str) -> None:
    """
    Check a password against the stored Digest hash.

    Raises
    ------
    :class:`.exceptions.PasswordAuthenticationFailed`

    """
    stored = account.get('digesta1') or ''
    given = account.get_password_hash_for_password(password)
    if not stored or not hmac.compare_digest(given, stored):
        raise exceptions.PasswordAuthenticationFailed('Incorrect password')


def _to_summary(account: Account) -> domain.AccountSummary:
    return domain.AccountSummary(
        account_id=str(account.get_primary()),
        username=account.get('username'),
        displayname=account.get('displayname'),
        email=account.get('email'),
        mailto=account.get_mailto_uri(),
        calendars=len(account.get_calendars_base_requester().execute()),
        addressbooks=len(account.get_address_books_base_requester().execute())
    )
