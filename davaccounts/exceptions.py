"""Exceptions."""


class RecordNotFound(RuntimeError):
    """No record exists with the requested primary key."""


class NoSuchAccount(RecordNotFound):
    """Account does not exist."""


class UnknownProperty(RuntimeError):
    """The record type has no field with the requested name."""


class PrincipalNotBound(RuntimeError):
    """The account has no principal to keep in sync."""


class AccountExists(RuntimeError):
    """An account with the requested username already exists."""


class RegistrationFailed(RuntimeError):
    """Could not create the account and its default collections."""


class PasswordAuthenticationFailed(RuntimeError):
    """Password is not correct."""
