"""
CalDAV/CardDAV account management.

This package manages the accounts of a SabreDAV-style DAV server. Each
account is a row in ``users`` holding the login and the HTTP Digest password
hash, bound to a principal (``principals/<username>``) holding the profile
that DAV clients see. Creating an account provisions a default calendar and
a default address book owned by its principal; deleting it removes the
principal and every calendar and address book the principal owns.

Quick start
-----------

.. code-block:: python

   from davaccounts import accounts
   from davaccounts.factory import create_app

   app = create_app()
   with app.app_context():
       account = accounts.create_account('jane', 'Jane Doe',
                                         'jane@example.com', 's3cret')
       print(account.get_mailto_uri())

The same operations are available from the command line as
``dav-accounts create|passwd|delete|list``.

Password hashes are bound to the ``AUTH_REALM`` configuration value, which
has to match the realm the DAV server authenticates with.
"""

from .account import Account
from .records import AddressBook, Calendar, Principal
