"""Account directory contract consumed by the account service.

The service only depends on this protocol. AccountOperations is the SQLite
implementation; tests may substitute any object with the same methods.

Error contract:
- ResourceNotFound: no account matches (a normal negative lookup result)
- ConflictError: the phone number is already taken, detected by the
  storage layer's unique constraint on create or update
- InternalError: any other storage failure
"""

from typing import Protocol, runtime_checkable

from ..auth.schemas import Account


@runtime_checkable
class AccountDirectory(Protocol):
    """Lookup and persistence of accounts keyed by phone number and id."""

    def find_by_phone(self, phone: str) -> Account:
        """Return the account registered to phone, or raise ResourceNotFound."""
        ...

    def find_by_id(self, account_id: int) -> Account:
        """Return the account with the given id, or raise ResourceNotFound."""
        ...

    def create(self, account: Account) -> Account:
        """Persist a new account and return it with its assigned id."""
        ...

    def update(self, account: Account) -> Account:
        """Persist phone number and full name changes of an existing account."""
        ...
