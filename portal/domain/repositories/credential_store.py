"""
Credential Store Interface.
The gate reads principals through this contract; the login flow additionally
uses ``compare`` to check a candidate password.
"""

from typing import Optional, Protocol, TypeVar

from portal.domain.principal import PrincipalRecord

P = TypeVar("P", bound=PrincipalRecord, covariant=True)


class CredentialStore(Protocol[P]):
    """Lookup of one principal variant (users or employees)."""

    def find_by_id(self, principal_id: str) -> Optional[P]:
        """Get a principal by primary key."""
        ...

    def find_by_login(self, identifier: str) -> Optional[P]:
        """Get a principal by its unique login identifier."""
        ...

    def compare(self, principal: PrincipalRecord, candidate: str) -> bool:
        """Check a candidate password against the stored hash."""
        ...
