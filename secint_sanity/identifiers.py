"""Object identifiers for security integrations.

Security integrations are account-level objects, so their identifier has a
single name part.  Identifier syntax rules live here; the validation engine
only asks whether an identifier is valid.
"""

import uuid
from typing import Any

# Maximum length of an object name part, in characters.
MAX_IDENTIFIER_LENGTH = 255


class AccountObjectIdentifier:
    """Single-part identifier of an account-level object."""

    def __init__(self, name: str):
        if len(name) >= 2 and name.startswith('"') and name.endswith('"'):
            name = name[1:-1]
        self._name = name

    def name(self) -> str:
        return self._name

    def fully_qualified_name(self) -> str:
        if not self._name:
            return ""
        return '"' + self._name.replace('"', '""') + '"'

    def __eq__(self, other):
        if not isinstance(other, AccountObjectIdentifier):
            return NotImplemented
        return self._name == other._name

    def __hash__(self):
        return hash(self._name)

    def __repr__(self):
        return f"AccountObjectIdentifier({self._name!r})"

    def __str__(self):
        return self.fully_qualified_name()


def valid_object_identifier(identifier: Any) -> bool:
    """Return True if ``identifier`` is a syntactically usable object name.

    Accepts ``AccountObjectIdentifier`` instances and plain strings.  Never
    touches the network.
    """
    if isinstance(identifier, str):
        identifier = AccountObjectIdentifier(identifier)
    if not isinstance(identifier, AccountObjectIdentifier):
        return False
    name = identifier.name()
    return 0 < len(name) <= MAX_IDENTIFIER_LENGTH


def random_account_object_identifier(prefix: str = "SECINT_SANITY_TEST_") -> AccountObjectIdentifier:
    """Generate a unique identifier with an 8-character hex suffix."""
    return AccountObjectIdentifier(f"{prefix}{uuid.uuid4().hex[:8].upper()}")
