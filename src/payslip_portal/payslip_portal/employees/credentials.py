from __future__ import annotations

from typing import Protocol


class CredentialScheme(Protocol):
    """How passwords are stored and checked.

    Swapping this for a hashed scheme must not touch the services.
    """

    def encode(self, raw_password: str) -> str:
        raise NotImplementedError

    def verify(self, stored: str, raw_password: str) -> bool:
        raise NotImplementedError


class PlaintextCredentials(CredentialScheme):
    """Stores passwords as given and compares them verbatim.

    Matches the existing shared document, which holds plaintext passwords.
    """

    def encode(self, raw_password: str) -> str:
        return raw_password

    def verify(self, stored: str, raw_password: str) -> bool:
        return stored == raw_password
