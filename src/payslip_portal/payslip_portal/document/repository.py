from __future__ import annotations

from typing import Any, Protocol


class DocumentStore(Protocol):
    """Interface of the remote document store.

    Note (DIP): the reconciler depends on this interface, not on a concrete
    HTTP client, so tests can use in-memory fakes.
    """

    def fetch(self) -> dict[str, Any]:
        """Return the raw response body (``{"record": {...}}``).

        Raises DocumentStoreError on transport, status or JSON failures.
        """

        raise NotImplementedError

    def replace(self, document: dict[str, Any]) -> None:
        """Overwrite the whole remote document.

        Raises DocumentStoreError on transport or status failures.
        """

        raise NotImplementedError
