"""Fingerprint storage port.

Anonymous voters are identified by a token kept in client-side storage.
The storage is injected per request so the identity resolver never reaches
for a global.
"""

from abc import ABC, abstractmethod
from typing import Optional


class FingerprintStore(ABC):
    """Client storage holding single string values under fixed keys."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Read the value stored under key.

        Returns:
            The stored value, or None if absent

        Raises:
            StorageUnavailableError: If the storage cannot be read
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Persist value under key.

        Raises:
            StorageUnavailableError: If the storage cannot be written
        """
        pass
