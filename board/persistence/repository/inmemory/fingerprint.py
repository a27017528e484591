"""In-memory fingerprint store for testing."""

from typing import Optional

from board.domain.error import StorageUnavailableError
from board.domain.repository.fingerprint import FingerprintStore


class InMemoryFingerprintStore(FingerprintStore):
    """Dict-backed client storage.

    With available=False every access raises StorageUnavailableError, like a
    browser with storage disabled.
    """

    def __init__(
        self, values: dict[str, str] | None = None, available: bool = True
    ) -> None:
        self.values: dict[str, str] = dict(values or {})
        self.available = available
        self.writes = 0

    def get(self, key: str) -> Optional[str]:
        if not self.available:
            raise StorageUnavailableError("Client storage is disabled")
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        if not self.available:
            raise StorageUnavailableError("Client storage is disabled")
        self.values[key] = value
        self.writes += 1
