from abc import abstractmethod
from typing import Protocol

from lms_store.domain.state import PersistedSnapshot, StoreState


class StateStorage(Protocol):
    """Persistent home of the serialized store blob"""

    @abstractmethod
    async def load(self) -> PersistedSnapshot | None:
        """Return the persisted snapshot or None when nothing was saved yet.

        Raises StateStorageError when the backend is unreachable or the
        snapshot cannot be decoded.
        """
        raise NotImplementedError

    @abstractmethod
    async def save(self, state: StoreState) -> None:
        """Replace the persisted snapshot. Raises StateStorageError."""
        raise NotImplementedError
