import logging
from dataclasses import dataclass
from typing import Any

from adaptix import Retort
from adaptix.load_error import AggregateLoadError, LoadError
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from lms_store.application.exceptions.base import StateStorageError
from lms_store.application.state_storage import StateStorage
from lms_store.domain.state import PersistedSnapshot, StoreState

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class MongoStateStorage(StateStorage):
    """Keeps the whole store as one document: {_id: <key>, state: {...}}"""

    collection: AsyncIOMotorCollection[dict[str, Any]]
    retort: Retort
    storage_key: str

    async def load(self) -> PersistedSnapshot | None:
        try:
            document = await self.collection.find_one({"_id": self.storage_key})
        except PyMongoError as e:
            raise StateStorageError(self.storage_key, str(e)) from e

        if document is None:
            logger.info("No persisted state under %s", self.storage_key)
            return None

        raw_state = document.get("state")
        if not isinstance(raw_state, dict):
            raise StateStorageError(self.storage_key, "state section is missing")

        try:
            snapshot = self.retort.load(raw_state, PersistedSnapshot)
        except (LoadError, AggregateLoadError) as e:
            raise StateStorageError(self.storage_key, repr(e)) from e

        logger.debug("Loaded persisted state %s", self.storage_key)
        return snapshot

    async def save(self, state: StoreState) -> None:
        payload = self.retort.dump(state)

        try:
            await self.collection.replace_one(
                {"_id": self.storage_key},
                {"_id": self.storage_key, "state": payload},
                upsert=True,
            )
        except PyMongoError as e:
            raise StateStorageError(self.storage_key, str(e)) from e

        logger.debug(
            "Persisted state %s: %s courses",
            self.storage_key,
            len(state.courses),
        )
