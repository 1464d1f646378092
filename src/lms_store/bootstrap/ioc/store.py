import logging
from collections.abc import AsyncIterator

from dishka import Provider, Scope, provide

from lms_store.application.canonical_store import CanonicalStore
from lms_store.application.initial_dataset import load_initial_state
from lms_store.application.reconciliation import CourseReconciler
from lms_store.application.state_storage import StateStorage

logger = logging.getLogger(__name__)


class PersistentStoreProvider(Provider):
    scope = Scope.APP

    @provide
    async def get_store(
        self,
        storage: StateStorage,
        reconciler: CourseReconciler,
    ) -> AsyncIterator[CanonicalStore]:
        store = CanonicalStore(
            initial_state=load_initial_state,
            storage=storage,
            reconciler=reconciler,
        )
        logger.debug("Canonical store created with persistent storage")
        yield store
        await store.close()


class EphemeralStoreProvider(Provider):
    """Built-in dataset only; nothing is loaded or saved"""

    scope = Scope.APP

    @provide
    async def get_store(
        self,
        reconciler: CourseReconciler,
    ) -> AsyncIterator[CanonicalStore]:
        store = CanonicalStore(
            initial_state=load_initial_state,
            reconciler=reconciler,
        )
        logger.debug("Canonical store created without persistence")
        yield store
        await store.close()
