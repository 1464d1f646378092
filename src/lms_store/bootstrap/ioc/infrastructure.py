import logging
from collections.abc import AsyncIterator
from typing import Any

import httpx
from adaptix import Retort
from dishka import Provider, Scope, provide
from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)

from lms_store.application.course_gateway import RemoteCourseGateway
from lms_store.application.reconciliation import CourseReconciler
from lms_store.application.state_storage import StateStorage
from lms_store.bootstrap.configs import CourseApiConfig, MongoDBConfig, StoreConfig
from lms_store.infrastructure.http.course_api_client import (
    HttpCourseGateway,
    build_http_client,
)
from lms_store.infrastructure.serialization import build_retort
from lms_store.infrastructure.storage.mongo_state_storage import MongoStateStorage

logger = logging.getLogger(__name__)


class InfrastructureProvider(Provider):
    scope = Scope.APP

    @provide
    def get_retort(self) -> Retort:
        return build_retort()

    @provide
    async def get_http_client(
        self,
        config: CourseApiConfig,
    ) -> AsyncIterator[httpx.AsyncClient]:
        client = build_http_client(config)
        logger.debug("Course API client was initialized for %s", config.base_url)
        yield client
        await client.aclose()
        logger.debug("Course API client was closed")

    @provide
    def get_course_gateway(
        self,
        client: httpx.AsyncClient,
        retort: Retort,
    ) -> RemoteCourseGateway:
        return HttpCourseGateway(client=client, retort=retort)

    @provide
    def get_reconciler(
        self,
        gateway: RemoteCourseGateway,
        config: CourseApiConfig,
    ) -> CourseReconciler:
        return CourseReconciler(gateway=gateway, limit=config.sync_limit)


class MongoProvider(Provider):
    scope = Scope.APP

    @provide
    async def get_mongo_client(
        self,
        config: MongoDBConfig,
    ) -> AsyncIterator[AsyncIOMotorClient[dict[str, Any]]]:
        client: AsyncIOMotorClient[dict[str, Any]] = AsyncIOMotorClient(
            config.uri,
        )
        logger.debug("MongoDB client was initialized")
        yield client
        client.close()
        logger.debug("MongoDB client was closed")

    @provide
    def get_database(
        self,
        client: AsyncIOMotorClient[dict[str, Any]],
        config: MongoDBConfig,
    ) -> AsyncIOMotorDatabase[dict[str, Any]]:
        database = client[config.db_name]
        logger.debug("Database '%s' was initialized", config.db_name)
        return database

    @provide
    def get_collection(
        self,
        database: AsyncIOMotorDatabase[dict[str, Any]],
        config: StoreConfig,
    ) -> AsyncIOMotorCollection[dict[str, Any]]:
        return database[config.collection_name]

    @provide
    def get_state_storage(
        self,
        collection: AsyncIOMotorCollection[dict[str, Any]],
        retort: Retort,
        config: StoreConfig,
    ) -> StateStorage:
        return MongoStateStorage(
            collection=collection,
            retort=retort,
            storage_key=config.storage_key,
        )
