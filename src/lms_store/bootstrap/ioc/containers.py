import logging

from dishka import AsyncContainer, Provider, make_async_container

from lms_store.bootstrap.configs import (
    Config,
    CourseApiConfig,
    MongoDBConfig,
    StoreConfig,
)
from lms_store.bootstrap.ioc.application import ApplicationProvider
from lms_store.bootstrap.ioc.config import AppConfigProvider, DatabaseConfigProvider
from lms_store.bootstrap.ioc.infrastructure import InfrastructureProvider, MongoProvider
from lms_store.bootstrap.ioc.store import EphemeralStoreProvider, PersistentStoreProvider

logger = logging.getLogger(__name__)


def store_providers(config: Config) -> list[Provider]:
    if config.database is None:
        logger.info("Store persistence disabled")
        return [EphemeralStoreProvider()]
    return [DatabaseConfigProvider(), MongoProvider(), PersistentStoreProvider()]


def fastapi_container(
        config: Config,
) -> AsyncContainer:
    logger.info("Fastapi DI setup")

    context: dict[type, object] = {
        CourseApiConfig: config.course_api,
        StoreConfig: config.store,
    }
    if config.database is not None:
        context[MongoDBConfig] = config.database

    return make_async_container(
        AppConfigProvider(),
        InfrastructureProvider(),
        *store_providers(config),
        ApplicationProvider(),
        context=context,
    )
