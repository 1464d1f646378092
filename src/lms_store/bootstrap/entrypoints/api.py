import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from lms_store.bootstrap.configs import Config, load_settings
from lms_store.bootstrap.ioc.containers import fastapi_container
from lms_store.infrastructure.log.main import configure_logging
from lms_store.presentation.api.middlewares.setup import setup_middlewares
from lms_store.presentation.api.root import root_router
from lms_store.presentation.exceptions import setup_exception_handlers

logger = logging.getLogger(__name__)


def init_routers(app: FastAPI) -> None:
    app.include_router(root_router)
    setup_exception_handlers(app)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    yield
    # Closes the store (pending sync), the httpx client and the motor client
    await app.state.dishka_container.close()
    logger.info("Application stopped")


def create_app(
    config: Config | None = None,
    container: AsyncContainer | None = None,
) -> FastAPI:
    load_dotenv()
    if config is None:
        config = load_settings()
    configure_logging(config.log_level)

    app = FastAPI(
        title="LMS Canonical Store",
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
    )
    init_routers(app)
    setup_middlewares(app)
    if container is None:
        container = fastapi_container(config)
    setup_dishka(container=container, app=app)

    return app
