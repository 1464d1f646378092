from dataclasses import dataclass
from os import environ

from lms_store.infrastructure.log.main import LoggingLevel

TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class MissingDatabaseConfigError(ValueError):

    @property
    def title(self) -> str:
        return "Required MongoDB environment variables are missing"


@dataclass(frozen=True)
class MongoDBConfig:
    host: str
    port: int
    user: str
    password: str
    db_name: str

    @property
    def uri(self) -> str:
        return (
            f"mongodb://{self.user}:{self.password}@{self.host}"
            f":{self.port}/"
        )


@dataclass(frozen=True)
class StoreConfig:
    persistence_enabled: bool = True
    storage_key: str = "lms-canonical-store"
    collection_name: str = "canonical_store"


@dataclass(frozen=True)
class CourseApiConfig:
    base_url: str = "http://localhost:3001"
    token: str | None = None
    timeout: float = 30.0
    sync_limit: int = 100


def load_database_config() -> MongoDBConfig:
    host = environ.get("MONGO_HOST")
    port = environ.get("MONGO_PORT")
    user = environ.get("MONGO_INITDB_ROOT_USERNAME")
    password = environ.get("MONGO_INITDB_ROOT_PASSWORD")
    db_name = environ.get("MONGO_DB_NAME")

    if (
            host is None
            or port is None
            or user is None
            or password is None
            or db_name is None
    ):
        raise MissingDatabaseConfigError

    return MongoDBConfig(
        host=host,
        port=int(port),
        user=user,
        password=password,
        db_name=db_name,
    )


def load_store_config() -> StoreConfig:
    return StoreConfig(
        persistence_enabled=environ.get("STORE_PERSISTENCE", "1").lower() in TRUTHY,
        storage_key=environ.get("STORE_STORAGE_KEY", "lms-canonical-store"),
        collection_name=environ.get("STORE_COLLECTION_NAME", "canonical_store"),
    )


def load_course_api_config() -> CourseApiConfig:
    return CourseApiConfig(
        base_url=environ.get("COURSE_API_URL", "http://localhost:3001"),
        token=environ.get("COURSE_API_TOKEN") or None,
        timeout=float(environ.get("COURSE_API_TIMEOUT", "30")),
        sync_limit=int(environ.get("COURSE_SYNC_LIMIT", "100")),
    )


@dataclass(frozen=True)
class Config:
    store: StoreConfig
    course_api: CourseApiConfig
    database: MongoDBConfig | None = None
    log_level: LoggingLevel = "INFO"


def load_settings() -> Config:
    store = load_store_config()
    database = load_database_config() if store.persistence_enabled else None
    log_level = environ.get("LOG_LEVEL", "INFO").upper()
    return Config(
        store=store,
        course_api=load_course_api_config(),
        database=database,
        log_level=log_level,  # type: ignore[arg-type]
    )
