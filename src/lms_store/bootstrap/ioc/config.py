from dishka import Provider, Scope, from_context

from lms_store.bootstrap.configs import CourseApiConfig, MongoDBConfig, StoreConfig


class AppConfigProvider(Provider):
    scope = Scope.APP

    course_api_config = from_context(CourseApiConfig)
    store_config = from_context(StoreConfig)


class DatabaseConfigProvider(Provider):
    scope = Scope.APP

    database_config = from_context(MongoDBConfig)
