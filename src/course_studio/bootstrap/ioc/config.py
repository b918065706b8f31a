from dishka import Provider, Scope, from_context

from course_studio.bootstrap.configs import AuthConfig, MongoDBConfig


class AppConfigProvider(Provider):
    scope = Scope.APP

    database_config = from_context(MongoDBConfig)
    auth_config = from_context(AuthConfig)
