import logging

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from course_studio.bootstrap.configs import AuthConfig, Config, MongoDBConfig
from course_studio.bootstrap.ioc.application import ApplicationProvider
from course_studio.bootstrap.ioc.config import AppConfigProvider
from course_studio.bootstrap.ioc.infrastructure import InfrastructureProvider

logger = logging.getLogger(__name__)


def fastapi_container(
        config: Config,
) -> AsyncContainer:
    logger.info("Fastapi DI setup")

    return make_async_container(
        AppConfigProvider(),
        InfrastructureProvider(),
        ApplicationProvider(),
        FastapiProvider(),
        context={
            MongoDBConfig: config.database,
            AuthConfig: config.auth,
        },
    )
