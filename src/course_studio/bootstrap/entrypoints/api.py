from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from course_studio.bootstrap.configs import load_settings
from course_studio.bootstrap.ioc.containers import fastapi_container
from course_studio.infrastructure.log.main import configure_logging
from course_studio.presentation.api.middlewares.setup import setup_middlewares
from course_studio.presentation.api.root import root_router
from course_studio.presentation.exceptions import setup_exception_handlers


def init_routers(app: FastAPI) -> None:
    app.include_router(root_router)
    setup_exception_handlers(app)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    yield
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """
    Build the API application

    A prepared container can be passed in, otherwise settings are read
    from the environment (.env is loaded first).
    """
    if container is None:
        load_dotenv()
        config = load_settings()
        configure_logging(config.logging.level, config.logging.log_format)
        container = fastapi_container(config)

    app = FastAPI(
        title="Course Studio",
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
    )
    init_routers(app)
    setup_middlewares(app)
    setup_dishka(container=container, app=app)

    return app
