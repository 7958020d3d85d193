from contextlib import asynccontextmanager

from fastapi import FastAPI

from infra.adapter.local_scheduler import get_local_scheduler
from infra.bootstrap import build_status_check_service, setup_logging
from infra.config.config import get_config
from infra.web.routers.artifacts_router import router as artifacts_router
from infra.web.routers.stats_router import router as stats_router


def create_app() -> FastAPI:
    config = get_config()

    setup_logging(config)

    scheduler = get_local_scheduler()

    # fails here, before serving, when the credential cannot be loaded
    status_check_service = build_status_check_service(config, scheduler)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        scheduler.start()
        await status_check_service.start()

        yield

        scheduler.stop()

    app = FastAPI(
        title=config.APP_NAME,
        version=config.VERSION,
        root_path=config.ROOT_PATH,
        docs_url="/apidocs",
        lifespan=lifespan,
    )

    app.state.host = config.HOST
    app.state.port = config.PORT
    app.state.status_check_service = status_check_service

    app.include_router(stats_router)
    app.include_router(artifacts_router)

    return app
