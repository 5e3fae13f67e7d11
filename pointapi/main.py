import logging
from fastapi import FastAPI, Request
from mangum import Mangum
from starlette.middleware.cors import CORSMiddleware

from pointapi import containers
from pointapi.config import settings
from pointapi.core.exception_handlers import register_exception_handlers
from pointapi.logging_config import setup_logging
from pointapi.routers import health_router, point_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME)
    app.container = containers.Container()  # type: ignore

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"Request: {request.method} {request.url}")
        response = await call_next(request)
        logger.info(f"Response: {response.status_code}")
        return response

    register_exception_handlers(app)

    app.include_router(health_router.router)
    app.include_router(point_router.router, prefix=settings.API_V1_STR)
    return app


app = create_app()

handler = Mangum(app)
