"""Todo API application: FastAPI for local hosting, Mangum for API Gateway."""

import structlog
from fastapi import FastAPI
from mangum import Mangum

from todo_api import __version__
from todo_api.config import get_config, is_development
from todo_api.database import configure_engine
from todo_api.logging import configure_logging
from todo_api.routers import todos

logger = structlog.get_logger(__name__)

OPENAPI_URL = "/swagger/v1/swagger.json"


def create_app(cfg: dict | None = None) -> FastAPI:
    cfg = cfg or get_config()
    configure_logging(cfg)
    configure_engine(cfg["database_url"])

    dev = is_development(cfg)
    app = FastAPI(
        title=cfg["app_name"],
        description="Minimal CRUD API over an in-memory Todo list",
        version=__version__,
        debug=dev,
        # API docs only in development, with the UI at the site root
        docs_url="/" if dev else None,
        redoc_url=None,
        openapi_url=OPENAPI_URL if dev else None,
    )

    app.include_router(todos.router, prefix="/api")

    logger.info("app_created", environment=cfg["environment"], docs=dev)
    return app


app = create_app()

handler = Mangum(app, lifespan="off")


def run():
    import uvicorn

    cfg = get_config()
    uvicorn.run(app, host=cfg["host"], port=cfg["port"], log_config=None)


if __name__ == "__main__":
    run()
