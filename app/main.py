from fastapi import APIRouter, FastAPI

from app.api.routes import user
from app.config import load_settings
from app.errors import ConfigError
from app.log import log, setup_logging
from app.server import serve

USER_PREFIX = "/api/user"


def create_app(user_router: APIRouter | None = None) -> FastAPI:
    app = FastAPI(
        title="User API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.include_router(user_router or user.router, prefix=USER_PREFIX, tags=["user"])

    return app


app = create_app()


def main() -> None:
    try:
        settings = load_settings()
    except ConfigError as e:
        log().error(f"Startup aborted: {e}")
        raise SystemExit(1) from e

    setup_logging(settings.LOG_LEVEL)
    serve(app, settings)


if __name__ == "__main__":
    main()
