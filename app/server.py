import uvicorn
from fastapi import FastAPI

from app.config import Settings
from app.log import startup_log


def startup_message(port: int) -> str:
    return f"app running at http://localhost:{port}"


class AnnouncingServer(uvicorn.Server):
    """uvicorn server that logs the startup line once the socket is bound."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            startup_log().info(startup_message(self.config.port))


def build_server(application: FastAPI, settings: Settings) -> AnnouncingServer:
    config = uvicorn.Config(
        application,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return AnnouncingServer(config)


def serve(application: FastAPI, settings: Settings) -> None:
    build_server(application, settings).run()
