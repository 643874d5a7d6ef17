"""
Process entry point and HTTP server.

Loads settings, builds the application and serves it with uvicorn.
A failure to bind the port (already in use, insufficient permissions)
is fatal: uvicorn logs the error and the process exits with a non-zero
status.
"""

import logging

import uvicorn
from fastapi import FastAPI

from devops_demo.config import Settings, get_settings

logger = logging.getLogger("devops_demo.server")


class ApplicationServer(uvicorn.Server):
    """uvicorn server that reports the bound port and can be stopped externally."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("Server listening on port %d", self.bound_port())

    def bound_port(self) -> int:
        """Port of the listening socket, which differs from the config for port 0."""
        for server in self.servers:
            for sock in server.sockets:
                return sock.getsockname()[1]
        return self.config.port

    def listen(self) -> None:
        """Bind and run the accept loop until shutdown is requested."""
        self.run()

    def stop(self) -> None:
        """Ask the accept loop to exit after in-flight requests finish."""
        self.should_exit = True


def create_server(app: FastAPI, settings: Settings) -> ApplicationServer:
    """Bind ``app`` to the configured host and port without starting it."""
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,  # keep the format installed by create_app
        access_log=False,
    )
    return ApplicationServer(config)


def main() -> None:
    from devops_demo.main import create_app

    settings = get_settings()
    app = create_app(settings)
    server = create_server(app, settings)
    server.listen()


if __name__ == "__main__":
    main()
