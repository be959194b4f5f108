# =============================================================================
# app/server.py - Server Startup
# =============================================================================
# Binds the listening socket before handing it to uvicorn, so a port that
# is already taken is logged and turned into exit status 1 before any
# request can be served.
# =============================================================================

import logging
import socket
import sys

import uvicorn

from app.config import settings

logger = logging.getLogger(__name__)


def bind_socket(host: str, port: int) -> socket.socket:
    """
    Create a listening TCP socket on (host, port).

    Raises:
        OSError: If the address cannot be bound
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(socket.SOMAXCONN)
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def serve(host: str | None = None, port: int | None = None) -> None:
    """
    Start the API server and block until it shuts down.

    On bind failure the error is logged and the process exits with
    status 1. If uvicorn returns without having started (for example a
    failing lifespan hook) the process exits with status 3.
    """
    host = host or settings.API_HOST
    port = port if port is not None else settings.API_PORT

    # Importing the app configures logging
    from app.main import app

    try:
        sock = bind_socket(host, port)
    except OSError as e:
        logger.error(f"Failed to bind {host}:{port}: {e}")
        sys.exit(1)

    bound_port = sock.getsockname()[1]
    logger.info(f"Server listening on http://{host}:{bound_port}")

    config = uvicorn.Config(
        app,
        log_level="debug" if settings.DEBUG else "info",
        log_config=None,
    )
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()

    if not server.started:
        logger.error("Server failed to start")
        sys.exit(3)
