"""FastAPI keep-alive endpoint and its uvicorn server."""

import socket
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from watchbot.errors import LivenessBindError

LIVENESS_BODY = "Discord bot is active and running!"

app = FastAPI(title="watchbot keep-alive", docs_url=None, redoc_url=None, openapi_url=None)


def _log(msg: str):
    print(msg, file=sys.stderr)


@app.api_route("/", methods=["GET", "HEAD"], response_class=PlainTextResponse)
async def root():
    """Answer uptime monitors so the host keeps the process awake."""
    return LIVENESS_BODY


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind the listening socket up front so a taken port fails startup."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
    except OSError as e:
        sock.close()
        raise LivenessBindError(host, port, e) from e
    sock.set_inheritable(True)
    return sock


def create_server(log_level: str = "info") -> uvicorn.Server:
    return uvicorn.Server(uvicorn.Config(app, log_level=log_level))


async def serve(server: uvicorn.Server, sock: socket.socket) -> None:
    host, port = sock.getsockname()[:2]
    _log(f"Keep-Alive Web Server is listening on port {port} ({host})")
    await server.serve(sockets=[sock])
