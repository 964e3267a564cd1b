import logging
import socket
import sys

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from cors_echo_service.models import CorsPolicy
from cors_echo_service.utils import cors_headers, echo_text, hello_text

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cors-echo-service")

HOST = "0.0.0.0"
PORT = 3000
CORS_POLICY = CorsPolicy()

# Interactive docs would otherwise answer GET /docs and friends with 200
app = FastAPI(
    title="CORS Echo Service", docs_url=None, redoc_url=None, openapi_url=None
)


def _request_path(request: Request) -> str:
    # Match on the path as sent, so percent-escapes are not folded
    raw = request.scope.get("raw_path")
    if raw is None:
        return request.scope["path"]
    return raw.decode("latin-1")


async def dispatch(request: Request) -> Response:
    """Answer every request by (method, path).

    OPTIONS on any target is a preflight, GET /api/hello greets and
    POST /api/echo echoes the body. Anything else is a 404, including a known
    path hit with the wrong method. All responses carry the CORS headers.

    A failure while reading the echo body propagates to the server.
    """
    method = request.method
    path = _request_path(request)
    headers = cors_headers(CORS_POLICY)

    if method == "OPTIONS":
        response = Response(status_code=200, headers=headers)
    elif method == "GET" and path == "/api/hello":
        response = PlainTextResponse(hello_text(), headers=headers)
    elif method == "POST" and path == "/api/echo":
        raw = await request.body()
        response = PlainTextResponse(echo_text(raw), headers=headers)
    else:
        response = PlainTextResponse("Not Found", status_code=404, headers=headers)

    logger.debug("%s %s -> %d", method, path, response.status_code)
    return response


@app.middleware("http")
async def answer_all_requests(request: Request, call_next):
    # Every HTTP request stops here; the router never sees it
    return await dispatch(request)


def bind_listener(host: str, port: int) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    return sock


def serve(host: str = HOST, port: int = PORT) -> None:
    """Bind the listener, announce it, and run until stopped or failed."""
    try:
        sock = bind_listener(host, port)
    except OSError as e:
        print(f"server error: {e}", file=sys.stderr)
        sys.exit(1)

    bound_host, bound_port = sock.getsockname()[:2]
    print(f"Listening on http://{bound_host}:{bound_port}", flush=True)
    server = uvicorn.Server(uvicorn.Config(app, log_level="info"))
    try:
        server.run(sockets=[sock])
    except Exception as e:
        print(f"server error: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        sock.close()


if __name__ == "__main__":
    serve()
