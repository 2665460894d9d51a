#!/usr/bin/env python3
"""
Mock server for trying out the availability monitor.

This server behaves like a site whose front end rejects HEAD requests:
- HEAD requests: 405 Method Not Allowed
- GET requests: 200 OK, except for a configurable share of 503 responses

Point the monitor at it with:
    python -m updot --url http://localhost:8080/ --logging-type dev
"""

import random

from aiohttp import web

# Constants
PORT = 8080
HOST = "localhost"
UNAVAILABLE_PROBABILITY = 0.2


async def handle_head(request: web.Request) -> web.Response:
    """Rejects HEAD, forcing the monitor into its GET fallback."""
    return web.Response(status=405, headers={"Allow": "GET"})


async def handle_get(request: web.Request) -> web.Response:
    """
    Answers GET requests, sometimes with a 503 to simulate an outage.

    Args:
        request: The incoming HTTP request

    Returns:
        A 200 response, or a 503 response with UNAVAILABLE_PROBABILITY
    """
    if random.random() < UNAVAILABLE_PROBABILITY:
        return web.Response(status=503, text="unavailable")
    return web.Response(text=f"ok, user agent: {request.headers.get('User-Agent')}")


async def init_app() -> web.Application:
    """
    Initialize the web application.

    Returns:
        Configured aiohttp web Application
    """
    app = web.Application()
    app.add_routes(
        [
            web.head("/{tail:.*}", handle_head),
            web.get("/{tail:.*}", handle_get, allow_head=False),
        ]
    )
    return app


def run_server() -> None:
    """Run the mock server on HOST:PORT."""
    web.run_app(init_app(), host=HOST, port=PORT)


if __name__ == "__main__":
    print(f"Starting mock server at http://{HOST}:{PORT}")
    print(f"- HEAD: 405, GET: 200 ({UNAVAILABLE_PROBABILITY * 100}% 503)")
    run_server()
