"""Run the Socket.IO signaling server with explicit settings.

Equivalent to ``python -m rendezvous`` but without reading ``API_KEY`` and
friends from the environment. Clients connect with::

    io("http://localhost:3000", { auth: { token: "dev-secret" } })

Run with:
    uv run python examples/signaling_server.py
"""

from __future__ import annotations

import uvicorn

from rendezvous import Settings, configure_logging, create_app


def main() -> None:
    settings = Settings(_env_file=None, api_key="dev-secret", port=3000, log_level="DEBUG")
    configure_logging(settings.log_level)
    app = create_app(settings)
    uvicorn.run(app.asgi, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
