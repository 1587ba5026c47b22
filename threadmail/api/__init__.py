"""HTTP API: FastAPI app factory and mailbox routes."""

from threadmail.api.server import create_app

__all__ = ["create_app"]
