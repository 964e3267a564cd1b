"""CORS echo service package exports the ASGI `app` for convenience.

This lets you run: `uvicorn cors_echo_service:app --host 0.0.0.0 --port 3000`
"""
from cors_echo_service.main import app, serve

__all__ = ["app", "serve"]
