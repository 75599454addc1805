"""ASGI entrypoint: `uvicorn api_main:app`."""

from app.api.fastapi_app import app

__all__ = ["app"]
