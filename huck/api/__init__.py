"""Huck API package - FastAPI backend for the tactics board."""

from huck.api.main import app, create_app

__all__ = ["app", "create_app"]
