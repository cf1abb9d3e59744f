"""FastAPI app serving posts to the rendering layer."""

from .app import create_app  # noqa: F401
