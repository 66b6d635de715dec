"""HTTP API for quiz generation, authoring and taking."""

from .app import create_app

__all__ = ["create_app"]
