"""HTTP API serving an indexed graph to the visualization layer."""

from fsgraph.web.app import create_app

__all__ = ["create_app"]
