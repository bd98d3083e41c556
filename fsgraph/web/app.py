"""FastAPI application factory."""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fsgraph import __version__
from fsgraph.exporter import load_graph
from fsgraph.web.api import router
from fsgraph.web.state import GraphState


def create_app(graph_path: Path | None = None, allowed_root: Path | None = None) -> FastAPI:
    """Build the API app. POST /api/index only accepts roots under *allowed_root* (home by default)."""
    app = FastAPI(title="fsgraph", version=__version__)

    # The visualization layer is served from its own dev server
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["GET", "POST"])

    app.state.allowed_root = Path(allowed_root or Path.home()).expanduser().resolve()
    app.state.graph_state = GraphState()
    if graph_path is not None:
        app.state.graph_state.load(load_graph(graph_path))

    app.include_router(router)
    return app
