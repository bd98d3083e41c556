"""FastAPI routes for reading and rebuilding the graph."""

from __future__ import annotations

import asyncio
from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from fsgraph.analysis.stats import summarize
from fsgraph.errors import ConfigError, IndexerError
from fsgraph.pipeline import build_graph
from fsgraph.web.state import GraphState

router = APIRouter(prefix="/api")


class IndexRequest(BaseModel):
    root: str


# --- Path safety ---

def _validate_path(p: str, allowed_root: Path) -> Path:
    """Ensure path exists and is under the allowed root (home by default)."""
    resolved = Path(p).expanduser().resolve()
    if not resolved.exists():
        raise HTTPException(404, f"Path not found: {resolved}")
    if not resolved.is_relative_to(allowed_root):
        raise HTTPException(403, f"Path must be under {allowed_root}")
    return resolved


def _state(request: Request) -> GraphState:
    return request.app.state.graph_state


def _loaded(request: Request) -> GraphState:
    state = _state(request)
    if state.graph is None:
        raise HTTPException(404, "No graph loaded. POST /api/index first.")
    return state


@router.get("/graph")
async def get_graph(request: Request):
    return _loaded(request).graph


@router.get("/graph/summary")
async def get_summary(request: Request):
    return summarize(_loaded(request).graph).to_dict()


@router.get("/graph/nodes/{node_id:path}")
async def get_node(node_id: str, request: Request):
    state = _loaded(request)
    node = state.get_node(node_id)
    if node is None:
        raise HTTPException(404, f"Node not found: {node_id}")
    return {
        "data": node,
        "incoming": state.incoming(node_id),
        "outgoing": state.outgoing(node_id),
    }


@router.post("/index")
async def index_root(req: IndexRequest, request: Request):
    root = _validate_path(req.root, request.app.state.allowed_root)
    if not root.is_dir():
        raise HTTPException(400, "Path must be a directory")

    try:
        graph = await asyncio.to_thread(build_graph, root)
    except ConfigError as e:
        raise HTTPException(404, str(e))
    except IndexerError as e:
        raise HTTPException(500, str(e))

    state = _state(request)
    state.load(graph.to_dict())
    return summarize(state.graph).to_dict()
