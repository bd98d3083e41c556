"""Tests for the web API."""

import pytest
from pathlib import Path

# Only run if fastapi/httpx are installed
try:
    from fastapi.testclient import TestClient
    from fsgraph.web import create_app
    HAS_WEB = True
except ImportError:
    HAS_WEB = False

pytestmark = pytest.mark.skipif(not HAS_WEB, reason="web dependencies not installed")

FIXTURES = Path(__file__).parent / "fixtures"
STD = FIXTURES / "std"


@pytest.fixture
def client():
    return TestClient(create_app(allowed_root=FIXTURES))


@pytest.fixture
def loaded(client):
    res = client.post("/api/index", json={"root": str(STD)})
    assert res.status_code == 200
    return client


def test_graph_empty_before_index(client):
    assert client.get("/api/graph").status_code == 404
    assert client.get("/api/graph/summary").status_code == 404


def test_index_returns_summary(client):
    res = client.post("/api/index", json={"root": str(STD)})
    assert res.status_code == 200
    data = res.json()
    assert data["nodes"] == 5
    assert data["virtualNodes"] == 1
    assert data["edgesByKind"] == {"import": 3, "reexport": 1}
    assert data["mostImported"][0] == {"id": "math/vector.fs", "incoming": 2}


def test_index_nonexistent_path(client):
    res = client.post("/api/index", json={"root": "/nonexistent/path"})
    assert res.status_code == 404


def test_get_graph(loaded):
    data = loaded.get("/api/graph").json()
    assert data["root"] == str(STD.resolve())
    assert len(data["elements"]["nodes"]) == 5


def test_get_node_with_slashes(loaded):
    res = loaded.get("/api/graph/nodes/math/vector.fs")
    assert res.status_code == 200
    data = res.json()
    assert data["data"]["id"] == "math/vector.fs"
    assert sorted(e["source"] for e in data["incoming"]) == ["app/main.fs", "geometry.fs"]
    assert data["outgoing"] == []


def test_get_virtual_node(loaded):
    data = loaded.get("/api/graph/nodes/onshape/std/units.fs").json()
    assert data["data"]["isVirtual"] is True


def test_get_node_not_found(loaded):
    assert loaded.get("/api/graph/nodes/nope.fs").status_code == 404


def test_app_loads_graph_file(tmp_path):
    from fsgraph.exporter import write_graph
    from fsgraph.pipeline import build_graph

    out = write_graph(build_graph(STD), tmp_path / "graph.json")
    client = TestClient(create_app(out))
    assert client.get("/api/graph/summary").json()["edges"] == 4


def test_path_traversal_blocked():
    client = TestClient(create_app(allowed_root=STD))
    res = client.post("/api/index", json={"root": str(FIXTURES)})
    assert res.status_code == 403


@pytest.mark.skipif(Path.home().resolve() == Path("/"), reason="home is the filesystem root")
def test_default_allowed_root_is_home():
    client = TestClient(create_app())
    res = client.post("/api/index", json={"root": "/etc"})
    assert res.status_code == 403


def test_index_file_not_directory(client):
    res = client.post("/api/index", json={"root": str(STD / "geometry.fs")})
    assert res.status_code == 400


def test_index_unreadable_source_is_error_response(tmp_path):
    (tmp_path / "ok.fs").write_text("FeatureScript 1;", encoding="utf-8")
    (tmp_path / "bad.fs").write_bytes(b"\xff\xfe")
    client = TestClient(create_app(allowed_root=tmp_path), raise_server_exceptions=False)

    res = client.post("/api/index", json={"root": str(tmp_path)})
    assert res.status_code == 500
    assert "Cannot read" in res.json()["detail"]
    assert client.get("/api/graph").status_code == 404
