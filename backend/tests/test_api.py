import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client():
    return TestClient(app)


MEMBERS = [
    {"id": "root", "name": "Root", "generation": 1},
    {"id": "child1", "name": "Child 1", "generation": 2, "parents": ["root"]},
    {"id": "grandchild1", "name": "Grandchild 1", "generation": 3, "parents": ["child1"]},
    {"id": "child2", "name": "Child 2", "generation": 2, "parents": ["root"]},
]


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_layout_route(client):
    resp = client.post("/api/tree/layout", json={
        "members": MEMBERS,
        "searchQuery": "child",
        "collapsedStates": {"child1": True},
        "config": {"generationSpacing": 120, "memberSpacing": 180, "nodeWidth": 150, "siblingSpacing": 50},
        "canEdit": True,
        "viewportWidth": 1200,
    })
    assert resp.status_code == 200
    body = resp.json()
    nodes = {n["id"]: n for n in body["nodes"]}
    assert set(nodes) == {"root", "child1", "child2"}
    assert nodes["root"]["position"] == {"x": 525.0, "y": 0.0}
    assert nodes["child1"]["data"]["isCollapsed"] is True
    assert nodes["child1"]["data"]["isHighlighted"] is True
    assert nodes["root"]["data"]["isHighlighted"] is False
    assert {(e["source"], e["target"]) for e in body["edges"]} == {("root", "child1"), ("root", "child2")}


def test_layout_route_rejects_bad_config(client):
    resp = client.post("/api/tree/layout", json={"members": MEMBERS, "config": {"nodeWidth": -5}})
    assert resp.status_code == 422


def test_layout_route_empty(client):
    resp = client.post("/api/tree/layout", json={})
    assert resp.status_code == 200
    assert resp.json() == {"nodes": [], "edges": []}


def test_breadcrumbs(client):
    resp = client.post("/api/tree/breadcrumbs", json={"members": MEMBERS, "memberId": "grandchild1"})
    assert resp.status_code == 200
    assert [p["id"] for p in resp.json()["path"]] == ["root", "child1", "grandchild1"]


def test_breadcrumbs_unknown_member(client):
    resp = client.post("/api/tree/breadcrumbs", json={"members": MEMBERS, "memberId": "nobody"})
    assert resp.status_code == 404
    assert "error" in resp.json()


def test_sample_tree(client):
    resp = client.get("/api/tree/sample")
    assert resp.status_code == 200
    body = resp.json()
    assert len(body["nodes"]) == 14
    assert len(body["edges"]) == 16


def test_sample_tree_focus_and_search(client):
    resp = client.get("/api/tree/sample", params={"focus": "ida-marsh", "search": "marsh"})
    body = resp.json()
    ids = {n["id"] for n in body["nodes"]}
    assert ids == {"ida-marsh", "lena-marsh", "owen-marsh", "tess-marsh"}
    assert all(n["data"]["isHighlighted"] for n in body["nodes"])


def test_layout_route_unexpected_error(client, monkeypatch):
    from api.routes import tree

    def boom(*args, **kwargs):
        raise RuntimeError("layout exploded")

    monkeypatch.setattr(tree, "layout_tree", boom)
    resp = client.post("/api/tree/layout", json={"members": MEMBERS})
    assert resp.status_code == 500
    assert resp.json() == {"error": "layout exploded"}

    resp = client.get("/api/tree/sample")
    assert resp.status_code == 500
    assert resp.json() == {"error": "layout exploded"}
