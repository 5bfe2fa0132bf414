# tests/test_routes.py

from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from task_tracker.tasks.task_store import TaskStore


def _create(client: FlaskClient, text: str, tags: list[str], due: str) -> int:
    resp = client.post("/task/", json={"text": text, "tags": tags, "due": due})
    assert resp.status_code == 201
    return resp.get_json()["id"]


def test_create_then_get(client: FlaskClient) -> None:
    task_id = _create(client, "buy milk", ["errand"], "2024-01-05T10:00:00+00:00")

    resp = client.get(f"/task/{task_id}")
    assert resp.status_code == 200
    assert resp.get_json() == {
        "id": task_id,
        "text": "buy milk",
        "tags": ["errand"],
        "due": "2024-01-05T10:00:00+00:00",
    }

    # trailing slash is accepted as well
    assert client.get(f"/task/{task_id}/").status_code == 200


def test_create_defaults_missing_fields(client: FlaskClient) -> None:
    resp = client.post("/task/", json={})
    assert resp.status_code == 201

    task = client.get(f"/task/{resp.get_json()['id']}").get_json()
    assert task["text"] == ""
    assert task["tags"] == []
    assert task["due"].startswith("0001-01-01T00:00:00")


def test_create_rejects_bad_bodies(client: FlaskClient) -> None:
    assert client.post("/task/", data="not json", content_type="text/plain").status_code == 400
    assert client.post("/task/", data="{broken", content_type="application/json").status_code == 400

    resp = client.post("/task/", json={"text": "x", "tags": "errand"})
    assert resp.status_code == 400
    assert "tags" in resp.get_json()["error"]

    resp = client.post("/task/", json={"text": "x", "due": "tomorrow"})
    assert resp.status_code == 400
    assert "due" in resp.get_json()["error"]


def test_list_all_and_delete_all(client: FlaskClient, store: TaskStore) -> None:
    assert client.get("/task/").get_json() == []

    a = _create(client, "a", [], "2024-01-05T00:00:00Z")
    b = _create(client, "b", [], "2024-01-06T00:00:00Z")
    assert {t["id"] for t in client.get("/task/").get_json()} == {a, b}

    resp = client.delete("/task/")
    assert resp.status_code == 200
    assert client.get("/task/").get_json() == []
    assert store.count_tasks() == 0

    # ids keep growing after a full clear
    assert _create(client, "c", [], "2024-01-07T00:00:00Z") > b


def test_delete_one(client: FlaskClient) -> None:
    task_id = _create(client, "x", [], "2024-01-05T00:00:00Z")

    assert client.delete(f"/task/{task_id}").status_code == 200
    assert client.get(f"/task/{task_id}").status_code == 404

    resp = client.delete(f"/task/{task_id}")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": f"id = {task_id} not found"}


def test_bad_id_is_bad_request(client: FlaskClient) -> None:
    resp = client.get("/task/abc")
    assert resp.status_code == 400
    assert "id must be an integer" in resp.get_json()["error"]
    assert client.delete("/task/1.5").status_code == 400


def test_oversized_and_non_ascii_ids_are_bad_requests(client: FlaskClient) -> None:
    resp = client.get("/task/" + "9" * 5000)
    assert resp.status_code == 400
    assert "id must be an integer" in resp.get_json()["error"]

    assert client.get("/due/" + "1" * 5000 + "/1/1").status_code == 400

    _create(client, "x", [], "2024-01-05T00:00:00Z")
    _create(client, "y", [], "2024-01-05T00:00:00Z")
    # Arabic-Indic digit one; only ASCII digits name an id.
    assert client.get("/task/\u0661").status_code == 400
    assert client.get("/task/1").status_code == 200


def test_unknown_methods_are_rejected(client: FlaskClient) -> None:
    resp = client.put("/task/")
    assert resp.status_code == 405
    assert "got PUT" in resp.get_json()["error"]
    assert "POST" in resp.headers["Allow"]

    resp = client.post("/task/3")
    assert resp.status_code == 405
    error = resp.get_json()["error"]
    assert "DELETE, GET" in error
    assert "got POST" in error


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("put", "/task/3"),
        ("patch", "/task/3"),
        ("put", "/task/3/"),
        ("post", "/tag/x"),
        ("put", "/due/2024/1/1"),
        ("post", "/due/2024/1/1/"),
    ],
)
def test_wrong_method_is_405_on_both_slash_forms(client: FlaskClient, method: str, path: str) -> None:
    resp = getattr(client, method)(path)
    assert resp.status_code == 405
    assert f"got {method.upper()}" in resp.get_json()["error"]
    assert "GET" in resp.headers["Allow"]


def test_collection_without_slash_redirects(client: FlaskClient) -> None:
    resp = client.get("/task")
    assert resp.status_code in (301, 308)
    assert resp.headers["Location"].endswith("/task/")


def test_unknown_route_is_json_404(client: FlaskClient) -> None:
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert "error" in resp.get_json()


def test_tag_and_due_queries(client: FlaskClient) -> None:
    a = _create(client, "buy milk", ["errand"], "2024-01-05T08:00:00Z")
    b = _create(client, "write report", ["work", "urgent"], "2024-01-05T17:00:00Z")
    c = _create(client, "call mom", ["errand"], "2024-01-06T12:00:00Z")

    by_tag = client.get("/tag/errand")
    assert by_tag.status_code == 200
    assert {t["id"] for t in by_tag.get_json()} == {a, c}
    assert client.get("/tag/Errand").get_json() == []

    by_due = client.get("/due/2024/1/5")
    assert by_due.status_code == 200
    assert {t["id"] for t in by_due.get_json()} == {a, b}
    assert {t["id"] for t in client.get("/due/2024/01/06/").get_json()} == {c}


def test_tag_with_slash_is_queryable(client: FlaskClient) -> None:
    task_id = _create(client, "rake leaves", ["home/garden", "home"], "2024-01-05T00:00:00Z")

    resp = client.get("/tag/home/garden")
    assert resp.status_code == 200
    assert [t["id"] for t in resp.get_json()] == [task_id]
    assert [t["id"] for t in client.get("/tag/home").get_json()] == [task_id]


def test_due_query_validates_components(client: FlaskClient) -> None:
    assert client.get("/due/2024/13/1").status_code == 400
    assert client.get("/due/2024/1/0").status_code == 400
    assert client.get("/due/year/1/1").status_code == 400
