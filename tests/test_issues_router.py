from __future__ import annotations

from conftest import T0


def _signed_in(client) -> str:
    response = client.post("/api/auth/signup", json={"email": "owner@x.com", "password": "secret1"})
    return response.json()["id"]


def _create(client, **payload):
    body = {"title": "Fix login"}
    body.update(payload)
    return client.post("/api/issue", json=body)


def test_issue_routes_require_session(api_client):
    assert api_client.get("/api/issue").status_code == 401
    assert _create(api_client).status_code == 401
    assert api_client.get("/api/issue/1").status_code == 401


def test_create_issue_applies_defaults_and_ignores_user_id(api_client):
    owner_id = _signed_in(api_client)

    response = _create(api_client, userId="someone-else", user_id="someone-else")

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Issue created successfully"
    assert body["issue"]["status"] == "backlog"
    assert body["issue"]["priority"] == "medium"
    assert body["issue"]["user_id"] == owner_id


def test_create_issue_validation(api_client):
    _signed_in(api_client)

    response = _create(api_client, title="ab", status="archived", priority="urgent")

    assert response.status_code == 400
    errors = response.json()["detail"]["errors"]
    assert errors["title"] == ["Title must be at least 3 characters"]
    assert errors["status"] == ["Please select a valid status"]
    assert errors["priority"] == ["Please select a valid priority"]


def test_list_only_returns_own_issues(api_client, issues_port):
    _signed_in(api_client)
    _create(api_client, title="Mine")
    issues_port.create_issue(
        title="Theirs",
        description=None,
        status="todo",
        priority="low",
        user_id="other",
        now=T0,
    )

    response = api_client.get("/api/issue")

    assert response.status_code == 200
    assert [issue["title"] for issue in response.json()] == ["Mine"]


def test_get_update_delete_own_issue(api_client):
    _signed_in(api_client)
    issue_id = _create(api_client, description="Steps").json()["issue"]["id"]

    assert api_client.get(f"/api/issue/{issue_id}").json()["description"] == "Steps"

    updated = api_client.patch(f"/api/issue/{issue_id}", json={"status": "done", "description": None})
    assert updated.status_code == 200
    assert updated.json()["status"] == "done"
    assert updated.json()["description"] is None
    assert updated.json()["title"] == "Fix login"

    deleted = api_client.delete(f"/api/issue/{issue_id}")
    assert deleted.json() == {"ok": True}
    assert api_client.get(f"/api/issue/{issue_id}").status_code == 404


def test_update_validation(api_client):
    _signed_in(api_client)
    issue_id = _create(api_client).json()["issue"]["id"]

    response = api_client.patch(f"/api/issue/{issue_id}", json={"priority": "urgent"})

    assert response.status_code == 400
    assert response.json()["detail"]["errors"] == {"priority": ["Please select a valid priority"]}


def test_other_users_issue_is_forbidden(api_client, issues_port):
    _signed_in(api_client)
    foreign = issues_port.create_issue(
        title="Theirs",
        description=None,
        status="todo",
        priority="low",
        user_id="other",
        now=T0,
    )

    assert api_client.get(f"/api/issue/{foreign.id}").status_code == 403
    assert api_client.patch(f"/api/issue/{foreign.id}", json={"title": "Mine now"}).status_code == 403
    response = api_client.delete(f"/api/issue/{foreign.id}")
    assert response.status_code == 403
    assert response.json() == {"detail": "Unauthorized access"}
    assert foreign.id in issues_port.issues


def test_missing_issue_is_not_found(api_client):
    _signed_in(api_client)

    assert api_client.get("/api/issue/999").status_code == 404
    assert api_client.delete("/api/issue/999").status_code == 404
