from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from container_dashboard.main import create_app
from container_dashboard.persistence.preferences import PreferenceStore
from container_dashboard.store.controller import StoreController


@pytest.fixture
def api_client(tmp_path: Path) -> TestClient:
    controller = StoreController.from_fixtures(PreferenceStore(tmp_path / "preferences.json"), bcrypt_rounds=4)
    return TestClient(create_app(controller))


def _login(client: TestClient, username: str = "admin", password: str = "password"):
    return client.post("/api/session/login", json={"username": username, "password": password})


def test_health_endpoints(api_client: TestClient) -> None:
    assert api_client.get("/api/health").json() == {"status": "ok"}

    store = api_client.get("/api/health/store").json()
    assert store["users"] == 3
    assert store["logged_in"] is False


def test_login_returns_identity_and_navigation(api_client: TestClient) -> None:
    response = _login(api_client)

    assert response.status_code == 200
    payload = response.json()
    assert payload["user"]["id"] == "1"
    assert "password_hash" not in payload["user"]
    assert payload["navigation"]["tabs"][1] == "users"
    assert api_client.get("/api/session").json()["user"]["username"] == "admin"


def test_login_with_wrong_password_is_rejected(api_client: TestClient) -> None:
    response = _login(api_client, password="wrong")

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid username or password"
    assert api_client.get("/api/session").status_code == 401


def test_logout_resets_to_dashboard(api_client: TestClient) -> None:
    _login(api_client, "user1")
    response = api_client.post("/api/session/logout")

    assert response.json() == {"default_tab": "dashboard"}
    assert api_client.get("/api/session/navigation").status_code == 401


def test_theme_toggle_writes_preference(api_client: TestClient, tmp_path: Path) -> None:
    assert api_client.get("/api/preferences/theme").json() == {"theme": "light"}
    assert api_client.post("/api/preferences/theme/toggle").json() == {"theme": "dark"}
    assert PreferenceStore(tmp_path / "preferences.json").get("theme") == "dark"


def test_user_crud(api_client: TestClient) -> None:
    created = api_client.post(
        "/api/users",
        json={"username": "staff2", "email": "staff2@container.com", "name": "Phạm Văn D", "role": "staff"},
    )
    assert created.status_code == 201
    user_id = created.json()["id"]

    listed = api_client.get("/api/users", params={"search": "phạm", "role": "staff"}).json()
    assert [user["id"] for user in listed] == [user_id]

    patched = api_client.patch(f"/api/users/{user_id}", json={"is_active": False})
    assert patched.json()["is_active"] is False
    assert _login(api_client, "staff2").status_code == 401

    assert api_client.delete(f"/api/users/{user_id}").status_code == 204
    assert api_client.get(f"/api/users/{user_id}").status_code == 404
    assert api_client.delete(f"/api/users/{user_id}").status_code == 204


def test_container_flow_stamps_updates(api_client: TestClient) -> None:
    _login(api_client, "staff1")
    created = api_client.post("/api/containers", json={"code": "CONT-100", "location": "Cảng Cát Lái"}).json()
    assert created["type"] == "20ft Standard"
    assert created["status"] == "in_transit"
    assert created["last_updated_by"] == "staff1"
    assert created["created_at"] == created["updated_at"]

    moved = api_client.post(f"/api/containers/{created['id']}/status", json={"status": "arrived"}).json()
    assert moved["status"] == "arrived"
    assert moved["updated_at"] != created["updated_at"]
    assert moved["created_at"] == created["created_at"]

    arrived = api_client.get("/api/containers", params={"status": "arrived", "search": "cát lái"}).json()
    assert [container["code"] for container in arrived] == ["CONT-100"]

    assert api_client.patch("/api/containers/missing", json={"notes": "x"}).status_code == 404
    assert api_client.delete(f"/api/containers/{created['id']}").status_code == 204
    assert len(api_client.get("/api/containers").json()) == 3


def test_container_validation_rejects_unknown_status(api_client: TestClient) -> None:
    response = api_client.post("/api/containers", json={"code": "CONT-101", "status": "lost"})
    assert response.status_code == 422


def test_warehouse_views_flag_status_mismatch(api_client: TestClient) -> None:
    warehouses = api_client.get("/api/warehouses").json()
    hcm = next(w for w in warehouses if w["id"] == "3")
    assert hcm["utilization_percentage"] == 106
    assert hcm["capacity_tier"] == "overloaded"
    assert hcm["status_mismatch"] is False

    summary = api_client.get("/api/warehouses/summary").json()
    assert summary["average_utilization"] == 91
    assert api_client.get("/api/warehouses/42").status_code == 404


def test_feedback_lifecycle(api_client: TestClient) -> None:
    _login(api_client, "user1")
    created = api_client.post("/api/feedback", json={"message": "Container đến trễ", "type": "complaint"}).json()
    assert created["status"] == "pending"
    assert created["container_id"] is None
    assert created["user_name"] == "Trần Thị B"

    api_client.post("/api/session/logout")
    _login(api_client, "admin")

    resolved = api_client.patch(
        f"/api/feedback/{created['id']}", json={"status": "resolved", "response": "ok"}
    ).json()
    assert resolved["status"] == "resolved"
    assert resolved["responded_by"] == "admin"

    reviewed = api_client.post(f"/api/feedback/{created['id']}/review").json()
    assert reviewed["status"] == "resolved"

    complaints = api_client.get("/api/feedback", params={"type": "complaint", "status": "resolved"}).json()
    assert [item["id"] for item in complaints] == [created["id"]]


def test_respond_requires_text(api_client: TestClient) -> None:
    assert api_client.post("/api/feedback/1/respond", json={"response": ""}).status_code == 422

    response = api_client.post("/api/feedback/1/respond", json={"response": "Đã xử lý"})
    assert response.json()["status"] == "resolved"


def test_dashboard_overview(api_client: TestClient) -> None:
    _login(api_client, "staff1")
    overview = api_client.get("/api/dashboard").json()

    assert overview["welcome_name"] == "Nguyễn Văn A"
    assert overview["containers"]["total"] == 3
    assert overview["feedback"]["pending"] == 1
    assert len(overview["recent_containers"]) == 3


def test_feedback_patch_can_detach_container(api_client: TestClient) -> None:
    created = api_client.post(
        "/api/feedback", json={"message": "Seal bị hỏng", "type": "complaint", "container_id": "2"}
    ).json()
    assert created["container_id"] == "2"

    detached = api_client.patch(f"/api/feedback/{created['id']}", json={"container_id": None, "message": None})
    assert detached.status_code == 200
    assert detached.json()["container_id"] is None
    assert detached.json()["message"] == "Seal bị hỏng"
