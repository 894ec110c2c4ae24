from __future__ import annotations

import io

from payroll_system.core.exceptions import StoreError


def _create_leave(client, **overrides):
    body = {
        "employee_id": 5,
        "start_date": "2024-01-01",
        "end_date": "2024-01-03",
        "leave_type": "annual",
    }
    body.update(overrides)
    return client.post("/api/leaves", json=body)


def test_hello(client):
    resp = client.get("/api/hello")
    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Hello from backend"}


def test_leave_lifecycle(client):
    resp = _create_leave(client)
    assert resp.status_code == 201
    leave_id = resp.get_json()["id"]

    resp = client.put(f"/api/leaves/{leave_id}", json={"status": "approved"})
    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Leave updated"}

    rows = client.get("/api/leaves/employee/5").get_json()
    assert rows == [
        {
            "id": leave_id,
            "employee_id": 5,
            "start_date": "2024-01-01",
            "end_date": "2024-01-03",
            "duration": 3,
            "status": "approved",
            "reason": None,
            "leave_type": "annual",
        }
    ]

    assert client.delete(f"/api/leaves/{leave_id}").status_code == 200
    assert client.get("/api/leaves").get_json() == []


def test_leave_missing_fields_is_400(client):
    resp = client.post("/api/leaves", json={"employee_id": 5})
    assert resp.status_code == 400
    assert "start_date" in resp.get_json()["error"]


def test_leave_partial_update_of_unknown_id_is_404(client):
    resp = client.put("/api/leaves/123", json={"status": "approved"})
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Leave not found"}


def test_delete_unknown_leave_is_404(client):
    assert client.delete("/api/leaves/123").status_code == 404


def test_store_failure_is_500_with_raw_message(client, leaves_repo, monkeypatch):
    def boom():
        raise StoreError("Lost connection to MySQL server during query")

    monkeypatch.setattr(leaves_repo, "list_all", boom)

    resp = client.get("/api/leaves")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Lost connection to MySQL server during query"}


def test_unexpected_failure_is_json_500(client, leaves_repo, monkeypatch):
    def boom():
        raise RuntimeError("kaboom")

    monkeypatch.setattr(leaves_repo, "list_all", boom)

    resp = client.get("/api/leaves")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "kaboom"}


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/nowhere")
    assert resp.status_code == 404
    assert "error" in resp.get_json()


def test_employee_crud(client):
    resp = client.post("/api/employees", json={"firstname": "Jane", "lastName": "Doe", "email": "jane@example.com"})
    assert resp.status_code == 201
    assert resp.get_json()["message"] == "Employee added"
    eid = resp.get_json()["id"]

    employee = client.get(f"/api/employees/{eid}").get_json()
    assert employee["name"] == "Jane Doe"
    assert employee["departmentId"] == 1
    assert employee["inviteEmail"] is False

    resp = client.put(f"/api/employees/{eid}", json={"firstname": "Jane", "lastName": "Roe", "email": "j@example.com"})
    assert resp.get_json() == {"message": "Employee updated successfully"}
    assert client.get(f"/api/employees/{eid}").get_json()["name"] == "Jane Roe"

    assert len(client.get("/api/employees").get_json()) == 1
    assert client.delete(f"/api/employees/{eid}").get_json() == {"message": "Employee deleted"}
    assert client.get(f"/api/employees/{eid}").status_code == 404


def test_employee_with_numeric_first_name(client):
    resp = client.post("/api/employees", json={"firstname": 123, "lastName": "Doe", "email": "n@example.com"})
    assert resp.status_code == 201

    employee = client.get(f"/api/employees/{resp.get_json()['id']}").get_json()
    assert employee["name"] == "123 Doe"


def test_employee_create_validation(client):
    resp = client.post("/api/employees", json={"email": "x@example.com"})
    assert resp.status_code == 400
    assert resp.get_json()["error"].startswith("Missing required fields")


def test_update_unknown_employee_is_404(client):
    resp = client.put("/api/employees/9", json={"firstname": "A", "lastName": "B", "email": "c@example.com"})
    assert resp.status_code == 404


def test_department_crud(client):
    resp = client.post("/api/department", json={"name": "Finance"})
    assert resp.status_code == 201
    did = resp.get_json()["id"]

    assert client.get(f"/api/department/{did}").get_json() == {
        "id": did,
        "name": "Finance",
        "status": "active",
        "description": None,
    }
    assert client.put(f"/api/department/{did}", json={"name": "Ops", "status": "inactive"}).status_code == 200
    assert client.get("/api/department").get_json()[0]["name"] == "Ops"
    assert client.delete(f"/api/department/{did}").status_code == 200
    assert client.get(f"/api/department/{did}").status_code == 404


def test_register_login_me_logout(client):
    body = {"firstname": "Ada", "lastname": "Lovelace", "email": "ada@example.com", "password": "right"}
    resp = client.post("/api/register", json=body)
    assert resp.status_code == 201

    assert client.post("/api/register", json=body).status_code == 409

    resp = client.post("/api/login", json={"email": "ada@example.com", "password": "right"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["user"] == {"id": 1, "username": "Ada Lovelace", "email": "ada@example.com"}
    assert "password" not in data["user"]
    assert "payroll_sid=" in resp.headers["Set-Cookie"]
    assert "HttpOnly" in resp.headers["Set-Cookie"]

    assert client.get("/api/me").get_json()["user"]["email"] == "ada@example.com"

    assert client.post("/api/logout").status_code == 200
    assert client.get("/api/me").status_code == 401


def test_login_failures_do_not_leak(client):
    client.post(
        "/api/register",
        json={"firstname": "Ada", "lastname": "Lovelace", "email": "ada@example.com", "password": "right"},
    )

    wrong = client.post("/api/login", json={"email": "ada@example.com", "password": "nope"})
    unknown = client.post("/api/login", json={"email": "ghost@example.com", "password": "nope"})

    assert wrong.status_code == unknown.status_code == 401
    assert wrong.get_json() == unknown.get_json() == {"error": "Invalid credentials"}


def test_login_requires_fields(client):
    assert client.post("/api/login", json={"email": "ada@example.com"}).status_code == 400


def test_upload(client, container):
    resp = client.post(
        "/api/upload",
        data={"image": (io.BytesIO(b"\xff\xd8\xff"), "photo.jpg", "image/jpeg")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 200
    filename = resp.get_json()["filename"]
    assert (container.upload_service.upload_dir / filename).exists()


def test_upload_rejects_other_types(client):
    resp = client.post(
        "/api/upload",
        data={"image": (io.BytesIO(b"GIF89a"), "anim.gif", "image/gif")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "No file uploaded or invalid file type"}


def test_upload_without_file(client):
    resp = client.post("/api/upload", data={}, content_type="multipart/form-data")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "No file uploaded or invalid file type"}
