from models.password import Password
from tests.helpers import TEACHER_PASSWORD


def test_status_is_closed_by_default(seeded, client):
    resp = client.get("/teacherAuthenticationStatus")
    assert resp.status_code == 200
    assert resp.get_json() == {"success": False}


def test_wrong_password_is_forbidden(seeded, client):
    resp = client.post("/authenticateTeacher", json={"password": "nope"})
    assert resp.status_code == 403
    body = resp.get_json()
    assert body["success"] is False
    assert body["message"] == "Invalid credentials. Only teachers are allowed to authenticate."
    assert client.get("/teacherAuthenticationStatus").get_json() == {"success": False}


def test_missing_password_is_bad_request(seeded, client):
    resp = client.post("/authenticateTeacher", json={})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_no_credential_configured(app, client):
    resp = client.post("/authenticateTeacher", json={"password": TEACHER_PASSWORD})
    assert resp.status_code == 403


def test_authenticate_opens_attendance(seeded, client):
    resp = client.post("/authenticateTeacher", json={"password": TEACHER_PASSWORD})
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "message": "Teacher authenticated successfully."}
    assert client.get("/teacherAuthenticationStatus").get_json() == {"success": True}


def test_logout_resets_flag(open_session):
    resp = open_session.post("/logout")
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "message": "Teacher logged out successfully."}
    assert open_session.get("/teacherAuthenticationStatus").get_json() == {"success": False}


def test_password_is_stored_hashed(seeded):
    doc = Password.collection().find_one()
    assert doc["password"] != TEACHER_PASSWORD
    assert Password.verify(TEACHER_PASSWORD)["_id"] == doc["_id"]


def test_store_failure_returns_500(seeded, client, monkeypatch):
    def boom():
        raise RuntimeError("connection refused")

    monkeypatch.setattr(Password, "is_attendance_open", staticmethod(boom))
    resp = client.get("/teacherAuthenticationStatus")
    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "message": "Internal server error."}
