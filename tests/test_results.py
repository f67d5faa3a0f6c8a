from models.result import Result
from tests.helpers import NEAR


def test_results_empty(app, client):
    resp = client.get("/getResults")
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "results": []}


def test_results_lists_marked_students(open_session):
    open_session.post("/markAttendance", json={"rollNumber": "CS102", **NEAR})
    open_session.post("/markAttendance", json={"rollNumber": "CS101", **NEAR})

    body = open_session.get("/getResults").get_json()
    assert body["success"] is True
    rolls = [r["rollNumber"] for r in body["results"]]
    assert rolls == ["CS101", "CS102"]
    first = body["results"][0]
    assert isinstance(first["_id"], str)
    assert first["attendanceCount"] == 1
    assert isinstance(first["createdAt"], str)


def test_results_default_missing_count(app, client):
    Result.collection().insert_one({"rollNumber": "OLD1", "latitude": "21.2", "longitude": "81.6"})
    body = client.get("/getResults").get_json()
    assert body["results"][0]["attendanceCount"] == 0


def test_export_csv(open_session):
    open_session.post("/markAttendance", json={"rollNumber": "CS101", **NEAR})
    resp = open_session.get("/getResults/export/csv")
    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    lines = resp.get_data(as_text=True).strip().splitlines()
    assert lines[0].startswith("Roll Number,Latitude")
    assert lines[1].startswith("CS101,")


def test_export_excel(open_session):
    open_session.post("/markAttendance", json={"rollNumber": "CS101", **NEAR})
    resp = open_session.get("/getResults/export/xlsx")
    assert resp.status_code == 200
    assert resp.data[:2] == b"PK"


def test_export_pdf(app, client):
    resp = client.get("/getResults/export/pdf")
    assert resp.status_code == 200
    assert resp.mimetype == "application/pdf"
    assert resp.data.startswith(b"%PDF")


def test_export_unknown_format(app, client):
    resp = client.get("/getResults/export/docx")
    assert resp.status_code == 400


def test_health_and_unknown_route(app, client):
    assert client.get("/health").get_json() == {"status": "ok"}
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert resp.get_json()["success"] is False
