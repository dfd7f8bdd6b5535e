"""
Functional tests for request logging and the logs API.
"""

from app.logging.models import Log


class TestRequestLogging:
    def test_api_requests_are_recorded(self, client, db_session):
        client.get("/api/tasks", params={"title": "report"})

        log = db_session.query(Log).filter(Log.path == "/api/tasks").one()
        assert log.method == "GET"
        assert log.status_code == 200
        assert log.query_string == "title=report"
        assert '"totalRows":0' in log.response_body
        assert log.processing_time >= 0

    def test_request_body_is_recorded(self, client, db_session):
        client.post("/api/tasks", json={"title": "Logged"})

        log = db_session.query(Log).filter(Log.method == "POST").one()
        assert "Logged" in log.request_body

    def test_validation_errors_are_recorded_once(self, client, db_session):
        client.get("/api/tasks", params={"per_page": 0})

        logs = db_session.query(Log).filter(Log.path == "/api/tasks").all()
        assert [log.status_code for log in logs] == [422]

    def test_log_endpoints_are_not_recorded(self, client, db_session):
        client.get("/api/logs/")

        assert db_session.query(Log).count() == 0


class TestLogsApi:
    def test_list_logs_with_headers(self, client, db_session):
        client.get("/api/tasks")
        client.get("/api/tasks/count/status")

        response = client.get("/api/logs/", params={"limit": 1})

        assert response.status_code == 200
        assert len(response.json()) == 1
        assert response.headers["X-Total-Count"] == "2"
        assert response.headers["X-Page-Size"] == "1"
        assert response.headers["X-Page-Offset"] == "0"

    def test_filter_by_path(self, client, db_session):
        client.get("/api/tasks")
        client.get("/api/tasks/count/status")

        logs = client.get("/api/logs/", params={"path": "/count/~endsWith"}).json()
        assert logs == []

        logs = client.get("/api/logs/", params={"path": "/api/tasks/count~startsWith"}).json()
        assert [log["path"] for log in logs] == ["/api/tasks/count/status"]

    def test_filter_by_status_range(self, client, db_session):
        client.get("/api/tasks")
        client.get("/api/tasks", params={"page": 0})

        logs = client.get("/api/logs/", params={"status_min": 400, "status_max": 499}).json()

        assert [log["status_code"] for log in logs] == [422]

    def test_inverted_status_range_is_rejected(self, client, db_session):
        response = client.get("/api/logs/", params={"status_min": 500, "status_max": 400})

        assert response.status_code == 400

    def test_status_distribution(self, client, db_session):
        client.get("/api/tasks")
        client.get("/api/tasks")
        client.get("/api/tasks", params={"page": 0})

        body = client.get("/api/logs/status-distribution").json()

        assert body["period_hours"] == 24
        assert body["status_distribution"] == [
            {"status_code": 200, "count": 2},
            {"status_code": 422, "count": 1},
        ]

    def test_get_single_log(self, client, db_session):
        client.get("/api/tasks")
        log_id = db_session.query(Log).one().id

        response = client.get(f"/api/logs/{log_id}")

        assert response.status_code == 200
        assert response.json()["path"] == "/api/tasks"

    def test_missing_log(self, client, db_session):
        response = client.get("/api/logs/999999")

        assert response.status_code == 404
