"""
Tests for the home page, greeting endpoint and routing
"""
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from fastapi import status

from app.router import ROUTES, STATIC_PREFIX


def parse_timestamp(value):
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class TestHomePage:
    """Tests for the HTML landing page."""

    def test_home_lists_endpoints(self, client):
        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.headers["content-type"].startswith("text/html")
        for endpoint in ("/api/hello", "/health", "/ready"):
            assert endpoint in response.text

    def test_home_ignores_query_string(self, client):
        assert client.get("/").text == client.get("/?anything=1").text


class TestHelloEndpoint:
    """Tests for /api/hello."""

    def test_hello_response_shape(self, client):
        before = datetime.now(timezone.utc)
        response = client.get("/api/hello")
        after = datetime.now(timezone.utc)

        assert response.status_code == status.HTTP_200_OK
        assert response.headers["content-type"].startswith("application/json")

        data = response.json()
        assert set(data) == {"message", "timestamp", "version", "host"}
        assert data["message"] == "Hello from Go Web App running on Kubernetes!"
        assert data["version"] == "1.0.0"

        timestamp = parse_timestamp(data["timestamp"])
        assert before - timedelta(seconds=1) <= timestamp <= after + timedelta(seconds=1)

    @patch("app.api.hello.get_hostname")
    def test_hello_reports_hostname(self, mock_hostname, client):
        mock_hostname.return_value = "web-app-7d9f8-abcde"

        data = client.get("/api/hello").json()

        assert data["host"] == "web-app-7d9f8-abcde"

    @patch("app.api.hello.get_hostname")
    def test_hello_without_hostname(self, mock_hostname, client):
        """Missing hostname yields an empty host, not an error."""
        mock_hostname.return_value = None

        response = client.get("/api/hello")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["host"] == ""

    def test_concurrent_requests_are_independent(self, client):
        with ThreadPoolExecutor(max_workers=4) as pool:
            responses = list(pool.map(lambda _: client.get("/api/hello"), range(8)))

        assert all(r.status_code == status.HTTP_200_OK for r in responses)
        payloads = [r.json() for r in responses]
        assert len({p["message"] for p in payloads}) == 1
        assert len({p["host"] for p in payloads}) == 1
        for payload in payloads:
            assert payload["version"] == "1.0.0"
            parse_timestamp(payload["timestamp"])


class TestRouting:
    """Tests for dispatch precedence and unmatched requests."""

    def test_route_table(self):
        assert [(method, path) for method, path, _ in ROUTES] == [
            ("GET", "/"),
            ("GET", "/api/hello"),
            ("GET", "/health"),
            ("GET", "/ready"),
        ]

    def test_static_mount_registered_after_exact_routes(self, app):
        paths = [route.path for route in app.routes]

        assert paths[-1] == STATIC_PREFIX
        for _, path, _ in ROUTES:
            assert paths.index(path) < paths.index(STATIC_PREFIX)

    def test_unknown_path(self, client):
        assert client.get("/nope").status_code == status.HTTP_404_NOT_FOUND
        assert client.get("/api/hello/extra").status_code == status.HTTP_404_NOT_FOUND

    def test_wrong_method(self, client):
        assert client.post("/api/hello").status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert client.put("/").status_code == status.HTTP_405_METHOD_NOT_ALLOWED

    def test_docs_not_exposed(self, client):
        assert client.get("/docs").status_code == status.HTTP_404_NOT_FOUND
        assert client.get("/openapi.json").status_code == status.HTTP_404_NOT_FOUND
