"""Tests for the backend client IP endpoint."""

import pytest
from fastapi.testclient import TestClient

from backend.app.api.client_ip import extract_client_ip
from backend.app.main import app

client = TestClient(app)


@pytest.mark.parametrize("header, expected", [
    ("203.0.113.7", "203.0.113.7"),
    ("203.0.113.7, 10.0.0.1, 10.0.0.2", "203.0.113.7"),
    (" 2001:db8::1 ,10.0.0.1", "2001:db8::1"),
    ("", "unknown"),
    (None, "unknown"),
])
def test_extract_client_ip(header, expected):
    assert extract_client_ip(header) == expected


def test_get_ip_reads_forwarded_for():
    response = client.get("/api/get-ip", headers={"X-Forwarded-For": "198.51.100.23, 10.0.0.1"})

    assert response.status_code == 200
    assert response.json() == {"ip": "198.51.100.23"}


def test_get_ip_without_header_is_unknown():
    response = client.get("/api/get-ip")

    assert response.json() == {"ip": "unknown"}


def test_root():
    response = client.get("/")

    assert response.status_code == 200
    assert "DrinkMailer" in response.json()["message"]


def test_backend_logging_config_routes_access_log_separately(tmp_path):
    from backend.app.core.logging_config import build_logging_config

    log_config = build_logging_config(str(tmp_path / "backend.log"))

    assert log_config["handlers"]["rotating_file"]["filename"] == str(tmp_path / "backend.log")
    assert log_config["loggers"]["uvicorn.access"]["propagate"] is False
    assert log_config["loggers"]["uvicorn.access"]["level"] == "WARNING"
