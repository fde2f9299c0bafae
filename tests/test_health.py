"""
tests/test_health.py -- Integration tests for GET /api/health.

Covers:
  - 200 response with status, version, and components fields
  - components.database reports 'error' when the store does not answer
  - No authentication required
"""

from __future__ import annotations


def test_health_returns_200_with_components(client):
    c, _ = client
    resp = c.get("/api/health", headers={})
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "healthy"
    assert "version" in data
    assert data["components"] == {"app": "ok", "database": "ok"}


def test_health_reports_database_error(client, monkeypatch):
    c, service = client
    monkeypatch.setattr(service.store, "ping", lambda: False)
    data = c.get("/api/health").json()
    assert data["status"] == "degraded"
    assert data["components"]["database"] == "error"


def test_unknown_route_uses_error_envelope(client):
    c, _ = client
    resp = c.get("/api/nope")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "http_404"
