import pytest

fastapi = pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from link_checker import web
from link_checker.app import LinkCheckerApp
from link_checker.checker import StatusChecker

from conftest import SAMPLE_TEXT


@pytest.fixture()
def client(monkeypatch, status_transport):
    transport = status_transport(
        {"https://example.com/ok": 200, "https://example.com/404": 404}
    )

    def build(policy):
        return LinkCheckerApp(status_checker=StatusChecker(transport=transport), policy=policy)

    monkeypatch.setattr(web, "_build_checker", build)
    return TestClient(web.app)


def test_homepage_renders_form(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "Link Checker" in response.text
    assert "tailwind" in response.text.lower()
    assert "name=\"text\"" in response.text


def test_check_text_returns_report(client):
    response = client.post("/check-text", data={"text": SAMPLE_TEXT})

    assert response.status_code == 200
    assert "Link Report" in response.text
    assert "1 out of 2 links are working!" in response.text
    assert "https://example.com/404" in response.text


def test_check_text_applies_pass_codes(client):
    response = client.post("/check-text", data={"text": SAMPLE_TEXT, "pass_codes": "404"})

    assert "2 out of 2 links are working!" in response.text


def test_check_text_rejects_bad_codes(client):
    response = client.post("/check-text", data={"text": SAMPLE_TEXT, "only": "abc"})

    assert response.status_code == 422


def test_api_check_returns_structured_results(client):
    response = client.post("/api/check", json={"text": SAMPLE_TEXT, "only": 404})

    assert response.status_code == 200
    payload = response.json()
    assert payload["good"] == [{"link": "https://example.com/404", "status": 404}]
    assert payload["bad"] == [{"link": "https://example.com/ok", "status": 200}]


def test_api_check_rejects_conflicting_policy(client):
    response = client.post("/api/check", json={"text": SAMPLE_TEXT, "only": 200, "pass": [404]})

    assert response.status_code == 422
    assert "--only" in response.json()["detail"]
