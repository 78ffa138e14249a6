import pytest
from fastapi.testclient import TestClient

from restriction_prompts.api.http_api import app


@pytest.fixture()
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_placeholders_endpoint(client):
    response = client.post("/v1/prompts/placeholders", json={
        "prompt": "Tags: %RESTRICTED_TAGS% | %RESTRICTED_CORRESPONDENTS%",
        "tags": [{"name": "Invoice"}, {"name": "Receipt"}, None],
        "correspondents": "  Acme Corp ",
    })

    assert response.status_code == 200
    assert response.json() == {"prompt": "Tags: Invoice, Receipt | Acme Corp"}


def test_placeholders_endpoint_rejects_blank_prompt(client):
    response = client.post("/v1/prompts/placeholders", json={"prompt": "   "})

    assert response.status_code == 400
    assert response.json() == {"error": "No prompt provided"}


def test_placeholders_endpoint_validates_body(client):
    response = client.post("/v1/prompts/placeholders", json={"tags": []})
    assert response.status_code == 422


def test_restrictions_endpoint(client):
    response = client.post("/v1/prompts/restrictions", json={
        "config": {"restrictToExistingTags": "yes", "restrictToExistingDocumentTypes": True},
        "tags": [{"name": "A"}],
        "correspondents": [None, "Bob", {"name": "Alice"}, {}],
        "document_types": [{"name": "Letter"}, {"name": ""}],
    })

    block = response.json()["restrictions"]
    assert response.status_code == 200
    assert block.startswith("\n\n") and block.endswith("\n\n")
    assert block.index("Available tags: A") < block.index("Available document types: Letter")
    assert "correspondents" not in block


def test_restrictions_endpoint_empty_allow_list(client):
    response = client.post("/v1/prompts/restrictions", json={
        "config": {"restrictToExistingTags": "yes"},
        "tags": [],
    })
    assert response.json() == {"restrictions": ""}


def test_restrictions_endpoint_falls_back_to_environment(client, monkeypatch):
    monkeypatch.setenv("RESTRICT_TO_EXISTING_CORRESPONDENTS", "yes")

    response = client.post("/v1/prompts/restrictions", json={
        "correspondents": [None, "Bob", {"name": "Alice"}, {}],
    })

    assert "Available correspondents: Bob, Alice" in response.json()["restrictions"]


def test_compose_endpoint(client):
    response = client.post("/v1/prompts/compose", json={
        "prompt": "Classify. Tags: %RESTRICTED_TAGS%",
        "config": {"restrictToExistingTags": True},
        "tags": [{"name": "Invoice"}],
    })

    assert response.status_code == 200
    assert response.json()["prompt"] == (
        "\n\nIMPORTANT: You must ONLY use tags from this list. "
        "Do not create or suggest any tags not in this list:\n"
        "Available tags: Invoice\n\n"
        "Classify. Tags: Invoice"
    )


def test_compose_endpoint_rejects_blank_prompt(client):
    response = client.post("/v1/prompts/compose", json={"prompt": ""})
    assert response.status_code == 400
