import pytest

from restriction_prompts.config.restriction_config import ENVIRONMENT_VARIABLES


@pytest.fixture(autouse=True)
def clean_restriction_env(monkeypatch):
    """Keep host `.env` / environment flags out of every test."""
    for env_name in ENVIRONMENT_VARIABLES.values():
        monkeypatch.delenv(env_name, raising=False)


@pytest.fixture()
def tags():
    return [{"id": 1, "name": "Invoice"}, {"id": 2, "name": "Receipt"}]


@pytest.fixture()
def correspondents():
    return [{"id": 7, "name": "Acme Corp"}, "Globex"]


@pytest.fixture()
def document_types():
    return [{"id": 3, "name": "Letter"}, {"id": 4, "name": "Contract"}]
