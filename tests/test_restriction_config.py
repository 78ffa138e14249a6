from restriction_prompts.config.restriction_config import (
    load_restriction_config,
    merge_restriction_config,
)
from restriction_prompts.prompting.restriction_prompt import build_restriction_prompt


def test_load_restriction_config_defaults():
    assert load_restriction_config({}) == {
        "restrictToExistingTags": "no",
        "restrictToExistingCorrespondents": "no",
        "restrictToExistingDocumentTypes": "no",
    }


def test_load_restriction_config_reads_os_environ(monkeypatch):
    monkeypatch.setenv("RESTRICT_TO_EXISTING_TAGS", " yes ")
    monkeypatch.setenv("RESTRICT_TO_EXISTING_DOCUMENT_TYPES", "true")

    config = load_restriction_config()

    assert config["restrictToExistingTags"] == "yes"
    assert config["restrictToExistingCorrespondents"] == "no"
    # Only "yes" enables a restriction; other spellings are kept as-is.
    assert config["restrictToExistingDocumentTypes"] == "true"


def test_loaded_config_drives_restriction_block():
    config = load_restriction_config({
        "RESTRICT_TO_EXISTING_TAGS": "yes",
        "RESTRICT_TO_EXISTING_DOCUMENT_TYPES": "TRUE",
    })
    result = build_restriction_prompt(config, [{"name": "Invoice"}], [], [{"name": "Letter"}])

    assert "Available tags: Invoice" in result
    assert "document types" not in result


def test_merge_restriction_config_overlays_known_keys():
    base = load_restriction_config({})
    merged = merge_restriction_config(base, {
        "restrictToExistingTags": True,
        "restrictToExistingCorrespondents": None,
        "unrelatedSetting": "yes",
    })

    assert merged == {
        "restrictToExistingTags": True,
        "restrictToExistingCorrespondents": "no",
        "restrictToExistingDocumentTypes": "no",
    }
    assert base["restrictToExistingTags"] == "no"


def test_merge_restriction_config_handles_missing_inputs():
    assert merge_restriction_config(None, None) == {}
    assert merge_restriction_config({"restrictToExistingTags": "yes"}, None) == {
        "restrictToExistingTags": "yes",
    }
