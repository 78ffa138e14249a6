"""
HTTP API adapter for restriction prompt formatting.

Architectural role:
- Expose the prompting helpers to services that cannot import them directly.
- Enforce adapter-level input validation.
- Delegate all formatting to `restriction_prompts.prompting.restriction_prompt`.

Endpoint responsibilities:
- `GET /health`: liveness probe.
- `POST /v1/prompts/placeholders`: substitute `%RESTRICTED_*%` placeholders.
- `POST /v1/prompts/restrictions`: build the restriction block only.
- `POST /v1/prompts/compose`: restriction block followed by the substituted prompt.

Input validation behavior:
- Body shape is validated by pydantic (HTTP 422 on type errors).
- Empty or whitespace-only `prompt` -> HTTP 400.
- Missing `config` -> flags are read from the environment.

Side effects:
- Loads environment variables at import time via `load_dotenv()`.
- Emits request debug logs only when `DEBUG == "true"`.
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import os
from typing import Any, Dict, List, Optional, Union

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from restriction_prompts.config.restriction_config import (
    load_restriction_config,
    merge_restriction_config,
)
from restriction_prompts.prompting.restriction_prompt import (
    build_restriction_prompt,
    compose_prompt,
    process_placeholders,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Restriction Prompts")
# Request payloads may contain customer names; debug logging is opt-in.
DEBUG = os.getenv("DEBUG") == "true"


# ============================================================
# Request Schemas
# ============================================================
# Reference entries are passed through as plain dicts so the formatter's
# tolerance rules (missing/empty `name`, null entries) stay in one place.

class PlaceholderRequest(BaseModel):
    prompt: str
    tags: List[Optional[Dict[str, Any]]] = []
    correspondents: Union[str, List[Union[str, Dict[str, Any], None]]] = []


class RestrictionRequest(BaseModel):
    config: Optional[Dict[str, Any]] = None
    tags: List[Optional[Dict[str, Any]]] = []
    correspondents: Union[str, List[Union[str, Dict[str, Any], None]]] = []
    document_types: List[Optional[Dict[str, Any]]] = []


class ComposeRequest(RestrictionRequest):
    prompt: str


def resolve_config(config):
    """Overlay request flags on the environment configuration."""
    return merge_restriction_config(load_restriction_config(), config)


def missing_prompt_response():
    return JSONResponse(status_code=400, content={"error": "No prompt provided"})


# ============================================================
# Endpoints
# ============================================================

@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/v1/prompts/placeholders")
def substitute_placeholders(request: PlaceholderRequest):
    """Return the prompt with restriction placeholders replaced."""
    if not request.prompt.strip():
        return missing_prompt_response()

    if DEBUG:
        logger.debug("Placeholder request: %r", request)

    return {"prompt": process_placeholders(request.prompt, request.tags, request.correspondents)}


@app.post("/v1/prompts/restrictions")
def restrictions(request: RestrictionRequest):
    """Return the restriction block for the given allow-lists.

    An empty string is returned when no restriction is enabled or every enabled
    allow-list is empty.
    """
    config = resolve_config(request.config)

    if DEBUG:
        logger.debug("Restriction request: config=%r", config)

    block = build_restriction_prompt(
        config,
        request.tags,
        request.correspondents,
        request.document_types,
    )
    return {"restrictions": block}


@app.post("/v1/prompts/compose")
def compose(request: ComposeRequest):
    """Return the restriction block followed by the substituted prompt."""
    if not request.prompt.strip():
        return missing_prompt_response()

    config = resolve_config(request.config)

    if DEBUG:
        logger.debug("Compose request: config=%r", config)

    return {
        "prompt": compose_prompt(
            request.prompt,
            config,
            request.tags,
            request.correspondents,
            request.document_types,
        )
    }
