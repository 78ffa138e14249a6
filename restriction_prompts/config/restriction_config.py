"""Runtime restriction configuration for the prompt formatter.

Architectural role:
    Maps process environment variables (optionally loaded from a `.env` file)
    onto the `restrictToExisting*` mapping consumed by
    `restriction_prompts.prompting.restriction_prompt.build_restriction_prompt`.

Determinism:
    Deterministic for a fixed process environment. `.env` values are loaded
    once at import time and never override variables already set.

Value semantics:
    Raw strings are passed through (stripped only). Whether a value enables a
    restriction is decided by the formatter, which honors only "yes" and the
    boolean `True`.
"""

import os
from dotenv import load_dotenv

from restriction_prompts.prompting.restriction_prompt import (
    RESTRICT_TAGS_FLAG,
    RESTRICT_CORRESPONDENTS_FLAG,
    RESTRICT_DOCUMENT_TYPES_FLAG,
)

load_dotenv()

# Configuration key -> environment variable.
ENVIRONMENT_VARIABLES = {
    RESTRICT_TAGS_FLAG: "RESTRICT_TO_EXISTING_TAGS",
    RESTRICT_CORRESPONDENTS_FLAG: "RESTRICT_TO_EXISTING_CORRESPONDENTS",
    RESTRICT_DOCUMENT_TYPES_FLAG: "RESTRICT_TO_EXISTING_DOCUMENT_TYPES",
}

DEFAULT_VALUE = "no"


def load_restriction_config(environ=None) -> dict:
    """Read restriction flags from the environment.

    Args:
        environ: Mapping to read instead of `os.environ` (used by tests and
            by callers that already hold a settings dict).

    Returns:
        Dict keyed by the three `restrictToExisting*` names. Unset variables
        default to "no".
    """
    source = os.environ if environ is None else environ

    return {
        key: str(source.get(env_name, DEFAULT_VALUE)).strip()
        for key, env_name in ENVIRONMENT_VARIABLES.items()
    }


def merge_restriction_config(base, overrides) -> dict:
    """Overlay recognized, non-`None` values from `overrides` onto `base`.

    Unknown keys in `overrides` are ignored so callers can pass through a
    larger settings payload.
    """
    merged = dict(base or {})

    for key in ENVIRONMENT_VARIABLES:
        value = (overrides or {}).get(key)
        if value is not None:
            merged[key] = value

    return merged
