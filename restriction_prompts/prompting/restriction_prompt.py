"""Restriction prompt helpers used by document-classification callers.

This module only formats prompt text from allow-lists that were already fetched
from the document management system. Fetching reference data, loading
configuration, and invoking the text-generation service happen elsewhere.

Design constraints:
    - Deterministic construction for identical inputs.
    - Fixed block ordering: tags, correspondents, document types.
    - No hidden side effects (no I/O, no global state mutation, no caching).

Input tolerance:
    - Malformed reference data degrades to empty output instead of raising.
    - `prompt` must be a string; other types surface Python's own errors.
"""

import logging
from collections.abc import Mapping, Sequence

logger = logging.getLogger(__name__)


# =========================================================
# PLACEHOLDER TOKENS
# =========================================================
# Literal markers recognized inside prompt templates. Any other `%...%` text
# passes through unchanged.

RESTRICTED_TAGS_PLACEHOLDER = "%RESTRICTED_TAGS%"
RESTRICTED_CORRESPONDENTS_PLACEHOLDER = "%RESTRICTED_CORRESPONDENTS%"


# =========================================================
# CONFIGURATION FLAGS
# =========================================================
# Only the boolean `True` and the exact string "yes" enable a restriction.

RESTRICT_TAGS_FLAG = "restrictToExistingTags"
RESTRICT_CORRESPONDENTS_FLAG = "restrictToExistingCorrespondents"
RESTRICT_DOCUMENT_TYPES_FLAG = "restrictToExistingDocumentTypes"

ENABLED_VALUE = "yes"


# =========================================================
# RESTRICTION BLOCK TEMPLATE
# =========================================================
# One directive per category. The label is repeated verbatim in the
# "Available <label>: " line that precedes the joined allow-list.

RESTRICTION_TEMPLATE = (
    "IMPORTANT: You must ONLY use {label} from this list. "
    "Do not create or suggest any {label} not in this list:\n"
    "Available {label}: {names}"
)


def _is_enabled(config, key: str) -> bool:
    """Return whether restriction flag `key` is switched on in `config`."""
    if not config:
        return False
    value = config.get(key)
    return value is True or value == ENABLED_VALUE


def _entry_name(entry) -> str:
    """Read `name` from a mapping or attribute-style entry, else ``""``."""
    if not entry:
        return ""
    if isinstance(entry, Mapping):
        name = entry.get("name")
    else:
        name = getattr(entry, "name", None)
    return name if isinstance(name, str) else ""


def _resolve_name(entry) -> str:
    """Resolve a correspondent entry to its display name.

    Plain strings are used as they are, name-bearing entries contribute their
    `name`, and anything else resolves to an empty string.
    """
    if isinstance(entry, str):
        return entry
    return _entry_name(entry)


def _is_sequence(value) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


# =========================================================
# LIST FORMATTERS
# =========================================================
# Tags and correspondents are kept as separate helpers: only correspondents
# accept a pre-joined string.

def _format_tags_list(existing_tags) -> str:
    """Join tag names with ``", "``; non-sequences and empty input give ``""``."""
    if not _is_sequence(existing_tags) or not existing_tags:
        return ""

    names = (_entry_name(tag) for tag in existing_tags)
    return ", ".join(name for name in names if name)


def _format_correspondents_list(existing_correspondent_list) -> str:
    """Join correspondent names with ``", "``.

    Edge cases:
        - Falsy input returns ``""``.
        - A string is trusted as pre-formatted and only stripped.
        - Falsy elements and elements without a usable name are dropped.
        - Any other input shape returns ``""``.
    """
    if not existing_correspondent_list:
        return ""

    if isinstance(existing_correspondent_list, str):
        return existing_correspondent_list.strip()

    if _is_sequence(existing_correspondent_list):
        names = (
            _resolve_name(correspondent)
            for correspondent in existing_correspondent_list
            if correspondent
        )
        return ", ".join(name for name in names if name)

    return ""


def _format_document_types_list(existing_document_types) -> str:
    if not _is_sequence(existing_document_types):
        return ""

    names = (_entry_name(doc_type) for doc_type in existing_document_types)
    return ", ".join(name for name in names if name)


# =========================================================
# PLACEHOLDER SUBSTITUTION
# =========================================================

def process_placeholders(prompt: str, existing_tags, existing_correspondent_list) -> str:
    """Replace restriction placeholders in `prompt` with allow-list names.

    Args:
        prompt: Template text that may contain `%RESTRICTED_TAGS%` and/or
            `%RESTRICTED_CORRESPONDENTS%`.
        existing_tags: Sequence of tag entries exposing `name`.
        existing_correspondent_list: Pre-joined string or sequence of
            strings/name-bearing entries.

    Returns:
        Prompt with every occurrence of each token replaced. Prompts without
        tokens are returned unchanged.

    Edge cases:
        - An empty formatted list removes the token without touching the
          surrounding text.
        - Lists are only formatted when their token is present.
    """
    processed_prompt = prompt

    if RESTRICTED_TAGS_PLACEHOLDER in processed_prompt:
        tags_list = _format_tags_list(existing_tags)
        processed_prompt = processed_prompt.replace(RESTRICTED_TAGS_PLACEHOLDER, tags_list)

    if RESTRICTED_CORRESPONDENTS_PLACEHOLDER in processed_prompt:
        correspondents_list = _format_correspondents_list(existing_correspondent_list)
        processed_prompt = processed_prompt.replace(
            RESTRICTED_CORRESPONDENTS_PLACEHOLDER, correspondents_list
        )

    return processed_prompt


def process_restrictions_in_prompt(prompt: str, existing_tags, existing_correspondent_list, config=None) -> str:
    """Entry point kept for callers that also pass their configuration.

    `config` is accepted but never read; the result is exactly
    `process_placeholders(prompt, existing_tags, existing_correspondent_list)`.
    """
    return process_placeholders(prompt, existing_tags, existing_correspondent_list)


# =========================================================
# RESTRICTION BLOCK
# =========================================================
# Block component order:
#   1) tags
#   2) correspondents
#   3) document types
# Enabled categories with an empty allow-list are skipped, so the block never
# tells the model to choose from nothing.

def build_restriction_prompt(config, existing_tags, existing_correspondent_list, existing_document_types=()) -> str:
    """Build restriction instructions to prepend to a prompt.

    Args:
        config: Mapping holding the `restrictToExisting*` flags. Missing keys
            and a `None` config mean "disabled".
        existing_tags: Sequence of tag entries exposing `name`.
        existing_correspondent_list: Pre-joined string or sequence of
            strings/name-bearing entries.
        existing_document_types: Sequence of document type entries exposing
            `name`.

    Returns:
        ``""`` when no restriction applies, otherwise the blocks joined by a
        blank line and wrapped in ``"\\n\\n"`` on both sides so the result can
        be concatenated with a prompt body directly.
    """
    candidates = (
        (RESTRICT_TAGS_FLAG, "tags", _format_tags_list, existing_tags),
        (RESTRICT_CORRESPONDENTS_FLAG, "correspondents", _format_correspondents_list, existing_correspondent_list),
        (RESTRICT_DOCUMENT_TYPES_FLAG, "document types", _format_document_types_list, existing_document_types),
    )

    restriction_parts = []

    for flag, label, formatter, entries in candidates:
        if not _is_enabled(config, flag):
            continue

        names = formatter(entries)
        if not names:
            logger.debug("Skipping %s restriction: allow-list is empty", label)
            continue

        restriction_parts.append(RESTRICTION_TEMPLATE.format(label=label, names=names))

    if not restriction_parts:
        return ""

    return "\n\n" + "\n\n".join(restriction_parts) + "\n\n"


def compose_prompt(prompt: str, config, existing_tags, existing_correspondent_list, existing_document_types=()) -> str:
    """Return the restriction block followed by the placeholder-substituted prompt.

    With no active restriction the result equals
    `process_placeholders(prompt, existing_tags, existing_correspondent_list)`.
    """
    restrictions = build_restriction_prompt(
        config,
        existing_tags,
        existing_correspondent_list,
        existing_document_types,
    )
    return restrictions + process_placeholders(prompt, existing_tags, existing_correspondent_list)
