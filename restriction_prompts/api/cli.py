"""
One-shot CLI entrypoint for restriction prompt formatting.

Architectural role:
- Provides a terminal interface over `restriction_prompts.prompting`.
- Reads a prompt template and optional reference data from files or stdin.
- Prints the formatted prompt to stdout.

Request lifecycle:
1. Parse arguments.
2. Read the template (`-` means stdin) and the JSON reference document.
3. Resolve restriction flags from the environment, then apply `--restrict-*`
   overrides.
4. Compose (or only substitute placeholders) and print the result.

Reference document shape:
    {"tags": [{"name": ...}], "correspondents": [...] | "A, B",
     "document_types": [{"name": ...}]}
    Every key is optional.

Error handling strategy:
- Unreadable files, invalid JSON, and non-object reference documents are
  logged and reported through `parser.error` (exit status 2).
- Malformed list entries are not errors; the formatter drops them.
"""

import argparse
import json
import logging
import os
import sys

from restriction_prompts.config.restriction_config import (
    load_restriction_config,
    merge_restriction_config,
)
from restriction_prompts.prompting.restriction_prompt import (
    RESTRICT_TAGS_FLAG,
    RESTRICT_CORRESPONDENTS_FLAG,
    RESTRICT_DOCUMENT_TYPES_FLAG,
    ENABLED_VALUE,
    compose_prompt,
    process_placeholders,
)

logger = logging.getLogger(__name__)


def read_text(path):
    """Return file contents, or stdin when `path` is "-"."""
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def load_reference(path):
    """Load the reference JSON document; `None` path yields an empty dict."""
    if not path:
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError("reference document must be a JSON object")
    return data


def build_parser():
    parser = argparse.ArgumentParser(
        prog="restriction-prompts",
        description="Format a prompt with restriction placeholders and instructions",
    )
    parser.add_argument("prompt_file", help="Prompt template file, or - for stdin")
    parser.add_argument("--reference", default=None, help="JSON file with tags/correspondents/document_types")
    parser.add_argument("--restrict-tags", action="store_true", help="Restrict to existing tags")
    parser.add_argument("--restrict-correspondents", action="store_true", help="Restrict to existing correspondents")
    parser.add_argument("--restrict-document-types", action="store_true", help="Restrict to existing document types")
    parser.add_argument("--placeholders-only", action="store_true", help="Only substitute placeholders")
    return parser


def main(argv=None):
    """
    Run one formatting request and print the result.

    Returns:
        Process exit code (`0` on success). Argument and input errors exit
        through `parser.error`.
    """
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING"))

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        prompt = read_text(args.prompt_file)
        reference = load_reference(args.reference)
    except (OSError, ValueError) as exc:
        # json.JSONDecodeError is a ValueError subclass.
        logger.error("Failed to read input: %s", exc)
        parser.error(str(exc))

    tags = reference.get("tags", [])
    correspondents = reference.get("correspondents", [])
    document_types = reference.get("document_types", [])

    if args.placeholders_only:
        print(process_placeholders(prompt, tags, correspondents))
        return 0

    overrides = {
        RESTRICT_TAGS_FLAG: ENABLED_VALUE if args.restrict_tags else None,
        RESTRICT_CORRESPONDENTS_FLAG: ENABLED_VALUE if args.restrict_correspondents else None,
        RESTRICT_DOCUMENT_TYPES_FLAG: ENABLED_VALUE if args.restrict_document_types else None,
    }
    config = merge_restriction_config(load_restriction_config(), overrides)

    print(compose_prompt(prompt, config, tags, correspondents, document_types))
    return 0


if __name__ == "__main__":
    sys.exit(main())
