"""Restriction prompt adapter package.

Architectural role:
- Defines the external interaction boundary for HTTP and CLI interfaces.
- Performs transport-level validation and response shaping.
- Delegates all formatting to `restriction_prompts.prompting`.
"""
