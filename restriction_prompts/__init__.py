"""Restriction prompt formatting for document-classification prompts.

Sub-packages:
    - `prompting`: placeholder substitution and restriction-block assembly.
    - `config`: environment-driven restriction flags.
    - `api`: CLI and HTTP adapters over the prompting helpers.
"""
