"""Prompting package.

This package contains deterministic prompt-formatting helpers that constrain a
text-generation service to existing tags, correspondents, and document types.
It does not fetch reference data, load configuration, or invoke a model.
"""
