"""Configuration package.

Resolves restriction flags from the process environment and `.env` files.
"""
