"""Core: request building, serialization and response records.

Why:
- Everything a call needs except the concrete HTTP client and the CLI.
"""
