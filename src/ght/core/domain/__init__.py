"""Domain models.

Why:
- Plain, strict data structures (Pydantic v2) shared by CLI and services.
- The domain knows nothing about HTTP, subprocesses or the terminal.
"""
