"""Domain models, constrained fields and errors.

Why:
- Pure, strict data structures live here (Pydantic v2).
- The domain knows nothing about files, JSON or the CLI: only the problem's concepts.
"""
