"""Core interfaces/abstractions.

Why:
- Defines the contracts (Protocol) that concrete adapters implement.
- Dependencies point inward: the store depends on these abstractions, not on
  a particular codec or filesystem.
"""
