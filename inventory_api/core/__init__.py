"""
Core utilities shared across the inventory API.

This package hosts configuration (env vars, paths), logging setup and the
error taxonomy. Services and routers depend on these primitives instead of
reading the environment or formatting errors themselves.
"""
