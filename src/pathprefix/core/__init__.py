"""Core path prefix value type and normalization helpers."""
