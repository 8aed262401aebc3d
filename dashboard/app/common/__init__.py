"""Shared helpers: numeric coercion, notices and pydantic bases."""
