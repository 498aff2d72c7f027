"""Observability: structured logging and request correlation."""
