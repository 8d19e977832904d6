"""Observability – structured logging helpers for callers that want them."""
