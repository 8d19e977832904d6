"""Observability – structured logging helpers."""
from requisite.observability.logging.factory import JsonLoggerFactory
from requisite.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
