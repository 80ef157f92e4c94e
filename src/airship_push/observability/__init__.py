"""Observability – logging for the client and entities."""
from airship_push.observability.logging import Logger, configure_logging, get_logger

__all__ = ["Logger", "configure_logging", "get_logger"]
