"""Audit logging package."""

from idlegrowth.audit.logger import EventLogger, configure_logging, create_session_id

__all__ = ["EventLogger", "configure_logging", "create_session_id"]
