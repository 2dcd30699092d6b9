"""
Event Logger

DESIGN DECISION: Every command a session runs is logged.
This provides:
1. Traceability of every purchase and rejection
2. Debugging capability for balance questions
3. A short in-memory history the UI can show

The event logger:
- Is synchronous; commands are short and never suspend
- Keeps nothing on disk (sessions are not saved)
- Tags events with the session ID that produced them
"""

import logging
from collections import deque
from typing import Optional
from uuid import UUID, uuid4

import structlog

from idlegrowth.models.events import GrowthEvent, GrowthEventSeverity


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: int = logging.INFO) -> None:
    """
    Route structlog output through the standard library at `level`.
    
    filter_by_level reads the stdlib logger level, so this is what
    decides whether growth ticks (debug) are emitted.
    """
    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger().setLevel(level)


class EventLogger:
    """
    Central growth event logging service.
    
    Logs events to:
    1. Structured local log (for debugging)
    2. A bounded in-memory history (for display)
    """
    
    def __init__(self, history_size: int = 100):
        """
        Initialize event logger.
        
        Args:
            history_size: How many recent events to keep.
                    0 keeps none.
        """
        self._history: deque[GrowthEvent] = deque(maxlen=history_size)
        self._logger = structlog.get_logger("idlegrowth")
    
    def log(self, event: GrowthEvent) -> None:
        """
        Log a growth event and remember it.
        """
        log_dict = event.to_log_dict()
        
        if event.severity == GrowthEventSeverity.DEBUG:
            self._logger.debug("growth_event", **log_dict)
        else:
            self._logger.info("growth_event", **log_dict)
        
        self._history.append(event)
    
    def recent(self, limit: Optional[int] = None) -> list[GrowthEvent]:
        """Most recent events, newest first."""
        events = list(reversed(self._history))
        if limit is not None:
            return events[:limit]
        return events
    
    def clear(self) -> None:
        self._history.clear()


def create_session_id() -> UUID:
    """
    Create a new session ID.
    
    Use this once when a session starts; every event it logs carries it.
    """
    return uuid4()
