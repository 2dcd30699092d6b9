"""
Main Orchestrator for Idle Growth

This module ties the growth state, the notation formatter and the event
logger together, and defines the three commands a UI can issue:
1. Increase counter (grow one tick)
2. Increase multiplier (buy one multiplier level)
3. Increase base (buy one tier)

DESIGN DECISION: The session enforces the boundaries:
- The state is owned here and never handed out for mutation
- One command runs at a time (a lock covers each one)
- Display strings are built while the lock is held, so they always
  match the state the command produced
- Every command is logged before the lock is released, so the event
  history lists commands in the order they ran

The UI gets back a DisplayUpdate telling it exactly which values to
redraw. A rejected purchase redraws nothing.
"""

import threading
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from idlegrowth.audit import EventLogger, configure_logging, create_session_id
from idlegrowth.config import GameSettings, get_settings
from idlegrowth.models.events import GrowthEventBuilder
from idlegrowth.models.state import GrowthState
from idlegrowth.notation import NotationFormatter


class GrowthCommand(str, Enum):
    """Commands a UI can send to a session."""
    INCREASE_COUNTER = "increase_counter"
    INCREASE_MULTIPLIER = "increase_multiplier"
    INCREASE_BASE = "increase_base"
    REFRESH = "refresh"


class DisplayUpdate(BaseModel):
    """
    What the UI has to redraw after a command.
    
    A field left as None means "keep showing what you have".
    """
    
    command: GrowthCommand = Field(
        ...,
        description="Command that produced this update"
    )
    accepted: bool = Field(
        ...,
        description="False when a purchase was not affordable"
    )
    counter: Optional[str] = Field(
        default=None,
        description="New counter display string"
    )
    multiplier: Optional[str] = Field(
        default=None,
        description="New multiplier display string"
    )
    base: Optional[str] = Field(
        default=None,
        description="New base display string"
    )
    
    @property
    def has_changes(self) -> bool:
        return any(
            value is not None
            for value in (self.counter, self.multiplier, self.base)
        )


class GrowthSession:
    """
    Single owner of a GrowthState for one interactive session.
    
    Flow per command:
    1. Acquire the lock
    2. Run exactly one state operation
    3. Render the changed values (only if the operation succeeded)
    4. Log the event
    5. Release the lock
    """
    
    def __init__(
        self,
        state: Optional[GrowthState] = None,
        formatter: Optional[NotationFormatter] = None,
        event_logger: Optional[EventLogger] = None,
        session_id: Optional[UUID] = None,
    ):
        self._state = state or GrowthState()
        self._formatter = formatter or NotationFormatter()
        self._event_logger = event_logger
        self._session_id = session_id or create_session_id()
        self._lock = threading.Lock()
    
    @property
    def session_id(self) -> UUID:
        return self._session_id
    
    @property
    def event_logger(self) -> Optional[EventLogger]:
        return self._event_logger
    
    def increase_counter(self) -> DisplayUpdate:
        """Grow one tick. Always accepted."""
        with self._lock:
            self._state.update_counter()
            update = DisplayUpdate(
                command=GrowthCommand.INCREASE_COUNTER,
                accepted=True,
                counter=self._formatter.format(self._state.counter),
            )
            event = GrowthEventBuilder.counter_increased(
                counter=self._state.counter,
                base=self._state.base,
                multiplier=self._state.multiplier,
                session_id=self._session_id,
            )
            self._log(event)
        
        return update
    
    def increase_multiplier(self) -> DisplayUpdate:
        """
        Buy one multiplier level.
        
        On success the counter and multiplier displays change.
        On rejection nothing changes.
        """
        with self._lock:
            cost = self._state.multiplier_cost()
            if self._state.update_multiplier():
                update = DisplayUpdate(
                    command=GrowthCommand.INCREASE_MULTIPLIER,
                    accepted=True,
                    counter=self._formatter.format(self._state.counter),
                    multiplier=self._formatter.format(self._state.multiplier),
                )
                build = GrowthEventBuilder.multiplier_purchased
            else:
                update = DisplayUpdate(
                    command=GrowthCommand.INCREASE_MULTIPLIER,
                    accepted=False,
                )
                build = GrowthEventBuilder.multiplier_rejected
            
            event = build(
                counter=self._state.counter,
                base=self._state.base,
                multiplier=self._state.multiplier,
                cost=cost,
                session_id=self._session_id,
            )
            self._log(event)
        
        return update
    
    def increase_base(self) -> DisplayUpdate:
        """
        Buy one tier.
        
        On success the counter and base displays change.
        On rejection nothing changes.
        """
        with self._lock:
            power = self._state.base_power()
            if self._state.update_base():
                update = DisplayUpdate(
                    command=GrowthCommand.INCREASE_BASE,
                    accepted=True,
                    counter=self._formatter.format(self._state.counter),
                    base=self._formatter.format(self._state.base),
                )
                build = GrowthEventBuilder.base_purchased
            else:
                update = DisplayUpdate(
                    command=GrowthCommand.INCREASE_BASE,
                    accepted=False,
                )
                build = GrowthEventBuilder.base_rejected
            
            event = build(
                counter=self._state.counter,
                base=self._state.base,
                multiplier=self._state.multiplier,
                power=power,
                session_id=self._session_id,
            )
            self._log(event)
        
        return update
    
    def display(self) -> DisplayUpdate:
        """All three display strings, for the first render."""
        with self._lock:
            return DisplayUpdate(
                command=GrowthCommand.REFRESH,
                accepted=True,
                counter=self._formatter.format(self._state.counter),
                multiplier=self._formatter.format(self._state.multiplier),
                base=self._formatter.format(self._state.base),
            )
    
    def snapshot(self) -> GrowthState:
        """Copy of the current state. Mutating it does not affect the session."""
        with self._lock:
            return self._state.snapshot()
    
    def _log(self, event) -> None:
        if self._event_logger:
            self._event_logger.log(event)


def create_session(
    settings: Optional[GameSettings] = None,
    state: Optional[GrowthState] = None,
) -> GrowthSession:
    """
    Factory function to create a session with logging wired in.
    
    Args:
        settings: Settings to use. Defaults to get_settings().
        state: Starting state. Defaults to a fresh GrowthState.
    
    Returns:
        A ready GrowthSession
    """
    settings = settings or get_settings()
    
    configure_logging(settings.effective_log_level)
    event_logger = EventLogger(history_size=settings.event_history_size)
    
    return GrowthSession(state=state, event_logger=event_logger)
