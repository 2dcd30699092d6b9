"""
Growth Event Models for Idle Growth

Every command a player issues produces one event:
1. Growth ticks
2. Accepted purchases
3. Rejected purchases (not affordable)

DESIGN DECISION: Quantities are carried in compact notation.
Counters outgrow every fixed-width number type, and past a few
thousand digits Python refuses to render them as decimal strings.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from idlegrowth.notation.formatter import to_notation


class GrowthEventType(str, Enum):
    """Types of events a session emits."""
    COUNTER_INCREASED = "counter_increased"
    MULTIPLIER_PURCHASED = "multiplier_purchased"
    MULTIPLIER_REJECTED = "multiplier_rejected"
    BASE_PURCHASED = "base_purchased"
    BASE_REJECTED = "base_rejected"


class GrowthEventSeverity(str, Enum):
    """Severity level for growth events."""
    DEBUG = "debug"
    INFO = "info"


class GrowthEvent(BaseModel):
    """
    A single growth event.
    
    Holds the state values as they were right after the command ran.
    """
    
    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )
    
    # Event classification
    event_type: GrowthEventType = Field(
        ...,
        description="Type of event"
    )
    severity: GrowthEventSeverity = Field(
        default=GrowthEventSeverity.INFO,
        description="Event severity"
    )
    
    # Which session produced it
    session_id: Optional[UUID] = Field(
        default=None,
        description="ID of the session that issued the command"
    )
    
    accepted: bool = Field(
        default=True,
        description="False when a purchase was rejected"
    )
    
    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="State values and costs in compact notation"
    )
    
    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "session_id": str(self.session_id) if self.session_id else None,
            "accepted": self.accepted,
            "description": self.description,
            "details": self.details,
        }


def _state_details(counter: int, base: int, multiplier: int, **extra: int) -> dict[str, str]:
    details = {
        "counter": to_notation(counter),
        "base": to_notation(base),
        "multiplier": to_notation(multiplier),
    }
    details.update({key: to_notation(value) for key, value in extra.items()})
    return details


class GrowthEventBuilder:
    """
    Helper class to build growth events.
    
    Usage:
        event = GrowthEventBuilder.counter_increased(counter, base, multiplier, session_id)
        event = GrowthEventBuilder.base_rejected(counter, base, multiplier, power, session_id)
    """
    
    @staticmethod
    def counter_increased(
        counter: int,
        base: int,
        multiplier: int,
        session_id: Optional[UUID] = None,
    ) -> GrowthEvent:
        return GrowthEvent(
            event_type=GrowthEventType.COUNTER_INCREASED,
            severity=GrowthEventSeverity.DEBUG,
            session_id=session_id,
            description="Counter grew by one tick",
            details=_state_details(counter, base, multiplier),
        )
    
    @staticmethod
    def multiplier_purchased(
        counter: int,
        base: int,
        multiplier: int,
        cost: int,
        session_id: Optional[UUID] = None,
    ) -> GrowthEvent:
        return GrowthEvent(
            event_type=GrowthEventType.MULTIPLIER_PURCHASED,
            session_id=session_id,
            description=f"Multiplier raised to {to_notation(multiplier)}",
            details=_state_details(counter, base, multiplier, cost=cost),
        )
    
    @staticmethod
    def multiplier_rejected(
        counter: int,
        base: int,
        multiplier: int,
        cost: int,
        session_id: Optional[UUID] = None,
    ) -> GrowthEvent:
        return GrowthEvent(
            event_type=GrowthEventType.MULTIPLIER_REJECTED,
            session_id=session_id,
            accepted=False,
            description="Multiplier upgrade not affordable",
            details=_state_details(counter, base, multiplier, cost=cost),
        )
    
    @staticmethod
    def base_purchased(
        counter: int,
        base: int,
        multiplier: int,
        power: int,
        session_id: Optional[UUID] = None,
    ) -> GrowthEvent:
        return GrowthEvent(
            event_type=GrowthEventType.BASE_PURCHASED,
            session_id=session_id,
            description=f"Base raised to {to_notation(base)}",
            details=_state_details(counter, base, multiplier, cost_power=power),
        )
    
    @staticmethod
    def base_rejected(
        counter: int,
        base: int,
        multiplier: int,
        power: int,
        session_id: Optional[UUID] = None,
    ) -> GrowthEvent:
        # The cost is recorded as its exponent: at the clamp the full
        # value is too large to render.
        return GrowthEvent(
            event_type=GrowthEventType.BASE_REJECTED,
            session_id=session_id,
            accepted=False,
            description="Base upgrade not affordable",
            details=_state_details(counter, base, multiplier, cost_power=power),
        )
