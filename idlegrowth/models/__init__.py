"""
Data Models Package

This package contains the Pydantic models used in Idle Growth:
the growth state itself and the events each command produces.
"""

from idlegrowth.models.state import (
    BASE_COST,
    POWER_CLAMP,
    POWER_DIGIT_BITS,
    GrowthState,
)
from idlegrowth.models.events import (
    GrowthEvent,
    GrowthEventBuilder,
    GrowthEventSeverity,
    GrowthEventType,
)

__all__ = [
    # State
    "BASE_COST",
    "POWER_CLAMP",
    "POWER_DIGIT_BITS",
    "GrowthState",
    # Events
    "GrowthEvent",
    "GrowthEventBuilder",
    "GrowthEventSeverity",
    "GrowthEventType",
]
