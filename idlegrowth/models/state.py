"""
Growth State for Idle Growth

The whole simulation lives in three unbounded integers:
1. counter - the resource that accumulates and gets spent
2. multiplier - added to the counter on every tick
3. base - multiplies the counter on every tick

DESIGN DECISION: Python ints are arbitrary precision, so all arithmetic
here is exact. No floats are used anywhere in this module.

Upgrades are purchases. A purchase that cannot be afforded is a
business-rule rejection: it returns False and leaves the state untouched.
"""

from typing import Optional

from pydantic import BaseModel, Field


# =============================================================================
# COST CONSTANTS - fixed, not configurable
# =============================================================================

BASE_COST = 1000

# The tier exponent is read as a single 32-bit digit of `base`.
# Anything that does not fit in exactly one digit is clamped.
POWER_DIGIT_BITS = 32
POWER_CLAMP = 2**POWER_DIGIT_BITS - 1

# 2**9 < BASE_COST, so BASE_COST**power has more than 9 * power bits.
_MIN_COST_BITS_PER_POWER = 9


class GrowthState(BaseModel):
    """
    The session's growth record.
    
    Mutated only through update_counter, update_multiplier and update_base.
    Values are validated on construction; the update methods keep
    every field non-negative by construction.
    """
    base: int = Field(
        default=1,
        ge=0,
        description="Current tier; multiplies the counter on each tick"
    )
    counter: int = Field(
        default=1,
        ge=0,
        description="Spendable resource"
    )
    multiplier: int = Field(
        default=1,
        ge=0,
        description="Added to the counter on each tick"
    )
    
    # -------------------------------------------------------------------------
    # Costs
    # -------------------------------------------------------------------------
    
    def base_power(self) -> int:
        """
        Exponent for the next tier's cost.
        
        `base` is taken as its own power only while it occupies exactly
        one 32-bit digit. Zero has no digits and anything wider has
        several; both clamp to POWER_CLAMP.
        """
        if 0 < self.base <= POWER_CLAMP:
            return self.base
        return POWER_CLAMP
    
    def base_cost(self) -> int:
        """
        Exact cost of the next tier: BASE_COST ** base_power().
        
        At the clamp this is a number with tens of billions of bits.
        Use can_afford_base() for the check; it avoids building it.
        """
        return BASE_COST ** self.base_power()
    
    def multiplier_cost(self) -> int:
        """One more multiplier costs the current multiplier."""
        return self.multiplier
    
    def can_afford_multiplier(self) -> bool:
        return self.counter >= self.multiplier_cost()
    
    def can_afford_base(self) -> bool:
        return self._affordable_base_cost() is not None
    
    def _affordable_base_cost(self) -> Optional[int]:
        """The next tier's cost if the counter covers it, else None."""
        power = self.base_power()
        # Too few bits to ever cover the cost, no need to compute it
        if self.counter.bit_length() <= _MIN_COST_BITS_PER_POWER * power:
            return None
        cost = BASE_COST ** power
        if self.counter < cost:
            return None
        return cost
    
    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------
    
    def update_counter(self) -> None:
        """Grow one tick: counter = base * counter + multiplier."""
        self.counter = self.base * self.counter + self.multiplier
    
    def update_multiplier(self) -> bool:
        """
        Buy one multiplier level.
        
        Costs the multiplier value before the increment.
        Returns False (state unchanged) if the counter cannot cover it.
        """
        if not self.can_afford_multiplier():
            return False
        
        self.counter -= self.multiplier_cost()
        self.multiplier += 1
        return True
    
    def update_base(self) -> bool:
        """
        Buy one tier.
        
        Returns False (state unchanged) if the counter cannot cover
        BASE_COST ** base_power().
        """
        cost = self._affordable_base_cost()
        if cost is None:
            return False
        
        self.counter -= cost
        self.base += 1
        return True
    
    def snapshot(self) -> "GrowthState":
        """Independent copy of the current values."""
        return self.model_copy()
