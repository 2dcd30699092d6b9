"""
Idle Growth - Source Package

A small incremental-growth game: a counter that grows every tick and
can be spent on a larger multiplier or a higher base.

DESIGN PRINCIPLES:
1. Exact integer arithmetic everywhere; floats only for display
2. Unaffordable purchases are rejected, never partially applied
3. One session owns the state; one command runs at a time
4. Every command is logged
"""

__version__ = "1.0.0"
