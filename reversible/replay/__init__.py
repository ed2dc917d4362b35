"""
Drivers that step several reversible states together.

Driving forward then backward by the same count must leave every state
exactly where it started.
"""

from .driver import Driver, DriveResult, NamedStep, Plan, uniform_plan, memory_plan

__all__ = [
    "Driver",
    "DriveResult",
    "NamedStep",
    "Plan",
    "uniform_plan",
    "memory_plan",
]
