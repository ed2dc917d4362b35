"""
Reversible Stepping Engine

Exactly reversible discrete-time stochastic processes: every step forward can be
undone by a step backward, dice and macrostate included.
"""

__version__ = "0.1.0"
