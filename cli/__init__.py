"""
revsim CLI - Reversible stepping engine

Commands:
- revsim run - Random walk forward then back
- revsim memory - Walk copied into a second state at one instant
- revsim roll - Die faces for a range of time indices
- revsim version
"""

__version__ = "0.1.0"
