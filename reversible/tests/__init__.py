"""
Test suite for the reversible stepping engine.

Focus areas:
- Die determinism
- Transition inverse law
- Round trips and dice replay
- Multi-state driving
"""
