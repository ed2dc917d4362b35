"""
Exception types for the reversible stepping engine.
"""


class ReversibleError(Exception):
    """Base class for all engine errors."""
    pass


class ConfigurationError(ReversibleError):
    """Raised when a seed, die range or environment setting is invalid."""
    pass


class InvalidTransitionError(ReversibleError):
    """Raised when a transition policy is not registered."""
    pass


class DeterminismError(ReversibleError):
    """Raised when a round trip fails to restore the original state."""
    pass


class SeedExhaustedError(ReversibleError):
    """Raised when a finite seed source has no seeds left."""
    pass
