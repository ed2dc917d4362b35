"""
Transition registry: build transition policies by name.

Lets a driver or the CLI pick policies from configuration strings
("random_step", "record") instead of importing classes.
"""

from typing import Any, Callable, Dict, List

from .errors import InvalidTransitionError
from .transition import Transition, idle, random_step, record

# Factory signature: (*args) -> Transition
Factory = Callable[..., Transition]


class TransitionRegistry:
    """
    Registry of transition factories.

    Usage:
        registry = TransitionRegistry()
        registry.register("record", record)
        t = registry.build("record", 7)
    """

    def __init__(self) -> None:
        self._factories: Dict[str, Factory] = {}

    def register(self, name: str, factory: Factory) -> None:
        """
        Register a factory under name. Re-registering replaces the old one.
        """
        self._factories[name] = factory

    def build(self, name: str, *args: Any) -> Transition:
        """
        Build a transition.

        Raises:
            InvalidTransitionError: If no factory is registered for name
        """
        if name not in self._factories:
            raise InvalidTransitionError(f"No transition registered as: {name}")
        return self._factories[name](*args)

    def names(self) -> List[str]:
        return sorted(self._factories)


def default_registry() -> TransitionRegistry:
    """Registry with the built-in idle, random_step and record policies."""
    registry = TransitionRegistry()
    registry.register("idle", idle)
    registry.register("random_step", random_step)
    registry.register("record", record)
    return registry
