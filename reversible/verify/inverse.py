"""
Inverse-law checker for transitions.
"""

from typing import Iterable, List, Tuple

from ..core.transition import Transition


def check_inverse(
    transition: Transition,
    macrostates: Iterable[int],
    dice: Iterable[int],
) -> List[Tuple[int, int]]:
    """
    Check backward(forward(m, d), d) == m over a grid of inputs.

    Args:
        transition: Transition under test
        macrostates: Macrostates to try
        dice: Die faces to try

    Returns:
        (m, d) pairs that violate the law; empty when the transition is
        a proper inverse pair on the grid
    """
    faces = list(dice)
    failures = []
    for m in macrostates:
        for d in faces:
            if transition.backward(transition.forward(m, d), d) != m:
                failures.append((m, d))
    return failures
