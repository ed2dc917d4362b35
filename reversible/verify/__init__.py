"""
Verification of the reversibility contract.
"""

from .inverse import check_inverse
from .round_trip import verify_round_trip

__all__ = [
    "check_inverse",
    "verify_round_trip",
]
