"""
Verification of run correctness and determinism.
"""

from .properties import (
    VerificationResult,
    check_determinism,
    first_descent_index,
    is_permutation,
    verify_run,
)

__all__ = [
    "VerificationResult",
    "check_determinism",
    "first_descent_index",
    "is_permutation",
    "verify_run",
]
