"""Self-test harness for the substitution cipher.

Research / education only. Do NOT use in production.
"""

from .roundtrip import RoundtripResult, RoundtripFailure, run_roundtrip_tests, run_password_consistency

__all__ = [
    "RoundtripResult",
    "RoundtripFailure",
    "run_roundtrip_tests",
    "run_password_consistency",
]
