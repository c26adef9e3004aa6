"""
Core fixed-width integer engine and primality primitives
"""

from .fixed_uint import (
    DecimalParseError,
    DivisionByZeroError,
    DivModResult,
    FixedUint4096,
    checked_divmod,
    divmod_or_raise,
)
from .primality import (
    WITNESSES,
    PrimalityConfig,
    decompose,
    is_prime,
    is_prime_with_config,
    load_primality_config,
    mod_exp,
)

__all__ = [
    "FixedUint4096",
    "DivModResult",
    "checked_divmod",
    "divmod_or_raise",
    "DecimalParseError",
    "DivisionByZeroError",
    "WITNESSES",
    "PrimalityConfig",
    "decompose",
    "is_prime",
    "is_prime_with_config",
    "load_primality_config",
    "mod_exp",
]
