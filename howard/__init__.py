# Howard
# Claims & Conditions

"""
Howard turns predicates and type guards into first-class claims that can
be checked, composed with and/or/on, and bound to changing state.

    from howard import claims

    registry = claims(predicates={"isPositive": lambda v: v > 0})
    registry["IsPositive"].check(4)     # True
"""

from .claim import (
    Checkable,
    Claim,
    ClaimAnd,
    ClaimDefinitionError,
    ClaimOn,
    ClaimOr,
    create_claim,
    read_path,
)
from .condition import Condition
from .factory import claims
from .naming import name_for_guard, name_for_predicate
from .strategies import Conditional, EagerStrategy, LazyStrategy, Strategy

__version__ = "0.1.0"

__all__ = [
    "Checkable",
    "Claim",
    "ClaimAnd",
    "ClaimDefinitionError",
    "ClaimOn",
    "ClaimOr",
    "Condition",
    "Conditional",
    "EagerStrategy",
    "LazyStrategy",
    "Strategy",
    "claims",
    "create_claim",
    "name_for_guard",
    "name_for_predicate",
    "read_path",
]
