"""
Conditions — a claim bound to a reference into external state.

A Condition is only a description: "check this claim against whatever
``ref()`` returns". It reads nothing until a strategy turns it into a
Conditional:

    state = {"value": 5}
    positive_now = IsPositive.given(lambda: state["value"]).eager()
    positive_now()          # True
    state["value"] = -1
    positive_now()          # False
"""

from __future__ import annotations

from dataclasses import dataclass

from .claim import Checkable, ClaimDefinitionError, Reference
from .strategies import Conditional, EagerStrategy, LazyStrategy


@dataclass(frozen=True)
class Condition:
    """
    Immutable pairing of a claim and a reference function.

    ``eager()`` and ``lazy()`` may be called any number of times; each
    call returns a new, independent Conditional.
    """
    claim: Checkable
    ref: Reference

    def __post_init__(self):
        if not isinstance(self.claim, Checkable):
            raise ClaimDefinitionError(
                f"claim must be a Checkable claim, got {type(self.claim).__name__}"
            )
        if not callable(self.ref):
            raise ClaimDefinitionError(
                f"ref must be callable, got {type(self.ref).__name__}"
            )

    def eager(self) -> Conditional:
        """Materialize with the eager strategy."""
        return EagerStrategy(self.claim, self.ref).to_conditional()

    def lazy(self) -> Conditional:
        """Materialize with the lazy strategy."""
        return LazyStrategy(self.claim, self.ref).to_conditional()
