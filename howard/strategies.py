"""
Evaluation strategies for Conditions.

A strategy turns a (claim, ref) pair into a Conditional: a zero-argument
callable that reads ``ref()`` and checks the claim against it.

Strategies:
    EagerStrategy — read the reference, then check, on every call
    LazyStrategy  — check only when called, reading the reference then

Today both read and check on every call and never cache, so they are
observably identical. They are kept as separate classes so that a
caching policy can be given to one of them without changing the shape
of Condition or Conditional.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from .claim import Checkable, ClaimAnd, ClaimOr, Reference

logger = logging.getLogger(__name__)


# =============================================================================
# STRATEGY BASE
# =============================================================================

@dataclass(frozen=True)
class Strategy(ABC):
    """A claim and a reference, plus a policy for evaluating them."""
    claim: Checkable
    ref: Reference

    name = "strategy"

    @abstractmethod
    def evaluate(self) -> bool:
        """Evaluate the claim against the current reference value."""

    def rebind(self, claim: Checkable) -> Strategy:
        """Same strategy and reference, different claim."""
        return type(self)(claim, self.ref)

    def to_conditional(self) -> Conditional:
        logger.debug("Materialized %s conditional for %r", self.name, self.claim)
        return Conditional(self)


# =============================================================================
# CONCRETE STRATEGIES
# =============================================================================

@dataclass(frozen=True)
class EagerStrategy(Strategy):
    """
    Eager strategy.

    Fetches the value from the reference before checking, each time the
    conditional is called.
    """
    name = "eager"

    def evaluate(self) -> bool:
        value = self.ref()
        return self.claim.check(value)


@dataclass(frozen=True)
class LazyStrategy(Strategy):
    """
    Lazy strategy.

    Does no work until the conditional is called, then reads the
    reference and checks.
    """
    name = "lazy"

    def evaluate(self) -> bool:
        return self.claim.check(self.ref())


# =============================================================================
# CONDITIONAL
# =============================================================================

class Conditional:
    """
    The callable produced by applying a strategy to a Condition.

    ``conditional()`` re-reads the reference and re-checks the claim on
    every call. ``and_``/``or_`` (and ``&``/``|``) compose with plain
    claims and return a new Conditional under the same strategy and the
    same reference; the reference is not read while composing.
    """

    def __init__(self, strategy: Strategy):
        self.strategy = strategy

    @property
    def claim(self) -> Checkable:
        return self.strategy.claim

    @property
    def ref(self) -> Reference:
        return self.strategy.ref

    def __call__(self) -> bool:
        return self.strategy.evaluate()

    def and_(self, other: Checkable) -> Conditional:
        return self.strategy.rebind(ClaimAnd(self.claim, other)).to_conditional()

    def or_(self, other: Checkable) -> Conditional:
        return self.strategy.rebind(ClaimOr(self.claim, other)).to_conditional()

    def __and__(self, other: Any) -> Conditional:
        if not isinstance(other, Checkable):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other: Any) -> Conditional:
        if not isinstance(other, Checkable):
            return NotImplemented
        return self.or_(other)

    def __repr__(self) -> str:
        return f"Conditional({self.strategy.name}, claim={self.claim!r})"
