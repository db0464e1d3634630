"""
Claims — first-class, composable propositions about data.

A Claim wraps a single predicate (or type guard) and exposes one method
that matters, ``check``. Everything else is composition:

    Claim      — wraps one predicate
    ClaimAnd   — left AND right, short-circuiting
    ClaimOr    — left OR right, short-circuiting
    ClaimOn    — parent claim, then a claim on one property of the value

Every variant is a Checkable, so composition is closed:

    positive_even = IsPositive.and_(IsEven)
    adult = aPerson.on("age", anAdult)
    cond = positive_even.given(lambda: state.value)

Evaluation never catches anything. If a wrapped predicate raises, the
exception reaches the caller of ``check`` unchanged.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from .condition import Condition


Predicate = Callable[[Any], bool]
Reference = Callable[[], Any]


class ClaimDefinitionError(Exception):
    """Raised when a claim, composite or condition is built from invalid parts."""
    pass


# =============================================================================
# PROPERTY ACCESS
# =============================================================================

def read_path(value: Any, path: Hashable) -> Any:
    """
    Read one property from a value for ``ClaimOn``.

    Resolution order:
        Mapping            — value.get(path)
        Sequence + int     — value[path], None when out of range
        str path           — getattr(value, path, None)

    A property that cannot be read comes back as None and the nested
    claim decides what that means.
    """
    if isinstance(value, Mapping):
        return value.get(path)

    if (
        isinstance(path, int)
        and isinstance(value, Sequence)
        and not isinstance(value, (str, bytes))
    ):
        if -len(value) <= path < len(value):
            return value[path]
        return None

    if isinstance(path, str):
        return getattr(value, path, None)

    return None


# =============================================================================
# CHECKABLE CONTRACT
# =============================================================================

class Checkable(ABC):
    """
    The contract shared by every claim variant.

    Subclasses implement ``check`` only. Composition entry points are
    defined once here and always build a new object; nothing is mutated.
    ``and``/``or`` are Python keywords, so the methods are ``and_``/``or_``
    and the ``&``/``|`` operators are aliases.
    """

    @abstractmethod
    def check(self, value: Any) -> bool:
        """Return True if ``value`` satisfies this claim."""

    def and_(self, other: Checkable) -> ClaimAnd:
        return ClaimAnd(self, other)

    def or_(self, other: Checkable) -> ClaimOr:
        return ClaimOr(self, other)

    def on(self, path: Hashable, claim: Checkable) -> ClaimOn:
        """Check ``claim`` against ``value[path]`` once this claim holds."""
        return ClaimOn(self, path, claim)

    def given(self, ref: Reference) -> Condition:
        """
        Bind this claim to a reference function.

        Nothing is evaluated here. The returned Condition is turned into
        a callable with ``eager()`` or ``lazy()``.
        """
        from .condition import Condition
        return Condition(self, ref)

    def __and__(self, other: Checkable) -> ClaimAnd:
        if not isinstance(other, Checkable):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other: Checkable) -> ClaimOr:
        if not isinstance(other, Checkable):
            return NotImplemented
        return self.or_(other)


def _require_checkable(operand: Any, role: str) -> None:
    if not isinstance(operand, Checkable):
        raise ClaimDefinitionError(
            f"{role} must be a Checkable claim, got {type(operand).__name__}"
        )


# =============================================================================
# CLAIM
# =============================================================================

@dataclass(frozen=True)
class Claim(Checkable):
    """
    A claim wrapping exactly one predicate or type guard.

    Guards and predicates are the same thing at runtime. The difference
    only shows up in how the factory names the resulting claim.
    """
    predicate: Predicate

    def __post_init__(self):
        if not callable(self.predicate):
            raise ClaimDefinitionError(
                f"predicate must be callable, got {type(self.predicate).__name__}"
            )

    def check(self, value: Any) -> bool:
        return bool(self.predicate(value))


def create_claim(predicate: Predicate) -> Claim:
    """Create a Claim from a predicate. Most callers want ``claims()`` instead."""
    return Claim(predicate)


# =============================================================================
# COMPOSITE CLAIMS
# =============================================================================

@dataclass(frozen=True)
class ClaimAnd(Checkable):
    """Logical AND. ``right`` is not evaluated when ``left`` fails."""
    left: Checkable
    right: Checkable

    def __post_init__(self):
        _require_checkable(self.left, "left")
        _require_checkable(self.right, "right")

    def check(self, value: Any) -> bool:
        return self.left.check(value) and self.right.check(value)


@dataclass(frozen=True)
class ClaimOr(Checkable):
    """Logical OR. ``right`` is not evaluated when ``left`` passes."""
    left: Checkable
    right: Checkable

    def __post_init__(self):
        _require_checkable(self.left, "left")
        _require_checkable(self.right, "right")

    def check(self, value: Any) -> bool:
        return self.left.check(value) or self.right.check(value)


@dataclass(frozen=True)
class ClaimOn(Checkable):
    """
    A claim about one property of a value.

    The parent claim runs first. If it fails the result is False and the
    property is never read, so malformed input (None, a dict missing the
    key, a plain int) cannot make this claim raise. If the parent holds,
    the property is read with ``read_path`` and handed to ``claim``.
    """
    parent: Checkable
    path: Hashable
    claim: Checkable

    def __post_init__(self):
        _require_checkable(self.parent, "parent")
        _require_checkable(self.claim, "claim")

    def check(self, value: Any) -> bool:
        if not self.parent.check(value):
            return False

        return self.claim.check(read_path(value, self.path))
