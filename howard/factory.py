"""
The ``claims()`` factory.

Takes named predicates and type guards and returns a registry of Claim
objects keyed by their conventional names:

    registry = claims(
        predicates={"isPositive": is_positive, "isEven": is_even},
        guards={"isUser": is_user, "hasCart": has_cart},
    )
    registry["IsPositive"].and_(registry["IsEven"])
    registry["aUser"].and_(registry["HasCart"])

``relations`` is accepted as another name for ``predicates`` and
``types`` as another name for ``guards``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Callable, Optional

from .claim import Checkable, Claim, Predicate
from .naming import name_for_guard, name_for_predicate

logger = logging.getLogger(__name__)


def claims(
    predicates: Optional[Mapping[str, Predicate]] = None,
    guards: Optional[Mapping[str, Predicate]] = None,
    *,
    relations: Optional[Mapping[str, Predicate]] = None,
    types: Optional[Mapping[str, Predicate]] = None,
) -> dict[str, Checkable]:
    """
    Transform predicates and type guards into first-class claim objects.

    Groups are applied in order: predicates, relations, guards, types.
    When two inputs map to the same claim name the later one replaces
    the earlier one and keeps its original position in the result.

    Raises:
        ClaimDefinitionError: If an input is not callable
    """
    groups: list[tuple[str, Optional[Mapping[str, Predicate]], Callable[[str], str]]] = [
        ("predicates", predicates, name_for_predicate),
        ("relations", relations, name_for_predicate),
        ("guards", guards, name_for_guard),
        ("types", types, name_for_guard),
    ]

    result: dict[str, Checkable] = {}
    sources: dict[str, str] = {}

    for group, functions, transform in groups:
        if not functions:
            continue

        for name, function in functions.items():
            claim_name = transform(name)
            source = f"{group}['{name}']"

            if claim_name in result:
                logger.debug(
                    "Replaced claim %s from %s with %s",
                    claim_name, sources[claim_name], source,
                )

            result[claim_name] = Claim(function)
            sources[claim_name] = source
            logger.debug("Registered claim %s from %s", claim_name, source)

    return result
