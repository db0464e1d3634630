"""
Naming conventions for generated claims.

Predicates state something about a value and read as a proposition:

    isEmpty   -> IsEmpty
    hasValue  -> HasValue
    custom    -> Custom

Guards narrow a value to a type and read as a noun phrase:

    isUser    -> aUser
    isObject  -> anObject
    hasCart   -> HasCart
    custom    -> Custom
"""

from __future__ import annotations


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

IS_PREFIX = "is"
HAS_PREFIX = "has"

# 'an' only for letters that nearly always sound like vowels; U is left
# out because "a User", "a Unicorn" read correctly.
GUARD_ARTICLE_VOWELS = ("a", "e", "i", "o")


def _capitalize(name: str) -> str:
    # str.capitalize() would lowercase the rest of the name
    return name[:1].upper() + name[1:]


def _strip_prefix(name: str, prefix: str) -> str | None:
    """Return what follows ``prefix``, or None if nothing follows it."""
    if name.startswith(prefix) and len(name) > len(prefix):
        return name[len(prefix):]
    return None


# =============================================================================
# NAME TRANSFORMS
# =============================================================================

def name_for_predicate(name: str) -> str:
    """Transform a predicate function name into a claim name."""
    rest = _strip_prefix(name, IS_PREFIX)
    if rest is not None:
        return f"Is{rest}"

    rest = _strip_prefix(name, HAS_PREFIX)
    if rest is not None:
        return f"Has{rest}"

    return _capitalize(name)


def name_for_guard(name: str) -> str:
    """
    Transform a type guard function name into a claim name.

    ``isX`` becomes ``aX`` or ``anX`` depending on the first letter of X
    (see GUARD_ARTICLE_VOWELS). ``hasX`` keeps the predicate form since
    "HasCart" already reads as a property of the value.
    """
    rest = _strip_prefix(name, IS_PREFIX)
    if rest is not None:
        article = "an" if rest[0].lower() in GUARD_ARTICLE_VOWELS else "a"
        return f"{article}{rest}"

    rest = _strip_prefix(name, HAS_PREFIX)
    if rest is not None:
        return f"Has{rest}"

    return _capitalize(name)
