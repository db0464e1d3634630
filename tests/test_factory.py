"""
Tests for naming conventions and the claims() factory.

These tests verify:
1. Predicate and guard naming rules
2. Factory output names and working claims
3. Alias inputs (relations, types)
4. Later inputs replace earlier ones with the same claim name
5. End-to-end user/cart scenario
"""

import logging

import pytest

from howard import (
    Checkable,
    Claim,
    ClaimDefinitionError,
    claims,
    name_for_guard,
    name_for_predicate,
)


# =============================================================================
# NAMING TESTS
# =============================================================================

class TestNameForPredicate:
    """Test predicate naming."""

    @pytest.mark.parametrize("name,expected", [
        ("isEmpty", "IsEmpty"),
        ("isValid", "IsValid"),
        ("isValidEmail", "IsValidEmail"),
        ("isPositive", "IsPositive"),
        ("isLessThan10", "IsLessThan10"),
        ("isAdult", "IsAdult"),
    ])
    def test_is_prefix(self, name, expected):
        assert name_for_predicate(name) == expected

    @pytest.mark.parametrize("name,expected", [
        ("hasValue", "HasValue"),
        ("hasLength", "HasLength"),
    ])
    def test_has_prefix(self, name, expected):
        assert name_for_predicate(name) == expected

    @pytest.mark.parametrize("name,expected", [
        ("custom", "Custom"),
        ("validate", "Validate"),
        ("camelCase", "CamelCase"),
    ])
    def test_fallback_capitalizes(self, name, expected):
        assert name_for_predicate(name) == expected

    def test_bare_prefixes(self):
        """A bare 'is' or 'has' falls back to capitalization."""
        assert name_for_predicate("is") == "Is"
        assert name_for_predicate("has") == "Has"

    def test_empty_name(self):
        assert name_for_predicate("") == ""


class TestNameForGuard:
    """Test type guard naming."""

    @pytest.mark.parametrize("name,expected", [
        ("isUser", "aUser"),
        ("isCart", "aCart"),
        ("isString", "aString"),
        ("isPerson", "aPerson"),
    ])
    def test_consonant_article(self, name, expected):
        assert name_for_guard(name) == expected

    @pytest.mark.parametrize("name,expected", [
        ("isObject", "anObject"),
        ("isEmpty", "anEmpty"),
        ("isArray", "anArray"),
        ("isItem", "anItem"),
        ("isAdult", "anAdult"),
    ])
    def test_vowel_article(self, name, expected):
        assert name_for_guard(name) == expected

    def test_u_takes_a(self):
        """U usually sounds like 'yoo', so it takes 'a'."""
        assert name_for_guard("isUnicorn") == "aUnicorn"

    def test_has_prefix(self):
        assert name_for_guard("hasCart") == "HasCart"
        assert name_for_guard("hasValue") == "HasValue"

    def test_fallback_capitalizes(self):
        assert name_for_guard("custom") == "Custom"
        assert name_for_guard("is") == "Is"


# =============================================================================
# FACTORY TESTS
# =============================================================================

class TestClaimsFactory:
    """Test the claims() factory."""

    def test_predicate_names(self):
        result = claims(predicates={
            "isEmpty": lambda value: False,
            "hasValue": lambda value: False,
        })

        assert set(result) == {"IsEmpty", "HasValue"}

    def test_predicate_claims_work(self):
        def is_empty(value):
            return isinstance(value, (list, dict, str)) and len(value) == 0

        registry = claims(predicates={"isEmpty": is_empty})

        assert registry["IsEmpty"].check([]) is True
        assert registry["IsEmpty"].check({}) is True
        assert registry["IsEmpty"].check([1]) is False
        assert registry["IsEmpty"].check(None) is False

    def test_guard_names(self):
        result = claims(guards={
            "isUser": lambda value: False,
            "hasCart": lambda value: False,
            "isObject": lambda value: False,
        })

        assert set(result) == {"aUser", "HasCart", "anObject"}

    def test_guard_claims_work(self):
        registry = claims(guards={"isUser": lambda value: isinstance(value, dict) and "id" in value})

        assert registry["aUser"].check({"id": 1}) is True
        assert registry["aUser"].check({}) is False

    def test_mixed_inputs(self):
        result = claims(
            predicates={"isEmpty": lambda value: False},
            guards={"isUser": lambda value: False},
        )

        assert list(result) == ["IsEmpty", "aUser"]
        assert all(isinstance(claim, Checkable) for claim in result.values())

    def test_aliases(self):
        """relations name like predicates, types name like guards."""
        result = claims(
            relations={"isPositive": lambda value: value > 0},
            types={"isAdult": lambda value: value >= 18},
        )

        assert set(result) == {"IsPositive", "anAdult"}
        assert result["IsPositive"].check(3) is True

    def test_empty_input(self):
        assert claims() == {}

    def test_same_name_last_wins(self):
        """isEmpty and IsEmpty both become IsEmpty; the later input wins."""
        registry = claims(predicates={
            "isEmpty": lambda value: True,
            "IsEmpty": lambda value: False,
        })

        assert list(registry) == ["IsEmpty"]
        assert registry["IsEmpty"].check([]) is False

    def test_same_name_across_groups(self):
        """hasCart is HasCart under both conventions; guards apply after predicates."""
        def has_cart(value):
            return isinstance(value, dict) and "cart" in value

        registry = claims(
            predicates={"hasCart": lambda value: False},
            guards={"hasCart": has_cart},
        )

        assert list(registry) == ["HasCart"]
        assert registry["HasCart"].check({"cart": {}}) is True

    def test_same_function_under_both_groups(self):
        def has_cart(value):
            return isinstance(value, dict) and "cart" in value

        registry = claims(predicates={"hasCart": has_cart}, guards={"hasCart": has_cart})

        assert registry["HasCart"].check({"cart": {}}) is True
        assert registry["HasCart"].check({}) is False

    def test_group_order(self):
        """predicates, then relations, then guards, then types."""
        registry = claims(
            predicates={"hasX": lambda value: True},
            relations={"hasX": lambda value: True},
            guards={"hasX": lambda value: True},
            types={"hasX": lambda value: False},
        )

        assert registry["HasX"].check(None) is False

        registry = claims(
            predicates={"hasX": lambda value: False},
            relations={"hasX": lambda value: True},
        )

        assert registry["HasX"].check(None) is True

    def test_replacement_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="howard.factory"):
            claims(
                predicates={"hasCart": lambda value: True},
                guards={"hasCart": lambda value: True},
            )

        assert "Replaced claim HasCart from predicates['hasCart'] with guards['hasCart']" in caplog.text

    def test_non_callable_rejected(self):
        with pytest.raises(ClaimDefinitionError, match="predicate must be callable"):
            claims(predicates={"isBroken": "not a function"})

    def test_registration_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="howard.factory"):
            claims(guards={"isUser": lambda value: True})

        assert "Registered claim aUser from guards['isUser']" in caplog.text


# =============================================================================
# END-TO-END SCENARIOS
# =============================================================================

def is_user(value) -> bool:
    return (
        isinstance(value, dict)
        and isinstance(value.get("id"), int)
        and isinstance(value.get("email"), str)
    )


def has_cart(value) -> bool:
    return isinstance(value, dict) and isinstance(value.get("cart"), dict)


def is_empty(value) -> bool:
    return isinstance(value, (dict, list, str)) and len(value) == 0


class TestScenarios:
    """Full flows from named functions to conditionals."""

    def test_even_positive(self):
        registry = claims(predicates={
            "isPositive": lambda value: value > 0,
            "isEven": lambda value: value % 2 == 0,
        })
        even_positive = registry["IsPositive"].and_(registry["IsEven"])

        assert even_positive.check(4) is True
        assert even_positive.check(3) is False
        assert even_positive.check(-2) is False

    def test_user_with_cart(self):
        registry = claims(guards={"isUser": is_user, "hasCart": has_cart})
        user_with_cart = registry["aUser"].and_(registry["HasCart"])

        assert user_with_cart.check({"id": 1, "email": "a@b.com", "cart": {"items": {}}}) is True
        assert user_with_cart.check({"id": 1, "email": "a@b.com"}) is False

    def test_user_with_empty_cart(self):
        registry = claims(guards={
            "isUser": is_user,
            "hasCart": has_cart,
            "isObject": lambda value: isinstance(value, dict),
            "isEmpty": is_empty,
        })
        empty_cart = registry["aUser"].and_(registry["HasCart"]).on(
            "cart",
            registry["anObject"].on("items", registry["anEmpty"]),
        )

        assert empty_cart.check({"id": 1, "email": "a@b.com", "cart": {"items": {}}}) is True
        assert empty_cart.check({"id": 1, "email": "a@b.com", "cart": {"items": {"sku-1": 2}}}) is False

    def test_current_user_has_cart(self):
        """A conditional follows the application state as it changes."""
        registry = claims(guards={"isUser": is_user, "hasCart": has_cart})
        state = {"current_user": None}

        user_ready = registry["aUser"].given(lambda: state["current_user"]).eager().and_(registry["HasCart"])

        assert user_ready() is False

        state["current_user"] = {"id": 7, "email": "x@y.io"}
        assert user_ready() is False

        state["current_user"]["cart"] = {"items": {"sku-1": 1}}
        assert user_ready() is True

    def test_adult_user(self):
        """Guards from the registry compose with a hand-built Claim."""
        registry = claims(guards={"isUser": is_user, "hasCart": has_cart})
        adult = registry["aUser"].on(
            "age",
            Claim(lambda age: isinstance(age, int) and age >= 18),
        )

        assert adult.check({"id": 1, "email": "a@b.com", "age": 30}) is True
        assert adult.check({"id": 1, "email": "a@b.com", "age": 15}) is False
        assert adult.check({"age": 30}) is False
