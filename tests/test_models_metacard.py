"""
Tests for models/metacard.py - Metacard and Attribute models
"""

from typing import get_type_hints

import pytest

from models.metacard import (
    Attribute,
    Metacard,
    MetacardLike,
    SecurityAttribute,
    is_attribute_completely_null,
)

# =============================================================================
# SECURITY ATTRIBUTE KEYS
# =============================================================================


class TestSecurityAttribute:
    """Tests for SecurityAttribute enum."""

    def test_keys_use_security_namespace(self):
        for attribute in SecurityAttribute:
            assert attribute.value.startswith("security.")

    def test_owner_producer_key(self):
        assert SecurityAttribute.OWNER_PRODUCER == "security.owner-producer"

    def test_attribute_count(self):
        assert len(SecurityAttribute) == 6


# =============================================================================
# ATTRIBUTE
# =============================================================================


class TestAttribute:
    """Tests for Attribute value access and emptiness."""

    def test_value_is_first_value(self):
        attribute = Attribute(name="security.releasability", values=["USA", "GBR"])
        assert attribute.value == "USA"

    def test_value_none_without_values(self):
        assert Attribute(name="security.codewords").value is None

    def test_none_is_null(self):
        assert is_attribute_completely_null(None) is True

    def test_no_values_is_null(self):
        assert is_attribute_completely_null(Attribute(name="x")) is True

    def test_none_value_is_null(self):
        assert is_attribute_completely_null(Attribute(name="x", values=[None])) is True

    @pytest.mark.parametrize("empty", ["", [], ()])
    def test_empty_value_is_null(self, empty):
        assert is_attribute_completely_null(Attribute(name="x", values=[empty])) is True

    def test_null_check_annotation_resolves(self):
        hints = get_type_hints(is_attribute_completely_null)
        assert hints["attribute"] == Attribute | None
        assert hints["return"] is bool

    @pytest.mark.parametrize("value", ["S", 0, False, ["USA"]])
    def test_present_value_is_not_null(self, value):
        assert is_attribute_completely_null(Attribute(name="x", values=[value])) is False


# =============================================================================
# METACARD
# =============================================================================


class TestMetacard:
    """Tests for Metacard attribute lookup."""

    def test_missing_attribute_is_none(self):
        assert Metacard().get_attribute(SecurityAttribute.CLASSIFICATION) is None

    def test_set_and_get_attribute(self):
        metacard = Metacard()
        metacard.set_attribute(SecurityAttribute.CLASSIFICATION, "S")

        attribute = metacard.get_attribute("security.classification")
        assert attribute.name == "security.classification"
        assert attribute.value == "S"

    def test_from_values_multi_valued(self):
        metacard = Metacard.from_values({SecurityAttribute.RELEASABILITY: ["USA", "GBR"]})
        assert metacard.get_attribute(SecurityAttribute.RELEASABILITY).values == ["USA", "GBR"]

    def test_from_values_none_creates_empty_attribute(self):
        metacard = Metacard.from_values({SecurityAttribute.CODEWORDS: None})

        attribute = metacard.get_attribute(SecurityAttribute.CODEWORDS)
        assert attribute is not None
        assert attribute.values == []

    def test_from_values_keeps_id(self):
        metacard = Metacard.from_values({}, id="abc123")
        assert metacard.id == "abc123"

    def test_ids_are_unique(self):
        assert Metacard().id != Metacard().id

    def test_is_metacard_like(self):
        assert isinstance(Metacard(), MetacardLike)
