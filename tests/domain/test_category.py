"""Unit tests for the Category value object."""

import pytest

from inventory.domain.exceptions import ValidationError
from inventory.domain.model.category import Category


class TestCategoryNormalization:

    def test_trims_and_capitalizes(self):
        assert Category.of("  produce ").name == "Produce"

    def test_differently_cased_inputs_are_equal(self):
        assert Category.of(" produce ") == Category.of("PRODUCE") == Category.of("Produce")

    def test_equal_categories_hash_alike(self):
        groups = {Category.of("dairy"): "x"}
        assert groups[Category.of("DAIRY")] == "x"

    def test_single_character_name(self):
        assert Category.of("x").name == "X"

    def test_inner_words_lowercased(self):
        assert Category.of("FROZEN FOOD").name == "Frozen food"

    def test_str_is_name(self):
        assert str(Category.of("dairy")) == "Dairy"


class TestCategoryInterning:

    def test_same_normalized_name_returns_same_instance(self):
        assert Category.of("bakery") is Category.of(" BAKERY")

    def test_value_equality_does_not_need_the_cache(self):
        assert Category("Bakery") == Category.of("bakery")

    def test_direct_construction_normalizes(self):
        assert Category("  dairy ") == Category.of("dairy")
        assert Category("DAIRY").name == "Dairy"

    def test_direct_construction_validates(self):
        with pytest.raises(ValidationError, match="can't be blank"):
            Category(" ")


class TestCategoryValidation:

    def test_none_rejected(self):
        with pytest.raises(ValidationError, match="can't be null"):
            Category.of(None)

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="can't be blank"):
            Category.of("")

    def test_whitespace_only_rejected(self):
        with pytest.raises(ValidationError, match="can't be blank"):
            Category.of("   \t")

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError, match="must be a string, got int"):
            Category.of(123)
