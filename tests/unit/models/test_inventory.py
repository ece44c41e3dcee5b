"""Tests for stock records and potion formulas."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from witcher_tracker.core.exceptions import ValidationError, WorldStateError
from witcher_tracker.models.inventory import (
    IngredientStock,
    PotionFormula,
    Requirement,
    TrophyStock,
)


class TestStock:
    """Tests for ingredient and trophy stock."""

    def test_starts_empty(self) -> None:
        """Test that new stock holds nothing."""
        assert IngredientStock(name="Rebis").quantity == 0

    def test_add(self) -> None:
        """Test that adding accumulates."""
        stock = TrophyStock(name="Harpy")
        stock.add(2)
        assert stock.add(3) == 5

    def test_remove(self) -> None:
        """Test that removing decrements."""
        stock = IngredientStock(name="Rebis", quantity=4)
        assert stock.remove(3) == 1

    def test_remove_more_than_held(self) -> None:
        """Test that stock can never go negative."""
        stock = IngredientStock(name="Rebis", quantity=1)
        with pytest.raises(WorldStateError) as exc_info:
            stock.remove(2)
        assert exc_info.value.details["record"] == "Rebis"
        assert stock.quantity == 1

    @pytest.mark.parametrize("amount", [0, -1])
    def test_non_positive_amounts(self, amount: int) -> None:
        """Test that add and remove only take positive amounts."""
        stock = IngredientStock(name="Rebis", quantity=1)
        with pytest.raises(ValidationError):
            stock.add(amount)
        with pytest.raises(ValidationError):
            stock.remove(amount)

    def test_negative_quantity_rejected(self) -> None:
        """Test that a negative quantity fails model validation."""
        with pytest.raises(PydanticValidationError):
            IngredientStock(name="Rebis", quantity=-1)

    def test_empty_name_rejected(self) -> None:
        """Test that record names must be non-empty."""
        with pytest.raises(PydanticValidationError):
            TrophyStock(name="")


class TestPotionFormula:
    """Tests for PotionFormula."""

    @pytest.fixture
    def formula(self) -> PotionFormula:
        """Provide a Swallow formula."""
        return PotionFormula(
            name="Swallow",
            requirements=(
                Requirement(ingredient="Rebis", quantity=2),
                Requirement(ingredient="Vitriol", quantity=1),
                Requirement(ingredient="Rebis", quantity=1),
            ),
        )

    def test_totals_sum_repeated_ingredients(self, formula: PotionFormula) -> None:
        """Test that repeated ingredients are summed."""
        assert formula.totals() == {"Rebis": 3, "Vitriol": 1}

    def test_requirements_are_immutable(self, formula: PotionFormula) -> None:
        """Test that the requirement list cannot be replaced."""
        with pytest.raises(WorldStateError):
            formula.requirements = (Requirement(ingredient="Aether", quantity=1),)
        assert len(formula.requirements) == 3

    def test_name_is_immutable(self, formula: PotionFormula) -> None:
        """Test that the formula name cannot be changed."""
        with pytest.raises(WorldStateError):
            formula.name = "Thunderbolt"

    def test_requires_at_least_one_requirement(self) -> None:
        """Test that an empty formula is rejected."""
        with pytest.raises(PydanticValidationError):
            PotionFormula(name="Swallow", requirements=())

    def test_stock_lifecycle(self, formula: PotionFormula) -> None:
        """Test brewing and consuming stock."""
        formula.add_stock()
        formula.add_stock()
        assert formula.consume() == 1
        assert formula.stock == 1

    def test_consume_empty(self, formula: PotionFormula) -> None:
        """Test that an empty stock cannot be consumed."""
        with pytest.raises(WorldStateError):
            formula.consume()
