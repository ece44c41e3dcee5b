"""Inventory records: ingredient and trophy stock, potion formulas.

Stock records are mutable components owned by the WorldState; they guard
their own quantity so that nothing can drive it below zero. Formulas are
mutable only in their brewed stock; the requirement list is fixed once the
formula is learned.
"""

from __future__ import annotations

from collections import Counter
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

from witcher_tracker.core.exceptions import ValidationError, WorldStateError


# =============================================================================
# Type Definitions
# =============================================================================


RecordName = Annotated[str, Field(min_length=1, description="Case-sensitive record name")]
Quantity = Annotated[int, Field(ge=0, description="Non-negative stock level")]
PositiveQuantity = Annotated[int, Field(gt=0, description="Strictly positive amount")]


# =============================================================================
# Stock Records
# =============================================================================


class Stock(BaseModel):
    """Base class for a named, counted inventory record.

    Attributes:
        name: Unique name of the record within its table.
        quantity: Units currently held.
    """

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        extra="forbid",
    )

    name: RecordName
    quantity: Quantity = 0

    def add(self, amount: int) -> int:
        """Add units to the stock.

        Args:
            amount: Units to add; must be positive.

        Returns:
            The new quantity.

        Raises:
            ValidationError: If amount is not positive.
        """
        if amount <= 0:
            raise ValidationError(
                "Stock can only grow by a positive amount",
                field_name="amount",
                invalid_value=amount,
            )
        self.quantity += amount
        return self.quantity

    def remove(self, amount: int) -> int:
        """Remove units from the stock.

        Args:
            amount: Units to remove; must be positive and available.

        Returns:
            The new quantity.

        Raises:
            ValidationError: If amount is not positive.
            WorldStateError: If fewer than amount units are held.
        """
        if amount <= 0:
            raise ValidationError(
                "Stock can only shrink by a positive amount",
                field_name="amount",
                invalid_value=amount,
            )
        if amount > self.quantity:
            raise WorldStateError(
                f"Cannot remove {amount} of {self.name}, only {self.quantity} held",
                record=self.name,
            )
        self.quantity -= amount
        return self.quantity


class IngredientStock(Stock):
    """Alchemy ingredients held by Geralt."""


class TrophyStock(Stock):
    """Monster trophies held by Geralt."""


# =============================================================================
# Potion Formulas
# =============================================================================


class Requirement(BaseModel):
    """One line of a potion formula.

    Attributes:
        ingredient: Name of the required ingredient.
        quantity: Units consumed per brew.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ingredient: RecordName
    quantity: PositiveQuantity


class PotionFormula(BaseModel):
    """A learned potion formula and the number of brewed potions.

    The requirement list keeps the order in which it was learned and cannot
    be replaced afterwards.

    Attributes:
        name: Potion name, possibly several words.
        requirements: Ingredients consumed by one brew.
        stock: Potions brewed and not yet used.
    """

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        extra="forbid",
    )

    name: RecordName
    requirements: tuple[Requirement, ...] = Field(min_length=1)
    stock: Quantity = 0

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ("name", "requirements"):
            raise WorldStateError(
                f"Formula field {name!r} is immutable once learned",
                record=self.name,
            )
        super().__setattr__(name, value)

    def totals(self) -> dict[str, int]:
        """Total units needed per ingredient for a single brew.

        Returns:
            Mapping of ingredient name to summed quantity.
        """
        needed: Counter[str] = Counter()
        for requirement in self.requirements:
            needed[requirement.ingredient] += requirement.quantity
        return dict(needed)

    def add_stock(self, amount: int = 1) -> int:
        """Record freshly brewed potions."""
        self.stock += amount
        return self.stock

    def consume(self) -> int:
        """Use one brewed potion.

        Raises:
            WorldStateError: If none are in stock.
        """
        if self.stock <= 0:
            raise WorldStateError(f"No {self.name} potion left to use", record=self.name)
        self.stock -= 1
        return self.stock


__all__ = [
    "RecordName",
    "Quantity",
    "PositiveQuantity",
    "Stock",
    "IngredientStock",
    "TrophyStock",
    "Requirement",
    "PotionFormula",
]
