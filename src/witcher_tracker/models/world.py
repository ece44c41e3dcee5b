"""The world model: every table the interpreter reads and writes.

WorldState is the single source of truth for a session. It is created
once by the interpreter and handed by reference to every executor. Each
table is keyed by record name, so uniqueness by name is a property of the
container rather than something callers must check.

Multi-record changes (trades, brews) are check-then-commit: the full
requirement is evaluated against the current state before the first
record is touched, and a failed check leaves every table unchanged.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field

from witcher_tracker.core.exceptions import WorldStateError
from witcher_tracker.models.bestiary import (
    BeastKnowledge,
    KnownPotion,
    NameOnlyPotion,
    Sign,
)
from witcher_tracker.models.enums import Category
from witcher_tracker.models.inventory import (
    IngredientStock,
    PotionFormula,
    Requirement,
    TrophyStock,
)


def sum_amounts(items: Iterable[tuple[str, int]]) -> dict[str, int]:
    """Sum quantities per name, keeping first-seen order.

    Args:
        items: (name, quantity) pairs, possibly repeating names.

    Returns:
        Mapping of name to total quantity.
    """
    totals: Counter[str] = Counter()
    for name, quantity in items:
        totals[name] += quantity
    return dict(totals)


class WorldState(BaseModel):
    """The complete in-memory world.

    Attributes:
        ingredients: Ingredient stock by name.
        trophies: Trophy stock by beast name.
        potions: Learned formulas (with brewed stock) by potion name.
        signs: Signs referenced so far by name.
        beasts: Bestiary entries by beast name.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )

    ingredients: dict[str, IngredientStock] = Field(default_factory=dict)
    trophies: dict[str, TrophyStock] = Field(default_factory=dict)
    potions: dict[str, PotionFormula] = Field(default_factory=dict)
    signs: dict[str, Sign] = Field(default_factory=dict)
    beasts: dict[str, BeastKnowledge] = Field(default_factory=dict)

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def ingredient_quantity(self, name: str) -> int:
        """Units of an ingredient held, 0 if never seen."""
        stock = self.ingredients.get(name)
        return stock.quantity if stock else 0

    def trophy_quantity(self, name: str) -> int:
        """Trophies of a beast held, 0 if never seen."""
        stock = self.trophies.get(name)
        return stock.quantity if stock else 0

    def potion_stock(self, name: str) -> int:
        """Brewed potions held, 0 if the formula is unknown."""
        formula = self.potions.get(name)
        return formula.stock if formula else 0

    def quantity(self, category: Category, name: str) -> int:
        """Held amount of a named record in a category."""
        if category == Category.INGREDIENT:
            return self.ingredient_quantity(name)
        if category == Category.TROPHY:
            return self.trophy_quantity(name)
        return self.potion_stock(name)

    def holdings(self, category: Category) -> list[tuple[str, int]]:
        """All records of a category with a positive amount.

        Returns:
            (name, amount) pairs in table order; callers sort for display.
        """
        if category == Category.INGREDIENT:
            return [(s.name, s.quantity) for s in self.ingredients.values() if s.quantity > 0]
        if category == Category.TROPHY:
            return [(s.name, s.quantity) for s in self.trophies.values() if s.quantity > 0]
        return [(p.name, p.stock) for p in self.potions.values() if p.stock > 0]

    def get_formula(self, name: str) -> PotionFormula | None:
        """Get a learned formula by potion name."""
        return self.potions.get(name)

    def get_beast(self, name: str) -> BeastKnowledge | None:
        """Get a bestiary entry by beast name."""
        return self.beasts.get(name)

    # -------------------------------------------------------------------------
    # Record creation
    # -------------------------------------------------------------------------

    def ensure_ingredient(self, name: str) -> IngredientStock:
        """Get an ingredient record, creating it at quantity 0."""
        stock = self.ingredients.get(name)
        if stock is None:
            stock = IngredientStock(name=name)
            self.ingredients[name] = stock
        return stock

    def ensure_trophy(self, name: str) -> TrophyStock:
        """Get a trophy record, creating it at quantity 0."""
        stock = self.trophies.get(name)
        if stock is None:
            stock = TrophyStock(name=name)
            self.trophies[name] = stock
        return stock

    def ensure_sign(self, name: str) -> Sign:
        """Get a sign, creating it on first reference."""
        sign = self.signs.get(name)
        if sign is None:
            sign = Sign(name=name)
            self.signs[name] = sign
        return sign

    def ensure_beast(self, name: str) -> tuple[BeastKnowledge, bool]:
        """Get a bestiary entry, creating an empty one if absent.

        Returns:
            The entry and whether it was just created.
        """
        beast = self.beasts.get(name)
        if beast is not None:
            return beast, False
        beast = BeastKnowledge(name=name)
        self.beasts[name] = beast
        return beast, True

    def potion_ref(self, name: str) -> KnownPotion | NameOnlyPotion:
        """Reference a potion by name, tagged by whether its formula is known."""
        if name in self.potions:
            return KnownPotion(name=name)
        return NameOnlyPotion(name=name)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add_ingredients(self, items: Sequence[tuple[str, int]]) -> None:
        """Credit ingredients, creating unseen ones first."""
        for name, quantity in items:
            self.ensure_ingredient(name).add(quantity)

    def missing_trophies(self, required: Mapping[str, int]) -> dict[str, int]:
        """Trophies that are short for a requirement.

        Args:
            required: Total trophies needed per beast name.

        Returns:
            Mapping of beast name to how many more are needed; empty when
            the requirement can be met.
        """
        return {
            name: needed - self.trophy_quantity(name)
            for name, needed in required.items()
            if self.trophy_quantity(name) < needed
        }

    def trade(
        self,
        trophies: Sequence[tuple[str, int]],
        ingredients: Sequence[tuple[str, int]],
    ) -> None:
        """Exchange trophies for ingredients as one transaction.

        Args:
            trophies: (beast, quantity) pairs to give away.
            ingredients: (ingredient, quantity) pairs to receive.

        Raises:
            WorldStateError: If any trophy is short; nothing is changed.
        """
        required = sum_amounts(trophies)
        missing = self.missing_trophies(required)
        if missing:
            raise WorldStateError(
                "Not enough trophies for trade",
                details={"missing": missing},
            )
        for name, needed in required.items():
            self.trophies[name].remove(needed)
        self.add_ingredients(ingredients)

    def missing_ingredients(self, formula: PotionFormula) -> dict[str, int]:
        """Ingredients that are short for one brew of a formula."""
        return {
            name: needed - self.ingredient_quantity(name)
            for name, needed in formula.totals().items()
            if self.ingredient_quantity(name) < needed
        }

    def brew(self, name: str) -> PotionFormula:
        """Brew one potion, consuming its ingredients as one transaction.

        Raises:
            WorldStateError: If the formula is unknown or an ingredient is
                short; nothing is changed.
        """
        formula = self.potions.get(name)
        if formula is None:
            raise WorldStateError(f"No formula for {name}", record=name)
        missing = self.missing_ingredients(formula)
        if missing:
            raise WorldStateError(
                f"Not enough ingredients for {name}",
                record=name,
                details={"missing": missing},
            )
        for ingredient, needed in formula.totals().items():
            self.ingredients[ingredient].remove(needed)
        formula.add_stock()
        return formula

    def learn_formula(self, name: str, requirements: Sequence[tuple[str, int]]) -> PotionFormula:
        """Record a new potion formula.

        Ingredients named by the formula get a record at quantity 0 if they
        have never been seen. Beasts that already list the potion by name
        have their reference retagged as known.

        Raises:
            WorldStateError: If the formula is already known.
        """
        if name in self.potions:
            raise WorldStateError(f"Formula for {name} already known", record=name)
        formula = PotionFormula(
            name=name,
            requirements=tuple(
                Requirement(ingredient=ingredient, quantity=quantity)
                for ingredient, quantity in requirements
            ),
        )
        for requirement in formula.requirements:
            self.ensure_ingredient(requirement.ingredient)
        self.potions[name] = formula
        for beast in self.beasts.values():
            beast.promote_potion(name)
        return formula

    def usable_potions(self, beast: BeastKnowledge) -> list[PotionFormula]:
        """Effective potions against a beast that are currently in stock.

        References resolve by name, so a name-only reference counts as soon
        as a formula with that name exists and has been brewed.
        """
        usable: list[PotionFormula] = []
        for potion_name in dict.fromkeys(beast.potion_names):
            formula = self.potions.get(potion_name)
            if formula is not None and formula.stock > 0:
                usable.append(formula)
        return usable

    def record_kill(self, beast_name: str) -> TrophyStock:
        """Add one trophy for a defeated beast."""
        trophy = self.ensure_trophy(beast_name)
        trophy.add(1)
        return trophy


__all__ = [
    "WorldState",
    "sum_amounts",
]
