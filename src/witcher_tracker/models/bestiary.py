"""Bestiary knowledge: signs, potion references and beasts.

A beast can be countered by signs and by potions. A potion may be known to
work against a beast before its formula is learned, so the beast stores a
tagged PotionRef:

- ``KnownPotion``: the formula was known when the fact was recorded.
- ``NameOnlyPotion``: only the name was known at that time.

Both tags refer to the same logical counter when they carry the same name.
Every comparison and lookup therefore goes through the name, never the tag.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from witcher_tracker.models.inventory import RecordName


class Sign(BaseModel):
    """A witcher sign. Signs are never consumed."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: RecordName


class KnownPotion(BaseModel):
    """Reference to a potion whose formula is known."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    tag: Literal["known"] = "known"
    name: RecordName


class NameOnlyPotion(BaseModel):
    """Reference to a potion known only by name."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    tag: Literal["name_only"] = "name_only"
    name: RecordName


PotionRef = Annotated[KnownPotion | NameOnlyPotion, Field(discriminator="tag")]


class BeastKnowledge(BaseModel):
    """Everything Geralt knows about one kind of beast.

    Attributes:
        name: Beast name.
        effective_signs: Signs effective against the beast, in learning order.
        effective_potions: Potions effective against the beast, in learning order.
    """

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        extra="forbid",
    )

    name: RecordName
    effective_signs: list[Sign] = Field(default_factory=list)
    effective_potions: list[PotionRef] = Field(default_factory=list)

    def knows_sign(self, name: str) -> bool:
        """Check whether a sign is already recorded as effective."""
        return any(sign.name == name for sign in self.effective_signs)

    def knows_potion(self, name: str) -> bool:
        """Check whether a potion is already recorded, whatever its tag."""
        return any(ref.name == name for ref in self.effective_potions)

    def add_sign(self, sign: Sign) -> bool:
        """Record a sign as effective.

        Returns:
            False if it was already known, True if it was added.
        """
        if self.knows_sign(sign.name):
            return False
        self.effective_signs.append(sign)
        return True

    def add_potion(self, ref: KnownPotion | NameOnlyPotion) -> bool:
        """Record a potion as effective.

        Returns:
            False if a reference with that name exists, True if it was added.
        """
        if self.knows_potion(ref.name):
            return False
        self.effective_potions.append(ref)
        return True

    def promote_potion(self, name: str) -> bool:
        """Retag a name-only reference as known once its formula is learned.

        Returns:
            True if a reference was retagged.
        """
        for index, ref in enumerate(self.effective_potions):
            if ref.name == name and isinstance(ref, NameOnlyPotion):
                self.effective_potions[index] = KnownPotion(name=name)
                return True
        return False

    @property
    def potion_names(self) -> list[str]:
        """Names of the effective potions, in learning order."""
        return [ref.name for ref in self.effective_potions]

    @property
    def counter_names(self) -> list[str]:
        """Names of all effective counters, potions first."""
        return self.potion_names + [sign.name for sign in self.effective_signs]

    @property
    def has_signs(self) -> bool:
        """Whether at least one sign works against the beast."""
        return bool(self.effective_signs)


__all__ = [
    "Sign",
    "KnownPotion",
    "NameOnlyPotion",
    "PotionRef",
    "BeastKnowledge",
]
