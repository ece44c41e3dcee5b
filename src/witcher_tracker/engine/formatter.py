"""Deterministic formatting of query answers.

Sorting uses plain ``str`` ordering, which compares code points, so
``"Zerrikanian"`` sorts before ``"arenaria"``.
"""

from __future__ import annotations

from collections.abc import Iterable

from witcher_tracker.core.constants import EMPTY_LISTING, LIST_SEPARATOR
from witcher_tracker.models.inventory import Requirement


def format_amount(quantity: int, name: str) -> str:
    """Render one ``<qty> <name>`` entry."""
    return f"{quantity} {name}"


def format_listing(holdings: Iterable[tuple[str, int]]) -> str:
    """Render ``Total <category> ?``.

    Args:
        holdings: (name, amount) pairs; non-positive amounts are skipped.

    Returns:
        Entries sorted by name, or ``"None"`` when nothing is held.
    """
    entries = sorted((name, amount) for name, amount in holdings if amount > 0)
    if not entries:
        return EMPTY_LISTING
    return LIST_SEPARATOR.join(format_amount(amount, name) for name, amount in entries)


def format_quantity(quantity: int) -> str:
    """Render ``Total <category> <name> ?``."""
    return str(quantity)


def format_counters(names: Iterable[str]) -> str:
    """Render ``What is effective against <beast> ?``.

    Duplicates are kept: a sign and a potion sharing a name are two counters.
    """
    return LIST_SEPARATOR.join(sorted(names))


def format_requirements(requirements: Iterable[Requirement]) -> str:
    """Render ``What is in <potion> ?``: quantity descending, then name."""
    ordered = sorted(requirements, key=lambda r: (-r.quantity, r.ingredient))
    return LIST_SEPARATOR.join(format_amount(r.quantity, r.ingredient) for r in ordered)


__all__ = [
    "format_amount",
    "format_counters",
    "format_listing",
    "format_quantity",
    "format_requirements",
]
