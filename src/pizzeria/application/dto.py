"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ItemLineDTO:
    """Output: one node of the item tree, flattened."""

    depth: int
    name: str
    surcharge: str | None  # formatted, e.g. "R$ 5.50"; None when zero or a leaf
    subtotal: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    customer_name: str
    status: str
    items: list[ItemLineDTO]
    total: str
    summary: str


@dataclass(frozen=True)
class CheckoutDTO:
    """Output: the result of a checkout."""

    customer_name: str
    status: str
    total: str
    message: str
    summary: str
