"""Order items: the composite pricing tree.

A ``PricedItem`` is a leaf with a fixed price.  An ``ItemGroup`` owns an
ordered list of other items plus an optional surcharge (a stuffed crust,
a delivery fee) and prices itself as the sum of both.  Both share the
``OrderItem`` interface, so the tree is walked without type inspection.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass

from pizzeria.domain.exceptions import InvalidItemType, ValidationError
from pizzeria.domain.model.value_objects import Money

INDENT_STEP = "  "


class OrderItem(ABC):
    """Anything that can be priced and rendered inside an order."""

    @abstractmethod
    def get_name(self) -> str:
        """Display name of the item."""

    @abstractmethod
    def get_price(self) -> Money:
        """Price of the item, including everything nested below it."""

    @abstractmethod
    def render_structure(self, indent: str = "") -> str:
        """Render this item (and its children) as newline-terminated lines."""


@dataclass(frozen=True, eq=False)
class PricedItem(OrderItem):
    """A single product with a fixed price.

    Compared by identity so that two "Queijo extra" add-ons on different
    pizzas remain distinct children.
    """

    name: str
    price: Money

    def get_name(self) -> str:
        return self.name

    def get_price(self) -> Money:
        return self.price

    def render_structure(self, indent: str = "") -> str:
        return f"{indent}{self.name} - {self.price}\n"


class ItemGroup(OrderItem):
    """A named collection of items with an optional surcharge.

    The price is recomputed on every ``get_price()`` call, walking the
    whole subtree; nothing is cached, so mutations are always reflected.

    The same item object may be added to more than one group.  It is then
    counted once in each parent's price.  Adding a group to itself or to
    one of its descendants is rejected.
    """

    def __init__(self, name: str, surcharge: Money | None = None) -> None:
        self.name = name
        self.surcharge = surcharge if surcharge is not None else Money.zero()
        self._children: list[OrderItem] = []

    # --- Membership -----------------------------------------------------------

    def add(self, item: OrderItem) -> None:
        """Append *item* to the end of the children list."""
        if not isinstance(item, OrderItem):
            raise InvalidItemType(
                f"Only order items can be added to '{self.name}', "
                f"got {type(item).__name__}"
            )
        if isinstance(item, ItemGroup) and (item is self or item.contains(self)):
            raise ValidationError(
                f"Adding '{item.name}' to '{self.name}' would create a cycle"
            )
        currency = item.get_price().currency
        if currency != self.surcharge.currency:
            raise ValidationError(
                f"Cannot add '{item.get_name()}' priced in {currency} "
                f"to '{self.name}' priced in {self.surcharge.currency}"
            )
        self._children.append(item)

    def remove(self, item: OrderItem) -> None:
        """Remove the first child that is *item*; do nothing if absent."""
        for index, child in enumerate(self._children):
            if child is item:
                del self._children[index]
                return

    def contains(self, item: OrderItem) -> bool:
        """True if *item* appears anywhere below this group."""
        return any(node is item for _, node in self.walk() if node is not self)

    @property
    def children(self) -> tuple[OrderItem, ...]:
        return tuple(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[OrderItem]:
        return iter(tuple(self._children))

    def __contains__(self, item: object) -> bool:
        return any(child is item for child in self._children)

    # --- OrderItem interface --------------------------------------------------

    def get_name(self) -> str:
        return self.name

    def get_price(self) -> Money:
        return sum((child.get_price() for child in self._children), self.surcharge)

    def render_structure(self, indent: str = "") -> str:
        line = f"{indent}{self.name}"
        if not self.surcharge.is_zero:
            line += f" (Surcharge: {self.surcharge})"
        line += f" - Subtotal: {self.get_price()}\n"

        return line + "".join(
            child.render_structure(indent + INDENT_STEP) for child in self._children
        )

    # --- Traversal ------------------------------------------------------------

    def walk(self, depth: int = 0) -> Iterator[tuple[int, OrderItem]]:
        """Yield ``(depth, item)`` pairs in rendering order, starting with self."""
        yield depth, self
        for child in self._children:
            if isinstance(child, ItemGroup):
                yield from child.walk(depth + 1)
            else:
                yield depth + 1, child

    def __repr__(self) -> str:
        return (
            f"ItemGroup(name={self.name!r}, surcharge={self.surcharge!s}, "
            f"children={len(self._children)})"
        )
