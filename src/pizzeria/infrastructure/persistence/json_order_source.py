"""JSON-file-backed, read-only implementation of OrderSource.

Document shape::

    {
      "customer": {"name": "...", "email": "...", "sms": "...", "whatsapp": "..."},
      "items": {
        "name": "Main order", "surcharge": "7.00",
        "children": [
          {"name": "Dessert", "price": "25.00"},
          {"name": "Drinks", "children": [...]}
        ]
      }
    }

A node with a ``children`` key is a group; any other node is a leaf.
The root node must be a group.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pizzeria.domain.exceptions import EntityNotFoundError, ValidationError
from pizzeria.domain.model.customer import CHANNELS, Customer
from pizzeria.domain.model.items import ItemGroup, OrderItem, PricedItem
from pizzeria.domain.model.order import Order
from pizzeria.domain.model.value_objects import Money
from pizzeria.domain.repository.order_source import OrderSource

log = logging.getLogger(__name__)


class JsonOrderSource(OrderSource):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- OrderSource interface ------------------------------------------------

    def load(self) -> Order:
        raw = self._load_raw()
        if not isinstance(raw, dict):
            raise ValidationError("Order document must be a JSON object")

        order = self._to_domain(raw)
        log.info(
            "Loaded order for %s from %s (%d top-level items)",
            order.customer.name,
            self._file_path,
            len(order.root),
        )
        return order

    # --- Deserialization ------------------------------------------------------

    @classmethod
    def _to_domain(cls, raw: dict) -> Order:
        customer = cls._to_customer(raw.get("customer"))
        root = cls._to_item(raw.get("items"), path="items")
        if not isinstance(root, ItemGroup):
            raise ValidationError("'items' must be a group with 'children'")
        return Order(customer=customer, root=root)

    @staticmethod
    def _to_customer(raw: object) -> Customer:
        name = raw.get("name") if isinstance(raw, dict) else None
        if not isinstance(name, str) or not name:
            raise ValidationError("'customer' must be an object with a 'name'")
        contacts = {channel: raw.get(channel) for channel in CHANNELS}
        return Customer(name=name, **contacts)

    @classmethod
    def _to_item(cls, raw: object, path: str) -> OrderItem:
        if not isinstance(raw, dict) or not isinstance(raw.get("name"), str):
            raise ValidationError(f"'{path}' must be an object with a 'name'")

        if "children" in raw:
            children = raw["children"]
            if not isinstance(children, list):
                raise ValidationError(f"'{path}.children' must be a list")
            group = ItemGroup(raw["name"], Money.of(raw.get("surcharge", 0)))
            for index, child in enumerate(children):
                group.add(cls._to_item(child, path=f"{path}.children[{index}]"))
            return group

        if "price" not in raw:
            raise ValidationError(f"'{path}' needs either 'price' or 'children'")
        return PricedItem(raw["name"], Money.of(raw["price"]))

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> object:
        if not self._file_path.exists():
            raise EntityNotFoundError(f"Order file not found: {self._file_path}")
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ValidationError(
                f"Order file {self._file_path} is not valid UTF-8: {exc.reason}"
            ) from exc
        except OSError as exc:
            raise ValidationError(
                f"Cannot read order file {self._file_path}: {exc.strerror}"
            ) from exc

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValidationError(
                f"Order file {self._file_path} is not valid JSON: {exc.msg}"
            ) from exc
