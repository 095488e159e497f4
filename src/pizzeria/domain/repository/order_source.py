"""Abstract source the application layer loads orders from."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pizzeria.domain.model.order import Order


class OrderSource(ABC):

    @abstractmethod
    def load(self) -> Order:
        """Return the order to work on."""
