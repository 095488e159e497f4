"""Tests for the ShowOrder use case."""

from pizzeria.application.show_order import ShowOrderHandler
from pizzeria.infrastructure.demo import demo_order
from pizzeria.infrastructure.persistence.in_memory_order_source import (
    InMemoryOrderSource,
)


class TestShowOrder:

    def test_dto_header_fields(self):
        dto = ShowOrderHandler(InMemoryOrderSource(demo_order())).handle()
        assert dto.customer_name == "Ana Silva"
        assert dto.status == "PENDING"
        assert dto.total == "R$ 96.50"

    def test_lines_are_flattened_in_render_order(self):
        dto = ShowOrderHandler(InMemoryOrderSource(demo_order())).handle()
        assert [(line.depth, line.name) for line in dto.items] == [
            (0, "Pedido Principal com Taxa de Entrega"),
            (1, "Pizza de Calabresa G com borda recheada"),
            (2, "Pizza de Calabresa base"),
            (2, "Queijo extra"),
            (1, "Combo de Bebidas"),
            (2, "Refrigerante 2L"),
            (2, "Água Mineral"),
            (1, "Pizza de Chocolate pequena"),
        ]

    def test_surcharge_only_on_groups_with_one(self):
        dto = ShowOrderHandler(InMemoryOrderSource(demo_order())).handle()
        surcharges = {line.name: line.surcharge for line in dto.items}
        assert surcharges["Pedido Principal com Taxa de Entrega"] == "R$ 7.00"
        assert surcharges["Pizza de Calabresa G com borda recheada"] == "R$ 5.50"
        assert surcharges["Combo de Bebidas"] is None
        assert surcharges["Queijo extra"] is None

    def test_subtotals(self):
        dto = ShowOrderHandler(InMemoryOrderSource(demo_order())).handle()
        subtotals = {line.name: line.subtotal for line in dto.items}
        assert subtotals["Pizza de Calabresa G com borda recheada"] == "R$ 50.50"
        assert subtotals["Combo de Bebidas"] == "R$ 14.00"

    def test_summary_matches_domain(self):
        order = demo_order()
        dto = ShowOrderHandler(InMemoryOrderSource(order)).handle()
        assert dto.summary == order.generate_summary()
