"""End-to-end tests for the pizzeria CLI."""

import json

from click.testing import CliRunner

from pizzeria.infrastructure.cli.main import cli

ORDER_DOCUMENT = {
    "customer": {"name": "Bruno", "email": "bruno@example.com", "whatsapp": "+5521999"},
    "items": {
        "name": "Pedido",
        "surcharge": "7.00",
        "children": [
            {"name": "Pizza Margherita", "price": "42.00"},
            {"name": "Refrigerante 2L", "price": "10.00"},
        ],
    },
}


def _order_file(tmp_path):
    path = tmp_path / "order.json"
    path.write_text(json.dumps(ORDER_DOCUMENT), encoding="utf-8")
    return str(path)


class TestDemoCommand:

    def test_walkthrough(self):
        result = CliRunner().invoke(cli, ["demo"])

        assert result.exit_code == 0, result.output
        assert result.output.count("ORDER TOTAL: R$ 96.50") == 2
        assert "STATUS: PENDING" in result.output
        assert "STATUS: PAID" in result.output
        assert "Order status changed to: PAID" in result.output

    def test_notifications_in_chain_order(self):
        result = CliRunner().invoke(cli, ["demo"])

        lines = [line for line in result.output.splitlines() if " SENT to " in line]
        assert lines == [
            "[EMAIL SENT to ana.silva@example.com] -> Order confirmed! Total: R$ 96.50",
            "[SMS SENT to +5511987654321] -> Order confirmed! Total: R$ 96.50",
            "[WHATSAPP SENT to +5511987654321] -> Order confirmed! Total: R$ 96.50",
        ]

    def test_channels_option(self):
        result = CliRunner().invoke(cli, ["demo", "--channels", "sms"])

        assert result.exit_code == 0, result.output
        assert "[SMS SENT to" in result.output
        assert "[EMAIL SENT to" not in result.output

    def test_channels_from_environment(self):
        result = CliRunner().invoke(cli, ["demo"], env={"PIZZERIA_CHANNELS": "whatsapp"})

        assert result.exit_code == 0, result.output
        assert "[WHATSAPP SENT to" in result.output
        assert "[SMS SENT to" not in result.output

    def test_unknown_channel(self):
        result = CliRunner().invoke(cli, ["demo", "--channels", "pigeon"])

        assert result.exit_code == 2
        assert "Unknown notification channel" in result.output


class TestShowCommand:

    def test_show(self, tmp_path):
        result = CliRunner().invoke(cli, ["show", "--file", _order_file(tmp_path)])

        assert result.exit_code == 0, result.output
        assert "CUSTOMER: Bruno" in result.output
        assert "  Pizza Margherita - R$ 42.00" in result.output
        assert "ORDER TOTAL: R$ 59.00" in result.output

    def test_missing_file(self, tmp_path):
        result = CliRunner().invoke(cli, ["show", "--file", str(tmp_path / "nope.json")])

        assert result.exit_code == 1
        assert "Order file not found" in result.output

    def test_invalid_utf8_file(self, tmp_path):
        path = tmp_path / "order.json"
        path.write_bytes(b'{"customer": {"name": "\xff"}}')

        result = CliRunner().invoke(cli, ["show", "--file", str(path)])

        assert result.exit_code == 1
        assert "not valid UTF-8" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)


class TestCheckoutCommand:

    def test_checkout_skips_missing_sms(self, tmp_path):
        result = CliRunner().invoke(cli, ["checkout", "--file", _order_file(tmp_path)])

        assert result.exit_code == 0, result.output
        assert "[EMAIL SENT to bruno@example.com] -> Order confirmed! Total: R$ 59.00" in result.output
        assert "[WHATSAPP SENT to +5521999]" in result.output
        assert "[SMS SENT" not in result.output
        assert "STATUS: PAID" in result.output

    def test_verbose_flag_accepted(self, tmp_path):
        result = CliRunner().invoke(cli, ["-v", "checkout", "--file", _order_file(tmp_path)])
        assert result.exit_code == 0, result.output
