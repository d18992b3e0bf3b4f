"""
Tests for the command-line entry point.
"""

import sys

import pytest

import cli


class TestPriceCommand:
    def test_price_order(self, capsys):
        cli.run_price("ord-002", "tax")
        assert "tax total for ord-002: 80.03" in capsys.readouterr().out

    def test_unknown_visitor_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.run_price("ord-001", "discount")

        assert exc_info.value.code == 1
        assert "Unknown visitor kind" in capsys.readouterr().out

    def test_unknown_order_exits(self, capsys):
        with pytest.raises(SystemExit):
            cli.run_price("ord-999", "tax")
        assert "Unknown order" in capsys.readouterr().out


class TestMain:
    def test_demo_command(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["cli.py", "demo", "cart"])
        cli.main()
        assert "Shopping Cart History" in capsys.readouterr().out

    def test_no_command_prints_help(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["cli.py"])
        cli.main()
        assert "Design Pattern Demos CLI" in capsys.readouterr().out
