"""Tests for routing terminal input lines to handler routes."""

import sys

import pytest
from inventory.cli.router import INVALID_COMMAND, InvalidCommandError, ParsedCommand, parse_command


class TestValidCommands:
    def test_l_routes_to_print_inventory_with_no_args(self):
        assert parse_command("L") == ParsedCommand(route="print_inventory", args={})

    @pytest.mark.parametrize("line, qty", [("I5", 5), ("I999999", 999999), ("I0", 0)])
    def test_i_routes_to_restock(self, line, qty):
        assert parse_command(line) == ParsedCommand(route="restock", args={"qty": qty})

    @pytest.mark.parametrize("line, qty", [("S1", 1), ("S345", 345)])
    def test_s_routes_to_sell(self, line, qty):
        assert parse_command(line) == ParsedCommand(route="sell", args={"qty": qty})

    def test_surrounding_whitespace_is_ignored(self):
        assert parse_command("  I12\n") == ParsedCommand(route="restock", args={"qty": 12})

    def test_leading_zeros_parse_as_decimal(self):
        assert parse_command("S007").args == {"qty": 7}

    def test_quantity_is_an_int(self):
        assert isinstance(parse_command("I42").args["qty"], int)


class TestInvalidCommands:
    @pytest.mark.parametrize(
        "line",
        [
            "Lasdf", "L3", "l", "i5", "S-1", "S5a", "I-10", "I10x", "I", "S", "I 5", "X1", "", "   ",
            # Non-ASCII decimal digits (Arabic-Indic, fullwidth)
            "I\u0661\u0662",
            "S\uff15",
        ],
    )
    def test_invalid_commands_raise(self, line):
        with pytest.raises(InvalidCommandError) as exc:
            parse_command(line)
        assert str(exc.value) == INVALID_COMMAND

    def test_non_string_input_raises(self):
        with pytest.raises(InvalidCommandError):
            parse_command(None)

    def test_quantity_beyond_int_conversion_limit_raises(self):
        limit = sys.get_int_max_str_digits()
        if limit == 0:
            pytest.skip("int conversion limit disabled")
        with pytest.raises(InvalidCommandError) as exc:
            parse_command("I" + "9" * (limit + 700))
        assert str(exc.value) == INVALID_COMMAND
