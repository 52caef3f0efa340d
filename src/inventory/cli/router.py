"""Command router: maps a line of terminal input to a handler route.

    I<n>  restock n units
    S<n>  sell n units
    L     print the current inventory

Routing is purely syntactic; nothing here touches inventory state.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable

INVALID_COMMAND = "Command not recognized, please try again."


class InvalidCommandError(ValueError):
    """The input line does not match any known command."""

    def __init__(self, message: str = INVALID_COMMAND) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class ParsedCommand:
    """A routed command: the handler route name and its keyword arguments."""

    route: str
    args: dict[str, Any] = field(default_factory=dict)


def _quantity_args(match: re.Match) -> dict[str, Any]:
    try:
        qty = int(match.group(2))
    except ValueError:
        # Beyond the interpreter's int conversion limit
        raise InvalidCommandError() from None
    return {"qty": qty}


def _no_args(match: re.Match) -> dict[str, Any]:  # noqa: ARG001
    return {}


@dataclass(frozen=True)
class Route:
    pattern: re.Pattern[str]
    parse_args: Callable[[re.Match], dict[str, Any]]


# ---------------------------------------------------------------------------
# Route table, first match wins
# ---------------------------------------------------------------------------
ROUTES: dict[str, Route] = {
    "restock": Route(re.compile(r"^(I)([0-9]+)$"), _quantity_args),
    "sell": Route(re.compile(r"^(S)([0-9]+)$"), _quantity_args),
    "print_inventory": Route(re.compile(r"^(L)$"), _no_args),
}


def parse_command(line: str) -> ParsedCommand:
    """Return the route and arguments for ``line``.

    Raises InvalidCommandError when the line matches no route.
    """
    text = line.strip() if isinstance(line, str) else ""
    for name, route in ROUTES.items():
        match = route.pattern.match(text)
        if match:
            return ParsedCommand(route=name, args=route.parse_args(match))
    raise InvalidCommandError()
