"""Session history of successful calculations.

A ``History`` is created by whoever runs the interactive loop and passed in;
it only ever grows.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from . import config


def format_value(value: float, precision: int | None = None) -> str:
    """Format a result with a fixed number of decimal places."""
    if precision is None:
        precision = config.DISPLAY_PRECISION
    return f"{value:.{precision}f}"


@dataclass(frozen=True)
class HistoryEntry:
    expression: str
    value: float

    def format(self, precision: int | None = None) -> str:
        return f"{self.expression} = {format_value(self.value, precision)}"


class History:
    """Append-only log of evaluated expressions."""

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []

    def record(self, expression: str, value: float) -> HistoryEntry:
        """Append an entry; spaces are removed from the expression text."""
        entry = HistoryEntry(expression.replace(" ", ""), value)
        self._entries.append(entry)
        return entry

    def lines(self, precision: int | None = None) -> list[str]:
        return [entry.format(precision) for entry in self._entries]

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
