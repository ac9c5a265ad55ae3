"""Output sinks for timeline playback."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol

INDEX_HEADER = "(index)"
VALUES_HEADER = "Values"


class LineSink(Protocol):
    """Receives one rendered timeline line at a time."""

    def __call__(self, line: str, /) -> None: ...


class TableSink(Protocol):
    """Receives the `data` attached to an entry, right after its line."""

    def __call__(self, data: Any, /) -> None: ...


class InMemorySink:
    """Collects everything it is called with; for tests and local debugging."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def __call__(self, item: Any, /) -> None:
        self._items.append(item)

    def snapshot(self) -> list[Any]:
        """Return a point-in-time copy of all collected items."""
        return list(self._items)


def _rows_for(data: Any) -> tuple[list[str], list[tuple[str, dict[str, Any]]]] | None:
    """Normalize tabular data into (columns, [(index, {column: value})]).

    Returns None when the data is a scalar and has no tabular shape.
    """
    if isinstance(data, Mapping):
        items = [(str(k), v) for k, v in data.items()]
    elif isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray)):
        items = [(str(i), v) for i, v in enumerate(data)]
    else:
        return None

    columns: list[str] = []
    rows: list[tuple[str, dict[str, Any]]] = []
    for index, value in items:
        if isinstance(value, Mapping):
            row = {str(k): v for k, v in value.items()}
        else:
            row = {VALUES_HEADER: value}
        for column in row:
            if column not in columns:
                columns.append(column)
        rows.append((index, row))

    # Scalar values go last, after any named columns.
    if VALUES_HEADER in columns:
        columns.remove(VALUES_HEADER)
        columns.append(VALUES_HEADER)
    return columns, rows


def print_table(data: Any, *, out: Callable[[str], None] = print) -> None:
    """Print mappings and sequences as a plain-text grid, index column first.

    Scalars (and strings) are printed as-is.
    """
    shaped = _rows_for(data)
    if shaped is None:
        out(str(data))
        return

    columns, rows = shaped
    header = [INDEX_HEADER, *columns]
    body = [[index, *(repr(row[c]) if c in row else "" for c in columns)] for index, row in rows]

    widths = [len(h) for h in header]
    for cells in body:
        widths = [max(w, len(cell)) for w, cell in zip(widths, cells)]

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(cell.ljust(w) for cell, w in zip(cells, widths)) + " |"

    rule = "+" + "+".join("-" * (w + 2) for w in widths) + "+"
    out(rule)
    out(_line(header))
    out(rule)
    for cells in body:
        out(_line(cells))
    out(rule)
