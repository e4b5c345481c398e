# src/truthtable/forms/pretty.py

"""
Formatting helpers for truth tables (no monkey-patching).

Use:
    from truthtable.forms.pretty import format_table
    print(format_table(table))

>>> from truthtable import TruthTable
>>> print(format_table(TruthTable(lambda v: v[0] & v[1])))
v[0] v[1] |
----------+--
 f    f   | f
 f    t   | f
 t    f   | f
 t    t   | t
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from ..table import TruthTable

__all__ = [
    "format_table",
    "format_inspect",
    "format_pretty_lines",
]


def _tf(value: bool) -> str:
    return "t" if value else "f"


def format_table(table: "TruthTable") -> str:
    """
    Tabular text: one column per variable in rank order, ``?`` for don't-care.
    """
    names = table.sort_names(table.all_names())
    header = "".join(f"{name} " for name in names) + "|"
    rule = "".join("-" * (len(str(name)) + 1) for name in names) + "+--"
    lines = [header, rule]
    for row in table.rows:
        cells = []
        for name in names:
            w = len(str(name))
            if name in row.inputs:
                cells.append(_tf(row.inputs[name]).center(w))
            else:
                cells.append("?".center(w))
        lines.append("".join(c + " " for c in cells) + "| " + _tf(row.output))
    return "\n".join(lines)


def format_inspect(table: "TruthTable") -> str:
    """Single-line form: ``<TruthTable: !v[0]&v[1]=>false ...>``."""
    parts = [f"<{type(table).__name__}:"]
    for row in table.rows:
        term = [f"{name}" if value else f"!{name}"
                for name, value in table.each_input(row.inputs)]
        parts.append(f" {'&'.join(term)}=>{str(row.output).lower()}")
    parts.append(">")
    return "".join(parts)


def format_pretty_lines(table: "TruthTable") -> List[str]:
    """One aligned line per row; positive literals get a leading space."""
    lines = []
    for row in table.rows:
        term = [f" {name}" if value else f"!{name}"
                for name, value in table.each_input(row.inputs)]
        lines.append(f"{'&'.join(term)}=>{str(row.output).lower()}")
    return lines
