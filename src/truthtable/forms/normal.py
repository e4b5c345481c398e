# src/truthtable/forms/normal.py

"""
Normal forms read directly off a truth table.

- :func:`dnf` : one conjunctive term per true row, joined with ``|``
- :func:`cnf` : one disjunctive clause per false row, joined with ``&``

Rows with don't-care variables give shorter terms/clauses; no minimization
is attempted here (see :mod:`truthtable.forms.minimal`).

Examples
--------
>>> from truthtable import TruthTable
>>> from truthtable.forms.normal import dnf, cnf
>>> t = TruthTable(lambda v: v[0] ^ v[1])
>>> dnf(t)
'!v[0] & v[1] | v[0] & !v[1]'
>>> cnf(t)
'(v[0] | v[1]) & (!v[0] | !v[1])'
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Hashable, List, Tuple

if TYPE_CHECKING:
    from ..table import TruthTable

__all__ = [
    "dnf",
    "cnf",
    "literal",
    "op_symbols",
]


def op_symbols(unicode_ops: bool = False) -> Tuple[str, str, str]:
    """Return ``(not, and-glue, or-glue)`` for the requested style."""
    if unicode_ops:
        return "¬", " ∧ ", " ∨ "
    return "!", " & ", " | "


def literal(name: Hashable, positive: bool, *, unicode_ops: bool = False) -> str:
    """Render `name` or its negation."""
    neg, _, _ = op_symbols(unicode_ops)
    return f"{name}" if positive else f"{neg}{name}"


def constant(value: bool) -> str:
    return "true" if value else "false"


def _require_rows(table: "TruthTable") -> None:
    if not table.rows:
        raise RuntimeError("cannot derive a formula from a truth table with no rows")


def dnf(table: "TruthTable", *, unicode_ops: bool = False) -> str:
    """
    Disjunctive normal form of `table`.

    A row with an empty assignment means the predicate never read a
    variable; its constant is returned immediately. ``"false"`` when no row
    is true.
    """
    _require_rows(table)
    _, conj, disj = op_symbols(unicode_ops)
    terms: List[str] = []
    for row in table.rows:
        if not row.inputs:
            return constant(row.output)
        if not row.output:
            continue
        lits = [literal(name, value, unicode_ops=unicode_ops)
                for name, value in table.each_input(row.inputs)]
        terms.append(conj.join(lits))
    if not terms:
        return "false"
    return disj.join(terms)


def cnf(table: "TruthTable", *, unicode_ops: bool = False) -> str:
    """
    Conjunctive normal form of `table`.

    Each false row becomes a clause excluding it; clauses with more than one
    literal are parenthesized. ``"true"`` when no row is false.
    """
    _require_rows(table)
    _, conj, disj = op_symbols(unicode_ops)
    clauses: List[str] = []
    for row in table.rows:
        if not row.inputs:
            return constant(row.output)
        if row.output:
            continue
        lits = [literal(name, not value, unicode_ops=unicode_ops)
                for name, value in table.each_input(row.inputs)]
        if len(lits) == 1:
            clauses.append(lits[0])
        else:
            clauses.append("(" + disj.join(lits) + ")")
    if not clauses:
        return "true"
    return conj.join(clauses)
