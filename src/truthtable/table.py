# src/truthtable/table.py

"""
Truth tables derived from ordinary boolean Python code.

A :class:`TruthTable` runs a predicate over an :class:`~truthtable.explore.Inputs`
view, discovering variables as the predicate reads them. Short-circuiting
shows up as don't-care entries, so ``v[0] and v[1]`` yields three rows rather
than four. Formulas are derived on demand:

- :meth:`TruthTable.formula` : minimal (Quine–McCluskey) sum of products
- :meth:`TruthTable.dnf`     : disjunctive normal form
- :meth:`TruthTable.cnf`     : conjunctive normal form

Examples
--------
>>> from truthtable import TruthTable
>>> TruthTable(lambda v: v[0]).formula()
'v[0]'
>>> TruthTable(lambda v: not v[0]).formula()
'!v[0]'
>>> TruthTable(lambda v: v[0] | v[1]).formula()
'v[0] | v[1]'
>>> TruthTable(lambda v: v[0] == v[1]).formula()
'(!v[0] & !v[1]) | (v[0] & v[1])'
>>> TruthTable(lambda v: sum([v[0], v[1], v[2], v[3]]) <= 3).formula()
'!v[0] | !v[1] | !v[2] | !v[3]'
>>> TruthTable(lambda v: v.carry and v.enable).dnf()
'carry & enable'
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Hashable, Iterable, Iterator, List, Optional, Tuple

import pandas as pd

from .config import TableConfig
from .explore import Inputs, Row, explore
from .forms.minimal import minimal_formula
from .forms.normal import cnf, dnf
from .forms.pretty import format_inspect, format_pretty_lines, format_table
from .utils.events import log_event

__all__ = [
    "Row",
    "TruthTable",
]


class TruthTable:
    """
    Exhaustive, don't-care-compressed truth table of a pure predicate.

    Parameters
    ----------
    predicate : callable
        Function of an :class:`Inputs` view returning anything coercible to
        ``bool``. Must be pure: it is re-run once per explored path.
    config : TableConfig, optional
        Exploration and export knobs.

    Attributes
    ----------
    rows : list of Row
        Explored rows in first-exploration order. Only ever narrowed (see
        :meth:`resolve`).

    Notes
    -----
    The rows partition the hypercube over all observed variables: every total
    assignment agrees with exactly one row. A row omitting a variable matches
    both of its values.
    """

    def __init__(
        self,
        predicate: Callable[[Inputs], Any],
        *,
        config: Optional[TableConfig] = None,
    ):
        self.config = config or TableConfig()
        self.predicate = predicate
        self.rows: List[Row] = explore(predicate, config=self.config)
        self._all_names: Optional[Dict[Hashable, int]] = None

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Row],
        *,
        config: Optional[TableConfig] = None,
    ) -> "TruthTable":
        """Wrap already-explored rows without running a predicate."""
        self = cls.__new__(cls)
        self.config = config or TableConfig()
        self.predicate = None
        self.rows = list(rows)
        self._all_names = None
        return self

    # ---------- narrowing ----------
    def resolve(self, name: Hashable, value: bool) -> "TruthTable":
        """
        Keep only rows consistent with ``name == value``.

        Rows that do not mention `name` (don't-care) are kept, so resolving a
        name absent from the table is a no-op. Mutates in place and returns
        ``self``.
        """
        value = bool(value)
        before = len(self.rows)
        self.rows[:] = [r for r in self.rows
                        if name not in r.inputs or r.inputs[name] == value]
        self._all_names = None
        if self.config.verbose:
            log_event(f"resolve {name}={value}: removed {before - len(self.rows)} rows")
        return self

    # ---------- name ordering ----------
    def all_names(self) -> Dict[Hashable, int]:
        """
        Rank every variable by its first appearance, scanning rows in table
        order and each row's discovery order.
        """
        if self._all_names is None:
            ranks: Dict[Hashable, int] = {}
            for row in self.rows:
                for name in row.order:
                    if name not in ranks:
                        ranks[name] = len(ranks)
            self._all_names = ranks
        return self._all_names

    def sort_names(self, names: Iterable[Hashable]) -> List[Hashable]:
        ranks = self.all_names()
        return sorted(names, key=lambda n: ranks[n])

    def each_input(self, inputs: Dict[Hashable, bool]) -> Iterator[Tuple[Hashable, bool]]:
        """Yield ``(name, value)`` pairs of `inputs` in global rank order."""
        for name in self.sort_names(inputs):
            yield name, inputs[name]

    # ---------- formulas ----------
    def formula(self, *, unicode_ops: bool = False) -> str:
        """Minimal formula obtained by Quine–McCluskey."""
        return minimal_formula(self, unicode_ops=unicode_ops)

    def dnf(self, *, unicode_ops: bool = False) -> str:
        """Formula in disjunctive normal form."""
        return dnf(self, unicode_ops=unicode_ops)

    def cnf(self, *, unicode_ops: bool = False) -> str:
        """Formula in conjunctive normal form."""
        return cnf(self, unicode_ops=unicode_ops)

    # ---------- export ----------
    def to_frame(self) -> pd.DataFrame:
        """
        One column per variable (rank order, nullable ``boolean`` dtype with
        ``<NA>`` for don't-care) plus the result column.

        Raises ``ValueError`` when a variable shares its name with
        ``config.result_column``.

        Examples
        --------
        >>> t = TruthTable(lambda v: v[0] and v[1])
        >>> t.to_frame()
            v[0]  v[1]  result
        0  False  <NA>   False
        1   True  False  False
        2   True   True   True
        """
        names = self.sort_names(self.all_names())
        if self.config.result_column in self.all_names():
            raise ValueError(
                f"variable {self.config.result_column!r} clashes with the result column; "
                "set TableConfig(result_column=...) to another name"
            )
        data = {
            name: pd.array([r.inputs.get(name) for r in self.rows], dtype="boolean")
            for name in names
        }
        df = pd.DataFrame(data, index=pd.RangeIndex(len(self.rows)))
        df[self.config.result_column] = [r.output for r in self.rows]
        return df

    # ---------- container protocol ----------
    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __str__(self) -> str:
        return format_table(self)

    def __repr__(self) -> str:
        return format_inspect(self)

    def _repr_pretty_(self, p, cycle):
        # IPython pretty-printer hook
        name = type(self).__name__
        if cycle:
            p.text(f"<{name}: ...>")
            return
        with p.group(1, f"<{name}:", ">"):
            for line in format_pretty_lines(self):
                p.breakable()
                p.text(line)
