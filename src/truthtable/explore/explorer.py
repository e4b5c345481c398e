# src/truthtable/explore/explorer.py

"""
Path explorer: turn a black-box predicate into truth-table rows.

The predicate is re-run from the start once per scheduled plan. Each run
reads variables through an :class:`~truthtable.explore.inputs.Inputs` view;
first reads default to ``False`` and schedule the ``True`` sibling, so the
collected rows cover every total assignment of the observed variables
exactly once. Variables a run never reads are don't-cares in its row.

Examples
--------
>>> from truthtable.explore.explorer import explore
>>> rows = explore(lambda v: v[0] and v[1])
>>> [(r.inputs, r.output) for r in rows]  # doctest: +NORMALIZE_WHITESPACE
[({'v[0]': False}, False),
 ({'v[0]': True, 'v[1]': False}, False),
 ({'v[0]': True, 'v[1]': True}, True)]
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, List, Optional, Tuple

from ..config import TableConfig
from ..utils.events import log_event
from .inputs import Inputs
from .session import ExplorationSession

__all__ = [
    "Row",
    "explore",
]


@dataclass(frozen=True, slots=True)
class Row:
    """
    One explored path.

    Attributes
    ----------
    inputs : dict
        Partial assignment the path depended on (name -> bool).
    output : bool
        Coerced predicate result on this path.
    order : tuple
        Names in first-read order for this path.

    Notes
    -----
    Rows hash by their sorted ``inputs`` items, so equal rows hash alike even
    though ``inputs`` is a plain dict. Do not mutate ``inputs`` of a row that
    lives in a set or dict key.
    """
    inputs: Dict[Hashable, bool]
    output: bool
    order: Tuple[Hashable, ...]

    def __hash__(self) -> int:
        return hash((tuple(sorted(self.inputs.items())), self.output, self.order))

    def matches(self, assignment: Dict[Hashable, bool]) -> bool:
        """True when every variable fixed by this row agrees with `assignment`."""
        return all(assignment.get(k) == v for k, v in self.inputs.items())


def explore(
    predicate: Callable[[Inputs], Any],
    *,
    config: Optional[TableConfig] = None,
) -> List[Row]:
    """
    Enumerate the predicate's decision paths.

    Parameters
    ----------
    predicate : callable
        Pure function of an :class:`Inputs` view. Its result is coerced with
        ``bool``. Exceptions raised by the predicate propagate unchanged.
    config : TableConfig, optional
        ``max_paths`` caps the number of executions, ``verbose`` prints
        progress events.

    Returns
    -------
    list of Row
        Rows in first-exploration order.
    """
    cfg = config or TableConfig()
    session = ExplorationSession()
    inputs = Inputs(session, prefix=cfg.index_prefix)
    rows: List[Row] = []

    if cfg.verbose:
        log_event(f"exploring {getattr(predicate, '__name__', repr(predicate))}")

    while True:
        if cfg.max_paths is not None and len(rows) >= cfg.max_paths:
            raise RuntimeError(
                f"exploration exceeded max_paths={cfg.max_paths}; "
                "is the predicate pure?"
            )
        result = bool(predicate(inputs))
        row = Row(dict(session.plan), result, tuple(session.order))
        rows.append(row)
        if cfg.verbose:
            log_event(f"path {len(rows)}: {row.inputs} => {row.output}")
        if not session.next_plan():
            break

    if cfg.verbose:
        log_event(f"done: {len(rows)} rows, {len(session.checked)} branches checked")
    return rows
