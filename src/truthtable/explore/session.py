# src/truthtable/explore/session.py

"""
Per-run exploration state for black-box boolean predicates.

An :class:`ExplorationSession` mediates every variable read made by one
predicate execution. On the first read of a variable within an execution it
answers ``False`` and, unless that branch was already scheduled, pushes the
``True`` sibling onto the front of a work list. The path explorer re-runs the
predicate once per scheduled plan until the work list is empty.

Examples
--------
>>> from truthtable.explore.session import ExplorationSession
>>> s = ExplorationSession()
>>> s.observe("a"), s.observe("b"), s.observe("a")
(False, False, False)
>>> s.plan, s.order
({'a': False, 'b': False}, ['a', 'b'])
>>> s.next_plan()
True
>>> s.plan
{'a': False, 'b': True}
"""

from __future__ import annotations
from collections import deque
from typing import Deque, Dict, Hashable, List, Mapping, Set, Tuple

__all__ = [
    "ExplorationSession",
    "canonical_key",
]


def canonical_key(plan: Mapping[Hashable, bool]) -> str:
    """
    Deterministic set-membership key for a partial assignment.

    Entries are sorted by name and rendered with ``repr`` as a tuple of
    ``(name, value)`` pairs, so names containing ``=`` or spaces cannot collide.
    Only used for deduplication, never for display.

    Examples
    --------
    >>> canonical_key({"b": True, "a": False})
    "(('a', False), ('b', True))"
    >>> canonical_key({})
    '()'
    """
    return repr(tuple(sorted(plan.items())))


class ExplorationSession:
    """
    Mutable state owned by exactly one exploration run.

    Attributes
    ----------
    plan : dict
        Partial assignment of the current execution (name -> bool).
    order : list
        Names in the order they were first read by the current execution.
    checked : set of str
        Canonical keys of every branch already scheduled. Persists across
        executions.
    pending : deque of (dict, list)
        Plans not yet executed, front first. Persists across executions.
    """

    def __init__(self):
        self.plan: Dict[Hashable, bool] = {}
        self.order: List[Hashable] = []
        self.checked: Set[str] = set()
        self.pending: Deque[Tuple[Dict[Hashable, bool], List[Hashable]]] = deque()

    def observe(self, name: Hashable) -> bool:
        """
        Return the value of `name` on the current path.

        Re-reads within one execution return the stored value. A first read
        extends the plan with ``name -> False``; when that extension has not
        been scheduled before, the ``name -> True`` sibling is queued at the
        front of :attr:`pending` and both extensions are marked checked.
        """
        if name in self.plan:
            return self.plan[name]

        fplan = dict(self.plan)
        fplan[name] = False
        fkey = canonical_key(fplan)
        self.order = self.order + [name]
        self.plan = fplan

        if fkey not in self.checked:
            tplan = dict(fplan)
            tplan[name] = True
            # same variable sequence, only the last value differs
            torder = list(self.order)
            self.pending.appendleft((tplan, torder))
            self.checked.add(canonical_key(tplan))
            self.checked.add(fkey)
        return False

    def next_plan(self) -> bool:
        """
        Install the front of :attr:`pending` as the current plan.

        Returns ``False`` (and leaves the current plan untouched) when
        nothing is pending.
        """
        if not self.pending:
            return False
        self.plan, self.order = self.pending.popleft()
        return True

    def __repr__(self) -> str:
        return (
            f"ExplorationSession(plan={self.plan!r}, "
            f"pending={len(self.pending)}, checked={len(self.checked)})"
        )
