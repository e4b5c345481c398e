# src/truthtable/explore/inputs.py

"""
Predicate-facing accessor for unnamed boolean inputs.

A predicate receives an :class:`Inputs` object and reads variables from it in
any of three styles, all routed through the owning
:class:`~truthtable.explore.session.ExplorationSession`:

- ``v[0]``        -> variable ``"v[0]"`` (prefix configurable)
- ``v.carry``     -> variable ``"carry"``
- ``v("carry")``  -> variable ``"carry"``

Examples
--------
>>> from truthtable.explore.session import ExplorationSession
>>> from truthtable.explore.inputs import Inputs
>>> s = ExplorationSession()
>>> v = Inputs(s)
>>> v[0] or v.ready
False
>>> s.order
['v[0]', 'ready']
"""

from __future__ import annotations
from typing import Any

from .session import ExplorationSession

__all__ = [
    "Inputs",
]


class Inputs:
    """Index/attribute view over an exploration session's variables."""

    __slots__ = ("_session", "_prefix")

    def __init__(self, session: ExplorationSession, prefix: str = "v"):
        object.__setattr__(self, "_session", session)
        object.__setattr__(self, "_prefix", prefix)

    def __getitem__(self, key: Any) -> bool:
        return self._session.observe(f"{self._prefix}[{key}]")

    def __getattr__(self, name: str) -> bool:
        # copy/pickle/IPython probe dunders on instances
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        return self._session.observe(name)

    def __call__(self, name: str) -> bool:
        return self._session.observe(name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Inputs is read-only")

    def __repr__(self) -> str:
        return f"<Inputs prefix={self._prefix!r}>"
