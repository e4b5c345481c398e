# src/truthtable/config.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

"""
Configuration for truth-table exploration and tabular export.

The primary entry point is :class:`TableConfig`, a small dataclass with
sane defaults. Treat it as an immutable snapshot passed into
:class:`~truthtable.table.TruthTable` or :func:`~truthtable.explore.explore`.

Examples
--------
>>> from truthtable.config import TableConfig
>>> cfg = TableConfig(max_paths=64, verbose=True)
>>> cfg.max_paths
64
>>> cfg.result_column
'result'
"""

__all__ = [
    "TableConfig",
]


@dataclass
class TableConfig:
    """
    Knobs used by the path explorer and the DataFrame export.

    Parameters
    ----------
    max_paths : int or None, default=None
        Upper bound on the number of predicate executions during exploration.
        ``None`` means unbounded. A predicate that keeps discovering fresh
        variables on every call never terminates; set a cap to turn that into
        a ``RuntimeError`` instead.
    verbose : bool, default=False
        If ``True``, print exploration and narrowing events via
        :func:`~truthtable.utils.events.log_event`.
    result_column : str, default="result"
        Name of the output column in :meth:`TruthTable.to_frame`.
    index_prefix : str, default="v"
        Prefix for index-style variables: ``v[0]`` is named ``"v[0]"``.

    Examples
    --------
    >>> TableConfig(index_prefix="x")  # doctest: +ELLIPSIS
    TableConfig(max_paths=None, verbose=False, result_column='result', index_prefix='x')
    """

    max_paths: Optional[int] = None
    verbose: bool = False
    result_column: str = "result"
    index_prefix: str = "v"

    def __post_init__(self):
        if self.max_paths is not None and self.max_paths < 1:
            raise ValueError("max_paths must be ≥ 1 (or None)")
        if not self.result_column:
            raise ValueError("result_column must be a non-empty string")
        if not self.index_prefix:
            raise ValueError("index_prefix must be a non-empty string")
