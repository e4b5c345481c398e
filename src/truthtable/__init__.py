"""
Truth tables and formulas from ordinary boolean Python code.

>>> from truthtable import TruthTable
>>> t = TruthTable(lambda v: v[0] and (v[1] or v[2]))
>>> t.formula()
'(v[0] & v[1]) | (v[0] & v[2])'
"""

from .config import TableConfig
from .explore import ExplorationSession, Inputs, Row, explore
from .table import TruthTable
from .forms import (
    DONT_CARE,
    cnf,
    dnf,
    dont_care_table,
    format_inspect,
    format_table,
    minimal_formula,
    qm,
)

__all__ = [
    "TableConfig",
    "ExplorationSession",
    "Inputs",
    "Row",
    "explore",
    "TruthTable",
    "DONT_CARE",
    "cnf",
    "dnf",
    "dont_care_table",
    "format_inspect",
    "format_table",
    "minimal_formula",
    "qm",
]

__version__ = "0.1.0"
