"""
Formula derivation and rendering for truth tables.

    - Normal forms       (normal: dnf, cnf)
    - Minimal formulas   (minimal: dont_care_table, qm, minimal_formula)
    - Text rendering     (pretty: format_table, format_inspect)
"""

from . import normal
from . import minimal
from . import pretty

from .normal import *
from .minimal import *
from .pretty import *
