# src/truthtable/forms/minimal.py

"""
Minimal sum-of-products formulas via Quine–McCluskey.

The truth table is first flattened into a *don't-care table*: one positional
vector per row over the globally ranked variable names, with ``0``/``1`` for
variables the row fixes and :data:`DONT_CARE` for variables its path never
read. For narrow tables :func:`qm` expands the rows into minterms and hands
them to ``sympy.logic.boolalg.SOPform``. Wider tables stay at row level:
the primes are built from the off rows by multiplying out one "differ from
this row" clause per row, and the cover is chosen among them (essential
primes, then greedy, then redundancy removal). Either way the result comes
back as positional prime-implicant vectors.

Examples
--------
>>> from truthtable import TruthTable
>>> from truthtable.forms.minimal import dont_care_table, qm, minimal_formula
>>> t = TruthTable(lambda v: v[0] and v[1])
>>> dont_care_table(t)
{(0, 'x'): 0, (1, 0): 0, (1, 1): 1}
>>> qm(dont_care_table(t))
[(True, True)]
>>> minimal_formula(t)
'v[0] & v[1]'
"""

from __future__ import annotations
from itertools import product
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Mapping, Sequence, Set, Tuple, Union

from sympy import And, Not, Or, Symbol, false, true
from sympy.logic.boolalg import SOPform

from .normal import _require_rows, constant, literal, op_symbols

if TYPE_CHECKING:
    from ..table import TruthTable

__all__ = [
    "DONT_CARE",
    "dont_care_table",
    "EXPAND_LIMIT",
    "qm",
    "minimal_formula",
]

DONT_CARE = "x"

# widest hypercube handed to SOPform as explicit minterms
EXPAND_LIMIT = 64

Cell = Union[int, bool, str]


def _expand(vec: Sequence[Cell]) -> Iterator[Tuple[int, ...]]:
    """Every total 0/1 assignment covered by a positional vector."""
    slots = [(0, 1) if v == DONT_CARE else (int(v),) for v in vec]
    return product(*slots)


def dont_care_table(table: "TruthTable") -> Dict[Tuple[Cell, ...], int]:
    """
    Flatten `table` into ``{positional vector: 0/1}``.

    Positions follow :meth:`TruthTable.all_names` ranks; a variable the row's
    path never read is :data:`DONT_CARE`.
    """
    ranks = table.all_names()
    tbl: Dict[Tuple[Cell, ...], int] = {}
    for row in table.rows:
        vec: List[Cell] = [DONT_CARE] * len(ranks)
        for name, value in row.inputs.items():
            vec[ranks[name]] = 1 if value else 0
        tbl[tuple(vec)] = 1 if row.output else 0
    return tbl


def _term_key(term: Tuple[Cell, ...]) -> Tuple[int, ...]:
    return tuple(2 if v == DONT_CARE else int(v) for v in term)


def _to_terms(expr, symbols: Sequence[Symbol]) -> List[Tuple[Cell, ...]]:
    """Convert a sympy sum-of-products into positional vectors."""
    n = len(symbols)
    if expr == false:
        return []
    if expr == true:
        return [(DONT_CARE,) * n]
    index = {s: i for i, s in enumerate(symbols)}
    products = expr.args if isinstance(expr, Or) else (expr,)
    terms: List[Tuple[Cell, ...]] = []
    for prod in products:
        lits = prod.args if isinstance(prod, And) else (prod,)
        vec: List[Cell] = [DONT_CARE] * n
        for lit in lits:
            if isinstance(lit, Not):
                vec[index[lit.args[0]]] = False
            else:
                vec[index[lit]] = True
        terms.append(tuple(vec))
    return sorted(terms, key=_term_key)


def _contains(outer: Tuple[int, ...], inner: Tuple[int, ...]) -> bool:
    """True when every assignment of cube `inner` lies in cube `outer`."""
    return all(o == 2 or o == i for o, i in zip(outer, inner))


def _absorb(cubes: Iterable[Tuple[int, ...]]) -> List[Tuple[int, ...]]:
    """Drop duplicates and every cube contained in another one."""
    kept: List[Tuple[int, ...]] = []
    for cube in sorted(set(cubes), key=lambda c: (-c.count(2), c)):
        if not any(_contains(k, cube) for k in kept):
            kept.append(cube)
    return kept


def _prime_cubes(off: Sequence[Tuple[int, ...]], n: int) -> List[Tuple[int, ...]]:
    """
    Prime implicants of the complement of the `off` cubes.

    Each off cube contributes the clause "differ from it in some fixed
    position"; multiplying the clauses out with absorption after every step
    leaves exactly the prime implicants. Assignments covered by no cube end
    up inside the primes, i.e. they act as don't-cares.
    """
    primes: List[Tuple[int, ...]] = [(2,) * n]
    for cube in off:
        grown: List[Tuple[int, ...]] = []
        for p in primes:
            for i, b in enumerate(cube):
                if b == 2 or p[i] == b:
                    continue
                grown.append(p if p[i] != 2 else p[:i] + (1 - b,) + p[i + 1:])
        primes = _absorb(grown)
        if not primes:
            break
    return primes


def _select_cover(
    primes: Sequence[Tuple[int, ...]],
    on: Sequence[Tuple[int, ...]],
) -> List[Tuple[int, ...]]:
    """
    Pick primes until every on cube sits inside a chosen one.

    Essential primes first, then greedily the prime covering most of what is
    left (ties go to the one with more don't-cares), then drop any chosen
    prime whose on cubes all have another chosen holder.
    """
    covers = {p: {j for j, c in enumerate(on) if _contains(p, c)} for p in primes}
    chosen: List[Tuple[int, ...]] = []
    for j, cube in enumerate(on):
        holders = [p for p in primes if j in covers[p]]
        if not holders:
            raise ValueError(f"on-set row {cube} overlaps an off-set row")
        if len(holders) == 1 and holders[0] not in chosen:
            chosen.append(holders[0])

    uncovered = set(range(len(on)))
    for p in chosen:
        uncovered -= covers[p]
    while uncovered:
        best = max(primes, key=lambda p: (len(covers[p] & uncovered), p.count(2)))
        chosen.append(best)
        uncovered -= covers[best]

    for p in sorted(chosen, key=lambda c: (c.count(2), c)):
        rest = [q for q in chosen if q != p]
        if all(any(j in covers[q] for q in rest) for j in covers[p]):
            chosen = rest
    return chosen


def qm(
    tbl: Mapping[Tuple[Cell, ...], int],
    *,
    expand_limit: int = EXPAND_LIMIT,
) -> List[Tuple[Cell, ...]]:
    """
    Prime-implicant cover of the rows of `tbl` whose value is 1.

    Parameters
    ----------
    tbl : mapping
        Fixed-length vectors over ``{0, 1, DONT_CARE}`` mapped to ``0``/``1``.
        Total assignments covered by no key are treated as don't-cares.
    expand_limit : int, optional
        Largest hypercube (``2 ** width``) expanded into minterms for sympy's
        exact ``SOPform``. Wider tables are minimized on the row cubes
        directly, without enumerating assignments.

    Returns
    -------
    list of tuple
        Vectors over ``{False, True, DONT_CARE}``, sorted position by position
        with ``False < True < DONT_CARE``. ``[]`` when no row is 1.

    Raises
    ------
    ValueError
        If a row valued 1 and a row valued 0 share an assignment.
    """
    if not tbl:
        return []
    n = len(next(iter(tbl)))
    if not any(tbl.values()):
        return []
    if 2 ** n <= expand_limit:
        return _qm_exact(tbl, n)

    on = [_term_key(vec) for vec, out in tbl.items() if out]
    off = [_term_key(vec) for vec, out in tbl.items() if not out]
    cover = _select_cover(_prime_cubes(off, n), on)
    terms = [tuple(DONT_CARE if v == 2 else bool(v) for v in cube) for cube in cover]
    return sorted(terms, key=_term_key)


def _qm_exact(tbl: Mapping[Tuple[Cell, ...], int], n: int) -> List[Tuple[Cell, ...]]:
    ones: Set[Tuple[int, ...]] = set()
    zeros: Set[Tuple[int, ...]] = set()
    for vec, out in tbl.items():
        (ones if out else zeros).update(_expand(vec))
    if ones & zeros:
        raise ValueError(f"assignment {min(ones & zeros)} overlaps an on-set and an off-set row")

    dontcares: List[List[int]] = []
    if len(ones) + len(zeros) < 2 ** n:
        dontcares = [list(bits) for bits in product((0, 1), repeat=n)
                     if bits not in ones and bits not in zeros]

    symbols = [Symbol(f"x{i}") for i in range(n)]
    expr = SOPform(symbols, [list(bits) for bits in sorted(ones)], dontcares)
    return _to_terms(expr, symbols)


def minimal_formula(table: "TruthTable", *, unicode_ops: bool = False) -> str:
    """
    Minimal sum-of-products formula for `table`.

    A single term is rendered bare; with several terms, those containing a
    conjunction are parenthesized. A term with no fixed position is
    ``"true"``; an empty cover is ``"false"``.
    """
    _require_rows(table)
    for row in table.rows:
        if not row.inputs:
            return constant(row.output)

    names = table.sort_names(table.all_names())
    _, conj, disj = op_symbols(unicode_ops)
    rendered: List[Tuple[str, int]] = []
    for term in qm(dont_care_table(table)):
        lits = [literal(names[i], v, unicode_ops=unicode_ops)
                for i, v in enumerate(term) if v != DONT_CARE]
        rendered.append((conj.join(lits) if lits else "true", len(lits)))

    if not rendered:
        return "false"
    if len(rendered) == 1:
        return rendered[0][0]
    return disj.join(f"({text})" if n > 1 else text for text, n in rendered)
