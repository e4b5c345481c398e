import os, sys
from itertools import product

import pytest

# Ensure `src/` is importable
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)


class FixedInputs:
    """Plain accessor answering reads from a total assignment."""

    def __init__(self, assignment, prefix="v"):
        self._assignment = assignment
        self._prefix = prefix

    def __getitem__(self, key):
        return self._assignment[f"{self._prefix}[{key}]"]

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        return self._assignment[name]

    def __call__(self, name):
        return self._assignment[name]


def _total_assignments(names):
    names = list(names)
    for bits in product((False, True), repeat=len(names)):
        yield dict(zip(names, bits))


@pytest.fixture
def evaluate():
    """Run a predicate against a fixed total assignment."""
    def _run(pred, assignment, prefix="v"):
        return bool(pred(FixedInputs(assignment, prefix)))
    return _run


@pytest.fixture
def total_assignments():
    return _total_assignments


@pytest.fixture
def check_partition():
    """Assert every total assignment of the observed names matches exactly one row."""
    def _check(table):
        names = list(table.all_names())
        for assignment in _total_assignments(names):
            hits = [r for r in table.rows if r.matches(assignment)]
            assert len(hits) == 1, (assignment, hits)
    return _check


@pytest.fixture
def check_round_trip(evaluate):
    """Assert each row reproduces its output for every fill of its don't-cares."""
    def _check(table, pred, prefix="v"):
        names = list(table.all_names())
        for row in table.rows:
            free = [n for n in names if n not in row.inputs]
            for fill in _total_assignments(free):
                assignment = {**fill, **row.inputs}
                assert evaluate(pred, assignment, prefix) == row.output, (row, fill)
    return _check


@pytest.fixture
def sample_predicates():
    # label -> predicate; shared by partition, round-trip and equivalence tests
    return {
        "and": lambda v: v[0] & v[1],
        "and_short": lambda v: v[0] and v[1],
        "or": lambda v: v[0] | v[1],
        "or_short": lambda v: v[0] or v[1],
        "xor": lambda v: v[0] ^ v[1],
        "eq": lambda v: v[0] == v[1],
        "ternary": lambda v: (not v[1]) if v[0] else v[1],
        "reorder": lambda v: (v[0] and v[1]) if v[2] else (v[1] and v[0]),
        "majority": lambda v: (v[0] and v[1]) or (v[1] and v[2]) or (v[2] and v[0]),
        "mixed": lambda v: v[0] == v[1] and v[1] != v[2] or v[3] == v[1],
        "nested": lambda v: v[3] if (v[0] or v[1]) and (v[1] or v[2]) else (v[2] and v[0]),
        "at_most_three": lambda v: sum([v[0], v[1], v[2], v[3]]) <= 3,
        "any5": lambda v: any(v[i] for i in range(5)),
        "indirect": lambda v: v[1 + v[0]] and v[3],
        "named": lambda v: v.carry and (v.a != v.b),
    }
