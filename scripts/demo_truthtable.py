# scripts/demo_truthtable.py
"""
Print truth tables and formulas for a handful of sample predicates.

Run:
    python scripts/demo_truthtable.py
"""

from truthtable import TableConfig, TruthTable

SAMPLES = [
    ("v[0] & v[1]",             lambda v: v[0] & v[1]),
    ("v[0] and v[1]",           lambda v: v[0] and v[1]),
    ("v[0] | v[1]",             lambda v: v[0] | v[1]),
    ("v[0] or v[1]",            lambda v: v[0] or v[1]),
    ("v[0] ^ (not v[1])",       lambda v: v[0] ^ (not v[1])),
    ("v[0] == v[1]",            lambda v: v[0] == v[1]),
    ("(not v[1]) if v[0] else v[1]", lambda v: (not v[1]) if v[0] else v[1]),
    ("v[0] == v[1] and v[1] != v[2] or v[3] == v[1]",
     lambda v: v[0] == v[1] and v[1] != v[2] or v[3] == v[1]),
]


def main():
    for label, pred in SAMPLES:
        t = TruthTable(pred)
        print(f"\n=== {label} ===")
        print(t)
        print(f"  formula : {t.formula()}")
        print(f"  dnf     : {t.dnf()}")
        print(f"  cnf     : {t.cnf()}")

    print("\n=== verbose exploration: v.a and (v.b or v.c) ===")
    t = TruthTable(lambda v: v.a and (v.b or v.c), config=TableConfig(verbose=True))
    t.resolve("a", True)
    print(t.to_frame())


if __name__ == "__main__":
    main()
