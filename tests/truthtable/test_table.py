import pandas as pd
import pytest

from truthtable import Row, TableConfig, TruthTable
from truthtable.forms.pretty import format_inspect, format_table


@pytest.fixture
def t_and():
    return TruthTable(lambda v: v[0] & v[1])

@pytest.fixture
def t_and_short():
    return TruthTable(lambda v: v[0] and v[1])


# -----------------------
# name ordering
# -----------------------

def test_all_names_rank_by_first_appearance():
    t = TruthTable(lambda v: v[1] and v[0])
    assert t.all_names() == {"v[1]": 0, "v[0]": 1}
    assert t.sort_names(["v[0]", "v[1]"]) == ["v[1]", "v[0]"]

def test_each_input_uses_rank_not_insertion_order():
    t = TruthTable(lambda v: v[1] and v[0])
    pairs = list(t.each_input({"v[0]": True, "v[1]": False}))
    assert pairs == [("v[1]", False), ("v[0]", True)]
    assert t.dnf() == "v[1] & v[0]"

def test_all_names_spans_rows():
    # v[2] first appears on a later row
    t = TruthTable(lambda v: v[0] and (v[1] or v[2]))
    assert list(t.all_names()) == ["v[0]", "v[1]", "v[2]"]

def test_constant_table_has_no_names():
    t = TruthTable(lambda v: True)
    assert t.all_names() == {}
    assert len(t) == 1


# -----------------------
# resolve
# -----------------------

def test_resolve_drops_conflicting_rows(t_and):
    t_and.resolve("v[0]", True)
    assert len(t_and) == 2
    assert all(r.inputs["v[0]"] is True for r in t_and)

def test_resolve_is_idempotent(t_and):
    once = list(t_and.resolve("v[1]", False).rows)
    twice = list(t_and.resolve("v[1]", False).rows)
    assert once == twice

def test_resolve_unknown_name_is_noop(t_and):
    before = list(t_and.rows)
    t_and.resolve("nope", True)
    assert t_and.rows == before

def test_resolve_keeps_dont_care_rows(t_and_short):
    t_and_short.resolve("v[1]", True)
    assert [r.inputs for r in t_and_short] == [
        {"v[0]": False},
        {"v[0]": True, "v[1]": True},
    ]

def test_resolve_mutates_in_place(t_and):
    rows = t_and.rows
    assert t_and.resolve("v[0]", False) is t_and
    assert t_and.rows is rows

def test_resolve_coerces_value(t_and):
    t_and.resolve("v[0]", 1)
    assert len(t_and) == 2

def test_formulas_after_resolve(t_and_short):
    t_and_short.resolve("v[1]", True)
    # the removed region becomes a don't-care for the minimizer
    assert t_and_short.formula() == "v[0]"
    assert t_and_short.dnf() == "v[0] & v[1]"
    assert t_and_short.cnf() == "v[0]"

@pytest.mark.parametrize("name,value", [("v[0]", True), ("v[1]", False), ("v[2]", True)])
def test_round_trip_after_resolve(name, value, sample_predicates, check_round_trip):
    pred = sample_predicates["mixed"]
    t = TruthTable(pred).resolve(name, value)
    check_round_trip(t, pred)
    assert all(r.inputs.get(name, value) == value for r in t)

def test_resolve_verbose(capsys):
    t = TruthTable(lambda v: v[0] & v[1], config=TableConfig(verbose=True))
    capsys.readouterr()
    t.resolve("v[0]", True)
    assert "resolve v[0]=True: removed 2 rows" in capsys.readouterr().out


# -----------------------
# from_rows / errors
# -----------------------

def test_from_rows_derives_formulas():
    rows = [
        Row({"p": False}, True, ("p",)),
        Row({"p": True, "q": False}, False, ("p", "q")),
        Row({"p": True, "q": True}, True, ("p", "q")),
    ]
    t = TruthTable.from_rows(rows)
    assert t.predicate is None
    assert t.dnf() == "!p | p & q"
    assert t.cnf() == "(!p | q)"
    assert t.formula() == "!p | q"

def test_empty_table_is_an_internal_error():
    t = TruthTable.from_rows([])
    for derive in (t.formula, t.dnf, t.cnf):
        with pytest.raises(RuntimeError):
            derive()

def test_predicate_errors_propagate_from_constructor():
    with pytest.raises(KeyError):
        TruthTable(lambda v: {}["missing"] if v[0] else True)


# -----------------------
# export / protocols
# -----------------------

def test_to_frame_marks_dont_care_as_na(t_and_short):
    df = t_and_short.to_frame()
    assert list(df.columns) == ["v[0]", "v[1]", "result"]
    assert str(df["v[0]"].dtype) == "boolean"
    assert df["v[1]"].isna().tolist() == [True, False, False]
    assert df["v[0]"].tolist() == [False, True, True]
    assert df["result"].tolist() == [False, False, True]

def test_to_frame_custom_result_column():
    t = TruthTable(lambda v: v.a, config=TableConfig(result_column="out"))
    df = t.to_frame()
    assert list(df.columns) == ["a", "out"]
    assert len(df) == 2

def test_to_frame_constant():
    df = TruthTable(lambda v: False).to_frame()
    assert list(df.columns) == ["result"]
    assert df["result"].tolist() == [False]

def test_len_iter_str_repr(t_and):
    assert len(t_and) == 4
    assert [r.output for r in t_and] == [False, False, False, True]
    assert str(t_and) == format_table(t_and)
    assert repr(t_and) == format_inspect(t_and)

def test_repr_pretty_hook(t_and):
    class _Printer:
        def __init__(self):
            self.out = []
        def group(self, indent, open, close):
            printer = self
            class _Ctx:
                def __enter__(self):
                    printer.out.append(open)
                def __exit__(self, *exc):
                    printer.out.append(close)
            return _Ctx()
        def breakable(self):
            self.out.append("\n")
        def text(self, s):
            self.out.append(s)

    p = _Printer()
    t_and._repr_pretty_(p, False)
    assert "".join(p.out) == (
        "<TruthTable:\n!v[0]&!v[1]=>false\n!v[0]& v[1]=>false"
        "\n v[0]&!v[1]=>false\n v[0]& v[1]=>true>"
    )

def test_to_frame_rejects_variable_named_like_result_column():
    t = TruthTable(lambda v: not v.result)
    with pytest.raises(ValueError, match="result"):
        t.to_frame()

def test_to_frame_keeps_variable_when_result_column_renamed():
    t = TruthTable(lambda v: not v.result, config=TableConfig(result_column="out"))
    df = t.to_frame()
    assert list(df.columns) == ["result", "out"]
    assert df["result"].tolist() == [False, True]
    assert df["out"].tolist() == [True, False]
