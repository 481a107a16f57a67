# tests/test_prakriya.py
"""
The derivation state, the optional-rule ledger and PrakriyaStack.
"""

from __future__ import annotations

from prakriya import filters as f
from prakriya import operators as op
from prakriya.core import Prakriya, PrakriyaStack, RuleDecision, RuleOption, Step
from prakriya.sounds import SoundTable
from prakriya.tags import Tag
from prakriya.term import Term


def _append(sub: str):
    def run(p: Prakriya) -> None:
        p.set(0, lambda t: t.set_text(t.text + sub))

    return run


def test_finders(make_prakriya) -> None:
    dhatu = Term.make_dhatu("BU", gana=1)
    sap = Term.make_upadesha("a")
    sap.add_tag(Tag.Pratyaya)
    tin = Term.make_upadesha("ti")
    tin.add_tags([Tag.Pratyaya, Tag.Tin])
    p = make_prakriya(dhatu, sap, tin)

    assert p.find_first(Tag.Pratyaya) == 1
    assert p.find_last(Tag.Pratyaya) == 2
    assert p.find_first(Tag.Abhyasa) is None
    assert p.find_next_where(0, f.tag(Tag.Tin)) == 2
    assert p.find_prev_where(2, f.tag(Tag.Dhatu)) == 0
    assert p.find_prev_where(0, f.tag(Tag.Dhatu)) is None
    assert p.has(0, f.is_eka_ac)
    assert not p.has(7, f.is_eka_ac)
    assert p.get(7) is None
    assert p.view(1).text() == "a"
    assert p.view(3) is None


def test_rule_records_a_step(make_prakriya) -> None:
    p = make_prakriya(Term.make_dhatu("BU", gana=1))
    applied = p.rule("7.3.84", lambda p: p.has(0, f.antya("U")), op.t(0, op.antya("o")))
    assert applied
    assert p.text() == "Bo"
    assert p.history == [Step(rule="7.3.84", result="Bo")]

    assert not p.rule("7.3.84", lambda p: p.has(0, f.antya("U")), op.t(0, op.antya("o")))
    assert len(p.history) == 1


def test_term_rule_on_missing_term(make_prakriya) -> None:
    p = make_prakriya(Term.make_text("a"))
    assert not p.term_rule("x", 4, lambda t: True, op.lopa)
    assert not p.op_term("x", 4, op.lopa)
    assert p.history == []


def test_history_can_be_switched_off(make_prakriya) -> None:
    p = make_prakriya(Term.make_text("a"), log_steps=False)
    p.op("x", _append("b"))
    assert p.text() == "ab"
    assert p.history == []


def test_shared_sound_table() -> None:
    assert Prakriya().sounds is SoundTable.shared()


def test_sound_table_can_be_substituted() -> None:
    table = SoundTable()
    p = Prakriya(sounds=table)
    assert p.sounds is table
    assert p.sounds is not SoundTable.shared()


def test_optional_rule_is_allowed_by_default(make_prakriya) -> None:
    p = make_prakriya(Term.make_text("x"))
    assert p.optional("A", lambda p: True, _append("a"))
    assert p.text() == "xa"
    assert p.rule_decisions == [("A", RuleDecision.ACCEPTED)]


def test_ignored_rule_is_declined(make_prakriya) -> None:
    p = make_prakriya(Term.make_text("x"), options_config={"A": RuleOption.IGNORE})
    assert not p.optional("A", lambda p: True, _append("a"))
    assert p.text() == "x"
    assert p.history == []
    assert p.rule_decisions == [("A", RuleDecision.DECLINED)]


def test_allow_and_ignore_diverge() -> None:
    def derive(p: Prakriya) -> None:
        p.push(Term.make_text("x"))
        p.optional("A", lambda p: True, _append("a"))

    allowed = Prakriya({"A": RuleOption.ALLOW})
    ignored = Prakriya({"A": RuleOption.IGNORE})
    derive(allowed)
    derive(ignored)
    assert allowed.text() != ignored.text()


def test_filter_failure_leaves_no_ledger_entry(make_prakriya) -> None:
    p = make_prakriya(Term.make_text("x"))
    assert not p.optional("A", lambda p: False, _append("a"))
    assert p.rule_decisions == []


def test_ledger_has_one_entry_per_optional_rule(make_prakriya) -> None:
    p = make_prakriya(Term.make_text("x"), options_config={"B": RuleOption.IGNORE})
    p.optional("A", lambda p: True, _append("a"))
    p.optional("B", lambda p: True, _append("b"))
    p.optional("C", lambda p: True, _append("c"))
    assert p.rule_decisions == [
        ("A", RuleDecision.ACCEPTED),
        ("B", RuleDecision.DECLINED),
        ("C", RuleDecision.ACCEPTED),
    ]
    assert [step.rule for step in p.history] == ["A", "C"]


def test_derivation_tags(make_prakriya) -> None:
    p = make_prakriya()
    p.add_tags([Tag.Kartari, Tag.Prathama])
    assert p.all([Tag.Kartari, Tag.Prathama])
    assert p.any([Tag.Karmani, Tag.Prathama])
    p.remove_tag(Tag.Kartari)
    assert not p.has_tag(Tag.Kartari)


# ---------------------------------------------------------------------------
# PrakriyaStack
# ---------------------------------------------------------------------------


def test_stack_visits_every_combination() -> None:
    def derive(p: Prakriya) -> None:
        p.push(Term.make_text("x"))
        p.optional("A", lambda p: True, _append("a"))
        p.optional("B", lambda p: True, _append("b"))

    results = PrakriyaStack().find_all(derive)
    texts = [p.text() for p in results]
    assert texts[0] == "xab"
    assert sorted(texts) == ["x", "xa", "xab", "xb"]


def test_stack_follows_dependent_rules() -> None:
    def derive(p: Prakriya) -> None:
        p.push(Term.make_text("x"))
        if p.optional("A", lambda p: True, _append("a")):
            p.optional("B", lambda p: True, _append("b"))

    texts = sorted(p.text() for p in PrakriyaStack().find_all(derive))
    assert texts == ["x", "xa", "xab"]


def test_stack_deduplicates_by_text() -> None:
    def derive(p: Prakriya) -> None:
        p.push(Term.make_text("x"))
        p.optional("A", lambda p: True, lambda p: None)

    results = PrakriyaStack().find_all(derive)
    assert [p.text() for p in results] == ["x"]


def test_stack_without_optional_rules_runs_once() -> None:
    runs = []

    def derive(p: Prakriya) -> None:
        runs.append(1)
        p.push(Term.make_text("x"))

    assert [p.text() for p in PrakriyaStack().find_all(derive)] == ["x"]
    assert len(runs) == 1


def test_stack_results_keep_their_ledgers() -> None:
    def derive(p: Prakriya) -> None:
        p.push(Term.make_text("x"))
        p.optional("A", lambda p: True, _append("a"))

    results = PrakriyaStack().find_all(derive)
    by_text = {p.text(): p for p in results}
    assert by_text["xa"].rule_decisions == [("A", RuleDecision.ACCEPTED)]
    assert by_text["x"].rule_decisions == [("A", RuleDecision.DECLINED)]


def test_stack_can_be_reused() -> None:
    stack = PrakriyaStack()

    def first(p: Prakriya) -> None:
        p.push(Term.make_text("x"))
        p.optional("A", lambda p: True, _append("a"))

    def second(p: Prakriya) -> None:
        p.push(Term.make_text("x"))

    assert sorted(p.text() for p in stack.find_all(first)) == ["x", "xa"]
    # "x" was found by the first call; the second still reports it.
    assert [p.text() for p in stack.find_all(second)] == ["x"]
    assert [p.text() for p in stack.prakriyas()] == ["x"]
