"""
Operators.

The "what the rule does" half of a rule. Most helpers here are factories
that return a ``Term`` operator (``Callable[[Term], None]``); ``t`` lifts
one into a Prakriya operator for use with ``Prakriya.op``.

Helpers that introduce a new upadesha (``adesha``, ``insert_agama_*``)
also run it-samjna on the affected term, since every upadesha must lose
its markers before later rules look at it.
"""

from __future__ import annotations

from typing import Sequence

from prakriya.core import Operator, Prakriya, Rule, TermOperator
from prakriya.rules import it_samjna
from prakriya.sounds import is_ac
from prakriya.tags import Tag
from prakriya.term import Term


def t(i: int, f: TermOperator) -> Operator:
    """Lift a term operator to a Prakriya operator on term ``i``."""

    def run(p: Prakriya) -> None:
        p.set(i, f)

    return run


# ---------------------------------------------------------------------------
# Substitution
# ---------------------------------------------------------------------------


def adi(sub: str) -> TermOperator:
    """Replace the first sound."""

    def run(term: Term) -> None:
        if term.text:
            term.set_adi(sub)

    return run


def antya(sub: str) -> TermOperator:
    """Replace the last sound."""
    return lambda term: term.set_antya(sub)


def upadha(sub: str) -> TermOperator:
    """Replace the penultimate sound."""
    return lambda term: term.set_upadha(sub)


# 1.1.47 mid aco 'ntyAt paraH
def mit(sub: str) -> TermOperator:
    """Insert ``sub`` right after the last vowel."""

    def run(term: Term) -> None:
        for i in range(len(term.text) - 1, -1, -1):
            if is_ac(term.text[i]):
                term.text = term.text[: i + 1] + sub + term.text[i + 1 :]
                return

    return run


# 1.1.64 aco 'ntyAdi wi
def ti(sub: str) -> TermOperator:
    """Replace everything from the last vowel onward."""

    def run(term: Term) -> None:
        for i in range(len(term.text) - 1, -1, -1):
            if is_ac(term.text[i]):
                term.text = term.text[:i] + sub
                return

    return run


def text(sub: str) -> TermOperator:
    return lambda term: term.set_text(sub)


def lopa(term: Term) -> None:
    """Elide the whole term; it stays in place with empty text."""
    term.set_text("")


def add_tag(tag: Tag) -> TermOperator:
    return lambda term: term.add_tag(tag)


def remove_tag(tag: Tag) -> TermOperator:
    return lambda term: term.remove_tag(tag)


def yatha(needle: str, old: Sequence[str], new: Sequence[str]):
    """Return the item of ``new`` that corresponds to ``needle`` in ``old``."""
    for o, n in zip(old, new):
        if o == needle:
            return n
    return None


# ---------------------------------------------------------------------------
# Upadesha replacement and augments
# ---------------------------------------------------------------------------


def adesha(rule: Rule, p: Prakriya, i: int, sub: str) -> None:
    """Replace term ``i`` with the upadesha ``sub`` and strip its markers."""
    term = p.get(i)
    if term is None:
        return
    term.set_upadesha(sub)
    p.step(rule)
    it_samjna.run(p, i)


def insert_agama_before(rule: Rule, p: Prakriya, i: int, u: str) -> None:
    p.insert_before(i, Term.make_agama(u))
    p.step(rule)
    it_samjna.run(p, i)


def insert_agama_after(rule: Rule, p: Prakriya, i: int, u: str) -> None:
    p.insert_after(i, Term.make_agama(u))
    p.step(rule)
    it_samjna.run(p, i + 1)
