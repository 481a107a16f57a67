"""
CHARACTER VIEW
--------------

Treat a derivation as one string while keeping its text split across the
terms that own it.

Sandhi rules look at adjacent sounds that may sit in different terms (the
last sound of a root and the first sound of a suffix). ``char_rule`` scans
the concatenated text, hands each offset to a filter and, on the first
match whose operator reports a change, starts over from offset 0. It
returns once a full scan changes nothing.

The loop has no iteration cap. Every operator passed to ``char_rule`` must
strictly change the span its filter matched (usually by consuming the
triggering sound) so that the same match cannot recur forever.
"""

from __future__ import annotations

from typing import Callable, Optional

from prakriya.core import Prakriya
from prakriya.term import Term

# (prakriya, text at the start of this scan, offset) -> bool
CharFilter = Callable[[Prakriya, str, int], bool]
CharOperator = Callable[[Prakriya, str, int], bool]


def _locate(p: Prakriya, index: int):
    cur = 0
    for i, t in enumerate(p.terms):
        delta = len(t.text)
        if cur <= index < cur + delta:
            return i, index - cur
        cur += delta
    return None


def get_at(p: Prakriya, index: int) -> Optional[Term]:
    """The term that owns character ``index`` of ``p.text()``."""
    loc = _locate(p, index)
    if loc is None:
        return None
    return p.terms[loc[0]]


def set_at(p: Prakriya, index: int, substitute: str) -> None:
    """Replace character ``index`` of ``p.text()`` with ``substitute`` (possibly empty)."""
    loc = _locate(p, index)
    if loc is None:
        return
    i, offset = loc
    t = p.terms[i]
    t.text = t.text[:offset] + substitute + t.text[offset + 1 :]


def char_rule(p: Prakriya, filter: CharFilter, operator: CharOperator) -> int:
    """
    Apply a sound-level rule until it no longer matches.

    Returns the number of times ``operator`` changed the text.
    """
    changes = 0
    while True:
        text = p.text()
        changed = False
        for i in range(len(text)):
            if filter(p, text, i) and operator(p, text, i):
                # Offsets are stale once the text has changed.
                changed = True
                break
        if not changed:
            return changes
        changes += 1


def xy(inner: Callable[[str, str], bool]) -> CharFilter:
    """Build a filter over the sound at ``i`` and the one after it."""

    def f(p: Prakriya, text: str, i: int) -> bool:
        if i + 1 >= len(text):
            return False
        return inner(text[i], text[i + 1])

    return f


def xyz(inner: Callable[[str, str, str], bool]) -> CharFilter:
    """Build a filter over three consecutive sounds starting at ``i``."""

    def f(p: Prakriya, text: str, i: int) -> bool:
        if i + 2 >= len(text):
            return False
        return inner(text[i], text[i + 1], text[i + 2])

    return f


__all__ = ["CharFilter", "CharOperator", "char_rule", "get_at", "set_at", "xy", "xyz"]
