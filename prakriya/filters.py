"""
Term filters.

Small predicates and predicate factories used as the "does this rule
apply?" half of a rule. Each returns a ``Callable[[Term], bool]`` (or is
one), so it can be passed straight to ``Prakriya.has`` or
``Prakriya.find_*_where``.
"""

from __future__ import annotations

from prakriya.core import TermFilter
from prakriya.sounds import is_ac, s
from prakriya.sounds import is_samyoganta as _is_samyoganta
from prakriya.tags import Tag
from prakriya.term import Pattern, Term


def is_eka_ac(t: Term) -> bool:
    """The term has exactly one vowel."""
    return sum(1 for c in t.text if is_ac(c)) == 1


def is_samyoganta(t: Term) -> bool:
    return _is_samyoganta(t.text)


def not_empty(t: Term) -> bool:
    return not t.is_empty()


def tag(tag: Tag) -> TermFilter:
    return lambda t: t.has_tag(tag)


def text(value: str) -> TermFilter:
    return lambda t: t.has_text(value)


def adi(pattern: Pattern) -> TermFilter:
    return lambda t: t.has_adi(pattern)


def antya(pattern: Pattern) -> TermFilter:
    if isinstance(pattern, str) and len(pattern) > 1:
        pattern = s(pattern)
    return lambda t: t.has_antya(pattern)
