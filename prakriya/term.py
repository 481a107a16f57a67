"""
TERMS AND VIEWS
---------------

``Term`` is the unit a derivation manipulates: one root, suffix or augment
with its current text, its original (upadesha) form, its tags and the
names of the abstract suffixes it has stood for ("lakshana").

``TermView`` lets a rule look at "the next morphological unit" starting
at some index. Augments (terms tagged ``Agama``) do not count as a unit of
their own, so a view that starts at an augment runs on to the first
non-augment term and answers questions over the whole run.

Sound queries return ``None`` on empty text; predicates return ``False``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set, Union

from prakriya.sounds import SoundSet
from prakriya.tags import Tag

# A sound pattern is either one sound or a class of sounds.
Pattern = Union[str, SoundSet]


def _matches(sound: Optional[str], pattern: Pattern) -> bool:
    if sound is None:
        return False
    if isinstance(pattern, SoundSet):
        return sound in pattern
    return sound == pattern


@dataclass
class Term:
    text: str
    u: Optional[str] = None
    tags: Set[Tag] = field(default_factory=set)
    gana: Optional[int] = None
    number: Optional[int] = None
    lakshana: List[str] = field(default_factory=list)

    # -- Constructors --------------------------------------------------------

    @classmethod
    def make_upadesha(cls, s: str) -> "Term":
        return cls(text=s, u=s)

    @classmethod
    def make_text(cls, s: str) -> "Term":
        return cls(text=s)

    @classmethod
    def make_dhatu(cls, s: str, gana: int, number: Optional[int] = None) -> "Term":
        t = cls.make_upadesha(s)
        t.gana = gana
        t.number = number
        t.add_tag(Tag.Dhatu)
        return t

    @classmethod
    def make_agama(cls, s: str) -> "Term":
        t = cls.make_upadesha(s)
        t.add_tag(Tag.Agama)
        return t

    # -- Sound accessors -----------------------------------------------------

    def adi(self) -> Optional[str]:
        """First sound."""
        return self.text[0] if self.text else None

    def antya(self) -> Optional[str]:
        """Last sound."""
        return self.text[-1] if self.text else None

    def upadha(self) -> Optional[str]:
        """Penultimate sound."""
        return self.text[-2] if len(self.text) >= 2 else None

    def get(self, i: int) -> Optional[str]:
        return self.text[i] if 0 <= i < len(self.text) else None

    def has_adi(self, pattern: Pattern) -> bool:
        return _matches(self.adi(), pattern)

    def has_antya(self, pattern: Pattern) -> bool:
        return _matches(self.antya(), pattern)

    def has_upadha(self, pattern: Pattern) -> bool:
        return _matches(self.upadha(), pattern)

    # -- Identity predicates -------------------------------------------------

    def has_u(self, u: str) -> bool:
        return self.u == u

    def has_u_in(self, items: Iterable[str]) -> bool:
        return self.u is not None and self.u in items

    def has_lakshana(self, name: str) -> bool:
        return name in self.lakshana

    def has_lakshana_in(self, names: Iterable[str]) -> bool:
        return any(n in self.lakshana for n in names)

    def has_text(self, text: str) -> bool:
        return self.text == text

    def has_text_in(self, items: Iterable[str]) -> bool:
        return self.text in items

    def has_prefix_in(self, prefixes: Iterable[str]) -> bool:
        return any(self.text.startswith(p) for p in prefixes)

    def has_gana(self, gana: int) -> bool:
        return self.gana == gana

    def is_empty(self) -> bool:
        return not self.text

    def has_tag(self, tag: Tag) -> bool:
        return tag in self.tags

    def has_tag_in(self, tags: Iterable[Tag]) -> bool:
        return any(t in self.tags for t in tags)

    def all(self, tags: Iterable[Tag]) -> bool:
        return all(t in self.tags for t in tags)

    # -- Mutators ------------------------------------------------------------

    def set_adi(self, s: str) -> None:
        if self.text:
            self.text = s + self.text[1:]
        else:
            self.text = s

    def set_antya(self, s: str) -> None:
        if self.text:
            self.text = self.text[:-1] + s

    def set_upadha(self, s: str) -> None:
        if len(self.text) >= 2:
            self.text = self.text[:-2] + s + self.text[-1]

    def set_upadesha(self, s: str) -> None:
        """Replace the term with a new upadesha, remembering what it stood for."""
        if self.u is not None:
            self.lakshana.append(self.u)
        self.u = s
        self.text = s

    def set_text(self, s: str) -> None:
        self.text = s

    def find_and_replace_text(self, needle: str, sub: str) -> None:
        self.text = self.text.replace(needle, sub)

    def add_tag(self, tag: Tag) -> None:
        self.tags.add(tag)

    def add_tags(self, tags: Iterable[Tag]) -> None:
        self.tags.update(tags)

    def remove_tag(self, tag: Tag) -> None:
        self.tags.discard(tag)

    def remove_tags(self, tags: Iterable[Tag]) -> None:
        for tag in tags:
            self.tags.discard(tag)


class TermView:
    """
    Read-only window over ``terms[start:end + 1]``.

    ``end`` is the first index at or after ``start`` whose term is not an
    augment. Use ``TermView.new`` to build one; it returns ``None`` when
    ``start`` is past the end of the sequence.
    """

    __slots__ = ("_terms", "start", "end")

    def __init__(self, terms: List[Term], start: int, end: int):
        self._terms = terms
        self.start = start
        self.end = end

    @classmethod
    def new(cls, terms: List[Term], start: int) -> Optional["TermView"]:
        if start < 0 or start >= len(terms):
            return None
        end = start
        for i in range(start, len(terms)):
            if not terms[i].has_tag(Tag.Agama):
                end = i
                break
        return cls(terms, start, end)

    def __repr__(self) -> str:
        return f"TermView(start={self.start}, end={self.end}, text={self.text()!r})"

    # -- Accessors -----------------------------------------------------------

    def slice(self) -> List[Term]:
        return self._terms[self.start : self.end + 1]

    def first(self) -> Term:
        return self._terms[self.start]

    def last(self) -> Term:
        return self._terms[self.end]

    def get(self, i: int) -> Optional[Term]:
        items = self.slice()
        return items[i] if 0 <= i < len(items) else None

    def text(self) -> str:
        return "".join(t.text for t in self.slice())

    def is_empty(self) -> bool:
        return all(t.is_empty() for t in self.slice())

    def ends_word(self) -> bool:
        return self.end == len(self._terms) - 1

    def is_padanta(self) -> bool:
        return self.is_empty() and self.ends_word()

    # -- Sound queries -------------------------------------------------------

    def adi(self) -> Optional[str]:
        for t in self.slice():
            if t.text:
                return t.text[0]
        return None

    def antya(self) -> Optional[str]:
        for t in reversed(self.slice()):
            if t.text:
                return t.text[-1]
        return None

    def has_adi(self, pattern: Pattern) -> bool:
        return _matches(self.adi(), pattern)

    def has_antya(self, pattern: Pattern) -> bool:
        return _matches(self.antya(), pattern)

    # -- Predicates over every term in the view ------------------------------

    def has_u(self, u: str) -> bool:
        return self.first().has_u(u)

    def has_u_in(self, items: Iterable[str]) -> bool:
        return self.first().has_u_in(items)

    def has_tag(self, tag: Tag) -> bool:
        return any(t.has_tag(tag) for t in self.slice())

    def has_lakshana(self, name: str) -> bool:
        return any(t.has_lakshana(name) for t in self.slice())

    def has_lakshana_in(self, names: Iterable[str]) -> bool:
        names = list(names)
        return any(t.has_lakshana_in(names) for t in self.slice())

    def all(self, tags: Iterable[Tag]) -> bool:
        return all(self.has_tag(tag) for tag in tags)

    def any(self, tags: Iterable[Tag]) -> bool:
        return any(self.has_tag(tag) for tag in tags)

    def is_knit(self) -> bool:
        return self.any([Tag.kit, Tag.Nit])


__all__ = ["Pattern", "Term", "TermView"]
