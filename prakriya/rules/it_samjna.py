"""
IT-SAMJNA (1.3.2 - 1.3.9)
-------------------------

Identifies the marker sounds ("it") of an upadesha, records each as a tag
on the term and removes it from the term's text.

Almost every derivation passes through here more than once: for the
root, for each suffix, for each augment and for every suffix
substitution.
"""

from __future__ import annotations

import re
from typing import List

from prakriya.core import Prakriya
from prakriya.sounds import s
from prakriya.tags import IT_TAGS, Tag, parse_it
from prakriya.term import Term

_RE_ANUNASIKA_AC = re.compile("([" + s("ac").to_string() + r"]~[\\^]?)")

_TUSMA = s("tu~ s m")
_CUTU = s("cu~ wu~")
_LASHAKU = s("l S ku~")
# Replaced later in the grammar; dropping them now would make those rules moot.
_KEEP_CUTU = s("C J W Q")

_LAKARAS = frozenset(
    ["la~w", "li~w", "lu~w", "lf~w", "le~w", "lo~w", "la~N", "li~N", "lu~N", "lf~N"]
)


def run(p: Prakriya, i: int) -> None:
    """Run it-samjna on term ``i``. Terms without an upadesha are left alone."""
    t = p.get(i)
    if t is None or t.u is None:
        return

    # Work against the upadesha as stated, not the current text.
    u = Term.make_upadesha(t.u)

    # vArttika: `i~r` is a single marker.
    irit = False
    if t.text.endswith("i~r"):
        t.text = t.text[: -len("i~r")]
        t.add_tag(Tag.irit)
        irit = True
    elif t.text.endswith("i~^r"):
        t.text = t.text[: -len("i~^r")]
        t.add_tags([Tag.irit, Tag.svaritet])
        irit = True

    # 1.3.2 upadeSe 'janunAsika it
    tags: List[Tag] = []
    for m in _RE_ANUNASIKA_AC.finditer(t.text):
        marker = m.group(0)
        if "\\" in marker:
            tags.append(Tag.anudattet)
        elif "^" in marker:
            tags.append(Tag.svaritet)
        tags.append(parse_it(marker[0]))
    if tags:
        t.text = _RE_ANUNASIKA_AC.sub("", t.text)
        t.add_tags(tags)
        p.step("1.3.2")

    # Accent marks on the rest of the upadesha.
    if "\\" in t.text:
        t.add_tag(Tag.Anudatta)
    if "^" in t.text:
        t.add_tag(Tag.Svarita)
    t.text = t.text.replace("\\", "").replace("^", "")

    # 1.3.3 hal antyam
    final = u.antya()
    if final in s("hal") and not irit:
        if t.has_tag(Tag.Vibhakti) and final in _TUSMA:
            # 1.3.4 na vibhaktau tusmAH
            p.step("1.3.4")
        elif final in IT_TAGS and t.text.endswith(final):
            t.add_tag(parse_it(final))
            t.text = t.text[:-1]
            p.step("1.3.3")

    # 1.3.5 AdirYiwuqavaH
    for prefix, tag in (("Yi", Tag.YIt), ("wu", Tag.wvit), ("qu", Tag.qvit)):
        if t.has_tag(Tag.Dhatu) and t.text.startswith(prefix):
            t.text = t.text[len(prefix) :]
            t.add_tag(tag)
            p.step("1.3.5")
            break

    if t.has_tag(Tag.Pratyaya):
        first = u.adi()
        if first == "z":
            # 1.3.6 zaH pratyayasya
            t.add_tag(Tag.zit)
            t.text = t.text[1:]
            p.step("1.3.6")
        elif first in _CUTU:
            # 1.3.7 cuwU
            if first not in _KEEP_CUTU:
                t.add_tag(parse_it(first))
                t.text = t.text[1:]
                p.step("1.3.7")
        elif (
            not t.has_tag(Tag.Taddhita)
            and first in _LASHAKU
            and t.u not in _LAKARAS
            and first in IT_TAGS
        ):
            # 1.3.8 laSakvatadDite
            t.add_tag(parse_it(first))
            t.text = t.text[1:]
            p.step("1.3.8")

    # 1.3.9 tasya lopaH
    if t.text != u.text:
        p.step("1.3.9")
