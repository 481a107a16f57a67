"""
ABHYASASYA (7.4.58 - 7.4.97)
----------------------------

Reduces the abhyasa (the reduplicated copy of the root) to its usual
shape: one consonant, one short vowel, with a few substitutions on each.
"""

from __future__ import annotations

from prakriya.core import Prakriya
from prakriya.sounds import is_ac, is_hal, s, to_hrasva
from prakriya.tags import Tag
from prakriya.term import Term

_SHAR = s("Sar")
_KHAY = s("Kay")


def _haladi_shesha(t: Term) -> None:
    # Keep the first consonant and every vowel.
    t.text = t.text[0] + "".join(c for c in t.text[1:] if is_ac(c))


def _sharpurva(t: Term) -> None:
    # Keep the second consonant and every vowel.
    t.text = t.text[1] + "".join(c for c in t.text[2:] if is_ac(c))


def run(p: Prakriya) -> None:
    i = p.find_first(Tag.Abhyasa)
    if i is None:
        return
    abhyasa = p.get(i)
    is_lit = _is_lit(p)

    if abhyasa.has_adi(_SHAR) and abhyasa.get(1) in _KHAY:
        # 7.4.61 SarpUrvAH KayaH
        p.op_term("7.4.61", i, _sharpurva)
    elif is_hal(abhyasa.adi()) and any(is_hal(c) for c in abhyasa.text[1:]):
        # 7.4.60 halAdiH SezaH
        p.op_term("7.4.60", i, _haladi_shesha)

    if abhyasa.has_adi(s("ku~ h")):
        # 7.4.62 kuhoS cuH
        sub = p.sounds.map_sounds("ku~ h", "cu~")[abhyasa.adi()]
        p.op_term("7.4.62", i, lambda t: t.set_adi(sub))

    vowel = next((c for c in abhyasa.text if is_ac(c)), None)
    if vowel is not None and to_hrasva(vowel) != vowel:
        # 7.4.59 hrasvaH
        short = to_hrasva(vowel)
        p.op_term("7.4.59", i, lambda t: t.find_and_replace_text(vowel, short))

    if "f" in abhyasa.text:
        # 7.4.66 ur at
        p.op_term("7.4.66", i, lambda t: t.find_and_replace_text("f", "a"))

    if is_lit:
        if abhyasa.has_adi("a"):
            # 7.4.70 ata AdeH
            p.op_term("7.4.70", i, lambda t: t.set_adi("A"))
        dhatu_i = p.find_next_where(i, lambda t: t.has_tag(Tag.Dhatu))
        if dhatu_i is not None and p.has(dhatu_i, lambda t: t.has_u("BU") and t.gana in (1, 2)):
            # 7.4.73 Bavater aH
            p.op_term("7.4.73", i, lambda t: t.set_antya("a"))


def _is_lit(p: Prakriya) -> bool:
    i = p.find_last(Tag.Tin)
    return i is not None and p.has(i, lambda t: t.has_lakshana("li~w"))
