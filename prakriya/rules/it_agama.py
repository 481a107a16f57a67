"""
IT-AGAMA (7.2.8 - 7.2.78)
-------------------------

Decides whether an ardhadhatuka suffix that begins with a val consonant
takes the augment iw. Roots taught with anudatta accent and a single
vowel are "anit" and refuse it, except in lit where only the eight krAdi
roots refuse it.

Before the lit ending Tal the anit roots get a second look: vowel-final
roots may take iw or not, roots ending in f never do, and roots with the
vowel a may drop it.
"""

from __future__ import annotations

from prakriya import filters as f
from prakriya import operators as op
from prakriya.core import Prakriya
from prakriya.sounds import is_ac, s
from prakriya.tags import Tag
from prakriya.term import Term

_VAL = s("val")

# 7.2.13 kfsfBfvfstudrusruSruvo liwi
_KRADI = ("kf", "sf", "Bf", "vf", "stu", "dru", "sru", "Sru")


def _is_anit(dhatu: Term) -> bool:
    # 7.2.10 ekAca upadeSe 'nudAttAt
    return dhatu.has_tag(Tag.Anudatta) and f.is_eka_ac(dhatu)


def _lit_is_sew(p: Prakriya, dhatu: Term, tal: bool) -> bool:
    """Return whether a lit ending keeps iw, recording the deciding rule."""
    if dhatu.has_text_in(_KRADI):
        p.step("7.2.13")
        return False
    if not tal:
        return True

    if _is_anit(dhatu) and is_ac(dhatu.antya()):
        if dhatu.has_u("f\\"):
            # 7.2.66 iq attyartivyayatInAm
            p.step("7.2.66")
            return True
        if dhatu.has_antya("f"):
            # 7.2.61 acas tAsvat TalyaniwaH
            p.step("7.2.61")
            return False
        # 7.2.63 fto BAradvAjasya
        if p.is_allowed("7.2.63"):
            return True
        p.decline("7.2.63")
        p.step("7.2.61")
        return False

    if _is_anit(dhatu) and "a" in dhatu.text:
        # 7.2.62 upadeSe 'tvataH
        if p.is_allowed("7.2.62"):
            p.step("7.2.62")
            return False
        p.decline("7.2.62")
        return True

    if dhatu.has_text_in(("sfj", "dfS")):
        # 7.2.65 viBAzA sfjidfSoH
        if p.is_allowed("7.2.65"):
            p.step("7.2.65")
            return False
        p.decline("7.2.65")
    return True


def run(p: Prakriya) -> None:
    i = p.find_last(Tag.Dhatu)
    if i is None:
        return
    view = p.view(i + 1)
    if view is None or view.first().has_tag(Tag.Agama):
        return
    if not (view.has_tag(Tag.Ardhadhatuka) and view.has_adi(_VAL)):
        return

    dhatu = p.get(i)
    if view.has_lakshana("li~w"):
        if not _lit_is_sew(p, dhatu, view.last().has_u("Tal")):
            return
    elif _is_anit(dhatu):
        p.step("7.2.10")
        return

    # 7.2.35 ArDaDAtukasyew valAdeH
    op.insert_agama_after("7.2.35", p, i, "iw")
