"""
ANGASYA (6.4.1 - 7.4.97)
------------------------

Operations on the anga, the stem that a suffix is added to.

This module covers the stem rules a finite verb needs: the jha ending,
the past-tense augment, guna and vrddhi of the root (and the many ways
kit/Nit block them), the reduced root of kit lit forms, and lengthening
of the a-stem before certain sarvadhatuka endings.
"""

from __future__ import annotations

from typing import Optional

from prakriya import filters as f
from prakriya import operators as op
from prakriya.core import Prakriya
from prakriya.sounds import is_ac, is_hal, is_hrasva, s, to_guna, to_vrddhi
from prakriya.tags import Tag
from prakriya.term import Term

_IK = s("ik")
_YAY = s("yaY")


def _next_view_is_ac(p: Prakriya, i: int) -> bool:
    view = p.view(i + 1)
    return view is not None and is_ac(view.adi())


def _tin(p: Prakriya) -> Optional[Term]:
    i = p.find_last(Tag.Tin)
    return p.get(i) if i is not None else None


# ---------------------------------------------------------------------------
# Before guna
# ---------------------------------------------------------------------------


def _jha_adesha(p: Prakriya) -> None:
    i = p.find_last(Tag.Tin)
    if i is not None and p.has(i, f.adi("J")):
        # 7.1.3 Jo 'ntaH
        p.op_term("7.1.3", i, op.adi("ant"))


def _aw_agama(p: Prakriya) -> None:
    tin = _tin(p)
    if tin is None or not tin.has_lakshana_in(("la~N", "lu~N", "lf~N")):
        return
    i = p.find_first(Tag.Dhatu)
    if i is None:
        return

    if p.has(i, lambda t: is_ac(t.adi())):
        # 6.4.72 AqajAdInAm
        op.insert_agama_before("6.4.72", p, i, "Aw")
    else:
        # 6.4.71 luNlaNlfNkzv aqudAttaH
        op.insert_agama_before("6.4.71", p, i, "aw")


def _vuk_agama(p: Prakriya) -> None:
    i = p.find_last_where(lambda t: t.has_tag(Tag.Dhatu) and t.has_u("BU"))
    if i is None:
        return
    view = p.view(i + 1)
    if view is None or not is_ac(view.adi()):
        return
    if view.has_lakshana_in(("li~w", "lu~N")):
        # 6.4.88 Buvo vug luNliwoH
        op.insert_agama_after("6.4.88", p, i, "vu~k")
        p.set(i, op.add_tag(Tag.FlagGunaApavada))


# ---------------------------------------------------------------------------
# Guna and vrddhi
# ---------------------------------------------------------------------------


def _ato_lopa(p: Prakriya) -> None:
    for i, anga in enumerate(p.terms):
        if not anga.has_tag(Tag.Dhatu) or anga.has_tag(Tag.Abhyasa) or not anga.has_antya("a"):
            continue
        view = p.view(i + 1)
        if view is not None and view.has_tag(Tag.Ardhadhatuka):
            # 6.4.48 ato lopaH
            p.op_term("6.4.48", i, op.antya(""))


def _ni_lopa(p: Prakriya) -> None:
    i = p.find_last_where(lambda t: t.has_tag(Tag.Dhatu) and t.has_u("Ric"))
    if i is None:
        return
    view = p.view(i + 1)
    if view is None or not view.has_tag(Tag.Ardhadhatuka) or view.first().has_u("iw"):
        return
    if view.first().has_u("Am"):
        # 6.4.55 ayAmantAlvAyyetnviSnuzu
        p.op_term("6.4.55", i, op.text("ay"))
    else:
        # 6.4.51 Ner aniwi
        p.op_term("6.4.51", i, op.lopa)


def _ral_uttama(p: Prakriya) -> None:
    i = p.find_last(Tag.Tin)
    if i is None:
        return
    if p.has(i, lambda t: t.has_u("Ral") and t.has_tag(Tag.Uttama)):
        # 7.1.91 Ral uttamo vA
        p.optional("7.1.91", lambda p: True, op.t(i, op.remove_tag(Tag.Rit)))


def _vrddhi_and_guna(p: Prakriya) -> None:
    for i, anga in enumerate(p.terms):
        if not anga.has_tag(Tag.Dhatu) or anga.has_tag(Tag.FlagGunaApavada):
            continue
        view = p.view(i + 1)
        if view is None or not view.any([Tag.Sarvadhatuka, Tag.Ardhadhatuka]):
            continue
        if anga.has_u("YimidA~") and view.has_tag(Tag.Sit):
            # 7.3.82 mider guRaH
            p.op_term("7.3.82", i, op.upadha("e"))
            continue
        # 1.1.5 kNiti ca
        if view.is_knit():
            continue

        if view.last().has_tag_in([Tag.Yit, Tag.Rit]):
            if is_ac(anga.antya()):
                # 7.2.115 aco `YRiti
                p.op_term("7.2.115", i, op.antya(to_vrddhi(anga.antya())))
                continue
            if anga.has_upadha("a"):
                # 7.2.116 ata upaDAyAH
                p.op_term("7.2.116", i, op.upadha("A"))
                continue

        if anga.has_antya(_IK):
            # 7.3.84 sArvaDAtukArDaDAtukayoH
            p.op_term("7.3.84", i, op.antya(to_guna(anga.antya())))
        elif anga.has_upadha(_IK) and is_hrasva(anga.upadha()) and is_hal(anga.antya()):
            # 7.3.86 pugantalaGUpaDasya ca
            p.op_term("7.3.86", i, op.upadha(to_guna(anga.upadha())))


# ---------------------------------------------------------------------------
# After guna
# ---------------------------------------------------------------------------


def _is_a_between_single_consonants(t: Term) -> bool:
    return len(t.text) == 3 and is_hal(t.text[0]) and t.text[1] == "a" and is_hal(t.text[2])


def _lit_ettva(p: Prakriya) -> None:
    i_abhyasa = p.find_first(Tag.Abhyasa)
    if i_abhyasa is None:
        return
    i = i_abhyasa + 1
    abhyasa = p.get(i_abhyasa)
    dhatu = p.get(i)
    view = p.view(i + 1)
    if dhatu is None or view is None or not view.has_lakshana("li~w"):
        return
    # anAdeSAdi: the root's first sound is not a substitute in the abhyasa.
    if not _is_a_between_single_consonants(dhatu) or abhyasa.adi() != dhatu.adi():
        return

    def ettva(p: Prakriya) -> None:
        p.set(i, op.upadha("e"))
        p.set(i_abhyasa, op.lopa)

    if view.is_knit():
        # 6.4.120 ata ekahalmaDye 'nAdeSAder liwi
        p.op("6.4.120", ettva)
    elif view.first().has_u("iw") and view.last().has_u("Tal"):
        # 6.4.121 Tali ca sewi
        p.op("6.4.121", ettva)


def _yan_and_iyan(p: Prakriya) -> None:
    for i, anga in enumerate(p.terms):
        if not anga.has_tag(Tag.Dhatu) or not _next_view_is_ac(p, i):
            continue

        aneka_ac = sum(1 for c in anga.text if is_ac(c)) > 1 or p.has(i - 1, f.tag(Tag.Abhyasa))
        samyoga_purva = len(anga.text) >= 3 and is_hal(anga.text[-2]) and is_hal(anga.text[-3])
        if anga.has_antya(s("i I")) and aneka_ac and not samyoga_purva:
            # 6.4.82 er anekAco 'saMyogapUrvasya
            p.op_term("6.4.82", i, op.antya("y"))
        elif anga.has_antya(s("i I")):
            # 6.4.77 aci SnuDAtuBruvAM yvor iyaNuvaNO
            p.op_term("6.4.77", i, op.antya("iy"))
        elif anga.has_antya(s("u U")):
            p.op_term("6.4.77", i, op.antya("uv"))


def _hi_lopa(p: Prakriya) -> None:
    i = p.find_last(Tag.Tin)
    if i is None or not p.has(i, f.text("hi")):
        return
    i_prev = p.find_prev_where(i, f.not_empty)
    if i_prev is not None and p.has(i_prev, f.antya("a")):
        # 6.4.105 ato heH
        p.op_term("6.4.105", i, op.lopa)


def _ato_nitah(p: Prakriya) -> None:
    i = p.find_last(Tag.Tin)
    if i is None:
        return
    tin = p.get(i)
    if not (tin.all([Tag.Sarvadhatuka, Tag.Nit]) and tin.has_adi("A")):
        return
    i_prev = p.find_prev_where(i, f.not_empty)
    if i_prev is not None and p.has(i_prev, f.antya("a")):
        # 7.2.81 Ato NitaH
        p.op_term("7.2.81", i, op.adi("iy"))


def _ato_dirgha(p: Prakriya) -> None:
    for i, anga in enumerate(p.terms):
        if not anga.has_tag_in([Tag.Dhatu, Tag.Vikarana]) or not anga.has_antya("a"):
            continue
        view = p.view(i + 1)
        if view is None or not view.has_tag(Tag.Sarvadhatuka) or not view.has_adi(_YAY):
            continue
        # 7.3.101 ato dIrgho yaYi
        p.op_term("7.3.101", i, op.antya("A"))


def run(p: Prakriya) -> None:
    _jha_adesha(p)
    _aw_agama(p)
    _vuk_agama(p)
    _ato_lopa(p)
    _ni_lopa(p)

    _ral_uttama(p)
    _vrddhi_and_guna(p)

    _lit_ettva(p)
    _yan_and_iyan(p)
    _hi_lopa(p)
    _ato_nitah(p)
    _ato_dirgha(p)
