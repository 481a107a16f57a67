"""
TIN-PRATYAYA (3.4.77 - 3.4.117)
-------------------------------

Two jobs:

1. ``adesha``: replace the lakara with the basic personal ending for the
   derivation's pada, purusha and vacana.
2. ``siddhi``: adjust that ending for the particular lakara (perfect
   endings, the imperative's u/hi/ni, the dropped i of the Nit lakaras).
"""

from __future__ import annotations

from typing import Dict, Tuple

from prakriya import operators as op
from prakriya.args import Lakara, Purusha, Vacana
from prakriya.core import Prakriya
from prakriya.tags import Tag
from prakriya.term import Term

_Key = Tuple[Purusha, Vacana]

TIN_PARA: Dict[_Key, str] = {
    (Purusha.PRATHAMA, Vacana.EKA): "tip",
    (Purusha.PRATHAMA, Vacana.DVI): "tas",
    (Purusha.PRATHAMA, Vacana.BAHU): "Ji",
    (Purusha.MADHYAMA, Vacana.EKA): "sip",
    (Purusha.MADHYAMA, Vacana.DVI): "Tas",
    (Purusha.MADHYAMA, Vacana.BAHU): "Ta",
    (Purusha.UTTAMA, Vacana.EKA): "mip",
    (Purusha.UTTAMA, Vacana.DVI): "vas",
    (Purusha.UTTAMA, Vacana.BAHU): "mas",
}

TIN_ATMANE: Dict[_Key, str] = {
    (Purusha.PRATHAMA, Vacana.EKA): "ta",
    (Purusha.PRATHAMA, Vacana.DVI): "AtAm",
    (Purusha.PRATHAMA, Vacana.BAHU): "Ja",
    (Purusha.MADHYAMA, Vacana.EKA): "TAs",
    (Purusha.MADHYAMA, Vacana.DVI): "ATAm",
    (Purusha.MADHYAMA, Vacana.BAHU): "Dvam",
    (Purusha.UTTAMA, Vacana.EKA): "iw",
    (Purusha.UTTAMA, Vacana.DVI): "vahi",
    (Purusha.UTTAMA, Vacana.BAHU): "mahiN",
}

# Parasmaipada endings as they stand after it-samjna, and their lit substitutes.
_PARA_TEXT = ("ti", "tas", "Ji", "si", "Tas", "Ta", "mi", "vas", "mas")
_NAL_ADI = ("Ral", "atus", "us", "Tal", "aTus", "a", "Ral", "va", "ma")

_TA_JHA = {"ta": "eS", "Ja": "irec"}


def adesha(p: Prakriya, purusha: Purusha, vacana: Vacana) -> None:
    """Replace the lakara with a tin ending."""
    i = p.find_last(Tag.Pratyaya)
    if i is None:
        return

    if p.has_tag(Tag.Atmanepada):
        tin = TIN_ATMANE[(purusha, vacana)]
    else:
        tin = TIN_PARA[(purusha, vacana)]

    # 1.4.104 vibhaktiS ca
    p.set(i, lambda t: t.add_tags([Tag.Vibhakti, Tag.Tin, purusha.as_tag(), vacana.as_tag()]))
    op.adesha("3.4.78", p, i, tin)

    # Nit-tva of the lakara does not carry over to its substitutes, and the
    # N of mahiN only serves to form a pratyahara.
    p.set(i, lambda t: t.remove_tag(Tag.Nit))


def _lit_siddhi(p: Prakriya, i: int) -> None:
    la = p.get(i)
    if la.has_tag(Tag.Atmanepada):
        if la.text in _TA_JHA:
            # 3.4.81 liwas taJayor eSirec
            op.adesha("3.4.81", p, i, _TA_JHA[la.text])
            # The S of eS only marks a whole-term substitute (1.1.55).
            p.set(i, lambda t: t.remove_tag(Tag.Sit))
        else:
            _tit_atmanepada(p, i)
    elif la.text in _PARA_TEXT:
        # 3.4.82 parasmEpadAnAM RalatususTalaTusaRalvamAH
        op.adesha("3.4.82", p, i, op.yatha(la.text, _PARA_TEXT, _NAL_ADI))


def _tit_atmanepada(p: Prakriya, i: int) -> None:
    if p.has(i, lambda t: t.has_text("TAs")):
        # 3.4.80 TAsaH se
        op.adesha("3.4.80", p, i, "se")
    else:
        # 3.4.79 wita AtmanepadAnAM wer e
        p.op_term("3.4.79", i, op.ti("e"))


def _lot_siddhi(p: Prakriya, i: int) -> int:
    """Returns the (possibly shifted) index of the ending."""
    la = p.get(i)
    if la.has_text("si"):
        # 3.4.87 ser hy apic ca
        def to_hi(t: Term) -> None:
            t.set_upadesha("hi")
            t.remove_tag(Tag.pit)

        p.op_term("3.4.87", i, to_hi)
    elif la.has_text("mi"):
        # 3.4.89 mer niH
        p.op_term("3.4.89", i, op.text("ni"))
    elif la.has_antya("i"):
        # 3.4.86 er uH
        p.op_term("3.4.86", i, op.antya("u"))
    elif la.has_antya("e"):
        if la.has_tag(Tag.Uttama):
            # 3.4.93 eta E
            p.op_term("3.4.93", i, op.antya("E"))
        elif la.text.endswith("se") or la.text.endswith("ve"):
            # 3.4.91 savAByAM vAmO
            def sva_vam(t: Term) -> None:
                t.text = t.text[:-2] + ("sva" if t.text.endswith("se") else "vam")

            p.op_term("3.4.91", i, sva_vam)
        else:
            # 3.4.90 Am etaH
            p.op_term("3.4.90", i, op.antya("Am"))

    if p.has(i, lambda t: t.has_tag(Tag.Uttama)):
        # 3.4.92 Aq uttamasya pic ca
        p.set(i, lambda t: t.add_tag(Tag.pit))
        op.insert_agama_before("3.4.92", p, i, "Aw")
        i += 1
    return i


def _nit_siddhi(p: Prakriya, i: int, lakara: Lakara) -> None:
    la = p.get(i)

    # 3.4.101 tasTasTamipAM tAMtantAmaH
    tastha = ("tas", "Tas", "Ta", "mi")
    if la.text in tastha:
        p.op_term("3.4.101", i, op.text(op.yatha(la.text, tastha, ("tAm", "tam", "ta", "am"))))

    if la.has_tag(Tag.Parasmaipada):
        if la.has_tag(Tag.Uttama) and la.has_antya("s"):
            # 3.4.99 nityaM NitaH
            p.op_term("3.4.99", i, op.antya(""))
        if la.has_antya("i") and lakara != Lakara.LOT:
            # 3.4.100 itaS ca
            p.op_term("3.4.100", i, op.antya(""))


def siddhi(p: Prakriya, lakara: Lakara) -> None:
    """Apply the lakara-specific substitutions to the tin ending."""
    i = p.find_last(Tag.Tin)
    if i is None:
        return

    if lakara == Lakara.LIT:
        _lit_siddhi(p, i)
        return

    la = p.get(i)
    if la.has_tag(Tag.Atmanepada) and lakara.is_wit():
        _tit_atmanepada(p, i)

    if lakara == Lakara.LOT:
        i = _lot_siddhi(p, i)

    # 3.4.85 loqo laNvat
    if lakara == Lakara.LOT or lakara.is_nit():
        _nit_siddhi(p, i, lakara)


__all__ = ["TIN_PARA", "TIN_ATMANE", "adesha", "siddhi"]
