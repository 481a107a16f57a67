"""
VIKARANA (3.1.33 - 3.1.90)
--------------------------

Inserts the stem-forming suffix that sits between the root and the tin
ending: sya for the future, yak in the passive, and the gana's own
vikarana (Sap, Syan, Sa) in the active.

Some roots cannot reduplicate in lit. They take Am instead, and the
root kf follows with the lit ending and goes through dvitva in their
place (the periphrastic perfect, e.g. eDAYcakre, corayAYcakAra).
"""

from __future__ import annotations

from typing import Optional

from prakriya import filters as f
from prakriya.core import Prakriya
from prakriya.rules import it_samjna
from prakriya.sounds import is_ac, is_dirgha, is_hal, s
from prakriya.tags import Tag
from prakriya.term import Term

_IC = s("ic")

_GANA_VIKARANA = {
    # 3.1.68 kartari Sap
    1: ("3.1.68", "Sap"),
    # 3.1.69 divAdiByaH Syan
    4: ("3.1.69", "Syan"),
    # 3.1.77 tudAdiByaH SaH
    6: ("3.1.77", "Sa"),
    # curadi roots end in Ric and take Sap like bhvadi.
    10: ("3.1.68", "Sap"),
}


def _add(rule: str, p: Prakriya, u: str) -> None:
    i = p.find_last(Tag.Dhatu)
    if i is None:
        return
    vikarana = Term.make_upadesha(u)
    vikarana.add_tags([Tag.Pratyaya, Tag.Vikarana])
    p.insert_after(i, vikarana)
    p.step(rule)
    it_samjna.run(p, i + 1)


def _root_gana(p: Prakriya) -> Optional[int]:
    i = p.find_first(Tag.Dhatu)
    if i is None:
        return None
    return p.get(i).gana


def is_guru(t: Term) -> bool:
    """The term's last vowel is long, or is followed by a consonant cluster."""
    for k in range(len(t.text) - 1, -1, -1):
        if is_ac(t.text[k]):
            return is_dirgha(t.text[k]) or sum(1 for c in t.text[k + 1 :] if is_hal(c)) >= 2
    return False


def _am_rule(dhatu: Term) -> Optional[str]:
    """The rule that makes ``dhatu`` take Am in lit, if any."""
    if dhatu.has_text("kAs") or dhatu.has_tag(Tag.Pratyaya):
        # 3.1.35 kAspratyayAd Am amantre liwi
        return "3.1.35"
    if not f.is_eka_ac(dhatu) and not dhatu.has_text_in(("jAgf", "UrRu")):
        return "3.1.35.v1"
    if dhatu.has_adi(_IC) and is_guru(dhatu) and not dhatu.has_u("fCa~"):
        # 3.1.36 ijAdeS ca gurumato 'nfcCaH
        return "3.1.36"
    if dhatu.has_text_in(("day", "ay", "As")):
        # 3.1.37 dayAyAsaS ca
        return "3.1.37"
    return None


def _try_am(p: Prakriya, i_tin: int) -> bool:
    i = p.find_last(Tag.Dhatu)
    if i is None:
        return False
    rule = _am_rule(p.get(i))
    if rule is None:
        return False

    am = Term.make_upadesha("Am")
    am.add_tag(Tag.Pratyaya)
    p.insert_after(i, am)
    p.step(rule)

    # 3.1.40 kfY cAnuprayujyate liwi
    kf = Term.make_dhatu("qukf\\Y", 8)
    kf.set_text("kf")
    p.insert_before(i_tin + 1, kf)
    p.step("3.1.40")
    return True


def run(p: Prakriya) -> None:
    i_tin = p.find_last(Tag.Tin)
    if i_tin is None:
        return
    tin = p.get(i_tin)

    if tin.has_lakshana("li~w"):
        _try_am(p, i_tin)
        return

    if tin.has_lakshana("lf~w"):
        # 3.1.33 syatAsI lxluwoH
        _add("3.1.33", p, "sya")
        return

    if not tin.has_tag(Tag.Sarvadhatuka):
        return

    if p.any([Tag.Karmani, Tag.Bhave]):
        # 3.1.67 sArvaDAtuke yak
        _add("3.1.67", p, "yak")
        return

    entry = _GANA_VIKARANA.get(_root_gana(p))
    if entry is not None:
        rule, u = entry
        _add(rule, p, u)
