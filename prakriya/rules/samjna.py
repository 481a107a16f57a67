"""
SAMJNA (3.4.113 - 3.4.117)
--------------------------

Classifies each suffix as sarvadhatuka or ardhadhatuka. Guna, it-agama
and most of the vikarana rules read these tags, so this runs again each
time new suffixes enter the derivation.
"""

from __future__ import annotations

from prakriya.core import Prakriya
from prakriya.tags import Tag

_DHATUKA = (Tag.Sarvadhatuka, Tag.Ardhadhatuka)


def run(p: Prakriya) -> None:
    for i, t in enumerate(p.terms):
        if not t.has_tag(Tag.Pratyaya) or t.has_tag_in(_DHATUKA):
            continue

        if t.has_tag(Tag.Tin) and t.has_lakshana("li~w"):
            # 3.4.115 liw ca
            p.op_term("3.4.115", i, lambda t: t.add_tag(Tag.Ardhadhatuka))
        elif t.has_tag(Tag.Tin) or t.has_tag(Tag.Sit):
            # 3.4.113 tiNSit sArvaDAtukam
            p.op_term("3.4.113", i, lambda t: t.add_tag(Tag.Sarvadhatuka))
        else:
            # 3.4.114 ArDaDAtukaM SezaH
            p.op_term("3.4.114", i, lambda t: t.add_tag(Tag.Ardhadhatuka))
