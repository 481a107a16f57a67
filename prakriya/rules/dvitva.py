"""
DVITVA (6.1.1 - 6.1.12)
-----------------------

Doubles the root before a lit ending. The copy is the abhyasa; the copy
and the root together are abhyasta.
"""

from __future__ import annotations

from prakriya.core import Prakriya
from prakriya.tags import Tag
from prakriya.term import Term


def run(p: Prakriya) -> None:
    # The root right before the ending: kf, when Am has been added.
    i = p.find_last(Tag.Dhatu)
    i_tin = p.find_last(Tag.Tin)
    if i is None or i_tin is None:
        return
    if not p.has(i_tin, lambda t: t.has_lakshana("li~w")):
        return
    dhatu = p.get(i)
    if dhatu.has_tag(Tag.Abhyasta):
        return

    # 6.1.8 liwi DAtor anaByAsasya
    abhyasa = Term.make_text(dhatu.text)
    abhyasa.gana = dhatu.gana
    p.insert_before(i, abhyasa)
    p.step("6.1.8")

    # 6.1.4 pUrvo 'ByAsaH
    p.op_term("6.1.4", i, lambda t: t.add_tag(Tag.Abhyasa))

    # 6.1.5 uBe aByastam
    def abhyasta(p: Prakriya) -> None:
        p.set(i, lambda t: t.add_tag(Tag.Abhyasta))
        p.set(i + 1, lambda t: t.add_tag(Tag.Abhyasta))

    p.op("6.1.5", abhyasta)
