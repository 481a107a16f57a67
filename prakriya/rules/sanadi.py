"""
SANADI (3.1.5 - 3.1.32)
-----------------------

Suffixes that derive a new root from a root. Only the curadi Ric is
covered.
"""

from __future__ import annotations

from prakriya.core import Prakriya
from prakriya.rules import it_samjna
from prakriya.tags import Tag
from prakriya.term import Term


def run(p: Prakriya) -> None:
    i = p.find_last(Tag.Dhatu)
    if i is None or not p.has(i, lambda t: t.has_gana(10)):
        return

    # 3.1.25 satyApa-pASa-rUpa-vIRA-tUla-Sloka-senA-loma-tvaca-varma-varRa-cUrRa-curAdiByo Ric
    ric = Term.make_upadesha("Ric")
    ric.add_tag(Tag.Pratyaya)
    p.insert_after(i, ric)
    p.step("3.1.25")
    it_samjna.run(p, i + 1)

    # 3.1.32 sanAdyantA DAtavaH
    p.op_term("3.1.32", i + 1, lambda t: t.add_tag(Tag.Dhatu))
