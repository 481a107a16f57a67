"""
LA-KARYA
--------

Adds the abstract tense/mood suffix (lakara) after the root.
"""

from __future__ import annotations

from prakriya.args import Lakara
from prakriya.core import Prakriya
from prakriya.rules import it_samjna
from prakriya.tags import Tag
from prakriya.term import Term

_RULES = {
    Lakara.LAT: "3.3.123",
    Lakara.LIT: "3.2.114",
    Lakara.LUT: "3.3.15",
    Lakara.LRT: "3.3.13",
    Lakara.LET: "3.4.7",
    Lakara.LOT: "3.3.162",
    Lakara.LAN: "3.2.111",
    Lakara.VIDHILIN: "3.3.161",
    Lakara.ASHIRLIN: "3.3.173",
    Lakara.LUN: "3.2.110",
    Lakara.LRN: "3.3.139",
}


def run(p: Prakriya, lakara: Lakara) -> None:
    i = p.find_last(Tag.Dhatu)
    if i is None:
        return

    if lakara == Lakara.ASHIRLIN:
        p.add_tag(Tag.Ashih)

    la = Term.make_upadesha(lakara.upadesha)
    la.add_tag(Tag.Pratyaya)
    p.insert_after(i, la)
    p.step(_RULES[lakara])
    it_samjna.run(p, i + 1)
