"""
ATIDESHA (1.2.1 - 1.2.26)
-------------------------

Rules that make a suffix behave as if it carried a marker it does not
have. Both rules here add kit/Nit, which later blocks guna and vrddhi.
"""

from __future__ import annotations

from prakriya import filters as f
from prakriya import operators as op
from prakriya.core import Prakriya
from prakriya.tags import Tag


def run(p: Prakriya) -> None:
    for i, t in enumerate(p.terms):
        if not t.has_tag(Tag.Pratyaya) or t.has_tag(Tag.pit):
            continue

        if t.has_tag(Tag.Sarvadhatuka):
            if not t.has_tag(Tag.Nit):
                # 1.2.4 sArvaDAtukam apit
                p.op_term("1.2.4", i, op.add_tag(Tag.Nit))
        elif t.has_tag(Tag.Tin) and t.has_lakshana("li~w") and not t.has_tag(Tag.kit):
            i_dhatu = p.find_prev_where(i, f.tag(Tag.Dhatu))
            if i_dhatu is not None and not p.has(i_dhatu, f.is_samyoganta):
                # 1.2.5 asaMyogAl liw kit
                p.op_term("1.2.5", i, op.add_tag(Tag.kit))
