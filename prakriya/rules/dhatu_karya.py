"""
DHATU-KARYA
-----------

Brings the root into the derivation: creates the dhatu term, strips its
markers, and applies the rules that rewrite a root as soon as it is
stated (initial z -> s, initial R -> n, the num augment of idit roots).
"""

from __future__ import annotations

from prakriya import operators as op
from prakriya.args import Antargana, Dhatu
from prakriya.core import Prakriya
from prakriya.rules import it_samjna
from prakriya.tags import Tag
from prakriya.term import Term

# vArttika: these keep their initial z.
_NO_SATVA = ("zWiv", "zvazk")


def _satva_and_natva(p: Prakriya, i: int) -> None:
    t = p.get(i)
    if t is None:
        return

    if t.has_adi("z"):
        if t.has_text_in(_NO_SATVA):
            p.step("6.1.64.v1")
        elif t.has_prefix_in(("zw", "zW", "zR")):
            # The following retroflex reverts with it.
            def revert(term: Term) -> None:
                term.text = term.text.replace("zw", "st", 1).replace("zW", "sT", 1).replace("zR", "sn", 1)

            p.op_term("6.1.64.v2", i, revert)
        else:
            # 6.1.64 DAtvAdeH zaH saH
            p.op_term("6.1.64", i, op.adi("s"))
    elif t.has_adi("R"):
        # 6.1.65 Ro naH
        p.op_term("6.1.65", i, op.adi("n"))


def run(p: Prakriya, dhatu: Dhatu) -> int:
    """Push ``dhatu`` as a new term and return its index."""
    p.push(Term.make_dhatu(dhatu.upadesha, dhatu.gana, dhatu.number))
    i = len(p.terms) - 1
    p.step("start")

    # 1.3.1 bhUvAdayo DAtavaH
    p.op_term("1.3.1", i, op.add_tag(Tag.Dhatu))
    it_samjna.run(p, i)
    _satva_and_natva(p, i)

    # 7.1.58 idito num DAtoH
    p.term_rule("7.1.58", i, lambda t: t.has_tag(Tag.idit), op.mit("n"))

    if dhatu.antargana == Antargana.AKUSMIYA:
        p.op("kusmadi", lambda p: p.add_tag(Tag.Atmanepada))

    return i
