"""
ASHTADHYAYI DRIVER
------------------

Runs the rule modules, in order, to derive finite verb forms (tinantas).

A single call can yield several forms: optional rules (and roots that
take either set of endings) fork the derivation. ``derive_tinantas``
hands the rule sequence to a ``PrakriyaStack``, which re-runs it once per
reachable combination of optional-rule choices and keeps one Prakriya
per distinct result.

Usage
=====

    from prakriya import Ashtadhyayi, Dhatu, Lakara, TinantaArgs

    a = Ashtadhyayi()
    args = TinantaArgs(lakara=Lakara.LAT)
    [p.text() for p in a.derive_tinantas(Dhatu(upadesha="BU", gana=1), args)]
    # ["Bavati"]
"""

from __future__ import annotations

from typing import List, Optional

from prakriya.args import Dhatu, Lakara, TinantaArgs
from prakriya.config import settings
from prakriya.core import Prakriya, PrakriyaStack
from prakriya.errors import UnsupportedDerivationError
from prakriya.rules import (
    abhyasasya,
    ac_sandhi,
    angasya,
    atidesha,
    atmanepada,
    dhatu_karya,
    dvitva,
    it_agama,
    la_karya,
    samjna,
    sanadi,
    tin_pratyaya,
    tripadi,
    vikarana,
)
from prakriya.sounds import SoundTable
from utils.logging_setup import get_logger

logger = get_logger(__name__)

SUPPORTED_GANAS = (1, 4, 6, 10)
SUPPORTED_LAKARAS = (Lakara.LAT, Lakara.LIT, Lakara.LRT, Lakara.LOT, Lakara.LAN)


def check_supported(dhatu: Dhatu, lakara: Lakara) -> None:
    """Raise UnsupportedDerivationError for combinations the rules do not cover."""
    if dhatu.gana not in SUPPORTED_GANAS:
        raise UnsupportedDerivationError(f"Gana {dhatu.gana} is not supported")
    if lakara not in SUPPORTED_LAKARAS:
        raise UnsupportedDerivationError(f"Lakara {lakara.value} is not supported")


def _derive(p: Prakriya, dhatu: Dhatu, args: TinantaArgs) -> None:
    p.add_tags([args.prayoga.as_tag(), args.purusha.as_tag(), args.vacana.as_tag()])

    dhatu_karya.run(p, dhatu)
    sanadi.run(p)
    la_karya.run(p, args.lakara)
    atmanepada.run(p)
    tin_pratyaya.adesha(p, args.purusha, args.vacana)
    samjna.run(p)
    if args.lakara == Lakara.LIT:
        tin_pratyaya.siddhi(p, args.lakara)

    vikarana.run(p)
    samjna.run(p)
    if args.lakara != Lakara.LIT:
        tin_pratyaya.siddhi(p, args.lakara)
    atidesha.run(p)
    it_agama.run(p)

    dvitva.run(p)
    abhyasasya.run(p)
    angasya.run(p)

    ac_sandhi.run(p)
    tripadi.run(p)


class Ashtadhyayi:
    """
    Entry point for derivations.

    ``log_steps`` controls whether each Prakriya keeps its step history;
    turning it off changes nothing but the history. ``sounds`` replaces the
    shared sound table for every derivation this instance runs.
    """

    def __init__(self, log_steps: Optional[bool] = None, sounds: Optional[SoundTable] = None):
        self.log_steps = settings.LOG_STEPS if log_steps is None else log_steps
        self.sounds = sounds

    def derive_tinantas(self, dhatu: Dhatu, args: TinantaArgs) -> List[Prakriya]:
        """Return one Prakriya per distinct form, in the order found."""
        check_supported(dhatu, args.lakara)

        logger.debug(
            "derivation_started",
            dhatu=dhatu.upadesha,
            gana=dhatu.gana,
            lakara=args.lakara.value,
            purusha=args.purusha.value,
            vacana=args.vacana.value,
            prayoga=args.prayoga.value,
        )

        stack = PrakriyaStack(log_steps=self.log_steps, sounds=self.sounds)
        results = stack.find_all(lambda p: _derive(p, dhatu, args))

        logger.debug(
            "derivation_finished",
            dhatu=dhatu.upadesha,
            forms=[p.text() for p in results],
        )
        return results


__all__ = ["Ashtadhyayi", "SUPPORTED_GANAS", "SUPPORTED_LAKARAS", "check_supported"]
