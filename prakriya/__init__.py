"""
prakriya
--------

A rule-by-rule derivation engine for Sanskrit verb forms.

    from prakriya import Ashtadhyayi, Dhatu, Lakara, TinantaArgs

    results = Ashtadhyayi().derive_tinantas(
        Dhatu(upadesha="BU", gana=1), TinantaArgs(lakara=Lakara.LAT)
    )
    results[0].text()     # "Bavati"
    results[0].history    # every rule applied, with the text after it
"""

from prakriya.args import Antargana, Dhatu, Lakara, Prayoga, Purusha, TinantaArgs, Vacana
from prakriya.ashtadhyayi import Ashtadhyayi
from prakriya.core import Prakriya, PrakriyaStack, RuleDecision, RuleOption, Step
from prakriya.errors import (
    ArgumentError,
    PrakriyaError,
    PratyaharaError,
    UnsupportedDerivationError,
)
from prakriya.sounds import SoundSet, SoundTable, map_sounds, s
from prakriya.tags import Tag
from prakriya.term import Term, TermView

__version__ = "0.3.0"

__all__ = [
    "Antargana",
    "ArgumentError",
    "Ashtadhyayi",
    "Dhatu",
    "Lakara",
    "Prakriya",
    "PrakriyaError",
    "PrakriyaStack",
    "PratyaharaError",
    "Prayoga",
    "Purusha",
    "RuleDecision",
    "RuleOption",
    "SoundSet",
    "SoundTable",
    "Step",
    "Tag",
    "Term",
    "TermView",
    "TinantaArgs",
    "UnsupportedDerivationError",
    "Vacana",
    "map_sounds",
    "s",
]
