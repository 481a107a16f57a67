"""
prakriya/args.py
----------------

Typed arguments for a derivation.

Before a derivation starts, the caller must say which root to use and
which grammatical category to produce (lakara, purusha, vacana,
prayoga). These are modelled as str Enums and frozen pydantic models so
that typos fail at the boundary, before any Prakriya exists.

Every enum accepts its ``.value`` via ``from_str``; unknown strings raise
``ArgumentError``.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from prakriya.errors import ArgumentError
from prakriya.tags import Tag


class _ParseableEnum(str, Enum):
    @classmethod
    def from_str(cls, value: str):
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ArgumentError(
                f"Could not parse {cls.__name__} from {value!r} (expected one of: {choices})"
            ) from None

    def __str__(self) -> str:
        return self.value


class Antargana(_ParseableEnum):
    """Sub-lists of a gana whose members behave specially."""

    KUTADI = "kutadi"  # tudadi roots after which suffixes are Nit
    AKUSMIYA = "akusmiya"  # curadi roots that are always atmanepadi


class Prayoga(_ParseableEnum):
    KARTARI = "kartari"
    KARMANI = "karmani"
    BHAVE = "bhave"

    def as_tag(self) -> Tag:
        return {
            Prayoga.KARTARI: Tag.Kartari,
            Prayoga.KARMANI: Tag.Karmani,
            Prayoga.BHAVE: Tag.Bhave,
        }[self]


class Purusha(_ParseableEnum):
    PRATHAMA = "prathama"
    MADHYAMA = "madhyama"
    UTTAMA = "uttama"

    def as_tag(self) -> Tag:
        return {
            Purusha.PRATHAMA: Tag.Prathama,
            Purusha.MADHYAMA: Tag.Madhyama,
            Purusha.UTTAMA: Tag.Uttama,
        }[self]


class Vacana(_ParseableEnum):
    EKA = "eka"
    DVI = "dvi"
    BAHU = "bahu"

    def as_tag(self) -> Tag:
        return {
            Vacana.EKA: Tag.Ekavacana,
            Vacana.DVI: Tag.Dvivacana,
            Vacana.BAHU: Tag.Bahuvacana,
        }[self]


class Lakara(_ParseableEnum):
    """The ten tense/mood categories (with lin split into its two uses)."""

    LAT = "lat"
    LIT = "lit"
    LUT = "lut"
    LRT = "lrt"
    LET = "let"
    LOT = "lot"
    LAN = "lan"
    VIDHILIN = "vidhilin"
    ASHIRLIN = "ashirlin"
    LUN = "lun"
    LRN = "lrn"

    @property
    def upadesha(self) -> str:
        return _LAKARA_UPADESHA[self]

    def is_sarvadhatuka(self) -> bool:
        return self in (Lakara.LAT, Lakara.LOT, Lakara.LAN, Lakara.VIDHILIN)

    def is_ardhadhatuka(self) -> bool:
        return not self.is_sarvadhatuka()

    def is_nit(self) -> bool:
        return self in (
            Lakara.LAN,
            Lakara.VIDHILIN,
            Lakara.ASHIRLIN,
            Lakara.LUN,
            Lakara.LRN,
        )

    def is_wit(self) -> bool:
        return not self.is_nit()


_LAKARA_UPADESHA = {
    Lakara.LAT: "la~w",
    Lakara.LIT: "li~w",
    Lakara.LUT: "lu~w",
    Lakara.LRT: "lf~w",
    Lakara.LET: "le~w",
    Lakara.LOT: "lo~w",
    Lakara.LAN: "la~N",
    Lakara.VIDHILIN: "li~N",
    Lakara.ASHIRLIN: "li~N",
    Lakara.LUN: "lu~N",
    Lakara.LRN: "lf~N",
}


class Dhatu(BaseModel):
    """
    A verb root as stated in the Dhatupatha.

    ``upadesha`` is SLP1 with accent and marker notation (``"BU"``,
    ``"RI\\\\Y"``, ``"tu\\\\da~^"``).
    """

    model_config = ConfigDict(frozen=True)

    upadesha: str = Field(min_length=1)
    gana: int = Field(ge=1, le=10)
    antargana: Optional[Antargana] = None
    number: Optional[int] = None

    def code(self) -> str:
        """Lookup code in the "01.0001" style."""
        if self.number is None:
            return f"{self.gana:02d}"
        return f"{self.gana:02d}.{self.number:04d}"


class TinantaArgs(BaseModel):
    """Category selector for a finite verb form."""

    model_config = ConfigDict(frozen=True)

    lakara: Lakara
    purusha: Purusha = Purusha.PRATHAMA
    vacana: Vacana = Vacana.EKA
    prayoga: Prayoga = Prayoga.KARTARI


__all__ = [
    "Antargana",
    "Dhatu",
    "Lakara",
    "Prayoga",
    "Purusha",
    "TinantaArgs",
    "Vacana",
]
