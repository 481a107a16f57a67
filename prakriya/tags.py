"""
prakriya/tags.py
----------------

The closed set of labels that can be attached to a term or to a whole
derivation.

Member names keep the grammar's own spelling (SLP1 transliteration), so
case is significant: ``Tag.Nit`` (the ``N`` marker) and ``Tag.nit`` (the
``n`` marker) are different tags.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict


class Tag(str, Enum):
    # --- Morpheme types ---
    Upasarga = "Upasarga"
    Dhatu = "Dhatu"
    Agama = "Agama"
    Pratyaya = "Pratyaya"
    Vibhakti = "Vibhakti"
    Tin = "Tin"
    Krt = "Krt"
    Sup = "Sup"
    Taddhita = "Taddhita"
    Vikarana = "Vikarana"

    # --- it markers (anubandhas) ---
    adit = "adit"
    Adit = "Adit"
    idit = "idit"
    Idit = "Idit"
    udit = "udit"
    Udit = "Udit"
    fdit = "fdit"
    xdit = "xdit"
    edit = "edit"
    odit = "odit"
    kit = "kit"
    Nit = "Nit"
    cit = "cit"
    Yit = "Yit"
    wit = "wit"
    Rit = "Rit"
    nit = "nit"
    pit = "pit"
    mit = "mit"
    lit = "lit"
    Sit = "Sit"
    zit = "zit"
    irit = "irit"
    YIt = "YIt"
    wvit = "wvit"
    qvit = "qvit"

    # --- Accent ---
    Anudatta = "Anudatta"
    Svarita = "Svarita"
    anudattet = "anudattet"
    svaritet = "svaritet"

    # --- Pada ---
    Parasmaipada = "Parasmaipada"
    Atmanepada = "Atmanepada"

    # --- Prayoga ---
    Kartari = "Kartari"
    Karmani = "Karmani"
    Bhave = "Bhave"

    # --- Purusha ---
    Prathama = "Prathama"
    Madhyama = "Madhyama"
    Uttama = "Uttama"

    # --- Vacana ---
    Ekavacana = "Ekavacana"
    Dvivacana = "Dvivacana"
    Bahuvacana = "Bahuvacana"

    # --- Semantic conditions ---
    Ashih = "Ashih"

    # --- Dvitva ---
    Abhyasa = "Abhyasa"
    Abhyasta = "Abhyasta"

    # --- Dhatuka ---
    Sarvadhatuka = "Sarvadhatuka"
    Ardhadhatuka = "Ardhadhatuka"

    # --- Flags on a term ---
    FlagGunaApavada = "FlagGunaApavada"

    def __str__(self) -> str:
        return self.value


# Marker sound -> tag it produces when the sound is dropped as an it.
IT_TAGS: Dict[str, Tag] = {
    "a": Tag.adit,
    "A": Tag.Adit,
    "i": Tag.idit,
    "I": Tag.Idit,
    "u": Tag.udit,
    "U": Tag.Udit,
    "f": Tag.fdit,
    "x": Tag.xdit,
    "e": Tag.edit,
    "o": Tag.odit,
    "k": Tag.kit,
    "N": Tag.Nit,
    "c": Tag.cit,
    "Y": Tag.Yit,
    "w": Tag.wit,
    "R": Tag.Rit,
    "n": Tag.nit,
    "p": Tag.pit,
    "m": Tag.mit,
    "l": Tag.lit,
    "S": Tag.Sit,
    "z": Tag.zit,
}


def parse_it(sound: str) -> Tag:
    """Return the it-tag for a marker sound, e.g. ``"k" -> Tag.kit``."""
    try:
        return IT_TAGS[sound]
    except KeyError:
        raise ValueError(f"{sound!r} is not an it marker") from None


__all__ = ["Tag", "IT_TAGS", "parse_it"]
