"""
SOUNDS
------

Sound classes and articulatory features for SLP1-encoded text.

Two things live here:

* ``s(expr)`` decodes the compact sound-class notation used throughout the
  rule modules: literal sounds (``"h"``), homorganic shorthands (``"ku~"``,
  ``"a"``) and pratyaharas (``"ac"``, ``"hal"``, ``"iR2"``).
* ``SoundTable`` holds one ``Uccarana`` (place, voicing, aspiration,
  closure) per sound and answers ``map_sounds(xs, ys)``: for every sound
  in ``xs``, the articulatorily closest sound in ``ys``.

Both are immutable once built. ``SoundTable.shared()`` is built lazily on
first use and every Prakriya holds a reference to it unless handed
another table; rules reach it through ``p.sounds``.

Usage
=====

    from prakriya.sounds import s, map_sounds

    AC = s("ac")
    "a" in AC                      # True
    map_sounds("Jal", "jaS")["K"]  # "g"
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Dict, FrozenSet, Iterator, List, Optional, Tuple

from prakriya.errors import PratyaharaError

# ---------------------------------------------------------------------------
# Static alphabet data
# ---------------------------------------------------------------------------

# The fourteen Shiva sutras: (sounds, closing marker).
SUTRAS: Tuple[Tuple[str, str], ...] = (
    ("aiu", "R"),
    ("fx", "k"),
    ("eo", "N"),
    ("EO", "c"),
    ("hyvr", "w"),
    ("l", "R"),
    ("YmNRn", "m"),
    ("JB", "Y"),
    ("GQD", "z"),
    ("jbgqd", "S"),
    ("KPCWTcwt", "v"),
    ("kp", "y"),
    ("Szs", "r"),
    ("h", "l"),
)

# Traditional order. Used for iteration, display and tie-breaking.
ORDER = "aAiIuUfFxXeEoOMHkKgGNcCjJYwWqQRtTdDnpPbBmyrlvSzsh"
_RANK: Dict[str, int] = {c: i for i, c in enumerate(ORDER)}

_AK = ("a", "A", "i", "I", "u", "U", "f", "F", "x", "X")

_SAVARNA_CLASSES = (
    "aA",
    "iI",
    "uU",
    "fFxX",
    "kKgGN",
    "cCjJY",
    "wWqQR",
    "tTdDn",
    "pPbBm",
)

_HRASVA_TO_DIRGHA = {"a": "A", "i": "I", "u": "U", "f": "F", "x": "X"}
_DIRGHA = frozenset("AIUFXeEoO")


# ---------------------------------------------------------------------------
# SoundSet
# ---------------------------------------------------------------------------


class SoundSet:
    """
    An immutable, ordered set of single-character sounds.

    Iteration follows the traditional order (``ORDER``), whatever order the
    sounds were supplied in. ``None`` is never a member, so
    ``term.adi() in SOME_SET`` is safe on empty terms.
    """

    __slots__ = ("_items", "_members")

    def __init__(self, sounds: str):
        members = frozenset(sounds)
        self._members: FrozenSet[str] = members
        self._items: Tuple[str, ...] = tuple(
            sorted(members, key=lambda c: (_RANK.get(c, len(ORDER)), c))
        )

    def __contains__(self, sound: object) -> bool:
        return sound in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SoundSet):
            return NotImplemented
        return self._members == other._members

    def __hash__(self) -> int:
        return hash(self._members)

    def __repr__(self) -> str:
        return f"SoundSet({self.to_string()!r})"

    def items(self) -> Tuple[str, ...]:
        return self._items

    def to_string(self) -> str:
        return "".join(self._items)


def savarna(sound: str) -> SoundSet:
    """Return the homorganic class of ``sound`` (just the sound itself if it has none)."""
    for cls in _SAVARNA_CLASSES:
        if sound in cls:
            return SoundSet(cls)
    return SoundSet(sound)


def _pratyahara(expr: str) -> str:
    first = expr[0]
    use_second = expr.endswith("R2")
    marker = "R" if use_second else expr[-1]

    if len(expr) < 2 or not any(marker == it for _, it in SUTRAS):
        raise PratyaharaError(expr, "unknown closing marker")

    started = False
    saw_first = False
    closed = False
    out: List[str] = []
    for sounds, it in SUTRAS:
        for sound in sounds:
            if sound == first:
                started = True
            if started:
                out.append(sound)
                # Long vowels are implicit in the sutras.
                if sound in _HRASVA_TO_DIRGHA:
                    out.append(_HRASVA_TO_DIRGHA[sound])
        if started and it == marker:
            if use_second and not saw_first:
                saw_first = True
            else:
                closed = True
                break

    if not out:
        raise PratyaharaError(expr)
    if not closed:
        raise PratyaharaError(expr, f"{first!r} comes after its marker {marker!r}")
    return "".join(out)


@lru_cache(maxsize=None)
def s(expr: str) -> SoundSet:
    """
    Decode a whitespace-separated sound-class expression.

    Each token is one of:
      - ``X~`` (e.g. ``ku~``) or a simple vowel (``a``, ``I``, ...): its savarna class;
      - any other single character: that sound;
      - anything else: a pratyahara, optionally with the ``R2`` suffix.

    Raises PratyaharaError if the expression yields no sounds.
    """
    tokens = expr.split()
    if not tokens:
        raise PratyaharaError(expr, "empty expression")

    buf: List[str] = []
    for token in tokens:
        if token.endswith("u~") or token in _AK:
            buf.append(savarna(token[0]).to_string())
        elif len(token) == 1:
            buf.append(token)
        else:
            buf.append(_pratyahara(token))

    result = SoundSet("".join(buf))
    if not len(result):
        raise PratyaharaError(expr)
    return result


# ---------------------------------------------------------------------------
# Simple vowel helpers
# ---------------------------------------------------------------------------


def is_ac(sound: Optional[str]) -> bool:
    return sound in s("ac")


def is_hal(sound: Optional[str]) -> bool:
    return sound in s("hal")


def is_hrasva(sound: Optional[str]) -> bool:
    return sound in _HRASVA_TO_DIRGHA


def is_dirgha(sound: Optional[str]) -> bool:
    return sound in _DIRGHA


def is_samyoganta(text: str) -> bool:
    return len(text) >= 2 and is_hal(text[-1]) and is_hal(text[-2])


def to_guna(sound: str) -> Optional[str]:
    return {"i": "e", "I": "e", "u": "o", "U": "o", "f": "ar", "F": "ar", "x": "al", "X": "al"}.get(sound)


def to_vrddhi(sound: str) -> Optional[str]:
    return {
        "a": "A", "A": "A",
        "i": "E", "I": "E",
        "u": "O", "U": "O",
        "f": "Ar", "F": "Ar",
        "x": "Al", "X": "Al",
        "e": "E", "E": "E",
        "o": "O", "O": "O",
    }.get(sound)


# 1.1.48 ec ig ghrasvAdeze
def to_hrasva(sound: str) -> Optional[str]:
    return {
        "a": "a", "A": "a",
        "i": "i", "I": "i",
        "u": "u", "U": "u",
        "f": "f", "F": "f",
        "x": "x", "X": "x",
        "e": "i", "E": "i",
        "o": "u", "O": "u",
    }.get(sound)


def to_dirgha(sound: str) -> Optional[str]:
    if sound in _HRASVA_TO_DIRGHA:
        return _HRASVA_TO_DIRGHA[sound]
    if sound in _DIRGHA:
        return sound
    return None


# ---------------------------------------------------------------------------
# Articulatory features
# ---------------------------------------------------------------------------


class Sthana(str, Enum):
    KANTHA = "kantha"
    TALU = "talu"
    MURDHA = "murdha"
    DANTA = "danta"
    OSHTHA = "oshtha"
    NASIKA = "nasika"
    KANTHA_TALU = "kantha-talu"
    KANTHA_OSHTHA = "kantha-oshtha"
    DANTA_OSHTHA = "danta-oshtha"


class Ghosha(str, Enum):
    GHOSHAVAT = "ghoshavat"
    AGHOSHA = "aghosha"


class Prana(str, Enum):
    MAHAPRANA = "mahaprana"
    ALPAPRANA = "alpaprana"


class Prayatna(str, Enum):
    VIVRTA = "vivrta"
    ISHAT = "ishat"
    SPRSHTA = "sprshta"


@dataclass(frozen=True)
class Uccarana:
    """How a sound is pronounced."""

    sthana: Tuple[Sthana, ...]
    ghosha: Ghosha
    prana: Prana
    prayatna: Prayatna

    def distance(self, other: "Uccarana") -> int:
        dist = 0
        if self.ghosha != other.ghosha:
            dist += 1
        if self.prana != other.prana:
            dist += 1
        if self.prayatna != other.prayatna:
            dist += 1

        # Places of articulation score as a set difference, so that a sound
        # with two places partially matches a sound with one.
        sthana_dist = len(self.sthana) + len(other.sthana)
        for place in self.sthana:
            if place in other.sthana:
                sthana_dist -= 2
        return dist + sthana_dist


SoundMap = Dict[str, str]


class SoundTable:
    """
    Read-only table of sound features.

    ``SoundTable.shared()`` returns the process-wide instance that every
    Prakriya uses by default. Calling ``SoundTable()`` builds a separate
    table, optionally over a substitute feature table, which can then be
    handed to a Prakriya or a driver.
    """

    _instance: Optional["SoundTable"] = None

    def __init__(self, props: Optional[Dict[str, Uccarana]] = None):
        self._props: Optional[Dict[str, Uccarana]] = props
        self._maps: Dict[Tuple[str, str], SoundMap] = {}

    @classmethod
    def shared(cls) -> "SoundTable":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def props(self) -> Dict[str, Uccarana]:
        if self._props is None:
            self._props = _build_props()
        return self._props

    def uccarana(self, sound: str) -> Uccarana:
        return self.props[sound]

    def map_sounds(self, xs: str, ys: str) -> SoundMap:
        """
        Map every sound in ``s(xs)`` to its closest sound in ``s(ys)``.

        Ties go to the sound that comes first in traditional order. The
        returned dict is shared; callers must not mutate it.
        """
        key = (xs, ys)
        if key not in self._maps:
            props = self.props
            candidates = s(ys).items()
            mapping: SoundMap = {}
            for x in s(xs):
                x_props = props[x]
                # min() keeps the first of several equal keys.
                mapping[x] = min(candidates, key=lambda y: props[y].distance(x_props))
            self._maps[key] = mapping
        return self._maps[key]


def _build_props() -> Dict[str, Uccarana]:
    sthana: Dict[str, List[Sthana]] = {}
    for expr, place in (
        ("a ku~ h H", Sthana.KANTHA),
        ("i cu~ y S", Sthana.TALU),
        ("f wu~ r z", Sthana.MURDHA),
        ("x tu~ l s", Sthana.DANTA),
        ("u pu~", Sthana.OSHTHA),
        ("e E", Sthana.KANTHA_TALU),
        ("o O", Sthana.KANTHA_OSHTHA),
        ("v", Sthana.DANTA_OSHTHA),
    ):
        for sound in s(expr):
            sthana.setdefault(sound, []).append(place)
    for sound in s("Yam M"):
        sthana.setdefault(sound, []).append(Sthana.NASIKA)

    def flatten(data) -> Dict[str, Enum]:
        out: Dict[str, Enum] = {}
        for expr, value in data:
            for sound in s(expr):
                out[sound] = value
        return out

    ghosha = flatten([("ac haS M", Ghosha.GHOSHAVAT), ("Kar H", Ghosha.AGHOSHA)])
    prana = flatten(
        [
            ("ac yam jaS car M", Prana.ALPAPRANA),
            ("K G C J W Q T D P B h", Prana.MAHAPRANA),
        ]
    )
    prayatna = flatten(
        [
            ("yaR Sar", Prayatna.ISHAT),
            ("ac h", Prayatna.VIVRTA),
            ("Yay", Prayatna.SPRSHTA),
        ]
    )

    props: Dict[str, Uccarana] = {}
    for sound in s("al H M"):
        props[sound] = Uccarana(
            sthana=tuple(sthana.get(sound, ())),
            ghosha=ghosha.get(sound, Ghosha.AGHOSHA),
            prana=prana.get(sound, Prana.ALPAPRANA),
            prayatna=prayatna.get(sound, Prayatna.VIVRTA),
        )
    return props


def map_sounds(xs: str, ys: str) -> SoundMap:
    """Shortcut for ``SoundTable.shared().map_sounds(xs, ys)``."""
    return SoundTable.shared().map_sounds(xs, ys)


__all__ = [
    "ORDER",
    "SUTRAS",
    "SoundSet",
    "SoundMap",
    "SoundTable",
    "Uccarana",
    "s",
    "savarna",
    "map_sounds",
    "is_ac",
    "is_hal",
    "is_hrasva",
    "is_dirgha",
    "is_samyoganta",
    "to_guna",
    "to_vrddhi",
    "to_hrasva",
    "to_dirgha",
]
