"""
AC-SANDHI (6.1.66 - 6.1.111)
----------------------------

Vowel sandhi inside a word. Each rule is one ``char_rule`` pass over the
derivation's full text and can be run on its own; ``run`` applies them in
the order a verb form needs.
"""

from __future__ import annotations

from prakriya.char_view import char_rule, get_at, set_at, xy
from prakriya.core import Prakriya
from prakriya.sounds import is_ac, s, savarna, to_dirgha, to_guna, to_vrddhi
from prakriya.tags import Tag

_AK = s("ak")
_IK = s("ik")
_EC = s("ec")
_VAL = s("val")
_A = frozenset("aA")
_GUNA = frozenset("aeo")

_AYADI = {"e": "ay", "E": "Ay", "o": "av", "O": "Av"}
_YAN = {"i": "y", "I": "y", "u": "v", "U": "v", "f": "r", "F": "r", "x": "l", "X": "l"}


def _merge(p: Prakriya, i: int, sub: str) -> None:
    # The later index goes first so that ``i`` still points at the same sound.
    set_at(p, i + 1, "")
    set_at(p, i, sub)


def _at_boundary(p: Prakriya, i: int) -> bool:
    return get_at(p, i) is not get_at(p, i + 1)


def aw_vrddhi(p: Prakriya) -> int:
    """6.1.90 AwaS ca"""

    def filter(p: Prakriya, text: str, i: int) -> bool:
        if i + 1 >= len(text) or not is_ac(text[i + 1]):
            return False
        t = get_at(p, i)
        return t is not None and t.has_u("Aw") and _at_boundary(p, i)

    def operator(p: Prakriya, text: str, i: int) -> bool:
        _merge(p, i, to_vrddhi(text[i + 1]))
        p.step("6.1.90")
        return True

    return char_rule(p, filter, operator)


def vyor_lopa(p: Prakriya) -> int:
    """6.1.66 lopo vyor vali"""

    def filter(p: Prakriya, text: str, i: int) -> bool:
        if i + 1 >= len(text) or text[i] not in "yv" or text[i + 1] not in _VAL:
            return False
        t = get_at(p, i)
        return t is not None and not t.has_tag(Tag.Dhatu)

    def operator(p: Prakriya, text: str, i: int) -> bool:
        set_at(p, i, "")
        p.step("6.1.66")
        return True

    return char_rule(p, filter, operator)


def ato_gune(p: Prakriya) -> int:
    """6.1.97 ato guRe"""

    def filter(p: Prakriya, text: str, i: int) -> bool:
        return (
            i + 1 < len(text)
            and text[i] == "a"
            and text[i + 1] in _GUNA
            and _at_boundary(p, i)
        )

    def operator(p: Prakriya, text: str, i: int) -> bool:
        set_at(p, i, "")
        p.step("6.1.97")
        return True

    return char_rule(p, filter, operator)


def ayadi(p: Prakriya) -> int:
    """6.1.78 eco 'yavAyAvaH"""

    def operator(p: Prakriya, text: str, i: int) -> bool:
        set_at(p, i, _AYADI[text[i]])
        p.step("6.1.78")
        return True

    return char_rule(p, xy(lambda x, y: x in _EC and is_ac(y)), operator)


def savarna_dirgha(p: Prakriya) -> int:
    """6.1.101 akaH savarRe dIrGaH"""

    def operator(p: Prakriya, text: str, i: int) -> bool:
        _merge(p, i, to_dirgha(text[i]))
        p.step("6.1.101")
        return True

    return char_rule(p, xy(lambda x, y: x in _AK and y in _AK and y in savarna(x)), operator)


def yan(p: Prakriya) -> int:
    """6.1.77 iko yaR aci"""

    def operator(p: Prakriya, text: str, i: int) -> bool:
        set_at(p, i, _YAN[text[i]])
        p.step("6.1.77")
        return True

    return char_rule(p, xy(lambda x, y: x in _IK and is_ac(y)), operator)


def guna_vrddhi(p: Prakriya) -> int:
    """6.1.87 Ad guRaH and 6.1.88 vfdDir eci"""

    def operator(p: Prakriya, text: str, i: int) -> bool:
        y = text[i + 1]
        if y in _EC:
            _merge(p, i, to_vrddhi(y))
            p.step("6.1.88")
        else:
            _merge(p, i, to_guna(y))
            p.step("6.1.87")
        return True

    return char_rule(p, xy(lambda x, y: x in _A and (y in _IK or y in _EC)), operator)


def run(p: Prakriya) -> None:
    aw_vrddhi(p)
    vyor_lopa(p)
    ato_gune(p)
    ayadi(p)
    savarna_dirgha(p)
    yan(p)
    guna_vrddhi(p)
