"""
TRIPADI (8.2.1 - 8.4.68)
------------------------

The last three padas of the grammar. Each rule here sees the output of
all earlier rules but none of the later ones, so they run strictly in
order and only once.

Sound correspondences (cu~ -> ku~, Jal -> car, ...) come from the
derivation's own sound table (``p.sounds``), which caches them.
"""

from __future__ import annotations

from prakriya import filters as f
from prakriya import operators as op
from prakriya.char_view import char_rule, get_at, set_at
from prakriya.core import Prakriya
from prakriya.sounds import is_hal, is_hrasva, s, savarna, to_dirgha
from prakriya.tags import Tag

_IK = s("ik")
_JHAL = s("Jal")
_JHASH = s("JaS")
_KHAR = s("Kar")
_CU = s("cu~")
_IN_KU = s("iR2 ku~")
_TU = s("tu~")
_YAM = s("Yam")
_JAY = s("Jay")


def _last_term(p: Prakriya) -> int:
    i = p.find_last_where(f.not_empty)
    return i if i is not None else -1


def _samyoganta_lopa(p: Prakriya) -> None:
    text = p.text()
    if len(text) >= 2 and is_hal(text[-1]) and is_hal(text[-2]):
        # 8.2.23 saMyogAntasya lopaH
        p.op_term("8.2.23", _last_term(p), op.antya(""))


def _cu_to_ku(p: Prakriya) -> None:
    kutva = p.sounds.map_sounds("cu~", "ku~")

    def filter(p: Prakriya, text: str, i: int) -> bool:
        if text[i] not in _CU:
            return False
        return i + 1 == len(text) or text[i + 1] in _JHAL

    def operator(p: Prakriya, text: str, i: int) -> bool:
        set_at(p, i, kutva[text[i]])
        # 8.2.30 coH kuH
        p.step("8.2.30")
        return True

    char_rule(p, filter, operator)


def _rutva(p: Prakriya) -> None:
    i = _last_term(p)
    if p.has(i, f.antya("s")):
        # 8.2.66 sasajuzo ruH
        p.op_term("8.2.66", i, op.antya("r"))


def _upadha_dirgha(p: Prakriya) -> None:
    for i, t in enumerate(p.terms):
        if not t.has_tag(Tag.Dhatu) or not t.has_antya(s("r v")):
            continue
        if not (t.has_upadha(_IK) and is_hrasva(t.upadha())):
            continue
        i_next = p.find_next_where(i, f.not_empty)
        if i_next is not None and p.has(i_next, lambda t: is_hal(t.adi())):
            # 8.2.77 hali ca
            p.op_term("8.2.77", i, op.upadha(to_dirgha(t.upadha())))


def _visarga(p: Prakriya) -> None:
    i = _last_term(p)
    if p.has(i, f.antya("r")):
        # 8.3.15 KaravasAnayor visarjanIyaH
        p.op_term("8.3.15", i, op.antya("H"))


def _anusvara(p: Prakriya) -> None:
    def filter(p: Prakriya, text: str, i: int) -> bool:
        return text[i] in "mn" and i + 1 < len(text) and text[i + 1] in _JHAL

    def operator(p: Prakriya, text: str, i: int) -> bool:
        set_at(p, i, "M")
        # 8.3.24 naS cApadAntasya Jali
        p.step("8.3.24")
        return True

    char_rule(p, filter, operator)


def _satva(p: Prakriya) -> None:
    def filter(p: Prakriya, text: str, i: int) -> bool:
        if text[i] != "s" or i == 0 or text[i - 1] not in _IN_KU:
            return False
        t = get_at(p, i)
        return t is not None and t.has_tag(Tag.Pratyaya)

    def operator(p: Prakriya, text: str, i: int) -> bool:
        set_at(p, i, "z")
        # 8.3.59 AdeSapratyayayoH
        p.step("8.3.59")
        return True

    char_rule(p, filter, operator)


def _assimilate(p: Prakriya, rule: str, group: str, blocked) -> None:
    table = p.sounds.map_sounds("s tu~", group)
    sounds = s(group)

    def filter(p: Prakriya, text: str, i: int) -> bool:
        if i + 1 >= len(text):
            return False
        x, y = text[i], text[i + 1]
        if blocked(x, y):
            return False
        return (x in table and y in sounds) or (x in sounds and y in table)

    def operator(p: Prakriya, text: str, i: int) -> bool:
        x, y = text[i], text[i + 1]
        if x in table:
            set_at(p, i, table[x])
        else:
            set_at(p, i + 1, table[y])
        p.step(rule)
        return True

    char_rule(p, filter, operator)


def _jhal_substitution(p: Prakriya, rule: str, targets: str, following) -> None:
    table = p.sounds.map_sounds("Jal", targets)

    def filter(p: Prakriya, text: str, i: int) -> bool:
        if i + 1 >= len(text) or text[i] not in _JHAL or text[i + 1] not in following:
            return False
        return table[text[i]] != text[i]

    def operator(p: Prakriya, text: str, i: int) -> bool:
        set_at(p, i, table[text[i]])
        p.step(rule)
        return True

    char_rule(p, filter, operator)


def _abhyasa_car(p: Prakriya) -> None:
    i = p.find_first(Tag.Abhyasa)
    if i is None:
        return
    abhyasa = p.get(i)
    if not abhyasa.has_adi(_JHAL):
        return
    sub = p.sounds.map_sounds("Jal", "jaS car")[abhyasa.adi()]
    if sub != abhyasa.adi():
        # 8.4.54 aByAse carca
        p.op_term("8.4.54", i, op.adi(sub))


def _avasana_car(p: Prakriya) -> None:
    i = _last_term(p)
    t = p.get(i)
    if t is None or not t.has_antya(_JHAL):
        return
    sub = p.sounds.map_sounds("Jal", "car")[t.antya()]
    if sub != t.antya():
        # 8.4.56 vAvasAne
        p.optional("8.4.56", lambda p: True, op.t(i, op.antya(sub)))


def _parasavarna(p: Prakriya) -> None:
    def filter(p: Prakriya, text: str, i: int) -> bool:
        return text[i] == "M" and i + 1 < len(text) and text[i + 1] in _JAY

    def operator(p: Prakriya, text: str, i: int) -> bool:
        nasal = next(c for c in savarna(text[i + 1]) if c in _YAM)
        set_at(p, i, nasal)
        # 8.4.58 anusvArasya yayi parasavarRaH
        p.step("8.4.58")
        return True

    char_rule(p, filter, operator)


def run(p: Prakriya) -> None:
    _samyoganta_lopa(p)
    _cu_to_ku(p)
    _rutva(p)
    _upadha_dirgha(p)
    _visarga(p)
    _anusvara(p)
    _satva(p)
    # 8.4.40 stoH ScunA ScuH, with 8.4.44 SAt
    _assimilate(p, "8.4.40", "S cu~", lambda x, y: x == "S")
    # 8.4.41 zwunA zwuH, with 8.4.43 toH zi
    _assimilate(p, "8.4.41", "z wu~", lambda x, y: y == "z" and x in _TU)
    # 8.4.53 JalAM jaS JaSi
    _jhal_substitution(p, "8.4.53", "jaS", _JHASH)
    _abhyasa_car(p)
    # 8.4.55 Kari ca
    _jhal_substitution(p, "8.4.55", "car", _KHAR)
    _avasana_car(p)
    _parasavarna(p)
