"""
ATMANEPADA (1.3.12 - 1.3.93)
----------------------------

Decides which set of personal endings a derivation uses. Roots marked
anudattet or Nit take atmanepada, roots marked svaritet or Yit may take
either, and everything else takes parasmaipada.
"""

from __future__ import annotations

from prakriya.core import Prakriya
from prakriya.tags import Tag


def _mark(p: Prakriya, tag: Tag) -> None:
    p.add_tag(tag)
    i_la = p.find_last(Tag.Pratyaya)
    if i_la is not None:
        p.set(i_la, lambda t: t.add_tag(tag))


def _atmane(p: Prakriya) -> None:
    _mark(p, Tag.Atmanepada)


def run(p: Prakriya) -> None:
    i_root = p.find_first(Tag.Dhatu)
    i_last = p.find_last(Tag.Dhatu)
    if i_root is None or i_last is None:
        return
    root = p.get(i_root)

    if p.has_tag(Tag.Atmanepada):
        # Already fixed by the root's sub-list.
        _atmane(p)
    elif p.any([Tag.Karmani, Tag.Bhave]):
        # 1.3.13 BAvakarmaRoH
        p.op("1.3.13", _atmane)
    elif root.has_tag_in([Tag.anudattet, Tag.Nit]):
        # 1.3.12 anudAttaNita Atmanepadam
        p.op("1.3.12", _atmane)
    elif root.has_tag_in([Tag.svaritet, Tag.Yit]):
        # 1.3.72 svaritaYitaH kartraBiprAye kriyAPale
        if not p.op_optional("1.3.72", _atmane):
            p.op("1.3.78", lambda p: _mark(p, Tag.Parasmaipada))
    elif p.has(i_last, lambda t: t.has_u("Ric")):
        # 1.3.74 RicaS ca
        if not p.op_optional("1.3.74", _atmane):
            p.op("1.3.78", lambda p: _mark(p, Tag.Parasmaipada))
    else:
        # 1.3.78 SezAt kartari parasmEpadam
        p.op("1.3.78", lambda p: _mark(p, Tag.Parasmaipada))
