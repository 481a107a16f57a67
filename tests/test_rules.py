# tests/test_rules.py
"""
Single rule modules on small, partly built derivations.
"""

from __future__ import annotations

import pytest

from prakriya.args import Antargana, Dhatu, Lakara, Purusha, Vacana
from prakriya.core import Prakriya, RuleOption
from prakriya.rules import (
    atmanepada,
    dhatu_karya,
    la_karya,
    samjna,
    sanadi,
    tin_pratyaya,
    tripadi,
    vikarana,
)
from prakriya.tags import Tag
from prakriya.term import Term


def _with_tin(
    upadesha: str,
    gana: int,
    lakara: Lakara,
    purusha: Purusha = Purusha.PRATHAMA,
    vacana: Vacana = Vacana.EKA,
    p: Prakriya = None,
) -> Prakriya:
    p = p if p is not None else Prakriya()
    p.add_tag(Tag.Kartari)
    dhatu_karya.run(p, Dhatu(upadesha=upadesha, gana=gana))
    sanadi.run(p)
    la_karya.run(p, lakara)
    atmanepada.run(p)
    tin_pratyaya.adesha(p, purusha, vacana)
    samjna.run(p)
    return p


def _tin(p: Prakriya) -> Term:
    return p.get(p.find_last(Tag.Tin))


# ---------------------------------------------------------------------------
# dhatu_karya / sanadi
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "upadesha, text, rule",
    [
        ("zaha~\\", "sah", "6.1.64"),
        ("RI\\Y", "nI", "6.1.65"),
    ],
)
def test_initial_sound_of_root(upadesha: str, text: str, rule: str) -> None:
    p = Prakriya()
    dhatu_karya.run(p, Dhatu(upadesha=upadesha, gana=1))
    assert p.text() == text
    assert rule in [step.rule for step in p.history]


def test_root_starts_the_history() -> None:
    p = Prakriya()
    i = dhatu_karya.run(p, Dhatu(upadesha="BU", gana=1))
    assert i == 0
    assert p.history[0].rule == "start"
    assert p.terms[0].has_tag(Tag.Dhatu)


def test_akusmiya_roots_are_atmanepadi() -> None:
    p = Prakriya()
    dhatu_karya.run(p, Dhatu(upadesha="cura~", gana=10, antargana=Antargana.AKUSMIYA))
    assert p.has_tag(Tag.Atmanepada)


def test_curadi_takes_nic() -> None:
    p = Prakriya()
    dhatu_karya.run(p, Dhatu(upadesha="cura~", gana=10))
    sanadi.run(p)
    assert [t.text for t in p.terms] == ["cur", "i"]
    assert p.terms[1].all([Tag.Pratyaya, Tag.Dhatu, Tag.Rit])


# ---------------------------------------------------------------------------
# atmanepada / tin_pratyaya / samjna
# ---------------------------------------------------------------------------


def test_plain_root_is_parasmaipadi() -> None:
    p = _with_tin("BU", 1, Lakara.LAT)
    assert p.has_tag(Tag.Parasmaipada)
    tin = _tin(p)
    assert tin.text == "ti"
    assert tin.all([Tag.Tin, Tag.Vibhakti, Tag.pit, Tag.Prathama, Tag.Ekavacana])
    assert tin.has_lakshana("la~w")


def test_ubhayapadi_root_can_go_either_way() -> None:
    p = _with_tin("RI\\Y", 1, Lakara.LAT)
    assert p.has_tag(Tag.Atmanepada)
    assert _tin(p).text == "ta"

    q = _with_tin("RI\\Y", 1, Lakara.LAT, p=Prakriya({"1.3.72": RuleOption.IGNORE}))
    assert q.has_tag(Tag.Parasmaipada)
    assert _tin(q).text == "ti"


def test_tin_is_sarvadhatuka() -> None:
    p = _with_tin("BU", 1, Lakara.LAT)
    assert _tin(p).has_tag(Tag.Sarvadhatuka)


def test_lit_tin_is_ardhadhatuka() -> None:
    p = _with_tin("BU", 1, Lakara.LIT)
    assert _tin(p).has_tag(Tag.Ardhadhatuka)
    assert not _tin(p).has_tag(Tag.Sarvadhatuka)


@pytest.mark.parametrize(
    "purusha, vacana, text",
    [
        (Purusha.PRATHAMA, Vacana.EKA, "a"),
        (Purusha.PRATHAMA, Vacana.DVI, "atus"),
        (Purusha.PRATHAMA, Vacana.BAHU, "us"),
        (Purusha.MADHYAMA, Vacana.EKA, "Ta"),
        (Purusha.UTTAMA, Vacana.BAHU, "ma"),
    ],
)
def test_lit_endings(purusha: Purusha, vacana: Vacana, text: str) -> None:
    p = _with_tin("BU", 1, Lakara.LIT, purusha, vacana)
    tin_pratyaya.siddhi(p, Lakara.LIT)
    assert _tin(p).text == text


def test_lit_atmanepada_ta() -> None:
    p = _with_tin("zaha~\\", 1, Lakara.LIT)
    tin_pratyaya.siddhi(p, Lakara.LIT)
    tin = _tin(p)
    assert tin.text == "e"
    assert not tin.has_tag(Tag.Sit)


def test_lot_madhyama_eka_is_hi() -> None:
    p = _with_tin("BU", 1, Lakara.LOT, Purusha.MADHYAMA)
    tin_pratyaya.siddhi(p, Lakara.LOT)
    tin = _tin(p)
    assert tin.text == "hi"
    assert not tin.has_tag(Tag.pit)


def test_lot_uttama_adds_agama() -> None:
    p = _with_tin("BU", 1, Lakara.LOT, Purusha.UTTAMA)
    tin_pratyaya.siddhi(p, Lakara.LOT)
    assert [t.text for t in p.terms][-2:] == ["A", "ni"]
    assert _tin(p).has_tag(Tag.pit)


def test_lan_drops_final_i() -> None:
    p = _with_tin("BU", 1, Lakara.LAN)
    tin_pratyaya.siddhi(p, Lakara.LAN)
    assert _tin(p).text == "t"


def test_atmanepada_lat_ending() -> None:
    p = _with_tin("zaha~\\", 1, Lakara.LAT, Purusha.MADHYAMA)
    tin_pratyaya.siddhi(p, Lakara.LAT)
    assert _tin(p).text == "se"


# ---------------------------------------------------------------------------
# vikarana
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "upadesha, gana, text",
    [
        ("BU", 1, "a"),
        ("divu~", 4, "ya"),
        ("tu\\da~^", 6, "a"),
    ],
)
def test_gana_vikarana(upadesha: str, gana: int, text: str) -> None:
    p = _with_tin(upadesha, gana, Lakara.LAT)
    vikarana.run(p)
    i = p.find_first(Tag.Vikarana)
    assert i == 1
    assert p.get(i).text == text


def test_future_takes_sya() -> None:
    p = _with_tin("BU", 1, Lakara.LRT)
    vikarana.run(p)
    samjna.run(p)
    sya = p.get(p.find_first(Tag.Vikarana))
    assert sya.text == "sya"
    assert sya.has_tag(Tag.Ardhadhatuka)


def test_passive_takes_yak() -> None:
    p = Prakriya()
    p.add_tag(Tag.Karmani)
    dhatu_karya.run(p, Dhatu(upadesha="BU", gana=1))
    la_karya.run(p, Lakara.LAT)
    atmanepada.run(p)
    tin_pratyaya.adesha(p, Purusha.PRATHAMA, Vacana.EKA)
    samjna.run(p)
    vikarana.run(p)
    assert p.has_tag(Tag.Atmanepada)
    assert p.get(p.find_first(Tag.Vikarana)).has_u("yak")


def test_perfect_has_no_vikarana() -> None:
    p = _with_tin("BU", 1, Lakara.LIT)
    vikarana.run(p)
    assert p.find_first(Tag.Vikarana) is None
    assert p.find_first_where(lambda t: t.has_u("Am")) is None


@pytest.mark.parametrize(
    "upadesha, gana, rule, stem",
    [
        ("eDa~\\", 1, "3.1.36", ["eD"]),
        ("cura~", 10, "3.1.35", ["cur", "i"]),
    ],
)
def test_perfect_takes_am_and_kf(upadesha: str, gana: int, rule: str, stem) -> None:
    p = _with_tin(upadesha, gana, Lakara.LIT)
    vikarana.run(p)

    texts = [t.text for t in p.terms]
    assert texts[: len(stem) + 2] == stem + ["Am", "kf"]
    assert p.has(len(stem) + 1, lambda t: t.has_tag(Tag.Dhatu))
    assert p.find_last(Tag.Tin) == len(stem) + 2
    rules = [step.rule for step in p.history]
    assert rules.index(rule) < rules.index("3.1.40")


@pytest.mark.parametrize(
    "text, expected",
    [("eD", True), ("BU", True), ("ind", True), ("pac", False), ("ci", False)],
)
def test_is_guru(text: str, expected: bool) -> None:
    assert vikarana.is_guru(Term.make_text(text)) is expected


# ---------------------------------------------------------------------------
# tripadi
# ---------------------------------------------------------------------------


def test_final_s_becomes_visarga(make_prakriya) -> None:
    p = make_prakriya(Term.make_text("Bava"), Term.make_text("tas"))
    tripadi.run(p)
    assert p.text() == "BavataH"
    rules = [step.rule for step in p.history]
    assert rules.index("8.2.66") < rules.index("8.3.15")


def test_final_samyoga_is_reduced(make_prakriya) -> None:
    p = make_prakriya(Term.make_text("aBav"), Term.make_text("ant"))
    tripadi.run(p)
    assert p.text() == "aBavan"


def test_abhyasa_loses_aspiration(make_prakriya) -> None:
    abhyasa = Term.make_text("Ba")
    abhyasa.add_tag(Tag.Abhyasa)
    p = make_prakriya(abhyasa, Term.make_dhatu("BU", gana=1), Term.make_text("va"))
    tripadi.run(p)
    assert p.text() == "baBUva"


def test_voiced_stop_before_s(make_prakriya) -> None:
    sya = Term.make_upadesha("sya")
    sya.add_tag(Tag.Pratyaya)
    p = make_prakriya(Term.make_dhatu("tod", gana=6), sya, Term.make_text("ti"))
    tripadi.run(p)
    assert p.text() == "totsyati"


def test_satva_after_ku(make_prakriya) -> None:
    sya = Term.make_upadesha("sya")
    sya.add_tag(Tag.Pratyaya)
    p = make_prakriya(Term.make_dhatu("pac", gana=1), sya, Term.make_text("ti"))
    tripadi.run(p)
    assert p.text() == "pakzyati"


def test_final_voiced_stop_is_optional(make_prakriya) -> None:
    p = make_prakriya(Term.make_text("vAg"))
    tripadi.run(p)
    assert p.text() == "vAk"

    q = make_prakriya(Term.make_text("vAg"), options_config={"8.4.56": RuleOption.IGNORE})
    tripadi.run(q)
    assert q.text() == "vAg"


def test_anusvara_takes_the_place_of_the_next_stop(make_prakriya) -> None:
    p = make_prakriya(Term.make_text("eDAm"), Term.make_text("cakre"))
    tripadi.run(p)
    assert p.text() == "eDAYcakre"
    rules = [step.rule for step in p.history]
    assert rules.index("8.3.24") < rules.index("8.4.58")


def test_dental_nasal_survives_anusvara(make_prakriya) -> None:
    p = make_prakriya(Term.make_text("Bava"), Term.make_text("nti"))
    tripadi.run(p)
    assert p.text() == "Bavanti"
