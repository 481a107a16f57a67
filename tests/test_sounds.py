# tests/test_sounds.py
"""
Sound classes and articulatory correspondences.
"""

from __future__ import annotations

import pytest

from prakriya.errors import PrakriyaError, PratyaharaError
from prakriya.sounds import (
    SoundSet,
    SoundTable,
    is_samyoganta,
    map_sounds,
    s,
    savarna,
    to_dirgha,
    to_guna,
    to_hrasva,
    to_vrddhi,
)


def test_ac_contains_every_vowel() -> None:
    ac = s("ac")
    for vowel in "aAiIuUfFxXeEoO":
        assert vowel in ac
    assert "k" not in ac
    assert "h" not in ac


def test_hal_contains_every_consonant() -> None:
    hal = s("hal")
    for consonant in "hyvrlkKgGNcCjJYwWqQRtTdDnpPbBmSzs":
        assert consonant in hal
    assert "a" not in hal


def test_first_and_second_R() -> None:
    assert s("iR") == SoundSet("iIuU")
    in2 = s("iR2")
    for sound in "iIuUfFxXeEoOhyvrl":
        assert sound in in2
    assert "k" not in in2


def test_val_excludes_y() -> None:
    val = s("val")
    assert "v" in val
    assert "s" in val
    assert "y" not in val


def test_homorganic_shorthand() -> None:
    assert s("ku~") == SoundSet("kKgGN")
    assert s("a") == SoundSet("aA")
    assert s("ku~ h") == SoundSet("kKgGNh")


def test_iteration_follows_traditional_order() -> None:
    assert SoundSet("kaA").to_string() == "aAk"
    assert list(SoundSet("hi")) == ["i", "h"]


def test_none_is_never_a_member() -> None:
    assert None not in s("ac")


@pytest.mark.parametrize("expr", ["", "   ", "aq", "aj", "qw", "Sk"])
def test_bad_expressions_raise(expr: str) -> None:
    with pytest.raises(PratyaharaError):
        s(expr)


def test_start_after_marker_raises() -> None:
    # q is taught after the marker w, so the range never closes.
    with pytest.raises(PratyaharaError, match="after its marker"):
        s("qw")


def test_pratyahara_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        s("aq")
    assert issubclass(PratyaharaError, PrakriyaError)


def test_savarna_classes() -> None:
    assert savarna("I") == SoundSet("iI")
    assert savarna("x") == SoundSet("fFxX")
    assert savarna("h") == SoundSet("h")


def test_vowel_grades() -> None:
    assert to_guna("I") == "e"
    assert to_guna("f") == "ar"
    assert to_vrddhi("u") == "O"
    assert to_vrddhi("e") == "E"
    assert to_hrasva("U") == "u"
    assert to_hrasva("E") == "i"
    assert to_dirgha("i") == "I"
    assert to_dirgha("k") is None


def test_samyoganta() -> None:
    assert is_samyoganta("Bavant")
    assert not is_samyoganta("Bavan")


def test_shared_sound_table_is_a_singleton() -> None:
    assert SoundTable.shared() is SoundTable.shared()


def test_new_sound_table_is_separate(sound_table: SoundTable) -> None:
    assert sound_table is not SoundTable.shared()
    assert sound_table.uccarana("k") == SoundTable.shared().uccarana("k")


def test_sound_table_over_substitute_features() -> None:
    props = dict(SoundTable.shared().props)
    # Pronounce k like d.
    props["k"] = props["d"]
    table = SoundTable(props)
    assert table.map_sounds("Jal", "jaS")["k"] == "d"
    assert SoundTable.shared().map_sounds("Jal", "jaS")["k"] == "g"


def test_jhal_to_jash() -> None:
    table = map_sounds("Jal", "jaS")
    assert table["K"] == "g"
    assert table["B"] == "b"
    assert table["d"] == "d"


def test_jhal_to_car() -> None:
    table = map_sounds("Jal", "car")
    assert table["d"] == "t"
    assert table["g"] == "k"
    assert table["s"] == "s"


def test_ku_to_cu() -> None:
    table = map_sounds("ku~ h", "cu~")
    assert table["k"] == "c"
    assert table["g"] == "j"
    assert table["h"] == "J"


def test_map_sounds_is_total() -> None:
    table = map_sounds("Jal", "jaS car")
    assert set(table) == set(s("Jal"))
    for target in table.values():
        assert target in s("jaS car")


def test_map_sounds_is_cached(sound_table: SoundTable) -> None:
    assert sound_table.map_sounds("cu~", "ku~") is sound_table.map_sounds("cu~", "ku~")
