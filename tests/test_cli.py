# tests/test_cli.py
import json

import pytest

from prakriya import cli


def _run(capsys, *argv: str):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(list(argv))
    captured = capsys.readouterr()
    return excinfo.value.code, captured.out, captured.err


def test_derive_prints_forms(capsys) -> None:
    code, out, _ = _run(capsys, "derive", "--dhatu", "BU", "--gana", "1", "--lakara", "lat")
    assert code == 0
    assert out == "Bavati\n"


def test_derive_ubhayapadi(capsys) -> None:
    code, out, _ = _run(capsys, "derive", "--dhatu", "RI\\Y", "--gana", "1", "--lakara", "lat")
    assert code == 0
    assert set(out.split()) == {"nayati", "nayate"}


def test_derive_trace(capsys) -> None:
    code, out, _ = _run(
        capsys, "derive", "--dhatu", "BU", "--gana", "1", "--lakara", "lat", "--trace"
    )
    assert code == 0
    lines = out.splitlines()
    assert lines[0] == "Bavati"
    assert any("3.1.68" in line for line in lines[1:])


def test_derive_json(capsys) -> None:
    code, out, _ = _run(
        capsys,
        "derive",
        "--dhatu",
        "BU",
        "--gana",
        "1",
        "--lakara",
        "lit",
        "--purusha",
        "prathama",
        "--vacana",
        "bahu",
        "--json",
    )
    assert code == 0
    payload = json.loads(out)
    assert [item["text"] for item in payload] == ["baBUvuH"]
    assert payload[0]["history"][0]["rule"] == "start"
    assert isinstance(payload[0]["rule_decisions"], list)


def test_bad_lakara_exits_with_error(capsys) -> None:
    code, out, err = _run(capsys, "derive", "--dhatu", "BU", "--gana", "1", "--lakara", "xyz")
    assert code == 1
    assert out == ""
    assert "Error:" in err


def test_unsupported_lakara_exits_with_error(capsys) -> None:
    code, out, err = _run(capsys, "derive", "--dhatu", "BU", "--gana", "1", "--lakara", "lun")
    assert code == 1
    assert "not supported" in err


def test_missing_required_flag_is_usage_error(capsys) -> None:
    code, _, _ = _run(capsys, "derive", "--dhatu", "BU", "--gana", "1")
    assert code == 2


def test_dhatus_filters_by_gana(capsys) -> None:
    code, out, _ = _run(capsys, "dhatus", "--gana", "4")
    assert code == 0
    assert out == "04.0001\tdivu~\n"


def test_dhatus_missing_file(capsys, tmp_path) -> None:
    code, _, err = _run(capsys, "dhatus", "--path", str(tmp_path / "missing.tsv"))
    assert code == 1
    assert "Error:" in err
