# prakriya/dhatupatha.py
"""
Loader for the root table (Dhatupatha).

The table is tab-separated with a header row. The first column is a
lookup code ("01.0001" = gana 1, root 1) and the second the root as
stated, with accent and marker notation. Rows whose root column is "-"
are placeholders for roots that are listed elsewhere and are skipped.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import List, Optional, Tuple, Union

from prakriya.args import Antargana, Dhatu
from prakriya.config import settings
from prakriya.errors import ArgumentError
from utils.logging_setup import get_logger

logger = get_logger(__name__)

BUNDLED_PATH = Path(__file__).parent / "data" / "dhatupatha.tsv"


def _find_antargana(gana: int, number: int) -> Optional[Antargana]:
    # Explicit ranges: some roots appear more than once in their gana.
    if gana == 6 and 93 <= number <= 137:
        return Antargana.KUTADI
    if gana == 10 and 192 <= number <= 236:
        return Antargana.AKUSMIYA
    return None


def _parse_int(value: Union[str, int], field: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ArgumentError(f"Invalid {field} in dhatupatha code: {value!r}") from None


def resolve(upadesha: str, gana: Union[str, int], number: Union[str, int]) -> Dhatu:
    """Build a Dhatu from the parts of a lookup code."""
    gana_n = _parse_int(gana, "gana")
    number_n = _parse_int(number, "number")
    if not 1 <= gana_n <= 10:
        raise ArgumentError(f"Gana must be between 1 and 10, got {gana_n}")

    return Dhatu(
        upadesha=upadesha,
        gana=gana_n,
        antargana=_find_antargana(gana_n, number_n),
        number=number_n,
    )


def default_path() -> Path:
    if settings.DHATUPATHA_PATH:
        return Path(settings.DHATUPATHA_PATH)
    return BUNDLED_PATH


def load_all(path: Optional[Union[str, Path]] = None) -> List[Tuple[Dhatu, int]]:
    """
    Load every root in the table at ``path`` (default: the bundled table).

    Returns (dhatu, number) pairs in file order.
    """
    path = Path(path) if path is not None else default_path()
    results: List[Tuple[Dhatu, int]] = []

    with open(path, "r", encoding="utf-8", newline="") as f:
        reader = csv.reader(f, delimiter="\t")
        next(reader, None)  # header
        for row in reader:
            if len(row) < 2:
                continue
            code, upadesha = row[0], row[1]
            if upadesha == "-":
                continue
            if "." not in code:
                raise ArgumentError(f"Malformed dhatupatha code: {code!r}")
            gana, number = code.split(".", 1)
            dhatu = resolve(upadesha, gana, number)
            results.append((dhatu, dhatu.number))

    logger.debug("dhatupatha_loaded", path=str(path), count=len(results))
    return results


def find(upadesha: str, gana: int, path: Optional[Union[str, Path]] = None) -> Optional[Dhatu]:
    """First root in the table with this upadesha and gana, if any."""
    for dhatu, _ in load_all(path):
        if dhatu.upadesha == upadesha and dhatu.gana == gana:
            return dhatu
    return None


__all__ = ["BUNDLED_PATH", "default_path", "find", "load_all", "resolve"]
