# tests/conftest.py
import logging

import pytest

from prakriya.ashtadhyayi import Ashtadhyayi
from prakriya.core import Prakriya
from prakriya.sounds import SoundTable
from prakriya.term import Term
from utils.logging_setup import init_logging


@pytest.fixture(scope="session", autouse=True)
def _quiet_logging():
    """Keep engine debug events out of test output."""
    init_logging(logging.WARNING, force=True)


@pytest.fixture
def sound_table() -> SoundTable:
    return SoundTable()


@pytest.fixture
def make_prakriya():
    """Returns a factory for a fresh Prakriya holding the given terms."""

    def factory(*terms: Term, **kwargs) -> Prakriya:
        p = Prakriya(**kwargs)
        for t in terms:
            p.push(t)
        return p

    return factory


@pytest.fixture
def ashtadhyayi() -> Ashtadhyayi:
    return Ashtadhyayi(log_steps=True)
