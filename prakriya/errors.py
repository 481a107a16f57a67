"""
prakriya/errors.py
------------------

Exception hierarchy for the derivation engine.

Only genuine defects and invalid external input raise. A rule that simply
does not apply is never an error: queries return ``None`` and filters
return ``False``.
"""

from __future__ import annotations


class PrakriyaError(Exception):
    """Base class for every error raised by this package."""


class PratyaharaError(PrakriyaError, ValueError):
    """A sound-class expression is malformed or decodes to nothing."""

    def __init__(self, expr: str, reason: str = "yields no sounds"):
        self.expr = expr
        super().__init__(f"Could not parse sound expression {expr!r}: {reason}")


class ArgumentError(PrakriyaError, ValueError):
    """External input (CLI flags, dhatupatha rows, enum strings) is invalid."""


class UnsupportedDerivationError(PrakriyaError):
    """The requested root/lakara combination has no rule coverage."""
