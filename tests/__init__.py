# tests/__init__.py
"""
Test suite for the prakriya engine.

Organization:
- engine tests (sounds, terms, char view, Prakriya / PrakriyaStack) use
  hand-built derivations and no rule modules;
- rule tests exercise a single rule module on a small Prakriya;
- derivation and CLI tests run the full rule sequence end to end.
"""
