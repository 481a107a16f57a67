"""
PRAKRIYA ENGINE
---------------

The derivation state every rule module operates on, plus the stack that
re-runs a derivation once per reachable combination of optional-rule
choices.

A rule is written as a filter (does it apply?) and an operator (mutate the
state). ``Prakriya.rule`` and friends run the operator only when the
filter passes and then record a ``Step``. Optional rules go through
``is_allowed`` / ``decline`` so that the decision ledger records exactly
one entry per optional rule evaluated.

Usage
=====

    p = Prakriya()
    p.push(Term.make_dhatu("BU", gana=1))
    p.rule("6.1.64", lambda p: p.has(0, f.adi("z")), lambda p: p.set(0, op.adi("s")))
    p.text()        # "BU"
    p.history       # [Step(rule="...", result="...")]
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from prakriya.sounds import SoundTable
from prakriya.tags import Tag
from prakriya.term import Term, TermView
from utils.logging_setup import get_logger

logger = get_logger(__name__)

Rule = str
TermFilter = Callable[[Term], bool]
TermOperator = Callable[[Term], None]
Filter = Callable[["Prakriya"], bool]
Operator = Callable[["Prakriya"], None]


class RuleOption(str, Enum):
    """How an optional rule should be resolved in a given run."""

    ALLOW = "allow"
    IGNORE = "ignore"


class RuleDecision(str, Enum):
    """What an optional rule actually did in a given run."""

    ACCEPTED = "accepted"
    DECLINED = "declined"


@dataclass(frozen=True)
class Step:
    """One committed rule application and the full text right after it."""

    rule: Rule
    result: str


class Prakriya:
    """
    A single derivation in progress.

    Owns its terms, its derivation-wide tags, the step history and the
    optional-rule ledger. Indices into ``terms`` are only valid until the
    next insertion, so rules look them up again after every mutation.
    """

    def __init__(
        self,
        options_config: Optional[Dict[Rule, RuleOption]] = None,
        *,
        log_steps: bool = True,
        sounds: Optional[SoundTable] = None,
    ):
        self._terms: List[Term] = []
        self._tags: Set[Tag] = set()
        self._history: List[Step] = []
        self._options_config: Dict[Rule, RuleOption] = dict(options_config or {})
        self._rule_decisions: List[Tuple[Rule, RuleDecision]] = []
        self.log_steps = log_steps
        self.sounds = sounds if sounds is not None else SoundTable.shared()

    def __repr__(self) -> str:
        return f"Prakriya(text={self.text()!r}, terms={len(self._terms)})"

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def terms(self) -> List[Term]:
        return self._terms

    @property
    def history(self) -> List[Step]:
        return list(self._history)

    @property
    def rule_decisions(self) -> List[Tuple[Rule, RuleDecision]]:
        return list(self._rule_decisions)

    @property
    def options_config(self) -> Dict[Rule, RuleOption]:
        return dict(self._options_config)

    def get(self, i: int) -> Optional[Term]:
        if 0 <= i < len(self._terms):
            return self._terms[i]
        return None

    def view(self, i: int) -> Optional[TermView]:
        return TermView.new(self._terms, i)

    def text(self) -> str:
        return "".join(t.text for t in self._terms)

    # ------------------------------------------------------------------
    # Finders
    # ------------------------------------------------------------------

    def find_first(self, tag: Tag) -> Optional[int]:
        return self.find_first_where(lambda t: t.has_tag(tag))

    def find_last(self, tag: Tag) -> Optional[int]:
        return self.find_last_where(lambda t: t.has_tag(tag))

    def find_first_where(self, f: TermFilter) -> Optional[int]:
        for i, t in enumerate(self._terms):
            if f(t):
                return i
        return None

    def find_last_where(self, f: TermFilter) -> Optional[int]:
        for i in range(len(self._terms) - 1, -1, -1):
            if f(self._terms[i]):
                return i
        return None

    def find_next_where(self, start: int, f: TermFilter) -> Optional[int]:
        """First index strictly after ``start`` whose term passes ``f``."""
        for i in range(start + 1, len(self._terms)):
            if f(self._terms[i]):
                return i
        return None

    def find_prev_where(self, start: int, f: TermFilter) -> Optional[int]:
        """Last index strictly before ``start`` whose term passes ``f``."""
        for i in range(min(start, len(self._terms)) - 1, -1, -1):
            if f(self._terms[i]):
                return i
        return None

    def has(self, i: int, f: TermFilter) -> bool:
        """Whether term ``i`` exists and passes ``f``."""
        t = self.get(i)
        return t is not None and f(t)

    # ------------------------------------------------------------------
    # Derivation-wide tags
    # ------------------------------------------------------------------

    def has_tag(self, tag: Tag) -> bool:
        return tag in self._tags

    def all(self, tags: Iterable[Tag]) -> bool:
        return all(t in self._tags for t in tags)

    def any(self, tags: Iterable[Tag]) -> bool:
        return any(t in self._tags for t in tags)

    def add_tag(self, tag: Tag) -> None:
        self._tags.add(tag)

    def add_tags(self, tags: Iterable[Tag]) -> None:
        self._tags.update(tags)

    def remove_tag(self, tag: Tag) -> None:
        self._tags.discard(tag)

    # ------------------------------------------------------------------
    # Term mutation
    # ------------------------------------------------------------------

    def set(self, i: int, op: TermOperator) -> None:
        t = self.get(i)
        if t is not None:
            op(t)

    def insert_before(self, i: int, t: Term) -> None:
        self._terms.insert(i, t)

    def insert_after(self, i: int, t: Term) -> None:
        self._terms.insert(i + 1, t)

    def push(self, t: Term) -> None:
        self._terms.append(t)

    # ------------------------------------------------------------------
    # Rule application
    # ------------------------------------------------------------------

    def step(self, rule: Rule) -> None:
        """Record that ``rule`` was applied."""
        if self.log_steps:
            self._history.append(Step(rule=rule, result=self.text()))

    def op(self, rule: Rule, operator: Operator) -> bool:
        operator(self)
        self.step(rule)
        return True

    def op_term(self, rule: Rule, i: int, operator: TermOperator) -> bool:
        """Apply a term operator to term ``i``; no-op if the term is absent."""
        t = self.get(i)
        if t is None:
            return False
        operator(t)
        self.step(rule)
        return True

    def op_optional(self, rule: Rule, operator: Operator) -> bool:
        if self.is_allowed(rule):
            operator(self)
            self.step(rule)
            return True
        self.decline(rule)
        return False

    def rule(self, rule: Rule, filter: Filter, operator: Operator) -> bool:
        if filter(self):
            return self.op(rule, operator)
        return False

    def optional(self, rule: Rule, filter: Filter, operator: Operator) -> bool:
        if filter(self):
            return self.op_optional(rule, operator)
        return False

    def term_rule(self, rule: Rule, i: int, filter: TermFilter, operator: TermOperator) -> bool:
        if self.has(i, filter):
            return self.op_term(rule, i, operator)
        return False

    # ------------------------------------------------------------------
    # Optional rules
    # ------------------------------------------------------------------

    def is_allowed(self, rule: Rule) -> bool:
        """
        Whether optional ``rule`` may apply in this run.

        An allowed rule is logged as accepted here. A caller that gets
        ``False`` must call ``decline`` so that the ledger stays complete.
        """
        if self._options_config.get(rule, RuleOption.ALLOW) == RuleOption.ALLOW:
            self.accept(rule)
            return True
        return False

    def accept(self, rule: Rule) -> None:
        self._rule_decisions.append((rule, RuleDecision.ACCEPTED))

    def decline(self, rule: Rule) -> None:
        self._rule_decisions.append((rule, RuleDecision.DECLINED))


# ---------------------------------------------------------------------------
# Enumerating optional-rule combinations
# ---------------------------------------------------------------------------

_ConfigKey = FrozenSet[Tuple[Rule, RuleOption]]


def _as_option(decision: RuleDecision) -> RuleOption:
    return RuleOption.ALLOW if decision == RuleDecision.ACCEPTED else RuleOption.IGNORE


def _flip(decision: RuleDecision) -> RuleOption:
    return RuleOption.IGNORE if decision == RuleDecision.ACCEPTED else RuleOption.ALLOW


class PrakriyaStack:
    """
    Runs a derivation once per reachable combination of optional rules.

    The first run uses the empty configuration (every optional rule
    allowed). After each run, every ledger entry whose rule was not yet
    fixed by the configuration becomes a branch point: a new configuration
    pins all the decisions observed before it and flips that one. Each
    configuration runs at most once, and results are kept only for the
    first derivation that produced a given surface text. Each call starts
    from an empty result list, so a stack can be reused.
    """

    def __init__(self, *, log_steps: bool = True, sounds: Optional[SoundTable] = None):
        self.log_steps = log_steps
        self.sounds = sounds
        self._prakriyas: List[Prakriya] = []
        self._texts: Set[str] = set()

    def find_all(self, derive: Callable[[Prakriya], None]) -> List[Prakriya]:
        self._prakriyas = []
        self._texts = set()
        pending: List[Dict[Rule, RuleOption]] = [{}]
        seen: Set[_ConfigKey] = {frozenset()}
        runs = 0

        while pending:
            config = pending.pop()
            p = Prakriya(config, log_steps=self.log_steps, sounds=self.sounds)
            derive(p)
            runs += 1
            self._add(p)

            decisions = p.rule_decisions
            for k, (rule, decision) in enumerate(decisions):
                if rule in config:
                    continue
                branch: Dict[Rule, RuleOption] = dict(config)
                for prev_rule, prev_decision in decisions[:k]:
                    branch.setdefault(prev_rule, _as_option(prev_decision))
                branch[rule] = _flip(decision)

                key = frozenset(branch.items())
                if key not in seen:
                    seen.add(key)
                    pending.append(branch)

        logger.debug("prakriya_stack_exhausted", runs=runs, results=len(self._prakriyas))
        return self.prakriyas()

    def _add(self, p: Prakriya) -> None:
        text = p.text()
        if text not in self._texts:
            self._texts.add(text)
            self._prakriyas.append(p)

    def prakriyas(self) -> List[Prakriya]:
        return list(self._prakriyas)


__all__ = [
    "Filter",
    "Operator",
    "Prakriya",
    "PrakriyaStack",
    "Rule",
    "RuleDecision",
    "RuleOption",
    "Step",
    "TermFilter",
    "TermOperator",
]
