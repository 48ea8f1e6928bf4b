"""Validity of a single LK inference.

`is_valid_step` checks only the rule application at the root of a node
against the stored conclusions of its immediate premises. Whether the
premises are themselves derivable is the business of `lkcheck.proof.check`.

Accessor failures (reading the first antecedent formula of an empty
antecedent, and so on) raise `SequentError`; they are never reported as an
invalid step.
"""
from __future__ import annotations
import logging
from typing import Callable, Dict, Sequence, Type
from ..errors import SequentError
from ..fol.ast import Formula, Equal, Not, And, Or, Implies, Forall, Exists
from ..fol.algebra import (
    bound_variables, free_variables, free_variables_of, is_substitutible, subterms, substitute,
)
from .sequent import Sequent
from .lk import (
    LK, Axiom, WeakeningLeft, WeakeningRight, ContractionLeft, ContractionRight,
    ExchangeLeft, ExchangeRight, AndLeft1, AndLeft2, AndRight, OrLeft, OrRight1, OrRight2,
    ImpliesLeft, ImpliesRight, NotLeft, NotRight, ForallLeft, ForallRight, ExistsLeft,
    ExistsRight, Cut,
)

log = logging.getLogger(__name__)

Check = Callable[[LK], bool]
_CHECKS: Dict[Type[LK], Check] = {}


def _rule(cls: Type[LK]):
    def register(fn: Check) -> Check:
        _CHECKS[cls] = fn
        return fn
    return register


def _second(formulas: Sequence[Formula], where: Sequent) -> Formula:
    if len(formulas) < 2:
        raise SequentError(f"contraction needs two formulas on one side of {where}")
    return formulas[1]


def _one_swap(before: Sequence[Formula], after: Sequence[Formula]) -> bool:
    """True iff ``after`` is ``before`` with exactly one adjacent pair swapped."""
    if len(before) != len(after):
        return False
    for i in range(len(before) - 1):
        if (before[:i] == after[:i] and before[i + 2:] == after[i + 2:]
                and before[i] == after[i + 1] and before[i + 1] == after[i]):
            return True
    return False


def _instantiates(quantified: Formula, instance: Formula) -> bool:
    # Some subterm t of the instance gives body[v := t] == instance.
    v, body = quantified.var, quantified.body
    if v in bound_variables(body):
        return False
    return any(
        is_substitutible(body, v, t) and substitute(body, v, t) == instance
        for t in subterms(instance)
    )


def _generalizes(quantified: Formula, instance: Formula, context: Sequence[Formula]) -> bool:
    # Some eigenvariable y, free in the instance and nowhere in the context.
    v, body = quantified.var, quantified.body
    fresh = free_variables(instance) - free_variables_of(context)
    return any(
        is_substitutible(body, v, y) and substitute(body, v, y) == instance
        for y in fresh
    )


@_rule(Axiom)
def _axiom(node: Axiom) -> bool:
    c = node.conclusion
    if c.antecedent and c.antecedent == c.succedent:
        return True
    if not c.antecedent and len(c.succedent) == 1:
        phi = c.succedent[0]
        return isinstance(phi, Equal) and phi.left == phi.right
    return False


@_rule(WeakeningLeft)
def _weakening_left(node) -> bool:
    p, c = node.premise.conclusion, node.conclusion
    return p.antecedent == c.ant_but_first() and p.succedent == c.succedent


@_rule(WeakeningRight)
def _weakening_right(node) -> bool:
    p, c = node.premise.conclusion, node.conclusion
    return p.antecedent == c.antecedent and p.succedent == c.suc_but_last()


@_rule(ContractionLeft)
def _contraction_left(node) -> bool:
    p, c = node.premise.conclusion, node.conclusion
    return (p.ant_first() == _second(p.antecedent, p)
            and p.ant_but_first() == c.antecedent
            and p.succedent == c.succedent)


@_rule(ContractionRight)
def _contraction_right(node) -> bool:
    p, c = node.premise.conclusion, node.conclusion
    return (p.antecedent == c.antecedent
            and _second(p.succedent[::-1], p) == p.suc_last()
            and p.suc_but_last() == c.succedent)


@_rule(ExchangeLeft)
def _exchange_left(node) -> bool:
    p, c = node.premise.conclusion, node.conclusion
    return p.succedent == c.succedent and _one_swap(p.antecedent, c.antecedent)


@_rule(ExchangeRight)
def _exchange_right(node) -> bool:
    p, c = node.premise.conclusion, node.conclusion
    return p.antecedent == c.antecedent and _one_swap(p.succedent, c.succedent)


def _and_left(node, pick: Callable[[And], Formula]) -> bool:
    p, c = node.premise.conclusion, node.conclusion
    main = c.ant_first()
    return (isinstance(main, And)
            and p.ant_first() == pick(main)
            and p.ant_but_first() == c.ant_but_first()
            and p.succedent == c.succedent)


@_rule(AndLeft1)
def _and_left1(node) -> bool:
    return _and_left(node, lambda f: f.left)


@_rule(AndLeft2)
def _and_left2(node) -> bool:
    return _and_left(node, lambda f: f.right)


@_rule(AndRight)
def _and_right(node) -> bool:
    l, r = (n.conclusion for n in node.premises)
    c = node.conclusion
    main = c.suc_last()
    return (isinstance(main, And)
            and l.antecedent == c.antecedent and r.antecedent == c.antecedent
            and l.suc_but_last() == c.suc_but_last() and r.suc_but_last() == c.suc_but_last()
            and l.suc_last() == main.left and r.suc_last() == main.right)


@_rule(OrLeft)
def _or_left(node) -> bool:
    l, r = (n.conclusion for n in node.premises)
    c = node.conclusion
    main = c.ant_first()
    return (isinstance(main, Or)
            and l.succedent == c.succedent and r.succedent == c.succedent
            and l.ant_but_first() == c.ant_but_first() and r.ant_but_first() == c.ant_but_first()
            and l.ant_first() == main.left and r.ant_first() == main.right)


def _or_right(node, pick: Callable[[Or], Formula]) -> bool:
    p, c = node.premise.conclusion, node.conclusion
    main = c.suc_last()
    return (isinstance(main, Or)
            and p.suc_last() == pick(main)
            and p.antecedent == c.antecedent
            and p.suc_but_last() == c.suc_but_last())


@_rule(OrRight1)
def _or_right1(node) -> bool:
    return _or_right(node, lambda f: f.left)


@_rule(OrRight2)
def _or_right2(node) -> bool:
    return _or_right(node, lambda f: f.right)


@_rule(ImpliesLeft)
def _implies_left(node) -> bool:
    l, r = (n.conclusion for n in node.premises)
    c = node.conclusion
    main = c.ant_first()
    return (isinstance(main, Implies)
            and l.suc_last() == main.left and r.ant_first() == main.right
            and c.ant_but_first() == l.antecedent + r.ant_but_first()
            and c.succedent == l.suc_but_last() + r.succedent)


@_rule(ImpliesRight)
def _implies_right(node) -> bool:
    p, c = node.premise.conclusion, node.conclusion
    main = c.suc_last()
    return (isinstance(main, Implies)
            and main.left == p.ant_first() and main.right == p.suc_last()
            and p.ant_but_first() == c.antecedent
            and p.suc_but_last() == c.suc_but_last())


@_rule(NotLeft)
def _not_left(node) -> bool:
    p, c = node.premise.conclusion, node.conclusion
    main = c.ant_first()
    return (isinstance(main, Not)
            and main.phi == p.suc_last()
            and p.antecedent == c.ant_but_first()
            and p.suc_but_last() == c.succedent)


@_rule(NotRight)
def _not_right(node) -> bool:
    p, c = node.premise.conclusion, node.conclusion
    main = c.suc_last()
    return (isinstance(main, Not)
            and main.phi == p.ant_first()
            and p.ant_but_first() == c.antecedent
            and p.succedent == c.suc_but_last())


@_rule(ForallLeft)
def _forall_left(node) -> bool:
    p, c = node.premise.conclusion, node.conclusion
    main = c.ant_first()
    return (isinstance(main, Forall)
            and p.succedent == c.succedent
            and p.ant_but_first() == c.ant_but_first()
            and _instantiates(main, p.ant_first()))


@_rule(ExistsRight)
def _exists_right(node) -> bool:
    p, c = node.premise.conclusion, node.conclusion
    main = c.suc_last()
    return (isinstance(main, Exists)
            and p.antecedent == c.antecedent
            and p.suc_but_last() == c.suc_but_last()
            and _instantiates(main, p.suc_last()))


@_rule(ForallRight)
def _forall_right(node) -> bool:
    p, c = node.premise.conclusion, node.conclusion
    main = c.suc_last()
    return (isinstance(main, Forall)
            and p.antecedent == c.antecedent
            and p.suc_but_last() == c.suc_but_last()
            and _generalizes(main, p.suc_last(), p.antecedent + p.suc_but_last()))


@_rule(ExistsLeft)
def _exists_left(node) -> bool:
    p, c = node.premise.conclusion, node.conclusion
    main = c.ant_first()
    return (isinstance(main, Exists)
            and p.succedent == c.succedent
            and p.ant_but_first() == c.ant_but_first()
            and _generalizes(main, p.ant_first(), p.succedent + p.ant_but_first()))


@_rule(Cut)
def _cut(node) -> bool:
    l, r = (n.conclusion for n in node.premises)
    c = node.conclusion
    return (l.suc_last() == r.ant_first()
            and c.antecedent == l.antecedent + r.ant_but_first()
            and c.succedent == l.suc_but_last() + r.succedent)


def is_valid_step(node: LK) -> bool:
    """Is the inference at the root of ``node`` a correct rule application?"""
    try:
        check = _CHECKS[type(node)]
    except KeyError:
        raise TypeError(f"not an LK rule: {type(node).__name__}")
    ok = check(node)
    if not ok:
        log.debug("rejected %s step concluding %s", node.rule, node.conclusion)
    return ok
