"""Structural operations on terms and formulas.

All functions are pure. Recursion is bounded by ``config.MAX_DEPTH``; deeper
input raises ``DepthLimitError`` instead of exhausting the interpreter stack.
"""
from __future__ import annotations
from typing import Iterable, Iterator, Set, Union
from .. import config
from ..errors import DepthLimitError
from .ast import (
    Variable, Function, Term, Predicate, Equal, Not,
    Formula, NonLogicalSymbol, BINARY, QUANTIFIERS,
)


def _guard(depth: int) -> None:
    if depth > config.MAX_DEPTH:
        raise DepthLimitError(f"nesting deeper than {config.MAX_DEPTH} (set LKCHECK_MAX_DEPTH to raise the limit)")


def _children(phi: Formula) -> tuple:
    if isinstance(phi, Not): return (phi.phi,)
    if isinstance(phi, BINARY): return (phi.left, phi.right)
    if isinstance(phi, QUANTIFIERS): return (phi.body,)
    return ()


def _atom_terms(phi: Formula) -> tuple:
    if isinstance(phi, Predicate): return phi.args
    if isinstance(phi, Equal): return (phi.left, phi.right)
    return ()


def _walk(root, children) -> Iterator:
    # Pre-order, explicit stack; yields each node once per occurrence.
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        _guard(depth)
        yield node
        for child in reversed(children(node)):
            stack.append((child, depth + 1))


def iter_subformulas(phi: Formula) -> Iterator[Formula]:
    return _walk(phi, _children)


def iter_subterms(x: Union[Term, Formula]) -> Iterator[Term]:
    if isinstance(x, (Variable, Function)):
        yield from _walk(x, lambda t: t.args if isinstance(t, Function) else ())
        return
    for sub in iter_subformulas(x):
        for t in _atom_terms(sub):
            yield from iter_subterms(t)


def term_variables(t: Term) -> Set[Variable]:
    return {s for s in iter_subterms(t) if isinstance(s, Variable)}


def free_variables(x: Union[Term, Formula], _depth: int = 0) -> Set[Variable]:
    """Variables with at least one occurrence outside a binder naming them."""
    _guard(_depth)
    if isinstance(x, (Variable, Function)):
        return term_variables(x)
    if isinstance(x, QUANTIFIERS):
        return free_variables(x.body, _depth + 1) - {x.var}
    terms = _atom_terms(x)
    if terms:
        return set().union(*(term_variables(t) for t in terms))
    out: Set[Variable] = set()
    for child in _children(x):
        out |= free_variables(child, _depth + 1)
    return out


def free_variables_of(formulas: Iterable[Formula]) -> Set[Variable]:
    out: Set[Variable] = set()
    for phi in formulas:
        out |= free_variables(phi)
    return out


def bound_variables(phi: Formula) -> Set[Variable]:
    """Every variable named by some binder inside ``phi``."""
    return {sub.var for sub in iter_subformulas(phi) if isinstance(sub, QUANTIFIERS)}


def subterms(x: Union[Term, Formula]) -> Set[Term]:
    return set(iter_subterms(x))


def subformulas(phi: Formula) -> Set[Formula]:
    return set(iter_subformulas(phi))


def function_symbols(x: Union[Term, Formula]) -> Set[NonLogicalSymbol]:
    return {NonLogicalSymbol(t.name, t.arity) for t in iter_subterms(x) if isinstance(t, Function)}


def predicate_symbols(phi: Formula) -> Set[NonLogicalSymbol]:
    return {NonLogicalSymbol(p.name, p.arity) for p in iter_subformulas(phi) if isinstance(p, Predicate)}


def is_substitutible(phi: Formula, v: Variable, t: Term, _depth: int = 0) -> bool:
    """True iff replacing the free occurrences of ``v`` by ``t`` captures nothing.

    A binder ``Qw.psi`` blocks the substitution when ``v`` is free in ``psi``
    and ``w`` occurs in ``t``. Binders of ``v`` itself are never entered by
    `substitute`, so they cannot capture.
    """
    _guard(_depth)
    if isinstance(phi, QUANTIFIERS):
        if phi.var == v:
            return True
        if v in free_variables(phi.body) and phi.var in term_variables(t):
            return False
        return is_substitutible(phi.body, v, t, _depth + 1)
    return all(is_substitutible(c, v, t, _depth + 1) for c in _children(phi))


def substitute_term(s: Term, v: Variable, t: Term, _depth: int = 0) -> Term:
    _guard(_depth)
    if isinstance(s, Variable):
        return t if s == v else s
    return Function(s.name, tuple(substitute_term(a, v, t, _depth + 1) for a in s.args))


def substitute(phi: Formula, v: Variable, t: Term, _depth: int = 0) -> Formula:
    """Replace free occurrences of ``v`` in ``phi`` by ``t``.

    Capture is not checked here; callers test `is_substitutible` first.
    """
    _guard(_depth)
    d = _depth + 1
    if isinstance(phi, Predicate):
        return Predicate(phi.name, tuple(substitute_term(a, v, t, d) for a in phi.args))
    if isinstance(phi, Equal):
        return Equal(substitute_term(phi.left, v, t, d), substitute_term(phi.right, v, t, d))
    if isinstance(phi, Not):
        return Not(substitute(phi.phi, v, t, d))
    if isinstance(phi, BINARY):
        return type(phi)(substitute(phi.left, v, t, d), substitute(phi.right, v, t, d))
    if isinstance(phi, QUANTIFIERS):
        if phi.var == v:
            return phi
        return type(phi)(phi.var, substitute(phi.body, v, t, d))
    raise TypeError(type(phi))
