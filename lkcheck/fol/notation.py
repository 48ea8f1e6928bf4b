from __future__ import annotations
from typing import Sequence
from .ast import *
from .algebra import _guard

_BINARY_SYMBOL = {And: "∧", Or: "∨", Implies: "→"}
_QUANTIFIER_SYMBOL = {Forall: "∀", Exists: "∃"}
_PREFIX_BINARY = {And: "^", Or: "v", Implies: ">"}
_PREFIX_QUANTIFIER = {Forall: "V", Exists: "E"}


def format_term(t: Term, _depth: int = 0) -> str:
    _guard(_depth)
    if isinstance(t, Variable): return t.name
    if isinstance(t, Function):
        return f"{t.name}({', '.join(format_term(a, _depth + 1) for a in t.args)})" if t.args else t.name
    raise TypeError(type(t))


def format_formula(phi: Formula, _depth: int = 0) -> str:
    _guard(_depth)
    d = _depth + 1
    if isinstance(phi, Predicate):
        return f"{phi.name}({', '.join(format_term(a, d) for a in phi.args)})" if phi.args else phi.name
    if isinstance(phi, Equal): return f"{format_term(phi.left, d)} = {format_term(phi.right, d)}"
    if isinstance(phi, Not): return f"¬{format_formula(phi.phi, d)}"
    if isinstance(phi, BINARY):
        return f"({format_formula(phi.left, d)} {_BINARY_SYMBOL[type(phi)]} {format_formula(phi.right, d)})"
    if isinstance(phi, QUANTIFIERS):
        return f"{_QUANTIFIER_SYMBOL[type(phi)]}{phi.var.name}.{format_formula(phi.body, d)}"
    raise TypeError(type(phi))


def format_sequent(antecedent: Sequence[Formula], succedent: Sequence[Formula]) -> str:
    left = ", ".join(format_formula(f) for f in antecedent)
    right = ", ".join(format_formula(f) for f in succedent)
    return " ".join(part for part in (left, "⇒", right) if part)


def show(x) -> str:
    if isinstance(x, TERMS): return format_term(x)
    if isinstance(x, FORMULAS): return format_formula(x)
    raise TypeError(type(x))


def term_to_prefix(t: Term, _depth: int = 0) -> str:
    _guard(_depth)
    if isinstance(t, Variable): return t.name
    if isinstance(t, Function):
        return "(" + " ".join([t.name] + [term_to_prefix(a, _depth + 1) for a in t.args]) + ")"
    raise TypeError(type(t))


def to_prefix(phi: Formula, _depth: int = 0) -> str:
    """Canonical surface syntax, accepted back by `lkcheck.syntax.parse_formula`."""
    _guard(_depth)
    d = _depth + 1
    if isinstance(phi, Predicate):
        if not phi.args: return phi.name
        return "(" + " ".join([phi.name] + [term_to_prefix(a, d) for a in phi.args]) + ")"
    if isinstance(phi, Equal): return f"(= {term_to_prefix(phi.left, d)} {term_to_prefix(phi.right, d)})"
    if isinstance(phi, Not): return f"(~ {to_prefix(phi.phi, d)})"
    if isinstance(phi, BINARY):
        return f"({_PREFIX_BINARY[type(phi)]} {to_prefix(phi.left, d)} {to_prefix(phi.right, d)})"
    if isinstance(phi, QUANTIFIERS):
        return f"({_PREFIX_QUANTIFIER[type(phi)]} {phi.var.name} {to_prefix(phi.body, d)})"
    raise TypeError(type(phi))
