from __future__ import annotations
import re
from typing import Sequence
from .ast import *
from .algebra import _guard, free_variables_of
def _san(s: str) -> str:
    s = re.sub(r'[^A-Za-z0-9_]', '_', s.strip()); return s or "x"
def _var(name: str) -> str:
    n=_san(name); return n if n[0].isupper() else ("V" + n if not n[0].isalpha() else n[0].upper()+n[1:])
def _functor(name: str) -> str:
    n=_san(name); return n if n[0].islower() else ("f" + n if not n[0].isalpha() else n[0].lower()+n[1:])
def term(t: Term, _depth: int = 0) -> str:
    _guard(_depth)
    if isinstance(t, Variable): return _var(t.name)
    args=",".join(term(a, _depth + 1) for a in t.args); n=_functor(t.name)
    return f"{n}({args})" if args else n
def formula(phi: Formula, _depth: int = 0) -> str:
    _guard(_depth); d = _depth + 1
    if isinstance(phi, Predicate):
        args=",".join(term(a, d) for a in phi.args); n=_functor(phi.name)
        return f"{n}({args})" if args else n
    if isinstance(phi, Equal): return f"({term(phi.left, d)} = {term(phi.right, d)})"
    if isinstance(phi, Not): return f"~({formula(phi.phi, d)})"
    if isinstance(phi, And): return f"({formula(phi.left, d)} & {formula(phi.right, d)})"
    if isinstance(phi, Or): return f"({formula(phi.left, d)} | {formula(phi.right, d)})"
    if isinstance(phi, Implies): return f"({formula(phi.left, d)} => {formula(phi.right, d)})"
    if isinstance(phi, Forall): return f"! [{_var(phi.var.name)}] : ({formula(phi.body, d)})"
    if isinstance(phi, Exists): return f"? [{_var(phi.var.name)}] : ({formula(phi.body, d)})"
    raise TypeError(type(phi))
def _join(formulas: Sequence[Formula], op: str, empty: str) -> str:
    if not formulas: return empty
    if len(formulas) == 1: return formula(formulas[0])
    return "(" + f" {op} ".join(formula(f) for f in formulas) + ")"
def sequent_conjecture(name: str, antecedent: Sequence[Formula], succedent: Sequence[Formula]) -> str:
    """Universal closure of (/\\ antecedent) => (\\/ succedent) as one FOF conjecture."""
    body = f"{_join(antecedent, '&', '$true')} => {_join(succedent, '|', '$false')}"
    free = sorted({_var(v.name) for v in free_variables_of(list(antecedent) + list(succedent))})
    if free: body = f"! [{','.join(free)}] : ({body})"
    return f"fof({_san(name)}, conjecture, {body})."
