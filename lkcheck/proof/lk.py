"""LK derivation trees.

Each inference rule is one node class. A node stores its own conclusion and
its premise subtree(s); an `Axiom` stores no premise. Nodes are immutable and
compared by value, so an equal subtree may appear in both branches of a binary
rule.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Dict, Tuple, Type
from .sequent import Sequent


@dataclass(frozen=True)
class LK:
    label: ClassVar[str] = ""
    arity: ClassVar[int] = 0

    @property
    def rule(self) -> str:
        return type(self).__name__

    @property
    def premise_nodes(self) -> Tuple["LK", ...]:
        return ()

    def __str__(self) -> str:
        from .render import render
        return render(self)


@dataclass(frozen=True)
class Axiom(LK):
    conclusion: Sequent
    label: ClassVar[str] = "(ax)"


@dataclass(frozen=True)
class _Unary(LK):
    premise: LK
    conclusion: Sequent
    arity: ClassVar[int] = 1

    @property
    def premise_nodes(self) -> Tuple[LK, ...]:
        return (self.premise,)


@dataclass(frozen=True)
class _Binary(LK):
    premises: Tuple[LK, LK]
    conclusion: Sequent
    arity: ClassVar[int] = 2

    def __post_init__(self):
        premises = tuple(self.premises)
        if len(premises) != 2:
            raise TypeError(f"{type(self).__name__} takes exactly two premises, got {len(premises)}")
        object.__setattr__(self, "premises", premises)

    @property
    def premise_nodes(self) -> Tuple[LK, ...]:
        return self.premises


class WeakeningLeft(_Unary): label = "(wL)"
class WeakeningRight(_Unary): label = "(wR)"
class ContractionLeft(_Unary): label = "(cL)"
class ContractionRight(_Unary): label = "(cR)"
class ExchangeLeft(_Unary): label = "(xL)"
class ExchangeRight(_Unary): label = "(xR)"
class AndLeft1(_Unary): label = "(∧L1)"
class AndLeft2(_Unary): label = "(∧L2)"
class AndRight(_Binary): label = "(∧R)"
class OrLeft(_Binary): label = "(∨L)"
class OrRight1(_Unary): label = "(∨R1)"
class OrRight2(_Unary): label = "(∨R2)"
class ImpliesLeft(_Binary): label = "(→L)"
class ImpliesRight(_Unary): label = "(→R)"
class NotLeft(_Unary): label = "(¬L)"
class NotRight(_Unary): label = "(¬R)"
class ForallLeft(_Unary): label = "(∀L)"
class ForallRight(_Unary): label = "(∀R)"
class ExistsLeft(_Unary): label = "(∃L)"
class ExistsRight(_Unary): label = "(∃R)"
class Cut(_Binary): label = "(Cut)"


RULES: Dict[str, Type[LK]] = {cls.__name__: cls for cls in (
    Axiom, WeakeningLeft, WeakeningRight, ContractionLeft, ContractionRight,
    ExchangeLeft, ExchangeRight, AndLeft1, AndLeft2, AndRight, OrLeft,
    OrRight1, OrRight2, ImpliesLeft, ImpliesRight, NotLeft, NotRight,
    ForallLeft, ForallRight, ExistsLeft, ExistsRight, Cut,
)}


def make_node(rule: str, premises: Tuple[LK, ...], conclusion: Sequent) -> LK:
    """Build a node by rule name; premise count must match the rule."""
    cls = RULES[rule]
    if len(premises) != cls.arity:
        raise TypeError(f"{rule} takes {cls.arity} premise(s), got {len(premises)}")
    if cls.arity == 0: return cls(conclusion)
    if cls.arity == 1: return cls(premises[0], conclusion)
    return cls(tuple(premises), conclusion)
