from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union


class _Shown:
    """Values print in the unicode notation of `lkcheck.fol.notation`."""
    def __str__(self) -> str:
        from .notation import show
        return show(self)


@dataclass(frozen=True)
class Variable(_Shown):
    name: str


@dataclass(frozen=True)
class Function(_Shown):
    name: str
    args: Tuple["Term", ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "args", tuple(self.args))

    @property
    def arity(self) -> int:
        return len(self.args)


Term = Union[Variable, Function]


@dataclass(frozen=True)
class NonLogicalSymbol:
    name: str
    arity: int

    def __str__(self) -> str:
        return f"{self.name}/{self.arity}"


@dataclass(frozen=True)
class Predicate(_Shown):
    name: str
    args: Tuple[Term, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "args", tuple(self.args))

    @property
    def arity(self) -> int:
        return len(self.args)


@dataclass(frozen=True)
class Equal(_Shown):
    left: Term
    right: Term


@dataclass(frozen=True)
class Not(_Shown):
    phi: "Formula"


@dataclass(frozen=True)
class And(_Shown):
    left: "Formula"
    right: "Formula"


@dataclass(frozen=True)
class Or(_Shown):
    left: "Formula"
    right: "Formula"


@dataclass(frozen=True)
class Implies(_Shown):
    left: "Formula"
    right: "Formula"


@dataclass(frozen=True)
class Forall(_Shown):
    var: Variable
    body: "Formula"


@dataclass(frozen=True)
class Exists(_Shown):
    var: Variable
    body: "Formula"


Formula = Union[Predicate, Equal, Not, And, Or, Implies, Forall, Exists]

ATOMIC = (Predicate, Equal)
BINARY = (And, Or, Implies)
QUANTIFIERS = (Forall, Exists)
TERMS = (Variable, Function)
FORMULAS = ATOMIC + (Not,) + BINARY + QUANTIFIERS
