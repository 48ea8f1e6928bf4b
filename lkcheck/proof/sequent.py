from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Set, Tuple
from ..errors import SequentError
from ..fol.ast import Formula
from ..fol.algebra import subformulas
from ..fol.notation import format_sequent


@dataclass(frozen=True)
class Sequent:
    """Ordered antecedent and succedent, read ``antecedent ⇒ succedent``.

    Introduced formulas sit at the front of the antecedent and at the back
    of the succedent; the accessors below address exactly those positions and
    raise `SequentError` when the side they read is empty.
    """
    antecedent: Tuple[Formula, ...] = ()
    succedent: Tuple[Formula, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "antecedent", tuple(self.antecedent))
        object.__setattr__(self, "succedent", tuple(self.succedent))

    def ant_first(self) -> Formula:
        if not self.antecedent:
            raise SequentError(f"empty antecedent in {self}")
        return self.antecedent[0]

    def ant_but_first(self) -> Tuple[Formula, ...]:
        if not self.antecedent:
            raise SequentError(f"empty antecedent in {self}")
        return self.antecedent[1:]

    def suc_last(self) -> Formula:
        if not self.succedent:
            raise SequentError(f"empty succedent in {self}")
        return self.succedent[-1]

    def suc_but_last(self) -> Tuple[Formula, ...]:
        if not self.succedent:
            raise SequentError(f"empty succedent in {self}")
        return self.succedent[:-1]

    def subformulas(self) -> Set[Formula]:
        out: Set[Formula] = set()
        for phi in self.antecedent + self.succedent:
            out |= subformulas(phi)
        return out

    def __str__(self) -> str:
        return format_sequent(self.antecedent, self.succedent)


def sequent(antecedent: Iterable[Formula] = (), succedent: Iterable[Formula] = ()) -> Sequent:
    return Sequent(tuple(antecedent), tuple(succedent))
