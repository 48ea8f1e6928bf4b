from .sequent import Sequent, sequent
from .lk import (
    LK, RULES, make_node, Axiom, WeakeningLeft, WeakeningRight, ContractionLeft, ContractionRight,
    ExchangeLeft, ExchangeRight, AndLeft1, AndLeft2, AndRight, OrLeft, OrRight1, OrRight2,
    ImpliesLeft, ImpliesRight, NotLeft, NotRight, ForallLeft, ForallRight, ExistsLeft,
    ExistsRight, Cut,
)
from .rules import is_valid_step
from .check import StepFailure, iter_nodes, find_invalid_steps, is_valid_proof
from .render import render
