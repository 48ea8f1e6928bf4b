"""Checker and renderer for derivations in Gentzen's sequent calculus LK."""
__version__ = "0.1.0"

from .errors import LKError, ParseError, SequentError, DepthLimitError, ProofDocumentError
from .fol import (
    Variable, Function, Term, Predicate, Equal, Not, And, Or, Implies, Forall, Exists,
    Formula, NonLogicalSymbol, free_variables, bound_variables, subterms, subformulas,
    function_symbols, predicate_symbols, is_substitutible, substitute, to_prefix,
)
from .syntax import tokenize, parse, parse_formula, parse_term
from .proof import Sequent, sequent, LK, RULES, is_valid_step, find_invalid_steps, is_valid_proof, render
