from .ast import (
    Variable, Function, Term, Predicate, Equal, Not, And, Or, Implies, Forall, Exists,
    Formula, NonLogicalSymbol,
)
from .algebra import (
    free_variables, bound_variables, subterms, subformulas, function_symbols,
    predicate_symbols, is_substitutible, substitute,
)
from .notation import format_formula, format_term, to_prefix
