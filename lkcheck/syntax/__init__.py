from .tokenizer import Token, Symbol, tokenize, LPAREN, RPAREN, NOT, AND, OR, IMPLIES, EQUAL, FORALL, EXISTS
from .parser import parse, parse_formula, parse_term, parse_term_tokens
