"""Recursive-descent parser for the prefix formula syntax.

    Term    := Symbol | '(' Symbol Term* ')'
    Formula := '(' ('V'|'E') Symbol Formula ')'
             | '(' '=' Term Term ')'
             | '(' '~' Formula ')'
             | '(' ('^'|'v'|'>') Formula Formula ')'
             | '(' Symbol Term* ')'
             | Symbol                      -- zero-arity predicate
    Top     := Formula | Symbol Term*      -- unparenthesized application
"""
from __future__ import annotations
from typing import List, Sequence
from .. import config
from ..errors import ParseError
from ..fol.ast import Variable, Function, Term, Predicate, Equal, Not, And, Or, Implies, Forall, Exists, Formula
from .tokenizer import Token, tokenize, LPAREN, RPAREN

_CONNECTIVES = {"And": And, "Or": Or, "Implies": Implies}
_QUANTIFIERS = {"Forall": Forall, "Exists": Exists}


class _Parser:
    def __init__(self, tokens: Sequence[Token]):
        self.tokens = list(tokens)
        self.pos = 0
        self.depth = 0

    def peek(self) -> Token | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def next(self, what: str) -> Token:
        tok = self.peek()
        if tok is None:
            raise ParseError(f"Unexpected end of input, expected {what}", self.pos)
        self.pos += 1
        return tok

    def expect(self, token: Token) -> None:
        tok = self.next(token.kind)
        if tok != token:
            raise ParseError(f"Expected {token.kind}, got {tok!r}", self.pos - 1)

    def symbol(self, what: str) -> str:
        tok = self.next(what)
        if tok.kind != "Symbol":
            raise ParseError(f"Expected {what}, got {tok!r}", self.pos - 1)
        return tok.text

    def enter(self) -> None:
        self.depth += 1
        if self.depth > config.MAX_DEPTH:
            raise ParseError(f"Nesting deeper than {config.MAX_DEPTH}", self.pos)

    def term(self) -> Term:
        tok = self.next("term")
        if tok.kind == "Symbol":
            return Variable(tok.text)
        if tok != LPAREN:
            raise ParseError(f"Expected term, got {tok!r}", self.pos - 1)
        self.enter()
        name = self.symbol("function symbol")
        args = self.terms()
        self.expect(RPAREN)
        self.depth -= 1
        return Function(name, args)

    def terms(self) -> List[Term]:
        out: List[Term] = []
        while self.peek() is not None and self.peek() != RPAREN:
            out.append(self.term())
        return out

    def formula(self) -> Formula:
        tok = self.next("formula")
        if tok.kind == "Symbol":
            return Predicate(tok.text, ())
        if tok != LPAREN:
            raise ParseError(f"Expected formula, got {tok!r}", self.pos - 1)
        self.enter()
        head = self.next("connective, quantifier or predicate")
        if head.kind in _QUANTIFIERS:
            var = Variable(self.symbol("bound variable"))
            phi: Formula = _QUANTIFIERS[head.kind](var, self.formula())
        elif head.kind == "Equal":
            phi = Equal(self.term(), self.term())
        elif head.kind == "Not":
            phi = Not(self.formula())
        elif head.kind in _CONNECTIVES:
            phi = _CONNECTIVES[head.kind](self.formula(), self.formula())
        elif head.kind == "Symbol":
            phi = Predicate(head.text, self.terms())
        else:
            raise ParseError(f"Unexpected {head!r} after '('", self.pos - 1)
        self.expect(RPAREN)
        self.depth -= 1
        return phi

    def top(self) -> Formula:
        first = self.peek()
        if first is None:
            raise ParseError("Empty formula", 0)
        if first.kind == "Symbol":
            self.pos += 1
            phi: Formula = Predicate(first.text, self.terms())
        else:
            phi = self.formula()
        if self.peek() is not None:
            raise ParseError(f"Unexpected trailing {self.peek()!r}", self.pos)
        return phi


def parse(tokens: Sequence[Token]) -> Formula:
    return _Parser(tokens).top()


def parse_term_tokens(tokens: Sequence[Token]) -> Term:
    p = _Parser(tokens)
    t = p.term()
    if p.peek() is not None:
        raise ParseError(f"Unexpected trailing {p.peek()!r}", p.pos)
    return t


def parse_formula(text: str) -> Formula:
    return parse(tokenize(text))


def parse_term(text: str) -> Term:
    return parse_term_tokens(tokenize(text))
